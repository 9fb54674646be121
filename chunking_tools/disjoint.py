from collections.abc import Iterable, Iterator
from typing import Any

from chunking_tools.sources import IndexableSource, SubRange, as_indexable
from chunking_tools.span import validate_span, group_count


class DisjointPartitionIterator(Iterator):

    def __init__(self, base: IndexableSource, span: int):
        self.base = base
        self.span = validate_span(span)
        self.start = base.start_index

    def __next__(self) -> SubRange:
        end = self.base.end_index
        if self.start >= end:
            raise StopIteration
        next_index = self.base.index(self.start, self.span, end)
        if next_index is None:
            next_index = end
        group = self.base[self.start:next_index]
        self.start = next_index
        return group


class DisjointPartition(Iterable):
    """
    Lazy sequence of consecutive `span`-sized windows onto an indexable container.

    The windows are views, so no elements are copied; only the final window may be shorter.
    """

    def __init__(self, base: Any, span: int):
        self.base = as_indexable(base)
        self.span = validate_span(span)

    def __iter__(self) -> DisjointPartitionIterator:
        return DisjointPartitionIterator(self.base, self.span)

    @property
    def underestimated_count(self) -> int:
        start, end = self.base.start_index, self.base.end_index
        if self.base.random_access:
            return group_count(self.base.distance(start, end), self.span)
        return 0 if start == end else 1

    def __length_hint__(self) -> int:
        return self.underestimated_count

    def __repr__(self):
        return f"DisjointPartition(base={self.base!r}, span={self.span})"
