import operator
from collections.abc import Iterable, Iterator, Sized

from more_itertools import take

from chunking_tools.span import validate_span, group_count


class GroupingIterator(Iterator):
    """
    Pulls the elements of another iterator `span` at a time.

    The last group is shorter when the wrapped iterator runs dry part way through a pull.
    Once a pull comes back empty the iterator stays exhausted, without touching `elements` again.
    """

    def __init__(self, elements: Iterator, span: int):
        self.span = validate_span(span)
        self.elements = elements
        self._exhausted = False

    def __next__(self) -> list:
        if self._exhausted:
            raise StopIteration
        group = take(self.span, self.elements)
        if not group:
            self._exhausted = True
            raise StopIteration
        return group


class ClusteringSequence(Iterable):
    """Lazy sequence of `span`-sized lists taken from `base`; every traversal starts over."""

    def __init__(self, base: Iterable, span: int):
        self.span = validate_span(span)
        self.base = base

    def __iter__(self) -> GroupingIterator:
        return GroupingIterator(iter(self.base), self.span)

    @property
    def underestimated_count(self) -> int:
        if isinstance(self.base, Sized):
            return group_count(len(self.base), self.span)
        return group_count(operator.length_hint(self.base), self.span)

    def __length_hint__(self) -> int:
        return self.underestimated_count

    def __repr__(self):
        return f"ClusteringSequence(base={self.base!r}, span={self.span})"
