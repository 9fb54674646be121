from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional, Union

from loguru import logger

from chunking_tools.model import ChunkLayout
from chunking_tools.sources import IndexableSource, SubRange, as_indexable
from chunking_tools.span import validate_span, group_count, outer_distance, offset_inner_index


@dataclass(frozen=True, eq=True, unsafe_hash=False)
class ChunkedView:
    """
    Indexable view of the targeted elements of `base`, grouped `span` elements at a time.

    Positions in the view are positions in `base` (inner indices): the first group starts at
    `target.start`, each following one `span` positions further, and the last group ends at
    `target.stop`, being shorter than `span` when the targeted length is not a multiple of it.
    Distances and offsets are counted in groups.
    """
    base: IndexableSource
    span: int
    target: Optional[range] = None

    __hash__ = None

    def __post_init__(self):
        object.__setattr__(self, 'base', as_indexable(self.base))
        validate_span(self.span)
        start, end = self.base.start_index, self.base.end_index
        if self.target is None:
            object.__setattr__(self, 'target', range(start, end))
        elif not isinstance(self.target, range):
            logger.error(f"target must be a range, got {type(self.target).__name__}")
            raise TypeError(f"target must be a range, not {type(self.target).__name__}")
        elif self.target.step != 1 or not start <= self.target.start <= self.target.stop <= end:
            logger.error(f"target {self.target} does not fit within [{start}, {end}]")
            raise ValueError(f"invalid target {self.target} for source bounds [{start}, {end}]")

    @property
    def start_index(self) -> int:
        return self.target.start

    @property
    def end_index(self) -> int:
        return self.target.stop

    @property
    def wrapped_elements(self) -> SubRange:
        return self.base[self.start_index:self.end_index]

    @property
    def underestimated_count(self) -> int:
        if self.base.random_access:
            return group_count(self.base.distance(self.start_index, self.end_index), self.span)
        return 0 if self.start_index == self.end_index else 1

    def index_after(self, i: int) -> int:
        return self.index(i, +1)

    def index_before(self, i: int) -> int:
        return self.index(i, -1)

    def index(self, i: int, offset_by: int) -> int:
        """The inner index `offset_by` groups away from `i`, clamped to the target bounds."""
        self._check_index(i)
        return offset_inner_index(i, offset_by, self.span, self.start_index, self.end_index,
                                  self.base.index, self.base.distance)

    def distance(self, start: int, end: int) -> int:
        self._check_index(start)
        self._check_index(end)
        return outer_distance(self.base.distance(start, end), self.span)

    def indices(self) -> Iterator[int]:
        i = self.start_index
        while i != self.end_index:
            yield i
            i = self.index_after(i)

    def subview(self, start: int, end: int) -> 'ChunkedView':
        if not self.start_index <= start <= end <= self.end_index:
            raise IndexError(f"sub-range [{start}, {end}) outside of [{self.start_index}, {self.end_index}]")
        return ChunkedView(self.base, self.span, range(start, end))

    def layout(self) -> ChunkLayout:
        return ChunkLayout(span=self.span,
                           element_count=self.base.distance(self.start_index, self.end_index),
                           group_lengths=[len(group) for group in self])

    def __getitem__(self, position: Union[int, slice]) -> Union[SubRange, 'ChunkedView']:
        if isinstance(position, slice):
            if position.step not in (None, 1):
                raise ValueError(f"a chunked view cannot be sliced with step {position.step}")
            start = self.start_index if position.start is None else position.start
            end = self.end_index if position.stop is None else position.stop
            return self.subview(start, end)
        if not self.start_index <= position < self.end_index:
            raise IndexError(f"position {position} outside of [{self.start_index}, {self.end_index})")
        return self.base[position:self.index_after(position)]

    def __len__(self) -> int:
        return self.distance(self.start_index, self.end_index)

    def __iter__(self) -> 'ChunkedViewIterator':
        return ChunkedViewIterator(self.base, self.span, self.target)

    def __reversed__(self) -> Iterator[SubRange]:
        i = self.end_index
        while i != self.start_index:
            i = self.index_before(i)
            yield self[i]

    def _check_index(self, i: int):
        if not self.start_index <= i <= self.end_index:
            raise IndexError(f"index {i} outside of [{self.start_index}, {self.end_index}]")


class ChunkedViewIterator(Iterator):
    """Consumes a target range one group at a time, moving its own lower bound forward."""

    def __init__(self, base: IndexableSource, span: int, target: range):
        self.base = base
        self.span = span
        self.target = target

    @property
    def wrapped_elements(self) -> SubRange:
        return self.base[self.target.start:self.target.stop]

    def __next__(self) -> SubRange:
        if not self.target:
            raise StopIteration
        lower, upper = self.target.start, self.target.stop
        next_index = offset_inner_index(lower, 1, self.span, lower, upper, self.base.index, self.base.distance)
        self.target = range(next_index, upper)
        return self.base[lower:next_index]
