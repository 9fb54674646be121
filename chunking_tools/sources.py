from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional, Protocol, Union, runtime_checkable

from loguru import logger

ForwardSource = Iterable


@runtime_checkable
class IndexableSource(Protocol):
    """
    A finite container whose elements are addressed by positions in `[start_index, end_index)`.

    Random-access sources can measure distances cheaply; others (`random_access == False`)
    only promise that the operations are available, so callers must not rely on them for
    capacity estimates.
    """
    random_access: bool

    @property
    def start_index(self) -> int:
        ...

    @property
    def end_index(self) -> int:
        ...

    def index(self, i: int, offset_by: int, limited_by: Optional[int] = None) -> Optional[int]:
        ...

    def distance(self, start: int, end: int) -> int:
        ...

    def __getitem__(self, bounds: slice) -> 'SubRange':
        ...


@dataclass(frozen=True, eq=False)
class SubRange(Sequence):
    """A read-only window `[lower, upper)` onto `base`; positions are relative to `lower`."""
    base: Sequence
    lower: int
    upper: int

    def __post_init__(self):
        if not 0 <= self.lower <= self.upper <= len(self.base):
            raise ValueError(f"invalid window [{self.lower}, {self.upper}) on {len(self.base)} elements")

    def __len__(self) -> int:
        return self.upper - self.lower

    def __getitem__(self, item: Union[int, slice]):
        if isinstance(item, slice):
            start, stop, step = item.indices(len(self))
            if step != 1:
                return [self[i] for i in range(start, stop, step)]
            return SubRange(self.base, self.lower + start, self.lower + max(start, stop))
        if item < 0:
            item += len(self)
        if not 0 <= item < len(self):
            raise IndexError(f"SubRange index out of range: {item}")
        return self.base[self.lower + item]

    def __iter__(self) -> Iterator:
        for i in range(self.lower, self.upper):
            yield self.base[i]

    def __eq__(self, other):
        if isinstance(other, Sequence):
            return len(self) == len(other) and all(a == b for a, b in zip(self, other))
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"SubRange({list(self)!r})"


def _move(i: int, offset_by: int, limited_by: Optional[int], start: int, end: int) -> Optional[int]:
    result = i + offset_by
    if limited_by is not None:
        if offset_by >= 0 and i <= limited_by < result:
            return None
        if offset_by < 0 and result < limited_by <= i:
            return None
    if not start <= result <= end:
        raise IndexError(f"index {i} offset by {offset_by} leaves [{start}, {end}]")
    return result


@dataclass(frozen=True)
class SequenceSource:
    """Random-access source over any sequence: list, tuple, str, range or another SubRange."""
    elements: Sequence
    random_access: bool = field(default=True, init=False)

    @property
    def start_index(self) -> int:
        return 0

    @property
    def end_index(self) -> int:
        return len(self.elements)

    def index(self, i: int, offset_by: int, limited_by: Optional[int] = None) -> Optional[int]:
        return _move(i, offset_by, limited_by, self.start_index, self.end_index)

    def distance(self, start: int, end: int) -> int:
        return end - start

    def __getitem__(self, bounds: slice) -> SubRange:
        return SubRange(self.elements, bounds.start, bounds.stop)


@dataclass(frozen=True)
class MappingSource:
    """
    Source over the `(key, value)` items of a mapping, in iteration order.

    The items are captured when the source is created. Positions are not promised to be cheap
    to measure, so adapters treat this source as forward-only for their estimates.
    """
    items: tuple
    random_access: bool = field(default=False, init=False)

    @staticmethod
    def from_mapping(mapping: Mapping) -> 'MappingSource':
        return MappingSource(items=tuple(mapping.items()))

    @property
    def start_index(self) -> int:
        return 0

    @property
    def end_index(self) -> int:
        return len(self.items)

    def index(self, i: int, offset_by: int, limited_by: Optional[int] = None) -> Optional[int]:
        return _move(i, offset_by, limited_by, self.start_index, self.end_index)

    def distance(self, start: int, end: int) -> int:
        return end - start

    def __getitem__(self, bounds: slice) -> SubRange:
        return SubRange(self.items, bounds.start, bounds.stop)


def as_indexable(source: Any) -> IndexableSource:
    if isinstance(source, IndexableSource):
        return source
    if isinstance(source, Sequence):
        return SequenceSource(source)
    if isinstance(source, Mapping):
        return MappingSource.from_mapping(source)
    logger.error(f"not an indexable source: {type(source).__name__}")
    raise TypeError(f"expected a sequence, a mapping or an IndexableSource, not {type(source).__name__}")
