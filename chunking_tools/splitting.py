# splitting.py

from typing import Any, Iterable, Optional

from loguru import logger
from more_itertools import batched

from chunking_tools.chunked_view import ChunkedView
from chunking_tools.clustering import ClusteringSequence
from chunking_tools.disjoint import DisjointPartition
from chunking_tools.sources import SubRange, as_indexable

__all__ = ['batched', 'clustered', 'lazy_clustered', 'disjoint', 'lazy_disjoint', 'chunked']


def lazy_clustered(iterable: Iterable, span: int) -> ClusteringSequence:
    return ClusteringSequence(iterable, span)


def clustered(iterable: Iterable, span: int) -> list[list]:
    """
    Split a finite iterable into lists of `span` elements, in order.
    The last list is shorter when the element count isn't a multiple of `span`.
    """
    groups = list(lazy_clustered(iterable, span))
    logger.debug(f"clustered into {len(groups)} groups of (at most) {span}")
    return groups


def lazy_disjoint(container: Any, span: int) -> DisjointPartition:
    return DisjointPartition(container, span)


def disjoint(container: Any, span: int) -> list[SubRange]:
    """
    Split an indexable container (sequence, mapping or IndexableSource) into consecutive views
    of `span` elements; the views share the container's elements.
    """
    groups = list(lazy_disjoint(container, span))
    logger.debug(f"partitioned into {len(groups)} views of (at most) {span}")
    return groups


def chunked(container: Any, span: int, start: Optional[int] = None, end: Optional[int] = None) -> ChunkedView:
    base = as_indexable(container)
    if start is None and end is None:
        return ChunkedView(base, span)
    start = base.start_index if start is None else start
    end = base.end_index if end is None else end
    return ChunkedView(base, span, range(start, end))
