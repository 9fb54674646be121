from typing import Callable, Optional

from loguru import logger


def validate_span(span: int) -> int:
    if isinstance(span, bool) or not isinstance(span, int):
        logger.error(f"span must be an int, got {type(span).__name__}: {span!r}")
        raise TypeError(f"span must be an int, not {type(span).__name__}")
    if span <= 0:
        logger.error(f"span must be positive, got {span}")
        raise ValueError(f"span must be positive: {span}")
    return span


def group_count(length: int, span: int) -> int:
    """Number of groups `length` elements fall into: full blocks plus one for any stragglers."""
    block_count, straggler_count = divmod(length, span)
    return block_count + (1 if straggler_count else 0)


def straggler_length(length: int, span: int) -> int:
    return length % span


def outer_distance(inner_distance: int, span: int) -> int:
    """
    Convert a distance between element positions into a distance in chunks.

    Partial chunks count as a whole one, rounding away from zero,
    and the sign of `inner_distance` is kept.
    """
    count = group_count(abs(inner_distance), span)
    return count if inner_distance >= 0 else -count


def offset_inner_index(i: int, n: int, span: int, lower: int, upper: int,
                       move: Callable[[int, int, Optional[int]], Optional[int]],
                       measure: Callable[[int, int], int]) -> int:
    """
    Move inner index `i` by `n` chunks within the target range `[lower, upper]`.

    `move(i, offset, limit)` shifts an inner index by an element offset and returns None
    when `limit` lies strictly between the start and the result; `measure(a, b)` is the element
    distance between two inner indices.

    Moving backwards from `upper` first steps over the short final group (when there is one),
    so that jumping forward and back by the same amount returns to the starting index.
    """
    if i == upper and n < 0:
        stragglers = straggler_length(measure(lower, upper), span)
        if stragglers:
            p = move(i, -stragglers, None)
            return offset_inner_index(p, n + 1, span, lower, upper, move, measure)
    limit = upper if n >= 0 else lower
    result = move(i, n * span, limit)
    return limit if result is None else result
