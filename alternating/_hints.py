from typing import Tuple

from alternating.base import SideHint, unbounded


def min_and_one(len_a: int, len_b: int, next_is_a: bool) -> Tuple[int, bool]:
    """Shorter side length, and whether the longer side gets one more
    turn before strict alternation breaks.
    """
    if len_a < len_b:
        return len_a, not next_is_a
    if len_a > len_b:
        return len_b, next_is_a
    return len_a, False


def strict_hint(len_a: SideHint, len_b: SideHint, next_is_a: bool):
    """Number of turns before the first absent turn, when the sides
    are strictly alternated.

    Returns ``NotImplemented`` if a side's length is unknown, and
    raises ``TypeError`` if both sides are unbounded, as
    ``itertools.repeat()`` does.
    """
    if len_a is None and len_b is None:
        raise unbounded()
    if (len_a is not None and len_a < 0) or (len_b is not None and len_b < 0):
        return NotImplemented
    if len_a is None:
        shorter, extra = len_b, next_is_a
    elif len_b is None:
        shorter, extra = len_a, not next_is_a
    else:
        shorter, extra = min_and_one(len_a, len_b, next_is_a)
    return 2 * shorter + int(extra)


def sum_hint(*lens: SideHint):
    if any(length is None for length in lens):
        raise unbounded()
    if any(length < 0 for length in lens):  # type: ignore
        return NotImplemented
    return sum(lens)  # type: ignore
