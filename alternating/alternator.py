"""
``alternating.alternator``
==========================

Iterators alternating between the items of two other iterators, one
item at a time. The three alternators share the same turn taking, and
only differ in what they do once one of the sides runs out:

- ``alternate_with()`` keeps taking turns, so exhausted sides show up
  as gaps in the output;
- ``alternate_with_all()`` drains the remainder of the longer side;
- ``alternate_with_no_remainder()`` stops as soon as strict alternation
  can not be kept up.
"""
import enum
import typing as ty

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from alternating import base
from alternating._hints import strict_hint, sum_hint

__all__ = [
    "Alternating",
    "AlternatingAll",
    "AlternatingNoRemainder",
    "Phase",
    "alternate_with",
    "alternate_with_all",
    "alternate_with_no_remainder",
    "turns",
]


T = ty.TypeVar("T")
F = ty.TypeVar("F")


class _RichMixin:
    def __rich__(self) -> Tree:
        tree = Tree(f"[blue]{self}")
        tree.add(f"[red]policy [default]= [green]{self.policy}")  # type: ignore
        for name in ("side_a", "side_b"):
            side = escape(repr(getattr(self, name)))
            tree.add(f"[red]{name} [default]= [green]{side}")
        return tree

    def __repr__(self) -> str:
        console = Console(color_system=None)
        with console.capture() as capture:
            console.print(self)
        return capture.get()


class Alternating(_RichMixin, base.AlternatorAdapter[T]):
    """Alternates between two iterators, regardless of whether they
    have run out.

    :group: Alternators

    Each call to ``next()`` hands the turn to the other side, and
    returns the next item of the side whose turn it was. If that side
    is exhausted, the turn is absent, and ``StopIteration`` is raised
    for that call only. The following call is the other side's turn, so
    items may be produced again.

    Parameters
    ----------
    side_a : iterable
        The side taking the first turn.
    side_b : iterable
        The side taking the second turn.

    Notes
    -----
    This iterator is not fused. A ``for`` loop over it stops at the
    first absent turn, while ``next(alt, default)`` or ``turns()``
    expose every turn. Once both sides are exhausted every turn is
    absent, provided the sides themselves are fused (see ``fuse()``).

    Exhausted sides keep being asked for items on their turn, rather
    than being skipped, so the gaps appear at the same positions
    regardless of how the sides are implemented.

    Examples
    --------
    >>> alt = alternate_with([1, 2], [3, 4, 5])
    >>> [next(alt, None) for _ in range(7)]
    [1, 3, 2, 4, None, 5, None]
    """

    policy = "blind"

    def __next__(self) -> T:
        side = self._preferred()
        self.next_is_a = not self.next_is_a
        return next(side)

    def __length_hint__(self) -> int:
        """Number of items until the next absent turn."""
        return strict_hint(
            base.side_hint(self.side_a),
            base.side_hint(self.side_b),
            self.next_is_a,
        )


class Phase(enum.Enum):
    """Stages of ``AlternatingAll``, entered in this order."""

    ALTERNATING = enum.auto()
    DRAINING_A = enum.auto()
    DRAINING_B = enum.auto()
    FINISHED = enum.auto()


class AlternatingAll(_RichMixin, base.AlternatorAdapter[T]):
    """Alternates between two iterators, and once one runs out,
    continues with the remaining items of the other.

    :group: Alternators

    Parameters
    ----------
    side_a : iterable
        The side taking the first turn.
    side_b : iterable
        The side taking the second turn.

    Attributes
    ----------
    phase : Phase
        Whether both sides are alternated, one of them is drained, or
        the iterator is finished.

    Notes
    -----
    Every item of both sides is produced exactly once, keeping the
    order within each side. Once finished, the sides are no longer
    queried, so this iterator is fused.

    Examples
    --------
    >>> list(alternate_with_all([1, 2], [3, 4, 5]))
    [1, 3, 2, 4, 5]
    """

    policy = "all"

    def __init__(self, side_a: ty.Iterable[T], side_b: ty.Iterable[T]) -> None:
        super().__init__(side_a, side_b)
        self.phase = Phase.ALTERNATING

    def _drain(self, side: ty.Iterator[T]) -> T:
        try:
            return next(side)
        except StopIteration:
            self.phase = Phase.FINISHED
            raise

    def __next__(self) -> T:
        if self.phase is Phase.FINISHED:
            raise StopIteration
        if self.phase is Phase.DRAINING_A:
            return self._drain(self.side_a)
        if self.phase is Phase.DRAINING_B:
            return self._drain(self.side_b)
        try:
            item = next(self._preferred())
        except StopIteration:
            if self.next_is_a:
                self.phase = Phase.DRAINING_B
            else:
                self.phase = Phase.DRAINING_A
            return self._drain(self._other())
        self.next_is_a = not self.next_is_a
        return item

    def __length_hint__(self) -> int:
        if self.phase is Phase.FINISHED:
            return 0
        if self.phase is Phase.DRAINING_A:
            return sum_hint(base.side_hint(self.side_a))
        if self.phase is Phase.DRAINING_B:
            return sum_hint(base.side_hint(self.side_b))
        return sum_hint(
            base.side_hint(self.side_a), base.side_hint(self.side_b)
        )

    def _state(self) -> str:
        return f"{super()._state()}, phase={self.phase.name.lower()}"


class AlternatingNoRemainder(_RichMixin, base.AlternatorAdapter[T]):
    """Alternates between two iterators until strict alternation is no
    longer possible.

    :group: Alternators

    As soon as the side whose turn it is has run out, this iterator is
    done, and the remaining items of the other side are never read.

    Parameters
    ----------
    side_a : iterable
        The side taking the first turn.
    side_b : iterable
        The side taking the second turn.

    Attributes
    ----------
    done : bool
        Set once a side has failed to produce on its turn. It is never
        unset.

    Notes
    -----
    The order of the sides matters. With a shorter ``side_a``, the
    output has twice as many items as ``side_a``; with a longer
    ``side_a`` it has one more than that.

    Examples
    --------
    >>> list(alternate_with_no_remainder([1, 2], [3, 4, 5]))
    [1, 3, 2, 4]
    >>> list(alternate_with_no_remainder([3, 4, 5], [1, 2]))
    [3, 1, 4, 2, 5]
    """

    policy = "no-remainder"

    def __init__(self, side_a: ty.Iterable[T], side_b: ty.Iterable[T]) -> None:
        super().__init__(side_a, side_b)
        self.done = False

    def __next__(self) -> T:
        if self.done:
            raise StopIteration
        try:
            item = next(self._preferred())
        except StopIteration:
            self.done = True
            raise
        self.next_is_a = not self.next_is_a
        return item

    def __length_hint__(self) -> int:
        if self.done:
            return 0
        return strict_hint(
            base.side_hint(self.side_a),
            base.side_hint(self.side_b),
            self.next_is_a,
        )

    def _state(self) -> str:
        return f"{super()._state()}, done={self.done}"


def alternate_with(
    side_a: ty.Iterable[T], side_b: ty.Iterable[T]
) -> Alternating[T]:
    """Creates an iterator taking turns between ``side_a`` and
    ``side_b``, leaving gaps on the turns of exhausted sides.

    :group: Alternators

    Parameters
    ----------
    side_a : iterable
        Items for the first, third, fifth, ... turns.
    side_b : iterable
        Items for the second, fourth, sixth, ... turns.

    Returns
    -------
    alternating : Alternating
        Iterator which raises ``StopIteration`` on absent turns, but
        continues producing on later turns.
    """
    return Alternating(side_a, side_b)


def alternate_with_all(
    side_a: ty.Iterable[T], side_b: ty.Iterable[T]
) -> AlternatingAll[T]:
    """Creates an iterator taking turns between ``side_a`` and
    ``side_b``, followed by whatever remains of the longer one.

    :group: Alternators
    """
    return AlternatingAll(side_a, side_b)


def alternate_with_no_remainder(
    side_a: ty.Iterable[T], side_b: ty.Iterable[T]
) -> AlternatingNoRemainder[T]:
    """Creates an iterator taking turns between ``side_a`` and
    ``side_b``, ending as soon as a side misses its turn.

    :group: Alternators
    """
    return AlternatingNoRemainder(side_a, side_b)


def turns(
    producer: ty.Iterator[T], fillvalue: F = None
) -> ty.Generator[ty.Union[T, F], None, None]:
    """Renders every turn of ``producer``, including absent ones.

    :group: Alternators

    Parameters
    ----------
    producer : iterator
        Typically an ``Alternating`` instance, whose output has gaps.
    fillvalue : any
        Yielded in place of absent turns. Default is ``None``.

    Yields
    ------
    item
        The item produced on each turn, or ``fillvalue``.

    Notes
    -----
    Stops after two absent turns in a row, which for alternators over
    fused sides means every later turn is absent too. The two trailing
    absent turns are not yielded.
    """
    absent = object()
    pending_gap = False
    while True:
        item = next(producer, absent)
        if item is absent:
            if pending_gap:
                return
            pending_gap = True
            continue
        if pending_gap:
            yield fillvalue
            pending_gap = False
        yield item
