from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Iterable, Optional
from collections.abc import Sized, Iterator
import inspect
import operator as op
import os
import warnings


_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


__all__ = [
    "SideHint",
    "side_hint",
    "AlternatorAdapter",
    "Fused",
    "fuse",
]


T = TypeVar("T")
SideHint = Optional[int]  # None when the side is unbounded


def side_hint(side: Iterator) -> SideHint:
    """Remaining length of a side, ``-1`` if unknown, ``None`` if the
    side reports itself as unbounded.

    Notes
    -----
    ``operator.length_hint()`` swallows the ``TypeError`` raised by
    unbounded iterators such as ``itertools.repeat(x)``, so the hook is
    called directly here.
    """
    if isinstance(side, Sized):
        return len(side)
    method = getattr(type(side), "__length_hint__", None)
    if method is None:
        return -1
    try:
        hint = method(side)
    except TypeError:
        return None
    if hint is NotImplemented:
        return -1
    return op.index(hint)


def external_stacklevel() -> int:
    """Stack level of the first caller outside this package, for use
    with ``warnings.warn()``.
    """
    frame = inspect.currentframe()
    level = 0
    try:
        while frame is not None:
            filename = os.path.abspath(frame.f_code.co_filename)
            if not filename.startswith(_PACKAGE_DIR + os.sep):
                break
            frame = frame.f_back
            level = level + 1
    finally:
        del frame
    return level


def unbounded() -> TypeError:
    return TypeError("len() of unsized object")


class AlternatorAdapter(ABC, Iterator[T], Generic[T]):
    """Adapter pattern interface for iterators alternating between two
    sides. Holds the two side cursors and the turn flag, leaving the
    exhaustion policy to subclasses.

    :group: Alternators
    """

    policy: str = ""

    def __init__(self, side_a: Iterable[T], side_b: Iterable[T]) -> None:
        self._side_a: Iterator[T] = iter(side_a)
        self._side_b: Iterator[T] = iter(side_b)
        if self._side_a is self._side_b:
            warnings.warn(
                "Both sides of the alternator are the same iterator, "
                "its items will be split between the two turns.",
                UserWarning,
                stacklevel=external_stacklevel(),
            )
        self.next_is_a = True

    @property
    def side_a(self) -> Iterator[T]:
        return self._side_a

    @property
    def side_b(self) -> Iterator[T]:
        return self._side_b

    def _preferred(self) -> Iterator[T]:
        return self._side_a if self.next_is_a else self._side_b

    def _other(self) -> Iterator[T]:
        return self._side_b if self.next_is_a else self._side_a

    def __iter__(self) -> "AlternatorAdapter[T]":
        return self

    @abstractmethod
    def __next__(self) -> T:
        """Produces the element for the current turn, raising
        ``StopIteration`` if the turn is absent.
        """

    @abstractmethod
    def __length_hint__(self) -> int:
        pass

    def _state(self) -> str:
        return f"next={'a' if self.next_is_a else 'b'}"

    def __str__(self) -> str:
        name = self.__class__.__name__
        return f"{name}({self._state()})"


class Fused(Iterator[T], Generic[T]):
    """Latching adapter, guaranteeing that once the wrapped iterator
    raises ``StopIteration`` every later call does the same, without
    the source being asked again.

    :group: Adapters

    Parameters
    ----------
    source : iterable
        The producer to latch.

    Attributes
    ----------
    exhausted : bool
        Whether the source has signalled its end.
    """

    def __init__(self, source: Iterable[T]) -> None:
        self._source: Iterator[T] = iter(source)
        self.exhausted = False

    def __iter__(self) -> "Fused[T]":
        return self

    def __next__(self) -> T:
        if self.exhausted:
            raise StopIteration
        try:
            return next(self._source)
        except StopIteration:
            self.exhausted = True
            raise

    def __length_hint__(self) -> int:
        if self.exhausted:
            return 0
        hint = side_hint(self._source)
        if hint is None:
            raise unbounded()
        if hint < 0:
            return NotImplemented
        return hint

    def __repr__(self) -> str:
        name = self.__class__.__name__
        return f"{name}(exhausted={self.exhausted})"


def fuse(iterable: Iterable[T]) -> Fused[T]:
    """Wraps ``iterable`` so that it stays exhausted once it has run
    out. Iterators which are already ``Fused`` are returned unchanged.

    :group: Adapters
    """
    if isinstance(iterable, Fused):
        return iterable
    return Fused(iterable)
