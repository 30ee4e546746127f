"""Registry of alternation policies, by name."""
from typing import Dict, Callable, Iterable, Any, List

from alternating.base import AlternatorAdapter
from alternating.alternator import (
    Alternating,
    AlternatingAll,
    AlternatingNoRemainder,
)


AlternatorFactory = Callable[[Iterable[Any], Iterable[Any]], AlternatorAdapter]
create_funcs: Dict[str, AlternatorFactory] = {}


def register(name: str, creation_func: AlternatorFactory) -> None:
    """Register a new alternation policy, replacing any existing policy
    of the same name.
    """
    create_funcs[name] = creation_func


def unregister(name: str) -> None:
    """Unregister an alternation policy."""
    create_funcs.pop(name, None)


def names() -> List[str]:
    return sorted(create_funcs)


def create(
    name: str, side_a: Iterable[Any], side_b: Iterable[Any]
) -> AlternatorAdapter:
    """Create an alternator of the policy registered as ``name``, over
    the given sides.
    """
    try:
        creation_func = create_funcs[name]
    except KeyError:
        raise ValueError(
            f"Unknown alternation policy {name!r}. "
            f"Choose from {', '.join(names())}."
        ) from None
    return creation_func(side_a, side_b)


for _cls in (Alternating, AlternatingAll, AlternatingNoRemainder):
    register(_cls.policy, _cls)
