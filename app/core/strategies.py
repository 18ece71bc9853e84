from typing import Callable, Iterable, Optional, TypeVar

T = TypeVar("T")


def first_match(strategies: Iterable[Callable[..., Optional[T]]], *args, **kwargs) -> Optional[T]:
    """
    Run strategies in order and return the first result that is not None.

    Each strategy is an independent heuristic taking the same arguments, so it
    can be unit-tested on its own.
    """
    for strategy in strategies:
        result = strategy(*args, **kwargs)
        if result is not None:
            return result
    return None
