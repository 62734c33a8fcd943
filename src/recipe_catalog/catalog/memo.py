"""Identity-keyed memoization for recomputations driven by snapshot pushes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar


if TYPE_CHECKING:
    from collections.abc import Callable


FirstT = TypeVar("FirstT")
SecondT = TypeVar("SecondT")
ResultT = TypeVar("ResultT")

_UNSET = object()


class LastResultMemo(Generic[FirstT, SecondT, ResultT]):
    """Remember the result for the most recent pair of inputs.

    A cached result is returned only when both arguments are the very same
    objects as on the previous call. Equal but distinct objects recompute.
    The computed function itself stays pure; this wrapper is owned by the
    caller (e.g. a recipe detail view) and holds one entry at most.

    Example:
        memo = LastResultMemo(calculate_recipe_nutrition)
        summary = memo(recipe, snapshot.ingredients_by_key)
    """

    def __init__(self, compute: Callable[[FirstT, SecondT], ResultT]) -> None:
        self._compute = compute
        self._first: object = _UNSET
        self._second: object = _UNSET
        self._result: object = _UNSET

    def __call__(self, first: FirstT, second: SecondT) -> ResultT:
        if (
            self._result is not _UNSET
            and first is self._first
            and second is self._second
        ):
            return self._result  # type: ignore[return-value]

        result = self._compute(first, second)
        self._first, self._second, self._result = first, second, result
        return result

    def clear(self) -> None:
        """Forget the remembered inputs and result."""
        self._first = self._second = self._result = _UNSET
