"""Conditional triggers — "when this cell meets a condition, run this".

A WhenState is a builder over one watched cell:

    when(it(count).equals(0).meets_condition(lambda n: n >= 50), on_edge)

Every time the cell is set, all registered predicates are evaluated in
order (no short-circuit) and their results OR-ed together. If any holds,
the action runs once with the cell's current value.
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

from reactivity.dependencies import DependencyList
from reactivity.effect import use_effect
from reactivity.errors import TriggerAlreadyBoundError
from reactivity.stateful import Stateful

T = TypeVar("T")


class WhenState(Generic[T]):
    """The watched cell plus its predicates, in registration order."""

    __slots__ = ("stateful", "_predicates", "_bound")

    def __init__(self, stateful: Stateful[T]) -> None:
        self.stateful = stateful
        self._predicates: list[Callable[[], bool]] = []
        self._bound = False

    @property
    def predicates(self) -> tuple[Callable[[], bool], ...]:
        return tuple(self._predicates)

    @property
    def bound(self) -> bool:
        return self._bound

    def equals(self, expected: T) -> WhenState[T]:
        """Match when the watched value == expected. Returns self for chaining."""
        stateful = self.stateful

        def _equals() -> bool:
            return stateful.get() == expected

        self._predicates.append(_equals)
        return self

    def meets_condition(self, condition: Callable[[T], bool]) -> WhenState[T]:
        """Match when condition(watched value) is true. Returns self for chaining."""
        stateful = self.stateful

        def _meets() -> bool:
            return condition(stateful.get())

        self._predicates.append(_meets)
        return self

    def evaluate(self) -> bool:
        """Evaluate every predicate and OR the results."""
        matched = False
        for predicate in self._predicates:
            matched |= bool(predicate())
        return matched

    def __repr__(self) -> str:
        state = "bound" if self._bound else "unbound"
        return f"WhenState({self.stateful!r}, {len(self._predicates)} predicates, {state})"


def it(stateful: Stateful[T]) -> WhenState[T]:
    """Start building a trigger over stateful."""
    return WhenState(stateful)


watch = it


def when(state: WhenState[T], action: Callable[[T], None]) -> None:
    """Call action(value) each time state's cell is set and any predicate holds.

    The trigger stays registered for as long as the cell lives. A WhenState
    can only be bound once.

    Usage:
        count, set_count = use_state(40)
        when(it(count).meets_condition(lambda n: n >= 50), lambda n: print("reached", n))
    """
    if state.bound:
        raise TriggerAlreadyBoundError(f"{state!r} is already bound to an action")

    def _check() -> None:
        if state.evaluate():
            action(state.stateful.get())

    use_effect(_check, DependencyList([state.stateful]))
    state._bound = True
