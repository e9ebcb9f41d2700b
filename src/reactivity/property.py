"""Property — a reactive attribute for plain classes.

Reading .value reads the underlying cell; assigning .value sets it, so any
effect declared over .state() runs.

Usage:
    class Config:
        def __init__(self):
            self.title_enabled = Property(False)
            use_effect(self._on_title, [self.title_enabled.state()])

        def _on_title(self):
            print("Title enabled" if self.title_enabled.value else "Title disabled")

    Config().title_enabled.value = True  # prints "Title enabled"
"""

from __future__ import annotations

from typing import Generic, Protocol, TypeVar

from reactivity.context import ReactiveContext
from reactivity.stateful import Stateful, use_state

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class ReadonlyProperty(Protocol[T_co]):
    """Read-only view of a Property."""

    @property
    def value(self) -> T_co: ...


class Property(Generic[T]):
    __slots__ = ("_stateful", "_set_stateful")

    def __init__(self, value: T, *, context: ReactiveContext | None = None) -> None:
        self._stateful, self._set_stateful = use_state(value, context=context)

    def state(self) -> Stateful[T]:
        """The backing cell, for use in dependency lists and triggers."""
        return self._stateful

    @property
    def value(self) -> T:
        return self._stateful.get()

    @value.setter
    def value(self, value: T) -> None:
        self._set_stateful(value)

    def __repr__(self) -> str:
        return f"Property({self._stateful.get()!r})"
