"""Stateful cells — values that notify their watchers when set.

A cell holds one value and an ordered list of zero-argument watchers.
set() replaces the value, runs every watcher in subscription order, then
hands the new value to each global hook of the cell's context. Nothing is
deferred or coalesced: the whole fan-out finishes before set() returns, and
an exception from any watcher or hook aborts the rest of it.
"""

from __future__ import annotations

from typing import Callable, Generic, Protocol, TypeVar, runtime_checkable

from reactivity.context import ReactiveContext, resolve_context

T = TypeVar("T")

OnStateChange = Callable[[], None]


@runtime_checkable
class Subscribable(Protocol):
    """Capabilities a dependency must have, whatever its value type."""

    def subscribe(self, watcher: OnStateChange) -> None: ...

    def unsubscribe(self, watcher: OnStateChange) -> None: ...

    def current_value(self) -> object: ...


class Stateful(Generic[T]):
    """A single mutable value with change watchers."""

    __slots__ = ("_value", "_watchers", "_context")

    def __init__(self, value: T, *, context: ReactiveContext | None = None) -> None:
        self._value = value
        self._watchers: list[OnStateChange] = []
        self._context = resolve_context(context)

    @property
    def context(self) -> ReactiveContext:
        return self._context

    @property
    def value(self) -> T:
        return self._value

    @property
    def watcher_count(self) -> int:
        return len(self._watchers)

    def get(self) -> T:
        return self._value

    def current_value(self) -> object:
        return self._value

    def set(self, value: T) -> None:
        """Replace the value, then notify watchers and global hooks.

        There is no equality check: setting the current value again still
        notifies. Watchers subscribed or removed with unsubscribe() during
        the pass take effect from the next set(); effects removed through
        their remover are skipped at once. If the context's depth guard
        rejects the call, the value is left unchanged.
        """
        context = self._context
        with context.propagation():
            self._value = value
            for watcher in list(self._watchers):
                watcher()
            if context.has_global_hook():
                for hook in context.global_hooks():
                    hook(value)

    def subscribe(self, watcher: OnStateChange) -> None:
        """Add a watcher. Subscribing the same callable twice runs it twice."""
        self._watchers.append(watcher)

    def unsubscribe(self, watcher: OnStateChange) -> None:
        try:
            self._watchers.remove(watcher)
        except ValueError:
            pass  # not subscribed

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Stateful({self._value!r})"


def use_state(
    initial: T, *, context: ReactiveContext | None = None
) -> tuple[Stateful[T], Callable[[T], None]]:
    """Create a cell holding initial. Returns the cell and its setter.

    Usage:
        count, set_count = use_state(40)
        set_count(41)
        value(count)  # 41
    """
    state = Stateful(initial, context=context)
    return state, state.set


def value(stateful: Stateful[T]) -> T:
    """Unwrap the current value of a cell."""
    return stateful.get()
