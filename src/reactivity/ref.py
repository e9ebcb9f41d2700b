"""Refs — mutable storage that sits outside the reactive system.

Writing a Ref never runs an effect, and a Ref cannot be a dependency.
use_ref() hands back the same Ref every time it is reached from the same
place, so an effect body can keep state between runs.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from reactivity._callsite import caller_identity
from reactivity.context import ReactiveContext, resolve_context

T = TypeVar("T")


class Ref(Generic[T]):
    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value = value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Ref({self.value!r})"


def use_ref(
    initial: T,
    *,
    key: str | None = None,
    context: ReactiveContext | None = None,
) -> Ref[T]:
    """Return the Ref for this declaration, creating it with initial on first use.

    The declaration is identified by key, or by the caller's file and line
    when no key is given. Two use_ref() calls on one line share a Ref.
    Later calls get the existing Ref; their initial value is ignored.

    Usage:
        count, set_count = use_state(0)

        def on_change():
            runs = use_ref(0)
            runs.value += 1

        use_effect(on_change, [count])
    """
    identity = key if key is not None else caller_identity()
    return resolve_context(context).get_or_create_slot(identity, initial)
