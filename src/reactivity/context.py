"""Reactive context — the registries that do not belong to any one cell.

A context owns the global hook list, the named-slot map, the id map and the
propagation depth counter. Cells bind to a context when constructed; the
active context is tracked with a ContextVar, so independent subsystems (and
individual tests) can each run against their own and throw it away after.
"""

from __future__ import annotations

import contextvars
import logging
import random
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Callable, Iterator, TypeVar

from reactivity.config import ReactiveConfig
from reactivity.errors import ReentrantMutationError

if TYPE_CHECKING:
    from reactivity.ref import Ref

logger = logging.getLogger("reactivity.context")

T = TypeVar("T")

# Called with the new value of whichever cell changed.
GlobalHook = Callable[[Any], None]


class ReactiveContext:
    """Hook list, slot map and id map shared by every cell bound to it."""

    def __init__(self, config: ReactiveConfig | None = None) -> None:
        self.config = config if config is not None else ReactiveConfig()
        self.verbose_hook: GlobalHook | None = None
        self._global_hooks: list[GlobalHook] = []
        self._slots: dict[str, Ref] = {}
        self._ids: dict[str, int] = {}
        self._random = random.Random(self.config.id_seed)
        self._depth = 0

    # --- Global hooks ---

    def install_global_hook(self, hook: GlobalHook) -> None:
        self._global_hooks.append(hook)
        logger.debug("Installed global hook %r (%d total)", hook, len(self._global_hooks))

    def remove_global_hook(self, hook: GlobalHook) -> None:
        try:
            self._global_hooks.remove(hook)
        except ValueError:
            return  # never installed
        logger.debug("Removed global hook %r (%d left)", hook, len(self._global_hooks))

    def has_global_hook(self) -> bool:
        return len(self._global_hooks) > 0

    def global_hooks(self) -> tuple[GlobalHook, ...]:
        """Snapshot of the installed hooks, in installation order."""
        return tuple(self._global_hooks)

    # --- Named slots ---

    def get_or_create_slot(self, identity: str, initial: T) -> Ref[T]:
        """Return the slot stored under identity, creating it on first use.

        The first caller's initial value wins; later initial values are ignored.
        """
        from reactivity.ref import Ref

        slot = self._slots.get(identity)
        if slot is None:
            slot = Ref(initial)
            self._slots[identity] = slot
            logger.debug("Created slot %s = %r", identity, initial)
        return slot

    # --- Ids ---

    def generate_id(self, identity: str, minimum: int, maximum: int) -> int:
        """Random id in [minimum, maximum], fixed per identity after the first call."""
        existing = self._ids.get(identity)
        if existing is not None:
            return existing
        new_id = self._random.randint(minimum, maximum)
        self._ids[identity] = new_id
        logger.debug("Generated id %d for %s", new_id, identity)
        return new_id

    # --- Propagation ---

    @property
    def depth(self) -> int:
        """Number of set() calls currently propagating."""
        return self._depth

    @contextmanager
    def propagation(self) -> Iterator[int]:
        """Track one set() fan-out. Nested set() calls nest this scope."""
        limit = self.config.max_propagation_depth
        if limit is not None and self._depth >= limit:
            logger.warning("Reentrant mutation at depth %d, aborting propagation", self._depth)
            raise ReentrantMutationError(limit)
        self._depth += 1
        try:
            yield self._depth
        finally:
            self._depth -= 1

    def clear(self) -> None:
        """Drop every hook, slot and id. Cells keep their own watchers."""
        self._global_hooks.clear()
        self._slots.clear()
        self._ids.clear()
        self.verbose_hook = None

    def __repr__(self) -> str:
        return (
            f"ReactiveContext(hooks={len(self._global_hooks)}, "
            f"slots={len(self._slots)}, ids={len(self._ids)})"
        )


_default_context = ReactiveContext()

# The context new cells, refs and hooks attach to when none is passed.
current_context: contextvars.ContextVar[ReactiveContext] = contextvars.ContextVar(
    "current_context", default=_default_context
)


def get_context() -> ReactiveContext:
    """The active context (the process-wide default unless use_context is in effect)."""
    return current_context.get()


def resolve_context(context: ReactiveContext | None) -> ReactiveContext:
    return context if context is not None else current_context.get()


@contextmanager
def use_context(context: ReactiveContext | None = None) -> Iterator[ReactiveContext]:
    """Activate a context for the enclosed block.

    Usage:
        with use_context() as ctx:
            count, set_count = use_state(0)   # bound to ctx
            install_global_hook(print)        # installed on ctx only
    """
    ctx = context if context is not None else ReactiveContext()
    token = current_context.set(ctx)
    logger.debug("Activated %r", ctx)
    try:
        yield ctx
    finally:
        current_context.reset(token)
