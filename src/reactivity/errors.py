"""Reactivity error hierarchy.

All reactivity-specific errors inherit from ReactivityError for easy catching.
Errors raised by user callbacks (effects, predicates, hooks) are never wrapped.
"""

from __future__ import annotations


class ReactivityError(Exception):
    """Base error for all reactivity operations."""


class DependencyTypeError(ReactivityError, TypeError):
    """A DependencyList was built from something that is not a stateful cell."""

    def __init__(self, index: int, observed_type: type) -> None:
        self.index = index
        self.observed_type = observed_type
        super().__init__(
            f"dependency #{index + 1} is not the correct type. "
            f"(expected Stateful, got {observed_type.__name__})"
        )


class TriggerAlreadyBoundError(ReactivityError):
    """A WhenState was passed to when() a second time."""


class ReentrantMutationError(ReactivityError, RecursionError):
    """Nested set() calls went deeper than the configured propagation depth."""

    def __init__(self, depth: int) -> None:
        self.depth = depth
        super().__init__(f"reentrant mutation exceeded propagation depth {depth}")
