"""Reactivity configuration.

ReactiveConfig is frozen after creation and owned by a ReactiveContext.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ReactiveConfig:
    """Configuration for a ReactiveContext.

    Attributes:
        validate_dependencies: Check every DependencyList member for the
            subscribe/unsubscribe capability at construction. Follows
            ``__debug__``, so it is off under ``python -O``.
        max_propagation_depth: Maximum nesting of set() calls inside a
            propagation pass. None leaves re-entrant mutation unguarded.
        id_seed: Seed for the generator behind use_id(). None seeds from
            system entropy.

    """

    validate_dependencies: bool = __debug__
    max_propagation_depth: int | None = None
    id_seed: int | None = None

    def __post_init__(self) -> None:
        if self.max_propagation_depth is not None and self.max_propagation_depth < 1:
            raise ValueError(
                f"max_propagation_depth must be >= 1, got {self.max_propagation_depth}"
            )
