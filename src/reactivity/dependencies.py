"""Dependency lists — the fixed set of cells an effect listens to.

Dependencies are declared, never discovered: an effect runs when one of the
listed cells is set, regardless of what the effect body reads.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from reactivity.context import get_context
from reactivity.errors import DependencyTypeError
from reactivity.stateful import Subscribable


class DependencyList:
    """Ordered, immutable collection of cells.

    Members are checked against Subscribable at construction. Whether the
    check runs is decided by ``validate``, or when that is None by the config
    of the context active at construction time (not the context the cells
    belong to, since members are not yet known to be cells). Validation is
    on by default outside ``python -O``; with it off, callers must pass
    cells themselves.
    """

    __slots__ = ("_dependencies",)

    def __init__(self, statefuls: Iterable[Subscribable], *, validate: bool | None = None) -> None:
        dependencies = tuple(statefuls)
        if validate is None:
            validate = get_context().config.validate_dependencies
        if validate:
            for idx, dep in enumerate(dependencies):
                # A cell class also passes the protocol check; only instances subscribe.
                if isinstance(dep, type) or not isinstance(dep, Subscribable):
                    raise DependencyTypeError(idx, type(dep))
        self._dependencies = dependencies

    @classmethod
    def of(cls, *statefuls: Subscribable) -> DependencyList:
        return cls(statefuls)

    @property
    def dependencies(self) -> tuple[Subscribable, ...]:
        return self._dependencies

    @property
    def length(self) -> int:
        return len(self._dependencies)

    def __len__(self) -> int:
        return len(self._dependencies)

    def __iter__(self) -> Iterator[Subscribable]:
        return iter(self._dependencies)

    def __getitem__(self, index: int) -> Subscribable:
        return self._dependencies[index]

    def __repr__(self) -> str:
        return f"DependencyList({list(self._dependencies)!r})"
