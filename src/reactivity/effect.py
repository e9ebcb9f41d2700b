"""Effects — callbacks that re-run when any declared dependency is set.

use_effect() subscribes the callback to every cell in the dependency list and
returns a function that undoes exactly that. The effect does not run at
registration, and nothing is batched: an effect listening to three cells
that are each set once runs three times.
"""

from __future__ import annotations

from typing import Callable, Iterable

from reactivity.dependencies import DependencyList
from reactivity.stateful import OnStateChange, Subscribable

RemoveEffect = Callable[[], None]


def use_effect(
    effect: OnStateChange,
    dependencies: DependencyList | Iterable[Subscribable],
) -> RemoveEffect:
    """Run effect whenever any of dependencies is set.

    Returns a function that removes effect from all of the dependencies.
    Calling it more than once is harmless.

    Usage:
        count, set_count = use_state(0)
        log = []

        remove = use_effect(lambda: log.append(value(count)), DependencyList([count]))
        # log == [] — effects don't run at registration

        set_count(1)
        # log == [1]

        remove()
        set_count(2)
        # log == [1] — removed
    """
    if not isinstance(dependencies, DependencyList):
        dependencies = DependencyList(dependencies)

    removed = False

    def _run() -> None:
        # set() walks a snapshot of its watchers, so a remover called earlier
        # in the same pass has to stop this run too.
        if removed:
            return
        effect()

    for dep in dependencies:
        dep.subscribe(_run)

    def _remove() -> None:
        nonlocal removed
        removed = True
        for dep in dependencies:
            dep.unsubscribe(_run)

    return _remove
