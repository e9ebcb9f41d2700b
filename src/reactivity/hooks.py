"""Global hooks — callbacks that see every change in a context.

A global hook is called with the new value after the changed cell's own
watchers have run, for every cell bound to the context. It is meant for
cross-cutting observation such as debug output, not for business logic.
"""

from __future__ import annotations

import sys
from typing import TextIO

from reactivity.context import GlobalHook, ReactiveContext, resolve_context


def install_global_hook(hook: GlobalHook, *, context: ReactiveContext | None = None) -> None:
    resolve_context(context).install_global_hook(hook)


def remove_global_hook(hook: GlobalHook, *, context: ReactiveContext | None = None) -> None:
    """Remove hook; a no-op if it was never installed."""
    resolve_context(context).remove_global_hook(hook)


def has_global_hook(*, context: ReactiveContext | None = None) -> bool:
    return resolve_context(context).has_global_hook()


def global_hooks(*, context: ReactiveContext | None = None) -> tuple[GlobalHook, ...]:
    return resolve_context(context).global_hooks()


def enable_verbose_debug_output(
    enabled: bool,
    *,
    context: ReactiveContext | None = None,
    stream: TextIO | None = None,
) -> None:
    """Print a line for every change in the context, or stop doing so.

    Output goes to stream, or to whatever sys.stdout is at the time of the
    change. Enabling twice installs a single hook.
    """
    ctx = resolve_context(context)

    if not enabled:
        if ctx.verbose_hook is not None:
            ctx.remove_global_hook(ctx.verbose_hook)
            ctx.verbose_hook = None
        return

    if ctx.verbose_hook is not None:
        return

    def _debug_hook(value: object) -> None:
        kind = type(value)
        print(
            f"[debug] change  :  {value}  :  {kind.__module__}  :  type({kind.__name__})",
            file=stream if stream is not None else sys.stdout,
        )

    print(" \\- Verbose Debug Output - Enabled /-", file=stream if stream is not None else sys.stdout)
    ctx.verbose_hook = _debug_hook
    ctx.install_global_hook(_debug_hook)
