"""use_id() — random ids that stay fixed per declaration."""

from __future__ import annotations

from dataclasses import dataclass

from reactivity._callsite import caller_identity
from reactivity.context import ReactiveContext, resolve_context


@dataclass(frozen=True, slots=True)
class IdOptions:
    """Inclusive bounds for a generated id."""

    minimum: int = 0
    maximum: int = 2**31 - 1

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ValueError(f"minimum ({self.minimum}) is greater than maximum ({self.maximum})")


def use_id(
    options: IdOptions | None = None,
    *,
    key: str | None = None,
    context: ReactiveContext | None = None,
) -> int:
    """Random id for this declaration; the same id on every later call.

    Identified by key, or by the caller's file and line. Only the first
    call's options matter.
    """
    options = options if options is not None else IdOptions()
    identity = key if key is not None else caller_identity()
    return resolve_context(context).generate_id(identity, options.minimum, options.maximum)
