"""Reactivity: declared-dependency reactive state for synchronous Python."""

from importlib.metadata import version as _version

__version__ = _version("reactivity")

from reactivity.config import ReactiveConfig
from reactivity.context import ReactiveContext, get_context, use_context
from reactivity.dependencies import DependencyList
from reactivity.effect import RemoveEffect, use_effect
from reactivity.errors import (
    DependencyTypeError,
    ReactivityError,
    ReentrantMutationError,
    TriggerAlreadyBoundError,
)
from reactivity.hooks import (
    enable_verbose_debug_output,
    global_hooks,
    has_global_hook,
    install_global_hook,
    remove_global_hook,
)
from reactivity.ids import IdOptions, use_id
from reactivity.property import Property, ReadonlyProperty
from reactivity.ref import Ref, use_ref
from reactivity.stateful import Stateful, Subscribable, use_state, value
from reactivity.trigger import WhenState, it, watch, when
# textual NOT auto-imported — opt-in only

__all__ = [
    "Stateful",
    "Subscribable",
    "use_state",
    "value",
    "DependencyList",
    "use_effect",
    "RemoveEffect",
    "WhenState",
    "it",
    "watch",
    "when",
    "Ref",
    "use_ref",
    "IdOptions",
    "use_id",
    "Property",
    "ReadonlyProperty",
    "install_global_hook",
    "remove_global_hook",
    "has_global_hook",
    "global_hooks",
    "enable_verbose_debug_output",
    "ReactiveContext",
    "ReactiveConfig",
    "get_context",
    "use_context",
    "ReactivityError",
    "DependencyTypeError",
    "TriggerAlreadyBoundError",
    "ReentrantMutationError",
]
