"""Textual integration for reactivity. Opt-in — requires textual.

Effects and triggers that touch widgets need two guards the core does not
have: they must not run while the widget tree is being rebuilt (or before
the app is running), and a query for a widget that is not mounted must not
break the set() that triggered them.
"""

import logging
from contextlib import contextmanager

from textual.css.query import NoMatches

from reactivity.effect import use_effect as _use_effect
from reactivity.trigger import when as _when

logger = logging.getLogger("reactivity.textual")

# Keyed by id(app) so multiple apps work in tests. Present only inside pause().
_paused_apps: set[int] = set()


@contextmanager
def pause(app):
    """Suspend guarded effects and triggers during widget replacement."""
    key = id(app)
    _paused_apps.add(key)
    try:
        yield
    finally:
        _paused_apps.discard(key)


def is_safe(app) -> bool:
    """Is the widget tree in a queryable state?"""
    return app.is_running and id(app) not in _paused_apps


def use_effect(app, effect, dependencies):
    """use_effect() whose body only runs while app is safe.

    NoMatches from widget queries is dropped; anything else propagates to
    the caller of set() as usual. Returns the remover.
    """

    def _guarded():
        if not is_safe(app):
            return
        try:
            effect()
        except NoMatches:
            logger.debug("Effect %r skipped a missing widget", effect)

    return _use_effect(_guarded, dependencies)


def when(app, state, action):
    """when() whose action only runs while app is safe. Predicates still run."""

    def _guarded(value):
        if not is_safe(app):
            return
        try:
            action(value)
        except NoMatches:
            logger.debug("Trigger action %r skipped a missing widget", action)

    _when(state, _guarded)
