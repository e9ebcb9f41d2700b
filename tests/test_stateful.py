"""Tests for Stateful, use_state and value."""

import pytest

from reactivity import Stateful, Subscribable, install_global_hook, use_state, value


class TestStateful:
    def test_get_set(self):
        s = Stateful(42)
        assert s.get() == 42
        s.set(100)
        assert s.get() == 100
        assert s.value == 100

    def test_watchers_run_in_subscription_order(self):
        s = Stateful(0)
        log = []
        s.subscribe(lambda: log.append("a"))
        s.subscribe(lambda: log.append("b"))
        s.set(1)
        assert log == ["a", "b"]

    def test_watchers_run_before_set_returns(self):
        s = Stateful(0)
        seen = []
        s.subscribe(lambda: seen.append(s.get()))
        s.set(7)
        assert seen == [7]

    def test_same_value_still_notifies(self):
        """No equality short-circuit: every set() propagates."""
        s = Stateful(5)
        log = []
        s.subscribe(lambda: log.append(s.get()))
        s.set(5)
        s.set(5)
        assert log == [5, 5]

    def test_double_subscribe_runs_twice(self):
        s = Stateful(0)
        log = []

        def watcher():
            log.append(s.get())

        s.subscribe(watcher)
        s.subscribe(watcher)
        s.set(1)
        assert log == [1, 1]

        s.unsubscribe(watcher)
        s.set(2)
        assert log == [1, 1, 2]

    def test_unsubscribe(self):
        s = Stateful(0)
        log = []

        def watcher():
            log.append(s.get())

        s.subscribe(watcher)
        s.unsubscribe(watcher)
        s.set(1)
        assert log == []
        assert s.watcher_count == 0

    def test_unsubscribe_missing_is_noop(self):
        s = Stateful(0)
        s.unsubscribe(lambda: None)  # no error

    def test_watcher_error_aborts_fan_out(self):
        s = Stateful(0)
        log = []

        def boom():
            raise RuntimeError("boom")

        s.subscribe(boom)
        s.subscribe(lambda: log.append("after"))
        with pytest.raises(RuntimeError, match="boom"):
            s.set(1)
        assert log == []
        assert s.get() == 1  # value was already replaced

    def test_watcher_error_skips_global_hooks(self):
        s = Stateful(0)
        hooked = []
        install_global_hook(hooked.append)

        def boom():
            raise ValueError("nope")

        s.subscribe(boom)
        with pytest.raises(ValueError):
            s.set(1)
        assert hooked == []

    def test_reentrant_set_recurses(self):
        a = Stateful(0)
        b = Stateful(0)
        log = []
        a.subscribe(lambda: b.set(a.get() * 10))
        b.subscribe(lambda: log.append(("b", b.get())))
        a.subscribe(lambda: log.append(("a", a.get())))
        a.set(3)
        # b's watchers finish inside a's first watcher, before a's second one
        assert log == [("b", 30), ("a", 3)]

    def test_watcher_added_during_pass_waits_for_next_set(self):
        s = Stateful(0)
        log = []

        def late():
            log.append("late")

        def adder():
            s.subscribe(late)

        s.subscribe(adder)
        s.set(1)
        assert log == []
        s.unsubscribe(adder)
        s.set(2)
        assert log == ["late"]

    def test_is_subscribable(self):
        assert isinstance(Stateful(1), Subscribable)
        assert Stateful("x").current_value() == "x"

    def test_str_and_repr(self):
        s = Stateful(5)
        assert str(s) == "5"
        assert repr(s) == "Stateful(5)"
        assert str(Stateful(None)) == "None"

    def test_binds_active_context(self, ctx):
        assert Stateful(0).context is ctx


class TestUseState:
    def test_returns_cell_and_setter(self):
        count, set_count = use_state(40)
        assert isinstance(count, Stateful)
        assert value(count) == 40
        set_count(41)
        assert value(count) == 41

    def test_setter_notifies(self):
        count, set_count = use_state(0)
        log = []
        count.subscribe(lambda: log.append(value(count)))
        set_count(1)
        assert log == [1]
