"""Tests for use_effect."""

import pytest

from reactivity import DependencyList, DependencyTypeError, use_effect, use_state, value


class TestUseEffect:
    def test_does_not_run_at_registration(self):
        count, _ = use_state(0)
        log = []
        use_effect(lambda: log.append(value(count)), DependencyList([count]))
        assert log == []

    def test_runs_once_per_set(self):
        count, set_count = use_state(0)
        log = []
        use_effect(lambda: log.append(value(count)), DependencyList([count]))
        set_count(1)
        assert log == [1]

    def test_ten_sets_ten_runs(self):
        count, set_count = use_state(0)
        log = []
        use_effect(lambda: log.append(value(count)), DependencyList([count]))
        for i in range(1, 11):
            set_count(i)
        assert log == list(range(1, 11))

    def test_no_coalescing_across_cells(self):
        """An effect on N cells runs once for each cell that is set."""
        a, set_a = use_state(0)
        b, set_b = use_state(0)
        c, set_c = use_state(0)
        log = []
        use_effect(lambda: log.append((value(a), value(b), value(c))), DependencyList([a, b, c]))
        set_a(1)
        set_b(2)
        set_c(3)
        assert log == [(1, 0, 0), (1, 2, 0), (1, 2, 3)]

    def test_remove_stops_all_dependencies(self):
        a, set_a = use_state(0)
        b, set_b = use_state(0)
        log = []
        remove = use_effect(lambda: log.append("ran"), DependencyList([a, b]))
        set_a(1)
        remove()
        set_a(2)
        set_b(2)
        assert log == ["ran"]
        assert a.watcher_count == 0
        assert b.watcher_count == 0

    def test_remove_twice_is_harmless(self):
        count, _ = use_state(0)
        remove = use_effect(lambda: None, [count])
        remove()
        remove()

    def test_remove_leaves_other_effects(self):
        count, set_count = use_state(0)
        log = []
        remove_first = use_effect(lambda: log.append("first"), [count])
        use_effect(lambda: log.append("second"), [count])
        remove_first()
        set_count(1)
        assert log == ["second"]

    def test_plain_list_is_wrapped(self):
        count, set_count = use_state(0)
        log = []
        use_effect(lambda: log.append(value(count)), [count])
        set_count(5)
        assert log == [5]

    def test_plain_list_is_validated(self):
        with pytest.raises(DependencyTypeError):
            use_effect(lambda: None, ["not a cell"])

    def test_effect_error_reaches_setter(self):
        count, set_count = use_state(0)

        def effect():
            raise KeyError("missing")

        use_effect(effect, [count])
        with pytest.raises(KeyError):
            set_count(1)

    def test_property_style_effect(self):
        """Effects over a boolean cell see the value that was just set."""
        enabled, set_enabled = use_state(False)
        log = []

        def on_toggle():
            log.append("Title has been enabled." if value(enabled) else "Title has been disabled.")

        use_effect(on_toggle, DependencyList([enabled]))
        set_enabled(False)
        set_enabled(True)
        assert log == ["Title has been disabled.", "Title has been enabled."]

    def test_removed_mid_pass_does_not_run(self):
        """An effect removed by an earlier effect in the same set() is skipped."""
        count, set_count = use_state(0)
        log = []
        removers = {}

        def first():
            log.append("first")
            removers["second"]()

        use_effect(first, [count])
        removers["second"] = use_effect(lambda: log.append("second"), [count])
        set_count(1)
        assert log == ["first"]
        set_count(2)
        assert log == ["first", "first"]

    def test_remove_unsubscribes_everything(self):
        count, _ = use_state(0)
        remove = use_effect(lambda: None, [count])
        assert count.watcher_count == 1
        remove()
        assert count.watcher_count == 0
