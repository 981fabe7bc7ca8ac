"""
Navigator tests for Logic Auditor.

Covers scenario loading, the timed audit reveal, wrap-around and the
discarding of reveals superseded by a newer load.
"""

import pytest

from logicaudit.classroom import AUDIT_DELAY_MS, Navigator
from logicaudit.errors import ScenarioIndexError
from logicaudit.schemas import AuditPhase

from conftest import RecordingPresenter


DELAY = AUDIT_DELAY_MS / 1000


class TestInitialState:
    """Test navigator construction and start."""

    def test_defaults_before_start(self, bundled_dataset, presenter, scheduler):
        nav = Navigator(bundled_dataset, presenter, scheduler)
        assert nav.state.cursor == 0
        assert nav.state.revealed is False
        assert nav.state.pending is False
        assert presenter.calls == []

    def test_start_shows_first_scenario(self, bundled_dataset, presenter, scheduler):
        nav = Navigator(bundled_dataset, presenter, scheduler)
        nav.start()
        assert presenter.calls == [("show_problem", bundled_dataset.get(0))]
        assert nav.phase == AuditPhase.IDLE

    def test_position_is_one_based(self, navigator):
        assert navigator.get_position() == (1, 20)
        navigator.advance()
        assert navigator.get_position() == (2, 20)


class TestLoadScenario:
    """Test load_scenario notifications and preconditions."""

    def test_every_index_shows_its_problem(self, navigator, presenter, bundled_dataset):
        for i in range(len(bundled_dataset)):
            navigator.load_scenario(i)
            assert presenter.calls[-1] == ("show_problem", bundled_dataset.get(i))
        assert presenter.count("show_result") == 0

    def test_load_resets_revealed(self, navigator, clock, scheduler):
        navigator.run_audit()
        clock.advance(DELAY)
        scheduler.run_pending()
        assert navigator.phase == AuditPhase.REVEALED

        navigator.load_scenario(5)
        assert navigator.state.cursor == 5
        assert navigator.state.revealed is False
        assert navigator.state.pending is False

    def test_out_of_range_fails_fast(self, navigator, presenter):
        with pytest.raises(ScenarioIndexError):
            navigator.load_scenario(20)
        with pytest.raises(ScenarioIndexError):
            navigator.load_scenario(-1)
        assert navigator.state.cursor == 0
        assert presenter.calls == []


class TestRunAudit:
    """Test the timed audit reveal."""

    def test_analyzing_is_immediate(self, navigator, presenter):
        assert navigator.run_audit() is True
        assert presenter.names() == ["show_analyzing"]
        assert navigator.phase == AuditPhase.ANALYZING

    def test_result_after_delay(self, navigator, presenter, clock, scheduler, bundled_dataset):
        navigator.run_audit()

        clock.advance(DELAY / 2)
        assert scheduler.run_pending() == 0
        assert presenter.count("show_result") == 0

        clock.advance(DELAY)
        scheduler.run_pending()
        assert presenter.calls[-1] == ("show_result", bundled_dataset.get(0))
        assert presenter.count("show_result") == 1
        assert navigator.phase == AuditPhase.REVEALED
        assert navigator.state.pending is False

    def test_reentrant_call_is_ignored(self, navigator, presenter, clock, scheduler):
        navigator.run_audit()
        assert navigator.run_audit() is False

        clock.advance(DELAY)
        scheduler.run_pending()
        clock.advance(DELAY)
        scheduler.run_pending()
        assert presenter.count("show_analyzing") == 1
        assert presenter.count("show_result") == 1

    def test_no_audit_after_reveal(self, navigator, presenter, clock, scheduler):
        navigator.run_audit()
        clock.advance(DELAY)
        scheduler.run_pending()
        assert navigator.run_audit() is False
        assert presenter.count("show_analyzing") == 1
        assert not scheduler.has_pending()

    def test_result_carries_record_fields(self, navigator, presenter, clock, scheduler):
        navigator.load_scenario(7)
        navigator.run_audit()
        clock.advance(DELAY)
        scheduler.run_pending()
        _, record = presenter.calls[-1]
        assert record.category == "Python Mutable Args"
        assert "class_list=None" in record.good_code
        assert "None" in record.reasoning


class TestStaleReveal:
    """Test that a newer load supersedes a pending reveal."""

    def test_load_during_audit_discards_result(self, navigator, presenter, clock, scheduler, bundled_dataset):
        navigator.run_audit()
        navigator.load_scenario(3)

        clock.advance(DELAY)
        scheduler.run_pending()
        assert presenter.calls[-1] == ("show_problem", bundled_dataset.get(3))
        assert presenter.count("show_result") == 0
        assert navigator.phase == AuditPhase.IDLE

    def test_reload_same_index_discards_result(self, navigator, presenter, clock, scheduler):
        navigator.run_audit()
        navigator.load_scenario(0)

        clock.advance(DELAY)
        scheduler.run_pending()
        assert presenter.count("show_result") == 0

    def test_new_audit_after_superseded_one(self, navigator, presenter, clock, scheduler, bundled_dataset):
        navigator.run_audit()
        clock.advance(DELAY / 2)
        navigator.advance()
        navigator.run_audit()

        # First audit's deadline passes: nothing shown
        clock.advance(DELAY / 2)
        scheduler.run_pending()
        assert presenter.count("show_result") == 0

        clock.advance(DELAY)
        scheduler.run_pending()
        assert presenter.calls[-1] == ("show_result", bundled_dataset.get(1))
        assert presenter.count("show_result") == 1

    def test_stale_callback_fired_directly_is_discarded(self, bundled_dataset, scheduler):
        presenter = RecordingPresenter()
        nav = Navigator(bundled_dataset, presenter, scheduler)
        nav.start()
        nav.run_audit()
        task = nav._pending_task
        nav.load_scenario(2)
        presenter.clear()

        task.callback()
        assert presenter.calls == []
        assert nav.phase == AuditPhase.IDLE


class TestAdvance:
    """Test advancing and wrap-around."""

    def test_advance_to_last_without_completion(self, navigator, presenter, bundled_dataset):
        total = len(bundled_dataset)
        for _ in range(total - 1):
            navigator.advance()
        assert navigator.state.cursor == total - 1
        assert presenter.count("notify_cycle_complete") == 0

    def test_advance_from_last_wraps(self, navigator, presenter, bundled_dataset):
        navigator.load_scenario(len(bundled_dataset) - 1)
        presenter.clear()

        assert navigator.advance() == 0
        assert presenter.names() == ["notify_cycle_complete", "show_problem"]
        assert presenter.calls[-1] == ("show_problem", bundled_dataset.get(0))
        assert presenter.count("notify_cycle_complete") == 1

    def test_advance_returns_new_cursor(self, navigator):
        assert navigator.advance() == 1
        assert navigator.advance() == 2

    def test_full_cycle_on_small_dataset(self, small_dataset, presenter, scheduler):
        nav = Navigator(small_dataset, presenter, scheduler)
        nav.start()
        cursors = [nav.advance() for _ in range(6)]
        assert cursors == [1, 2, 0, 1, 2, 0]
        assert presenter.count("notify_cycle_complete") == 2

    def test_single_scenario_always_wraps(self, presenter, scheduler):
        from logicaudit.classroom import ScenarioDataset
        from conftest import make_record

        nav = Navigator(ScenarioDataset([make_record(0)]), presenter, scheduler)
        nav.start()
        assert nav.advance() == 0
        assert presenter.count("notify_cycle_complete") == 1


class TestConcreteScenario:
    """Test the first bundled scenario end to end."""

    def test_time_complexity_walkthrough(self, bundled_dataset, presenter, clock, scheduler):
        nav = Navigator(bundled_dataset, presenter, scheduler)
        nav.load_scenario(0)
        _, record = presenter.calls[-1]
        assert record.category == "Time Complexity"
        assert "two numbers" in record.prompt

        nav.run_audit()
        clock.advance(DELAY)
        scheduler.run_pending()
        name, record = presenter.calls[-1]
        assert name == "show_result"
        assert "O(n²)" in record.critique
