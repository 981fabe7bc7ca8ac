"""
Shared fixtures for Logic Auditor tests.
"""

import pytest

from logicaudit.classroom import CooperativeScheduler, Navigator, ScenarioDataset, load_scenarios
from logicaudit.schemas import ScenarioRecord
from logicaudit.viewer import Presenter


class FakeClock:
    """Manually advanced clock for scheduler tests."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


class RecordingPresenter(Presenter):
    """Presenter that records every notification as (name, record)."""

    def __init__(self):
        self.calls = []

    def show_problem(self, record):
        self.calls.append(("show_problem", record))

    def show_analyzing(self):
        self.calls.append(("show_analyzing", None))

    def show_result(self, record):
        self.calls.append(("show_result", record))

    def notify_cycle_complete(self):
        self.calls.append(("notify_cycle_complete", None))

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def count(self, name: str) -> int:
        return self.names().count(name)

    def clear(self):
        self.calls = []


def make_record(idx: int, **overrides) -> ScenarioRecord:
    fields = dict(
        id=idx,
        category=f"Category {idx}",
        prompt=f"Prompt {idx}",
        bad_code=f"bad_{idx}()",
        critique=f"Critique {idx}",
        good_code=f"good_{idx}()",
        reasoning=f"Reasoning {idx}",
    )
    fields.update(overrides)
    return ScenarioRecord(**fields)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return CooperativeScheduler(clock=clock)


@pytest.fixture
def presenter():
    return RecordingPresenter()


@pytest.fixture
def small_dataset():
    return ScenarioDataset([make_record(i) for i in range(3)])


@pytest.fixture
def bundled_dataset():
    return load_scenarios()


@pytest.fixture
def navigator(bundled_dataset, presenter, scheduler):
    nav = Navigator(bundled_dataset, presenter, scheduler)
    nav.start()
    presenter.clear()
    return nav
