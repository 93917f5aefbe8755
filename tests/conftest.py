from __future__ import annotations

import random
from typing import Any, List, Tuple

import pytest

from processlog import CallSite, Config, Presenter, ProcessRegistry


class RecordingPresenter(Presenter):
    def __init__(self):
        self.events: List[Tuple[Any, ...]] = []
        self.warnings: List[str] = []

    def render_start(self, name, color, description=None):
        self.events.append(("start", name, color, description))

    def render_log(self, name, color, message, call_site=None):
        self.events.append(("log", name, color, message, call_site))

    def render_end(self, name, color, duration):
        self.events.append(("end", name, color, duration))

    def warning(self, message):
        self.warnings.append(message)

    def kinds(self) -> List[str]:
        return [event[0] for event in self.events]


class FakeClock:
    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def registry(presenter, clock) -> ProcessRegistry:
    return ProcessRegistry(
        presenter=presenter,
        clock=clock,
        rng=random.Random(7),
        call_site=lambda: CallSite("caller.py", "1"),
    )


@pytest.fixture
def no_color(monkeypatch):
    monkeypatch.setattr(Config, "COLOR_ENABLED", False)
