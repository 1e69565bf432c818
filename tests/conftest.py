from datetime import datetime, timedelta

import pytest

from chrono_tui.duration_engine import DurationEngine

class FakeClock:
    '''
    Monotonic seconds that only move when told to.
    '''
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

class FakeWallClock:
    def __init__(self) -> None:
        self.now = datetime(2025, 3, 14, 9, 26, 53)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()

@pytest.fixture
def wall() -> FakeWallClock:
    return FakeWallClock()

@pytest.fixture
def engine(clock: FakeClock) -> DurationEngine:
    return DurationEngine(clock=clock)
