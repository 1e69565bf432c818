from __future__ import annotations

import time
import typing as tp
from datetime import timedelta
from enum import Enum

ZERO = timedelta()
ONE_MS = timedelta(milliseconds=1)

Clock = tp.Callable[[], float]

class EngineState(Enum):
    Idle = 'idle'
    Running = 'running'
    Paused = 'paused'

class DurationEngine:
    '''
    Elapsed-time bookkeeping across pause/resume segments.
    Invalid transitions are silently ignored.
    '''

    def __init__(self, clock: Clock = time.monotonic) -> None:
        '''
        `clock` returns monotonic seconds. Inject a fake one to test.
        '''
        self.clock = clock

        self.running = False
        self.paused = False
        self.accumulated = ZERO
        self.segment_start: float | None = None
        self.laps: list[timedelta] = []

    @property
    def state(self) -> EngineState:
        if not self.running:
            return EngineState.Idle
        if self.paused:
            return EngineState.Paused
        return EngineState.Running

    def start(self) -> None:
        self.segment_start = self.clock()
        self.running = True
        self.paused = False
        self.accumulated = ZERO

    def reset(self) -> None:
        self.start()
        self.laps.clear()

    def pause(self) -> None:
        if not self.running or self.paused:
            return
        self.accumulated += self.sinceSegmentStart()
        self.paused = True

    def resume(self) -> None:
        if not self.running or not self.paused:
            return
        self.segment_start = self.clock()
        self.paused = False

    def sinceSegmentStart(self) -> timedelta:
        assert self.segment_start is not None
        # monotonic, but a fake clock may misbehave
        return max(ZERO, timedelta(seconds=self.clock() - self.segment_start))

    def elapsed(self) -> timedelta:
        if self.paused:
            return self.accumulated
        if self.running:
            return self.accumulated + self.sinceSegmentStart()
        return ZERO

    def recordLap(self) -> timedelta | None:
        '''
        Returns the recorded lap, or `None` if not running.
        A lap taken while paused records the frozen value.
        '''
        if not self.running:
            return None
        lap = self.elapsed()
        self.laps.append(lap)
        return lap

    def lapDeltas(self) -> list[timedelta]:
        return [
            later - earlier
            for earlier, later in zip(self.laps, self.laps[1:])
        ]

def formatDuration(duration: timedelta) -> str:
    '''
    `HH:MM:SS.mmm`, truncated to the millisecond.
    Hours widen past two digits instead of wrapping, e.g. `100:00:00.000`.
    '''
    total_ms = max(ZERO, duration) // ONE_MS
    hours, rest = divmod(total_ms, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    seconds, milliseconds = divmod(rest, 1000)
    return f'{hours:02d}:{minutes:02d}:{seconds:02d}.{milliseconds:03d}'
