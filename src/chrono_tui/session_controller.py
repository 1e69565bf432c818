from __future__ import annotations

import logging
import typing as tp
from datetime import datetime

from .duration_engine import DurationEngine, formatDuration
from .session_log import SessionLog
from .shared import Command, LapRow, Snapshot, timestamp

log = logging.getLogger(__name__)

class SessionController:
    '''
    Maps commands onto the engine, mirrors them to the optional
    session log, and hands out snapshots for rendering.
    '''

    def __init__(
        self,
        engine: DurationEngine,
        sessionLog: SessionLog | None = None,
        wallClock: tp.Callable[[], datetime] = datetime.now,
    ) -> None:
        self.engine = engine
        self.sessionLog = sessionLog
        self.wallClock = wallClock

    def begin(self) -> None:
        '''
        Starts the stopwatch right away and marks the session start.
        '''
        self.engine.start()
        self.writeLog(f'[{timestamp(self.wallClock())}] Session Started')

    def dispatch(self, command: Command) -> bool:
        '''
        Returns `False` when the control loop should exit.
        '''
        log.debug('dispatch %s', command)
        match command:
            case Command.Quit:
                return False
            case Command.Reset:
                self.engine.reset()
                self.writeLog(f'Reset at: {timestamp(self.wallClock())}')
            case Command.Lap:
                lap = self.engine.recordLap()
                if lap is not None:
                    n = len(self.engine.laps)
                    self.writeLog(
                        f'Lap {n} at: {timestamp(self.wallClock())} - '
                        f'Time: {formatDuration(lap)}'
                    )
            case Command.TogglePauseResume:
                if self.engine.paused:
                    self.engine.resume()
                else:
                    self.engine.pause()
            case _:
                raise ValueError(f'Unknown command: {command}')
        return True

    def writeLog(self, line: str) -> None:
        if self.sessionLog is None:
            return
        self.sessionLog.write(line)

    def snapshot(self) -> Snapshot:
        engine = self.engine
        deltas: list[str | None] = [None]
        deltas.extend(formatDuration(d) for d in engine.lapDeltas())
        return Snapshot(
            displayString=formatDuration(engine.elapsed()),
            laps=[
                LapRow(time=formatDuration(lap), delta=delta)
                for lap, delta in zip(engine.laps, deltas)
            ],
            paused=engine.paused,
            running=engine.running,
        )
