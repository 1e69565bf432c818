from __future__ import annotations

from enum import Enum
from datetime import datetime

from pydantic import BaseModel, ConfigDict
from textual.widget import Widget

TITLE = 'ChronoRust - High Precision Chronometer'
GOODBYE = 'ChronoRust stopped. Goodbye!'
TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'

class Command(Enum):
    Quit = 'quit'
    Reset = 'reset'
    Lap = 'lap'
    TogglePauseResume = 'toggle_pause_resume'

class LapRow(BaseModel):
    time: str
    delta: str | None   # None for the first lap

    model_config = ConfigDict(
        frozen=True,
    )

    def render(self, index: int) -> str:
        s = f'Lap {index + 1}: {self.time}'
        if self.delta is not None:
            s += f'  (+{self.delta})'
        return s

class Snapshot(BaseModel):
    displayString: str
    laps: list[LapRow]
    paused: bool
    running: bool

    model_config = ConfigDict(
        frozen=True,
    )

    def statusText(self) -> str:
        if not self.running:
            return 'Idle'
        return 'Paused' if self.paused else 'Running'

def timestamp(when: datetime) -> str:
    return when.strftime(TIMESTAMP_FORMAT)

def titled(
    w: Widget, /, title: str, skip_bottom: bool = False,
    style = ('round', '#999'), padding = (0, 1),
):
    w.styles.border = style
    if skip_bottom:
        w.styles.border_bottom = None
    w.border_title = title
    w.styles.padding = padding
    return w
