import asyncio
import contextlib
import typing as tp

from textual.pilot import Pilot
from textual.app import App, ComposeResult, ScreenStackError
from textual.binding import Binding
from textual.containers import Container
from textual.css.query import NoMatches
from textual.timer import Timer
from textual.widgets import Footer, Header, Static

from .config import Config
from .shared import Command, GOODBYE, TITLE, Snapshot, titled
from .session_controller import SessionController
from .widgets import BigClock, LapList

class UI(App):
    CSS_PATH = "styles.tcss"
    BINDINGS = [
        Binding("q", "command('quit')", "Quit"),
        Binding("Q", "command('quit')", show=False),
        Binding("r", "command('reset')", "Reset"),
        Binding("R", "command('reset')", show=False),
        Binding("l", "command('lap')", "Lap"),
        Binding("L", "command('lap')", show=False),
        Binding("t", "command('lap')", show=False),
        Binding("T", "command('lap')", show=False),
        Binding("s", "command('toggle_pause_resume')", "Pause/Resume"),
        Binding("S", "command('toggle_pause_resume')", show=False),
        Binding("space", "command('toggle_pause_resume')", show=False),
    ]

    def __init__(
        self,
        controller: SessionController,
        config: Config,
    ) -> None:
        '''
        The key bindings are the input side and `tick()` is the render
        side of one single-threaded loop: textual delivers key events
        between ticks, and each tick redraws from a fresh snapshot.
        '''
        super().__init__()

        self.controller = controller
        self.config = config
        self.ticker: Timer | None = None

        self.title = TITLE

    def run(
        self, *, headless: bool = False, inline: bool = False,
        inline_no_clear: bool = False, mouse: bool = True,
        size: tuple[int, int] | None = None,
        auto_pilot: tp.Callable[
            [Pilot[object]], tp.Coroutine[tp.Any, tp.Any, None]
        ] | None = None, loop: asyncio.AbstractEventLoop | None = None,
    ) -> tp.Any | None:
        sessionLog = self.controller.sessionLog
        with (
            sessionLog.Context() if sessionLog is not None
            else contextlib.nullcontext()
        ):
            return super().run(
                headless=headless, inline=inline,
                inline_no_clear=inline_no_clear, mouse=mouse,
                size=size, auto_pilot=auto_pilot, loop=loop,
            )

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        with titled(Container(id='time-pane'), 'Time'):
            yield BigClock(self.config.glyph_style, id='big-clock')
            yield Static('', id='status')
        yield titled(LapList(id='lap-list'), 'Lap Times')
        yield Footer()

    def on_mount(self) -> None:
        self.controller.begin()
        self.ticker = self.set_interval(self.config.tick_seconds, self.tick)
        self.tick()

    def action_command(self, name: str) -> None:
        if not self.controller.dispatch(Command(name)):
            self.stopTicker()
            self.exit(message=GOODBYE)
            return
        self.tick()

    async def action_quit(self) -> None:
        # textual binds ctrl+q to this
        self.action_command(Command.Quit.value)

    def on_unmount(self) -> None:
        self.stopTicker()

    def stopTicker(self) -> None:
        if self.ticker is not None:
            self.ticker.stop()
            self.ticker = None

    def tick(self) -> None:
        self.draw(self.controller.snapshot())

    def draw(self, snapshot: Snapshot) -> None:
        try:
            clock = self.query_one('#big-clock', BigClock)
        except (ScreenStackError, NoMatches):
            return  # shutting down
        clock.text = snapshot.displayString
        clock.paused = snapshot.paused
        status = self.query_one('#status', Static)
        icon = '⏸️ ' if snapshot.paused else '⏱️ '
        status.update(f'{icon} {snapshot.statusText()}  {snapshot.displayString}')
        lapList = self.query_one('#lap-list', LapList)
        lapList.laps = snapshot.laps
        lapList.border_subtitle = f'{len(snapshot.laps)} laps'
