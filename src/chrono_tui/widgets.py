import typing as tp

from textual.reactive import reactive
from textual.app import RenderResult
from textual.widget import Widget
from textual.widgets import Static
from textual.containers import VerticalScroll

from .big_digits import GlyphStyle, formatBigTime
from .shared import LapRow

class BigClock(Widget):
    text: reactive[str] = reactive('00:00:00.000')
    paused: reactive[bool] = reactive(False)

    def __init__(self, glyph_style: GlyphStyle, *args, **kw) -> None:
        '''
        `glyph_style` is fixed for the widget's lifetime.
        '''
        super().__init__(*args, **kw)

        self.glyph_style: GlyphStyle = glyph_style

    def render(self) -> RenderResult:
        lines = formatBigTime(self.text, self.glyph_style)
        color = 'yellow' if self.paused else 'green'
        return '\n'.join(f'[bold {color}]{line}[/]' for line in lines)

class LapList(VerticalScroll):
    laps: reactive[tp.Sequence[LapRow]] = reactive(())

    def __init__(self, *args, **kw) -> None:
        super().__init__(*args, **kw)

        self.body = Static('No laps yet.', classes='lap-body')

    def compose(self) -> tp.Iterable[Widget]:
        yield self.body

    def watch_laps(self, old: tp.Sequence[LapRow], new: tp.Sequence[LapRow]) -> None:
        if not new:
            self.body.update('No laps yet.')
            return
        self.body.update('\n'.join(
            f'[yellow]{row.render(i)}[/]' for i, row in enumerate(new)
        ))
        self.scroll_end(animate=False)
