'''
Large "digital clock" glyphs, five rows by seven columns each.
`unicode` uses box drawing characters; `ascii` is for terminals
and fonts that mangle them.
'''

import typing as tp

GlyphStyle = tp.Literal['unicode', 'ascii']
GLYPH_STYLES: tuple[GlyphStyle, ...] = ('unicode', 'ascii')

HEIGHT = 5
WIDTH = 7
BLANK = (' ' * WIDTH, ) * HEIGHT

UNICODE_GLYPHS: dict[str, tuple[str, ...]] = {
    '0': (
        '┌─────┐',
        '│  ●  │',
        '│ ● ● │',
        '│  ●  │',
        '└─────┘',
    ),
    '1': (
        '  ┌─┐  ',
        '  │ │  ',
        '  │ │  ',
        '  │ │  ',
        '  └─┘  ',
    ),
    '2': (
        '┌─────┐',
        '    ┌─┘',
        '┌───┘  ',
        '└─────┐',
        '└─────┘',
    ),
    '3': (
        '┌─────┐',
        '    ┌─┘',
        '┌───┘  ',
        '    ┌─┘',
        '└─────┘',
    ),
    '4': (
        '┌─  ┌─┐',
        '│   │ │',
        '└───┴─┘',
        '    │ │',
        '    └─┘',
    ),
    '5': (
        '┌─────┐',
        '│     │',
        '└─────┐',
        '    ┌─┘',
        '└─────┘',
    ),
    '6': (
        '┌─────┐',
        '│     │',
        '├─────┤',
        '│  ●  │',
        '└─────┘',
    ),
    '7': (
        '┌─────┐',
        '    ┌─┘',
        '   ┌─┘ ',
        '  ┌─┘  ',
        ' └─┘   ',
    ),
    '8': (
        '┌─────┐',
        '│  ●  │',
        '├─────┤',
        '│  ●  │',
        '└─────┘',
    ),
    '9': (
        '┌─────┐',
        '│  ●  │',
        '├─────┤',
        '    ┌─┘',
        '└─────┘',
    ),
    ':': (
        '       ',
        '   ●   ',
        '       ',
        '   ●   ',
        '       ',
    ),
    '.': (
        '       ',
        '       ',
        '       ',
        '   ●   ',
        '       ',
    ),
}

ASCII_GLYPHS: dict[str, tuple[str, ...]] = {
    '0': (
        ' +---+ ',
        ' |   | ',
        ' |   | ',
        ' |   | ',
        ' +---+ ',
    ),
    '1': (
        '    +  ',
        '    |  ',
        '    |  ',
        '    |  ',
        '    +  ',
    ),
    '2': (
        ' +---+ ',
        '     | ',
        ' +---+ ',
        ' |     ',
        ' +---+ ',
    ),
    '3': (
        ' +---+ ',
        '     | ',
        '  ---+ ',
        '     | ',
        ' +---+ ',
    ),
    '4': (
        ' +   + ',
        ' |   | ',
        ' +---+ ',
        '     | ',
        '     + ',
    ),
    '5': (
        ' +---+ ',
        ' |     ',
        ' +---+ ',
        '     | ',
        ' +---+ ',
    ),
    '6': (
        ' +---+ ',
        ' |     ',
        ' +---+ ',
        ' |   | ',
        ' +---+ ',
    ),
    '7': (
        ' +---+ ',
        '     | ',
        '     | ',
        '     | ',
        '     + ',
    ),
    '8': (
        ' +---+ ',
        ' |   | ',
        ' +---+ ',
        ' |   | ',
        ' +---+ ',
    ),
    '9': (
        ' +---+ ',
        ' |   | ',
        ' +---+ ',
        '     | ',
        ' +---+ ',
    ),
    ':': (
        '       ',
        '   o   ',
        '       ',
        '   o   ',
        '       ',
    ),
    '.': (
        '       ',
        '       ',
        '       ',
        '   o   ',
        '       ',
    ),
}

TABLES: dict[GlyphStyle, dict[str, tuple[str, ...]]] = {
    'unicode': UNICODE_GLYPHS,
    'ascii': ASCII_GLYPHS,
}

def bigGlyph(char: str, style: GlyphStyle = 'unicode') -> tuple[str, ...]:
    return TABLES[style].get(char, BLANK)

def formatBigTime(text: str, style: GlyphStyle = 'unicode') -> list[str]:
    glyphs = [bigGlyph(c, style) for c in text]
    return [
        ' '.join(g[row] for g in glyphs)
        for row in range(HEIGHT)
    ]
