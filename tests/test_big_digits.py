import pytest

from chrono_tui.big_digits import (
    BLANK, GLYPH_STYLES, HEIGHT, TABLES, WIDTH, bigGlyph, formatBigTime,
)

@pytest.mark.parametrize('style', GLYPH_STYLES)
def test_every_glyph_is_a_full_block(style):
    table = TABLES[style]
    assert set(table) == set('0123456789:.')
    for char, rows in table.items():
        assert len(rows) == HEIGHT, char
        assert all(len(row) == WIDTH for row in rows), char

@pytest.mark.parametrize('style', GLYPH_STYLES)
def test_format_big_time_lines_are_even(style):
    lines = formatBigTime('12:34:56.789', style)
    assert len(lines) == HEIGHT
    assert {len(line) for line in lines} == {12 * WIDTH + 11}

def test_unknown_chars_are_blank():
    assert bigGlyph('x') == BLANK
    assert bigGlyph('-', 'ascii') == BLANK

def test_glyphs_are_joined_by_one_space():
    lines = formatBigTime('1.', 'unicode')
    assert lines[3] == '  │ │  ' + ' ' + '   ●   '
