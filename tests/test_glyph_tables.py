import string
import unicodedata

import pytest

from glyph_tables import (
    BLANK_PATTERN,
    BLOCK_PATTERNS,
    BLOCK_ROWS,
    BLOCK_WIDTH,
    BUBBLE_MAP,
    CIRCLE_FILLED_MAP,
    MARKS_ABOVE,
    MARKS_BELOW,
    MARKS_MIDDLE,
    MIRROR_MAP,
    SMALL_CAPS_MAP,
    STRIKE_MARKS,
)


def test_block_patterns_cover_the_alphabet():
    assert sorted(BLOCK_PATTERNS) == list(string.ascii_uppercase)


@pytest.mark.parametrize("letter", sorted(BLOCK_PATTERNS))
def test_block_pattern_shape(letter):
    rows = BLOCK_PATTERNS[letter]
    assert len(rows) == BLOCK_ROWS
    assert all(len(row) == BLOCK_WIDTH for row in rows)


def test_blank_pattern_matches_glyph_size():
    assert BLANK_PATTERN == (" " * BLOCK_WIDTH,) * BLOCK_ROWS


@pytest.mark.parametrize("table", [BLOCK_PATTERNS, MIRROR_MAP, SMALL_CAPS_MAP,
                                   BUBBLE_MAP, CIRCLE_FILLED_MAP])
def test_tables_are_read_only(table):
    with pytest.raises(TypeError):
        table["a"] = "b"


def test_small_caps_keys_are_lowercase_letters():
    assert sorted(SMALL_CAPS_MAP) == list(string.ascii_lowercase)


def test_bubble_covers_letters_and_digits():
    assert set(BUBBLE_MAP) == set(string.ascii_letters + string.digits)


def test_filled_circle_maps_both_cases_to_one_glyph():
    assert set(CIRCLE_FILLED_MAP) == set(string.ascii_letters)
    for lower in string.ascii_lowercase:
        assert CIRCLE_FILLED_MAP[lower] == CIRCLE_FILLED_MAP[lower.upper()]
    assert CIRCLE_FILLED_MAP["a"] == "\U0001F150"
    assert CIRCLE_FILLED_MAP["z"] == "\U0001F169"


def test_mirror_brackets_swap():
    for a, b in ("()", "[]", "{}", "<>"):
        assert MIRROR_MAP[a] == b
        assert MIRROR_MAP[b] == a


@pytest.mark.parametrize("pool", [MARKS_ABOVE, MARKS_MIDDLE, MARKS_BELOW, STRIKE_MARKS])
def test_mark_pools_hold_combining_marks(pool):
    assert len(pool) == 20
    for mark in pool:
        assert mark
        assert all(unicodedata.combining(ch) > 0 for ch in mark)


def test_above_pool_keeps_diaeresis_acute_as_two_marks():
    assert "\u0308\u0301" in MARKS_ABOVE
    assert "\u0344" not in MARKS_ABOVE
    assert sum(len(mark) == 2 for mark in MARKS_ABOVE) == 1


def test_placement_pools_are_disjoint():
    above, middle, below = set(MARKS_ABOVE), set(MARKS_MIDDLE), set(MARKS_BELOW)
    assert not above & middle
    assert not above & below
    assert not middle & below
