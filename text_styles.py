#!/usr/bin/env python3
"""
text_styles.py — the glyphclip text transformation engine.

Pure functions only: each takes a string (plus a size, style or intensity
where the style needs one) and returns a new string, or a list of rows for
the block styles. No I/O, no shared mutable state. The only randomness is in
glitch/cursed text, and it always goes through an injectable random.Random.

Public API:
    mirror_text(text)            upside_down_text(text)   invert_text(text)
    reverse_text(text)           to_small_caps(text)      to_bubble_text(text)
    to_circle_text(text, style)  to_big_text(text, size)  to_ascii_art(text)
    to_glitch_text(text, intensity, rng=None)
    to_cursed_text(text, intensity, rng=None)

Characters a table does not know about are copied through unchanged.
"""

import random
from enum import Enum

from glyph_tables import (
    BLANK_PATTERN,
    BLOCK_PATTERNS,
    BLOCK_ROWS,
    BUBBLE_MAP,
    CIRCLE_FILLED_MAP,
    MARKS_ABOVE,
    MARKS_BELOW,
    MARKS_MIDDLE,
    MIRROR_MAP,
    SMALL_CAPS_MAP,
    STRIKE_MARKS,
)

DEFAULT_INTENSITY = 2
MIN_INTENSITY     = 1
MAX_INTENSITY     = 5

# Per-round probabilities for glitch/cursed text; tuned by eye, keep as is.
P_ABOVE  = 0.5
P_MIDDLE = 0.3
P_BELOW  = 0.4
P_STRIKE = 0.3
P_REPEAT_PER_LEVEL = 0.1

_default_rng = random.Random()


# ── Selectors ─────────────────────────────────────────────────────────────────

class BlockSize(str, Enum):
    MEDIUM = "medium"
    BIG    = "big"

    @property
    def gap(self) -> str:
        """Spacing appended after every block glyph."""
        return "  " if self is BlockSize.BIG else " "


class CircleStyle(str, Enum):
    OUTLINED = "outlined"
    FILLED   = "filled"


def coerce_choice(enum_cls, value, default):
    """
    Turn an enum member or a (case-insensitive) string into a member of
    enum_cls. Anything unrecognised falls back to default instead of raising.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.strip().lower())
        except ValueError:
            pass
    return default


def clamp_intensity(value, low: int = MIN_INTENSITY, high: int = MAX_INTENSITY) -> int:
    """Caller-side clamp for glitch intensity. The engine itself never clamps."""
    try:
        value = int(value)
    except (TypeError, ValueError):
        return DEFAULT_INTENSITY
    return max(low, min(high, value))


# ── Direct substitution ───────────────────────────────────────────────────────

def substitute(text: str, table) -> str:
    return "".join(table.get(ch, ch) for ch in text)


def mirror_text(text: str) -> str:
    """Flip each glyph upside down, then reverse so the whole line reads rotated."""
    return substitute(text, MIRROR_MAP)[::-1]


upside_down_text = mirror_text
invert_text      = mirror_text


def reverse_text(text: str) -> str:
    # str slicing works on code points, so astral characters stay whole.
    return text[::-1]


def to_small_caps(text: str) -> str:
    return substitute(text.lower(), SMALL_CAPS_MAP)


def to_bubble_text(text: str) -> str:
    return substitute(text, BUBBLE_MAP)


def to_circle_text(text: str, style=CircleStyle.OUTLINED) -> str:
    style = coerce_choice(CircleStyle, style, CircleStyle.OUTLINED)
    table = BUBBLE_MAP if style is CircleStyle.OUTLINED else CIRCLE_FILLED_MAP
    return substitute(text, table)


# ── Block letters ─────────────────────────────────────────────────────────────

def _block_rows(text: str, gap: str) -> list:
    rows = [""] * BLOCK_ROWS
    for ch in text.upper():
        pattern = BLOCK_PATTERNS.get(ch, BLANK_PATTERN)
        for i, line in enumerate(pattern):
            rows[i] += line + gap
    return rows


def to_big_text(text: str, size=BlockSize.BIG, as_rows: bool = False):
    """
    Render text as 5 rows of block letters.

    Every glyph is BLOCK_WIDTH wide followed by one space (medium) or two
    (big), so column k starts at the same offset on every row. Returns the
    rows joined with newlines, or the list of rows when as_rows is True.
    """
    size = coerce_choice(BlockSize, size, BlockSize.BIG)
    rows = _block_rows(text, size.gap)
    return rows if as_rows else "\n".join(rows)


def to_ascii_art(text: str) -> list:
    """Block letters packed edge to edge, returned row by row."""
    return _block_rows(text, "")


# ── Glitch / cursed ───────────────────────────────────────────────────────────

def _glitch_char(ch: str, intensity: int, rng: random.Random) -> str:
    glitched = ch
    for _ in range(intensity):
        if rng.random() < P_ABOVE:
            glitched += rng.choice(MARKS_ABOVE)
        if rng.random() < P_MIDDLE:
            glitched += rng.choice(MARKS_MIDDLE)
        if rng.random() < P_BELOW:
            glitched += rng.choice(MARKS_BELOW)
        if rng.random() < P_STRIKE:
            glitched += rng.choice(STRIKE_MARKS)

    if rng.random() < P_REPEAT_PER_LEVEL * intensity:
        glitched *= rng.randint(1, 2)
    return glitched


def to_glitch_text(text: str, intensity: int = DEFAULT_INTENSITY,
                   rng: random.Random = None) -> str:
    """
    Bury each character under randomly sampled combining marks.

    intensity is the number of sampling rounds per character; zero or less
    leaves the text untouched. Output differs on every call unless a seeded
    rng is passed in.
    """
    if not text or intensity <= 0:
        return text
    rng = rng or _default_rng
    return "".join(_glitch_char(ch, intensity, rng) for ch in text)


def to_cursed_text(text: str, intensity: int = DEFAULT_INTENSITY,
                   rng: random.Random = None) -> str:
    return to_glitch_text(text, intensity, rng)


# ── Catalogue ─────────────────────────────────────────────────────────────────

STYLE_DESCRIPTIONS = {
    "upside_down": "Flip text upside down (mirrored glyphs, reversed order)",
    "reverse":     "Reverse the character order",
    "small_caps":  "Convert letters to small capitals",
    "bubble":      "Wrap letters and digits in outlined circles",
    "circle":      "Circled letters, outlined or filled",
    "big_text":    "Five-row block letters, medium or big spacing",
    "ascii_art":   "Five-row block letters packed edge to edge",
    "glitch":      "Corrupt text with stacked combining marks",
    "cursed":      "Zalgo-style cursed text",
}

STYLE_NAMES = list(STYLE_DESCRIPTIONS)

MULTILINE_STYLES = frozenset({"big_text", "ascii_art"})
