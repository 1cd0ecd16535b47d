#!/usr/bin/env python3
"""
glyph_tables.py — static lookup data for the glyphclip text styles.

Everything here is built once at import time and never mutated. Mappings are
exposed as read-only MappingProxyType views so they can be shared freely
between the GUI thread, the clipboard poller and the hotkey thread.

Contents:
    BLOCK_PATTERNS     - uppercase letter -> 5 rows of block characters
    BLOCK_WIDTH        - width of every block row (and of the blank fallback)
    BLANK_PATTERN      - 5 rows of spaces used for characters with no pattern
    MIRROR_MAP         - upside-down / mirrored glyphs (case-sensitive)
    SMALL_CAPS_MAP     - lowercase letter -> small capital
    BUBBLE_MAP         - outlined circled letters and digits (case preserved)
    CIRCLE_FILLED_MAP  - filled (negative) circled letters, both cases
    MARKS_ABOVE / MARKS_MIDDLE / MARKS_BELOW / STRIKE_MARKS
                       - combining mark pools sampled by glitch/cursed text
"""

from types import MappingProxyType

BLOCK_ROWS  = 5
BLOCK_WIDTH = 6

# ── Block letters ─────────────────────────────────────────────────────────────

BLOCK_PATTERNS = MappingProxyType({
    "A": (" ████ ", "█    █", "█    █", "██████", "█    █"),
    "B": ("██████", "█    █", "██████", "█    █", "██████"),
    "C": (" ████ ", "█    █", "█     ", "█    █", " ████ "),
    "D": ("██████", "█    █", "█    █", "█    █", "██████"),
    "E": ("██████", "█     ", "██████", "█     ", "██████"),
    "F": ("██████", "█     ", "██████", "█     ", "█     "),
    "G": (" ████ ", "█     ", "█  ███", "█    █", " ████ "),
    "H": ("█    █", "█    █", "██████", "█    █", "█    █"),
    "I": ("██████", "  ██  ", "  ██  ", "  ██  ", "██████"),
    "J": ("██████", "   █  ", "   █  ", "█  █  ", " ██   "),
    "K": ("█   █ ", "█  █  ", "███   ", "█  █  ", "█   █ "),
    "L": ("█     ", "█     ", "█     ", "█     ", "██████"),
    "M": ("█    █", "██  ██", "█ ██ █", "█    █", "█    █"),
    "N": ("█    █", "██   █", "█ █  █", "█  █ █", "█   ██"),
    "O": (" ████ ", "█    █", "█    █", "█    █", " ████ "),
    "P": ("██████", "█    █", "██████", "█     ", "█     "),
    "Q": (" ████ ", "█    █", "█    █", "█  █ █", " ████ "),
    "R": ("██████", "█    █", "██████", "█  █  ", "█   █ "),
    "S": (" ████ ", "█     ", " ████ ", "     █", "████  "),
    "T": ("██████", "  ██  ", "  ██  ", "  ██  ", "  ██  "),
    "U": ("█    █", "█    █", "█    █", "█    █", " ████ "),
    "V": ("█    █", "█    █", "█    █", " █  █ ", "  ██  "),
    "W": ("█    █", "█    █", "█ ██ █", "██  ██", "█    █"),
    "X": ("█    █", " █  █ ", "  ██  ", " █  █ ", "█    █"),
    "Y": ("█    █", " █  █ ", "  ██  ", "  ██  ", "  ██  "),
    "Z": ("██████", "    █ ", "  █   ", " █    ", "██████"),
})

BLANK_PATTERN = (" " * BLOCK_WIDTH,) * BLOCK_ROWS

# ── Upside down / mirror ──────────────────────────────────────────────────────

MIRROR_MAP = MappingProxyType({
    "a": "ɐ", "b": "q", "c": "ɔ", "d": "p", "e": "ǝ",
    "f": "ɟ", "g": "ƃ", "h": "ɥ", "i": "ᴉ", "j": "ɾ",
    "k": "ʞ", "l": "l", "m": "ɯ", "n": "u", "o": "o",
    "p": "d", "q": "b", "r": "ɹ", "s": "s", "t": "ʇ",
    "u": "n", "v": "ʌ", "w": "ʍ", "x": "x", "y": "ʎ",
    "z": "z", "A": "∀", "B": "B", "C": "Ɔ", "D": "D",
    "E": "Ǝ", "F": "Ⅎ", "G": "פ", "H": "H", "I": "I",
    "J": "ſ", "K": "K", "L": "˥", "M": "W", "N": "N",
    "O": "O", "P": "Ԁ", "Q": "Q", "R": "R", "S": "S",
    "T": "┴", "U": "∩", "V": "Λ", "W": "M", "X": "X",
    "Y": "⅄", "Z": "Z", "0": "0", "1": "Ɩ", "2": "ᄅ",
    "3": "Ɛ", "4": "ㄣ", "5": "ϛ", "6": "9", "7": "ㄥ",
    "8": "8", "9": "6", ".": "˙", ",": "'", "'": ",",
    '"': "„", "`": ",", "?": "¿", "!": "¡", "[": "]",
    "]": "[", "(": ")", ")": "(", "{": "}", "}": "{",
    "<": ">", ">": "<", "&": "⅋", "_": "‾",
})

# ── Small caps ────────────────────────────────────────────────────────────────

# "s" and "x" have no small-capital form in common fonts and map to themselves.
SMALL_CAPS_MAP = MappingProxyType({
    "a": "ᴀ", "b": "ʙ", "c": "ᴄ", "d": "ᴅ", "e": "ᴇ",
    "f": "ғ", "g": "ɢ", "h": "ʜ", "i": "ɪ", "j": "ᴊ",
    "k": "ᴋ", "l": "ʟ", "m": "ᴍ", "n": "ɴ", "o": "ᴏ",
    "p": "ᴘ", "q": "ǫ", "r": "ʀ", "s": "s", "t": "ᴛ",
    "u": "ᴜ", "v": "ᴠ", "w": "ᴡ", "x": "x", "y": "ʏ",
    "z": "ᴢ",
})

# ── Circled letters ───────────────────────────────────────────────────────────

BUBBLE_MAP = MappingProxyType({
    "a": "ⓐ", "b": "ⓑ", "c": "ⓒ", "d": "ⓓ", "e": "ⓔ",
    "f": "ⓕ", "g": "ⓖ", "h": "ⓗ", "i": "ⓘ", "j": "ⓙ",
    "k": "ⓚ", "l": "ⓛ", "m": "ⓜ", "n": "ⓝ", "o": "ⓞ",
    "p": "ⓟ", "q": "ⓠ", "r": "ⓡ", "s": "ⓢ", "t": "ⓣ",
    "u": "ⓤ", "v": "ⓥ", "w": "ⓦ", "x": "ⓧ", "y": "ⓨ",
    "z": "ⓩ", "A": "Ⓐ", "B": "Ⓑ", "C": "Ⓒ", "D": "Ⓓ",
    "E": "Ⓔ", "F": "Ⓕ", "G": "Ⓖ", "H": "Ⓗ", "I": "Ⓘ",
    "J": "Ⓙ", "K": "Ⓚ", "L": "Ⓛ", "M": "Ⓜ", "N": "Ⓝ",
    "O": "Ⓞ", "P": "Ⓟ", "Q": "Ⓠ", "R": "Ⓡ", "S": "Ⓢ",
    "T": "Ⓣ", "U": "Ⓤ", "V": "Ⓥ", "W": "Ⓦ", "X": "Ⓧ",
    "Y": "Ⓨ", "Z": "Ⓩ", "0": "⓪", "1": "①", "2": "②",
    "3": "③", "4": "④", "5": "⑤", "6": "⑥", "7": "⑦",
    "8": "⑧", "9": "⑨",
})

_FILLED = "🅐🅑🅒🅓🅔🅕🅖🅗🅘🅙🅚🅛🅜🅝🅞🅟🅠🅡🅢🅣🅤🅥🅦🅧🅨🅩"

CIRCLE_FILLED_MAP = MappingProxyType({
    **{chr(ord("a") + i): glyph for i, glyph in enumerate(_FILLED)},
    **{chr(ord("A") + i): glyph for i, glyph in enumerate(_FILLED)},
})

# ── Combining mark pools ──────────────────────────────────────────────────────

MARKS_ABOVE = (
    "\u030D", "\u030E", "\u0304", "\u0305", "\u033F",
    "\u0311", "\u0306", "\u0310", "\u0352", "\u0357",
    "\u0351", "\u0307", "\u0308", "\u030A", "\u0342",
    "\u0313", "\u0308\u0301", "\u034A", "\u034B", "\u034C",
)

MARKS_MIDDLE = (
    "\u0315", "\u031B", "\u0300", "\u0301", "\u0358",
    "\u0321", "\u0322", "\u0327", "\u0328", "\u0334",
    "\u0335", "\u0336", "\u035C", "\u035D", "\u035E",
    "\u035F", "\u0360", "\u0362", "\u0338", "\u0337",
)

MARKS_BELOW = (
    "\u0316", "\u0317", "\u0318", "\u0319", "\u031C",
    "\u031D", "\u031E", "\u031F", "\u0320", "\u0324",
    "\u0325", "\u0326", "\u0329", "\u032A", "\u032B",
    "\u032C", "\u032D", "\u032E", "\u032F", "\u0330",
)

# Overlays and underlines; overlaps MIDDLE/BELOW on purpose.
STRIKE_MARKS = (
    "\u0338", "\u0337", "\u0336", "\u0335", "\u0334",
    "\u0333", "\u0332", "\u0331", "\u0330", "\u032F",
    "\u032E", "\u032D", "\u032C", "\u032B", "\u032A",
    "\u0329", "\u0328", "\u0327", "\u0326", "\u0325",
)
