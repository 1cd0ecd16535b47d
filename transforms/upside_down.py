#!/usr/bin/env python3
"""
Flip text upside down: each glyph is swapped for its rotated look-alike and
the order is reversed, so the line reads as if turned through 180 degrees.
"""
from text_styles import upside_down_text


def transform(text: str) -> str:
    return upside_down_text(text)
