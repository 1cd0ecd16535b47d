#!/usr/bin/env python3
"""
Render text as packed block-letter ASCII art.

Each input line is rendered separately so multi-line text comes back as
stacked art.

Configuration (override in transforms.ini):
    MULTILINE      - True  = render each line separately
                     False = render the whole text as one line
                     (default: True)
    LINE_SEPARATOR - Blank lines between rendered lines (default: 1)
"""
from text_styles import to_ascii_art

MULTILINE      = True
LINE_SEPARATOR = 1


def transform(text: str) -> str:
    lines = text.splitlines() if MULTILINE else [text.replace("\n", " ")]
    lines = [ln for ln in lines if ln.strip()] or [""]

    blocks = ["\n".join(to_ascii_art(line)) for line in lines]
    separator = "\n" * (LINE_SEPARATOR + 1)
    return separator.join(blocks)
