#!/usr/bin/env python3
"""
Render text as five rows of block letters for banners and headings.

Configuration (override in transforms.ini):
    SIZE - medium | big   (default: big)
           medium leaves one space between letters, big leaves two
"""
from text_styles import to_big_text

SIZE = "big"


def transform(text: str) -> str:
    return to_big_text(text, SIZE)
