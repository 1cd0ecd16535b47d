#!/usr/bin/env python3
"""
Wrap letters and digits in outlined circles (ⓗⓔⓛⓛⓞ), keeping their case.
"""
from text_styles import to_bubble_text


def transform(text: str) -> str:
    return to_bubble_text(text)
