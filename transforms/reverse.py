#!/usr/bin/env python3
"""
Reverse the order of characters. Emoji and other characters outside the
basic plane are kept whole.
"""
from text_styles import reverse_text


def transform(text: str) -> str:
    return reverse_text(text)
