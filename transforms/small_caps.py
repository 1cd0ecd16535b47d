#!/usr/bin/env python3
"""
Convert text to small capitals (ʜᴇʟʟᴏ). Input is lowercased first, so the
result never contains regular capitals.
"""
from text_styles import to_small_caps


def transform(text: str) -> str:
    return to_small_caps(text)
