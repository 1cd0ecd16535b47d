#!/usr/bin/env python3
"""
Circled letters, outlined or filled.

Configuration (override in transforms.ini):
    STYLE - outlined | filled   (default: outlined)
"""
from text_styles import to_circle_text

STYLE = "outlined"


def transform(text: str) -> str:
    return to_circle_text(text, STYLE)
