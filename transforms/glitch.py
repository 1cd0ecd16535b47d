#!/usr/bin/env python3
"""
Glitch text: stack random combining marks on every character.

Configuration (override in transforms.ini):
    INTENSITY - sampling rounds per character, clamped to 1-5 (default: 2)
    SEED      - fix the random seed for repeatable output (default: none)
"""
import random

from text_styles import clamp_intensity, to_glitch_text

INTENSITY = 2
SEED      = None


def transform(text: str) -> str:
    rng = random.Random(SEED) if SEED is not None else None
    return to_glitch_text(text, clamp_intensity(INTENSITY), rng)
