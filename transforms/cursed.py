#!/usr/bin/env python3
"""
Cursed (zalgo) text: the glitch marks, tuned for horror and memes.

Configuration (override in transforms.ini):
    INTENSITY - sampling rounds per character, clamped to 1-5 (default: 2)
    SEED      - fix the random seed for repeatable output (default: none)
"""
import random

from text_styles import clamp_intensity, to_cursed_text

INTENSITY = 2
SEED      = None


def transform(text: str) -> str:
    rng = random.Random(SEED) if SEED is not None else None
    return to_cursed_text(text, clamp_intensity(INTENSITY), rng)
