#!/usr/bin/env python3
"""
make_transforms.py
Generates a transforms folder with the glyphclip style plugins and a starter
transforms.ini. Run once to get started, or again to restore the defaults:

    python make_transforms.py [--out ./transforms] [--keep]

Each generated script:
  - Has a #!/usr/bin/env python3 shebang
  - Has a module-level docstring (shown in the glyphclip UI description strip
    and tooltip)
  - Defines transform(text: str) -> str on top of text_styles
"""

import argparse
from pathlib import Path

# ════════════════════════════════════════════════════════════════════════════
# upside_down.py
# ════════════════════════════════════════════════════════════════════════════
UPSIDE_DOWN = '''\
#!/usr/bin/env python3
"""
Flip text upside down: each glyph is swapped for its rotated look-alike and
the order is reversed, so the line reads as if turned through 180 degrees.
"""
from text_styles import upside_down_text


def transform(text: str) -> str:
    return upside_down_text(text)
'''

# ════════════════════════════════════════════════════════════════════════════
# reverse.py
# ════════════════════════════════════════════════════════════════════════════
REVERSE = '''\
#!/usr/bin/env python3
"""
Reverse the order of characters. Emoji and other characters outside the
basic plane are kept whole.
"""
from text_styles import reverse_text


def transform(text: str) -> str:
    return reverse_text(text)
'''

# ════════════════════════════════════════════════════════════════════════════
# small_caps.py
# ════════════════════════════════════════════════════════════════════════════
SMALL_CAPS = '''\
#!/usr/bin/env python3
"""
Convert text to small capitals (ʜᴇʟʟᴏ). Input is lowercased first, so the
result never contains regular capitals.
"""
from text_styles import to_small_caps


def transform(text: str) -> str:
    return to_small_caps(text)
'''

# ════════════════════════════════════════════════════════════════════════════
# bubble.py
# ════════════════════════════════════════════════════════════════════════════
BUBBLE = '''\
#!/usr/bin/env python3
"""
Wrap letters and digits in outlined circles (ⓗⓔⓛⓛⓞ), keeping their case.
"""
from text_styles import to_bubble_text


def transform(text: str) -> str:
    return to_bubble_text(text)
'''

# ════════════════════════════════════════════════════════════════════════════
# circle.py
# ════════════════════════════════════════════════════════════════════════════
CIRCLE = '''\
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
'''

# ════════════════════════════════════════════════════════════════════════════
# big_text.py
# ════════════════════════════════════════════════════════════════════════════
BIG_TEXT = '''\
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
'''

# ════════════════════════════════════════════════════════════════════════════
# ascii_art.py
# ════════════════════════════════════════════════════════════════════════════
ASCII_ART = '''\
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
    lines = text.splitlines() if MULTILINE else [text.replace("\\n", " ")]
    lines = [ln for ln in lines if ln.strip()] or [""]

    blocks = ["\\n".join(to_ascii_art(line)) for line in lines]
    separator = "\\n" * (LINE_SEPARATOR + 1)
    return separator.join(blocks)
'''

# ════════════════════════════════════════════════════════════════════════════
# glitch.py
# ════════════════════════════════════════════════════════════════════════════
GLITCH = '''\
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
'''

# ════════════════════════════════════════════════════════════════════════════
# cursed.py
# ════════════════════════════════════════════════════════════════════════════
CURSED = '''\
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
'''

# ════════════════════════════════════════════════════════════════════════════
# transforms.ini
# ════════════════════════════════════════════════════════════════════════════
TRANSFORMS_INI = '''\
; glyphclip plugin settings and chains

[transform:glitch]
INTENSITY = 2

[transform:cursed]
INTENSITY = 3

[transform:big_text]
SIZE = big

[transform:circle]
STYLE = outlined

[chain:flipped_small_caps]
description = Small caps, then flip upside down
steps = small_caps, upside_down

[chain:glitched_bubbles]
description = Bubble letters with a light glitch on top
steps = bubble, glitch
'''


# ════════════════════════════════════════════════════════════════════════════
# Writer
# ════════════════════════════════════════════════════════════════════════════

FILES = {
    "upside_down.py":  UPSIDE_DOWN,
    "reverse.py":      REVERSE,
    "small_caps.py":   SMALL_CAPS,
    "bubble.py":       BUBBLE,
    "circle.py":       CIRCLE,
    "big_text.py":     BIG_TEXT,
    "ascii_art.py":    ASCII_ART,
    "glitch.py":       GLITCH,
    "cursed.py":       CURSED,
    "transforms.ini":  TRANSFORMS_INI,
}


def write_transforms(out_dir, overwrite: bool = True) -> list:
    """
    Write every plugin script and the starter ini into out_dir.
    With overwrite=False, files that already exist are left alone.
    Returns the paths actually written.
    """
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    written = []
    for name, code in FILES.items():
        p = out / name
        if p.exists() and not overwrite:
            continue
        p.write_text(code, encoding="utf-8")
        written.append(p)
    return written


def main():
    parser = argparse.ArgumentParser(description="Write the glyphclip style plugins.")
    parser.add_argument("--out", "-o",
                        default=str(Path(__file__).parent / "transforms"),
                        help="Target folder (default: <script dir>/transforms).")
    parser.add_argument("--keep", action="store_true",
                        help="Do not overwrite files that already exist.")
    args = parser.parse_args()

    written = write_transforms(args.out, overwrite=not args.keep)
    for p in written:
        print(f"  wrote {p}")
    print(f"\nDone. {len(written)} file(s) written to {args.out}/")


if __name__ == "__main__":
    main()
