#!/usr/bin/env python3
"""
exporters.py — wrap styled text for pasting or saving elsewhere.

The text styles produce plain strings; this module decorates them as an HTML
snippet, an SVG image or a Markdown fragment, and writes download files named
<style>-<epoch ms>.<ext>.
"""

import time
from enum import Enum
from html import escape
from pathlib import Path

from text_styles import MULTILINE_STYLES, coerce_choice

BG_COLOUR = "#111827"
FG_COLOUR = "#34D399"

# Markdown suffix per style when rendered as a blockquote.
MARKDOWN_SUFFIX = {
    "upside_down": " 🙃",
    "glitch":      " ⚡",
    "small_caps":  " ᴛᴇxᴛ",
}

FILE_STEMS = {
    "upside_down": "upside-down-text",
    "small_caps":  "small-caps",
    "big_text":    "block-text",
    "ascii_art":   "ascii-art",
    "glitch":      "glitch-text",
    "cursed":      "cursed-text",
    "bubble":      "bubble-text",
    "circle":      "circle-text",
    "reverse":     "reverse-text",
}

_CURSED_SVG_STYLE = """<style>
    @keyframes float {
      0% { transform: translateY(0px) rotate(0deg); }
      50% { transform: translateY(-5px) rotate(1deg); }
      100% { transform: translateY(0px) rotate(0deg); }
    }
    .cursed { animation: float 3s ease-in-out infinite; }
  </style>"""


class OutputFormat(str, Enum):
    TEXT     = "text"
    HTML     = "html"
    SVG      = "svg"
    MARKDOWN = "markdown"


DOWNLOAD_FORMATS = {
    "txt":  (OutputFormat.TEXT, "text/plain"),
    "html": (OutputFormat.HTML, "text/html"),
    "svg":  (OutputFormat.SVG,  "image/svg+xml"),
}


# ── Formatters ────────────────────────────────────────────────────────────────

def to_html(text: str, style: str = "") -> str:
    if style in MULTILINE_STYLES:
        return (
            f'<pre style="font-family: monospace; white-space: pre; '
            f'background: {BG_COLOUR}; color: {FG_COLOUR}; padding: 1rem; '
            f'border-radius: 0.5rem;">{escape(text)}</pre>'
        )

    font  = "serif" if style == "cursed" else "system-ui"
    extra = " font-variant: small-caps;" if style == "small_caps" else ""
    cls   = ' class="cursed-text"' if style == "cursed" else ""
    return (
        f'<div style="font-family: {font}; background: {BG_COLOUR}; '
        f'color: {FG_COLOUR}; padding: 1rem; border-radius: 0.5rem;{extra}"'
        f'{cls}>{escape(text)}</div>'
    )


def to_markdown(text: str, style: str = "") -> str:
    if style in MULTILINE_STYLES:
        return "```\n" + text + "\n```"
    if style == "cursed":
        return "`" + text + "`"
    return "> " + text + MARKDOWN_SUFFIX.get(style, "")


def to_svg(text: str, style: str = "") -> str:
    if style in MULTILINE_STYLES:
        lines  = text.split("\n")
        width  = max(len(line) for line in lines) * 8
        height = len(lines) * 16
        body = "\n".join(
            f'  <text x="0" y="{(i + 1) * 16}" xml:space="preserve">{escape(line)}</text>'
            for i, line in enumerate(lines)
        )
        return (
            f'<svg width="{width}" height="{height}" xmlns="http://www.w3.org/2000/svg">\n'
            f'  <style>text {{ font-family: monospace; font-size: 14px; }}</style>\n'
            f'{body}\n'
            f'</svg>'
        )

    if style == "cursed":
        head = _CURSED_SVG_STYLE
        attr = ' class="cursed"'
    else:
        variant = " font-variant: small-caps;" if style == "small_caps" else ""
        head = f"<style>text {{ font-family: system-ui; font-size: 24px;{variant} }}</style>"
        attr = ""
    return (
        f'<svg width="{len(text) * 14}" height="40" xmlns="http://www.w3.org/2000/svg">\n'
        f'  {head}\n'
        f'  <text x="10" y="30" fill="{FG_COLOUR}"{attr}>{escape(text)}</text>\n'
        f'</svg>'
    )


_FORMATTERS = {
    OutputFormat.HTML:     to_html,
    OutputFormat.SVG:      to_svg,
    OutputFormat.MARKDOWN: to_markdown,
}


def format_output(text: str, fmt=OutputFormat.TEXT, style: str = "") -> str:
    """Wrap text in the requested output format. Unknown formats give plain text."""
    fmt = coerce_choice(OutputFormat, fmt, OutputFormat.TEXT)
    formatter = _FORMATTERS.get(fmt)
    return formatter(text, style) if formatter else text


# ── Downloads ─────────────────────────────────────────────────────────────────

def download_filename(style: str, ext: str, now: float = None) -> str:
    stem = FILE_STEMS.get(style) or (style.replace("_", "-") or "text")
    millis = int((time.time() if now is None else now) * 1000)
    return f"{stem}-{millis}.{ext}"


def save_output(text: str, folder: str, style: str, ext: str, now: float = None) -> Path:
    """
    Format text for the given download extension (txt, html, svg) and write
    it into folder. Returns the path written.
    """
    if ext not in DOWNLOAD_FORMATS:
        raise ValueError(
            f"Unsupported download format '{ext}' "
            f"(expected one of: {', '.join(DOWNLOAD_FORMATS)})"
        )
    fmt, _mime = DOWNLOAD_FORMATS[ext]
    path = Path(folder) / download_filename(style, ext, now)
    path.write_text(format_output(text, fmt, style), encoding="utf-8")
    return path
