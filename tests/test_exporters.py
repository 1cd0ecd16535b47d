import pytest

from exporters import (
    DOWNLOAD_FORMATS,
    OutputFormat,
    download_filename,
    format_output,
    save_output,
)
from text_styles import to_big_text


def test_text_format_is_verbatim():
    assert format_output("ɔqɐ", OutputFormat.TEXT, "upside_down") == "ɔqɐ"


def test_unknown_format_falls_back_to_text():
    assert format_output("hi", "pdf", "glitch") == "hi"


@pytest.mark.parametrize("style, expected", [
    ("upside_down", "> hi 🙃"),
    ("glitch",      "> hi ⚡"),
    ("small_caps",  "> hi ᴛᴇxᴛ"),
    ("bubble",      "> hi"),
    ("cursed",      "`hi`"),
])
def test_markdown_decorations(style, expected):
    assert format_output("hi", "markdown", style) == expected


def test_markdown_fences_block_text():
    block = to_big_text("A")
    assert format_output(block, OutputFormat.MARKDOWN, "big_text") == "```\n" + block + "\n```"


def test_html_escapes_content():
    out = format_output("<b>&", "html", "reverse")
    assert "&lt;b&gt;&amp;" in out
    assert out.startswith('<div style="font-family: system-ui;')


def test_html_small_caps_and_cursed_variants():
    assert "font-variant: small-caps;" in format_output("x", "html", "small_caps")
    cursed = format_output("x", "html", "cursed")
    assert 'class="cursed-text"' in cursed
    assert "font-family: serif" in cursed


def test_html_block_styles_use_pre():
    out = format_output("a\nb", "html", "ascii_art")
    assert out.startswith("<pre ")
    assert ">a\nb</pre>" in out


def test_svg_single_line_width_follows_length():
    out = format_output("hi", "svg", "glitch")
    assert '<svg width="28" height="40"' in out
    assert '<text x="10" y="30" fill="#34D399">hi</text>' in out


def test_svg_cursed_carries_animation():
    out = format_output("boo", "svg", "cursed")
    assert "@keyframes float" in out
    assert 'class="cursed"' in out


def test_svg_multiline_one_text_per_row():
    out = format_output("ab\ncd e", "svg", "big_text")
    assert '<svg width="32" height="32"' in out
    assert 'y="16" xml:space="preserve">ab</text>' in out
    assert 'y="32" xml:space="preserve">cd e</text>' in out


def test_download_formats():
    assert set(DOWNLOAD_FORMATS) == {"txt", "html", "svg"}
    assert DOWNLOAD_FORMATS["svg"] == (OutputFormat.SVG, "image/svg+xml")


def test_download_filename():
    assert download_filename("glitch", "svg", now=1700000000.0) == "glitch-text-1700000000000.svg"
    assert download_filename("my_style", "txt", now=1.5) == "my-style-1500.txt"
    assert download_filename("", "txt", now=0) == "text-0.txt"


def test_save_output_writes_formatted_file(tmp_path):
    path = save_output("hi", tmp_path, "upside_down", "html", now=2.0)
    assert path == tmp_path / "upside-down-text-2000.html"
    assert path.read_text(encoding="utf-8") == format_output("hi", "html", "upside_down")


def test_save_output_txt_is_plain(tmp_path):
    path = save_output("ʜɪ", tmp_path, "small_caps", "txt", now=3.0)
    assert path.read_text(encoding="utf-8") == "ʜɪ"


def test_save_output_rejects_unknown_extension(tmp_path):
    with pytest.raises(ValueError):
        save_output("hi", tmp_path, "glitch", "md")
