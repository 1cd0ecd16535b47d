import io
import textwrap
from pathlib import Path

import pytest

from glyphclip import DEFAULT_TRANSFORMS, ensure_transforms, main, parse_args, run_once
from make_transforms import FILES
from text_styles import to_big_text

REPO_TRANSFORMS = Path(__file__).resolve().parent.parent / "transforms"


def test_checkout_uses_its_own_transforms_folder():
    assert Path(DEFAULT_TRANSFORMS).resolve() == REPO_TRANSFORMS


def test_run_once_single_style():
    assert run_once(DEFAULT_TRANSFORMS, "upside_down", "abc") == "ɔqɐ"


def test_run_once_chain():
    assert run_once(DEFAULT_TRANSFORMS, "flipped_small_caps", "Hello") == "ᴏʟʟᴇʜ"


def test_run_once_formats_for_last_step():
    assert run_once(DEFAULT_TRANSFORMS, "upside_down", "abc", "markdown") == "> ɔqɐ 🙃"
    fenced = run_once(DEFAULT_TRANSFORMS, "big_text", "A", "markdown")
    assert fenced == "```\n" + to_big_text("A") + "\n```"


def test_run_once_unknown_name():
    with pytest.raises(LookupError, match="available: "):
        run_once(DEFAULT_TRANSFORMS, "sparkles", "abc", err=io.StringIO())


# ── Plugin paths ──────────────────────────────────────────────────────────────

def test_run_once_loads_plugin_path_directly(tmp_path):
    # Same stem as a registry style; the file on disk must win.
    script = tmp_path / "reverse.py"
    script.write_text(textwrap.dedent('''\
        """Shout with a configurable suffix."""
        SUFFIX = ""

        def transform(text):
            return text.upper() + SUFFIX
        '''), encoding="utf-8")
    (tmp_path / "transforms.ini").write_text("[transform:reverse]\nSUFFIX = !\n",
                                            encoding="utf-8")

    assert run_once(DEFAULT_TRANSFORMS, str(script), "abc") == "ABC!"


def test_run_once_missing_path_falls_back_to_stem(tmp_path):
    assert run_once(DEFAULT_TRANSFORMS, str(tmp_path / "nowhere" / "reverse.py"), "abc") == "cba"


def test_run_once_broken_plugin_path(tmp_path):
    script = tmp_path / "broken.py"
    script.write_text("VALUE = 1\n", encoding="utf-8")
    with pytest.raises(LookupError, match="Could not load"):
        run_once(DEFAULT_TRANSFORMS, str(script), "abc")


# ── Fresh transforms folder ───────────────────────────────────────────────────

def test_ensure_transforms_seeds_missing_folder(tmp_path):
    folder = tmp_path / "home" / "transforms"
    assert ensure_transforms(str(folder))
    assert sorted(p.name for p in folder.iterdir()) == sorted(FILES)
    assert run_once(str(folder), "glitched_bubbles", "") == ""
    assert run_once(str(folder), "small_caps", "Hi") == "ʜɪ"


def test_ensure_transforms_leaves_existing_folder(tmp_path):
    (tmp_path / "mine.py").write_text("def transform(t):\n    return t\n", encoding="utf-8")
    assert not ensure_transforms(str(tmp_path))
    assert [p.name for p in tmp_path.iterdir()] == ["mine.py"]


def test_main_seeds_folder_before_apply(tmp_path, capsys):
    folder = tmp_path / "transforms"
    assert main(["-t", str(folder), "-s", "upside_down", "-a", "abc"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "ɔqɐ\n"
    assert "wrote default styles" in captured.err
    assert (folder / "transforms.ini").is_file()


# ── CLI ───────────────────────────────────────────────────────────────────────

def test_parse_args_defaults():
    args = parse_args([])
    assert args.transforms == DEFAULT_TRANSFORMS
    assert args.poll == 0.5
    assert args.format == "text"
    assert args.apply is None
    assert not args.log_db


def test_parse_args_rejects_unknown_format():
    with pytest.raises(SystemExit):
        parse_args(["--format", "pdf"])


def test_main_apply_prints_result(capsys):
    assert main(["--script", "upside_down", "--apply", "abc"]) == 0
    assert capsys.readouterr().out == "ɔqɐ\n"


def test_main_apply_with_format(capsys):
    assert main(["-s", "small_caps", "-a", "hi", "-f", "html"]) == 0
    out = capsys.readouterr().out
    assert "font-variant: small-caps;" in out
    assert "ʜɪ" in out


def test_main_apply_unknown_style(capsys):
    assert main(["--script", "sparkles", "--apply", "abc"]) == 1
    assert "No style or chain named 'sparkles'" in capsys.readouterr().err


def test_main_apply_needs_script(capsys):
    assert main(["--apply", "abc"]) == 2
    assert "--apply needs --script" in capsys.readouterr().err
