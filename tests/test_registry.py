import textwrap

import pytest

from registry import (
    StepError,
    coerce_value,
    find_entry,
    get_chains,
    get_transform_overrides,
    load_ini,
    load_transform,
    resolve_steps,
    run_steps,
    scan_transforms,
)


def write(folder, name, body):
    path = folder / name
    path.write_text(textwrap.dedent(body), encoding="utf-8")
    return path


@pytest.fixture
def plugin_dir(tmp_path):
    write(tmp_path, "shout.py", '''\
        """
        Shout the text.
        Second line is not shown.
        """

        def transform(text: str) -> str:
            return text.upper()
        ''')
    write(tmp_path, "repeat.py", '''\
        """Repeat the text FACTOR times."""
        FACTOR = 1

        def transform(text: str) -> str:
            return text * FACTOR
        ''')
    write(tmp_path, "broken.py", '''\
        """No transform here."""
        VALUE = 1
        ''')
    write(tmp_path, "_helper.py", '''\
        def transform(text):
            return text
        ''')
    write(tmp_path, "transforms.ini", """\
        [transform:repeat]
        FACTOR = 3

        [chain:loud_echo]
        description = Shout, then repeat
        steps = shout, repeat, missing
        """)
    return tmp_path


def test_scan_missing_folder_is_empty(tmp_path):
    assert scan_transforms(str(tmp_path / "nope"), load_ini(str(tmp_path))) == []


def test_scan_lists_scripts_then_chains(plugin_dir):
    registry = scan_transforms(str(plugin_dir), load_ini(str(plugin_dir)))
    assert [t["name"] for t in registry] == ["broken", "repeat", "shout", "loud_echo"]


def test_scan_reads_first_docstring_line(plugin_dir):
    registry = scan_transforms(str(plugin_dir), load_ini(str(plugin_dir)))
    shout = find_entry(registry, "shout")
    assert shout["label"] == "Shout"
    assert shout["description"] == "Shout the text."
    assert shout["fn"]("hey") == "HEY"


def test_scan_marks_load_errors(plugin_dir):
    registry = scan_transforms(str(plugin_dir), load_ini(str(plugin_dir)))
    broken = find_entry(registry, "broken")
    assert broken["fn"] is None
    assert broken["label"] == "⚠ broken"
    assert broken["description"].startswith("Load error:")


def test_ini_overrides_keep_key_case(plugin_dir):
    cfg = load_ini(str(plugin_dir))
    assert get_transform_overrides(cfg, "repeat") == {"FACTOR": "3"}
    assert get_transform_overrides(cfg, "shout") == {}

    registry = scan_transforms(str(plugin_dir), cfg)
    assert find_entry(registry, "repeat")["fn"]("ab") == "ababab"


def test_get_chains(plugin_dir):
    chains = get_chains(load_ini(str(plugin_dir)))
    assert chains == [{
        "name":        "loud_echo",
        "label":       "⛓ Loud Echo",
        "description": "Shout, then repeat",
        "steps":       ["shout", "repeat", "missing"],
        "is_chain":    True,
    }]


def test_load_transform_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_transform(str(tmp_path / "ghost.py"))


def test_load_transform_requires_transform_function(plugin_dir):
    with pytest.raises(AttributeError):
        load_transform(str(plugin_dir / "broken.py"))


def test_load_transform_applies_overrides(plugin_dir):
    fn, path, desc = load_transform(str(plugin_dir / "repeat.py"), {"FACTOR": "2"})
    assert fn("x") == "xx"
    assert path.endswith("repeat.py")
    assert desc == "Repeat the text FACTOR times."


@pytest.mark.parametrize("raw, expected", [
    ("3", 3), ("2.5", 2.5), ("yes", True), ("False", False), ("off", False),
    ("none", None), ("filled", "filled"),
])
def test_coerce_value(raw, expected):
    assert coerce_value(raw) == expected
    assert type(coerce_value(raw)) is type(expected)


def test_resolve_steps_expands_chain_and_warns(plugin_dir):
    registry = scan_transforms(str(plugin_dir), load_ini(str(plugin_dir)))
    warnings = []
    steps = resolve_steps(registry, "loud_echo", warn=warnings.append)
    assert [s["name"] for s in steps] == ["shout", "repeat"]
    assert warnings == ["Chain step 'missing' not found in registry"]


def test_resolve_steps_single_and_unknown(plugin_dir):
    registry = scan_transforms(str(plugin_dir), load_ini(str(plugin_dir)))
    assert [s["name"] for s in resolve_steps(registry, "shout")] == ["shout"]
    assert resolve_steps(registry, "nothing") == []


def test_run_steps_feeds_each_result_forward(plugin_dir):
    registry = scan_transforms(str(plugin_dir), load_ini(str(plugin_dir)))
    steps = resolve_steps(registry, "loud_echo")
    logged = []
    assert run_steps(steps, "hi", log=lambda m, t: logged.append(t)) == "HIHIHI"
    assert logged == ["chain", "chain"]


def test_run_steps_stops_at_first_failure():
    calls = []

    def boom(text):
        raise ValueError("bad input")

    steps = [
        {"name": "first", "fn": lambda t: t + "1"},
        {"name": "boom",  "fn": boom},
        {"name": "never", "fn": lambda t: calls.append(t) or t},
    ]
    with pytest.raises(StepError) as info:
        run_steps(steps, "x")
    assert info.value.step_name == "boom"
    assert info.value.index == 1
    assert isinstance(info.value.original, ValueError)
    assert calls == []


def test_run_steps_rejects_unloaded_step():
    with pytest.raises(StepError, match="load error"):
        run_steps([{"name": "broken", "fn": None}], "x")


def test_run_steps_stringifies_results():
    assert run_steps([{"name": "count", "fn": len}], "abcd") == "4"
