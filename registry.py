#!/usr/bin/env python3
"""
registry.py — discovers glyphclip style plugins and chains.

A plugin is any .py file in the transforms folder (not starting with "_")
that defines:

    def transform(text: str) -> str: ...

Its module docstring becomes the description shown in the UI.

transforms.ini format:
    [transform:glitch]             # matches filename stem glitch.py
    INTENSITY = 4

    [chain:flipped_caps]
    description = Small caps, then flip upside down
    steps = small_caps, upside_down

Override values are applied as module-level attributes before use, coerced
to int, then float, then bool (true/false/yes/no/on/off), then None for
"none", otherwise left as a string.
"""

import configparser
import importlib.util
from pathlib import Path

INI_NAME = "transforms.ini"


class StepError(Exception):
    """A chain step raised; wraps the original exception."""

    def __init__(self, step_name: str, index: int, original: Exception):
        super().__init__(f"Error in [{step_name}]: {original}")
        self.step_name = step_name
        self.index     = index
        self.original  = original


# ─── INI loader ──────────────────────────────────────────────────────────────

def load_ini(folder: str) -> configparser.ConfigParser:
    """Load transforms.ini from the transforms folder if it exists."""
    # Keep key case so INTENSITY stays INTENSITY on the module.
    cfg = configparser.ConfigParser()
    cfg.optionxform = str
    ini_path = Path(folder) / INI_NAME
    if ini_path.exists():
        cfg.read(ini_path, encoding="utf-8")
    return cfg


def get_transform_overrides(cfg: configparser.ConfigParser, stem: str) -> dict:
    """Return key/value overrides for a plugin from transforms.ini."""
    section = f"transform:{stem}"
    if cfg.has_section(section):
        return dict(cfg[section])
    return {}


def coerce_value(value):
    for cast in (int, float):
        try:
            return cast(value)
        except (ValueError, TypeError):
            pass
    if isinstance(value, str) and value.lower() in configparser.ConfigParser.BOOLEAN_STATES:
        return configparser.ConfigParser.BOOLEAN_STATES[value.lower()]
    if isinstance(value, str) and value.lower() == "none":
        return None
    return value


def get_chains(cfg: configparser.ConfigParser) -> list:
    """
    Return chain definitions from transforms.ini.
    Each item: {name, label, description, steps: [str], is_chain: True}
    """
    chains = []
    for section in cfg.sections():
        if section.startswith("chain:"):
            name  = section[len("chain:"):]
            raw   = cfg.get(section, "steps", fallback="")
            chains.append({
                "name":        name,
                "label":       f"⛓ {name.replace('_', ' ').title()}",
                "description": cfg.get(section, "description", fallback=""),
                "steps":       [s.strip() for s in raw.split(",") if s.strip()],
                "is_chain":    True,
            })
    return chains


# ─── Plugin loader ────────────────────────────────────────────────────────────

def load_transform(script_path: str, overrides: dict = None):
    """
    Import a plugin script from disk.
    Returns (transform_fn, resolved_path, short_description).
    """
    path = Path(script_path).resolve()
    if not path.exists():
        raise FileNotFoundError(f"Script not found: {path}")

    spec   = importlib.util.spec_from_file_location(f"glyphclip_plugin_{path.stem}", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    if not hasattr(module, "transform"):
        raise AttributeError("Script must define a 'transform(text) -> str' function")

    for key, value in (overrides or {}).items():
        setattr(module, key, coerce_value(value))

    description = (
        (module.__doc__ or "").strip()
        or (module.transform.__doc__ or "").strip()
        or "No description."
    )
    short_desc = next(
        (ln.strip() for ln in description.splitlines() if ln.strip()), description
    )

    return module.transform, str(path), short_desc


def scan_transforms(folder: str, cfg: configparser.ConfigParser) -> list:
    """
    Scan folder for plugin scripts and append chain definitions from the ini.
    Scripts that fail to load are still listed, with fn=None and the error
    as their description.
    """
    results = []
    p = Path(folder)
    if not p.is_dir():
        return results

    for pyfile in sorted(p.glob("*.py")):
        if pyfile.name.startswith("_"):
            continue
        entry = {
            "name":     pyfile.stem,
            "label":    pyfile.stem.replace("_", " ").title(),
            "path":     str(pyfile),
            "is_chain": False,
            "steps":    [],
        }
        try:
            fn, path, desc = load_transform(str(pyfile), get_transform_overrides(cfg, pyfile.stem))
            entry.update(fn=fn, path=path, description=desc)
        except Exception as exc:
            entry.update(label=f"⚠ {pyfile.stem}", fn=None, description=f"Load error: {exc}")
        results.append(entry)

    results.extend(get_chains(cfg))
    return results


# ─── Chains ───────────────────────────────────────────────────────────────────

def find_entry(registry: list, name: str):
    return next((t for t in registry if t["name"] == name), None)


def resolve_steps(registry: list, name: str, warn=None) -> list:
    """
    Expand a script or chain name into the list of script entries to run.
    Unknown chain steps are skipped and reported through warn(message).
    """
    entry = find_entry(registry, name)
    if entry is None:
        return []
    if not entry.get("is_chain"):
        return [entry]

    steps = []
    for step_name in entry["steps"]:
        step = next(
            (t for t in registry if t["name"] == step_name and not t.get("is_chain")),
            None
        )
        if step:
            steps.append(step)
        elif warn:
            warn(f"Chain step '{step_name}' not found in registry")
    return steps


def run_steps(steps: list, text: str, log=None) -> str:
    """
    Feed text through each step in order and return the final result.

    log(message, tag) receives per-step progress. The first failing step
    raises StepError; later steps are not run.
    """
    current = text
    for i, step in enumerate(steps):
        if step.get("fn") is None:
            raise StepError(step["name"], i, RuntimeError("has no function (load error)"))
        if log and len(steps) > 1:
            log(f"  [{i + 1}/{len(steps)}] {step['name']}", "chain")
        try:
            result = step["fn"](current)
        except Exception as exc:
            raise StepError(step["name"], i, exc) from exc
        current = result if isinstance(result, str) else str(result)
    return current
