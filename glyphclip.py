#!/usr/bin/env python3
"""
glyphclip.py - Fancy-text clipboard styler

Watches the clipboard (or a hotkey, or the input box), runs the text through a
chain of style plugins (upside down, small caps, bubble, block letters, glitch
and friends) and writes the styled result back to the clipboard as plain
text, an HTML snippet, an SVG or Markdown.

Features:
  - Single styles or multi-step chains
  - Chain definitions and per-style settings loaded from transforms.ini
  - Dry run mode with a preview pane and save-to-file (txt, html, svg)
  - Folder-based style picker with live rescan
  - Optional SQLite log (--log-db), browsable with log_browser.py
  - Headless one-shot mode (--apply) for scripts and terminals

Usage:
    python glyphclip.py [--script glitch] [--transforms ./transforms]
                        [--hotkey ctrl+shift+g] [--poll 0.5] [--log-db]
    python glyphclip.py --script upside_down --apply "hello world"
                        [--format text|html|svg|markdown]

Plugin API:
    def transform(text: str) -> str: ...
    Module-level docstring shown as description in UI.
"""

import argparse
import sys
import time
import threading
import traceback
from datetime import datetime
from pathlib import Path

import pyperclip

from exporters import DOWNLOAD_FORMATS, OutputFormat, format_output, save_output
from make_transforms import write_transforms
from registry import (
    StepError,
    find_entry,
    load_ini,
    load_transform,
    get_transform_overrides,
    resolve_steps,
    run_steps,
    scan_transforms,
)

try:
    import tkinter as tk
    from tkinter import filedialog, scrolledtext, ttk
    TK_AVAILABLE = True
except ImportError:
    TK_AVAILABLE = False

try:
    import keyboard
    KEYBOARD_AVAILABLE = True
except ImportError:
    KEYBOARD_AVAILABLE = False

# A source checkout carries its own transforms/ folder; an installed copy
# keeps its styles and log under ~/.glyphclip instead of site-packages.
APP_DIR            = Path.home() / ".glyphclip"
_BUNDLED           = Path(__file__).parent / "transforms"
DEFAULT_TRANSFORMS = str(_BUNDLED if _BUNDLED.is_dir() else APP_DIR / "transforms")

# ── Colours ───────────────────────────────────────────────────────────────────
C = {
    "bg_dark":   "#1e2127",
    "bg_mid":    "#282a36",
    "bg_input":  "#44475a",
    "bg_log":    "#21222c",
    "fg":        "#f8f8f2",
    "fg_dim":    "#6272a4",
    "fg_accent": "#8be9fd",
    "fg_purple": "#bd93f9",
    "ok":        "#50fa7b",
    "err":       "#ff5555",
    "warn":      "#ffb86c",
    "dry":       "#ffb86c",   # orange dot in dry-run mode
    "chain":     "#bd93f9",
}

BUTTON = dict(bg=C["bg_input"], fg=C["fg"], relief="flat",
              activebackground=C["fg_dim"], cursor="hand2", padx=6)


# ─── Tooltip ──────────────────────────────────────────────────────────────────

class Tooltip:
    def __init__(self, widget, text_fn):
        self._widget  = widget
        self._text_fn = text_fn
        self._win     = None
        widget.bind("<Enter>",       self._show)
        widget.bind("<Leave>",       self._hide)
        widget.bind("<ButtonPress>", self._hide)

    def _show(self, _event=None):
        text = self._text_fn()
        if not text:
            return
        x = self._widget.winfo_rootx()
        y = self._widget.winfo_rooty() + self._widget.winfo_height() + 4
        self._win = tw = tk.Toplevel(self._widget)
        tw.wm_overrideredirect(True)
        tw.wm_geometry(f"+{x}+{y}")
        tk.Label(
            tw, text=text, justify=tk.LEFT,
            background=C["bg_mid"], foreground=C["fg"],
            relief=tk.FLAT, font=("Courier", 9),
            wraplength=460, padx=6, pady=4,
        ).pack()

    def _hide(self, _event=None):
        if self._win:
            self._win.destroy()
            self._win = None


# ─── Chain row widget ─────────────────────────────────────────────────────────

class ChainRow:
    """One row in the chain builder: [label] [combobox] [+] [-]"""

    def __init__(self, parent, app, row_index: int):
        self.app  = app
        self._var = tk.StringVar()

        self.frame = tk.Frame(parent, bg=C["bg_mid"])
        self.frame.pack(fill=tk.X, pady=1)

        self._step_lbl = tk.Label(
            self.frame, text=self._step_text(row_index),
            fg=C["fg_dim"], bg=C["bg_mid"],
            font=("Courier", 9), width=8, anchor="e"
        )
        self._step_lbl.pack(side=tk.LEFT, padx=(8, 2))

        self.combo = ttk.Combobox(
            self.frame, textvariable=self._var,
            state="readonly", style="Dark.TCombobox",
            font=("Courier", 9), width=30
        )
        self.combo.pack(side=tk.LEFT, padx=4)
        self.combo.bind("<<ComboboxSelected>>", lambda _e: self.app._on_row_select())
        Tooltip(self.combo, self._desc)

        tk.Button(
            self.frame, text="+", command=lambda: self.app._insert_row_after(self),
            **{**BUTTON, "fg": C["ok"], "padx": 0}, font=("Courier", 10, "bold"), width=2
        ).pack(side=tk.LEFT, padx=2)

        self._btn_del = tk.Button(
            self.frame, text="−", command=lambda: self.app._remove_row(self),
            **{**BUTTON, "fg": C["err"], "padx": 0}, font=("Courier", 10, "bold"), width=2
        )
        self._btn_del.pack(side=tk.LEFT, padx=2)

    @staticmethod
    def _step_text(index: int) -> str:
        return "Style:" if index == 0 else "  Then:"

    def update_step_label(self, index: int):
        self._step_lbl.config(text=self._step_text(index))

    def update_del_visibility(self, is_only_row: bool):
        self._btn_del.config(state=tk.DISABLED if is_only_row else tk.NORMAL,
                             fg=C["fg_dim"] if is_only_row else C["err"])

    def set_values(self, values):
        self.combo["values"] = values

    def get(self) -> str:
        return self._var.get()

    def set(self, label: str):
        self._var.set(label)

    def _desc(self) -> str:
        entry = self.app._entry_by_label(self._var.get())
        return entry["description"] if entry else ""

    def destroy(self):
        self.frame.destroy()


# ─── Main application ─────────────────────────────────────────────────────────

class GlyphClipApp:
    MAX_LOG_LINES = 300

    def __init__(self, root, transforms_folder: str, initial_script,
                 poll_interval: float, hotkey, db_logger=None):

        self.root              = root
        self.transforms_folder = transforms_folder
        self.poll_interval     = poll_interval
        self.hotkey            = hotkey
        self.db                = db_logger

        self.running           = False
        self.dry_run           = False
        self.last_clip         = ""
        self.last_result       = ""
        self.last_style        = ""
        self.transform_count   = 0
        self.error_count       = 0

        self._registry: list   = []
        self._rows: list       = []

        self._build_ui()
        self._refresh_transforms(preselect=initial_script)
        self._register_hotkey()
        self._start_polling()

    # ── UI ────────────────────────────────────────────────────────────────────

    def _build_ui(self):
        self.root.title("glyphclip")
        self.root.geometry("680x620")
        self.root.minsize(520, 420)
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)
        self.root.configure(bg=C["bg_dark"])
        self._apply_styles()

        # ── Header ────────────────────────────────────────────────────────────
        header = tk.Frame(self.root, bg=C["bg_dark"], padx=8, pady=6)
        header.pack(fill=tk.X)

        self.status_dot = tk.Label(header, text="●", fg=C["err"], bg=C["bg_dark"],
                                   font=("Courier", 14))
        self.status_dot.pack(side=tk.LEFT)
        tk.Label(header, text="glyphclip", fg=C["fg"], bg=C["bg_dark"],
                 font=("Helvetica", 12, "bold")).pack(side=tk.LEFT, padx=6)
        self.mode_label = tk.Label(header, text="[starting…]", fg=C["fg_accent"],
                                   bg=C["bg_dark"], font=("Helvetica", 10))
        self.mode_label.pack(side=tk.LEFT)

        self.toggle_btn = tk.Button(header, text="⏸ Pause", command=self._toggle, **BUTTON)
        self.toggle_btn.pack(side=tk.RIGHT, padx=3)
        tk.Button(header, text="⟳ Reload", command=self._reload_all,
                  **BUTTON).pack(side=tk.RIGHT, padx=3)
        self.dryrun_btn = tk.Button(header, text="🔍 Dry Run",
                                    command=self._toggle_dry_run, **BUTTON)
        self.dryrun_btn.pack(side=tk.RIGHT, padx=3)

        # ── Chain builder ─────────────────────────────────────────────────────
        chain_panel = tk.Frame(self.root, bg=C["bg_mid"], pady=4)
        chain_panel.pack(fill=tk.X)

        bar = tk.Frame(chain_panel, bg=C["bg_mid"])
        bar.pack(fill=tk.X, padx=8, pady=(0, 2))
        tk.Label(bar, text="Copy as:", fg=C["fg_dim"], bg=C["bg_mid"],
                 font=("Courier", 9)).pack(side=tk.LEFT)
        self.format_var = tk.StringVar(value=OutputFormat.TEXT.value)
        ttk.Combobox(
            bar, textvariable=self.format_var, state="readonly",
            style="Dark.TCombobox", font=("Courier", 9), width=10,
            values=[f.value for f in OutputFormat],
        ).pack(side=tk.LEFT, padx=4)
        tk.Button(bar, text="⟳ Rescan folder", command=self._refresh_transforms,
                  **BUTTON).pack(side=tk.RIGHT)

        self._rows_frame = tk.Frame(chain_panel, bg=C["bg_mid"])
        self._rows_frame.pack(fill=tk.X)

        # ── Manual input ──────────────────────────────────────────────────────
        input_bar = tk.Frame(self.root, bg=C["bg_mid"], padx=8, pady=4)
        input_bar.pack(fill=tk.X)
        self.input_var = tk.StringVar()
        entry = tk.Entry(input_bar, textvariable=self.input_var, bg=C["bg_input"],
                         fg=C["fg"], insertbackground=C["fg"], relief=tk.FLAT,
                         font=("Courier", 10))
        entry.pack(side=tk.LEFT, fill=tk.X, expand=True)
        entry.bind("<Return>", lambda _e: self._apply_input())
        tk.Button(input_bar, text="▶ Apply", command=self._apply_input,
                  **BUTTON).pack(side=tk.LEFT, padx=(6, 0))

        # ── Stats bar ─────────────────────────────────────────────────────────
        stats_bar = tk.Frame(self.root, bg=C["bg_mid"], padx=8, pady=2)
        stats_bar.pack(fill=tk.X)
        self.stats_label = tk.Label(
            stats_bar, text="Styled: 0  |  Errors: 0  |  Chain: —",
            fg=C["fg_dim"], bg=C["bg_mid"], font=("Courier", 9)
        )
        self.stats_label.pack(side=tk.LEFT)

        # ── Log ───────────────────────────────────────────────────────────────
        log_frame = tk.Frame(self.root, bg=C["bg_log"])
        log_frame.pack(fill=tk.BOTH, expand=True, padx=4, pady=(4, 0))
        self.log = scrolledtext.ScrolledText(
            log_frame, bg=C["bg_log"], fg=C["fg"], font=("Courier", 9),
            state=tk.DISABLED, wrap=tk.WORD, relief=tk.FLAT,
        )
        self.log.pack(fill=tk.BOTH, expand=True)
        for tag, colour in [
            ("ts", C["fg_dim"]), ("ok", C["ok"]), ("err", C["err"]),
            ("info", C["fg_accent"]), ("warn", C["warn"]),
            ("preview", C["fg_purple"]), ("chain", C["chain"]),
        ]:
            self.log.tag_config(tag, foreground=colour)

        # ── Preview pane (shown in dry run) ───────────────────────────────────
        self._preview_frame = tk.Frame(self.root, bg=C["bg_dark"])
        preview_header = tk.Frame(self._preview_frame, bg=C["bg_dark"], padx=8, pady=3)
        preview_header.pack(fill=tk.X)
        tk.Label(preview_header, text="🔍 Dry Run Preview", fg=C["dry"],
                 bg=C["bg_dark"], font=("Courier", 9, "bold")).pack(side=tk.LEFT)

        tk.Button(preview_header, text="📋 Copy", command=self._copy_preview,
                  **BUTTON).pack(side=tk.RIGHT)
        tk.Button(preview_header, text="✕ Clear", command=self._clear_preview,
                  **BUTTON).pack(side=tk.RIGHT, padx=4)
        tk.Button(preview_header, text="💾 Save", command=self._save_preview,
                  **BUTTON).pack(side=tk.RIGHT)
        self.save_ext_var = tk.StringVar(value="txt")
        ttk.Combobox(
            preview_header, textvariable=self.save_ext_var, state="readonly",
            style="Dark.TCombobox", font=("Courier", 9), width=5,
            values=list(DOWNLOAD_FORMATS),
        ).pack(side=tk.RIGHT, padx=4)

        self.preview_text = scrolledtext.ScrolledText(
            self._preview_frame, bg="#1a1b26", fg=C["ok"],
            font=("Courier", 9), wrap=tk.NONE, relief=tk.FLAT, height=8,
        )
        self.preview_text.pack(fill=tk.BOTH, expand=True, padx=4, pady=(0, 4))

        # ── Status bar ────────────────────────────────────────────────────────
        self.statusbar = tk.Label(self.root, text="Ready", anchor=tk.W,
                                  bg=C["bg_dark"], fg=C["fg_dim"],
                                  font=("Courier", 9), padx=6)
        self.statusbar.pack(fill=tk.X, side=tk.BOTTOM)

    def _apply_styles(self):
        style = ttk.Style()
        style.theme_use("clam")
        style.configure(
            "Dark.TCombobox",
            fieldbackground=C["bg_input"], background=C["bg_input"],
            foreground=C["fg"], selectbackground=C["fg_dim"],
            selectforeground=C["fg"], arrowcolor=C["fg"],
        )
        style.map("Dark.TCombobox", fieldbackground=[("readonly", C["bg_input"])])

    # ── Chain row management ──────────────────────────────────────────────────

    def _all_labels(self) -> list:
        return [t["label"] for t in self._registry]

    def _entry_by_label(self, label: str):
        return next((t for t in self._registry if t["label"] == label), None)

    def _add_row(self, label: str = "") -> ChainRow:
        row = ChainRow(self._rows_frame, self, len(self._rows))
        row.set_values(self._all_labels())
        row.set(label or next(iter(self._all_labels()), ""))
        self._rows.append(row)
        self._refresh_row_labels()
        return row

    def _insert_row_after(self, after_row: ChainRow):
        idx = self._rows.index(after_row)
        labels = [r.get() for r in self._rows]
        labels.insert(idx + 1, next(iter(self._all_labels()), ""))
        self._set_chain_rows(labels)
        self._on_row_select()

    def _remove_row(self, row: ChainRow):
        if len(self._rows) <= 1:
            return
        idx = self._rows.index(row)
        row.destroy()
        self._rows.pop(idx)
        self._refresh_row_labels()
        self._on_row_select()

    def _refresh_row_labels(self):
        only = len(self._rows) == 1
        for i, row in enumerate(self._rows):
            row.update_step_label(i)
            row.update_del_visibility(only)

    def _set_chain_rows(self, labels: list):
        for r in self._rows:
            r.destroy()
        self._rows = []
        for lbl in labels:
            self._add_row(lbl)
        if not self._rows:
            self._add_row()
        self._refresh_row_labels()

    def _on_row_select(self):
        """A chain picked on the first row expands into its individual steps."""
        if not self._rows:
            return
        entry = self._entry_by_label(self._rows[0].get())
        if entry and entry.get("is_chain"):
            steps = resolve_steps(self._registry, entry["name"],
                                  warn=lambda m: self._log(m, "warn"))
            if steps:
                self._set_chain_rows([s["label"] for s in steps])
                self._log(f"Loaded chain '{entry['name']}': "
                          + " → ".join(s["label"] for s in steps), "chain")
        self._update_stats()

    # ── Style registry ────────────────────────────────────────────────────────

    def _refresh_transforms(self, preselect=None):
        prev_labels = [r.get() for r in self._rows]
        cfg = load_ini(self.transforms_folder)
        self._registry = scan_transforms(self.transforms_folder, cfg)

        all_labels = self._all_labels()
        scripts = [t for t in self._registry if not t.get("is_chain")]
        good  = sum(1 for t in scripts if t["fn"] is not None)
        bad   = len(scripts) - good
        nchai = len(self._registry) - len(scripts)

        msg = f"Scanned '{self.transforms_folder}': {good} styles"
        if nchai:
            msg += f", {nchai} chain(s)"
        if bad:
            msg += f", {bad} failed"
        self._log(msg, "warn" if bad else "info")

        for row in self._rows:
            row.set_values(all_labels)

        if not self._rows:
            entry = find_entry(self._registry, Path(preselect).stem) if preselect else None
            self._add_row(entry["label"] if entry else "")
            if entry and entry.get("is_chain"):
                self._on_row_select()
        else:
            for row, prev in zip(self._rows, prev_labels):
                if prev in all_labels:
                    row.set(prev)

        self._refresh_row_labels()
        self._update_stats()
        self._reseed_clipboard()

    def _get_active_steps(self) -> list:
        steps = []
        for row in self._rows:
            entry = self._entry_by_label(row.get())
            if entry and not entry.get("is_chain"):
                steps.append(entry)
        return steps

    def _reload_all(self):
        """Hot-reload every style in the current chain from disk."""
        cfg = load_ini(self.transforms_folder)
        reloaded = 0
        for step in self._get_active_steps():
            try:
                overrides = get_transform_overrides(cfg, step["name"])
                step["fn"], _path, step["description"] = load_transform(step["path"], overrides)
                reloaded += 1
            except Exception as exc:
                self._log(f"Reload failed [{step['name']}]: {exc}", "err")
        self._log(f"Reloaded {reloaded} style(s)", "ok")
        self._set_status("Reloaded OK")

    # ── Logging ───────────────────────────────────────────────────────────────

    def _chain_name(self) -> str:
        return " → ".join(s["name"] for s in self._get_active_steps())

    def _log(self, message: str, tag: str = "info"):
        # Preview lines quote clipboard text; keep them out of the DB.
        if self.db and tag != "preview":
            self.db.log(message, tag, style_name=self._chain_name() if self._rows else "")

        def _write():
            self.log.config(state=tk.NORMAL)
            ts = datetime.now().strftime("%H:%M:%S")
            self.log.insert(tk.END, f"[{ts}] ", "ts")
            self.log.insert(tk.END, f"{message}\n", tag)
            line_count = int(self.log.index("end-1c").split(".")[0])
            if line_count > self.MAX_LOG_LINES:
                self.log.delete("1.0", f"{line_count - self.MAX_LOG_LINES}.0")
            self.log.config(state=tk.DISABLED)
            self.log.see(tk.END)
        self.root.after(0, _write)

    def _update_stats(self):
        text = (
            f"Styled: {self.transform_count}  |  "
            f"Errors: {self.error_count}  |  "
            f"Chain: {self._chain_name() or '—'}"
        )
        self.root.after(0, lambda: self.stats_label.config(text=text))

    def _set_status(self, text: str):
        self.root.after(0, lambda: self.statusbar.config(text=text))

    # ── Preview pane ──────────────────────────────────────────────────────────

    def _show_preview(self, text: str):
        def _write():
            self.preview_text.config(state=tk.NORMAL)
            self.preview_text.delete("1.0", tk.END)
            self.preview_text.insert(tk.END, text)
            self.preview_text.config(state=tk.DISABLED)
        self.root.after(0, _write)

    def _clear_preview(self):
        self._show_preview("")
        self.last_result = ""

    def _copy_preview(self):
        content = self.preview_text.get("1.0", tk.END).rstrip("\n")
        if content:
            self._copy(content)
            self._log("Preview content copied to clipboard", "ok")
            self._set_status("Preview copied to clipboard")

    def _save_preview(self):
        if not self.last_result:
            self._log("Nothing to save — run a style first", "warn")
            return
        folder = filedialog.askdirectory(title="Save styled text to…")
        if not folder:
            return
        try:
            path = save_output(self.last_result, folder, self.last_style,
                               self.save_ext_var.get())
        except (OSError, ValueError) as exc:
            self._log(f"Save failed: {exc}", "err")
            return
        self._log(f"Saved {path}", "ok")
        self._set_status(f"Saved {path.name}")

    def _toggle_dry_run(self):
        self.dry_run = not self.dry_run
        if self.dry_run:
            self.dryrun_btn.config(bg="#6d4c00", fg=C["warn"])
            self.status_dot.config(fg=C["dry"])
            self._preview_frame.pack(fill=tk.BOTH, padx=4, pady=(0, 4),
                                     before=self.statusbar)
            self._log("Dry run ON — output goes to preview pane, not clipboard", "warn")
            self._set_status("DRY RUN active")
        else:
            self.dryrun_btn.config(bg=C["bg_input"], fg=C["fg"])
            self.status_dot.config(fg=C["ok"] if self.running else C["err"])
            self._preview_frame.pack_forget()
            self._log("Dry run OFF — output goes to clipboard", "info")
            self._set_status("Running" if self.running else "Paused")

    # ── Chain execution ───────────────────────────────────────────────────────

    def _copy(self, text: str):
        # Remember our own write so the poller does not style it again.
        self.last_clip = text
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            self._log(f"Clipboard write failed: {exc}", "err")

    def _apply_input(self):
        text = self.input_var.get()
        if text:
            self._run_chain(text, source="input box")
        else:
            self._log("Input box is empty", "warn")

    def _run_chain(self, clip_text: str, source: str = "clipboard"):
        steps = self._get_active_steps()
        if not steps:
            self._log("No styles active — add steps to the chain", "warn")
            return

        chain_label = self._chain_name()
        self._log(f"▶ [{chain_label}] via {source}", "chain" if len(steps) > 1 else "info")
        preview_in = clip_text[:80].replace("\n", "↵")
        self._log(f"   In:  {preview_in!r}{'…' if len(clip_text) > 80 else ''}", "preview")

        try:
            result = run_steps(steps, clip_text, log=self._log)
        except StepError as exc:
            self._log(f"  ✗ {exc}", "err")
            self._log("".join(traceback.format_exception(exc.original)), "err")
            self.error_count += 1
            self._update_stats()
            self._set_status(str(exc))
            return

        self.last_result = result
        self.last_style  = steps[-1]["name"]
        output = format_output(result, self.format_var.get(), self.last_style)

        preview_out = output[:80].replace("\n", "↵")
        self._log(f"   Out: {preview_out!r}{'…' if len(output) > 80 else ''}", "preview")

        stamp = datetime.now().strftime("%H:%M:%S")
        if self.dry_run:
            self._log(f"  🔍 Dry run — {len(output)} chars sent to preview pane", "warn")
            self._show_preview(output)
            self._set_status(f"Dry run OK [{chain_label}] @ {stamp}")
        else:
            self._copy(output)
            self._log(f"  ✓ {len(output)} chars written to clipboard", "ok")
            self._set_status(f"OK [{chain_label}] @ {stamp}")

        self.transform_count += 1
        self._update_stats()

    # ── Polling ───────────────────────────────────────────────────────────────

    def _reseed_clipboard(self):
        try:
            self.last_clip = pyperclip.paste()
        except pyperclip.PyperclipException as exc:
            self._log(f"Clipboard read error: {exc}", "warn")

    def _start_polling(self):
        if self.hotkey:
            self.mode_label.config(text=f"[hotkey: {self.hotkey}]")
        else:
            self.mode_label.config(text=f"[polling every {self.poll_interval}s]")

        self.running = True
        self.status_dot.config(fg=C["ok"])
        self.toggle_btn.config(text="⏸ Pause")

        if not self.hotkey:
            def _poll():
                self._reseed_clipboard()
                while True:
                    if not self.running:
                        time.sleep(0.2)
                        continue
                    try:
                        current = pyperclip.paste()
                        if current and current != self.last_clip:
                            self.last_clip = current
                            self._run_chain(current, source="clipboard change")
                    except pyperclip.PyperclipException as exc:
                        self._log(f"Clipboard read error: {exc}", "warn")
                    time.sleep(self.poll_interval)

            threading.Thread(target=_poll, daemon=True).start()

    # ── Hotkey ────────────────────────────────────────────────────────────────

    def _register_hotkey(self):
        if not self.hotkey:
            return
        if not KEYBOARD_AVAILABLE:
            self._log("'keyboard' not installed — hotkey disabled. pip install keyboard", "warn")
            self.hotkey = None
            return

        def _on_hotkey():
            try:
                clip = pyperclip.paste()
            except pyperclip.PyperclipException as exc:
                self._log(f"Hotkey error: {exc}", "err")
                return
            if clip:
                self._run_chain(clip, source=f"hotkey ({self.hotkey})")
            else:
                self._log("Hotkey pressed but clipboard is empty", "warn")

        try:
            keyboard.add_hotkey(self.hotkey, _on_hotkey)
        except (ImportError, OSError, ValueError) as exc:
            self._log(f"Hotkey registration failed: {exc}", "err")
            self.hotkey = None
            return
        self._log(f"Hotkey registered: {self.hotkey}", "ok")

    # ── Controls ──────────────────────────────────────────────────────────────

    def _toggle(self):
        self.running = not self.running
        if self.running:
            self.toggle_btn.config(text="⏸ Pause")
            self.status_dot.config(fg=C["dry"] if self.dry_run else C["ok"])
            self._log("Resumed", "ok")
            self._set_status("Running")
            self._reseed_clipboard()
        else:
            self.toggle_btn.config(text="▶ Resume")
            self.status_dot.config(fg=C["err"])
            self._log("Paused", "warn")
            self._set_status("Paused")

    def _on_close(self):
        if KEYBOARD_AVAILABLE and self.hotkey:
            try:
                keyboard.remove_hotkey(self.hotkey)
            except KeyError:
                pass
        if self.db:
            self.db.stop()
        self.root.destroy()


# ─── Headless mode ────────────────────────────────────────────────────────────

def ensure_transforms(folder: str) -> bool:
    """Write the default style plugins into folder unless it already exists."""
    if Path(folder).is_dir():
        return False
    write_transforms(folder)
    return True


def run_once(transforms_folder: str, name: str, text: str,
             fmt: str = OutputFormat.TEXT.value, err=sys.stderr) -> str:
    """
    Run one style or chain over text without any GUI and return the
    formatted output. name is a registry name, or the path of a plugin
    script, which is loaded directly with the overrides from the
    transforms.ini next to it. A path that is not a file falls back to
    its stem. Raises LookupError when nothing matches name.
    """
    script = Path(name)
    if script.suffix == ".py" and script.is_file():
        cfg = load_ini(str(script.parent))
        try:
            fn, _path, _desc = load_transform(str(script),
                                              get_transform_overrides(cfg, script.stem))
        except Exception as exc:
            raise LookupError(f"Could not load '{name}': {exc}") from exc
        steps = [{"name": script.stem, "fn": fn}]
    else:
        registry = scan_transforms(transforms_folder, load_ini(transforms_folder))
        steps = resolve_steps(registry, script.stem,
                              warn=lambda m: print(f"[glyphclip] {m}", file=err))
        if not steps:
            available = ", ".join(t["name"] for t in registry) or "none"
            raise LookupError(f"No style or chain named '{name}' (available: {available})")
    result = run_steps(steps, text)
    return format_output(result, fmt, steps[-1]["name"])


# ─── Entry point ──────────────────────────────────────────────────────────────

def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Fancy-text clipboard styler with chaining, dry run, and ini config."
    )
    parser.add_argument("--script", "-s", default=None,
                        help="Style or chain to pre-select (name, or plugin path "
                             "for --apply).")
    parser.add_argument("--transforms", "-t", default=DEFAULT_TRANSFORMS,
                        help="Folder to scan, created with the default styles if "
                             "missing (default: <script dir>/transforms, or "
                             "~/.glyphclip/transforms when installed).")
    parser.add_argument("--hotkey", "-k", default=None,
                        help="Hotkey to trigger manually (e.g. ctrl+shift+g). "
                             "Requires: pip install keyboard")
    parser.add_argument("--poll", "-p", type=float, default=0.5,
                        help="Poll interval in seconds (default: 0.5).")
    parser.add_argument("--log-db", action="store_true",
                        help="Also write the log to glyphclip.db next to the transforms folder.")
    parser.add_argument("--apply", "-a", metavar="TEXT", default=None,
                        help="Style TEXT once with --script, print it and exit.")
    parser.add_argument("--format", "-f", default=OutputFormat.TEXT.value,
                        choices=[f.value for f in OutputFormat],
                        help="Output format for --apply (default: text).")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    if ensure_transforms(args.transforms):
        print(f"[glyphclip] wrote default styles to {args.transforms}", file=sys.stderr)

    if args.apply is not None:
        if not args.script:
            print("[glyphclip] --apply needs --script", file=sys.stderr)
            return 2
        try:
            print(run_once(args.transforms, args.script, args.apply, args.format))
        except (LookupError, StepError) as exc:
            print(f"[glyphclip] {exc}", file=sys.stderr)
            return 1
        return 0

    if not TK_AVAILABLE:
        print("tkinter not available - install python3-tk", file=sys.stderr)
        return 1

    db = None
    if args.log_db:
        from db_logger import DBLogger
        db = DBLogger(str(Path(args.transforms).parent), transforms_folder=args.transforms)

    root = tk.Tk()
    GlyphClipApp(
        root,
        transforms_folder=args.transforms,
        initial_script=args.script,
        poll_interval=args.poll,
        hotkey=args.hotkey,
        db_logger=db,
    )
    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
