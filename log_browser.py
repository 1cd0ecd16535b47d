#!/usr/bin/env python3
"""
log_browser.py — log browser window for glyphclip (PySide6).

Reads the SQLite log written when glyphclip runs with --log-db. Shows every
entry with session, tag and style filters, the full message of the selected
row, and refreshes itself every two seconds.

Usage:
    python log_browser.py [--folder <dir containing glyphclip.db>]
"""

import argparse
import sys
from pathlib import Path

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QAbstractItemView, QApplication, QComboBox, QDialog, QHBoxLayout,
    QHeaderView, QLabel, QPushButton, QSplitter, QTableWidget,
    QTableWidgetItem, QTextEdit, QVBoxLayout, QWidget,
)

from db_logger import DBLogger

C = {
    "bg_dark":  "#1e2127",
    "bg_mid":   "#282a36",
    "bg_input": "#44475a",
    "fg":       "#f8f8f2",
    "fg_dim":   "#6272a4",
    "ok":       "#50fa7b",
    "err":      "#ff5555",
    "warn":     "#ffb86c",
    "chain":    "#bd93f9",
    "info":     "#8be9fd",
}

TAG_COLOURS = {
    "ok":      C["ok"],
    "err":     C["err"],
    "warn":    C["warn"],
    "info":    C["info"],
    "chain":   C["chain"],
    "preview": C["chain"],
}

TAGS = ["all", "err", "warn", "ok", "info", "chain", "preview"]

STYLESHEET = f"""
QDialog, QWidget {{
    background-color: {C["bg_dark"]};
    color: {C["fg"]};
    font-family: "Menlo", "DejaVu Sans Mono", monospace;
    font-size: 11px;
}}
QPushButton, QComboBox {{
    background-color: {C["bg_input"]};
    color: {C["fg"]};
    border: none;
    border-radius: 4px;
    padding: 4px 8px;
}}
QPushButton:hover {{ background-color: {C["fg_dim"]}; }}
QTableWidget, QTextEdit {{
    background-color: {C["bg_mid"]};
    color: {C["fg"]};
    border: none;
}}
QHeaderView::section {{
    background-color: {C["bg_input"]};
    color: {C["fg_dim"]};
    border: none;
    padding: 4px 6px;
}}
QLabel#section_label {{ color: {C["fg_dim"]}; font-size: 10px; }}
"""


class LogBrowserDialog(QDialog):
    COLUMNS = ["Time", "Tag", "Style", "Message"]

    def __init__(self, db_logger: DBLogger, current_session_id: str = None, parent=None):
        super().__init__(parent)
        self._db      = db_logger
        self._session = current_session_id
        self._entries = []

        self.setWindowTitle("glyphclip — Log Browser")
        self.setStyleSheet(STYLESHEET)
        self.resize(900, 600)
        self.setModal(False)

        self._build_ui()
        self._load_filters()
        self._refresh()

        self._timer = QTimer(self)
        self._timer.timeout.connect(self._refresh)
        self._timer.start(2000)

    def _build_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)

        toolbar = QWidget()
        tb = QHBoxLayout(toolbar)
        tb.setContentsMargins(0, 0, 0, 0)

        self.session_combo = self._add_combo(tb, "Session:", 220)
        self.tag_combo     = self._add_combo(tb, "Tag:", 80)
        self.style_combo   = self._add_combo(tb, "Style:", 120)
        self.tag_combo.addItems(TAGS)

        tb.addStretch()
        self.count_label = QLabel("")
        self.count_label.setObjectName("section_label")
        tb.addWidget(self.count_label)

        for text, slot in (("⟳ Refresh", self._reload), ("🗑 Clear session", self._clear_session)):
            btn = QPushButton(text)
            btn.clicked.connect(slot)
            tb.addWidget(btn)
        layout.addWidget(toolbar)

        splitter = QSplitter(Qt.Vertical)

        self.table = QTableWidget()
        self.table.setColumnCount(len(self.COLUMNS))
        self.table.setHorizontalHeaderLabels(self.COLUMNS)
        header = self.table.horizontalHeader()
        header.setSectionResizeMode(3, QHeaderView.Stretch)
        for col, width in enumerate((80, 60, 110)):
            header.resizeSection(col, width)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.verticalHeader().setVisible(False)
        self.table.setShowGrid(False)
        self.table.itemSelectionChanged.connect(self._on_row_selected)
        splitter.addWidget(self.table)

        self.detail_text = QTextEdit()
        self.detail_text.setReadOnly(True)
        self.detail_text.setMinimumHeight(120)
        splitter.addWidget(self.detail_text)

        splitter.setSizes([400, 200])
        layout.addWidget(splitter)

        # Connected last: filling a combo fires the signal before the table exists.
        for combo in (self.session_combo, self.tag_combo, self.style_combo):
            combo.currentIndexChanged.connect(self._refresh)

    def _add_combo(self, bar: QHBoxLayout, label: str, width: int) -> QComboBox:
        bar.addWidget(QLabel(label))
        combo = QComboBox()
        combo.setMinimumWidth(width)
        bar.addWidget(combo)
        return combo

    # ── Data loading ──────────────────────────────────────────────────────────

    def _load_filters(self):
        self.session_combo.blockSignals(True)
        self.session_combo.clear()
        if self._session:
            self.session_combo.addItem("Current session", self._session)
        self.session_combo.addItem("All sessions", None)
        for s in self._db.get_sessions(limit=50):
            ts = s["started_at"][:19].replace("T", " ")
            self.session_combo.addItem(f"{ts}  [{s['id']}]", s["id"])
        self.session_combo.blockSignals(False)

        self.style_combo.blockSignals(True)
        current = self.style_combo.currentText()
        self.style_combo.clear()
        self.style_combo.addItems(["all"] + self._db.get_style_names())
        if current:
            self.style_combo.setCurrentText(current)
        self.style_combo.blockSignals(False)

    def _reload(self):
        self._load_filters()
        self._refresh()

    def _refresh(self):
        tag   = self.tag_combo.currentText()
        style = self.style_combo.currentText()
        self._entries = self._db.get_entries(
            session_id=self.session_combo.currentData(),
            tag=None if tag in ("", "all") else tag,
            style_name=None if style in ("", "all") else style,
            limit=500,
        )
        self._populate_table()

    def _populate_table(self):
        self.table.setUpdatesEnabled(False)
        self.table.setRowCount(len(self._entries))

        for row, entry in enumerate(self._entries):
            colour = QColor(TAG_COLOURS.get(entry["tag"], C["fg"]))
            cells = (
                entry["timestamp"][11:19],
                entry["tag"],
                entry["style_name"] or "",
                entry["message"].split("\n")[0][:120],
            )
            for col, text in enumerate(cells):
                item = QTableWidgetItem(text)
                item.setForeground(colour)
                self.table.setItem(row, col, item)
            self.table.setRowHeight(row, 20)

        self.table.setUpdatesEnabled(True)
        self.count_label.setText(f"{len(self._entries)} entries")
        if self._entries:
            self.table.scrollToBottom()

    def _on_row_selected(self):
        row = self.table.currentRow()
        if not 0 <= row < len(self._entries):
            return
        entry = self._entries[row]
        self.detail_text.setTextColor(QColor(TAG_COLOURS.get(entry["tag"], C["fg"])))
        header = f"[{entry['timestamp'].replace('T', ' ')}]  tag={entry['tag']}"
        if entry["style_name"]:
            header += f"  style={entry['style_name']}"
        header += f"  id={entry['id']}\n{'─' * 60}\n"
        self.detail_text.setPlainText(header + entry["message"])

    def _clear_session(self):
        session_id = self.session_combo.currentData()
        if session_id:
            self._db.clear_session(session_id)
            self._refresh()


def default_log_folder() -> Path:
    """Where glyphclip --log-db writes: next to its transforms folder."""
    here = Path(__file__).parent
    return here if (here / "transforms").is_dir() else Path.home() / ".glyphclip"


def main():
    parser = argparse.ArgumentParser(description="Browse the glyphclip SQLite log.")
    parser.add_argument("--folder", "-f", default=str(default_log_folder()),
                        help="Folder holding glyphclip.db (default: <script dir> in a "
                             "checkout, ~/.glyphclip when installed).")
    args = parser.parse_args()

    app = QApplication(sys.argv)
    dialog = LogBrowserDialog(DBLogger(args.folder, read_only=True))
    dialog.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
