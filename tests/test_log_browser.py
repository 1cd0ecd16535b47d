import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from db_logger import DBLogger  # noqa: E402
from log_browser import LogBrowserDialog  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


@pytest.fixture
def db(tmp_path):
    logger = DBLogger(str(tmp_path))
    logger.log("Scanned 9 styles", "info")
    logger.log("Chain step failed", "err", style_name="glitch")
    logger.log("✓ 12 chars written", "ok", style_name="bubble")
    logger.flush()
    yield logger
    logger.stop()


@pytest.fixture
def dialog(qapp, db):
    dlg = LogBrowserDialog(db, db.session_id)
    yield dlg
    dlg._timer.stop()
    dlg.close()


def messages(dlg):
    return [dlg.table.item(row, 3).text() for row in range(dlg.table.rowCount())]


def test_dialog_builds_and_lists_session(dialog):
    assert dialog.table.rowCount() == 3
    assert dialog.count_label.text() == "3 entries"
    assert dialog.session_combo.currentData() == dialog._session


def test_style_filter_lists_logged_styles(dialog):
    items = [dialog.style_combo.itemText(i) for i in range(dialog.style_combo.count())]
    assert items == ["all", "bubble", "glitch"]


def test_tag_filter_refreshes_table(dialog):
    dialog.tag_combo.setCurrentText("err")
    assert messages(dialog) == ["Chain step failed"]
    dialog.tag_combo.setCurrentText("all")
    assert dialog.table.rowCount() == 3


def test_style_filter_refreshes_table(dialog):
    dialog.style_combo.setCurrentText("bubble")
    assert messages(dialog) == ["✓ 12 chars written"]


def test_selecting_a_row_shows_detail(dialog):
    dialog.table.selectRow(1)
    detail = dialog.detail_text.toPlainText()
    assert "tag=err" in detail
    assert "style=glitch" in detail
    assert detail.endswith("Chain step failed")


def test_clear_session_empties_table(dialog):
    dialog._clear_session()
    assert dialog.table.rowCount() == 0
    assert dialog.count_label.text() == "0 entries"
