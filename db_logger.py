#!/usr/bin/env python3
"""
db_logger.py — optional SQLite log sink for glyphclip.

Creates glyphclip.db in the given folder. Enabled with --log-db; by default
nothing is written to disk. Only log lines go into the database, never the
clipboard text itself.

Writes happen on a dedicated writer thread fed by a queue, so the GUI thread,
the clipboard poller and the hotkey thread can all log without locking.

Schema:
    log_entries(id, session_id, timestamp, tag, message, style_name)
    sessions(id, started_at, transforms_folder)

Entries older than RETAIN_DAYS (default 30) are purged on start.
"""

import queue
import sqlite3
import sys
import threading
import uuid
from datetime import datetime, timedelta
from pathlib import Path

RETAIN_DAYS = 30
DB_NAME     = "glyphclip.db"


class DBLogger:
    def __init__(self, folder: str, transforms_folder: str = "", read_only: bool = False):
        Path(folder).mkdir(parents=True, exist_ok=True)
        self._db_path  = str(Path(folder) / DB_NAME)
        self._queue    = queue.Queue()
        self._session  = uuid.uuid4().hex[:8]
        self._writer   = None

        self._init_db()
        if read_only:
            # Browsing only: no new session, no writer thread.
            return
        self._start_session(transforms_folder)
        self._purge_old()

        self._writer = threading.Thread(target=self._writer_loop, daemon=True)
        self._writer.start()

    # ── Setup ─────────────────────────────────────────────────────────────────

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path, timeout=10)
        conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _init_db(self):
        with self._connect() as conn:
            conn.executescript("""
                CREATE TABLE IF NOT EXISTS sessions (
                    id                TEXT PRIMARY KEY,
                    started_at        TEXT NOT NULL,
                    transforms_folder TEXT
                );
                CREATE TABLE IF NOT EXISTS log_entries (
                    id         INTEGER PRIMARY KEY AUTOINCREMENT,
                    session_id TEXT NOT NULL,
                    timestamp  TEXT NOT NULL,
                    tag        TEXT NOT NULL,
                    message    TEXT NOT NULL,
                    style_name TEXT
                );
                CREATE INDEX IF NOT EXISTS idx_log_ts
                    ON log_entries(timestamp);
                CREATE INDEX IF NOT EXISTS idx_log_session
                    ON log_entries(session_id);
                CREATE INDEX IF NOT EXISTS idx_log_tag
                    ON log_entries(tag);
            """)

    def _start_session(self, transforms_folder: str):
        with self._connect() as conn:
            conn.execute(
                "INSERT INTO sessions(id, started_at, transforms_folder) VALUES(?,?,?)",
                (self._session, datetime.now().isoformat(), transforms_folder)
            )

    def _purge_old(self):
        cutoff = (datetime.now() - timedelta(days=RETAIN_DAYS)).isoformat()
        with self._connect() as conn:
            conn.execute("DELETE FROM log_entries WHERE timestamp < ?", (cutoff,))
            conn.execute(
                "DELETE FROM sessions WHERE started_at < ? "
                "AND id NOT IN (SELECT DISTINCT session_id FROM log_entries)",
                (cutoff,)
            )

    # ── Writer thread ─────────────────────────────────────────────────────────

    def _writer_loop(self):
        conn = self._connect()
        try:
            while True:
                item = self._queue.get()
                if item is None:
                    self._queue.task_done()
                    break
                try:
                    conn.execute(
                        "INSERT INTO log_entries"
                        "(session_id, timestamp, tag, message, style_name)"
                        " VALUES(?,?,?,?,?)",
                        item
                    )
                    conn.commit()
                except sqlite3.Error as exc:
                    print(f"[db_logger] write failed: {exc}", file=sys.stderr)
                finally:
                    self._queue.task_done()
        finally:
            conn.close()

    # ── Public API ────────────────────────────────────────────────────────────

    def log(self, message: str, tag: str = "info", style_name: str = ""):
        self._queue.put((
            self._session,
            datetime.now().isoformat(),
            tag,
            message,
            style_name,
        ))

    def flush(self):
        """Block until every queued entry has been written."""
        self._queue.join()

    def get_entries(self, session_id: str = None, tag: str = None,
                    style_name: str = None, limit: int = 500) -> list:
        """
        Fetch log entries, oldest first. Returns list of dicts:
            {id, session_id, timestamp, tag, message, style_name}
        """
        clauses = []
        params  = []
        for column, value in (("session_id", session_id), ("tag", tag),
                              ("style_name", style_name)):
            if value:
                clauses.append(f"{column} = ?")
                params.append(value)
        where = ("WHERE " + " AND ".join(clauses)) if clauses else ""
        sql = (
            f"SELECT id, session_id, timestamp, tag, message, style_name "
            f"FROM log_entries {where} "
            f"ORDER BY id DESC LIMIT ?"
        )
        params.append(limit)
        with self._connect() as conn:
            conn.row_factory = sqlite3.Row
            rows = conn.execute(sql, params).fetchall()
        return [dict(r) for r in reversed(rows)]

    def get_sessions(self, limit: int = 50) -> list:
        with self._connect() as conn:
            conn.row_factory = sqlite3.Row
            rows = conn.execute(
                "SELECT id, started_at, transforms_folder FROM sessions "
                "ORDER BY started_at DESC LIMIT ?",
                (limit,)
            ).fetchall()
        return [dict(r) for r in rows]

    def get_style_names(self) -> list:
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT DISTINCT style_name FROM log_entries "
                "WHERE style_name != '' ORDER BY style_name"
            ).fetchall()
        return [r[0] for r in rows]

    def clear_session(self, session_id: str) -> int:
        """Delete every entry of one session. Returns the number removed."""
        with self._connect() as conn:
            cur = conn.execute(
                "DELETE FROM log_entries WHERE session_id = ?", (session_id,)
            )
            return cur.rowcount

    @property
    def session_id(self) -> str:
        return self._session

    @property
    def db_path(self) -> str:
        return self._db_path

    def stop(self):
        if self._writer is None:
            return
        self._queue.put(None)
        self._writer.join(timeout=3)
