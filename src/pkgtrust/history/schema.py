#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""History database schema."""

from __future__ import annotations

from pathlib import Path
import sqlite3

SCHEMA_VERSION = "1.0"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS trans (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    dt_begin INTEGER NOT NULL,
    dt_end INTEGER,
    rpmdb_version_begin TEXT,
    rpmdb_version_end TEXT,
    releasever TEXT NOT NULL,
    user_id INTEGER NOT NULL,
    cmdline TEXT,
    state INTEGER NOT NULL
);
CREATE TABLE IF NOT EXISTS trans_with (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    trans_id INTEGER NOT NULL REFERENCES trans(id) ON DELETE CASCADE,
    nevra TEXT NOT NULL,
    CONSTRAINT trans_with_unique_trans_nevra UNIQUE (trans_id, nevra)
);
CREATE TABLE IF NOT EXISTS config (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""


def create_database(conn: sqlite3.Connection) -> None:
    """Create the history tables if they do not exist yet."""
    conn.executescript(_SCHEMA)
    conn.execute("INSERT OR IGNORE INTO config (key, value) VALUES ('version', ?)", (SCHEMA_VERSION,))
    conn.commit()


def open_history(path: str | Path) -> sqlite3.Connection:
    """Open (and initialise) the history database at ``path``."""
    if str(path) != ":memory:":
        Path(path).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path))
    conn.execute("PRAGMA foreign_keys = ON")
    create_database(conn)
    return conn


# 🔑📦🔚
