#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Test history/ - transaction persistence."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
import sqlite3

import pytest

from pkgtrust.exceptions import TransactionError
from pkgtrust.history import Transaction, TransactionState, list_transactions, open_history


@pytest.fixture
def conn() -> Iterator[sqlite3.Connection]:
    connection = open_history(":memory:")
    yield connection
    connection.close()


def _transaction(conn: sqlite3.Connection, dt_begin: int = 1, cmdline: str = "pkgtrust key import") -> Transaction:
    trans = Transaction(conn)
    trans.dt_begin = dt_begin
    trans.dt_end = dt_begin + 1
    trans.rpmdb_version_begin = "begin - TransactionTest"
    trans.rpmdb_version_end = "end - TransactionTest"
    trans.releasever = "26"
    trans.user_id = 1000
    trans.cmdline = cmdline
    trans.state = TransactionState.DONE
    return trans


@pytest.mark.unit
class TestSchema:
    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        path = tmp_path / "var" / "lib" / "pkgtrust" / "history.sqlite"
        connection = open_history(path)
        connection.close()
        assert path.exists()

    def test_reopen_keeps_data(self, tmp_path: Path) -> None:
        path = tmp_path / "history.sqlite"
        first = open_history(path)
        _transaction(first).begin()
        first.close()

        second = open_history(path)
        assert len(list_transactions(second)) == 1
        second.close()

    def test_schema_version_recorded(self, conn: sqlite3.Connection) -> None:
        row = conn.execute("SELECT value FROM config WHERE key = 'version'").fetchone()
        assert row == ("1.0",)


@pytest.mark.unit
class TestTransaction:
    """Test insert, load and update."""

    def test_insert_and_load(self, conn: sqlite3.Connection) -> None:
        trans = _transaction(conn)
        trans.begin()

        loaded = Transaction(conn, trans.id)
        assert loaded.id == trans.id
        assert loaded.dt_begin == trans.dt_begin
        assert loaded.dt_end == trans.dt_end
        assert loaded.rpmdb_version_begin == trans.rpmdb_version_begin
        assert loaded.rpmdb_version_end == trans.rpmdb_version_end
        assert loaded.releasever == trans.releasever
        assert loaded.user_id == trans.user_id
        assert loaded.cmdline == trans.cmdline
        assert loaded.state is TransactionState.DONE

    def test_runtime_packages_deduplicated(self, conn: sqlite3.Connection) -> None:
        trans = _transaction(conn)
        trans.add_runtime_package("rpm-4.14.2-1.fc29.x86_64")
        trans.add_runtime_package("pkgtrust-0.1.0-1.noarch")
        trans.add_runtime_package("rpm-4.14.2-1.fc29.x86_64")
        assert trans.get_runtime_packages() == []

        trans.begin()

        assert Transaction(conn, trans.id).get_runtime_packages() == [
            "pkgtrust-0.1.0-1.noarch",
            "rpm-4.14.2-1.fc29.x86_64",
        ]

    def test_second_begin_raises(self, conn: sqlite3.Connection) -> None:
        trans = _transaction(conn)
        trans.begin()
        with pytest.raises(TransactionError):
            trans.begin()

    def test_begin_with_loaded_id_raises(self, conn: sqlite3.Connection) -> None:
        trans = _transaction(conn)
        trans.begin()
        with pytest.raises(TransactionError):
            Transaction(conn, trans.id).begin()

    def test_load_missing_raises(self, conn: sqlite3.Connection) -> None:
        with pytest.raises(TransactionError, match="not found"):
            Transaction(conn, 42)

    def test_finish_updates_state(self, conn: sqlite3.Connection) -> None:
        trans = _transaction(conn)
        trans.state = TransactionState.UNKNOWN
        trans.begin()

        trans.dt_end = 99
        trans.finish(TransactionState.ERROR)

        loaded = Transaction(conn, trans.id)
        assert loaded.state is TransactionState.ERROR
        assert loaded.dt_end == 99

    def test_finish_before_begin_raises(self, conn: sqlite3.Connection) -> None:
        with pytest.raises(TransactionError):
            _transaction(conn).finish(TransactionState.DONE)


@pytest.mark.unit
class TestTransactionOrdering:
    """Test comparison and listing."""

    def test_equal_when_identity_matches(self, conn: sqlite3.Connection) -> None:
        assert _transaction(conn, dt_begin=5) == _transaction(conn, dt_begin=5, cmdline="other")
        assert _transaction(conn, dt_begin=5) != _transaction(conn, dt_begin=6)

    def test_newer_sorts_first(self, conn: sqlite3.Connection) -> None:
        first = _transaction(conn, dt_begin=1)
        first.begin()
        second = _transaction(conn, dt_begin=2)
        second.begin()

        assert second < first
        assert first > second
        assert sorted([first, second]) == [second, first]

    def test_begin_time_breaks_id_tie(self, conn: sqlite3.Connection) -> None:
        early = _transaction(conn, dt_begin=1)
        late = _transaction(conn, dt_begin=2)
        assert late < early

    def test_not_hashable(self, conn: sqlite3.Connection) -> None:
        with pytest.raises(TypeError):
            hash(_transaction(conn))

    def test_list_transactions_newest_first(self, conn: sqlite3.Connection) -> None:
        for dt_begin in (10, 20, 30):
            _transaction(conn, dt_begin=dt_begin).begin()

        assert [t.dt_begin for t in list_transactions(conn)] == [30, 20, 10]

    def test_list_empty(self, conn: sqlite3.Connection) -> None:
        assert list_transactions(conn) == []


# 🔑📦🔚
