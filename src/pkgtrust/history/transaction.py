#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Recorded transactions in the history database."""

from __future__ import annotations

from enum import IntEnum
import functools
import sqlite3

from provide.foundation import logger

from pkgtrust.exceptions import TransactionError

_COLUMNS = (
    "dt_begin",
    "dt_end",
    "rpmdb_version_begin",
    "rpmdb_version_end",
    "releasever",
    "user_id",
    "cmdline",
    "state",
)


class TransactionState(IntEnum):
    UNKNOWN = 0
    DONE = 1
    ERROR = 2


@functools.total_ordering
class Transaction:
    """A single history entry.

    A new transaction is saved by ``begin()`` and updated by ``finish()``.
    Passing ``id`` loads an existing transaction.

    Transactions sort newest first: higher id, then later begin time, then
    greater begin rpmdb version.
    """

    def __init__(self, conn: sqlite3.Connection, id: int | None = None) -> None:
        self.conn = conn
        self.id: int | None = None
        self.dt_begin = 0
        self.dt_end = 0
        self.rpmdb_version_begin = ""
        self.rpmdb_version_end = ""
        self.releasever = ""
        self.user_id = 0
        self.cmdline = ""
        self.state = TransactionState.UNKNOWN
        self._runtime_packages: list[str] = []
        if id is not None:
            self._load(id)

    def _load(self, id: int) -> None:
        row = self.conn.execute(
            f"SELECT id, {', '.join(_COLUMNS)} FROM trans WHERE id = ?",  # noqa: S608
            (id,),
        ).fetchone()
        if row is None:
            raise TransactionError(f"Transaction {id} not found", id=id)
        self.id = row[0]
        for column, value in zip(_COLUMNS, row[1:], strict=True):
            setattr(self, column, value)
        self.state = TransactionState(self.state)
        self.dt_end = self.dt_end or 0
        self.rpmdb_version_begin = self.rpmdb_version_begin or ""
        self.rpmdb_version_end = self.rpmdb_version_end or ""
        self.cmdline = self.cmdline or ""

    def _values(self) -> tuple[object, ...]:
        return tuple(int(getattr(self, c)) if c == "state" else getattr(self, c) for c in _COLUMNS)

    def add_runtime_package(self, nevra: str) -> None:
        """Record a package that was part of the running software stack."""
        if nevra not in self._runtime_packages:
            self._runtime_packages.append(nevra)

    def get_runtime_packages(self) -> list[str]:
        """Runtime packages as stored in the database."""
        if self.id is None:
            return []
        rows = self.conn.execute(
            "SELECT nevra FROM trans_with WHERE trans_id = ? ORDER BY nevra", (self.id,)
        ).fetchall()
        return [row[0] for row in rows]

    def begin(self) -> None:
        """Insert the transaction and its runtime packages.

        Raises:
            TransactionError: If the transaction already has an id
        """
        if self.id is not None:
            raise TransactionError("Transaction has already begun", id=self.id)

        with self.conn:
            cursor = self.conn.execute(
                f"INSERT INTO trans ({', '.join(_COLUMNS)}) VALUES ({', '.join('?' * len(_COLUMNS))})",  # noqa: S608
                self._values(),
            )
            self.id = cursor.lastrowid
            self.conn.executemany(
                "INSERT OR IGNORE INTO trans_with (trans_id, nevra) VALUES (?, ?)",
                [(self.id, nevra) for nevra in self._runtime_packages],
            )
        logger.debug("Transaction started", id=self.id, cmdline=self.cmdline)

    def finish(self, state: TransactionState) -> None:
        """Set the final state and save the transaction."""
        if self.id is None:
            raise TransactionError("Transaction has not begun")
        self.state = state
        assignments = ", ".join(f"{column} = ?" for column in _COLUMNS)
        with self.conn:
            self.conn.execute(
                f"UPDATE trans SET {assignments} WHERE id = ?",  # noqa: S608
                (*self._values(), self.id),
            )
        logger.debug("Transaction finished", id=self.id, state=state.name)

    def _sort_key(self) -> tuple[int, int, str]:
        return (self.id or 0, self.dt_begin, self.rpmdb_version_begin)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transaction):
            return NotImplemented
        return self._sort_key() == other._sort_key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Transaction):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Transaction(id={self.id}, state={self.state.name}, cmdline={self.cmdline!r})"


def list_transactions(conn: sqlite3.Connection) -> list[Transaction]:
    """All transactions, newest first."""
    ids = [row[0] for row in conn.execute("SELECT id FROM trans")]
    return sorted(Transaction(conn, id) for id in ids)


# 🔑📦🔚
