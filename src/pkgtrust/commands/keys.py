#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Trusted key commands for the pkgtrust CLI."""

from __future__ import annotations

from collections.abc import Iterator
import contextlib
import os
import sqlite3
import time

import click
from provide.foundation.console import perr, pout

from pkgtrust.config import PkgTrustConfig
from pkgtrust.console import get_command_logger
from pkgtrust.exceptions import PkgTrustError
from pkgtrust.history import Transaction, TransactionState, open_history
from pkgtrust.keys.key_info import KeyInfo
from pkgtrust.package import get_signature_checker, load_key


@click.group("key")
def key_group() -> None:
    """Inspect and import trusted public keys."""
    pass


def _display_key(key: KeyInfo) -> None:
    pout(f"Key ID:      {key.key_id or 'unknown'}")
    pout(f"Short ID:    {key.short_key_id or 'unknown'}")
    pout(f"User ID:     {key.user_id or 'unknown'}")
    pout(f"Fingerprint: {key.fingerprint or 'unknown'}")
    pout(f"From:        {key.url}")


def _load_or_abort(key_url: str, config: PkgTrustConfig) -> KeyInfo:
    log = get_command_logger("key")
    try:
        return load_key(key_url, config)
    except (PkgTrustError, OSError) as e:
        log.error("Failed to load key", error=str(e), key_url=key_url)
        perr(f"❌ {e}")
        raise click.Abort() from e


@key_group.command("info")
@click.argument("key_url")
@click.pass_context
def key_info_command(ctx: click.Context, key_url: str) -> None:
    """Shows the identity of a key file or URL."""
    config: PkgTrustConfig = ctx.obj["config"]
    with _load_or_abort(key_url, config) as key:
        _display_key(key)


@key_group.command("present")
@click.argument("key_url")
@click.pass_context
def key_present_command(ctx: click.Context, key_url: str) -> None:
    """Checks whether a key is already trusted (exit code 1 if not)."""
    log = get_command_logger("key")
    config: PkgTrustConfig = ctx.obj["config"]
    checker = get_signature_checker(config)
    with _load_or_abort(key_url, config) as key:
        try:
            present = checker.key_present(key)
        except PkgTrustError as e:
            log.error("Key lookup failed", error=str(e), key_url=key_url)
            perr(f"❌ {e}")
            raise click.Abort() from e

        if present:
            pout(f"✅ Key {key.short_key_id} is trusted")
        else:
            pout(f"🔍 Key {key.short_key_id} is not trusted")
            ctx.exit(1)


@contextlib.contextmanager
def _history_transaction(config: PkgTrustConfig, cmdline: str) -> Iterator[Transaction | None]:
    """Record the enclosed work as one history transaction.

    History is best effort: an unusable database is logged and skipped.
    """
    log = get_command_logger("key")
    transaction: Transaction | None = None
    conn: sqlite3.Connection | None = None
    try:
        conn = open_history(config.history_database)
        transaction = Transaction(conn)
        transaction.dt_begin = int(time.time())
        transaction.user_id = os.getuid() if hasattr(os, "getuid") else 0
        transaction.cmdline = cmdline
        transaction.begin()
    except (sqlite3.Error, OSError) as e:
        log.warning("Transaction history unavailable", error=str(e), database=str(config.history_database))
        transaction = None

    state = TransactionState.ERROR
    try:
        yield transaction
        state = TransactionState.DONE
    finally:
        if transaction is not None:
            transaction.dt_end = int(time.time())
            try:
                transaction.finish(state)
            except sqlite3.Error as e:
                log.warning("Failed to record transaction", error=str(e), id=transaction.id)
        if conn is not None:
            conn.close()


@key_group.command("import")
@click.argument("key_urls", nargs=-1, required=True)
@click.pass_context
def key_import_command(ctx: click.Context, key_urls: tuple[str, ...]) -> None:
    """Imports public keys into the rpm database."""
    log = get_command_logger("key")
    config: PkgTrustConfig = ctx.obj["config"]
    checker = get_signature_checker(config)
    cmdline = " ".join(["pkgtrust", "key", "import", *key_urls])

    with _history_transaction(config, cmdline):
        for key_url in key_urls:
            with _load_or_abort(key_url, config) as key:
                _display_key(key)
                try:
                    imported = checker.import_key(key)
                except PkgTrustError as e:
                    log.error("Key import failed", error=str(e), key_url=key_url)
                    perr(f"❌ {e}")
                    raise click.Abort() from e

                if imported:
                    log.info("Key imported", key_id=key.key_id, key_url=key_url)
                    pout(f"✅ Key {key.short_key_id} imported successfully\n")
                else:
                    pout(f"✅ Key {key.short_key_id} is already present\n")


# 🔑📦🔚
