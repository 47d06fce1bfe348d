#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""History commands for the pkgtrust CLI."""

from __future__ import annotations

from datetime import datetime
import sqlite3

import click
from provide.foundation.console import perr, pout

from pkgtrust.config import PkgTrustConfig
from pkgtrust.console import get_command_logger
from pkgtrust.exceptions import TransactionError
from pkgtrust.history import Transaction, list_transactions, open_history


def _format_time(timestamp: int) -> str:
    if not timestamp:
        return "-"
    return datetime.fromtimestamp(timestamp).strftime("%Y-%m-%d %H:%M")


def _open(config: PkgTrustConfig) -> sqlite3.Connection:
    database = config.history_database
    if not database.exists():
        perr(f"No transaction history at {database}")
        raise click.Abort()
    return open_history(database)


@click.group("history")
def history_group() -> None:
    """Show recorded transactions."""
    pass


@history_group.command("list")
@click.pass_context
def history_list_command(ctx: click.Context) -> None:
    """Lists recorded transactions, newest first."""
    log = get_command_logger("history")
    config: PkgTrustConfig = ctx.obj["config"]
    conn = _open(config)
    try:
        transactions = list_transactions(conn)
    finally:
        conn.close()

    log.debug("Listing transactions", count=len(transactions))
    if not transactions:
        pout("No transactions recorded.")
        return

    pout(f"{'ID':>4}  {'Date':<16}  {'State':<7}  Command line")
    for transaction in transactions:
        pout(
            f"{transaction.id:>4}  {_format_time(transaction.dt_begin):<16}  "
            f"{transaction.state.name:<7}  {transaction.cmdline}"
        )


@history_group.command("info")
@click.argument("transaction_id", type=int)
@click.pass_context
def history_info_command(ctx: click.Context, transaction_id: int) -> None:
    """Shows one recorded transaction."""
    config: PkgTrustConfig = ctx.obj["config"]
    conn = _open(config)
    try:
        transaction = Transaction(conn, transaction_id)
        runtime_packages = transaction.get_runtime_packages()
    except TransactionError as e:
        perr(f"❌ {e}")
        raise click.Abort() from e
    finally:
        conn.close()

    pout(f"Transaction ID: {transaction.id}")
    pout(f"Begin time:     {_format_time(transaction.dt_begin)}")
    pout(f"End time:       {_format_time(transaction.dt_end)}")
    pout(f"User:           {transaction.user_id}")
    pout(f"State:          {transaction.state.name}")
    pout(f"Command line:   {transaction.cmdline}")
    if runtime_packages:
        pout("Packages altering the transaction:")
        for nevra in runtime_packages:
            pout(f"    {nevra}")


# 🔑📦🔚
