#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Transaction history stored in SQLite."""

from __future__ import annotations

from pkgtrust.history.schema import create_database, open_history
from pkgtrust.history.transaction import Transaction, TransactionState, list_transactions

__all__ = [
    "Transaction",
    "TransactionState",
    "create_database",
    "list_transactions",
    "open_history",
]

# 🔑📦🔚
