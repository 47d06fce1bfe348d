#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the pkgtrust CLI."""

from __future__ import annotations

from pkgtrust.commands.check import check_command
from pkgtrust.commands.history import history_group
from pkgtrust.commands.keys import key_group

__all__ = [
    "check_command",
    "history_group",
    "key_group",
]

# 🔑📦🔚
