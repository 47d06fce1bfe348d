#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command logger helpers on top of the foundation logger."""

from __future__ import annotations

from typing import Any

from provide.foundation import logger


def get_command_logger(command: str) -> Any:
    """Return a logger bound to a CLI command name.

    Call this once the CLI group has initialized foundation, so the bound
    logger picks up the configured processors.
    """
    return logger.get_logger(f"pkgtrust.{command}").bind(command=command)


# 🔑📦🔚
