#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Signature verification engines and their log channel."""

from __future__ import annotations

from pkgtrust.engine.base import (
    EngineSession,
    RecordIndex,
    RpmRc,
    TrustRecord,
    VerificationEngine,
    VerifyLevel,
)
from pkgtrust.engine.log import EngineLogGuard, get_engine_log, set_log_mask
from pkgtrust.engine.rpmcli import RpmCliEngine

__all__ = [
    "EngineLogGuard",
    "EngineSession",
    "RecordIndex",
    "RpmCliEngine",
    "RpmRc",
    "TrustRecord",
    "VerificationEngine",
    "VerifyLevel",
    "get_engine_log",
    "set_log_mask",
]

# 🔑📦🔚
