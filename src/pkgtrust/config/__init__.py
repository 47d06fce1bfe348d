#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""pkgtrust configuration system.

Provides typed, validated configuration models loaded from the environment.
"""

from __future__ import annotations

from pkgtrust.config.config import (
    DownloadConfig,
    EngineConfig,
    HistoryConfig,
    PkgTrustConfig,
    TrustConfig,
)
from pkgtrust.config.manager import (
    get_pkgtrust_config,
    reset_pkgtrust_config,
    set_pkgtrust_config,
)
from pkgtrust.config.runtime import PkgTrustRuntimeConfig

__all__ = [
    "DownloadConfig",
    "EngineConfig",
    "HistoryConfig",
    "PkgTrustConfig",
    "PkgTrustRuntimeConfig",
    "TrustConfig",
    "get_pkgtrust_config",
    "reset_pkgtrust_config",
    "set_pkgtrust_config",
]

# 🔑📦🔚
