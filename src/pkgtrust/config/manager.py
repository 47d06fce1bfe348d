#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Process-wide pkgtrust configuration instance."""

from __future__ import annotations

import threading

from pkgtrust.config.config import PkgTrustConfig

_config: PkgTrustConfig | None = None
_config_lock = threading.Lock()


def get_pkgtrust_config() -> PkgTrustConfig:
    """Return the active configuration, loading it from the environment on first use."""
    global _config
    with _config_lock:
        if _config is None:
            _config = PkgTrustConfig.from_env()
        return _config


def set_pkgtrust_config(config: PkgTrustConfig) -> None:
    """Replace the active configuration."""
    global _config
    with _config_lock:
        _config = config


def reset_pkgtrust_config() -> None:
    """Drop the active configuration so the next access reloads it."""
    global _config
    with _config_lock:
        _config = None


# 🔑📦🔚
