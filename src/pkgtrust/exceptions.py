#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for pkgtrust."""

from __future__ import annotations

from typing import Any

from provide.foundation.errors import FoundationError


class PkgTrustError(FoundationError):
    """Base exception for all pkgtrust errors."""

    pass


class ConfigError(PkgTrustError, ValueError):
    """Raised when a configuration value is invalid."""

    pass


class KeyImportError(PkgTrustError):
    """Raised when a key reference cannot be turned into an importable key."""

    def __init__(self, message: str, key_url: str, **context: Any) -> None:
        super().__init__(message, key_url=key_url, **context)
        self.key_url = key_url


class SignatureCheckError(PkgTrustError):
    """Raised when a verification session cannot be configured."""

    def __init__(self, message: str, root: str | None = None, **context: Any) -> None:
        super().__init__(message, root=root, **context)
        self.root = root


class DownloadError(PkgTrustError):
    """Raised when remote key material cannot be retrieved."""

    def __init__(self, message: str, url: str | None = None, **context: Any) -> None:
        super().__init__(message, url=url, **context)
        self.url = url


class TransactionError(PkgTrustError):
    """Raised for misuse of a history transaction."""

    pass


# 🔑📦🔚
