#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Public API for pkgtrust."""

from __future__ import annotations

from pathlib import Path

from pkgtrust.config import PkgTrustConfig, get_pkgtrust_config
from pkgtrust.download import FileDownloader
from pkgtrust.engine.base import VerificationEngine
from pkgtrust.engine.rpmcli import RpmCliEngine
from pkgtrust.keys.key_info import KeyInfo
from pkgtrust.repo import Package
from pkgtrust.signature.checker import RpmSignature
from pkgtrust.signature.classifier import CheckResult


def get_signature_checker(
    config: PkgTrustConfig | None = None,
    engine: VerificationEngine | None = None,
) -> RpmSignature:
    """Build an ``RpmSignature`` from configuration.

    Args:
        config: Configuration to use (default: the process-wide configuration)
        engine: Verification engine (default: ``RpmCliEngine``)
    """
    config = config or get_pkgtrust_config()
    return RpmSignature(config=config.trust, engine=engine or RpmCliEngine(config.engine))


def load_key(reference: str, config: PkgTrustConfig | None = None) -> KeyInfo:
    """Resolve a key path or URL into a ``KeyInfo``.

    The caller owns the result and should close it (or use it as a context
    manager) so that downloaded key files are removed.

    Raises:
        KeyImportError: If the reference is not an armored public key
        DownloadError: If a remote key cannot be fetched
        OSError: If a local key file cannot be read
    """
    config = config or get_pkgtrust_config()
    return KeyInfo(reference, downloader=FileDownloader(config.download))


def check_package_signature(
    package: Package | str | Path,
    config: PkgTrustConfig | None = None,
    engine: VerificationEngine | None = None,
) -> CheckResult:
    """Check the signature of a package.

    A bare path is treated as a package given on the command line.

    Example:
        ```python
        from pkgtrust import CheckResult, check_package_signature

        result = check_package_signature("dummy-signed-1.0.1-0.x86_64.rpm")
        if result is CheckResult.FAILED_KEY_MISSING:
            print("Import the repository key first")
        ```
    """
    if not isinstance(package, Package):
        package = Package(path=Path(package))
    return get_signature_checker(config, engine).check_package_signature(package)


def key_present(
    key: KeyInfo | str,
    config: PkgTrustConfig | None = None,
    engine: VerificationEngine | None = None,
) -> bool:
    """Return True if the key is already trusted."""
    checker = get_signature_checker(config, engine)
    if isinstance(key, KeyInfo):
        return checker.key_present(key)
    with load_key(key, config) as key_info:
        return checker.key_present(key_info)


def import_key(
    key: KeyInfo | str,
    config: PkgTrustConfig | None = None,
    engine: VerificationEngine | None = None,
) -> bool:
    """Import a key into the trust store.

    Returns:
        True if the key was imported, False if it was already trusted

    Raises:
        KeyImportError: If the key is unusable or the engine rejects it
    """
    checker = get_signature_checker(config, engine)
    if isinstance(key, KeyInfo):
        return checker.import_key(key)
    with load_key(key, config) as key_info:
        return checker.import_key(key_info)


# 🔑📦🔚
