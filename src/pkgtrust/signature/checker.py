#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Package signature checks and trusted key management."""

from __future__ import annotations

import logging

from provide.foundation import logger

from pkgtrust.config.config import TrustConfig
from pkgtrust.engine.base import RpmRc, VerificationEngine, VerifyLevel
from pkgtrust.engine.log import EngineLogGuard
from pkgtrust.engine.rpmcli import RpmCliEngine
from pkgtrust.keys.key_info import KeyInfo
from pkgtrust.repo import Package
from pkgtrust.signature.classifier import CheckResult, LogClassifier, classify_verification_log
from pkgtrust.signature.context import VerificationContext
from pkgtrust.signature.policy import signature_check_required
from pkgtrust.signature.trust_store import TrustStore


class RpmSignature:
    """Verifies package signatures and manages the keys they are checked against.

    Every operation opens its own ``VerificationContext`` and holds the engine
    log channel for its whole duration, so engine output never leaks between
    operations or threads.
    """

    def __init__(
        self,
        config: TrustConfig | None = None,
        engine: VerificationEngine | None = None,
        classifier: LogClassifier = classify_verification_log,
        trust_store: TrustStore | None = None,
    ) -> None:
        self.config = config or TrustConfig()
        self.engine = engine or RpmCliEngine()
        self.classifier = classifier
        self.trust_store = trust_store or TrustStore()

    def create_context(self) -> VerificationContext:
        """Open a fresh engine session rooted at the configured install root."""
        return VerificationContext(self.engine, self.config.installroot)

    def check_package_signature(self, package: Package) -> CheckResult:
        """Check one package and classify the outcome.

        Failures are returned, never raised; only a misconfigured install
        root raises ``SignatureCheckError``.
        """
        if not signature_check_required(package, self.config):
            logger.debug("Signature check not required", package=package.get_package_path())
            return CheckResult.OK

        path = package.get_package_path()
        with EngineLogGuard(level=logging.INFO) as log_guard, self.create_context() as context:
            self.engine.set_verify_level(context.session, VerifyLevel.SIGNATURE)
            rc = self.engine.verify_signatures(context.session, [path])

        if rc == RpmRc.OK:
            logger.debug("Signature check passed", package=path)
            return CheckResult.OK

        lines = log_guard.get_logs()
        result = self.classifier(lines, path)
        logger.debug("Signature check failed", package=path, result=result.name, engine_log=lines)
        return result

    def key_present(self, key: KeyInfo) -> bool:
        """Return True if ``key`` is already in the rpm database."""
        with EngineLogGuard(), self.create_context() as context:
            return self.trust_store.is_trusted(context, key)

    def import_key(self, key: KeyInfo) -> bool:
        """Import ``key`` into the rpm database.

        Returns:
            True if imported, False if the key was already present

        Raises:
            KeyImportError: If the engine rejects the key
        """
        with EngineLogGuard(), self.create_context() as context:
            return self.trust_store.import_key(context, key)


# 🔑📦🔚
