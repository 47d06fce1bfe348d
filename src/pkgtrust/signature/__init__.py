#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Package signature verification and trust decisions."""

from __future__ import annotations

from pkgtrust.signature.checker import RpmSignature
from pkgtrust.signature.classifier import CheckResult, LogClassifier, classify_verification_log
from pkgtrust.signature.context import VerificationContext
from pkgtrust.signature.policy import signature_check_required
from pkgtrust.signature.trust_store import TrustStore

__all__ = [
    "CheckResult",
    "LogClassifier",
    "RpmSignature",
    "TrustStore",
    "VerificationContext",
    "classify_verification_log",
    "signature_check_required",
]

# 🔑📦🔚
