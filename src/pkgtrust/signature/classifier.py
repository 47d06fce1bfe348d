#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Classification of engine verification logs into a trust decision.

The engine only reports pass/fail, so the reason for a failure is recovered
from its verbose log. A failed check of a signed package whose key is not in
the rpm database looks like::

    /path/to/rpm/dummy-signed-1.0.1-0.x86_64.rpm:
        Header V4 EdDSA/SHA512 Signature, key ID 773dd1ba: NOKEY
        Header RSA signature: NOTFOUND
        Header SHA256 digest: OK
        Header SHA1 digest: OK
        Payload SHA256 digest: OK
        RSA signature: NOTFOUND
        DSA signature: NOTFOUND
        MD5 digest: OK

This depends on rpm keeping its message format.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum

SUFFIX_OK = ": OK"
SUFFIX_NOKEY = ": NOKEY"
SUFFIX_NOTTRUSTED = ": NOTTRUSTED"
SUFFIX_NOTFOUND = ": NOTFOUND"
MARKER_BAD = ": BAD"


class CheckResult(Enum):
    """Outcome of a package signature check."""

    OK = "ok"
    FAILED = "failed"
    FAILED_NOT_TRUSTED = "failed-not-trusted"
    FAILED_KEY_MISSING = "failed-key-missing"
    FAILED_NOT_SIGNED = "failed-not-signed"

    @property
    def is_ok(self) -> bool:
        return self is CheckResult.OK


LogClassifier = Callable[[Iterable[str], str], CheckResult]


def classify_verification_log(lines: Iterable[str], package_path: str) -> CheckResult:
    """Classify the log of a failed verification of ``package_path``.

    Lines starting with the package path are headers and ignored. Any ``BAD``
    finding or a line with an unknown suffix fails the check outright.
    Otherwise an untrusted key wins over a missing key, which wins over a
    missing signature; with none of those the result is ``FAILED``.
    """
    missing_key = False
    not_trusted = False
    not_signed = False

    for line in lines:
        if line.startswith(package_path):
            continue
        if MARKER_BAD in line:
            return CheckResult.FAILED
        if line.endswith(SUFFIX_NOKEY):
            missing_key = True
        elif line.endswith(SUFFIX_NOTTRUSTED):
            not_trusted = True
        elif line.endswith(SUFFIX_NOTFOUND):
            not_signed = True
        elif not line.endswith(SUFFIX_OK):
            return CheckResult.FAILED

    if not_trusted:
        return CheckResult.FAILED_NOT_TRUSTED
    if missing_key:
        return CheckResult.FAILED_KEY_MISSING
    if not_signed:
        return CheckResult.FAILED_NOT_SIGNED
    return CheckResult.FAILED


# 🔑📦🔚
