#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""pkgtrust core package exports."""

from __future__ import annotations

from provide.foundation.utils import get_version

from pkgtrust.exceptions import (
    DownloadError,
    KeyImportError,
    PkgTrustError,
    SignatureCheckError,
)
from pkgtrust.keys import KeyInfo
from pkgtrust.package import (
    check_package_signature,
    get_signature_checker,
    import_key,
    key_present,
    load_key,
)
from pkgtrust.repo import Package, Repo, RepoType
from pkgtrust.signature import CheckResult, RpmSignature

__version__ = get_version("pkgtrust", caller_file=__file__)

__all__ = [
    "CheckResult",
    "DownloadError",
    "KeyImportError",
    "KeyInfo",
    "Package",
    "PkgTrustError",
    "Repo",
    "RepoType",
    "RpmSignature",
    "SignatureCheckError",
    "__version__",
    "check_package_signature",
    "get_signature_checker",
    "import_key",
    "key_present",
    "load_key",
]

# 🔑📦🔚
