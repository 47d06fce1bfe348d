#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Whether a package needs its signature checked at all."""

from __future__ import annotations

from pkgtrust.config.config import TrustConfig
from pkgtrust.repo import Package, RepoType


def signature_check_required(package: Package, config: TrustConfig) -> bool:
    """Command-line packages follow ``localpkg_gpgcheck``, others their repo's ``gpgcheck``."""
    repo = package.get_repo()
    if repo.type is RepoType.COMMANDLINE:
        return config.localpkg_gpgcheck
    return repo.gpgcheck


# 🔑📦🔚
