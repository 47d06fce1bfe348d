#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Minimal package and repository model used by signature checks."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from attrs import define, field

COMMANDLINE_REPO_ID = "@commandline"


class RepoType(Enum):
    """Where a package comes from."""

    AVAILABLE = "available"
    SYSTEM = "system"
    COMMANDLINE = "commandline"


@define(frozen=True)
class Repo:
    """A package source and its signature checking switch."""

    id: str
    type: RepoType = RepoType.AVAILABLE
    gpgcheck: bool = False

    @classmethod
    def commandline(cls) -> Repo:
        return cls(id=COMMANDLINE_REPO_ID, type=RepoType.COMMANDLINE)


@define(frozen=True)
class Package:
    """A package file on disk and the repository it belongs to."""

    path: Path = field(converter=Path)
    repo: Repo = field(factory=Repo.commandline)

    def get_package_path(self) -> str:
        return str(self.path)

    def get_repo(self) -> Repo:
        return self.repo


# 🔑📦🔚
