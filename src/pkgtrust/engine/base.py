#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Contract for the external signature verification engine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum, IntEnum


class RpmRc(IntEnum):
    """Engine return codes."""

    OK = 0
    NOTFOUND = 1
    FAIL = 2
    NOTTRUSTED = 3
    NOKEY = 4


class VerifyLevel(Enum):
    """Minimum verification a package must pass."""

    NONE = "none"
    DIGEST = "digest"
    SIGNATURE = "signature"
    ALL = "all"


class RecordIndex(Enum):
    """Trust database index used to look records up."""

    NAME = "name"


@dataclass(frozen=True)
class TrustRecord:
    """One installed trust database entry (``gpg-pubkey-<version>-<release>``)."""

    name: str
    version: str
    release: str = ""


@dataclass
class EngineSession:
    """Per-operation engine state."""

    root_dir: str | None = None
    verify_level: VerifyLevel = VerifyLevel.ALL


class VerificationEngine(ABC):
    """Opaque verification oracle and trust database.

    Implementations report diagnostic findings only as lines on the engine
    log channel (see ``pkgtrust.engine.log``), at INFO for per-check findings.
    """

    def create_session(self) -> EngineSession:
        return EngineSession()

    def close_session(self, session: EngineSession) -> None:  # noqa: B027
        """Release engine resources held by ``session``."""

    @abstractmethod
    def set_root_dir(self, session: EngineSession, root_dir: str) -> int:
        """Apply the install root; non-zero means the root was rejected."""

    def set_verify_level(self, session: EngineSession, level: VerifyLevel) -> None:
        session.verify_level = level

    @abstractmethod
    def verify_signatures(self, session: EngineSession, paths: Sequence[str]) -> RpmRc:
        """Verify package files, logging one line per finding."""

    @abstractmethod
    def import_pubkey(self, session: EngineSession, packet: bytes, length: int) -> RpmRc:
        """Add a public key packet to the trust database."""

    @abstractmethod
    def iter_records(self, session: EngineSession, index: RecordIndex, key: str) -> Iterator[TrustRecord]:
        """Iterate trust database records matching ``key`` on ``index``."""


# 🔑📦🔚
