#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for pkgtrust tests."""

from __future__ import annotations

import base64
from collections.abc import Iterator, Sequence
import functools
import logging
from pathlib import Path

from pgpy import PGPKey, PGPUID
from pgpy.constants import HashAlgorithm, KeyFlags, PubKeyAlgorithm
from pgpy.types import Armorable
from provide.foundation.testmode import reset_foundation_for_testing
import pytest

from pkgtrust.config import reset_pkgtrust_config
from pkgtrust.engine.base import (
    EngineSession,
    RecordIndex,
    RpmRc,
    TrustRecord,
    VerificationEngine,
)
from pkgtrust.engine.log import get_engine_log

TEST_USER_ID = "Test Signing Key <signing@example.com>"


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: fast tests with no external tools")
    config.addinivalue_line(
        "markers", "integration: mark test as integration test (may require rpm tooling)"
    )


@pytest.fixture(autouse=True)
def reset_pkgtrust_state() -> Iterator[None]:
    """Reset configuration and logging state around each test."""
    reset_pkgtrust_config()
    reset_foundation_for_testing()
    yield
    reset_pkgtrust_config()
    reset_foundation_for_testing()
    get_engine_log().setLevel(logging.NOTSET)


@functools.cache
def _signing_key(user_id: str) -> PGPKey:
    # RSA generation is slow, so each identity is generated once per session
    key = PGPKey.new(PubKeyAlgorithm.RSAEncryptOrSign, 2048)
    key.add_uid(PGPUID.new(user_id), usage={KeyFlags.Sign}, hashes=[HashAlgorithm.SHA256])
    return key


def armor(data: bytes, headers: dict[str, str] | None = None) -> str:
    """ASCII-armor ``data`` as a PUBLIC KEY BLOCK with optional armor headers."""
    payload = base64.b64encode(data).decode("ascii")
    body = "\n".join(payload[i : i + 64] for i in range(0, len(payload), 64))
    crc = base64.b64encode(Armorable.crc24(bytearray(data)).to_bytes(3, "big")).decode("ascii")
    header_lines = "".join(f"{name}: {value}\n" for name, value in (headers or {}).items())
    return (
        "-----BEGIN PGP PUBLIC KEY BLOCK-----\n"
        f"{header_lines}\n"
        f"{body}\n"
        f"={crc}\n"
        "-----END PGP PUBLIC KEY BLOCK-----\n"
    )


class KeyFactory:
    """Writes OpenPGP public key files for generated RSA signing keys."""

    default_user_id = TEST_USER_ID

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def user_id(self, seed: int = 1) -> str:
        if seed == 1:
            return self.default_user_id
        return f"Test Signing Key {seed} <signing{seed}@example.com>"

    def secret_key(self, seed: int = 1) -> PGPKey:
        return _signing_key(self.user_id(seed))

    def key(self, seed: int = 1) -> PGPKey:
        return self.secret_key(seed).pubkey

    def key_id(self, seed: int = 1) -> str:
        return self.key(seed).fingerprint.keyid

    def fingerprint(self, seed: int = 1) -> str:
        return str(self.key(seed).fingerprint)

    def packets(self, seeds: Sequence[int] = (1,)) -> bytes:
        return b"".join(bytes(self.key(seed)) for seed in seeds)

    def write(
        self,
        name: str = "RPM-GPG-KEY-test",
        seeds: Sequence[int] = (1,),
        armored: bool = True,
        headers: dict[str, str] | None = None,
    ) -> Path:
        data = self.packets(seeds)
        path = self.directory / name
        if armored:
            path.write_text(armor(data, headers), encoding="utf-8")
        else:
            path.write_bytes(data)
        return path


@pytest.fixture
def key_factory(tmp_path: Path) -> KeyFactory:
    """Factory for synthetic key files inside ``tmp_path``."""
    return KeyFactory(tmp_path)


class FakeEngine(VerificationEngine):
    """In-memory engine that replays canned results and log lines."""

    def __init__(
        self,
        verify_rc: RpmRc = RpmRc.OK,
        verify_lines: Sequence[str] = (),
        import_rc: RpmRc = RpmRc.OK,
        records: Sequence[TrustRecord] = (),
        root_ok: bool = True,
    ) -> None:
        self.verify_rc = verify_rc
        self.verify_lines = list(verify_lines)
        self.import_rc = import_rc
        self.records = list(records)
        self.root_ok = root_ok
        self.sessions: list[EngineSession] = []
        self.closed_sessions: list[EngineSession] = []
        self.verify_calls: list[tuple[EngineSession, list[str]]] = []
        self.import_calls: list[tuple[bytes, int]] = []

    def create_session(self) -> EngineSession:
        session = super().create_session()
        self.sessions.append(session)
        return session

    def close_session(self, session: EngineSession) -> None:
        self.closed_sessions.append(session)

    def set_root_dir(self, session: EngineSession, root_dir: str) -> int:
        if not self.root_ok:
            return 1
        session.root_dir = root_dir
        return 0

    def verify_signatures(self, session: EngineSession, paths: Sequence[str]) -> RpmRc:
        self.verify_calls.append((session, list(paths)))
        log = get_engine_log()
        for line in self.verify_lines:
            log.info(line)
        return self.verify_rc

    def import_pubkey(self, session: EngineSession, packet: bytes, length: int) -> RpmRc:
        self.import_calls.append((packet, length))
        get_engine_log().error("import noise")
        return self.import_rc

    def iter_records(self, session: EngineSession, index: RecordIndex, key: str) -> Iterator[TrustRecord]:
        for record in self.records:
            if record.name == key:
                yield record


@pytest.fixture
def fake_engine() -> FakeEngine:
    """Engine reporting success with no trusted keys."""
    return FakeEngine()


@pytest.fixture
def make_engine() -> type[FakeEngine]:
    """The fake engine class, for tests that need canned results."""
    return FakeEngine


# 🔑📦🔚
