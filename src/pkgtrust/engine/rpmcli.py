#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Verification engine backed by the ``rpmkeys`` and ``rpm`` executables."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
import logging
from pathlib import Path
import tempfile

from provide.foundation.process import CompletedProcess, run

from pkgtrust.config.config import EngineConfig
from pkgtrust.engine.base import (
    EngineSession,
    RecordIndex,
    RpmRc,
    TrustRecord,
    VerificationEngine,
    VerifyLevel,
)
from pkgtrust.engine.log import get_engine_log
from pkgtrust.keys.pgp import KEY_PARSE_ERRORS, armor_public_key

QUERY_FORMAT = "%{NAME}\\t%{VERSION}\\t%{RELEASE}\\n"


class RpmCliEngine(VerificationEngine):
    """Runs rpm's command-line tools against the session's install root."""

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()

    def set_root_dir(self, session: EngineSession, root_dir: str) -> int:
        if not root_dir or not Path(root_dir).is_absolute():
            return 1
        session.root_dir = root_dir
        return 0

    def _root_args(self, session: EngineSession) -> list[str]:
        return ["--root", session.root_dir] if session.root_dir else []

    def _run(self, cmd: list[str]) -> CompletedProcess:
        # Exit codes are interpreted per command; a missing executable raises ProcessError
        return run(cmd, check=False)

    def _emit(self, text: str | None, level: int) -> None:
        log = get_engine_log()
        for line in (text or "").splitlines():
            line = line.rstrip()
            if line:
                log.log(level, line)

    def verify_signatures(self, session: EngineSession, paths: Sequence[str]) -> RpmRc:
        cmd = [self.config.rpmkeys, *self._root_args(session), "--checksig", "--verbose"]
        if session.verify_level is not VerifyLevel.ALL:
            cmd += ["--define", f"_pkgverify_level {session.verify_level.value}"]
        cmd += list(paths)

        result = self._run(cmd)
        self._emit(result.stdout, logging.INFO)
        self._emit(result.stderr, logging.ERROR)
        return RpmRc.OK if result.returncode == 0 else RpmRc.FAIL

    def import_pubkey(self, session: EngineSession, packet: bytes, length: int) -> RpmRc:
        try:
            armored = armor_public_key(bytes(packet[:length]))
        except KEY_PARSE_ERRORS as e:
            get_engine_log().error(f"Invalid public key packet: {e}")
            return RpmRc.FAIL

        with tempfile.TemporaryDirectory() as temp_dir:
            key_path = Path(temp_dir) / "pubkey.asc"
            key_path.write_text(armored, encoding="ascii")
            result = self._run([self.config.rpmkeys, *self._root_args(session), "--import", str(key_path)])

        self._emit(result.stdout, logging.INFO)
        self._emit(result.stderr, logging.ERROR)
        return RpmRc.OK if result.returncode == 0 else RpmRc.FAIL

    def iter_records(self, session: EngineSession, index: RecordIndex, key: str) -> Iterator[TrustRecord]:
        if index is not RecordIndex.NAME:
            raise ValueError(f"Unsupported record index: {index}")

        result = self._run([self.config.rpm, *self._root_args(session), "-q", key, "--qf", QUERY_FORMAT])
        if result.returncode != 0:
            # rpm exits 1 with "package ... is not installed" for an empty match
            if "is not installed" not in (result.stdout or ""):
                self._emit(result.stderr, logging.ERROR)
            return

        for line in result.stdout.splitlines():
            fields = line.split("\t")
            if len(fields) == 3 and fields[0] == key:
                yield TrustRecord(name=fields[0], version=fields[1], release=fields[2])


# 🔑📦🔚
