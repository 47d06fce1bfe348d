#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Single-use verification sessions bound to an install root."""

from __future__ import annotations

from types import TracebackType

from pkgtrust.engine.base import EngineSession, VerificationEngine
from pkgtrust.exceptions import SignatureCheckError


class VerificationContext:
    """One engine session for one operation.

    A context is created for every check, lookup or import and closed when
    that operation ends. A closed context cannot be used again.
    """

    def __init__(self, engine: VerificationEngine, installroot: str) -> None:
        self.engine = engine
        self.installroot = installroot
        self._session: EngineSession | None = engine.create_session()
        if engine.set_root_dir(self._session, installroot) != 0:
            engine.close_session(self._session)
            self._session = None
            raise SignatureCheckError(
                f'Failed to set rpm transaction rootDir "{installroot}".', root=installroot
            )

    @property
    def session(self) -> EngineSession:
        if self._session is None:
            raise SignatureCheckError("Verification context is already closed.", root=self.installroot)
        return self._session

    @property
    def closed(self) -> bool:
        return self._session is None

    def close(self) -> None:
        if self._session is not None:
            self.engine.close_session(self._session)
            self._session = None

    def __enter__(self) -> VerificationContext:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


# 🔑📦🔚
