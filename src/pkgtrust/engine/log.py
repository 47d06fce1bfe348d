#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""The verification engine's diagnostic log channel and its capture guard.

Engines report findings as log lines on a single process-wide stdlib logger.
Its level acts as the engine's log mask. ``EngineLogGuard`` gives one
operation exclusive use of that channel.
"""

from __future__ import annotations

import logging
import threading
from types import TracebackType

ENGINE_LOGGER_NAME = "pkgtrust.engine"

_engine_log = logging.getLogger(ENGINE_LOGGER_NAME)
_engine_log_lock = threading.RLock()


def get_engine_log() -> logging.Logger:
    """Return the logger engines emit their diagnostics on."""
    return _engine_log


def set_log_mask(level: int) -> int:
    """Set the engine log level and return the previous one."""
    previous = _engine_log.level
    _engine_log.setLevel(level)
    return previous


class _CollectingHandler(logging.Handler):
    def __init__(self, messages: list[str]) -> None:
        super().__init__(logging.NOTSET)
        self.messages = messages

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())


class EngineLogGuard:
    """Capture engine log lines for the duration of a ``with`` block.

    On entry the guard takes the engine log lock, routes engine records into
    ``messages`` instead of the normal handlers, and optionally raises the
    log mask to ``level``. Everything is restored on exit, whatever the
    outcome. Re-entrant on the same thread; other threads wait.
    """

    def __init__(self, level: int | None = None) -> None:
        self.level = level
        self.messages: list[str] = []
        self._handler = _CollectingHandler(self.messages)
        self._previous_level: int | None = None
        self._previous_propagate = True
        self._previous_disabled = False

    def __enter__(self) -> EngineLogGuard:
        _engine_log_lock.acquire()
        try:
            self._previous_propagate = _engine_log.propagate
            self._previous_disabled = _engine_log.disabled
            _engine_log.propagate = False
            _engine_log.disabled = False
            _engine_log.addHandler(self._handler)
            if self.level is not None:
                self._previous_level = set_log_mask(self.level)
        except BaseException:
            _engine_log_lock.release()
            raise
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            if self._previous_level is not None:
                set_log_mask(self._previous_level)
                self._previous_level = None
            _engine_log.removeHandler(self._handler)
            _engine_log.propagate = self._previous_propagate
            _engine_log.disabled = self._previous_disabled
        finally:
            _engine_log_lock.release()

    def get_logs(self) -> list[str]:
        """Captured lines, in emission order."""
        return list(self.messages)


# 🔑📦🔚
