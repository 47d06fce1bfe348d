#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Test engine/log.py - engine log capture."""

from __future__ import annotations

import logging
import threading

import pytest

from pkgtrust.engine.log import EngineLogGuard, get_engine_log, set_log_mask


@pytest.mark.unit
class TestSetLogMask:
    def test_returns_previous_level(self) -> None:
        log = get_engine_log()
        log.setLevel(logging.WARNING)
        assert set_log_mask(logging.DEBUG) == logging.WARNING
        assert log.level == logging.DEBUG


@pytest.mark.unit
class TestEngineLogGuard:
    """Test capture and restoration."""

    def test_captures_lines_in_order(self) -> None:
        log = get_engine_log()
        with EngineLogGuard(level=logging.INFO) as guard:
            log.info("first")
            log.error("second")
        assert guard.get_logs() == ["first", "second"]

    def test_level_masks_lower_records(self) -> None:
        log = get_engine_log()
        with EngineLogGuard(level=logging.INFO) as guard:
            log.debug("hidden")
            log.info("shown")
        assert guard.messages == ["shown"]

    def test_state_restored(self) -> None:
        log = get_engine_log()
        log.setLevel(logging.CRITICAL)
        with EngineLogGuard(level=logging.INFO):
            assert log.level == logging.INFO
            assert log.propagate is False
        assert log.level == logging.CRITICAL
        assert log.propagate is True
        assert log.handlers == []

    def test_state_restored_on_exception(self) -> None:
        log = get_engine_log()
        log.setLevel(logging.ERROR)
        with pytest.raises(RuntimeError), EngineLogGuard(level=logging.DEBUG):
            raise RuntimeError("boom")
        assert log.level == logging.ERROR
        assert log.handlers == []

    def test_without_level_keeps_mask(self) -> None:
        log = get_engine_log()
        log.setLevel(logging.WARNING)
        with EngineLogGuard() as guard:
            assert log.level == logging.WARNING
            log.info("masked")
            log.warning("kept")
        assert guard.messages == ["kept"]

    def test_captured_lines_do_not_propagate(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG), EngineLogGuard(level=logging.INFO):
            get_engine_log().info("private finding")
        assert "private finding" not in caplog.text

    def test_nested_guards_on_same_thread(self) -> None:
        log = get_engine_log()
        with EngineLogGuard(level=logging.INFO) as outer:
            with EngineLogGuard() as inner:
                log.info("inner line")
            log.info("outer line")
        assert inner.messages == ["inner line"]
        assert outer.messages == ["inner line", "outer line"]
        assert log.handlers == []

    def test_other_threads_wait(self) -> None:
        entered = threading.Event()
        order: list[str] = []

        def worker() -> None:
            entered.set()
            with EngineLogGuard():
                order.append("worker")

        with EngineLogGuard():
            thread = threading.Thread(target=worker)
            thread.start()
            entered.wait(timeout=5)
            thread.join(timeout=0.2)
            order.append("main")
        thread.join(timeout=5)

        assert order == ["main", "worker"]


# 🔑📦🔚
