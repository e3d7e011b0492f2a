from __future__ import annotations

import threading
from contextlib import nullcontext
from typing import Any, ContextManager, Dict, List, Tuple

import pytest

from repeat_maps.runtime import telemetry


class RecordingLogger:
    """In-memory logger exposing only the calls a span or event may make."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, str, Dict[str, str]]] = []
        self._lock = threading.Lock()

    def profile(self, name: str) -> ContextManager[None]:
        return nullcontext()

    def _record(self, level: str, message: str, pairs: Any) -> None:
        with self._lock:
            self.records.append((level, message, dict(pairs)))

    def debug_with(self, message: str, pairs: Any) -> None:
        self._record("debug", message, pairs)

    def info_with(self, message: str, pairs: Any) -> None:
        self._record("info", message, pairs)

    def error_with(self, message: str, pairs: Any) -> None:
        self._record("error", message, pairs)

    def messages(self, level: str) -> List[Tuple[str, Dict[str, str]]]:
        return [(message, data) for lvl, message, data in self.records if lvl == level]


@pytest.fixture(autouse=True)
def recording_logger(monkeypatch: pytest.MonkeyPatch) -> RecordingLogger:
    logger = RecordingLogger()
    monkeypatch.setattr(telemetry, "get_logger", lambda name=None: logger)
    return logger
