from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

import pytest

from beautify.core.logging import configure_logging, get_logger, log_file_paths


def test_configure_logging_writes_text_and_json(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        configure_logging(tmp_path, session_id="session-1")
        logger = get_logger("beautify.test", "session-1")
        logger.info("cart checked out")
        for handler in root.handlers:
            handler.flush()

        text_files = list(tmp_path.glob("beautify-*.log"))
        json_files = list(tmp_path.glob("beautify-*.jsonl"))
        assert len(text_files) == 1
        assert len(json_files) == 1
        assert "[session-1] beautify.test: cart checked out" in text_files[0].read_text(encoding="utf-8")

        record = json.loads(json_files[0].read_text(encoding="utf-8").splitlines()[-1])
        assert record["session_id"] == "session-1"
        assert record["message"] == "cart checked out"
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)


def test_log_file_paths_use_utc_day(tmp_path: Path) -> None:
    text_path, json_path = log_file_paths(tmp_path, datetime(2026, 3, 1, tzinfo=timezone.utc))

    assert text_path == tmp_path / "beautify-2026-03-01.log"
    assert json_path == tmp_path / "beautify-2026-03-01.jsonl"


@pytest.mark.parametrize(("level", "expected"), [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("nope", logging.INFO)])
def test_configure_logging_accepts_level_names(tmp_path: Path, level: str, expected: int) -> None:
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        configure_logging(tmp_path, session_id="session-2", level=level)

        assert root.level == expected
        stream_handlers = [h for h in root.handlers if type(h) is logging.StreamHandler]
        assert len(stream_handlers) == 1
        assert stream_handlers[0].level == max(expected, logging.WARNING)
        assert len(root.handlers) == 3
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)
