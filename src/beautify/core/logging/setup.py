from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

from pythonjsonlogger import jsonlogger

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(session_id)s] %(name)s: %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(session_id)s %(message)s"


class SessionIdFilter(logging.Filter):
    """Stamps every record with the id of the CLI session that produced it."""

    def __init__(self, session_id: str):
        super().__init__()
        self._session_id = session_id

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "session_id"):
            record.session_id = self._session_id
        return True


def log_file_paths(log_dir: Path, day: datetime | None = None) -> tuple[Path, Path]:
    stamp = (day or datetime.now(timezone.utc)).strftime("%Y-%m-%d")
    return log_dir / f"beautify-{stamp}.log", log_dir / f"beautify-{stamp}.jsonl"


def _attach(
    root: logging.Logger,
    handler: logging.Handler,
    formatter: logging.Formatter,
    session_filter: SessionIdFilter,
    level: int | None = None,
) -> None:
    if level is not None:
        handler.setLevel(level)
    handler.setFormatter(formatter)
    handler.addFilter(session_filter)
    root.addHandler(handler)


def configure_logging(log_dir: Path, session_id: str, level: int | str = logging.INFO) -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    log_dir.mkdir(parents=True, exist_ok=True)
    text_path, json_path = log_file_paths(log_dir)

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)

    session_filter = SessionIdFilter(session_id)
    text_formatter = logging.Formatter(fmt=TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    # Console gets WARNING and above; INFO goes to the files only.
    _attach(root, logging.StreamHandler(), text_formatter, session_filter, level=max(level, logging.WARNING))
    _attach(root, logging.FileHandler(text_path, encoding="utf-8"), text_formatter, session_filter)
    _attach(
        root,
        logging.FileHandler(json_path, encoding="utf-8"),
        jsonlogger.JsonFormatter(fmt=JSON_FORMAT),
        session_filter,
    )


def get_logger(name: str, session_id: str) -> logging.LoggerAdapter:
    return logging.LoggerAdapter(logging.getLogger(name), extra={"session_id": session_id})
