from __future__ import annotations

import os
import datetime as _dt
import logging
from typing import Any, Optional

from loguru import logger
from rich.logging import RichHandler

from .config import settings


def _ensure_logs_dir(log_dir: str) -> str:
    logs_dir = os.path.join(os.getcwd(), log_dir)
    os.makedirs(logs_dir, exist_ok=True)
    return logs_dir


def setup_logging(level: Optional[str] = None, log_dir: Optional[str] = None) -> None:
    level = (level or settings.log_level).upper()
    logger.remove()

    # File sink with rotation 10MB and retention 5 files
    logs_dir = _ensure_logs_dir(log_dir or settings.log_dir)
    date = _dt.datetime.now().strftime("%Y-%m-%d")
    file_path = os.path.join(logs_dir, f"capture_tiers_{date}.log")
    logger.add(
        file_path,
        rotation="10 MB",
        retention=5,
        encoding="utf-8",
        level=level,
        backtrace=False,
        diagnose=False,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
    )

    # Stdlib logging with RichHandler for pretty console logs
    root_logger = logging.getLogger("capture_tiers")
    root_logger.handlers = []
    root_logger.setLevel(getattr(logging, level, logging.INFO))
    rich_handler = RichHandler(rich_tracebacks=False, show_time=True, show_level=True, show_path=False)
    rich_handler.setLevel(getattr(logging, level, logging.INFO))
    root_logger.addHandler(rich_handler)

    # Bridge loguru -> stdlib (which uses RichHandler)
    def _to_stdlib_sink(message):  # type: ignore[no-untyped-def]
        record = message.record
        lvl = getattr(logging, record["level"].name, logging.INFO)
        root_logger.log(lvl, record["message"])  # pragma: no cover (formatting handled by Rich)

    logger.add(_to_stdlib_sink, level=level)


def log_selection(kind: str, tier: str, value: Any) -> None:
    logger.info(f"Selected {kind} tier={tier} value={value}")
