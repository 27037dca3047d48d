from __future__ import annotations

import logging
import os
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LOGGER_NAME = "swapi_browser"


def _resolve_log_dir(settings: object) -> Path:
    """Resolve the log directory.

    - If SWAPI_LOG_DIR is absolute, use it directly.
    - Otherwise, treat it as relative to the current working directory.
    """

    raw = getattr(settings, "SWAPI_LOG_DIR", Path("_logs"))
    p = raw if isinstance(raw, Path) else Path(str(raw))
    if p.is_absolute():
        return p
    return Path.cwd() / p


def setup_logging(settings: object) -> Path:
    """Attach a rotating diagnostic log file to the `swapi_browser` logger.

    Returns the resolved log file path.

    Rotation:
      - Daily rotation at midnight.
      - Keep the last `SWAPI_LOG_BACKUP_COUNT` rotated files.

    Notes:
      - No console handler: rich and questionary own the terminal.
      - This function is safe to call multiple times (it resets handlers).
    """

    log_dir = _resolve_log_dir(settings)
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / "swapi_browser.log"

    level_name = str(getattr(settings, "SWAPI_LOG_LEVEL", "WARNING") or "WARNING").upper().strip()
    level = getattr(logging, level_name, logging.WARNING)

    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    file_handler = TimedRotatingFileHandler(
        filename=str(log_file),
        when="midnight",
        interval=1,
        backupCount=max(0, int(getattr(settings, "SWAPI_LOG_BACKUP_COUNT", 7) or 0)),
        encoding="utf-8",
        utc=False,
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(fmt))

    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers:
        handler.close()
    logger.handlers = [file_handler]
    logger.setLevel(level)
    logger.propagate = False

    # httpx logs every request at INFO; keep it quiet unless debugging.
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))

    logger.info(
        "swapi_browser logging enabled (file=%s, level=%s)",
        os.fspath(log_file),
        level_name,
    )

    return log_file
