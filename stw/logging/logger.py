# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Structured JSON logger for stw.

Every per-file outcome and every run summary goes out as one JSON object per
line, so a run over a big repository can be piped into jq or grepped without
parsing prose. No print() anywhere in the package.

The JSON structure looks like:
  {"ts": "2026-...", "level": "INFO", "module": "stw.pipeline", "msg": "File normalized", "path": "src/lib.rs"}
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

# Attributes every LogRecord carries. Anything else on the record came in
# through `extra=` and belongs in the JSON output.
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_STDOUT = "<stdout>"


class JsonFormatter(logging.Formatter):
    """
    Formats log records as single-line JSON objects.

    Mandatory fields:
      ts     - ISO 8601 UTC timestamp
      level  - log level name
      module - the logger name
      msg    - the formatted message string

    Fields passed through `extra` are merged in. Values that JSON can't handle
    natively (Path objects, enums) are stringified.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "ts": datetime.now(tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS and not key.startswith("_"):
                entry[key] = value

        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def _resolve_log_level(level_name: str) -> int:
    """Turn a level name string into the corresponding logging constant."""
    upper = level_name.upper()
    if upper not in _VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid log level '{level_name}'. Must be one of: {', '.join(sorted(_VALID_LOG_LEVELS))}"
        )
    return getattr(logging, upper)


def _owned_handlers(logger: logging.Logger) -> dict[str, logging.Handler]:
    """Handlers get_logger attached earlier, keyed by their destination."""
    return {
        handler._stw_destination: handler  # type: ignore[attr-defined]
        for handler in logger.handlers
        if hasattr(handler, "_stw_destination")
    }


def _attach(logger: logging.Logger, handler: logging.Handler, destination: str, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(JsonFormatter())
    handler._stw_destination = destination  # type: ignore[attr-defined]
    logger.addHandler(handler)


def get_logger(
    name: str,
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Create a structured JSON logger.

    Calling this again for the same name never doubles output: handlers this
    function installed are tagged with their destination, and only missing
    destinations get a new one. A log_file passed on a later call is still
    attached, and handlers installed by anyone else (pytest's capture, for
    one) don't count.

    Args:
        name: Logger name, typically the dotted module path.
        log_level: One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
        log_file: Optional path to a log file. If provided, logs go to both
                  stdout and the file.

    Returns:
        A configured logging.Logger that outputs structured JSON.
    """
    logger = logging.getLogger(name)
    level = _resolve_log_level(log_level)
    logger.setLevel(level)

    owned = _owned_handlers(logger)
    for handler in owned.values():
        handler.setLevel(level)

    if _STDOUT not in owned:
        _attach(logger, logging.StreamHandler(stream=sys.stdout), _STDOUT, level)

    if log_file is not None:
        destination = str(log_file.resolve())
        if destination not in owned:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            _attach(logger, logging.FileHandler(str(log_file), encoding="utf-8"), destination, level)

    logger.propagate = False

    return logger
