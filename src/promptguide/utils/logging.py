"""Logging setup for promptguide.

All diagnostics go to stderr under the "promptguide" logger, so stdout stays
reserved for previews and `check --json` output. Three renderings exist:

    human    [WARNING] Catalog has no components
    verbose  [DEBUG][14:02:11] Parsed component #3 ('Button') (props=7)
    json     {"level": "INFO", "ts": "...", "logger": "...", "msg": "...", ...}

Structured fields passed through `GuideLogger.structured` become top-level
keys in JSON lines and a trailing `(key=value, ...)` group in verbose mode.
"""

import json
import logging
import sys
from datetime import UTC, datetime
from enum import Enum
from typing import Any, TextIO

ROOT_LOGGER = "promptguide"
FIELDS_ATTR = "guide_fields"


class LogMode(Enum):
    """How log records are rendered."""

    HUMAN = "human"
    VERBOSE = "verbose"
    JSON = "json"


RESET = "\033[0m"

LEVEL_COLORS = {
    logging.DEBUG: "\033[90m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1;31m",
}


def _is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _record_fields(record: logging.LogRecord) -> dict[str, Any]:
    return getattr(record, FIELDS_ATTR, None) or {}


class HumanFormatter(logging.Formatter):
    """Renders `[LEVEL] message` lines for terminals.

    With timestamps enabled (verbose mode) the record time is appended to the
    tag and any structured fields follow the message.
    """

    def __init__(self, use_colors: bool = True, timestamps: bool = False) -> None:
        super().__init__()
        self.use_colors = use_colors
        self.timestamps = timestamps

    def _tag(self, record: logging.LogRecord) -> str:
        tag = f"[{record.levelname}]"
        if self.use_colors:
            tag = f"{LEVEL_COLORS.get(record.levelno, '')}{tag}{RESET}"
        if self.timestamps:
            clock = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
            tag = f"{tag}[{clock}]"
        return tag

    def format(self, record: logging.LogRecord) -> str:
        line = f"{self._tag(record)} {record.getMessage()}"

        fields = _record_fields(record)
        if self.timestamps and fields:
            rendered = ", ".join(f"{key}={value}" for key, value in fields.items())
            line = f"{line} ({rendered})"

        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


class JSONFormatter(logging.Formatter):
    """Renders one JSON object per record for CI log collectors."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "level": record.levelname,
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "logger": record.name,
            "msg": record.getMessage(),
        }
        entry.update(_record_fields(record))
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class GuideLogger(logging.Logger):
    """Logger that can attach key/value fields to a record."""

    def structured(self, level: int, msg: str, **fields: Any) -> None:
        """Log `msg` with extra fields.

        Args:
            level: Log level
            msg: Log message
            **fields: Values such as component or property counts
        """
        self.log(level, msg, extra={FIELDS_ATTR: fields}, stacklevel=2)


logging.setLoggerClass(GuideLogger)


def get_logger(name: str = ROOT_LOGGER) -> GuideLogger:
    """Return a promptguide logger (a GuideLogger under the root name)."""
    return logging.getLogger(name)  # type: ignore[return-value]


def setup_logging(
    mode: LogMode = LogMode.HUMAN,
    level: int = logging.INFO,
    stream: TextIO | None = None,
) -> None:
    """Install a single handler on the promptguide logger.

    Calling this again replaces the previous handler, so repeated CLI
    invocations in one process never duplicate output.

    Args:
        mode: Rendering mode
        level: Minimum level emitted
        stream: Destination (stderr when omitted)
    """
    stream = stream or sys.stderr

    if mode is LogMode.JSON:
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = HumanFormatter(
            use_colors=_is_tty(stream),
            timestamps=mode is LogMode.VERBOSE,
        )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(formatter)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False


def resolve_cli_flags(
    verbose: bool = False,
    quiet: bool = False,
    ci: bool = False,
) -> tuple[LogMode, int]:
    """Map the global CLI flags to a mode and level.

    `--ci` wins over `--verbose` for the mode; `--quiet` wins over
    `--verbose` for the level.
    """
    mode = LogMode.JSON if ci else LogMode.VERBOSE if verbose else LogMode.HUMAN
    level = logging.WARNING if quiet else logging.DEBUG if verbose else logging.INFO
    return mode, level


def configure_from_cli(
    verbose: bool = False,
    quiet: bool = False,
    ci: bool = False,
) -> None:
    """Set up logging from the global `--verbose`, `--quiet` and `--ci` flags."""
    mode, level = resolve_cli_flags(verbose=verbose, quiet=quiet, ci=ci)
    setup_logging(mode=mode, level=level)
