"""Logging setup for the GOVCAT command line.

Library code only ever calls ``logging.getLogger(__name__)``. Handlers are
installed once, by `configure_logging`, from the options of the top-level
``govcat`` command:

- a Rich console handler on stderr whose threshold follows ``-v``/``-q``
  (WARNING by default);
- optionally a *flight recorder*: a memory buffer holding the most recent
  records at DEBUG granularity, written to a log file as soon as a WARNING
  or worse is logged (or on exit with ``--force-flush``).

Console lines from libraries such as SQLAlchemy or Alembic carry a short
``[sqlalchemy]`` style prefix so they stand out from GOVCAT's own messages.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import Literal, TypeAlias

import alembic
import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler

PROJECT_PREFIX = "govcat"

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
FLIGHT_RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)

DEFAULT_FLIGHT_CAPACITY = 2000

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


@dataclass(frozen=True)
class LoggingOptions:  # pylint: disable=too-many-instance-attributes
    """Logging choices made on the command line.

    Attributes:
        verbosity: Number of ``-v`` minus number of ``-q``.
        debug: Developer mode; console at DEBUG with logger names and paths.
        color: Whether the console may use color.
        log_path: Flight-recorder destination.
        flight_recorder: Whether the flight recorder is installed.
        flight_capacity: Number of records the flight recorder keeps.
        force_flush: Write the flight-recorder buffer on exit regardless.
        logger_levels: Minimum level per logger name (``-L NAME=LEVEL``).
    """

    verbosity: int = 0
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    flight_recorder: bool = False
    flight_capacity: int = DEFAULT_FLIGHT_CAPACITY
    force_flush: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)

    @property
    def console_level(self) -> int:
        """WARNING shifted one level per unit of verbosity, clamped to DEBUG..CRITICAL."""
        level = logging.WARNING - 10 * self.verbosity
        return max(logging.DEBUG, min(logging.CRITICAL, level))


class ThirdPartyPrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``"[<top-level package>]"`` for foreign loggers.

    GOVCAT's own records get an empty prefix. No record is ever dropped.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        top_level = record.name.partition(".")[0]
        record.prefix = "" if top_level == PROJECT_PREFIX else f"[{top_level}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Args:
        level: Threshold for console output; ignored in debug mode (DEBUG).
        debug_mode: Show timestamps, logger names and clickable source paths.
        color: Allow colored output (mirrors ``--color/--no-color``).
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = DEFAULT_FLIGHT_CAPACITY,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the flight recorder: a memory buffer in front of a log file.

    The file is truncated and opened only on the first flush, so a clean run
    leaves no file behind.

    Args:
        path: Log file written on flush.
        capacity: Records kept in memory; a full buffer is flushed as well.
        flush_level: Records at or above this level trigger a flush.
        flush_on_close: Also flush when the handler is closed at exit.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(FLIGHT_RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(options: LoggingOptions) -> list[logging.Handler]:
    """Install the console (and flight-recorder) handlers on the root logger.

    Replaces any handlers configured earlier in the process and applies the
    per-logger levels from `options`.

    Returns:
        The installed handlers.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(options.console_level, options.debug, options.color)
    ]
    if options.flight_recorder and options.log_path is not None:
        handlers.append(
            config_flight_recorder(
                options.log_path,
                capacity=options.flight_capacity,
                flush_on_close=options.force_flush,
            )
        )

    # the root passes everything; each handler applies its own threshold
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in options.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def log_startup(
    logger: logging.Logger,
    options: LoggingOptions,
    handlers: list[logging.Handler],
    app_version: str,
) -> None:
    """Log a one-line INFO summary followed by DEBUG diagnostics."""
    recording = options.flight_recorder and options.log_path is not None
    logger.info(
        "GOVCAT %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(options.console_level),
        "ON" if recording else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s, CWD: %s", os.getpid(), Path.cwd())
    logger.debug(
        "SQLAlchemy: %s, Alembic: %s", sqlalchemy.__version__, alembic.__version__
    )
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if recording:
        logger.debug(
            "Flight recorder: path=%s, capacity=%d, flush_on_close=%s",
            options.log_path,
            options.flight_capacity,
            options.force_flush,
        )
    logger.debug(
        "Per-logger levels: %s",
        {name: logging.getLevelName(lvl) for name, lvl in options.logger_levels.items()}
        or "<none>",
    )
