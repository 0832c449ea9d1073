from __future__ import annotations

"""
Logging Settings and Sinks.

LoggingConfig holds the choices the CLI makes at startup: verbosity from
--debug, the stderr console, and the optional --log-file. The sink
factories turn those choices into the handlers the queue listener writes
to. Every handler created here is tagged so configure_logging can detach
exactly what it installed and leave foreign handlers (pytest's, for
example) alone.
"""

import logging
import os
import sys
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from typing import List, Optional

_HANDLER_TAG_ATTR: str = "_treegen_handler"

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# A run writes a handful of lines per entry; keep the log small
LOG_FILE_MAX_BYTES = 512 * 1024
LOG_FILE_BACKUPS = 2


@dataclass(frozen=True)
class LoggingConfig:
    """
    Startup logging choices.

    Attributes:
        level: Level name such as "INFO" or "DEBUG". Unknown names mean INFO.
        console: Echo records on stderr.
        log_file: Optional path of a rotating log file.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    @property
    def level_int(self) -> int:
        value = logging.getLevelName(str(self.level or "").strip().upper())
        return value if isinstance(value, int) else logging.INFO

# -----------------------------------------------------------------------------
# SINK FACTORIES
# -----------------------------------------------------------------------------

def build_sinks(cfg: LoggingConfig) -> List[logging.Handler]:
    """
    Create the tagged handlers requested by a configuration.

    An unwritable log file is reported on stderr and skipped; the console
    sink still works in that case.
    """
    sinks: List[logging.Handler] = []
    if cfg.console:
        sinks.append(console_sink(cfg.level_int))
    if cfg.log_file:
        fh = _file_sink(cfg.log_file, cfg.level_int)
        if fh is not None:
            sinks.append(fh)
    return sinks


def console_sink(level_int: int, fmt: str = CONSOLE_FORMAT) -> logging.Handler:
    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(level_int)
    sh.setFormatter(logging.Formatter(fmt))
    return tag_handler(sh)


def tag_handler(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_TAG_ATTR, True)
    return handler


def is_tagged(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _file_sink(log_file: str, level_int: int) -> Optional[RotatingFileHandler]:
    try:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: cannot open log file '{log_file}': {e}\n")
        return None

    fh.setLevel(level_int)
    fh.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return tag_handler(fh)
