from __future__ import annotations

"""
Logging Configuration Models.

Holds the settings used to start the logging subsystem for a scaffold
run. Console output is kept to bare messages so the progress lines read
like a CLI transcript; the rotating file keeps timestamps and logger names
for diagnosis.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Mapping of string identifiers to native logging constants
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_DEBUG_CONSOLE_FMT = "%(levelname)-7s %(name)s: %(message)s"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for one logging bootstrap.

    Attributes:
        level: Minimum severity level to capture.
        console: Write records to stderr.
        log_file: Optional path of a rotating log file.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files to keep.
        console_fmt: Format for stderr records.
        file_fmt: Format for log file records.
        datefmt: Timestamp format for the log file.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 512 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s: %(message)s"
    file_fmt: str = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
    datefmt: str = "%Y-%m-%dT%H:%M:%S"

    @classmethod
    def for_cli(cls, debug: bool = False, log_file: Optional[str] = None) -> "LoggingConfig":
        """
        Build the configuration used by the command line.

        Debug runs show the emitting logger on the console so adapter and
        builder messages can be told apart.
        """
        if debug:
            return cls(level="DEBUG", log_file=log_file, console_fmt=_DEBUG_CONSOLE_FMT)
        return cls(level="INFO", log_file=log_file)
