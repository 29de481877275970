import sys
from pathlib import Path
from typing import Union
from loguru import logger

# Remove default logger
logger.remove()

# Define severity levels and their corresponding files
SEVERITY_FILES = {
    "ERROR": "error.log",
    "WARNING": "warning.log",
    "CRITICAL": "critical.log",
    "INFO": "info.log",
    "DEBUG": "debug.log",
    "SUCCESS": "success.log"
}

# Common log format for files
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[module]}:{function}:{line} - {message}"

# Common log format for console (with colors)
CONSOLE_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[module]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"

# Records logged without a bound module still render
logger.configure(extra={"module": "txkit"})

_console_sinks = []


def configure_console_logging(level: str = "INFO"):
    """(Re)install the stdout/stderr console sinks at the given level."""
    for sink_id in _console_sinks:
        logger.remove(sink_id)
    _console_sinks.clear()

    _console_sinks.append(logger.add(
        sys.stdout,
        format=CONSOLE_FORMAT,
        level=level,
        colorize=True,
        filter=lambda record: record["level"].no < logger.level("WARNING").no
    ))
    _console_sinks.append(logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level="WARNING",
        colorize=True,
        filter=lambda record: record["level"].no >= logger.level("WARNING").no
    ))


configure_console_logging()


def configure_file_logging(write_to_files: bool = True, logs_dir: Union[str, Path] = "logs"):
    """Configure file-based logging based on settings."""
    if write_to_files:
        logs_path = Path(logs_dir)
        logs_path.mkdir(parents=True, exist_ok=True)
        # Add file loggers for each severity level
        for level, filename in SEVERITY_FILES.items():
            logger.add(
                logs_path / filename,
                rotation="100 MB",
                retention="7 days",
                compression="zip",
                format=FILE_FORMAT,
                level=level,
                backtrace=True,
                diagnose=True,
                filter=lambda record, level=level: record["level"].name == level
            )

# Export the configured logger
__all__ = ["logger", "configure_console_logging", "configure_file_logging"]
