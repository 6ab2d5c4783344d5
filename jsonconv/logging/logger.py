# jsonconv/logging/logger.py
"""
Logging for jsonconv.

Every logger lives under the "jsonconv" namespace, and configure_logging()
only touches that namespace. An application embedding the converter keeps
control of the root logger; the CLI entrypoint is the one place that
attaches a handler.

    from jsonconv.logging.logger import get_logger
    logger = get_logger(__name__)
    logger.info(f"{CONFIG} loaded {path}")
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

ROOT_LOGGER_NAME = "jsonconv"
DEFAULT_FORMAT = "[%(levelname)s] %(name)s - %(message)s"


class _JsonconvHandler(logging.StreamHandler):
    """
    The handler configure_logging() owns.

    Without an explicit stream it writes to whatever sys.stderr is at emit
    time, so redirected stderr (test runners, CLI harnesses) is followed.
    """

    def __init__(self, stream: Optional[IO[str]] = None):
        self._follow_stderr = stream is None
        super().__init__(stream)

    @property
    def stream(self) -> IO[str]:
        return sys.stderr if self._follow_stderr else self._stream

    @stream.setter
    def stream(self, value: IO[str]) -> None:
        self._stream = value


def configure_logging(
    level: int = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    Attach a stream handler to the jsonconv logger and set its level.

    Safe to call multiple times; later calls only adjust the level.

    Args:
        level: Level for the jsonconv namespace
        fmt: Record format for the handler
        stream: Output stream; follows sys.stderr when omitted

    Returns:
        The jsonconv package logger
    """
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not any(isinstance(h, _JsonconvHandler) for h in package_logger.handlers):
        handler = _JsonconvHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        package_logger.addHandler(handler)

    package_logger.setLevel(level)
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """
    Logger for a module, nested under the jsonconv namespace.

    Names outside the namespace (plugins, tests) are nested under it so that
    configure_logging() covers them too.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "DEFAULT_FORMAT", "ROOT_LOGGER_NAME"]
