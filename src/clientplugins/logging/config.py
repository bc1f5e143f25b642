# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""structlog setup shared by every plugin.

Log lines always go to stderr so that ``clientplugins replay`` can print its
JSON summary on stdout. Each module logs through ``get_logger(__name__)``,
which tags its events with the module name.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from clientplugins.settings import Settings

__all__ = ["configure_logging", "get_logger", "level_number"]


def level_number(level: str) -> int:
    """Map a level name such as ``"debug"`` to its numeric value.

    Raises:
        ValueError: If the name is not a standard logging level.
    """
    number = logging.getLevelName(level.strip().upper())
    if not isinstance(number, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return number


def _renderer(log_format: str) -> Any:
    if log_format == "json":
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=False)


def configure_logging(settings: Settings | None = None) -> None:
    """Route structlog output to stderr at the configured level.

    Args:
        settings: Settings to read ``log_level`` and ``log_format`` from.
            Defaults to a fresh ``Settings()`` built from the environment.
    """
    if settings is None:
        from clientplugins.settings import Settings

        settings = Settings()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _renderer(settings.log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_number(settings.log_level)),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def get_logger(name: str | None = None) -> Any:
    """Return a lazy logger; events carry ``logger=name`` when a name is given."""
    if name is None:
        return structlog.get_logger()
    return structlog._config.BoundLoggerLazyProxy(None, initial_values={"logger": name}, logger_factory_args=())
