"""Mini README: Logging helpers shared by the gateway and the dashboard.

Structure:
    * configure_root_logger - installs one stream handler on the root logger.
    * get_logger - module logger factory that guarantees the setup ran.

Usage:
    Modules declare ``LOGGER = get_logger(__name__)`` at import time. The
    root handler is installed once per process, so reloading the FastAPI
    application under uvicorn does not duplicate log lines.
"""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER_INITIALISED = False


def configure_root_logger(level: Optional[int] = None) -> None:
    """Install the timestamped root handler once and apply ``level``.

    Module imports call this without a level, which only installs the
    handler (at INFO on first use). Entry points pass an explicit level,
    which is applied even when the handler already exists.
    """

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if level is not None:
        root_logger.setLevel(level)
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    if level is None:
        root_logger.setLevel(logging.INFO)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def level_for_environment(environment: str) -> int:
    """Map an environment label onto a logging level."""

    return logging.INFO if environment.lower() == "production" else logging.DEBUG


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a named logger, configuring the root logger on first use."""

    configure_root_logger()
    return logging.getLogger(name)
