"""
Logging helper.

`get_logger()` hands out loggers under the "reviewslugs" namespace and
configures that namespace once (stream handler, level from settings). Nothing
is attached to the root logger, so host applications keep their own setup.
"""

import logging
from typing import Optional

from reviewslugs.util.settings import get_settings

ROOT_NAME = "reviewslugs"
_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def _configure() -> None:
    global _configured
    root = logging.getLogger(ROOT_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
    settings = get_settings()
    root.setLevel(settings.effective_log_level)
    _configured = True
    for issue in settings.validate():
        root.warning(issue)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger in the package namespace.

    Args:
        name: dotted suffix ("services.extract"); None returns the package logger.
    """
    if not _configured:
        _configure()
    if not name:
        return logging.getLogger(ROOT_NAME)
    if name.startswith(ROOT_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_NAME}.{name}")
