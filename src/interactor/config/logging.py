"""Optional logging setup for applications that embed interactor."""

from __future__ import annotations

import logging

from .settings import get_log_level

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Point the root logger at stderr so the ``interactor.*`` debug lines show up.

    The library never calls this itself. Without ``level`` the value of
    ``INTERACTOR_LOG_LEVEL`` is used, and a malformed value raises
    ``ConfigurationError`` here rather than during a call.
    """

    if level is None:
        level = get_log_level()
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S", force=force)
