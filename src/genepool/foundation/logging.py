from __future__ import annotations

import logging
from typing import IO

GENEPOOL_LOGGER = "genepool"
_THREADED_FORMAT = "%(levelname)s [%(threadName)s] %(name)s: %(message)s"
_PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_genepool_logging(
    *,
    level: int = logging.INFO,
    stream: IO[str] | None = None,
    show_threads: bool = True,
) -> logging.Handler | None:
    """
    Attach a console handler to the ``genepool`` logger.

    Library modules never configure logging themselves; applications and the
    bundled examples call this once. Worker threads of ``ThreadedEvaluator``
    report fitness failures, so records carry the thread name unless
    ``show_threads`` is False.

    Returns the attached handler, or None when the root logger or the
    ``genepool`` logger already has handlers.
    """
    genepool_logger = logging.getLogger(GENEPOOL_LOGGER)
    if logging.getLogger().handlers or genepool_logger.handlers:
        return None

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(_THREADED_FORMAT if show_threads else _PLAIN_FORMAT))
    genepool_logger.addHandler(handler)
    genepool_logger.setLevel(level)
    genepool_logger.propagate = False
    return handler


__all__ = ["GENEPOOL_LOGGER", "configure_genepool_logging"]
