from __future__ import annotations

import logging
import os

# httpx logs every request at INFO; only show that chatter when debugging.
_HTTP_LOGGERS = ("httpx", "httpcore")


def setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO
    level_name = os.getenv("LRCLIB_LYRICS_LOG_LEVEL")
    if level_name:
        level = getattr(logging, level_name.upper(), level)

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    http_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in _HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)
