from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from lrclib_lyrics import __version__

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER_NAME = "LrcLib"
DEFAULT_TIMEOUT_S = 10.0
DEFAULT_USER_AGENT = f"lrclib-lyrics/{__version__} (+https://lrclib.net)"


@dataclass(frozen=True)
class ProviderConfig:
    provider_name: str
    timeout_s: float
    user_agent: str


def load_config() -> ProviderConfig:
    return ProviderConfig(
        provider_name=os.getenv("LRCLIB_LYRICS_PROVIDER_NAME") or DEFAULT_PROVIDER_NAME,
        timeout_s=_float_env("LRCLIB_LYRICS_TIMEOUT", DEFAULT_TIMEOUT_S),
        user_agent=os.getenv("LRCLIB_LYRICS_USER_AGENT") or DEFAULT_USER_AGENT,
    )


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Ignoring non-positive %s=%r, using %s", name, raw, default)
        return default
    return value
