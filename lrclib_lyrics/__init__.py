from __future__ import annotations

__version__ = "0.1.0"

from lrclib_lyrics.errors import (
    InvalidLyricId,
    LyricsError,
    ResourceNotFound,
    UnknownLyricVariant,
    UpstreamDecodeError,
)
from lrclib_lyrics.sources.base import LyricProvider
from lrclib_lyrics.sources.lrclib import LrcLibProvider
from lrclib_lyrics.sources.types import (
    LyricId,
    LyricMetadata,
    LyricResponse,
    LyricVariant,
    RemoteLyricInfo,
    SearchQuery,
)

__all__ = [
    "__version__",
    "InvalidLyricId",
    "LrcLibProvider",
    "LyricId",
    "LyricMetadata",
    "LyricProvider",
    "LyricResponse",
    "LyricVariant",
    "LyricsError",
    "RemoteLyricInfo",
    "ResourceNotFound",
    "SearchQuery",
    "UnknownLyricVariant",
    "UpstreamDecodeError",
]
