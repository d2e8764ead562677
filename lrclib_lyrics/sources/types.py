from __future__ import annotations

import enum
import io
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from lrclib_lyrics.errors import InvalidLyricId, UnknownLyricVariant, UpstreamDecodeError

# Host durations are expressed in 100ns ticks.
TICKS_PER_SECOND = 10_000_000


def ticks_to_seconds(ticks: int) -> float:
    return ticks / TICKS_PER_SECOND


def seconds_to_ticks(seconds: float) -> int:
    return int(round(seconds * TICKS_PER_SECOND))


def format_seconds(seconds: float) -> str:
    """
    Invariant decimal form used in query strings: "180" for whole values,
    shortest round-tripping form ("180.5") otherwise.
    """
    seconds = float(seconds)
    if seconds.is_integer():
        return str(int(seconds))
    return repr(seconds)


class LyricVariant(str, enum.Enum):
    PLAIN = "plain"
    SYNCED = "synced"

    @property
    def document_format(self) -> str:
        return "lrc" if self is LyricVariant.SYNCED else "txt"

    @classmethod
    def from_suffix(cls, suffix: str) -> LyricVariant | None:
        wanted = suffix.lower()
        for variant in cls:
            if variant.value == wanted:
                return variant
        return None


@dataclass(frozen=True, slots=True)
class LyricId:
    """Upstream record id plus the lyric variant; "<id>_<variant>" on the wire."""

    upstream_id: int
    variant: LyricVariant

    def __str__(self) -> str:
        return f"{self.upstream_id}_{self.variant.value}"

    @classmethod
    def parse(cls, value: str) -> LyricId:
        raw_id, sep, suffix = value.partition("_")
        if not sep:
            raise InvalidLyricId(f"Lyric id {value!r} has no variant suffix")
        if not (raw_id.isascii() and raw_id.isdigit()):
            raise InvalidLyricId(f"Lyric id {value!r} does not start with a numeric record id")
        variant = LyricVariant.from_suffix(suffix)
        if variant is None:
            raise UnknownLyricVariant(f"Unknown lyric variant {suffix!r} in id {value!r}")
        return cls(upstream_id=int(raw_id), variant=variant)


@dataclass(frozen=True, slots=True)
class SearchQuery:
    artist_names: Sequence[str] | None
    song_name: str | None
    album_name: str | None
    duration_ticks: int | None

    @property
    def artist(self) -> str | None:
        if not self.artist_names:
            return None
        return self.artist_names[0]


@dataclass(frozen=True, slots=True)
class UpstreamRecord:
    """A track record as returned by lrclib /api/get."""

    id: int
    track_name: str
    artist_name: str
    album_name: str
    duration: float | None
    plain_lyrics: str | None
    synced_lyrics: str | None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> UpstreamRecord:
        try:
            duration = data.get("duration")
            return cls(
                id=int(data["id"]),
                track_name=data.get("trackName") or "",
                artist_name=data.get("artistName") or "",
                album_name=data.get("albumName") or "",
                duration=float(duration) if duration is not None else None,
                plain_lyrics=data.get("plainLyrics"),
                synced_lyrics=data.get("syncedLyrics"),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise UpstreamDecodeError(f"Malformed lrclib record: {e!r}") from e

    def lyrics(self, variant: LyricVariant) -> str | None:
        if variant is LyricVariant.SYNCED:
            return self.synced_lyrics
        return self.plain_lyrics


@dataclass(frozen=True, slots=True)
class LyricMetadata:
    album: str
    artist: str
    title: str
    length_ticks: int
    is_synced: bool


@dataclass(frozen=True, slots=True)
class RemoteLyricInfo:
    """One search hit: a single lyric variant of an upstream record."""

    id: str
    provider_name: str
    metadata: LyricMetadata


@dataclass(frozen=True, slots=True)
class LyricResponse:
    format: str
    stream: io.BytesIO

    @classmethod
    def from_text(cls, fmt: str, text: str) -> LyricResponse:
        return cls(format=fmt, stream=io.BytesIO(text.encode("utf-8")))
