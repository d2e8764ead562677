from __future__ import annotations

import logging
from typing import Any

import httpx

from lrclib_lyrics.errors import ResourceNotFound, UpstreamDecodeError

from .base import LyricProvider
from .types import (
    LyricId,
    LyricMetadata,
    LyricResponse,
    LyricVariant,
    RemoteLyricInfo,
    SearchQuery,
    UpstreamRecord,
    format_seconds,
    seconds_to_ticks,
    ticks_to_seconds,
)

logger = logging.getLogger(__name__)

BASE_URL = "https://lrclib.net"

# Transport, status and payload failures all read as "no lyrics" to the host.
_UPSTREAM_ERRORS = (httpx.HTTPError, UpstreamDecodeError)


class LrcLibProvider(LyricProvider):
    """
    Lyric provider backed by lrclib.net.

    The client belongs to the caller and is only borrowed per request. Nothing
    is cached between calls: the lyric id returned by search() carries all the
    state get_lyrics() needs, and get_lyrics() always asks lrclib again.
    Cancelling the awaiting task aborts the in-flight request.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        name: str = "LrcLib",
        timeout_s: float = 10.0,
        user_agent: str | None = None,
    ):
        self.client = client
        self.name = name
        self.timeout_s = timeout_s
        self.user_agent = user_agent

    async def search(self, query: SearchQuery) -> list[RemoteLyricInfo]:
        artist = query.artist
        if artist is None:
            logger.info("Artist name is required")
            return []
        if not query.song_name:
            logger.info("Song name is required")
            return []
        if not query.album_name:
            logger.info("Album name is required")
            return []
        if query.duration_ticks is None:
            logger.info("Duration is required")
            return []

        params = {
            "track_name": query.song_name,
            "artist_name": artist,
            "album_name": query.album_name,
            "duration": format_seconds(ticks_to_seconds(query.duration_ticks)),
        }
        try:
            record = await self._get_record("/api/get", params=params)
        except _UPSTREAM_ERRORS as e:
            logger.debug(
                "Unable to get results for %s - %s - %s: %s",
                artist,
                query.album_name,
                query.song_name,
                e,
            )
            return []

        if record is None:
            return []

        results: list[RemoteLyricInfo] = []
        for variant in (LyricVariant.PLAIN, LyricVariant.SYNCED):
            if record.lyrics(variant):
                results.append(self._to_info(record, variant))
        return results

    async def get_lyrics(self, lyric_id: str) -> LyricResponse:
        parsed = LyricId.parse(lyric_id)

        try:
            record = await self._get_record(f"/api/get/{parsed.upstream_id}")
        except _UPSTREAM_ERRORS as e:
            logger.debug("Unable to get results for id %s: %s", lyric_id, e)
            raise ResourceNotFound(f"Unable to get results for id {lyric_id}") from e

        if record is None:
            raise ResourceNotFound(f"Unable to get results for id {lyric_id}")

        text = record.lyrics(parsed.variant)
        if not text:
            raise ResourceNotFound(f"No {parsed.variant.value} lyrics for id {lyric_id}")
        return LyricResponse.from_text(parsed.variant.document_format, text)

    async def _get_record(self, path: str, params: dict[str, str] | None = None) -> UpstreamRecord | None:
        kwargs: dict[str, Any] = {"params": params, "timeout": self.timeout_s}
        if self.user_agent:
            kwargs["headers"] = {"User-Agent": self.user_agent}

        r = await self.client.get(f"{BASE_URL}{path}", **kwargs)
        r.raise_for_status()
        try:
            data = r.json()
        except ValueError as e:
            raise UpstreamDecodeError(f"lrclib returned invalid JSON for {r.url}") from e
        if not isinstance(data, dict):
            return None
        return UpstreamRecord.from_json(data)

    def _to_info(self, record: UpstreamRecord, variant: LyricVariant) -> RemoteLyricInfo:
        return RemoteLyricInfo(
            id=str(LyricId(upstream_id=record.id, variant=variant)),
            provider_name=self.name,
            metadata=LyricMetadata(
                album=record.album_name,
                artist=record.artist_name,
                title=record.track_name,
                length_ticks=seconds_to_ticks(record.duration or 0),
                is_synced=variant is LyricVariant.SYNCED,
            ),
        )
