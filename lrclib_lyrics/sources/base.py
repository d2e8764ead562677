from __future__ import annotations

from .types import LyricResponse, RemoteLyricInfo, SearchQuery


class LyricProvider:
    """
    Lyric-provider extension point as seen by the host.

    search() never raises for "no data"; get_lyrics() raises ResourceNotFound.
    """

    name: str

    async def search(self, query: SearchQuery) -> list[RemoteLyricInfo]:
        raise NotImplementedError

    async def get_lyrics(self, lyric_id: str) -> LyricResponse:
        raise NotImplementedError
