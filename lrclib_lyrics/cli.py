from __future__ import annotations

import asyncio
import json
from dataclasses import asdict
from pathlib import Path

import httpx
import typer

from lrclib_lyrics.config import ProviderConfig, load_config
from lrclib_lyrics.errors import InvalidLyricId, ResourceNotFound
from lrclib_lyrics.logging_setup import setup_logging
from lrclib_lyrics.sources.lrclib import LrcLibProvider
from lrclib_lyrics.sources.types import (
    LyricResponse,
    RemoteLyricInfo,
    SearchQuery,
    seconds_to_ticks,
    ticks_to_seconds,
)


app = typer.Typer(no_args_is_help=True, add_completion=False)


def _make_client() -> httpx.AsyncClient:
    return httpx.AsyncClient()


def _build_provider(cfg: ProviderConfig, client: httpx.AsyncClient) -> LrcLibProvider:
    return LrcLibProvider(
        client,
        name=cfg.provider_name,
        timeout_s=cfg.timeout_s,
        user_agent=cfg.user_agent,
    )


def _fmt_length(ticks: int) -> str:
    if not ticks:
        return "?"
    total = int(ticks_to_seconds(ticks))
    return f"{total // 60}:{total % 60:02d}"


@app.command()
def search(
    artist: list[str] | None = typer.Option(None, "--artist", "-a", help="Artist name (repeatable, first one is used)"),
    title: str | None = typer.Option(None, "--title", "-t", help="Song title"),
    album: str | None = typer.Option(None, "--album", help="Album name"),
    duration: float | None = typer.Option(None, "--duration", "-d", help="Track duration in seconds"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """
    Look up lyrics for a track on lrclib.

    Artist, title, album and duration are all needed for a match.
    """
    setup_logging(debug)
    cfg = load_config()
    query = SearchQuery(
        artist_names=tuple(artist or ()),
        song_name=title,
        album_name=album,
        duration_ticks=seconds_to_ticks(duration) if duration is not None else None,
    )

    async def run() -> list[RemoteLyricInfo]:
        async with _make_client() as client:
            return await _build_provider(cfg, client).search(query)

    results = asyncio.run(run())

    if not results:
        typer.echo("No results found")
        return

    if json_output:
        typer.echo(json.dumps([asdict(r) for r in results], indent=2, ensure_ascii=False))
        return

    for i, r in enumerate(results, 1):
        md = r.metadata
        kind = "synced" if md.is_synced else "plain"
        typer.echo(f"{i}. {md.artist} - {md.title} ({_fmt_length(md.length_ticks)}) [{kind}]")
        if md.album:
            typer.echo(f"   Album: {md.album}")
        typer.echo(f"   ID: {r.id}")


@app.command()
def fetch(
    lyric_id: str = typer.Argument(..., help="Lyric id printed by `search`, e.g. 42_synced"),
    out: Path | None = typer.Option(None, "--out", help="Output file (default: stdout)"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Download the lyrics behind a search result id."""
    setup_logging(debug)
    cfg = load_config()

    async def run() -> LyricResponse:
        async with _make_client() as client:
            return await _build_provider(cfg, client).get_lyrics(lyric_id)

    try:
        response = asyncio.run(run())
    except InvalidLyricId as e:
        raise typer.BadParameter(str(e), param_hint="LYRIC_ID") from e
    except ResourceNotFound:
        typer.echo(f"Lyrics not found: {lyric_id}", err=True)
        raise typer.Exit(code=1)

    text = response.stream.read().decode("utf-8")
    if out:
        out.write_text(text, encoding="utf-8")
        typer.echo(f"Saved {response.format} lyrics to {out}")
    else:
        typer.echo(text)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
