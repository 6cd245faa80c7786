from __future__ import annotations

from dataclasses import replace

import typer

from lyricbar.app import watch as watch_loop
from lyricbar.cache.disk import DiskCache
from lyricbar.cache.maintenance import remove_selected_from_cache
from lyricbar.config import load_config, save_config_lang, save_config_value
from lyricbar.host.playlist import PlaylistHost
from lyricbar.i18n import set_lang, t
from lyricbar.logging_setup import setup_logging
from lyricbar.mpris.client import MprisClient
from lyricbar.sources.service import LyricsService


app = typer.Typer(no_args_is_help=True, add_completion=False)


@app.command()
def watch(
    player: str | None = typer.Option(None, "--player", help="MPRIS service or short name (e.g. vlc)"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    refresh_hz: float | None = typer.Option(None, "--refresh-hz", help="Polling frequency (Hz)"),
    no_alt_screen: bool = typer.Option(False, "--no-alt-screen", help="Do not use alternate screen buffer"),
):
    """
    Show lyrics of the track playing in an MPRIS player.
    """
    cfg = load_config()
    if refresh_hz is not None:
        cfg = replace(cfg, refresh_hz=refresh_hz)
    if no_alt_screen:
        cfg = replace(cfg, use_alt_screen=False)

    setup_logging(debug)
    set_lang(cfg.lang)
    raise typer.Exit(code=watch_loop(cfg, preferred_player=player or cfg.preferred_player))


@app.command()
def players():
    """List available MPRIS players."""
    for p in MprisClient.list_players():
        typer.echo(p)


@app.command()
def lookup(
    artist: str | None = typer.Option(None, "--artist", "-a", help="Artist name"),
    title: str | None = typer.Option(None, "--title", "-t", help="Song title"),
    tag_lyrics: str | None = typer.Option(None, "--tag-lyrics", help="Lyrics already embedded in the file tags"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """
    Resolve lyrics once (tags, cache, script, azlyrics) and print them.
    """
    setup_logging(debug)
    cfg = load_config()
    set_lang(cfg.lang)

    host, track = PlaylistHost.single(artist=artist, title=title, lyrics=tag_lyrics)
    shown: list[str] = []
    svc = LyricsService.from_config(cfg, host, lambda _track, text: shown.append(text))
    res = svc.update_lyrics(track)

    if not res.has_lyrics:
        typer.echo(shown[-1] if shown else t("lyrics_not_found"), err=True)
        raise typer.Exit(code=1)
    typer.echo(res.text, nl=not res.text.endswith("\n"))


@app.command()
def cache(
    remove: bool = typer.Option(False, "--remove", help="Remove the entry for --artist/--title"),
    clear: bool = typer.Option(False, "--clear", help="Remove every cached entry"),
    path: bool = typer.Option(False, "--path", help="Print the cache directory"),
    artist: str | None = typer.Option(None, "--artist", "-a"),
    title: str | None = typer.Option(None, "--title", "-t"),
):
    """Manage the lyrics cache."""
    cfg = load_config()
    set_lang(cfg.lang)
    disk = DiskCache(cfg.cache_dir)

    if path:
        typer.echo(str(cfg.cache_dir))
    elif clear:
        count = disk.clear()
        typer.echo(t("cache_cleared", count=count, path=str(cfg.cache_dir)))
    elif remove:
        if not artist or not title:
            raise typer.BadParameter("--remove needs both --artist and --title")
        host, _track = PlaylistHost.single(artist=artist, title=title, selected=True)
        entry = str(disk.path_for(artist, title))
        if remove_selected_from_cache(host, disk):
            typer.echo(t("cache_removed", path=entry))
        else:
            typer.echo(t("cache_not_found", path=entry))
            raise typer.Exit(code=1)
    else:
        typer.echo("Use --remove, --clear or --path")


@app.command()
def config(
    customcmd: str | None = typer.Option(None, "--customcmd", help="Lyrics script, e.g. 'my-lyrics %artist% %title%'"),
    lang: str | None = typer.Option(None, "--lang", help="Interface language: EN or RU"),
):
    """Show or change persistent settings."""
    if customcmd is not None:
        save_config_value("customcmd", customcmd)
    if lang is not None:
        if lang.upper() not in ("EN", "RU"):
            raise typer.BadParameter("lang must be EN or RU")
        save_config_lang(lang)

    cfg = load_config()
    typer.echo(f"config_dir={cfg.config_dir}")
    typer.echo(f"cache_dir={cfg.cache_dir}")
    typer.echo(f"lang={cfg.lang}")
    typer.echo(f"customcmd={cfg.custom_command}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
