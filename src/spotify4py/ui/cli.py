# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from spotify4py.adapters.spotify import SpotifyClient
from spotify4py.config import configure_logging, get_spotify_config
from spotify4py.domain.errors import ValidationError
from spotify4py.domain.model import Album, Artist, Episode, ObjectType, Show, Track
from spotify4py.domain.result import Err

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from types import FrameType

    from spotify4py.adapters.spotify import SpotifyResult

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Query the Spotify Web API")
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Search the Spotify catalog")
    search.add_argument("query", type=str, help="Search query")
    search.add_argument(
        "--type",
        dest="types",
        action="append",
        choices=[object_type.value for object_type in ObjectType],
        help="Object type to search for; repeat for several (default: track)",
    )
    search.add_argument(
        "--limit",
        type=int,
        default=10,
        help="Number of results per type (default: %(default)s)",
    )
    search.add_argument("--market", type=str, help="ISO 3166-1 alpha-2 country code")

    album = subparsers.add_parser("album", help="Show an album and its tracks")
    album.add_argument("id", type=str, help="Spotify album id")
    album.add_argument("--market", type=str, help="ISO 3166-1 alpha-2 country code")

    artist = subparsers.add_parser("artist", help="Show an artist")
    artist.add_argument("id", type=str, help="Spotify artist id")

    track = subparsers.add_parser("track", help="Show a track")
    track.add_argument("id", type=str, help="Spotify track id")
    track.add_argument("--market", type=str, help="ISO 3166-1 alpha-2 country code")

    subparsers.add_parser("genres", help="List the available recommendation genre seeds")

    return parser.parse_args(list(argv))


def _build_client() -> SpotifyClient:
    config = get_spotify_config()
    return SpotifyClient.with_client_credentials(
        config.client_id,
        config.client_secret,
        api=config.api,
        accounts=config.accounts,
    )


def _names(artists: Iterable[Artist]) -> str:
    return ", ".join(artist.name for artist in artists)


def _format(item: object) -> str:
    match item:
        case Album():
            fields = (item.id, item.name, _names(item.artists), item.release_date or "")
        case Artist():
            fields = (item.id, item.name, ", ".join(item.genres))
        case Track():
            album_name = item.album.name if item.album else ""
            fields = (item.id or "", item.name, _names(item.artists), album_name)
        case Show():
            fields = (item.id, item.name, item.publisher or "")
        case Episode():
            fields = (item.id, item.name, item.release_date or "")
        case _:
            fields = (str(item),)
    return "\t".join(fields)


def _unwrap[T](result: SpotifyResult[T]) -> T:
    if isinstance(result, Err):
        raise result.error
    return result.value


def _run(client: SpotifyClient, args: argparse.Namespace) -> list[str]:
    if args.command == "search":
        pages = _unwrap(
            client.search(
                args.query,
                args.types or [ObjectType.TRACK.value],
                limit=args.limit,
                market=args.market,
            )
        )
        return [_format(item) for page in pages for item in page.items]
    if args.command == "album":
        album = _unwrap(client.get_album(args.id, market=args.market))
        lines = [_format(album)]
        if album.tracks is not None:
            lines.extend(_format(track) for track in album.tracks.items)
        return lines
    if args.command == "artist":
        return [_format(_unwrap(client.get_artist(args.id)))]
    if args.command == "track":
        return [_format(_unwrap(client.get_track(args.id, market=args.market)))]
    if args.command == "genres":
        return list(_unwrap(client.get_available_genre_seeds()))
    raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        client = _build_client()
        lines = _run(client, parsed_args)
    except ValidationError:
        log.exception("Invalid request")
        sys.exit(2)
    except Exception:
        log.exception("Spotify request failed")
        sys.exit(1)

    for line in lines:
        print(line)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
