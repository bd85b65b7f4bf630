from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from spotify4py.domain.errors import ApiError, ValidationError
from spotify4py.domain.model import Album, Artist, ObjectType, Paging, Track
from spotify4py.domain.result import Err, Ok
from spotify4py.ui import cli as cli_module

if TYPE_CHECKING:
    from spotify4py.domain.result import Result

ARTIST = Artist(id="artist-1", name="Band of Horses", genres=("indie folk", "indie rock"))
ALBUM = Album(
    id="album-1",
    name="Everything All the Time",
    artists=(ARTIST,),
    release_date="2006-03-21",
    tracks=Paging(
        items=(Track(id="track-1", name="The Funeral", artists=(ARTIST,)),),
        limit=50,
        total=1,
    ),
)
TRACK = Track(id="track-1", name="The Funeral", artists=(ARTIST,), album=ALBUM)


class FakeSpotifyClient:
    def __init__(
        self, search_result: Result[list[Paging[object]], Exception] | None = None
    ) -> None:
        self.search_result = search_result or Ok([])
        self.search_calls: list[dict[str, object]] = []

    def search(self, q: str, object_types: list[str], **kwargs: object) -> object:
        self.search_calls.append({"q": q, "object_types": object_types, **kwargs})
        return self.search_result

    def get_album(self, album_id: str, *, market: str | None = None) -> object:
        del market
        assert album_id == "album-1"
        return Ok(ALBUM)

    def get_artist(self, artist_id: str) -> object:
        return Err(ApiError(404, f"non existing id {artist_id}"))

    def get_track(self, track_id: str, *, market: str | None = None) -> object:
        del track_id, market
        return Ok(TRACK)

    def get_available_genre_seeds(self) -> object:
        return Ok(["acoustic", "afrobeat"])


def _use_client(monkeypatch: pytest.MonkeyPatch, client: FakeSpotifyClient) -> None:
    monkeypatch.setattr(cli_module, "_build_client", lambda: client)


def test_search_prints_one_line_per_item(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    client = FakeSpotifyClient(
        Ok([Paging(items=(ALBUM,), limit=2), Paging(items=(ARTIST,), limit=2)])
    )
    _use_client(monkeypatch, client)

    cli_module.main(
        ["search", "band of horses", "--type", "album", "--type", "artist", "--limit", "2"]
    )

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "album-1\tEverything All the Time\tBand of Horses\t2006-03-21",
        "artist-1\tBand of Horses\tindie folk, indie rock",
    ]
    assert client.search_calls == [
        {"q": "band of horses", "object_types": ["album", "artist"], "limit": 2, "market": None}
    ]


def test_search_defaults_to_tracks(monkeypatch: pytest.MonkeyPatch) -> None:
    client = FakeSpotifyClient()
    _use_client(monkeypatch, client)

    cli_module.main(["search", "funeral"])

    assert client.search_calls[0]["object_types"] == [ObjectType.TRACK.value]


def test_album_prints_album_and_tracks(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _use_client(monkeypatch, FakeSpotifyClient())

    cli_module.main(["album", "album-1"])

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("album-1\t")
    assert lines[1] == "track-1\tThe Funeral\tBand of Horses\t"


def test_track_and_genres(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _use_client(monkeypatch, FakeSpotifyClient())

    cli_module.main(["track", "track-1"])
    cli_module.main(["genres"])

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "track-1\tThe Funeral\tBand of Horses\tEverything All the Time",
        "acoustic",
        "afrobeat",
    ]


def test_validation_error_exits_with_code_two(monkeypatch: pytest.MonkeyPatch) -> None:
    client = FakeSpotifyClient(
        Err(ValidationError("The limit parameter must be between 1 and 50"))
    )
    _use_client(monkeypatch, client)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["search", "funeral", "--limit", "0"])

    assert excinfo.value.code == 2


def test_api_error_exits_with_code_one(monkeypatch: pytest.MonkeyPatch) -> None:
    _use_client(monkeypatch, FakeSpotifyClient())

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["artist", "missing"])

    assert excinfo.value.code == 1


def test_missing_credentials_exit_with_code_one(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SPOTIFY_CLIENT_ID", raising=False)
    monkeypatch.delenv("SPOTIFY_CLIENT_SECRET", raising=False)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["genres"])

    assert excinfo.value.code == 1


def test_unknown_search_type_is_an_argument_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["search", "funeral", "--type", "playlist"])

    assert excinfo.value.code == 2
