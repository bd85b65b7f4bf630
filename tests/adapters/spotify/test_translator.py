"""Translator tests for Spotify payloads."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import fields, is_dataclass, replace
from datetime import UTC, datetime
from enum import Enum
from typing import TYPE_CHECKING, Any

import pytest

from spotify4py.adapters.spotify.schema import (
    SavedTrackItem,
    SpotifyAlbum,
    SpotifyArtist,
    SpotifyAudioFeatures,
    SpotifyCategory,
    SpotifyCopyright,
    SpotifyEpisode,
    SpotifyPage,
    SpotifyPlaylist,
    SpotifyShow,
    SpotifyTrack,
    SpotifyUser,
    TokenResponse,
)
from spotify4py.adapters.spotify.translator import (
    translate_album,
    translate_artist,
    translate_audio_features,
    translate_category,
    translate_copyright,
    translate_episode,
    translate_optional_items,
    translate_page,
    translate_playlist,
    translate_saved_track,
    translate_show,
    translate_token,
    translate_track,
    translate_user,
)
from spotify4py.domain.errors import UnrecognizedValueError
from spotify4py.domain.model import (
    Album,
    AlbumGroup,
    AlbumType,
    Artist,
    AudioFeatures,
    Category,
    Copyright,
    CopyrightType,
    Episode,
    Followers,
    Image,
    LinkedTrack,
    Modality,
    Paging,
    Playlist,
    PlaylistTracksRef,
    ReleaseDatePrecision,
    Restrictions,
    ResumePoint,
    SavedTrack,
    Show,
    Track,
    User,
    frozen_mapping,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from pydantic import BaseModel

    from tests.adapters.spotify.conftest import SpotifyPayload


@pytest.mark.parametrize(
    ("code", "expected"),
    [("C", CopyrightType.PERFORMANCE), ("P", CopyrightType.SOUND_RECORDING)],
)
def test_translate_copyright_maps_codes(code: str, expected: CopyrightType) -> None:
    copyright_ = translate_copyright(SpotifyCopyright(text="(C) 2020", type=code))

    assert copyright_.copyright_type is expected
    assert copyright_.text == "(C) 2020"


def test_translate_copyright_rejects_unknown_code() -> None:
    with pytest.raises(UnrecognizedValueError):
        translate_copyright(SpotifyCopyright(text="(X) 2020", type="X"))


def test_translate_page_preserves_metadata(
    artist_payload: SpotifyPayload,
    page_payload: Callable[..., SpotifyPayload],
) -> None:
    items = [{**artist_payload, "id": f"artist-{i}"} for i in range(20)]
    payload = page_payload(
        items,
        limit=20,
        offset=20,
        total=100,
        next_url="https://api.spotify.com/v1/page?offset=40",
    )
    page = SpotifyPage[SpotifyArtist].model_validate(payload)

    translated = translate_page(page, lambda artist: Artist(id=artist.id, name=artist.name))

    assert [artist.id for artist in translated.items] == [f"artist-{i}" for i in range(20)]
    assert translated.limit == 20
    assert translated.offset == 20
    assert translated.total == 100
    assert translated.href == payload["href"]
    assert translated.next == "https://api.spotify.com/v1/page?offset=40"
    assert translated.previous is None


def test_translate_optional_items_keeps_missing_positions() -> None:
    assert translate_optional_items([1, None, 3], str) == ["1", None, "3"]


def test_translate_album_carries_nested_entities(album_payload: SpotifyPayload) -> None:
    album = translate_album(SpotifyAlbum.model_validate(album_payload))

    assert album.id == album_payload["id"]
    assert album.label == "Epic"
    assert album.release_date == "1983"
    assert album.external_ids == {"upc": "5099749994324"}
    assert [artist.name for artist in album.artists] == ["Band of Horses"]
    assert album.tracks is not None
    assert album.tracks.total == 1
    assert album.tracks.items[0].duration_ms == 222075


def test_translate_track_keeps_artist_details(track_payload: SpotifyPayload) -> None:
    track = translate_track(SpotifyTrack.model_validate(track_payload))
    artist = track.artists[0]

    assert track.track_number == 2
    assert track.external_ids == {"isrc": "USIR20400274"}
    assert artist.genres == ("indie folk", "indie rock")
    assert artist.followers is not None
    assert artist.followers.total == 1022411
    assert artist.images[0].height == 640


def test_translate_track_allows_local_tracks_without_id() -> None:
    track = translate_track(SpotifyTrack.model_validate({"name": "Local file", "is_local": True}))

    assert track.id is None
    assert track.is_local


def test_translate_token_splits_scope_and_keeps_previous_refresh_token() -> None:
    issued_at = datetime(2024, 5, 1, 12, tzinfo=UTC)
    token = TokenResponse(access_token="abc", expires_in=60, scope="user-read-email user-top-read")

    credential = translate_token(token, issued_at=issued_at, previous_refresh_token="refresh-1")

    assert credential.scope == ("user-read-email", "user-top-read")
    assert credential.refresh_token == "refresh-1"
    assert credential.issued_at == issued_at
    assert not credential.is_expired(now=issued_at)


def _to_wire(value: object) -> object:
    """Render a domain record as the JSON-like payload Spotify would send for it."""

    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if is_dataclass(value) and not isinstance(value, type):
        wire = {item.name: _to_wire(getattr(value, item.name)) for item in fields(value)}
        if isinstance(value, Copyright):
            wire["type"] = wire.pop("copyright_type")
        return wire
    if isinstance(value, Mapping):
        return {key: _to_wire(item) for key, item in value.items()}
    if isinstance(value, tuple | list):
        return [_to_wire(item) for item in value]
    return value


ARTIST = Artist(
    id="0OdUWJ0sBjDrqHygGUXeCF",
    name="Band of Horses",
    uri="spotify:artist:0OdUWJ0sBjDrqHygGUXeCF",
    href="https://api.spotify.com/v1/artists/0OdUWJ0sBjDrqHygGUXeCF",
    external_urls=frozen_mapping(
        {"spotify": "https://open.spotify.com/artist/0OdUWJ0sBjDrqHygGUXeCF"}
    ),
    genres=("indie folk", "indie rock"),
    images=(Image(url="https://i.scdn.co/image/artist", height=640, width=640),),
    popularity=59,
    followers=Followers(total=1022411),
)
COPYRIGHTS = (
    Copyright(text="(C) 2006 Sub Pop", copyright_type=CopyrightType.PERFORMANCE),
    Copyright(text="(P) 2006 Sub Pop", copyright_type=CopyrightType.SOUND_RECORDING),
)
ALBUM = Album(
    id="5DMgvfHb1ruoJbXVPs9E4w",
    name="Everything All the Time",
    album_type=AlbumType.ALBUM,
    album_group=AlbumGroup.APPEARS_ON,
    artists=(ARTIST,),
    available_markets=("DE", "SE"),
    copyrights=COPYRIGHTS,
    external_ids=frozen_mapping({"upc": "098787069820"}),
    external_urls=frozen_mapping({"spotify": "https://open.spotify.com/album/5DMg"}),
    genres=("indie",),
    href="https://api.spotify.com/v1/albums/5DMgvfHb1ruoJbXVPs9E4w",
    images=(Image(url="https://i.scdn.co/image/album"),),
    label="Sub Pop Records",
    popularity=61,
    release_date="2006-03-21",
    release_date_precision=ReleaseDatePrecision.DAY,
    restrictions=Restrictions(reason="market"),
    total_tracks=10,
    tracks=Paging(
        items=(Track(id="4zFvq5aj1zv5hYfAQUsGmS", name="The Funeral", track_number=3),),
        limit=50,
        total=10,
        href="https://api.spotify.com/v1/albums/5DMgvfHb1ruoJbXVPs9E4w/tracks",
        next="https://api.spotify.com/v1/albums/5DMgvfHb1ruoJbXVPs9E4w/tracks?offset=1",
    ),
    uri="spotify:album:5DMgvfHb1ruoJbXVPs9E4w",
)
TRACK = Track(
    id="4zFvq5aj1zv5hYfAQUsGmS",
    name="The Funeral",
    album=replace(ALBUM, tracks=None),
    artists=(ARTIST,),
    available_markets=("DE",),
    disc_number=1,
    duration_ms=322000,
    explicit=False,
    external_ids=frozen_mapping({"isrc": "USSUB0661703"}),
    external_urls=frozen_mapping({"spotify": "https://open.spotify.com/track/4zFv"}),
    href="https://api.spotify.com/v1/tracks/4zFvq5aj1zv5hYfAQUsGmS",
    is_playable=True,
    linked_from=LinkedTrack(id="1ONoPkp5XIuw3tZ1GzrNKZ", uri="spotify:track:1ONo"),
    popularity=70,
    preview_url="https://p.scdn.co/mp3-preview/funeral",
    restrictions=Restrictions(reason="explicit"),
    track_number=3,
    uri="spotify:track:4zFvq5aj1zv5hYfAQUsGmS",
)
SHOW = Show(
    id="38bS44xjbVVZ3No3ByF1dJ",
    name="Vetenskapsradion Historia",
    available_markets=("SE",),
    copyrights=COPYRIGHTS,
    description="Lyssna på Vetenskapsradion Historia",
    html_description="<p>Lyssna på Vetenskapsradion Historia</p>",
    external_urls=frozen_mapping({"spotify": "https://open.spotify.com/show/38bS"}),
    images=(Image(url="https://i.scdn.co/image/show", height=300, width=300),),
    is_externally_hosted=False,
    languages=("sv",),
    media_type="audio",
    publisher="Sveriges Radio",
    total_episodes=500,
    episodes=Paging(
        items=(Episode(id="512ojhOuo1ktJprKbVcKyQ", name="Okänd"),),
        limit=1,
        offset=2,
        total=500,
        previous="https://api.spotify.com/v1/shows/38bS44xjbVVZ3No3ByF1dJ/episodes?offset=1",
    ),
    uri="spotify:show:38bS44xjbVVZ3No3ByF1dJ",
)
EPISODE = Episode(
    id="512ojhOuo1ktJprKbVcKyQ",
    name="Tredje rikets knarkande granskas",
    audio_preview_url="https://p.scdn.co/mp3-preview/episode",
    description="Tyska arméns framgångar",
    duration_ms=1502795,
    explicit=False,
    external_urls=frozen_mapping({"spotify": "https://open.spotify.com/episode/512o"}),
    is_playable=True,
    languages=("sv",),
    release_date="2015-10-01",
    release_date_precision=ReleaseDatePrecision.DAY,
    resume_point=ResumePoint(fully_played=False, resume_position_ms=360000),
    show=replace(SHOW, episodes=None),
    uri="spotify:episode:512ojhOuo1ktJprKbVcKyQ",
)
USER = User(
    id="wizzler",
    display_name="JM Wizzler",
    country="SE",
    email="email@example.com",
    external_urls=frozen_mapping({"spotify": "https://open.spotify.com/user/wizzler"}),
    followers=Followers(total=3829),
    images=(Image(url="https://i.scdn.co/image/user"),),
    product="premium",
    uri="spotify:user:wizzler",
)

ROUND_TRIPS = [
    pytest.param(ARTIST, SpotifyArtist, translate_artist, id="artist"),
    pytest.param(ALBUM, SpotifyAlbum, translate_album, id="album"),
    pytest.param(TRACK, SpotifyTrack, translate_track, id="track"),
    pytest.param(SHOW, SpotifyShow, translate_show, id="show"),
    pytest.param(EPISODE, SpotifyEpisode, translate_episode, id="episode"),
    pytest.param(USER, SpotifyUser, translate_user, id="user"),
    pytest.param(
        Playlist(
            id="37i9dQZF1DXcBWIGoYBM5M",
            name="Today's Top Hits",
            owner=USER,
            collaborative=False,
            description="The hottest tracks right now.",
            public=True,
            snapshot_id="MTY4NjE2",
            tracks=PlaylistTracksRef(total=50, href="https://api.spotify.com/v1/playlists/37i9"),
        ),
        SpotifyPlaylist,
        translate_playlist,
        id="playlist",
    ),
    pytest.param(
        Category(
            id="dinner",
            name="Dinner",
            href="https://api.spotify.com/v1/browse/categories/dinner",
            icons=(Image(url="https://t.scdn.co/media/dinner.jpg", height=274, width=274),),
        ),
        SpotifyCategory,
        translate_category,
        id="category",
    ),
    pytest.param(
        AudioFeatures(
            id="4zFvq5aj1zv5hYfAQUsGmS",
            acousticness=0.00242,
            danceability=0.585,
            duration_ms=322000,
            energy=0.842,
            instrumentalness=0.00686,
            key=9,
            liveness=0.0866,
            loudness=-5.883,
            mode=Modality.MAJOR,
            speechiness=0.0556,
            tempo=118.211,
            time_signature=4,
            valence=0.428,
        ),
        SpotifyAudioFeatures,
        translate_audio_features,
        id="audio-features",
    ),
    pytest.param(
        SavedTrack(added_at=datetime(2024, 3, 1, 10, 15, tzinfo=UTC), track=TRACK),
        SavedTrackItem,
        translate_saved_track,
        id="saved-track",
    ),
]


@pytest.mark.parametrize(("record", "schema", "translate"), ROUND_TRIPS)
def test_translate_rebuilds_record_from_its_wire_form(
    record: object, schema: type[BaseModel], translate: Callable[[Any], object]
) -> None:
    assert translate(schema.model_validate(_to_wire(record))) == record


def test_translated_records_are_hashable_and_read_only(album_payload: SpotifyPayload) -> None:
    album = translate_album(SpotifyAlbum.model_validate(album_payload))
    again = translate_album(SpotifyAlbum.model_validate(album_payload))

    assert hash(album) == hash(again)
    assert len({album, again}) == 1
    with pytest.raises(TypeError):
        album.external_ids["upc"] = "0"  # type: ignore[index]
