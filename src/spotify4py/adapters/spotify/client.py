"""Typed facade over the Spotify Web API.

Every endpoint method validates its parameters locally, performs the request(s)
with the current bearer token and returns ``Ok(value)`` or
``Err(ValidationError | ApiError)``. Success payloads that do not match the
documented shape raise ``UnexpectedResponseError``.
"""

from __future__ import annotations

import asyncio
import functools
from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING, Any

import pydantic
from pydantic import TypeAdapter

from spotify4py.adapters.http import default_client_factory
from spotify4py.config.spotify import default_api_http_config
from spotify4py.domain.errors import (
    ApiError,
    UnexpectedResponseError,
    UnrecognizedValueError,
    ValidationError,
)
from spotify4py.domain.model import FollowType, IncludeGroup, ObjectType
from spotify4py.domain.result import Err, Ok, Result

from .auth import AuthorizationCode, AuthorizationCodePKCE, ClientCredentials
from .schema import (
    AlbumPageEnvelope,
    AlbumsEnvelope,
    ArtistPageEnvelope,
    ArtistsEnvelope,
    AudioFeaturesEnvelope,
    CategoryPageEnvelope,
    EpisodePageEnvelope,
    EpisodesEnvelope,
    ErrorResponse,
    FeaturedPlaylistsEnvelope,
    FollowedArtistsEnvelope,
    GenreSeedsEnvelope,
    PlaylistPageEnvelope,
    SavedAlbumItem,
    SavedShowItem,
    SavedTrackItem,
    ShowPageEnvelope,
    ShowsEnvelope,
    SpotifyAlbum,
    SpotifyArtist,
    SpotifyAudioAnalysis,
    SpotifyAudioFeatures,
    SpotifyCategory,
    SpotifyEpisode,
    SpotifyPage,
    SpotifyRecommendations,
    SpotifyShow,
    SpotifyTrack,
    SpotifyUser,
    TrackPageEnvelope,
    TracksEnvelope,
)
from .translator import (
    translate_album,
    translate_artist,
    translate_audio_analysis,
    translate_audio_features,
    translate_category,
    translate_cursor_page,
    translate_episode,
    translate_featured_playlists,
    translate_optional_items,
    translate_page,
    translate_playlist,
    translate_recommendations,
    translate_saved_album,
    translate_saved_show,
    translate_saved_track,
    translate_show,
    translate_track,
    translate_user,
)
from .validation import (
    require_ids,
    require_member,
    require_non_empty,
    require_paging,
    require_range,
    require_seeds,
    require_subset,
    require_tunable_attributes,
)

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from datetime import datetime

    import httpx
    from pydantic import BaseModel

    from spotify4py.adapters.http import HttpClient
    from spotify4py.config.http import HttpConfig
    from spotify4py.config.spotify import SpotifyConfig
    from spotify4py.domain.errors import AuthError
    from spotify4py.domain.model import (
        AccessCredential,
        Album,
        Artist,
        AudioAnalysis,
        AudioFeatures,
        Category,
        CursorPaging,
        Episode,
        FeaturedPlaylists,
        Paging,
        Playlist,
        Recommendations,
        SavedAlbum,
        SavedShow,
        SavedTrack,
        Searchable,
        Show,
        Track,
        User,
    )

    from .auth import AuthFlow, CodeProvider

log = getLogger(__name__)

type SpotifyResult[T] = Result[T, ValidationError | ApiError]
type QueryValue = str | int | float | bool | Sequence[str] | None

MAX_SEARCH_OFFSET = 2000
MAX_RECOMMENDATIONS_LIMIT = 100
INCLUDE_EXTERNAL_VALUES = ("audio",)


def _with_error_handling[**P, T](func: Callable[P, T]) -> Callable[P, SpotifyResult[T]]:
    """Turn raised validation and API errors into ``Err`` values."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> SpotifyResult[T]:
        try:
            return Ok(func(*args, **kwargs))
        except (ValidationError, ApiError) as exc:
            return Err(exc)

    return wrapper


def _query(**params: QueryValue) -> dict[str, str]:
    """Build query parameters, omitting empty optional values and comma-joining lists."""

    query: dict[str, str] = {}
    for name, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            query[name] = "true" if value else "false"
        elif isinstance(value, int | float):
            query[name] = str(value)
        elif isinstance(value, str):
            if value:
                query[name] = value
        else:
            joined = ",".join(str(item) for item in value)
            if joined:
                query[name] = joined
    return query


def _decoder[T](
    schema: type[BaseModel] | TypeAdapter[Any], translate: Callable[[Any], T]
) -> Callable[[bytes], T]:
    """Decode a response body and translate it to its domain value.

    Payloads that fail schema validation, or that break a domain invariant such as a
    page holding more items than its limit, raise ``UnexpectedResponseError``.
    """

    validate = (
        schema.validate_json if isinstance(schema, TypeAdapter) else schema.model_validate_json
    )

    def decode(content: bytes) -> T:
        try:
            return translate(validate(content))
        except UnrecognizedValueError:
            raise
        except ValueError as exc:
            raise UnexpectedResponseError("Response payload does not match its schema") from exc

    return decode


def _timestamp(value: str | datetime | None) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return value.strftime("%Y-%m-%dT%H:%M:%S")


_BOOL_LIST = TypeAdapter(list[bool])

_decode_album = _decoder(SpotifyAlbum, translate_album)
_decode_artist = _decoder(SpotifyArtist, translate_artist)
_decode_track = _decoder(SpotifyTrack, translate_track)
_decode_episode = _decoder(SpotifyEpisode, translate_episode)
_decode_show = _decoder(SpotifyShow, translate_show)
_decode_category = _decoder(SpotifyCategory, translate_category)
_decode_user = _decoder(SpotifyUser, translate_user)
_decode_audio_features = _decoder(SpotifyAudioFeatures, translate_audio_features)
_decode_audio_analysis = _decoder(SpotifyAudioAnalysis, translate_audio_analysis)
_decode_recommendations = _decoder(SpotifyRecommendations, translate_recommendations)
_decode_bool_list = _decoder(_BOOL_LIST, list)

_SEARCH_DECODERS: dict[ObjectType, Callable[[bytes], Paging[Searchable]]] = {
    ObjectType.ALBUM: _decoder(
        AlbumPageEnvelope, lambda envelope: translate_page(envelope.albums, translate_album)
    ),
    ObjectType.ARTIST: _decoder(
        ArtistPageEnvelope, lambda envelope: translate_page(envelope.artists, translate_artist)
    ),
    ObjectType.TRACK: _decoder(
        TrackPageEnvelope, lambda envelope: translate_page(envelope.tracks, translate_track)
    ),
    ObjectType.SHOW: _decoder(
        ShowPageEnvelope, lambda envelope: translate_page(envelope.shows, translate_show)
    ),
    ObjectType.EPISODE: _decoder(
        EpisodePageEnvelope, lambda envelope: translate_page(envelope.episodes, translate_episode)
    ),
}


class SpotifyClient:
    """One method per Web API endpoint, bound to a single auth flow.

    Construction authenticates eagerly and raises the ``AuthError`` if that fails.
    """

    def __init__(
        self,
        auth_flow: AuthFlow,
        *,
        api: HttpConfig | None = None,
        client_factory: Callable[[HttpConfig], HttpClient] | None = None,
    ) -> None:
        self._auth_flow = auth_flow
        self._api = api or default_api_http_config()
        self._client_factory = client_factory or default_client_factory

        result = auth_flow.authenticate()
        if isinstance(result, Err):
            log.error("Authentication failed: %s", result.error)
            raise result.error
        self._credential = result.value
        log.info("Authenticated with %s", type(auth_flow).__name__)

    @classmethod
    def with_client_credentials(
        cls,
        client_id: str,
        client_secret: str,
        *,
        api: HttpConfig | None = None,
        accounts: HttpConfig | None = None,
        client_factory: Callable[[HttpConfig], HttpClient] | None = None,
    ) -> SpotifyClient:
        flow = ClientCredentials(
            client_id, client_secret, accounts=accounts, client_factory=client_factory
        )
        return cls(flow, api=api, client_factory=client_factory)

    @classmethod
    def with_authorization_code(
        cls,
        client_id: str,
        client_secret: str | None,
        redirect_uri: str,
        scopes: Sequence[str] = (),
        *,
        with_pkce: bool = False,
        code_provider: CodeProvider | None = None,
        api: HttpConfig | None = None,
        accounts: HttpConfig | None = None,
        client_factory: Callable[[HttpConfig], HttpClient] | None = None,
    ) -> SpotifyClient:
        flow_type = AuthorizationCodePKCE if with_pkce else AuthorizationCode
        flow = flow_type(
            client_id,
            client_secret,
            redirect_uri,
            scopes,
            code_provider=code_provider,
            accounts=accounts,
            client_factory=client_factory,
        )
        return cls(flow, api=api, client_factory=client_factory)

    @classmethod
    def from_config(
        cls,
        config: SpotifyConfig,
        *,
        with_pkce: bool = False,
        code_provider: CodeProvider | None = None,
        client_factory: Callable[[HttpConfig], HttpClient] | None = None,
    ) -> SpotifyClient:
        """Use the authorization-code flow when a redirect URI is configured."""

        if config.redirect_uri is None:
            return cls.with_client_credentials(
                config.client_id,
                config.client_secret,
                api=config.api,
                accounts=config.accounts,
                client_factory=client_factory,
            )
        return cls.with_authorization_code(
            config.client_id,
            config.client_secret,
            config.redirect_uri,
            config.scope,
            with_pkce=with_pkce,
            code_provider=code_provider,
            api=config.api,
            accounts=config.accounts,
            client_factory=client_factory,
        )

    @property
    def credential(self) -> AccessCredential:
        return self._credential

    def request_refreshed_token(self) -> Result[AccessCredential, AuthError]:
        """Replace the held credential with a refreshed one.

        The current credential is kept when the refresh fails.
        """

        result = self._auth_flow.request_refreshed_token(self._credential.refresh_token)
        if isinstance(result, Ok):
            self._credential = result.value
            log.info("Access token refreshed")
        else:
            log.error("Token refresh failed: %s", result.error)
        return result

    # Albums

    @_with_error_handling
    def get_album(self, album_id: str, *, market: str | None = None) -> Album:
        return self._get(f"albums/{album_id}", _query(market=market), _decode_album)

    @_with_error_handling
    def get_album_tracks(
        self,
        album_id: str,
        *,
        limit: int = 20,
        offset: int = 0,
        market: str | None = None,
    ) -> Paging[Track]:
        require_paging(limit, offset)
        return self._get(
            f"albums/{album_id}/tracks",
            _query(limit=limit, offset=offset, market=market),
            _decoder(SpotifyPage[SpotifyTrack], _page_of(translate_track)),
        )

    @_with_error_handling
    def get_albums(
        self, album_ids: Sequence[str], *, market: str | None = None
    ) -> list[Album | None]:
        """Albums in request order; unknown ids yield ``None`` in place."""

        require_ids(album_ids, maximum=20)
        return self._get(
            "albums",
            _query(ids=album_ids, market=market),
            _decoder(
                AlbumsEnvelope,
                lambda envelope: translate_optional_items(envelope.albums, translate_album),
            ),
        )

    # Browse

    @_with_error_handling
    def get_category(
        self,
        category_id: str,
        *,
        country: str | None = None,
        locale: str | None = None,
    ) -> Category:
        return self._get(
            f"browse/categories/{category_id}",
            _query(country=country, locale=locale),
            _decode_category,
        )

    @_with_error_handling
    def get_category_playlists(
        self,
        category_id: str,
        *,
        country: str | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Paging[Playlist]:
        require_paging(limit, offset)
        return self._get(
            f"browse/categories/{category_id}/playlists",
            _query(limit=limit, offset=offset, country=country),
            _decoder(
                PlaylistPageEnvelope,
                lambda envelope: translate_page(envelope.playlists, translate_playlist),
            ),
        )

    @_with_error_handling
    def get_categories(
        self,
        *,
        country: str | None = None,
        locale: str | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Paging[Category]:
        require_paging(limit, offset)
        return self._get(
            "browse/categories",
            _query(limit=limit, offset=offset, country=country, locale=locale),
            _decoder(
                CategoryPageEnvelope,
                lambda envelope: translate_page(envelope.categories, translate_category),
            ),
        )

    @_with_error_handling
    def get_featured_playlists(
        self,
        *,
        locale: str | None = None,
        country: str | None = None,
        timestamp: str | datetime | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> FeaturedPlaylists:
        """Featured playlists plus the editorial message shown above them.

        ``timestamp`` is the user's local time (``yyyy-MM-ddTHH:mm:ss``); a
        ``datetime`` is formatted accordingly.
        """

        require_paging(limit, offset)
        return self._get(
            "browse/featured-playlists",
            _query(
                limit=limit,
                offset=offset,
                country=country,
                locale=locale,
                timestamp=_timestamp(timestamp),
            ),
            _decoder(FeaturedPlaylistsEnvelope, translate_featured_playlists),
        )

    @_with_error_handling
    def get_new_releases(
        self,
        *,
        country: str | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Paging[Album]:
        require_paging(limit, offset)
        return self._get(
            "browse/new-releases",
            _query(limit=limit, offset=offset, country=country),
            _decoder(
                AlbumPageEnvelope,
                lambda envelope: translate_page(envelope.albums, translate_album),
            ),
        )

    @_with_error_handling
    def get_available_genre_seeds(self) -> list[str]:
        return self._get(
            "recommendations/available-genre-seeds",
            {},
            _decoder(GenreSeedsEnvelope, lambda envelope: list(envelope.genres)),
        )

    @_with_error_handling
    def get_recommendations(
        self,
        *,
        limit: int = 20,
        market: str | None = None,
        attributes: Mapping[str, str | int | float] | None = None,
        seed_artists: Sequence[str] = (),
        seed_genres: Sequence[str] = (),
        seed_tracks: Sequence[str] = (),
    ) -> Recommendations:
        """Tracks recommended from up to five seeds.

        At least one of ``seed_artists``, ``seed_genres`` or ``seed_tracks`` must be
        non-empty. ``attributes`` holds tunable track attributes whose names start
        with ``min_``, ``max_`` or ``target_`` (e.g. ``{"target_energy": 0.8}``).
        """

        require_range("limit", limit, minimum=1, maximum=MAX_RECOMMENDATIONS_LIMIT)
        require_seeds(seed_artists=seed_artists, seed_genres=seed_genres, seed_tracks=seed_tracks)
        tunables = dict(attributes or {})
        require_tunable_attributes(tunables)

        params = _query(**tunables)
        params.update(
            _query(
                limit=limit,
                seed_artists=seed_artists,
                seed_genres=seed_genres,
                seed_tracks=seed_tracks,
                market=market,
            )
        )
        return self._get("recommendations", params, _decode_recommendations)

    # Artists

    @_with_error_handling
    def get_artist(self, artist_id: str) -> Artist:
        return self._get(f"artists/{artist_id}", {}, _decode_artist)

    @_with_error_handling
    def get_artist_albums(
        self,
        artist_id: str,
        *,
        include_groups: Sequence[str] = (),
        market: str | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Paging[Album]:
        require_paging(limit, offset)
        groups = require_subset("include_groups", include_groups, list(IncludeGroup))
        return self._get(
            f"artists/{artist_id}/albums",
            _query(limit=limit, offset=offset, market=market, include_groups=groups),
            _decoder(SpotifyPage[SpotifyAlbum], _page_of(translate_album)),
        )

    @_with_error_handling
    def get_artist_top_tracks(self, artist_id: str, *, country: str) -> list[Track]:
        require_non_empty("country", country)
        return self._get(
            f"artists/{artist_id}/top-tracks",
            _query(country=country),
            _decoder(
                TracksEnvelope,
                lambda envelope: [translate_track(item) for item in envelope.tracks if item],
            ),
        )

    @_with_error_handling
    def get_artist_related_artists(self, artist_id: str) -> list[Artist]:
        return self._get(
            f"artists/{artist_id}/related-artists",
            {},
            _decoder(
                ArtistsEnvelope,
                lambda envelope: [translate_artist(item) for item in envelope.artists if item],
            ),
        )

    @_with_error_handling
    def get_artists(self, artist_ids: Sequence[str]) -> list[Artist | None]:
        require_ids(artist_ids, maximum=50)
        return self._get(
            "artists",
            _query(ids=artist_ids),
            _decoder(
                ArtistsEnvelope,
                lambda envelope: translate_optional_items(envelope.artists, translate_artist),
            ),
        )

    # Episodes and shows

    @_with_error_handling
    def get_episode(self, episode_id: str, *, market: str | None = None) -> Episode:
        """A single episode.

        Reading resume points requires the ``user-read-playback-position`` scope.
        An episode unavailable in ``market`` comes back as a 404 ``ApiError``.
        """

        return self._get(f"episodes/{episode_id}", _query(market=market), _decode_episode)

    @_with_error_handling
    def get_episodes(
        self, episode_ids: Sequence[str], *, market: str | None = None
    ) -> list[Episode | None]:
        require_ids(episode_ids, maximum=50)
        return self._get(
            "episodes",
            _query(ids=episode_ids, market=market),
            _decoder(
                EpisodesEnvelope,
                lambda envelope: translate_optional_items(envelope.episodes, translate_episode),
            ),
        )

    @_with_error_handling
    def get_show(self, show_id: str, *, market: str | None = None) -> Show:
        return self._get(f"shows/{show_id}", _query(market=market), _decode_show)

    @_with_error_handling
    def get_shows(
        self, show_ids: Sequence[str], *, market: str | None = None
    ) -> list[Show | None]:
        require_ids(show_ids, maximum=50)
        return self._get(
            "shows",
            _query(ids=show_ids, market=market),
            _decoder(
                ShowsEnvelope,
                lambda envelope: translate_optional_items(envelope.shows, translate_show),
            ),
        )

    @_with_error_handling
    def get_show_episodes(
        self,
        show_id: str,
        *,
        market: str | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Paging[Episode]:
        require_paging(limit, offset)
        return self._get(
            f"shows/{show_id}/episodes",
            _query(limit=limit, offset=offset, market=market),
            _decoder(SpotifyPage[SpotifyEpisode], _page_of(translate_episode)),
        )

    # Tracks

    @_with_error_handling
    def get_track_audio_analysis(self, track_id: str) -> AudioAnalysis:
        return self._get(f"audio-analysis/{track_id}", {}, _decode_audio_analysis)

    @_with_error_handling
    def get_track_audio_features(self, track_id: str) -> AudioFeatures:
        return self._get(f"audio-features/{track_id}", {}, _decode_audio_features)

    @_with_error_handling
    def get_tracks_audio_features(self, track_ids: Sequence[str]) -> list[AudioFeatures | None]:
        require_ids(track_ids, maximum=100)
        return self._get(
            "audio-features",
            _query(ids=track_ids),
            _decoder(
                AudioFeaturesEnvelope,
                lambda envelope: translate_optional_items(
                    envelope.audio_features, translate_audio_features
                ),
            ),
        )

    @_with_error_handling
    def get_tracks(
        self, track_ids: Sequence[str], *, market: str | None = None
    ) -> list[Track | None]:
        require_ids(track_ids, maximum=50)
        return self._get(
            "tracks",
            _query(ids=track_ids, market=market),
            _decoder(
                TracksEnvelope,
                lambda envelope: translate_optional_items(envelope.tracks, translate_track),
            ),
        )

    @_with_error_handling
    def get_track(self, track_id: str, *, market: str | None = None) -> Track:
        return self._get(f"tracks/{track_id}", _query(market=market), _decode_track)

    # Search

    @_with_error_handling
    def search(
        self,
        q: str,
        object_types: Sequence[ObjectType | str],
        *,
        market: str | None = None,
        limit: int = 20,
        offset: int = 0,
        include_external: str | None = None,
    ) -> list[Paging[Searchable]]:
        """Search the catalog for each requested object type.

        One request is issued per type, concurrently; the returned pages follow the
        order of ``object_types``. The first failure (in that order) is returned.
        """

        require_non_empty("q", q)
        require_non_empty("object_types", object_types)
        require_range("limit", limit, minimum=1, maximum=50)
        require_range("offset", offset, minimum=0, maximum=MAX_SEARCH_OFFSET)
        types = require_subset(
            "object_types", [str(item) for item in object_types], list(ObjectType)
        )
        if include_external:
            require_member("include_external", include_external, INCLUDE_EXTERNAL_VALUES)

        params = _query(
            limit=limit,
            offset=offset,
            q=q,
            market=market,
            include_external=include_external,
        )
        return asyncio.run(self._search_async(types, params))

    async def _search_async(
        self, object_types: Sequence[ObjectType], params: dict[str, str]
    ) -> list[Paging[Searchable]]:
        async with self._client_factory(self._api) as client:
            outcomes = await asyncio.gather(
                *(
                    self._fetch(
                        client,
                        "search",
                        {**params, "type": object_type.value},
                        _SEARCH_DECODERS[object_type],
                    )
                    for object_type in object_types
                ),
                return_exceptions=True,
            )

        pages: list[Paging[Searchable]] = []
        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                raise outcome
            pages.append(outcome)
        return pages

    # Follow

    @_with_error_handling
    def is_following(self, id_type: FollowType | str, ids: Sequence[str]) -> list[bool]:
        follow_type = require_member("id_type", str(id_type), list(FollowType))
        require_ids(ids, maximum=50)
        return self._get(
            "me/following/contains",
            _query(type=follow_type.value, ids=ids),
            _decode_bool_list,
        )

    @_with_error_handling
    def are_users_following_playlist(
        self, playlist_id: str, user_ids: Sequence[str]
    ) -> list[bool]:
        require_ids(user_ids, maximum=5)
        return self._get(
            f"playlists/{playlist_id}/followers/contains",
            _query(ids=user_ids),
            _decode_bool_list,
        )

    @_with_error_handling
    def follow(self, id_type: FollowType | str, ids: Sequence[str]) -> None:
        follow_type = require_member("id_type", str(id_type), list(FollowType))
        require_ids(ids, maximum=50)
        self._send(
            "PUT",
            "me/following",
            expected_status=204,
            params=_query(type=follow_type.value, ids=ids),
        )

    @_with_error_handling
    def follow_playlist(self, playlist_id: str, *, public: bool = True) -> None:
        self._send(
            "PUT",
            f"playlists/{playlist_id}/followers",
            expected_status=200,
            json={"public": public},
        )

    @_with_error_handling
    def get_followed_artists(
        self, *, limit: int = 20, after: str | None = None
    ) -> CursorPaging[Artist]:
        require_range("limit", limit, minimum=1, maximum=50)
        return self._get(
            "me/following",
            _query(limit=limit, type=FollowType.ARTIST.value, after=after),
            _decoder(
                FollowedArtistsEnvelope,
                lambda envelope: translate_cursor_page(envelope.artists, translate_artist),
            ),
        )

    @_with_error_handling
    def unfollow(self, id_type: FollowType | str, ids: Sequence[str]) -> None:
        follow_type = require_member("id_type", str(id_type), list(FollowType))
        require_ids(ids, maximum=50)
        self._send(
            "DELETE",
            "me/following",
            expected_status=204,
            params=_query(type=follow_type.value, ids=ids),
        )

    @_with_error_handling
    def unfollow_playlist(self, playlist_id: str) -> None:
        self._send("DELETE", f"playlists/{playlist_id}/followers", expected_status=200)

    # Library

    @_with_error_handling
    def are_albums_saved(self, album_ids: Sequence[str]) -> list[bool]:
        return self._contains("me/albums/contains", album_ids)

    @_with_error_handling
    def are_shows_saved(self, show_ids: Sequence[str]) -> list[bool]:
        return self._contains("me/shows/contains", show_ids)

    @_with_error_handling
    def are_tracks_saved(self, track_ids: Sequence[str]) -> list[bool]:
        return self._contains("me/tracks/contains", track_ids)

    @_with_error_handling
    def get_saved_albums(
        self, *, limit: int = 20, offset: int = 0, market: str | None = None
    ) -> Paging[SavedAlbum]:
        require_paging(limit, offset)
        return self._get(
            "me/albums",
            _query(limit=limit, offset=offset, market=market),
            _decoder(SpotifyPage[SavedAlbumItem], _page_of(translate_saved_album)),
        )

    @_with_error_handling
    def get_saved_shows(
        self, *, limit: int = 20, offset: int = 0, market: str | None = None
    ) -> Paging[SavedShow]:
        require_paging(limit, offset)
        return self._get(
            "me/shows",
            _query(limit=limit, offset=offset, market=market),
            _decoder(SpotifyPage[SavedShowItem], _page_of(translate_saved_show)),
        )

    @_with_error_handling
    def get_saved_tracks(
        self, *, limit: int = 20, offset: int = 0, market: str | None = None
    ) -> Paging[SavedTrack]:
        require_paging(limit, offset)
        return self._get(
            "me/tracks",
            _query(limit=limit, offset=offset, market=market),
            _decoder(SpotifyPage[SavedTrackItem], _page_of(translate_saved_track)),
        )

    @_with_error_handling
    def remove_saved_albums(self, album_ids: Sequence[str]) -> None:
        self._modify_library("DELETE", "me/albums", album_ids)

    @_with_error_handling
    def remove_saved_shows(
        self, show_ids: Sequence[str], *, market: str | None = None
    ) -> None:
        self._modify_library("DELETE", "me/shows", show_ids, market=market)

    @_with_error_handling
    def remove_saved_tracks(self, track_ids: Sequence[str]) -> None:
        self._modify_library("DELETE", "me/tracks", track_ids)

    @_with_error_handling
    def save_albums(self, album_ids: Sequence[str]) -> None:
        self._modify_library("PUT", "me/albums", album_ids)

    @_with_error_handling
    def save_shows(self, show_ids: Sequence[str]) -> None:
        self._modify_library("PUT", "me/shows", show_ids)

    @_with_error_handling
    def save_tracks(self, track_ids: Sequence[str]) -> None:
        self._modify_library("PUT", "me/tracks", track_ids)

    # Users

    @_with_error_handling
    def get_current_user_profile(self) -> User:
        return self._get("me", {}, _decode_user)

    @_with_error_handling
    def get_user_profile(self, user_id: str) -> User:
        return self._get(f"users/{user_id}", {}, _decode_user)

    # Request plumbing

    def _contains(self, path: str, ids: Sequence[str]) -> list[bool]:
        require_ids(ids, maximum=50)
        return self._get(path, _query(ids=ids), _decode_bool_list)

    def _modify_library(
        self,
        method: str,
        path: str,
        ids: Sequence[str],
        *,
        market: str | None = None,
    ) -> None:
        require_ids(ids, maximum=50)
        self._send(method, path, expected_status=200, params=_query(ids=ids, market=market))

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._credential.access_token}"}

    def _get[T](self, path: str, params: dict[str, str], decode: Callable[[bytes], T]) -> T:
        return asyncio.run(self._get_async(path, params, decode))

    async def _get_async[T](
        self, path: str, params: dict[str, str], decode: Callable[[bytes], T]
    ) -> T:
        async with self._client_factory(self._api) as client:
            return await self._fetch(client, path, params, decode)

    async def _fetch[T](
        self,
        client: HttpClient,
        path: str,
        params: dict[str, str],
        decode: Callable[[bytes], T],
    ) -> T:
        log.debug("GET %s", path)
        response = await client.get(path, params=params, headers=self._headers())
        if response.is_error:
            raise _api_error(response)
        return decode(response.content)

    def _send(
        self,
        method: str,
        path: str,
        *,
        expected_status: int,
        params: dict[str, str] | None = None,
        json: object = None,
    ) -> None:
        asyncio.run(
            self._send_async(
                method, path, expected_status=expected_status, params=params, json=json
            )
        )

    async def _send_async(
        self,
        method: str,
        path: str,
        *,
        expected_status: int,
        params: dict[str, str] | None,
        json: object,
    ) -> None:
        log.debug("%s %s", method, path)
        async with self._client_factory(self._api) as client:
            if json is not None:
                response = await client.request(
                    method, path, params=params, json=json, headers=self._headers()
                )
            else:
                response = await client.request(
                    method, path, params=params, headers=self._headers()
                )
        if response.status_code == expected_status:
            return
        if not response.is_error:
            log.error(
                "Spotify answered %s %s with HTTP %s, expected %s",
                method,
                path,
                response.status_code,
                expected_status,
            )
            raise ApiError(response.status_code, response.reason_phrase)
        raise _api_error(response)


def _page_of[W, D](translate: Callable[[W], D]) -> Callable[[SpotifyPage[W]], Paging[D]]:
    return functools.partial(translate_page, translate=translate)


def _api_error(response: httpx.Response) -> ApiError:
    try:
        payload = ErrorResponse.model_validate_json(response.content)
    except pydantic.ValidationError as exc:
        raise UnexpectedResponseError(
            f"Undecodable error response (HTTP {response.status_code})"
        ) from exc
    log.error("Spotify API error %s: %s", payload.error.status, payload.error.message)
    return ApiError(payload.error.status, payload.error.message)
