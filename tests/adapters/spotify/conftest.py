"""Shared fixtures for Spotify adapter tests."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import httpx
import pytest

from spotify4py.adapters.http import HttpClient
from spotify4py.adapters.spotify import SpotifyClient

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping

    from spotify4py.config.http import HttpConfig

SpotifyPayload = dict[str, object]
type Responder = Callable[[httpx.Request], Awaitable[httpx.Response]]

TOKEN_PATH = "/api/token"  # noqa: S105


@dataclass
class _Route:
    method: str
    path: str
    params: Mapping[str, str]
    respond: Responder

    def matches(self, request: httpx.Request) -> bool:
        if request.method != self.method or request.url.path != self.path:
            return False
        return all(request.url.params.get(name) == value for name, value in self.params.items())


@dataclass
class FakeSpotifyServer:
    """Routes requests from ``HttpClient`` instances through an ``httpx.MockTransport``.

    Routes added later take precedence, so a test can replace a default response.
    """

    requests: list[httpx.Request] = field(default_factory=list["httpx.Request"])
    _routes: list[_Route] = field(default_factory=list["_Route"])

    def add(
        self,
        method: str,
        path: str,
        *,
        json: object = None,
        status: int = 200,
        params: Mapping[str, str] | None = None,
        delay: float = 0.0,
        content: bytes | None = None,
    ) -> None:
        async def respond(_request: httpx.Request) -> httpx.Response:
            if delay:
                await asyncio.sleep(delay)
            if content is not None:
                return httpx.Response(status, content=content)
            if json is None:
                return httpx.Response(status)
            return httpx.Response(status, json=json)

        self._routes.insert(0, _Route(method, path, dict(params or {}), respond))

    def add_token(self, **payload: object) -> None:
        body: SpotifyPayload = {
            "access_token": "token-123",
            "token_type": "Bearer",
            "expires_in": 3600,
        }
        body.update(payload)
        self.add("POST", TOKEN_PATH, json=body)

    async def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        for route in self._routes:
            if route.matches(request):
                return await route.respond(request)
        return httpx.Response(
            404,
            json={"error": {"status": 404, "message": f"No route for {request.url.path}"}},
        )

    def client_factory(self, config: HttpConfig) -> HttpClient:
        return HttpClient(config, transport=httpx.MockTransport(self.handle))

    @property
    def api_requests(self) -> list[httpx.Request]:
        return [request for request in self.requests if request.url.path.startswith("/v1/")]

    @property
    def token_requests(self) -> list[httpx.Request]:
        return [request for request in self.requests if request.url.path == TOKEN_PATH]


@pytest.fixture
def spotify_server() -> FakeSpotifyServer:
    server = FakeSpotifyServer()
    server.add_token()
    return server


@pytest.fixture
def spotify_client(spotify_server: FakeSpotifyServer) -> SpotifyClient:
    return SpotifyClient.with_client_credentials(
        "client-id",
        "client-secret",
        client_factory=spotify_server.client_factory,
    )


@pytest.fixture
def artist_payload() -> SpotifyPayload:
    return {
        "id": "0OdUWJ0sBjDrqHygGUXeCF",
        "name": "Band of Horses",
        "type": "artist",
        "uri": "spotify:artist:0OdUWJ0sBjDrqHygGUXeCF",
        "href": "https://api.spotify.com/v1/artists/0OdUWJ0sBjDrqHygGUXeCF",
        "external_urls": {"spotify": "https://open.spotify.com/artist/0OdUWJ0sBjDrqHygGUXeCF"},
        "genres": ["indie folk", "indie rock"],
        "images": [{"url": "https://i.scdn.co/image/artist", "height": 640, "width": 640}],
        "popularity": 59,
        "followers": {"href": None, "total": 1022411},
    }


@pytest.fixture
def track_payload(artist_payload: SpotifyPayload) -> SpotifyPayload:
    return {
        "id": "3n3Ppam7vgaVa1iaRUc9Lp",
        "name": "Mr. Brightside",
        "type": "track",
        "artists": [artist_payload],
        "available_markets": ["DE", "US"],
        "disc_number": 1,
        "duration_ms": 222075,
        "explicit": False,
        "external_ids": {"isrc": "USIR20400274"},
        "is_local": False,
        "popularity": 80,
        "preview_url": None,
        "track_number": 2,
        "uri": "spotify:track:3n3Ppam7vgaVa1iaRUc9Lp",
    }


@pytest.fixture
def album_payload(
    artist_payload: SpotifyPayload, track_payload: SpotifyPayload
) -> SpotifyPayload:
    return {
        "id": "0sNOF9WDwhWunNAHPD3Baj",
        "name": "She's So Unusual",
        "type": "album",
        "album_type": "album",
        "artists": [artist_payload],
        "available_markets": ["DE", "US"],
        "copyrights": [
            {"text": "(C) 1983 Portrait Records", "type": "C"},
            {"text": "(P) 1983 Portrait Records", "type": "P"},
        ],
        "external_ids": {"upc": "5099749994324"},
        "genres": [],
        "images": [],
        "label": "Epic",
        "popularity": 39,
        "release_date": "1983",
        "release_date_precision": "year",
        "total_tracks": 1,
        "tracks": {
            "href": "https://api.spotify.com/v1/albums/0sNOF9WDwhWunNAHPD3Baj/tracks",
            "items": [track_payload],
            "limit": 50,
            "next": None,
            "offset": 0,
            "previous": None,
            "total": 1,
        },
        "uri": "spotify:album:0sNOF9WDwhWunNAHPD3Baj",
    }


@pytest.fixture
def show_payload() -> SpotifyPayload:
    return {
        "id": "38bS44xjbVVZ3No3ByF1dJ",
        "name": "Vetenskapsradion Historia",
        "publisher": "Sveriges Radio",
        "media_type": "audio",
        "explicit": False,
        "languages": ["sv"],
        "copyrights": [],
        "total_episodes": 500,
    }


@pytest.fixture
def episode_payload() -> SpotifyPayload:
    return {
        "id": "512ojhOuo1ktJprKbVcKyQ",
        "name": "Tredje rikets knarkande granskas",
        "duration_ms": 1502795,
        "explicit": False,
        "languages": ["sv"],
        "release_date": "2015-10-01",
        "release_date_precision": "day",
        "resume_point": {"fully_played": False, "resume_position_ms": 0},
    }


@pytest.fixture
def page_payload() -> Callable[..., SpotifyPayload]:
    def build(
        items: list[SpotifyPayload],
        *,
        limit: int = 20,
        offset: int = 0,
        total: int | None = None,
        next_url: str | None = None,
    ) -> SpotifyPayload:
        return {
            "href": "https://api.spotify.com/v1/page",
            "items": items,
            "limit": limit,
            "next": next_url,
            "offset": offset,
            "previous": None,
            "total": len(items) if total is None else total,
        }

    return build
