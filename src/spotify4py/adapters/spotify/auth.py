"""OAuth flows for obtaining and refreshing Spotify access tokens.

Three interchangeable strategies share one contract: ``authenticate()`` and
``request_refreshed_token()`` both return ``Ok(AccessCredential)`` or
``Err(AuthError)``. Failures are never retried.
"""

from __future__ import annotations

import asyncio
import base64
import hashlib
import secrets
import string
import webbrowser
from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING
from urllib.parse import parse_qs, urlencode, urlsplit

import pydantic

from spotify4py.adapters.http import default_client_factory
from spotify4py.config.spotify import (
    SPOTIFY_AUTHORIZE_PATH,
    SPOTIFY_TOKEN_PATH,
    default_accounts_http_config,
)
from spotify4py.domain.errors import AuthError
from spotify4py.domain.result import Err, Ok, Result

from .schema import TokenErrorResponse, TokenResponse
from .translator import translate_token

if TYPE_CHECKING:
    from collections.abc import Sequence

    import httpx

    from spotify4py.adapters.http import HttpClient
    from spotify4py.config.http import HttpConfig
    from spotify4py.domain.model import AccessCredential

log = getLogger(__name__)

CodeProvider = Callable[[str], str]

_VERIFIER_ALPHABET = string.ascii_letters + string.digits + "-._~"
PKCE_VERIFIER_MIN_LENGTH = 43
PKCE_VERIFIER_MAX_LENGTH = 128


def generate_code_verifier(length: int = 64) -> str:
    """Return a random PKCE code verifier drawn from the unreserved URL characters."""

    if not PKCE_VERIFIER_MIN_LENGTH <= length <= PKCE_VERIFIER_MAX_LENGTH:
        raise ValueError(
            f"Code verifier length must be between {PKCE_VERIFIER_MIN_LENGTH} "
            f"and {PKCE_VERIFIER_MAX_LENGTH}"
        )
    return "".join(secrets.choice(_VERIFIER_ALPHABET) for _ in range(length))


def generate_code_challenge(code_verifier: str) -> str:
    """SHA-256 the verifier and encode it as unpadded base64url."""

    digest = hashlib.sha256(code_verifier.encode("ascii")).digest()
    return base64.urlsafe_b64encode(digest).decode("ascii").rstrip("=")


def parse_authorization_response(
    response: str,
    *,
    expected_state: str | None = None,
) -> Result[str, AuthError]:
    """Extract the authorization code from a redirect URL (or accept a bare code)."""

    value = response.strip()
    if not value:
        return Err(AuthError("invalid_request", "No authorization code was supplied"))
    if "=" not in value:
        return Ok(value)

    query = urlsplit(value).query if "?" in value else value
    params = parse_qs(query)
    if "error" in params:
        return Err(AuthError(params["error"][0], "The authorization request was not granted"))
    if expected_state is not None and params.get("state", [None])[0] != expected_state:
        return Err(AuthError("state_mismatch", "The redirect carried an unexpected state value"))
    codes = params.get("code")
    if not codes:
        return Err(AuthError("invalid_request", "The redirect did not carry an authorization code"))
    return Ok(codes[0])


def prompt_for_authorization_response(authorize_url: str) -> str:
    """Open the consent page and ask the user to paste the URL they were redirected to."""

    log.info("Opening the authorization page in a browser: %s", authorize_url)
    webbrowser.open(authorize_url)
    return input("Paste the URL you were redirected to: ")


def _utcnow() -> datetime:
    return datetime.now(UTC)


class AuthFlow(ABC):
    """Strategy for obtaining access credentials from the accounts service."""

    def __init__(
        self,
        *,
        client_id: str,
        client_secret: str | None,
        accounts: HttpConfig | None = None,
        client_factory: Callable[[HttpConfig], HttpClient] | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.client_id = client_id
        self._client_secret = client_secret
        self._accounts = accounts or default_accounts_http_config()
        self._client_factory = client_factory or default_client_factory
        self._clock = clock

    @abstractmethod
    def authenticate(self) -> Result[AccessCredential, AuthError]:
        """Obtain a fresh credential."""

    @abstractmethod
    def request_refreshed_token(
        self, refresh_token: str | None
    ) -> Result[AccessCredential, AuthError]:
        """Obtain a replacement credential once the current one has expired."""

    def _basic_auth(self) -> tuple[str, str] | None:
        if self._client_secret is None:
            return None
        return (self.client_id, self._client_secret)

    def _request_token(
        self,
        data: dict[str, str],
        *,
        use_basic_auth: bool = True,
        previous_refresh_token: str | None = None,
    ) -> Result[AccessCredential, AuthError]:
        return asyncio.run(
            self._request_token_async(
                data,
                use_basic_auth=use_basic_auth,
                previous_refresh_token=previous_refresh_token,
            )
        )

    async def _request_token_async(
        self,
        data: dict[str, str],
        *,
        use_basic_auth: bool,
        previous_refresh_token: str | None,
    ) -> Result[AccessCredential, AuthError]:
        grant_type = data.get("grant_type", "unknown")
        log.info("Requesting access token (grant_type=%s)", grant_type)
        auth = self._basic_auth() if use_basic_auth else None

        async with self._client_factory(self._accounts) as client:
            if auth is not None:
                response = await client.post(SPOTIFY_TOKEN_PATH, data=data, auth=auth)
            else:
                response = await client.post(SPOTIFY_TOKEN_PATH, data=data)

        if response.is_error:
            error = _decode_token_error(response)
            log.error(
                "Token request failed (grant_type=%s, status=%s): %s",
                grant_type,
                response.status_code,
                error,
            )
            return Err(error)

        try:
            token = TokenResponse.model_validate_json(response.content)
        except pydantic.ValidationError:
            log.exception("Malformed token response (grant_type=%s)", grant_type)
            return Err(
                AuthError(
                    "invalid_response",
                    "The token endpoint returned a malformed body",
                    status=response.status_code,
                )
            )

        return Ok(
            translate_token(
                token,
                issued_at=self._clock(),
                previous_refresh_token=previous_refresh_token,
            )
        )


class ClientCredentials(AuthFlow):
    """App-only tokens; no user context and no refresh token."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        *,
        accounts: HttpConfig | None = None,
        client_factory: Callable[[HttpConfig], HttpClient] | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        super().__init__(
            client_id=client_id,
            client_secret=client_secret,
            accounts=accounts,
            client_factory=client_factory,
            clock=clock,
        )

    def authenticate(self) -> Result[AccessCredential, AuthError]:
        return self._request_token({"grant_type": "client_credentials"})

    def request_refreshed_token(
        self, refresh_token: str | None = None
    ) -> Result[AccessCredential, AuthError]:
        del refresh_token
        return self.authenticate()


class AuthorizationCode(AuthFlow):
    """User-delegated tokens obtained through an out-of-band consent step.

    ``code_provider`` receives the authorization URL and returns either the
    authorization code or the full URL the browser was redirected to.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str | None,
        redirect_uri: str,
        scopes: Sequence[str] = (),
        *,
        code_provider: CodeProvider | None = None,
        state: str | None = None,
        accounts: HttpConfig | None = None,
        client_factory: Callable[[HttpConfig], HttpClient] | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        super().__init__(
            client_id=client_id,
            client_secret=client_secret,
            accounts=accounts,
            client_factory=client_factory,
            clock=clock,
        )
        self.redirect_uri = redirect_uri
        self.scopes = tuple(scopes)
        self.state = state or secrets.token_urlsafe(16)
        self._code_provider = code_provider or prompt_for_authorization_response

    def authorize_url(self) -> str:
        base_url = str(self._accounts.base_url or "").rstrip("/")
        query = urlencode(self._authorize_params())
        return f"{base_url}/{SPOTIFY_AUTHORIZE_PATH}?{query}"

    def authenticate(self) -> Result[AccessCredential, AuthError]:
        response = self._code_provider(self.authorize_url())
        parsed = parse_authorization_response(response, expected_state=self.state)
        if isinstance(parsed, Err):
            log.error("Authorization step failed: %s", parsed.error)
            return parsed
        return self._request_token(
            self._exchange_data(parsed.value),
            use_basic_auth=self._uses_basic_auth,
        )

    def request_refreshed_token(
        self, refresh_token: str | None
    ) -> Result[AccessCredential, AuthError]:
        if not refresh_token:
            return Err(AuthError("invalid_request", "No refresh token is available"))
        return self._request_token(
            self._refresh_data(refresh_token),
            use_basic_auth=self._uses_basic_auth,
            previous_refresh_token=refresh_token,
        )

    @property
    def _uses_basic_auth(self) -> bool:
        return True

    def _authorize_params(self) -> dict[str, str]:
        params = {
            "client_id": self.client_id,
            "response_type": "code",
            "redirect_uri": self.redirect_uri,
            "state": self.state,
        }
        if self.scopes:
            params["scope"] = " ".join(self.scopes)
        return params

    def _exchange_data(self, code: str) -> dict[str, str]:
        return {
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": self.redirect_uri,
        }

    def _refresh_data(self, refresh_token: str) -> dict[str, str]:
        return {"grant_type": "refresh_token", "refresh_token": refresh_token}


class AuthorizationCodePKCE(AuthorizationCode):
    """Authorization code flow hardened with a proof key (RFC 7636)."""

    def __init__(
        self,
        client_id: str,
        client_secret: str | None,
        redirect_uri: str,
        scopes: Sequence[str] = (),
        *,
        code_provider: CodeProvider | None = None,
        state: str | None = None,
        code_verifier: str | None = None,
        accounts: HttpConfig | None = None,
        client_factory: Callable[[HttpConfig], HttpClient] | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        super().__init__(
            client_id,
            client_secret,
            redirect_uri,
            scopes,
            code_provider=code_provider,
            state=state,
            accounts=accounts,
            client_factory=client_factory,
            clock=clock,
        )
        self.code_verifier = code_verifier or generate_code_verifier()
        self.code_challenge = generate_code_challenge(self.code_verifier)

    @property
    def _uses_basic_auth(self) -> bool:
        return False

    def _authorize_params(self) -> dict[str, str]:
        params = super()._authorize_params()
        params["code_challenge_method"] = "S256"
        params["code_challenge"] = self.code_challenge
        return params

    def _exchange_data(self, code: str) -> dict[str, str]:
        data = super()._exchange_data(code)
        data["client_id"] = self.client_id
        data["code_verifier"] = self.code_verifier
        return data

    def _refresh_data(self, refresh_token: str) -> dict[str, str]:
        data = super()._refresh_data(refresh_token)
        data["client_id"] = self.client_id
        return data


def _decode_token_error(response: httpx.Response) -> AuthError:
    try:
        payload = TokenErrorResponse.model_validate_json(response.content)
    except pydantic.ValidationError:
        return AuthError(
            "http_error",
            response.reason_phrase or f"HTTP {response.status_code}",
            status=response.status_code,
        )
    return AuthError(payload.error, payload.error_description, status=response.status_code)
