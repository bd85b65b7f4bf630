"""Spotify Web API adapter: auth flows, wire schema, translation and the client facade."""

from .auth import (
    AuthFlow,
    AuthorizationCode,
    AuthorizationCodePKCE,
    ClientCredentials,
    CodeProvider,
    generate_code_challenge,
    generate_code_verifier,
    parse_authorization_response,
    prompt_for_authorization_response,
)
from .client import SpotifyClient, SpotifyResult

__all__ = [
    "AuthFlow",
    "AuthorizationCode",
    "AuthorizationCodePKCE",
    "ClientCredentials",
    "CodeProvider",
    "SpotifyClient",
    "SpotifyResult",
    "generate_code_challenge",
    "generate_code_verifier",
    "parse_authorization_response",
    "prompt_for_authorization_response",
]
