from __future__ import annotations

import pytest


@pytest.fixture
def spotify_env(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    values = {
        "SPOTIFY_CLIENT_ID": "client-id",
        "SPOTIFY_CLIENT_SECRET": "client-secret",
    }
    for name, value in values.items():
        monkeypatch.setenv(name, value)
    monkeypatch.delenv("SPOTIFY_REDIRECT_URI", raising=False)
    return values
