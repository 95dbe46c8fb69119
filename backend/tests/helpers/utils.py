"""Tiny helpers shared across test modules."""

from __future__ import annotations

from typing import Any

from tests.factories.user import DEFAULT_PASSWORD


def bearer(token: str) -> dict[str, str]:
    """Return the ``Authorization`` header for ``token``."""
    return {"Authorization": f"Bearer {token}"}


def login(client, email: str, password: str = DEFAULT_PASSWORD) -> str:
    """Log ``email`` in through the API and return the access token."""
    resp = client.post("/api/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()["accessToken"]


def idea_payload(**overrides: Any) -> dict[str, Any]:
    """Return a valid create/update body, with optional overrides."""
    payload: dict[str, Any] = {
        "title": "Community garden",
        "summary": "Shared plots for the block",
        "description": "Turn the empty lot into raised beds everyone can use.",
        "tags": "garden, community",
    }
    payload.update(overrides)
    return payload


def set_cookie_headers(resp, name: str) -> list[str]:
    """Return the raw ``Set-Cookie`` values for cookie ``name``."""
    return [h for h in resp.headers.getlist("Set-Cookie") if h.startswith(f"{name}=")]
