"""Token authentication for the Nautobot API."""

from __future__ import annotations

from collections.abc import Generator

import httpx


def set_headers(request: httpx.Request, token: str) -> None:
    """Set the JSON content negotiation and token headers on *request*."""
    request.headers["Accept"] = "application/json"
    request.headers["Authorization"] = f"Token {token}"
    request.headers["Content-Type"] = "application/json"


class TokenAuth(httpx.Auth):
    """Authenticate using a Nautobot API token (``Authorization: Token <key>``)."""

    def __init__(self, token: str) -> None:
        self.token = token

    def auth_flow(
        self, request: httpx.Request,
    ) -> Generator[httpx.Request, httpx.Response, None]:
        set_headers(request, self.token)
        yield request
