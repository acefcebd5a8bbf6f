"""Request execution: token-bound sending with caller cancellation and deadlines."""

from __future__ import annotations

import logging
import threading
import time
from typing import Any

import httpx

from nautobot_cli.client.auth import TokenAuth
from nautobot_cli.client.codec import to_json
from nautobot_cli.client.errors import NautobotConnectionError, RequestCancelledError

logger = logging.getLogger(__name__)

NO_PAYLOAD: Any = object()


class RequestContext:
    """Cancellation and deadline shared by every request of one logical call.

    The context is checked each time a request is about to be sent. A
    pagination loop that is cancelled mid-way stops at its next request.
    """

    def __init__(
        self,
        cancel_event: threading.Event | None = None,
        deadline: float | None = None,
    ) -> None:
        self._cancel_event = cancel_event or threading.Event()
        self.deadline = deadline

    @classmethod
    def with_timeout(
        cls, seconds: float, cancel_event: threading.Event | None = None,
    ) -> RequestContext:
        """Build a context whose deadline is *seconds* from now."""
        return cls(cancel_event=cancel_event, deadline=time.monotonic() + seconds)

    def cancel(self) -> None:
        self._cancel_event.set()

    @property
    def cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or ``None`` without a deadline."""
        if self.deadline is None:
            return None
        return self.deadline - time.monotonic()

    def check(self) -> None:
        if self.cancelled:
            raise RequestCancelledError("Request cancelled")
        remaining = self.remaining()
        if remaining is not None and remaining <= 0:
            raise RequestCancelledError("Request deadline exceeded")


class RequestExecutor:
    """Send JSON requests with one bound token over one httpx client."""

    def __init__(self, http: httpx.Client, token: str) -> None:
        self._http = http
        self._auth = TokenAuth(token)

    def send(
        self,
        method: str,
        url: str,
        *,
        payload: Any = NO_PAYLOAD,
        ctx: RequestContext | None = None,
    ) -> httpx.Response:
        """Send one request and return the response with its body fully read.

        Transport failures are raised as :class:`NautobotConnectionError` with
        the httpx exception as cause. The status code is not checked here.
        """
        timeout: Any = httpx.USE_CLIENT_DEFAULT
        if ctx is not None:
            ctx.check()
            remaining = ctx.remaining()
            if remaining is not None:
                default = self._http.timeout.read
                timeout = remaining if default is None else min(remaining, default)
        content = None if payload is NO_PAYLOAD else to_json(payload)
        logger.debug("%s %s", method, url)
        try:
            response = self._http.request(
                method, url, content=content, auth=self._auth, timeout=timeout,
            )
        except httpx.ConnectError as exc:
            raise NautobotConnectionError(f"Cannot connect to {url}: {exc}") from exc
        except httpx.TimeoutException as exc:
            raise NautobotConnectionError(f"Request to {url} timed out: {exc}") from exc
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise NautobotConnectionError(f"Invalid URL {url}: {exc}") from exc
        except httpx.TransportError as exc:
            raise NautobotConnectionError(f"Request to {url} failed: {exc}") from exc
        logger.debug("%s %s -> %s", method, url, response.status_code)
        return response


def status_text(response: httpx.Response) -> str:
    """Status line text such as ``"404 Not Found"``."""
    return f"{response.status_code} {response.reason_phrase}".rstrip()
