"""Typed exceptions and error handling decorator."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from rich.console import Console
from rich.markup import escape

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class NautobotCLIError(Exception):
    """Base exception for nautobot-cli."""

    exit_code: int = 1


class NautobotConnectionError(NautobotCLIError):
    """The request could not be built or sent."""

    exit_code = 2


class RequestCancelledError(NautobotConnectionError):
    """The request context was cancelled or ran past its deadline."""


class ConfigurationError(NautobotCLIError):
    """Missing or invalid client configuration."""

    exit_code = 6


class DecodeError(NautobotCLIError):
    """Response body does not match the expected JSON shape."""

    exit_code = 7


class UnexpectedStatusError(NautobotCLIError):
    """The API answered with a status other than the one the operation requires."""

    def __init__(
        self,
        action: str,
        url: str,
        status_code: int,
        status: str,
        body: str | None = None,
    ) -> None:
        self.url = url
        self.status_code = status_code
        self.status = status
        self.body = body
        message = f"Error while {action} {url}. Status: {status}"
        if body is not None:
            message += f". Message: {body}"
        super().__init__(message)

    @property
    def exit_code(self) -> int:  # type: ignore[override]
        if self.status_code in (401, 403):
            return 3
        if self.status_code == 404:
            return 4
        if self.status_code == 409:
            return 5
        return 1


class PatchRequestError(UnexpectedStatusError):
    """Structured error for a failed single-resource update.

    ``detail_not_found`` is set when the API reports ``{"detail": "Not found."}``
    so callers can tell a missing resource apart from other failures.
    ``status_code`` is the numeric code; ``status`` holds the status text
    (``"404 Not Found"``) used in the message.
    """

    def __init__(
        self,
        url: str,
        status_code: int,
        status: str,
        message: str,
        err: Exception | None = None,
        detail_not_found: bool = False,
    ) -> None:
        super().__init__("updating resource", url, status_code, status, message)
        self.message = message
        self.err = err
        self.detail_not_found = detail_not_found

    def __str__(self) -> str:
        return f"Status Code: {self.status}; Message: {self.message}"


def error_handler(func: F) -> F:
    """Decorator that catches NautobotCLIError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except NautobotCLIError as exc:
            err_console.print(f"[bold red]Error:[/] {escape(str(exc))}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {escape(str(exc))}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
