"""Generic CRUD operations shared by every resource accessor.

Each operation sends exactly one request through a :class:`RequestExecutor`,
checks the status code the operation requires and decodes the body into the
caller's type.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from nautobot_cli.client.codec import parse_json
from nautobot_cli.client.errors import (
    DecodeError,
    PatchRequestError,
    UnexpectedStatusError,
)
from nautobot_cli.client.transport import RequestContext, RequestExecutor, status_text
from nautobot_cli.models.common import DetailResponse, PaginatedEnvelope

T = TypeVar("T")

logger = logging.getLogger(__name__)

NOT_FOUND_DETAIL = "Not found."


def fetch_one(
    executor: RequestExecutor,
    url: str,
    type_: type[T],
    *,
    ctx: RequestContext | None = None,
) -> T:
    """GET a single object; requires 200."""
    response = executor.send("GET", url, ctx=ctx)
    if response.status_code != 200:
        raise UnexpectedStatusError(
            "retrieving data from", url,
            response.status_code, status_text(response), response.text,
        )
    return parse_json(response.content, type_)


def fetch_page(
    executor: RequestExecutor,
    url: str,
    *,
    ctx: RequestContext | None = None,
) -> PaginatedEnvelope:
    """GET one page of a collection; requires 200.

    The error for an unexpected status carries no body text.
    """
    response = executor.send("GET", url, ctx=ctx)
    if response.status_code != 200:
        raise UnexpectedStatusError(
            "retrieving data from", url,
            response.status_code, status_text(response),
        )
    return parse_json(response.content, PaginatedEnvelope)


def create_many(
    executor: RequestExecutor,
    url: str,
    type_: type[T],
    payload: Any,
    *,
    ctx: RequestContext | None = None,
) -> list[T]:
    """POST *payload*; requires 201 and decodes a list of created records."""
    response = executor.send("POST", url, payload=payload, ctx=ctx)
    if response.status_code != 201:
        raise UnexpectedStatusError(
            "posting data to", url,
            response.status_code, status_text(response), response.text,
        )
    return parse_json(response.content, list[type_])  # type: ignore[valid-type]


def update_many(
    executor: RequestExecutor,
    url: str,
    type_: type[T],
    payload: Any,
    *,
    ctx: RequestContext | None = None,
) -> list[T]:
    """PATCH a collection URL; requires 200 and decodes a list of records."""
    response = executor.send("PATCH", url, payload=payload, ctx=ctx)
    if response.status_code != 200:
        raise UnexpectedStatusError(
            "updating resource", url,
            response.status_code, status_text(response),
        )
    return parse_json(response.content, list[type_])  # type: ignore[valid-type]


def update_one(
    executor: RequestExecutor,
    url: str,
    type_: type[T],
    payload: Any,
    *,
    ctx: RequestContext | None = None,
) -> T:
    """PATCH a single-resource URL; requires 200 and decodes one record.

    Any other status raises :class:`PatchRequestError`. When the body is
    ``{"detail": "Not found."}`` its ``detail_not_found`` flag is set. A body
    that is not such a document leaves the flag unset.
    """
    response = executor.send("PATCH", url, payload=payload, ctx=ctx)
    if response.status_code != 200:
        error = PatchRequestError(
            url,
            response.status_code,
            status_text(response),
            response.text,
            err=RuntimeError("Error in response"),
        )
        try:
            detail = parse_json(response.content, DetailResponse)
        except DecodeError:
            raise error from None
        error.detail_not_found = detail.detail == NOT_FOUND_DETAIL
        raise error
    return parse_json(response.content, type_)


def delete(
    executor: RequestExecutor,
    url: str,
    payload: Any = None,
    *,
    ctx: RequestContext | None = None,
) -> None:
    """DELETE with a JSON *payload*; requires 204.

    An empty list is sent when *payload* is ``None``.
    """
    body = [] if payload is None else payload
    response = executor.send("DELETE", url, payload=body, ctx=ctx)
    if response.status_code != 204:
        raise UnexpectedStatusError(
            "deleting resource", url,
            response.status_code, status_text(response),
        )
    logger.info("Objects removed.")
