"""Collection URLs, filter encoding and the cursor-following pagination driver."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

import httpx

from nautobot_cli.client.codec import parse_data
from nautobot_cli.client.operations import fetch_page
from nautobot_cli.client.transport import RequestContext, RequestExecutor
from nautobot_cli.models.common import OptionalFilter

T = TypeVar("T")

logger = logging.getLogger(__name__)


def filter_params(filters: Iterable[OptionalFilter]) -> list[tuple[str, str]]:
    """Turn filters into query parameters, dropping unsupported value kinds."""
    params: list[tuple[str, str]] = []
    for flt in filters:
        value = flt.value
        # bool is an int subclass but not an accepted filter kind
        if isinstance(value, bool):
            continue
        if isinstance(value, str):
            params.append((flt.field, value))
        elif isinstance(value, int):
            params.append((flt.field, str(value)))
    return params


def encode_filters(filters: Iterable[OptionalFilter]) -> str:
    """URL-encoded query string for *filters* (empty when nothing is kept)."""
    return str(httpx.QueryParams(filter_params(filters)))


def build_url(
    base_url: str,
    endpoint: str,
    identifier: str | None = None,
    *,
    filters: Iterable[OptionalFilter] | None = None,
    params: Mapping[str, Any] | None = None,
) -> str:
    """Build ``{base}/{endpoint}/`` or ``{base}/{endpoint}/{identifier}/``.

    A query string is appended only when at least one parameter remains.
    """
    url = f"{base_url.rstrip('/')}/{endpoint.strip('/')}/"
    if identifier is not None:
        url = f"{url}{identifier}/"
    pairs = filter_params(filters or [])
    if params:
        pairs.extend((key, str(value)) for key, value in params.items())
    if pairs:
        url = f"{url}?{httpx.QueryParams(pairs)}"
    return url


def paginate(
    executor: RequestExecutor,
    url: str,
    type_: type[T],
    *,
    ctx: RequestContext | None = None,
) -> list[T]:
    """Fetch every page starting at *url* and return all records in page order.

    Pages are requested one after another, following each envelope's ``next``
    cursor verbatim until it is no longer a string. Any error aborts the call
    and discards the pages already fetched. An API that always returns a
    ``next`` URL keeps this loop running.
    """
    records: list[T] = []
    current = url
    while True:
        page = fetch_page(executor, current, ctx=ctx)
        results = [] if page.results is None else page.results
        records.extend(parse_data(results, list[type_]))  # type: ignore[valid-type]
        if page.is_last_page():
            break
        logger.debug("Next page: %s", page.next)
        current = page.next
    return records
