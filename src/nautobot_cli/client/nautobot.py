"""Configured Nautobot client and per-resource accessors."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Generic, TypeVar

import httpx

from nautobot_cli.client import operations
from nautobot_cli.client.pagination import build_url, paginate
from nautobot_cli.client.transport import RequestContext, RequestExecutor
from nautobot_cli.config.constants import (
    INTERFACES_STATUS_ENDPOINT,
    SITES_ENDPOINT,
    STATUS_ENDPOINT,
)
from nautobot_cli.config.models import NautobotProfile
from nautobot_cli.models.common import OptionalFilter
from nautobot_cli.models.interface_status import InterfaceStatus
from nautobot_cli.models.site import Site

T = TypeVar("T")

logger = logging.getLogger(__name__)


class NautobotClient:
    """Synchronous client for the Nautobot REST API.

    Nothing on the client changes after construction, so one instance can
    serve independent calls at the same time.
    """

    def __init__(self, profile: NautobotProfile, *, http: httpx.Client | None = None) -> None:
        if not profile.token:
            logger.warning("No API token configured for %s; sending anonymous requests", profile.url)
        self.profile = profile
        self.base_url = profile.url
        if not profile.verify_ssl:
            logger.warning("TLS certificate verification is disabled")
        self._client = http or httpx.Client(
            verify=profile.verify_ssl,
            timeout=profile.timeout,
        )
        self.executor = RequestExecutor(self._client, profile.token or "")
        self.sites: ResourceAPI[Site] = ResourceAPI(self, SITES_ENDPOINT, Site)
        self.interfaces_status: ResourceAPI[InterfaceStatus] = ResourceAPI(
            self, INTERFACES_STATUS_ENDPOINT, InterfaceStatus,
        )

    @property
    def offset(self) -> int:
        return self.profile.offset

    @property
    def limit(self) -> int:
        return self.profile.limit

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> NautobotClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def page_params(self) -> dict[str, int]:
        """``limit``/``offset`` query parameters for the first page of a listing."""
        params: dict[str, int] = {}
        if self.limit > 0:
            params["limit"] = self.limit
        if self.offset > 0:
            params["offset"] = self.offset
        return params

    def resource(self, endpoint: str, model: type[T]) -> ResourceAPI[T]:
        """Accessor for any other collection endpoint decoded into *model*."""
        return ResourceAPI(self, endpoint, model)

    def status(self, *, ctx: RequestContext | None = None) -> dict[str, Any]:
        """Fetch the API status document (versions, installed apps)."""
        url = build_url(self.base_url, STATUS_ENDPOINT)
        return operations.fetch_one(self.executor, url, dict[str, Any], ctx=ctx)


class ResourceAPI(Generic[T]):
    """CRUD accessor for one endpoint, decoding records into one model type."""

    def __init__(self, client: NautobotClient, endpoint: str, model: type[T]) -> None:
        self._client = client
        self.endpoint = endpoint
        self.model = model

    def _url(
        self,
        identifier: str | None = None,
        filters: Iterable[OptionalFilter] | None = None,
        params: dict[str, Any] | None = None,
    ) -> str:
        return build_url(
            self._client.base_url, self.endpoint, identifier,
            filters=filters, params=params,
        )

    def list(
        self,
        filters: Iterable[OptionalFilter] | None = None,
        *,
        ctx: RequestContext | None = None,
    ) -> list[T]:
        """All records matching *filters*, following every page."""
        url = self._url(filters=filters, params=self._client.page_params())
        return paginate(self._client.executor, url, self.model, ctx=ctx)

    def get(self, identifier: str, *, ctx: RequestContext | None = None) -> T:
        return operations.fetch_one(
            self._client.executor, self._url(identifier), self.model, ctx=ctx,
        )

    def create(self, payload: Any, *, ctx: RequestContext | None = None) -> list[T]:
        """Create one or more records; the API answers with the created list."""
        return operations.create_many(
            self._client.executor, self._url(), self.model, payload, ctx=ctx,
        )

    def update_many(self, payload: Any, *, ctx: RequestContext | None = None) -> list[T]:
        """Bulk partial update; each payload item carries its own ``id``."""
        return operations.update_many(
            self._client.executor, self._url(), self.model, payload, ctx=ctx,
        )

    def update(
        self, identifier: str, payload: Any, *, ctx: RequestContext | None = None,
    ) -> T:
        """Partial update of one record.

        Raises :class:`PatchRequestError`; check ``detail_not_found`` to tell
        a missing record apart from other failures.
        """
        return operations.update_one(
            self._client.executor, self._url(identifier), self.model, payload, ctx=ctx,
        )

    def delete_many(self, payload: Any, *, ctx: RequestContext | None = None) -> None:
        """Bulk delete; *payload* lists ``{"id": ...}`` objects."""
        operations.delete(self._client.executor, self._url(), payload, ctx=ctx)

    def delete(self, identifier: str, *, ctx: RequestContext | None = None) -> None:
        operations.delete(self._client.executor, self._url(identifier), ctx=ctx)
