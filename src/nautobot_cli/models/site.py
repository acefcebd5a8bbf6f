"""Site data models."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from nautobot_cli.models.common import Status


class Region(BaseModel):
    """Nested region reference on a site."""

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = None
    url: str | None = None
    name: str | None = None
    slug: str | None = None
    depth: int | None = Field(default=None, alias="_depth")
    display: str | None = None


class Site(BaseModel):
    """A site in the DCIM application."""

    id: str
    url: str | None = None
    name: str | None = None
    slug: str | None = None
    status: Status | None = None
    region: Region | None = None
    tenant: Any = None
    facility: str | None = None
    asn: int | None = None
    time_zone: str | None = None
    description: str | None = None
    physical_address: str | None = None
    shipping_address: str | None = None
    latitude: Any = None
    longitude: Any = None
    contact_name: str | None = None
    contact_phone: str | None = None
    contact_email: str | None = None
    comments: str | None = None
    tags: list[Any] = Field(default_factory=list)
    custom_fields: dict[str, Any] = Field(default_factory=dict)
    created: str | None = None
    last_updated: datetime | None = None
    circuit_count: int | None = None
    device_count: int | None = None
    prefix_count: int | None = None
    rack_count: int | None = None
    virtualmachine_count: int | None = None
    vlan_count: int | None = None
    display: str | None = None
