"""Pydantic data models for the Nautobot REST API."""

from nautobot_cli.models.common import (
    DetailResponse,
    OptionalFilter,
    PaginatedEnvelope,
    Status,
)
from nautobot_cli.models.interface_status import InterfaceStatus
from nautobot_cli.models.site import Region, Site

__all__ = [
    "DetailResponse",
    "InterfaceStatus",
    "OptionalFilter",
    "PaginatedEnvelope",
    "Region",
    "Site",
    "Status",
]
