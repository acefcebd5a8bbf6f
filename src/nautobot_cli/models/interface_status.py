"""Interface status data models (interfaces-telemetry plugin)."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class InterfaceStatus(BaseModel):
    """Operational status of one device interface.

    Records are addressed by a slug such as ``r2__ethernet1``.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    display: str | None = None
    url: str | None = None
    interface_name: str | None = None
    interface_id: str | None = None
    interface_status: str | None = None
    device_name: str | None = None
    device_id: str | None = None
    notes: str | None = Field(default=None, alias="notes_url")
    created: str | None = None
    last_updated: datetime | None = None
