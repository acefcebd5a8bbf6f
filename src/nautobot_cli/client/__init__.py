"""HTTP client, generic operations and pagination for the Nautobot API."""

from nautobot_cli.client.nautobot import NautobotClient, ResourceAPI
from nautobot_cli.client.transport import RequestContext, RequestExecutor

__all__ = [
    "NautobotClient",
    "RequestContext",
    "RequestExecutor",
    "ResourceAPI",
]
