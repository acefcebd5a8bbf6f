"""Typed client and CLI for the Nautobot REST API."""

__version__ = "0.1.0"
