"""Exceptions raised by the Coolify MCP server.

The `str()` of every exception here is the exact message handed back to the
MCP client, so keep messages self-contained.
"""
from typing import Dict, List, Optional


class CoolifyMCPError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(CoolifyMCPError):
    """Required settings are missing or malformed. Fatal at startup."""


class ToolValidationError(CoolifyMCPError):
    """Tool arguments do not match the tool's input schema."""


class CoolifyApiError(CoolifyMCPError):
    """The Coolify API answered with a non-2xx status."""

    def __init__(self, message: str, status_code: Optional[int] = None,
                 errors: Optional[Dict[str, List[str]]] = None):
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors or {}


class CoolifyNetworkError(CoolifyMCPError):
    """No response was received from the Coolify API (connect failure, timeout...)."""
