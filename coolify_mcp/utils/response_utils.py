"""Helpers for turning Coolify HTTP responses into Python values.

Coolify answers JSON almost everywhere, but a few endpoints (the health check
among them) reply with plain text, and error pages from a reverse proxy in
front of Coolify are usually HTML. `parse_body` handles all of these.
"""
from __future__ import annotations

import json
from typing import Any

import httpx


def parse_body(response: httpx.Response) -> Any:
    """Decode a response body.

    Returns the parsed JSON value when the body is JSON and the raw text when it
    is not. An empty body is the empty string.
    """
    if not response.content:
        return ""
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return response.text


def to_json_text(value: Any) -> str:
    """Pretty-print a decoded API value for a tool result."""
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)
