from typing import Any

from coolify_mcp.core.client import CoolifyClient
from coolify_mcp.tools._base import NoArgs


def get_tools(client: CoolifyClient) -> dict[str, Any]:
    async def get_version(args: NoArgs) -> Any:
        return await client.get_version()

    async def health_check(args: NoArgs) -> Any:
        return await client.health_check()

    return {
        "get_version": {
            "func": get_version,
            "args": NoArgs,
            "title": "Get Coolify version",
            "description": "Get Coolify version information. Returns the current version of the Coolify instance.",
        },
        "health_check": {
            "func": health_check,
            "args": NoArgs,
            "title": "Check API health",
            "description": "Check Coolify API health status. Note: this endpoint is not available in every Coolify version.",
        },
    }
