from typing import Any, Optional

from pydantic import Field, StrictStr

from coolify_mcp.core.client import CoolifyClient
from coolify_mcp.tools._base import NoArgs, ToolArgs


class CreatePrivateKeyArgs(ToolArgs):
    name: StrictStr = Field(description="A unique, human-readable name for the private key")
    private_key: StrictStr = Field(description="The SSH private key content in PEM format")
    description: Optional[StrictStr] = Field(None, description="Optional description of the key's purpose")


def get_tools(client: CoolifyClient) -> dict[str, Any]:
    async def list_private_keys(args: NoArgs) -> Any:
        return await client.list_private_keys()

    async def create_private_key(args: CreatePrivateKeyArgs) -> Any:
        return await client.create_private_key(args.payload())

    return {
        "list_private_keys": {
            "func": list_private_keys,
            "args": NoArgs,
            "title": "List private keys",
            "description": "List the SSH private keys stored in Coolify, used for server and Git access.",
        },
        "create_private_key": {
            "func": create_private_key,
            "args": CreatePrivateKeyArgs,
            "title": "Create private key",
            "description": "Store a new SSH private key in Coolify.",
        },
    }
