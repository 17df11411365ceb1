from typing import Any, Literal, Optional

from pydantic import Field, StrictBool, StrictStr

from coolify_mcp.core.client import CoolifyClient
from coolify_mcp.tools._base import NoArgs, ToolArgs, WholeNumber


class CreateServerArgs(ToolArgs):
    name: StrictStr = Field(description="A unique, human-readable name for the server")
    ip: StrictStr = Field(description="IP address of the server. Can be IPv4 or IPv6.")
    port: WholeNumber = Field(description="SSH port number, usually 22")
    user: StrictStr = Field(description="SSH username for authentication")
    private_key_uuid: StrictStr = Field(
        description="UUID of the private key to use for SSH authentication. Obtain this from list_private_keys."
    )
    description: Optional[StrictStr] = Field(None, description="Optional description of the server's purpose")
    proxy_type: Optional[Literal["none", "nginx", "caddy"]] = Field(
        None, description="Type of proxy to use for this server"
    )
    is_build_server: Optional[StrictBool] = Field(
        None, description="Whether this server should be used for building applications"
    )
    instant_validate: Optional[StrictBool] = Field(
        None, description="Whether to validate the server immediately after creation"
    )


class ServerUuidArgs(ToolArgs):
    uuid: StrictStr = Field(description="UUID of the server. Get this from list_servers.")


def get_tools(client: CoolifyClient) -> dict[str, Any]:
    async def list_servers(args: NoArgs) -> Any:
        return await client.list_servers()

    async def create_server(args: CreateServerArgs) -> Any:
        return await client.create_server(args.payload())

    async def validate_server(args: ServerUuidArgs) -> Any:
        return await client.validate_server(args.uuid)

    async def get_server_resources(args: ServerUuidArgs) -> Any:
        return await client.get_server_resources(args.uuid)

    async def get_server_domains(args: ServerUuidArgs) -> Any:
        return await client.get_server_domains(args.uuid)

    return {
        "list_servers": {
            "func": list_servers,
            "args": NoArgs,
            "title": "List servers",
            "description": "List all servers registered in the Coolify instance. Use this to get server UUIDs needed for other operations.",
        },
        "create_server": {
            "func": create_server,
            "args": CreateServerArgs,
            "title": "Create server",
            "description": "Register a new server in Coolify. Requires SSH access details and a private key for authentication.",
        },
        "validate_server": {
            "func": validate_server,
            "args": ServerUuidArgs,
            "title": "Validate server",
            "description": "Validate a server's configuration and connectivity. Use this to troubleshoot connection issues.",
        },
        "get_server_resources": {
            "func": get_server_resources,
            "args": ServerUuidArgs,
            "title": "Get server resources",
            "description": "List the applications and services running on a server.",
        },
        "get_server_domains": {
            "func": get_server_domains,
            "args": ServerUuidArgs,
            "title": "Get server domains",
            "description": "List the domains configured for a server.",
        },
    }
