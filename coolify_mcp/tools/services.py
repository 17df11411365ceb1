from typing import Any, Optional

from pydantic import Field, StrictStr

from coolify_mcp.core.client import CoolifyClient
from coolify_mcp.tools._base import NoArgs, ToolArgs


class CreateServiceArgs(ToolArgs):
    name: StrictStr = Field(description="A unique, human-readable name for the service")
    server_uuid: StrictStr = Field(description="UUID of the server the service will run on. Get this from list_servers.")
    project_uuid: StrictStr = Field(description="UUID of the project this service belongs to")
    environment_name: Optional[StrictStr] = Field(None, description="Name of the environment (e.g. production, staging)")
    environment_uuid: Optional[StrictStr] = Field(None, description="UUID of an existing environment to use")
    description: Optional[StrictStr] = Field(None, description="Optional description of the service")


class ServiceUuidArgs(ToolArgs):
    uuid: StrictStr = Field(description="UUID of the service. Get this from list_services.")


def get_tools(client: CoolifyClient) -> dict[str, Any]:
    async def list_services(args: NoArgs) -> Any:
        return await client.list_services()

    async def create_service(args: CreateServiceArgs) -> Any:
        return await client.create_service(args.payload())

    async def start_service(args: ServiceUuidArgs) -> Any:
        return await client.start_service(args.uuid)

    async def stop_service(args: ServiceUuidArgs) -> Any:
        return await client.stop_service(args.uuid)

    async def restart_service(args: ServiceUuidArgs) -> Any:
        return await client.restart_service(args.uuid)

    return {
        "list_services": {
            "func": list_services,
            "args": NoArgs,
            "title": "List services",
            "description": "List all services in the Coolify instance. Services run pre-built container images.",
        },
        "create_service": {
            "func": create_service,
            "args": CreateServiceArgs,
            "title": "Create service",
            "description": "Create a new service on a given server.",
        },
        "start_service": {
            "func": start_service,
            "args": ServiceUuidArgs,
            "title": "Start service",
            "description": "Start a previously created service.",
        },
        "stop_service": {
            "func": stop_service,
            "args": ServiceUuidArgs,
            "title": "Stop service",
            "description": "Stop a running service.",
        },
        "restart_service": {
            "func": restart_service,
            "args": ServiceUuidArgs,
            "title": "Restart service",
            "description": "Restart a service. Useful for applying configuration changes.",
        },
    }
