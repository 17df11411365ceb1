from typing import Any

from pydantic import Field, StrictStr

from coolify_mcp.core.client import CoolifyClient
from coolify_mcp.tools._base import ToolArgs
from coolify_mcp.tools._envs import EnvBulkArgs, EnvCreateArgs, build_time_note

SERVICE_UUID = "UUID of the service. Get this from list_services."


class ServiceEnvsArgs(ToolArgs):
    uuid: StrictStr = Field(description=SERVICE_UUID)


class ServiceEnvArgs(EnvCreateArgs):
    uuid: StrictStr = Field(description=SERVICE_UUID)


class BulkServiceEnvsArgs(EnvBulkArgs):
    uuid: StrictStr = Field(description=SERVICE_UUID)


class DeleteServiceEnvArgs(ToolArgs):
    uuid: StrictStr = Field(description=SERVICE_UUID)
    env_uuid: StrictStr = Field(description="UUID of the variable to delete. Get this from list_service_envs.")


def get_tools(client: CoolifyClient) -> dict[str, Any]:
    async def list_service_envs(args: ServiceEnvsArgs) -> Any:
        return await client.list_service_envs(args.uuid)

    async def create_service_env(args: ServiceEnvArgs) -> Any:
        return await client.create_service_env(args.uuid, args.payload("uuid"))

    async def update_service_env(args: ServiceEnvArgs) -> Any:
        return await client.update_service_env(args.uuid, args.payload("uuid"))

    async def bulk_update_service_envs(args: BulkServiceEnvsArgs) -> Any:
        return await client.bulk_update_service_envs(args.uuid, args.env_payloads())

    async def delete_service_env(args: DeleteServiceEnvArgs) -> Any:
        return await client.delete_service_env(args.uuid, args.env_uuid)

    return {
        "list_service_envs": {
            "func": list_service_envs,
            "args": ServiceEnvsArgs,
            "title": "List service env vars",
            "description": "List the environment variables of a service.",
        },
        "create_service_env": {
            "func": create_service_env,
            "args": ServiceEnvArgs,
            "note": build_time_note,
            "title": "Create service env var",
            "description": "Create an environment variable on a service. is_build_time has no effect for services.",
        },
        "update_service_env": {
            "func": update_service_env,
            "args": ServiceEnvArgs,
            "note": build_time_note,
            "title": "Update service env var",
            "description": "Update a service environment variable, identified by its key.",
        },
        "bulk_update_service_envs": {
            "func": bulk_update_service_envs,
            "args": BulkServiceEnvsArgs,
            "note": build_time_note,
            "title": "Bulk update service env vars",
            "description": "Create or update several service environment variables in one request.",
        },
        "delete_service_env": {
            "func": delete_service_env,
            "args": DeleteServiceEnvArgs,
            "title": "Delete service env var",
            "description": "Delete a service environment variable.",
        },
    }
