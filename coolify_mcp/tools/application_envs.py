from typing import Any, Optional

from pydantic import Field, StrictStr

from coolify_mcp.core.client import CoolifyClient
from coolify_mcp.tools._base import ToolArgs
from coolify_mcp.tools._envs import EnvBulkArgs, EnvCreateArgs

APPLICATION_UUID = "UUID of the application. Get this from list_applications."


class ApplicationEnvsArgs(ToolArgs):
    uuid: StrictStr = Field(description=APPLICATION_UUID)


class CreateApplicationEnvArgs(EnvCreateArgs):
    uuid: StrictStr = Field(description=APPLICATION_UUID)


class UpdateApplicationEnvArgs(EnvCreateArgs):
    uuid: StrictStr = Field(description=APPLICATION_UUID)
    env_uuid: Optional[StrictStr] = Field(
        None, description="UUID of the variable, informational only: Coolify matches the variable by key"
    )


class BulkApplicationEnvsArgs(EnvBulkArgs):
    uuid: StrictStr = Field(description=APPLICATION_UUID)


class DeleteApplicationEnvArgs(ToolArgs):
    uuid: StrictStr = Field(description=APPLICATION_UUID)
    env_uuid: StrictStr = Field(description="UUID of the variable to delete. Get this from list_application_envs.")


def get_tools(client: CoolifyClient) -> dict[str, Any]:
    async def list_application_envs(args: ApplicationEnvsArgs) -> Any:
        return await client.list_application_envs(args.uuid)

    async def create_application_env(args: CreateApplicationEnvArgs) -> Any:
        return await client.create_application_env(args.uuid, args.payload("uuid"))

    async def update_application_env(args: UpdateApplicationEnvArgs) -> Any:
        env_data = args.payload("uuid", "env_uuid")
        if args.env_uuid:
            env_data["uuid"] = args.env_uuid
        return await client.update_application_env(args.uuid, env_data)

    async def bulk_update_application_envs(args: BulkApplicationEnvsArgs) -> Any:
        return await client.bulk_update_application_envs(args.uuid, args.env_payloads())

    async def delete_application_env(args: DeleteApplicationEnvArgs) -> Any:
        return await client.delete_application_env(args.uuid, args.env_uuid)

    return {
        "list_application_envs": {
            "func": list_application_envs,
            "args": ApplicationEnvsArgs,
            "title": "List application env vars",
            "description": "List the environment variables of an application.",
        },
        "create_application_env": {
            "func": create_application_env,
            "args": CreateApplicationEnvArgs,
            "title": "Create application env var",
            "description": "Create an environment variable on an application.",
        },
        "update_application_env": {
            "func": update_application_env,
            "args": UpdateApplicationEnvArgs,
            "title": "Update application env var",
            "description": "Update an application environment variable, identified by its key.",
        },
        "bulk_update_application_envs": {
            "func": bulk_update_application_envs,
            "args": BulkApplicationEnvsArgs,
            "title": "Bulk update application env vars",
            "description": "Create or update several application environment variables in one request.",
        },
        "delete_application_env": {
            "func": delete_application_env,
            "args": DeleteApplicationEnvArgs,
            "title": "Delete application env var",
            "description": "Delete an application environment variable.",
        },
    }
