from typing import Any, Optional

from pydantic import Field, StrictStr

from coolify_mcp.core.client import CoolifyClient
from coolify_mcp.tools._base import NoArgs, ToolArgs


class CreateApplicationArgs(ToolArgs):
    project_uuid: StrictStr = Field(description="UUID of the project this application belongs to")
    environment_name: StrictStr = Field(description="Name of the environment (e.g. production, staging)")
    destination_uuid: StrictStr = Field(
        description="UUID of the destination server where the application will be deployed. Get this from list_servers."
    )
    git_repository: Optional[StrictStr] = Field(None, description="URL of the Git repository containing the application code")
    ports_exposes: Optional[StrictStr] = Field(
        None, description='Comma-separated list of ports to expose, e.g. "3000,8080"'
    )
    environment_uuid: Optional[StrictStr] = Field(None, description="UUID of an existing environment to use")


class ApplicationUuidArgs(ToolArgs):
    uuid: StrictStr = Field(description="UUID of the application. Get this from list_applications.")


class ExecuteCommandArgs(ApplicationUuidArgs):
    command: StrictStr = Field(description="Shell command to run inside the application container")


def get_tools(client: CoolifyClient) -> dict[str, Any]:
    async def list_applications(args: NoArgs) -> Any:
        return await client.list_applications()

    async def create_application(args: CreateApplicationArgs) -> Any:
        return await client.create_application(args.payload())

    async def start_application(args: ApplicationUuidArgs) -> Any:
        return await client.start_application(args.uuid)

    async def stop_application(args: ApplicationUuidArgs) -> Any:
        return await client.stop_application(args.uuid)

    async def restart_application(args: ApplicationUuidArgs) -> Any:
        return await client.restart_application(args.uuid)

    async def execute_command_application(args: ExecuteCommandArgs) -> Any:
        return await client.execute_command_application(args.uuid, args.command)

    return {
        "list_applications": {
            "func": list_applications,
            "args": NoArgs,
            "title": "List applications",
            "description": "List all applications in the Coolify instance. Applications are deployable units built from Git repositories.",
        },
        "create_application": {
            "func": create_application,
            "args": CreateApplicationArgs,
            "title": "Create application",
            "description": "Create a new application in Coolify, optionally sourced from a Git repository.",
        },
        "start_application": {
            "func": start_application,
            "args": ApplicationUuidArgs,
            "title": "Start application",
            "description": "Start (deploy) a previously created application.",
        },
        "stop_application": {
            "func": stop_application,
            "args": ApplicationUuidArgs,
            "title": "Stop application",
            "description": "Stop a running application.",
        },
        "restart_application": {
            "func": restart_application,
            "args": ApplicationUuidArgs,
            "title": "Restart application",
            "description": "Restart an application. Useful for applying configuration changes.",
        },
        "execute_command_application": {
            "func": execute_command_application,
            "args": ExecuteCommandArgs,
            "title": "Execute command in application",
            "description": (
                "Execute a command inside a running application container. "
                "Note: this endpoint is not available in every Coolify version."
            ),
        },
    }
