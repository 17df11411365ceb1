from typing import Any

from pydantic import Field, StrictStr

from coolify_mcp.core.client import CoolifyClient
from coolify_mcp.tools._base import NoArgs, ToolArgs, WholeNumber


class DeploymentUuidArgs(ToolArgs):
    uuid: StrictStr = Field(description="UUID of the deployment. Get this from list_deployments.")


class ApplicationDeploymentsArgs(ToolArgs):
    uuid: StrictStr = Field(description="UUID of the application. Get this from list_applications.")
    skip: WholeNumber = Field(0, ge=0, description="Number of deployments to skip")
    take: WholeNumber = Field(10, ge=1, description="Maximum number of deployments to return")


def get_tools(client: CoolifyClient) -> dict[str, Any]:
    async def list_deployments(args: NoArgs) -> Any:
        return await client.list_deployments()

    async def get_deployment(args: DeploymentUuidArgs) -> Any:
        return await client.get_deployment(args.uuid)

    async def list_application_deployments(args: ApplicationDeploymentsArgs) -> Any:
        return await client.list_application_deployments(args.uuid, args.skip, args.take)

    return {
        "list_deployments": {
            "func": list_deployments,
            "args": NoArgs,
            "title": "List deployments",
            "description": "List running deployments across the Coolify instance.",
        },
        "get_deployment": {
            "func": get_deployment,
            "args": DeploymentUuidArgs,
            "title": "Get deployment",
            "description": "Get details and status of a specific deployment.",
        },
        "list_application_deployments": {
            "func": list_application_deployments,
            "args": ApplicationDeploymentsArgs,
            "title": "List application deployments",
            "description": "List the deployment history of an application, newest first, paginated with skip/take.",
        },
    }
