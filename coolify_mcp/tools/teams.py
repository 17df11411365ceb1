from typing import Any

from pydantic import Field, StrictStr

from coolify_mcp.core.client import CoolifyClient
from coolify_mcp.tools._base import NoArgs, ToolArgs


class GetTeamArgs(ToolArgs):
    team_id: StrictStr = Field(
        description="ID of the team to retrieve. This is typically a numeric ID obtained from the list_teams response."
    )


def get_tools(client: CoolifyClient) -> dict[str, Any]:
    async def list_teams(args: NoArgs) -> Any:
        return await client.list_teams()

    async def get_team(args: GetTeamArgs) -> Any:
        return await client.get_team(args.team_id)

    async def get_current_team(args: NoArgs) -> Any:
        return await client.get_current_team()

    async def get_current_team_members(args: NoArgs) -> Any:
        return await client.get_current_team_members()

    return {
        "list_teams": {
            "func": list_teams,
            "args": NoArgs,
            "title": "List teams",
            "description": "List all teams the authenticated user has access to. Use this to get team IDs needed for other operations.",
        },
        "get_team": {
            "func": get_team,
            "args": GetTeamArgs,
            "title": "Get team",
            "description": "Get details of a specific team. Requires a team ID obtained from list_teams.",
        },
        "get_current_team": {
            "func": get_current_team,
            "args": NoArgs,
            "title": "Get current team",
            "description": "Get details of the team associated with the API token.",
        },
        "get_current_team_members": {
            "func": get_current_team_members,
            "args": NoArgs,
            "title": "Get current team members",
            "description": "List all members of the currently authenticated team.",
        },
    }
