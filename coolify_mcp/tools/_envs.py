"""Environment variable argument models, shared by application and service env tools."""
from typing import List, Optional

from pydantic import Field, StrictBool, StrictStr

from coolify_mcp.tools._base import ToolArgs

BUILD_TIME_WARNING = (
    "\n\nWarning: is_build_time has no effect on service environment variables. "
    "Services run pre-built Docker images and are never built from source, so build-time "
    "variables are ignored. Use is_build_time only for application environment variables."
)


class EnvFlags(ToolArgs):
    is_build_time: Optional[StrictBool] = Field(None, description="Make the variable available at build time")
    is_preview: Optional[StrictBool] = Field(None, description="Use the variable in preview deployments")
    is_literal: Optional[StrictBool] = Field(
        None, description="Treat the value literally, without interpolating other variables"
    )


class EnvVarInput(EnvFlags):
    uuid: Optional[StrictStr] = Field(None, description="UUID of an existing variable")
    key: StrictStr = Field(description="Variable name")
    value: StrictStr = Field(description="Variable value")


class EnvCreateArgs(EnvFlags):
    key: StrictStr = Field(description="Variable name")
    value: StrictStr = Field(description="Variable value")


class EnvBulkArgs(ToolArgs):
    envs: List[EnvVarInput] = Field(description="Variables to create or update, matched by key")

    def env_payloads(self) -> List[dict]:
        return [env.payload() for env in self.envs]


def build_time_note(args: ToolArgs) -> Optional[str]:
    """Advisory suffix for service env tools when a build-time flag was set."""
    if isinstance(args, EnvBulkArgs):
        flagged = any(env.is_build_time for env in args.envs)
    else:
        flagged = bool(getattr(args, "is_build_time", False))
    return BUILD_TIME_WARNING if flagged else None
