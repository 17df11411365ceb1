"""Tool registry and dispatcher.

Tool modules live in the `coolify_mcp.tools` package. Each public module
exposes `get_tools(client) -> dict[str, dict]` mapping a tool name to::

    {
        "func": async callable taking the validated argument model,
        "args": pydantic model class describing the tool's input,
        "title": short human-readable title,
        "description": description shown to the calling agent,
        "note": optional callable(args) -> str | None appended to the success text,
    }

`ToolDispatcher` collects them into one lookup table and turns every
invocation into a well-formed `CallToolResult`. Failures never propagate.
"""
from __future__ import annotations

import logging
import pkgutil
from dataclasses import dataclass
from importlib import import_module
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type

from mcp.types import CallToolResult, TextContent, Tool
from pydantic import ValidationError

from coolify_mcp import tools as tools_package
from coolify_mcp.core.client import CoolifyClient
from coolify_mcp.core.errors import CoolifyMCPError, ToolValidationError
from coolify_mcp.tools._base import ToolArgs
from coolify_mcp.utils.response_utils import to_json_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolSpec:
    name: str
    func: Callable[[Any], Awaitable[Any]]
    args: Type[ToolArgs]
    title: Optional[str]
    description: str
    note: Optional[Callable[[ToolArgs], Optional[str]]] = None

    def to_tool(self) -> Tool:
        return Tool(
            name=self.name,
            title=self.title,
            description=self.description,
            inputSchema=self.args.model_json_schema(),
        )


def format_validation_error(tool_name: str, exc: ValidationError) -> str:
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"]) or "arguments"
        problems.append(f"{location}: {err['msg']}")
    return f"Invalid arguments for {tool_name}: " + "; ".join(problems)


def load_tool_specs(client: CoolifyClient) -> Dict[str, ToolSpec]:
    """Import every public module of the tools package and collect its tools."""
    registry: Dict[str, ToolSpec] = {}
    for _finder, name, _ispkg in pkgutil.iter_modules(tools_package.__path__):
        if name.startswith("_"):
            continue
        module_name = f"{tools_package.__name__}.{name}"
        mod = import_module(module_name)
        if not hasattr(mod, "get_tools"):
            logger.warning(f"Tools module {module_name} has no get_tools(); skipping")
            continue
        for tool_name, meta in mod.get_tools(client).items():
            if tool_name in registry:
                raise ValueError(f"Duplicate tool name {tool_name!r} in {module_name}")
            registry[tool_name] = ToolSpec(
                name=tool_name,
                func=meta["func"],
                args=meta["args"],
                title=meta.get("title"),
                description=meta["description"],
                note=meta.get("note"),
            )
        logger.debug(f"Loaded tools module: {module_name}")
    logger.info(f"Total tools registered: {len(registry)}, tool names: {sorted(registry)}")
    return registry


def _text_result(text: str, is_error: bool = False) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=is_error)


class ToolDispatcher:
    """Maps tool invocations onto `CoolifyClient` calls."""

    def __init__(self, client: CoolifyClient, specs: Optional[Dict[str, ToolSpec]] = None):
        self.client = client
        self.specs = specs if specs is not None else load_tool_specs(client)

    def list_tools(self) -> List[Tool]:
        return [spec.to_tool() for spec in self.specs.values()]

    def validate(self, name: str, arguments: Optional[Dict[str, Any]]) -> ToolArgs:
        spec = self.specs.get(name)
        if spec is None:
            raise ToolValidationError(f"Unknown tool: {name}")
        try:
            return spec.args.model_validate(arguments or {})
        except ValidationError as exc:
            raise ToolValidationError(format_validation_error(name, exc)) from exc

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> CallToolResult:
        logger.info(f"Calling tool {name}")
        try:
            args = self.validate(name, arguments)
            spec = self.specs[name]
            result = await spec.func(args)
            text = to_json_text(result)
            if spec.note is not None:
                text += spec.note(args) or ""
            return _text_result(text)
        except CoolifyMCPError as exc:
            logger.warning(f"Tool {name} failed: {exc}")
            return _text_result(f"Error: {exc}", is_error=True)
        except Exception as exc:
            logger.exception(f"Unexpected error in tool {name}")
            return _text_result(f"Error: {exc}", is_error=True)
