import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Dict, Optional

import httpx
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Tool

from coolify_mcp import SERVER_NAME, __version__
from coolify_mcp.core.client import CoolifyClient
from coolify_mcp.core.config import Settings, load_settings
from coolify_mcp.core.errors import ConfigurationError, CoolifyMCPError
from coolify_mcp.core.logging_config import resolve_logs_dir, setup_logging
from coolify_mcp.dispatcher import ToolDispatcher

logger = logging.getLogger(__name__)


###################################################### MCP Server ######################################################

def build_server(dispatcher: ToolDispatcher) -> Server:
    """Create the MCP server and route list/call requests to `dispatcher`."""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return dispatcher.list_tools()

    # arguments are validated by the dispatcher so that failures come back as "Error: ..." text
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Dict[str, Any]) -> CallToolResult:
        return await dispatcher.call_tool(name, arguments)

    return server


async def serve(settings: Settings) -> None:
    async with CoolifyClient(settings) as client:
        dispatcher = ToolDispatcher(client)
        server = build_server(dispatcher)
        logger.info(f"Serving {len(dispatcher.specs)} tools for {settings.base_url} over stdio")
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())


###################################################### Connectivity check ######################################################

async def check(settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> int:
    """Call the version and health endpoints and print both results to stdout.

    Returns the process exit status: 0 when both calls succeed, 1 otherwise.
    """
    report: Dict[str, Any] = {"base_url": settings.base_url}
    status = 0
    async with CoolifyClient(settings, transport=transport) as client:
        for key, call in (("version", client.get_version), ("health", client.health_check)):
            try:
                report[key] = await call()
            except CoolifyMCPError as exc:
                logger.warning(f"{key} check failed: {exc}")
                report[key] = f"Error: {exc}"
                status = 1
    print(json.dumps(report, indent=2, ensure_ascii=False))
    return status


###################################################### Startup ######################################################

def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="coolify-mcp-server", description="MCP server exposing the Coolify API as tools over stdio")
    p.add_argument("--check", action="store_true", help="Check connectivity (version + health) and exit instead of serving")
    p.add_argument("--config", default=None, help="Path to a YAML config file (default: config.yaml or $COOLIFY_MCP_CONFIG)")
    p.add_argument("--log-dir", default=None, help="Directory for log files (default: ./logs under the working directory)")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p.parse_args(argv)


def main(argv: Optional[list] = None) -> None:
    args = parse_args(argv)
    try:
        settings = load_settings(args.config)
    except ConfigurationError as exc:
        setup_logging(args.log_dir)
        logger.error(f"Invalid configuration: {exc}")
        print(f"Configuration error: {exc}", file=sys.stderr)
        sys.exit(1)

    logs_dir = resolve_logs_dir(args.log_dir or settings.log_dir)
    setup_logging(logs_dir, level=settings.log_level)
    logger.info(f"{SERVER_NAME} {__version__} starting with {settings!r}")

    if args.check:
        sys.exit(asyncio.run(check(settings)))

    try:
        asyncio.run(serve(settings))
        logger.info("MCP server shut down.")
    except KeyboardInterrupt:
        logger.info("MCP server interrupted.")
    except Exception:
        logger.exception("Unhandled exception running MCP server")
        print(f"Unhandled exception occurred. See the server_*.log files in {logs_dir} for details.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
