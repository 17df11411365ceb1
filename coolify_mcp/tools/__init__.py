# tools package for the Coolify MCP server
# Public modules in this package expose `get_tools(client) -> dict[str, dict]`.
# The dispatcher imports every module whose name does not start with "_" and registers what it returns.
