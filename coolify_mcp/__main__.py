from coolify_mcp.server import main

main()
