from directus_mcp.server import main

main()
