"""MCP Server definition: registers all tools via FastMCP."""

from mcp.server.fastmcp import FastMCP

mcp = FastMCP(
    name="waitlister",
    instructions=(
        "Waitlister MCP server. Adds, lists, looks up and updates subscribers "
        "on a Waitlister waitlist and records waitlist page views."
    ),
)

# Import tools module so @mcp.tool() decorators execute at import time.
import waitlister_mcp.tools as _tools  # noqa: F401, E402
