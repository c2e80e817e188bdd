"""Main FastMCP server setup for the Jira integration."""

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from mcp_jira import __version__
from mcp_jira.logging_config import get_logger
from mcp_jira.models.server import ServerCapabilities

from .jira import TOOL_NAMES, jira_mcp

logger = get_logger("mcp-jira.server.main")

SERVER_NAME = "Jira MCP Server"
SERVER_VERSION = __version__
SERVER_INFO_URI = "info://server"

SERVER_CAPABILITIES = ServerCapabilities(
    name=SERVER_NAME,
    version=SERVER_VERSION,
    actions=TOOL_NAMES,
)


async def health_check(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


main_mcp = FastMCP(
    name=SERVER_NAME,
    instructions=(
        "Creates, updates and searches Jira issues. Every tool call carries "
        "its own Jira connection configuration."
    ),
)
main_mcp.mount(jira_mcp)


@main_mcp.resource(
    SERVER_INFO_URI,
    name="Server Information",
    description="Provides details about the server and available actions",
    mime_type="application/json",
)
def server_info() -> str:
    """Return the server identity and its tool names as JSON."""
    return SERVER_CAPABILITIES.to_json()


@main_mcp.custom_route("/healthz", methods=["GET"], include_in_schema=False)
async def _health_check_route(request: Request) -> JSONResponse:
    return await health_check(request)


logger.debug("Added /healthz endpoint for Kubernetes probes")
