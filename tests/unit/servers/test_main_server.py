"""Tests for the main MCP server: tool schemas, the info resource and health check."""

import json

import httpx
import pytest
from fastmcp import Client
from fastmcp.client import FastMCPTransport

from mcp_jira import __version__
from mcp_jira.servers.main import SERVER_CAPABILITIES, SERVER_INFO_URI, main_mcp


@pytest.fixture
async def client():
    async with Client(transport=FastMCPTransport(main_mcp)) as client_instance:
        yield client_instance


def _resolve(schema, node):
    """Follow a local $ref inside a tool input schema, if present."""
    ref = node.get("$ref")
    if ref is None and "allOf" in node and len(node["allOf"]) == 1:
        ref = node["allOf"][0].get("$ref")
    if ref is None:
        return node
    name = ref.rsplit("/", 1)[-1]
    return schema.get("$defs", schema.get("definitions", {}))[name]


async def _input_schemas(client):
    tools = await client.list_tools()
    return {tool.name: tool.inputSchema for tool in tools}


@pytest.mark.anyio
async def test_lists_exactly_the_three_tools(client):
    schemas = await _input_schemas(client)

    assert set(schemas) == {"create_issue", "update_issue", "search_issues"}


@pytest.mark.anyio
@pytest.mark.parametrize(
    ("tool_name", "required", "optional"),
    [
        (
            "create_issue",
            {"jira_config", "project_key", "summary", "issue_type"},
            {"description"},
        ),
        ("update_issue", {"jira_config", "issue_key"}, {"summary", "description"}),
        ("search_issues", {"jira_config", "jql"}, set()),
    ],
)
async def test_tool_argument_schema(client, tool_name, required, optional):
    schema = (await _input_schemas(client))[tool_name]

    assert set(schema["required"]) == required
    assert set(schema["properties"]) == required | optional


@pytest.mark.anyio
async def test_jira_config_fields_all_required(client):
    schema = (await _input_schemas(client))["create_issue"]
    config_schema = _resolve(schema, schema["properties"]["jira_config"])

    assert set(config_schema["required"]) == {"url", "api_key", "email"}


@pytest.mark.anyio
async def test_server_info_resource(client):
    contents = await client.read_resource(SERVER_INFO_URI)

    assert len(contents) == 1
    assert contents[0].mimeType == "application/json"
    assert json.loads(contents[0].text) == {
        "name": "Jira MCP Server",
        "version": __version__,
        "actions": ["create_issue", "update_issue", "search_issues"],
    }


@pytest.mark.anyio
async def test_server_info_resource_is_stable(client):
    first = await client.read_resource(SERVER_INFO_URI)
    second = await client.read_resource(SERVER_INFO_URI)

    assert first[0].text == second[0].text == SERVER_CAPABILITIES.to_json()


@pytest.mark.anyio
async def test_server_info_lists_registered_tools(client):
    schemas = await _input_schemas(client)
    info = json.loads((await client.read_resource(SERVER_INFO_URI))[0].text)

    assert set(info["actions"]) == set(schemas)


@pytest.mark.anyio
async def test_health_check_endpoint():
    """Test the health check endpoint returns 200 and correct JSON response."""
    app = main_mcp.http_app()
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/healthz")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

