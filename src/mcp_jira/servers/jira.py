"""Jira FastMCP server instance and tool definitions."""

import asyncio
import json
from collections.abc import Callable
from typing import Annotated, TypeVar

from fastmcp import FastMCP
from pydantic import Field

from mcp_jira.jira import JiraFetcher
from mcp_jira.jira.config import JiraConfig
from mcp_jira.logging_config import get_logger, log_operation
from mcp_jira.models.jira import (
    IssueCreateRequest,
    IssueSearchRequest,
    IssueUpdateRequest,
)

logger = get_logger("mcp-jira.server.jira")

T = TypeVar("T")

# Tool names are part of the wire contract, in the order they are advertised
TOOL_NAMES = ("create_issue", "update_issue", "search_issues")

jira_mcp = FastMCP(
    name="Jira MCP Service",
    instructions="Provides tools for creating, updating and searching Jira issues.",
)

JiraConfigArg = Annotated[
    JiraConfig,
    Field(description="Jira connection configuration"),
]


async def _run_with_fetcher(config: JiraConfig, call: Callable[[JiraFetcher], T]) -> T:
    """Run one blocking Jira operation on a fresh fetcher in a worker thread."""

    def _invoke() -> T:
        jira = JiraFetcher(config=config)
        try:
            return call(jira)
        finally:
            jira.close()

    return await asyncio.to_thread(_invoke)


@jira_mcp.tool(
    name="create_issue",
    description="Create a new Jira issue",
    tags={"jira", "write"},
    annotations={"title": "Create Issue", "destructiveHint": False},
)
async def create_issue(
    jira_config: JiraConfigArg,
    project_key: Annotated[
        str,
        Field(description="The key of the project to create the issue in"),
    ],
    summary: Annotated[
        str,
        Field(description="The summary or title of the issue"),
    ],
    issue_type: Annotated[
        str,
        Field(description="The type of issue (e.g., Bug, Story, Task)"),
    ],
    description: Annotated[
        str | None,
        Field(description="Optional description of the issue"),
    ] = None,
) -> str:
    """Create a new Jira issue.

    Returns:
        A message naming the key of the created issue.

    Raises:
        MCPJiraError: If the issue cannot be created.
    """
    request = IssueCreateRequest(
        project_key=project_key,
        summary=summary,
        issue_type=issue_type,
        description=description,
    )
    with log_operation(logger, "create_issue", project=project_key):
        issue_key = await _run_with_fetcher(
            jira_config, lambda jira: jira.create_issue(request)
        )
    return f"Created issue: {issue_key}"


@jira_mcp.tool(
    name="update_issue",
    description="Update an existing Jira issue",
    tags={"jira", "write"},
    annotations={"title": "Update Issue", "destructiveHint": True},
)
async def update_issue(
    jira_config: JiraConfigArg,
    issue_key: Annotated[
        str,
        Field(description="The key of the issue to update (e.g., PROJ-123)"),
    ],
    summary: Annotated[
        str | None,
        Field(description="The new summary or title of the issue"),
    ] = None,
    description: Annotated[
        str | None,
        Field(description="The new description of the issue"),
    ] = None,
) -> str:
    """Update the summary and/or description of an existing Jira issue.

    Fields left empty are not sent to Jira.
    """
    request = IssueUpdateRequest(
        issue_key=issue_key, summary=summary, description=description
    )
    with log_operation(logger, "update_issue", issue=issue_key):
        updated_key = await _run_with_fetcher(
            jira_config, lambda jira: jira.update_issue(request)
        )
    return f"Updated issue: {updated_key}"


@jira_mcp.tool(
    name="search_issues",
    description="Search Jira issues using JQL",
    tags={"jira", "read"},
    annotations={"title": "Search Issues", "readOnlyHint": True},
)
async def search_issues(
    jira_config: JiraConfigArg,
    jql: Annotated[
        str,
        Field(
            description=(
                "The JQL query to search issues "
                "(e.g., 'project = PROJ AND status = Open')"
            )
        ),
    ],
) -> str:
    """Search Jira issues using JQL.

    Returns:
        JSON array of objects with the 'key' and 'summary' of each match.
    """
    request = IssueSearchRequest(jql=jql)
    with log_operation(logger, "search_issues"):
        issues = await _run_with_fetcher(
            jira_config, lambda jira: jira.search_issues(request)
        )
    result = [issue.to_simplified_dict() for issue in issues]
    return json.dumps(result, indent=2, ensure_ascii=False)
