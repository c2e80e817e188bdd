"""
Pydantic models for Jira API responses and tool arguments.

This package provides type-safe models for the data exchanged between the
MCP tools and the Jira REST API.
"""

from .base import ApiModel
from .jira import (
    IssueCreateRequest,
    IssuePayload,
    IssueSearchRequest,
    IssueUpdateRequest,
    JiraIssueSummary,
)
from .server import ServerCapabilities

__all__ = [
    "ApiModel",
    "IssueCreateRequest",
    "IssuePayload",
    "IssueSearchRequest",
    "IssueUpdateRequest",
    "JiraIssueSummary",
    "ServerCapabilities",
]
