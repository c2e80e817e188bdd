"""
Jira data models for the MCP Jira integration.

This package provides Pydantic models for the request arguments, outbound
payloads and trimmed responses the Jira tools work with.
"""

from .issue import (
    IssueCreateFields,
    IssueCreateRequest,
    IssuePayload,
    IssueSearchRequest,
    IssueUpdateFields,
    IssueUpdateRequest,
    JiraIssueSummary,
)

__all__ = [
    # Request models
    "IssueCreateRequest",
    "IssueUpdateRequest",
    "IssueSearchRequest",
    # Outbound payloads
    "IssuePayload",
    "IssueCreateFields",
    "IssueUpdateFields",
    # Response views
    "JiraIssueSummary",
]
