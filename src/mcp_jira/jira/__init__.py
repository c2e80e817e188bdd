"""Jira API module for mcp_jira.

This module provides the client used by the Jira tools.
"""

from .client import JiraClient
from .config import DeploymentType, JiraConfig, resolve_deployment
from .issues import IssuesMixin
from .search import SearchMixin


class JiraFetcher(IssuesMixin, SearchMixin):
    """
    The main Jira client class providing access to all Jira operations.

    This class inherits from the operation mixins to expose issue creation,
    issue updates and JQL search through one object.
    """

    pass


__all__ = [
    "DeploymentType",
    "JiraClient",
    "JiraConfig",
    "JiraFetcher",
    "resolve_deployment",
]
