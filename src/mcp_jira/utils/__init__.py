"""
Utility functions for the MCP Jira integration.
"""

from .auth import BearerAuth, configure_server_pat_auth
from .urls import CLOUD_DOMAIN_SUFFIX, is_atlassian_cloud_url

__all__ = [
    "BearerAuth",
    "CLOUD_DOMAIN_SUFFIX",
    "configure_server_pat_auth",
    "is_atlassian_cloud_url",
]
