"""Configuration module for Jira API interactions."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ..utils import is_atlassian_cloud_url

# Per-request timeout for every outbound Jira call, in seconds
REQUEST_TIMEOUT = 10


class DeploymentType(str, Enum):
    """Jira deployment flavour, decided from the base URL alone."""

    CLOUD = "cloud"
    DATA_CENTER = "data_center"

    @property
    def api_prefix(self) -> str:
        """REST API path prefix used by this deployment."""
        return "/rest/api/3" if self is DeploymentType.CLOUD else "/rest/api/2"

    @property
    def auth_type(self) -> Literal["basic", "token"]:
        """Authentication scheme used by this deployment."""
        return "basic" if self is DeploymentType.CLOUD else "token"


def resolve_deployment(url: str | None) -> DeploymentType:
    """Classify a Jira base URL as Cloud or Data Center.

    Unknown or empty URLs fall back to Data Center.
    """
    if is_atlassian_cloud_url(url):
        return DeploymentType.CLOUD
    return DeploymentType.DATA_CENTER


class JiraConfig(BaseModel):
    """Jira connection details supplied with every tool call.

    Handles authentication for both Jira Cloud (email + API token over basic
    auth) and Jira Data Center (personal access token as a bearer token).
    Instances are never stored between calls.
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(description="The Jira instance URL (Cloud or Data Center)")
    api_key: str = Field(
        description="The Jira API key or Personal Access Token",
        repr=False,
    )
    email: str = Field(
        description="The email address for Jira Cloud authentication"
    )

    @property
    def deployment(self) -> DeploymentType:
        return resolve_deployment(self.url)

    @property
    def api_prefix(self) -> str:
        return self.deployment.api_prefix

    @property
    def auth_type(self) -> Literal["basic", "token"]:
        return self.deployment.auth_type
