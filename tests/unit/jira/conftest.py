"""
Test fixtures for Jira unit tests.

Provides Cloud and Data Center connection configs and a stubbed
``requests.Session.request`` that returns canned responses.
"""

from unittest.mock import patch

import pytest

from mcp_jira.jira import JiraFetcher
from mcp_jira.jira.config import JiraConfig

CLOUD_URL = "https://example.atlassian.net"
DATA_CENTER_URL = "https://jira.example.com"


@pytest.fixture
def cloud_config():
    """JiraConfig pointing at a Jira Cloud site."""
    return JiraConfig(url=CLOUD_URL, api_key="cloud-api-token", email="user@example.com")


@pytest.fixture
def dc_config():
    """JiraConfig pointing at a self-hosted Jira Data Center instance."""
    return JiraConfig(url=DATA_CENTER_URL, api_key="dc-personal-token", email="")


@pytest.fixture
def mock_request():
    """Patch requests.Session.request; set ``return_value`` per test."""
    with patch("requests.Session.request") as mocked:
        yield mocked


@pytest.fixture
def cloud_fetcher(cloud_config):
    fetcher = JiraFetcher(config=cloud_config)
    yield fetcher
    fetcher.close()


@pytest.fixture
def dc_fetcher(dc_config):
    fetcher = JiraFetcher(config=dc_config)
    yield fetcher
    fetcher.close()
