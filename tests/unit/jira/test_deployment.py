"""Tests for deployment resolution and the derived API prefix and auth scheme."""

import pytest

from mcp_jira.jira.config import DeploymentType, JiraConfig, resolve_deployment


@pytest.mark.parametrize(
    "url",
    [
        "https://example.atlassian.net",
        "https://EXAMPLE.ATLASSIAN.NET",
        "http://team.Atlassian.Net/jira",
        "https://a.atlassian.net/",
    ],
)
def test_resolve_deployment_cloud(url):
    assert resolve_deployment(url) is DeploymentType.CLOUD


@pytest.mark.parametrize(
    "url",
    [
        "https://jira.example.com",
        "http://localhost:8080",
        "https://atlassian.com",
        "",
        None,
        "not a url",
    ],
)
def test_resolve_deployment_data_center(url):
    assert resolve_deployment(url) is DeploymentType.DATA_CENTER


def test_api_prefix_per_deployment():
    assert DeploymentType.CLOUD.api_prefix == "/rest/api/3"
    assert DeploymentType.DATA_CENTER.api_prefix == "/rest/api/2"


def test_auth_type_per_deployment():
    assert DeploymentType.CLOUD.auth_type == "basic"
    assert DeploymentType.DATA_CENTER.auth_type == "token"


def test_jira_config_derived_properties(cloud_config, dc_config):
    assert cloud_config.deployment is DeploymentType.CLOUD
    assert cloud_config.api_prefix == "/rest/api/3"
    assert cloud_config.auth_type == "basic"
    assert dc_config.deployment is DeploymentType.DATA_CENTER
    assert dc_config.api_prefix == "/rest/api/2"
    assert dc_config.auth_type == "token"


def test_jira_config_hides_api_key_in_repr():
    config = JiraConfig(url="https://jira.example.com", api_key="secret", email="")
    assert "secret" not in repr(config)


def test_jira_config_requires_all_fields():
    schema = JiraConfig.model_json_schema()
    assert sorted(schema["required"]) == ["api_key", "email", "url"]
