"""URL-related utility functions for MCP Jira."""

# Hosted domain suffix shared by every Jira Cloud site
CLOUD_DOMAIN_SUFFIX = ".atlassian.net"


def is_atlassian_cloud_url(url: str | None) -> bool:
    """Determine if a URL belongs to Jira Cloud or Jira Data Center.

    The check is a case-insensitive substring match against the Cloud
    hosted domain. It never touches the network, so self-hosted instances
    behind a custom domain are always treated as Data Center.

    Args:
        url: The URL to check

    Returns:
        True if the URL is for a Jira Cloud instance, False for Data Center
    """
    if not url:
        return False
    return CLOUD_DOMAIN_SUFFIX in url.lower()
