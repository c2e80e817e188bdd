"""Module for Jira search operations.

Cloud and Data Center both answer ``GET {prefix}/search`` with an ``issues``
array; only the API prefix differs. Results are not paginated: whatever the
first page holds is returned.
"""

import logging

from ..exceptions import DecodingError
from ..models.jira import IssueSearchRequest, JiraIssueSummary
from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    def search_issues(self, request: IssueSearchRequest) -> list[JiraIssueSummary]:
        """
        Search for issues using JQL (Jira Query Language).

        Args:
            request: The JQL query

        Returns:
            Key and summary of every issue in the response, in order

        Raises:
            DecodingError: If the response or one of its issues is malformed
        """
        response = self._request(
            "GET",
            "/search",
            operation="search issues",
            expected_status=(200,),
            params={"jql": request.jql, "fields": "summary"},
        )

        data = self._decode_json(response)
        if not isinstance(data, dict):
            logger.error("Search response is not a JSON object")
            raise DecodingError("malformed response: expected a JSON object")

        issues_data = data.get("issues")
        if issues_data is None:
            logger.debug("Search response has no issues array")
            return []
        if not isinstance(issues_data, list):
            logger.error("Search response issues field is not an array")
            raise DecodingError("malformed response: issues is not an array")

        issues = [JiraIssueSummary.from_api_response(issue) for issue in issues_data]
        logger.debug(f"Search returned {len(issues)} issues")
        return issues
