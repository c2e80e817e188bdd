"""Module for Jira issue operations."""

import logging
from urllib.parse import quote

from ..exceptions import DecodingError
from ..models.jira import IssueCreateRequest, IssuePayload, IssueUpdateRequest
from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    def create_issue(self, request: IssueCreateRequest) -> str:
        """
        Create a new Jira issue.

        Args:
            request: Project key, summary, issue type and optional description

        Returns:
            The key of the created issue (e.g. 'PROJ-123')

        Raises:
            UpstreamStatusError: If Jira does not answer 201
            DecodingError: If the response carries no string issue key
        """
        payload = IssuePayload.for_create(request).to_json_body()
        response = self._request(
            "POST",
            "/issue",
            operation="create issue",
            expected_status=(201,),
            payload=payload,
        )

        result = self._decode_json(response)
        issue_key = result.get("key") if isinstance(result, dict) else None
        if not isinstance(issue_key, str):
            logger.error(f"Malformed create response for project {request.project_key}")
            raise DecodingError("malformed response: issue key not found in response")

        logger.info(f"Created issue {issue_key} in project {request.project_key}")
        return issue_key

    def update_issue(self, request: IssueUpdateRequest) -> str:
        """
        Update the summary and/or description of an existing issue.

        Only the supplied fields are sent. Jira returns no body on success, so
        the given key is handed back unchanged.

        Args:
            request: Issue key plus the optional new summary and description

        Returns:
            The key of the updated issue
        """
        payload = IssuePayload.for_update(request).to_json_body()
        self._request(
            "PUT",
            f"/issue/{quote(request.issue_key, safe='')}",
            operation="update issue",
            expected_status=(200, 204),
            payload=payload,
        )
        logger.info(f"Updated issue {request.issue_key}")
        return request.issue_key
