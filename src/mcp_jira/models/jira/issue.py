"""
Jira issue models.

Covers the three inbound request shapes accepted by the tools, the outbound
``fields`` payloads sent to the Jira REST API, and the summary view extracted
from search results.
"""

from typing import Any

from pydantic import BaseModel, field_validator

from ...exceptions import DecodingError
from ..base import EMPTY_STRING, ApiModel


def _blank_to_none(value: str | None) -> str | None:
    if value == "":
        return None
    return value


class IssueCreateRequest(BaseModel):
    """Arguments of a create operation, without connection details."""

    project_key: str
    summary: str
    issue_type: str
    description: str | None = None

    @field_validator("description")
    @classmethod
    def _normalize_description(cls, value: str | None) -> str | None:
        return _blank_to_none(value)


class IssueUpdateRequest(BaseModel):
    """Arguments of an update operation.

    Neither ``summary`` nor ``description`` is required; when both are absent
    the update is still sent with an empty ``fields`` object.
    """

    issue_key: str
    summary: str | None = None
    description: str | None = None

    @field_validator("summary", "description")
    @classmethod
    def _normalize_optional(cls, value: str | None) -> str | None:
        return _blank_to_none(value)


class IssueSearchRequest(BaseModel):
    """Arguments of a JQL search."""

    jql: str


class _ProjectRef(BaseModel):
    key: str


class _IssueTypeRef(BaseModel):
    name: str


class IssueCreateFields(BaseModel):
    project: _ProjectRef
    summary: str
    description: str | None = None
    issuetype: _IssueTypeRef


class IssueUpdateFields(BaseModel):
    summary: str | None = None
    description: str | None = None


class IssuePayload(BaseModel):
    """Envelope for the JSON body of create and update calls."""

    fields: IssueCreateFields | IssueUpdateFields

    @classmethod
    def for_create(cls, request: IssueCreateRequest) -> "IssuePayload":
        return cls(
            fields=IssueCreateFields(
                project=_ProjectRef(key=request.project_key),
                summary=request.summary,
                description=request.description,
                issuetype=_IssueTypeRef(name=request.issue_type),
            )
        )

    @classmethod
    def for_update(cls, request: IssueUpdateRequest) -> "IssuePayload":
        return cls(
            fields=IssueUpdateFields(
                summary=request.summary,
                description=request.description,
            )
        )

    def to_json_body(self) -> dict[str, Any]:
        """Render the payload with absent optional members omitted."""
        return self.model_dump(exclude_none=True)


class JiraIssueSummary(ApiModel):
    """
    Model representing the key and summary of a Jira issue.

    This is the only projection of an issue the search tool returns.
    """

    key: str = EMPTY_STRING
    summary: str = EMPTY_STRING

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraIssueSummary":
        """
        Create a JiraIssueSummary from a Jira API issue object.

        Args:
            data: The issue data from the Jira API
            **kwargs: Unused

        Returns:
            A JiraIssueSummary instance

        Raises:
            DecodingError: If the issue is not an object, has no string key,
                or carries a summary that is not a string
        """
        if not isinstance(data, dict):
            raise DecodingError(
                f"malformed response: issue is {type(data).__name__}, expected object"
            )

        key = data.get("key")
        if not isinstance(key, str):
            raise DecodingError("malformed response: issue has no string key")

        fields = data.get("fields") or {}
        if not isinstance(fields, dict):
            raise DecodingError(f"malformed response: fields of {key} is not an object")

        # Jira omits the summary when the field is hidden from the caller
        summary = fields.get("summary")
        if summary is None:
            summary = EMPTY_STRING
        elif not isinstance(summary, str):
            raise DecodingError(f"malformed response: summary of {key} is not a string")

        return cls(key=key, summary=summary)

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        return {"key": self.key, "summary": self.summary}
