"""
Base models and utility classes for the MCP Jira API models.
"""

from typing import Any, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound="ApiModel")

# Sentinel used when an upstream field is missing
EMPTY_STRING = ""


class ApiModel(BaseModel):
    """
    Base model for all API models with common conversion methods.

    Subclasses build themselves from raw Jira JSON through
    ``from_api_response`` and render the trimmed view returned to MCP
    clients through ``to_simplified_dict``.
    """

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """
        Convert an API response to a model instance.

        Args:
            data: The API response data
            **kwargs: Additional context parameters

        Returns:
            An instance of the model
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_simplified_dict(self) -> dict[str, Any]:
        """
        Convert the model to a simplified dictionary for API responses.

        Returns:
            A dictionary with only the essential fields for API responses
        """
        return self.model_dump(exclude_none=True)
