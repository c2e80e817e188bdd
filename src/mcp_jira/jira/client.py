"""Base client module for Jira API interactions."""

import json
import logging
from collections.abc import Iterable
from types import TracebackType
from typing import Any

import requests

from ..exceptions import (
    DecodingError,
    EncodingError,
    MCPJiraAuthenticationError,
    TransportError,
    UpstreamStatusError,
)
from ..logging_config import mask_sensitive
from ..utils.auth import configure_server_pat_auth
from .config import REQUEST_TIMEOUT, JiraConfig

# Configure logging
logger = logging.getLogger("mcp-jira")


class JiraClient:
    """Base client for Jira API interactions.

    A client is built for a single tool call and discarded afterwards. It
    resolves the deployment type from the configured URL and prepares a
    ``requests`` session carrying the matching authentication.
    """

    def __init__(self, config: JiraConfig) -> None:
        """Initialize the Jira client with a given configuration.

        Args:
            config: Jira connection details for this call.
        """
        self.config = config
        self.deployment = config.deployment
        self.timeout = REQUEST_TIMEOUT

        self.session = requests.Session()
        self.session.headers.update(
            {"Content-Type": "application/json", "Accept": "application/json"}
        )
        if config.auth_type == "token":
            configure_server_pat_auth(self.session, config.api_key)
        else:  # basic auth
            self.session.auth = (config.email, config.api_key)

        logger.debug(
            f"Jira client ready: url={config.url}, deployment={self.deployment.value}, "
            f"api_key={mask_sensitive(config.api_key)}"
        )

    def __enter__(self) -> "JiraClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def _api_url(self, path: str) -> str:
        return f"{self.config.url.rstrip('/')}{self.config.api_prefix}{path}"

    def _request(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        expected_status: Iterable[int],
        payload: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
    ) -> requests.Response:
        """Send one request to the Jira REST API and check its status.

        Args:
            method: HTTP method (GET, POST, PUT)
            path: Endpoint path below the API prefix
            operation: Human readable operation name used in error messages
            expected_status: Status codes accepted as success
            payload: JSON body, if any
            params: Query parameters, encoded by requests

        Returns:
            The raw response; the body is left for the caller to decode

        Raises:
            EncodingError: If the payload cannot be serialized
            TransportError: If the request cannot be sent or times out
            MCPJiraAuthenticationError: If Jira answers 401 or 403
            UpstreamStatusError: For any other unexpected status
        """
        body = None
        if payload is not None:
            try:
                body = json.dumps(payload)
            except (TypeError, ValueError) as e:
                raise EncodingError(f"failed to marshal payload: {e}") from e

        url = self._api_url(path)
        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(
                method, url, data=body, params=params, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Network error during {operation}: {e}")
            raise TransportError(f"failed to send request: {e}") from e

        status = response.status_code
        if status not in set(expected_status):
            if status in (401, 403):
                logger.error(
                    f"Authentication failed for Jira API ({status}) during {operation}. "
                    "Token may be expired or invalid."
                )
                raise MCPJiraAuthenticationError(status, operation)
            logger.error(f"Unexpected status {status} during {operation}")
            raise UpstreamStatusError(status, operation)

        return response

    @staticmethod
    def _decode_json(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise DecodingError(f"failed to decode response: {e}") from e
