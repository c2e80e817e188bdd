class MCPJiraError(Exception):
    """Base exception for MCP-Jira errors."""

    pass


class EncodingError(MCPJiraError):
    """Raised when an outbound request payload cannot be serialized to JSON."""

    pass


class TransportError(MCPJiraError):
    """Raised when the HTTP request to Jira cannot be sent or times out."""

    pass


class UpstreamStatusError(MCPJiraError):
    """Raised when Jira answers with a status code the operation does not accept."""

    def __init__(self, status_code: int, operation: str = "request") -> None:
        self.status_code = status_code
        self.operation = operation
        super().__init__(f"failed to {operation}, status: {status_code}")


class MCPJiraAuthenticationError(UpstreamStatusError):
    """Raised when Jira rejects the supplied credentials (401/403)."""

    pass


class DecodingError(MCPJiraError):
    """Raised when a Jira response body is not JSON or lacks an expected field."""

    pass
