"""Authentication utilities for Jira Data Center and Cloud instances."""

import logging
from typing import TYPE_CHECKING

from requests.auth import AuthBase

if TYPE_CHECKING:
    from requests import PreparedRequest, Session

logger = logging.getLogger("mcp-jira")


class BearerAuth(AuthBase):
    """Attaches a Personal Access Token as an ``Authorization: Bearer`` header."""

    def __init__(self, token: str) -> None:
        self.token = token

    def __eq__(self, other: object) -> bool:
        return isinstance(other, BearerAuth) and other.token == self.token

    def __call__(self, r: "PreparedRequest") -> "PreparedRequest":
        r.headers["Authorization"] = f"Bearer {self.token}"
        return r


def configure_server_pat_auth(session: "Session", personal_token: str) -> None:
    """Configure Bearer authentication for Data Center Personal Access Tokens.

    The token is installed as the session's auth handler rather than a plain
    header, so requests never replaces it with credentials from ``~/.netrc``.

    Args:
        session: The requests session to configure
        personal_token: The Personal Access Token
    """
    logger.debug("Configuring Bearer authentication for Data Center PAT")
    session.auth = BearerAuth(personal_token)
