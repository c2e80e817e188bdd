"""Reusable mocks for outbound Jira HTTP responses."""

import json
from unittest.mock import MagicMock


def make_response(status_code, body=None):
    """Build a fake requests.Response with the given status and body.

    ``body`` may be a JSON-serializable object, a raw string (not JSON), or
    None for an empty body.
    """
    response = MagicMock()
    response.status_code = status_code
    if body is None or isinstance(body, str):
        response.content = (body or "").encode("utf-8")
        response.text = body or ""
        response.json.side_effect = ValueError("Expecting value: line 1 column 1")
    else:
        response.content = json.dumps(body).encode("utf-8")
        response.text = json.dumps(body)
        response.json.return_value = body
    return response
