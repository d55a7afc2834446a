"""
Error classes for the Discourse API Python client.

Every failure raised by the client derives from DiscourseError, except
transport failures that never produced a response: those are the
``requests`` exceptions themselves, propagated unchanged.
"""

import json
from typing import Any, Optional

import requests


class DiscourseError(Exception):
    """Base exception class for the Discourse API client."""

    def __init__(self, message: str, status_code: Optional[int] = None, response: Optional[Any] = None):
        """Initialize Discourse error.

        Args:
            message: Error message
            status_code: HTTP status code (optional)
            response: Full response from the API (optional)
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response

    def __str__(self) -> str:
        return self.message


class AuthConfigError(DiscourseError, ValueError):
    """Admin-key and user-key credentials were configured at the same time."""

    def __init__(self, message: str = "You cannot specify api_key and user_api_key at the same time"):
        super().__init__(message)


class MissingUserApiKeyError(DiscourseError):
    """No user api key was given or configured."""

    def __init__(self, message: str = "No user api key to revoke"):
        super().__init__(message)


def describe_errors(errors: Any) -> str:
    """Render the ``errors`` field of an error body as a single string.

    A list or tuple of values is joined with ``;``. Anything else is
    serialized as JSON, falling back to ``str`` for values JSON can't hold.
    """
    if isinstance(errors, (list, tuple)):
        return ";".join(str(item) for item in errors)
    try:
        return json.dumps(errors)
    except (TypeError, ValueError):
        return str(errors)


class ApiError(DiscourseError):
    """The server answered with a non-success status.

    Attributes:
        status: HTTP status code
        status_text: HTTP reason phrase
        message: Transport message, followed by ``": "`` and the server-side
            validation errors when the body carries an ``errors`` field
        body: Parsed JSON body, or raw text when the body isn't JSON
        code: Transport error code, when the transport supplied one
        request: Raw ``requests.PreparedRequest`` for diagnostics
        response: Raw ``requests.Response`` for diagnostics
    """

    def __init__(
        self,
        status: int,
        status_text: str,
        message: str,
        body: Any = None,
        code: Optional[str] = None,
        request: Optional[Any] = None,
        response: Optional[Any] = None,
    ):
        super().__init__(message, status, response)
        self.status = status
        self.status_text = status_text
        self.body = body
        self.code = code
        self.request = request

    @classmethod
    def from_http_error(cls, exc: requests.HTTPError) -> "ApiError":
        """Build an ApiError from a ``requests.HTTPError`` carrying a response.

        Raises:
            ValueError: If the error has no response attached
        """
        response = exc.response
        if response is None:
            raise ValueError("ApiError built from an HTTPError must have a response")

        body = parse_body(response)
        message = str(exc)
        if isinstance(body, dict) and "errors" in body:
            message = f"{message}: {describe_errors(body['errors'])}"

        return cls(
            status=response.status_code,
            status_text=response.reason or "",
            message=message,
            body=body,
            code=getattr(exc, "code", None),
            request=exc.request if exc.request is not None else response.request,
            response=response,
        )


def parse_body(response: requests.Response) -> Any:
    """Parse a response body as JSON, falling back to the raw text."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class UserApiKeyError(DiscourseError):
    """Base error for the user api key handshake."""


class DecryptionError(UserApiKeyError):
    """The encrypted payload could not be decrypted with the given private key."""


class PayloadParseError(UserApiKeyError):
    """The decrypted payload is not a JSON object."""
