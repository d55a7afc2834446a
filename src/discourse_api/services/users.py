"""Users service for the Discourse API Python client."""

from typing import TYPE_CHECKING

from ..types import UserInfoType

if TYPE_CHECKING:
    from ..http import HTTPClient


class UsersService:
    """Service for user endpoints."""

    def __init__(self, http_client: "HTTPClient") -> None:
        self.http_client = http_client

    def get_user(self, username: str) -> UserInfoType:
        """Get a user by username."""
        encoded = self.http_client.encode_url_component(username)
        return self.http_client.request(f"/u/{encoded}")
