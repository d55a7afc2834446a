"""Notifications service for the Discourse API Python client."""

from typing import TYPE_CHECKING, Optional

from ..types import MarkReadResponseType, NotificationsType

if TYPE_CHECKING:
    from ..http import HTTPClient


class NotificationsService:
    """Service for notification endpoints."""

    def __init__(self, http_client: "HTTPClient") -> None:
        self.http_client = http_client

    def get_notifications(self, load_more_url: Optional[str] = None) -> NotificationsType:
        """Get notifications of the current user.

        Args:
            load_more_url: The ``load_more_notifications`` value of a
                previous page

        Returns:
            Notifications page
        """
        return self.http_client.request(load_more_url or "/notifications")

    def mark_notifications_as_read(self, id: Optional[int] = None) -> MarkReadResponseType:
        """Mark notifications as read.

        Args:
            id: Notification to mark; leave off to mark all of them
        """
        data = {} if id is None else {"id": id}
        return self.http_client.request("/notifications/mark-read", "PUT", data)
