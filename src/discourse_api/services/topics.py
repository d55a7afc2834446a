"""Topics service for the Discourse API Python client."""

from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, Iterable, Optional, Union
from urllib.parse import urlencode

from ..types import (
    BasicTopicType,
    InviteToTopicResponseType,
    LatestTopicsResponseType,
    TopicPostsResponseType,
    TopicStatusResponseType,
    TopicType,
)

if TYPE_CHECKING:
    from ..http import HTTPClient

TopicId = Union[int, str]
Until = Union[str, datetime, None]

TOPIC_STATUSES = ("closed", "pinned", "pinned_globally", "archived", "visible")


class TopicsService:
    """Service for topic operations."""

    def __init__(self, http_client: "HTTPClient") -> None:
        """Initialize topics service.

        Args:
            http_client: HTTP client instance
        """
        self.http_client = http_client

    def _topic_path(self, topic_id: TopicId, *parts: str) -> str:
        encoded = self.http_client.encode_url_component(topic_id)
        return "/".join((f"/t/{encoded}",) + parts)

    def list_latest(
        self,
        order: Optional[str] = None,
        ascending: Optional[bool] = None,
        status: Optional[str] = None,
        custom_url: Optional[str] = None,
    ) -> LatestTopicsResponseType:
        """Get the latest topics.

        Args:
            order: default, created, activity, views, posts, category,
                likes, op_likes or posters
            ascending: Sort ascending
            status: deleted, closed, listed, open, public, unlisted or archived
            custom_url: Usually the ``more_topics_url`` of a previous page;
                other arguments are ignored when given

        Returns:
            Topic list with the users involved
        """
        if custom_url:
            return self.http_client.request(custom_url)

        qs_params: Dict[str, str] = {}
        if order:
            qs_params["order"] = order
        if ascending is not None:
            qs_params["ascending"] = str(ascending).lower()
        if status:
            qs_params["status"] = status

        query_string = urlencode(qs_params)
        return self.http_client.request(f"/latest{f'?{query_string}' if query_string else ''}")

    def get_latest(self, **kwargs: Any) -> LatestTopicsResponseType:
        """Alias of list_latest."""
        return self.list_latest(**kwargs)

    def get_topic(
        self,
        topic_id: TopicId,
        around_post_number: Union[int, str, None] = None,
    ) -> TopicType:
        """Get a topic.

        Args:
            topic_id: Topic id
            around_post_number: Load the post stream near this post number,
                or ``"last"``
        """
        if around_post_number:
            encoded = self.http_client.encode_url_component(topic_id)
            return self.http_client.request(f"/t/-/{encoded}/{around_post_number}")
        return self.http_client.request(self._topic_path(topic_id))

    def get_topic_info(self, topic_id: TopicId, **kwargs: Any) -> TopicType:
        """Alias of get_topic."""
        return self.get_topic(topic_id, **kwargs)

    def get_topic_posts(self, topic_id: TopicId, post_ids: Iterable[Union[int, str]]) -> TopicPostsResponseType:
        """Get specific posts of a topic."""
        query_string = urlencode([("post_ids[]", str(pid)) for pid in post_ids])
        return self.http_client.request(f"{self._topic_path(topic_id, 'posts')}?{query_string}")

    def remove_topic(self, topic_id: TopicId) -> None:
        return self.http_client.request(self._topic_path(topic_id), "DELETE")

    def update_topic(
        self,
        topic_id: TopicId,
        title: Optional[str] = None,
        category_id: Optional[int] = None,
    ) -> Dict[str, BasicTopicType]:
        """Update the title or category of a topic."""
        topic: Dict[str, Any] = {}
        if title is not None:
            topic["title"] = title
        if category_id is not None:
            topic["category_id"] = category_id
        encoded = self.http_client.encode_url_component(topic_id)
        return self.http_client.request(f"/t/-/{encoded}", "PUT", {"topic": topic})

    def invite_to_topic(
        self,
        topic_id: TopicId,
        user: Optional[str] = None,
        email: Optional[str] = None,
    ) -> InviteToTopicResponseType:
        """Invite a user, by username or email, to a topic."""
        if not user and not email:
            raise ValueError("one of user or email must be specified")
        data: Dict[str, str] = {}
        if user:
            data["user"] = user
        if email:
            data["email"] = email
        return self.http_client.request(self._topic_path(topic_id, "invite"), "POST", data)

    def update_topic_status(
        self,
        topic_id: TopicId,
        status: str,
        enabled: bool,
        until: Until = None,
    ) -> TopicStatusResponseType:
        """Update the status of a topic.

        Args:
            topic_id: Topic id
            status: closed, pinned, pinned_globally, archived or visible
            enabled: Turn the status on or off
            until: Only used by pinned and pinned_globally
        """
        if status not in TOPIC_STATUSES:
            raise ValueError(f"status must be one of {', '.join(TOPIC_STATUSES)}")
        data: Dict[str, Any] = {"status": status, "enabled": enabled}
        if until is not None:
            data["until"] = until.isoformat() if isinstance(until, datetime) else until
        return self.http_client.request(self._topic_path(topic_id, "status"), "PUT", data)

    def close_topic(self, topic_id: TopicId, until: Until = None) -> TopicStatusResponseType:
        return self.update_topic_status(topic_id, "closed", True, until)

    def open_topic(self, topic_id: TopicId) -> TopicStatusResponseType:
        return self.update_topic_status(topic_id, "closed", False)

    def archive_topic(self, topic_id: TopicId, until: Until = None) -> TopicStatusResponseType:
        return self.update_topic_status(topic_id, "archived", True, until)

    def unarchive_topic(self, topic_id: TopicId) -> TopicStatusResponseType:
        return self.update_topic_status(topic_id, "archived", False)

    def pin_topic(self, topic_id: TopicId, globally: bool = False, until: Until = None) -> TopicStatusResponseType:
        status = "pinned_globally" if globally else "pinned"
        return self.update_topic_status(topic_id, status, True, until)

    def unpin_topic(self, topic_id: TopicId, globally: bool = False) -> TopicStatusResponseType:
        status = "pinned_globally" if globally else "pinned"
        return self.update_topic_status(topic_id, status, False)

    def unlist_topic(self, topic_id: TopicId, until: Until = None) -> TopicStatusResponseType:
        return self.update_topic_status(topic_id, "visible", False, until)

    def list_topic(self, topic_id: TopicId) -> TopicStatusResponseType:
        """Make an unlisted topic visible again."""
        return self.update_topic_status(topic_id, "visible", True)
