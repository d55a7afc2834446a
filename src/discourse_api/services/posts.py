"""Posts service for the Discourse API Python client."""

from typing import TYPE_CHECKING, List, Optional, Union

from ..http import QueryParams
from ..types import (
    CookedResponseType,
    CreatePostRequestType,
    LatestPostsResponseType,
    PostType,
    UpdatePostRequestType,
)

if TYPE_CHECKING:
    from ..http import HTTPClient

PostId = Union[int, str]

# Post action types, see app/models/post_action_type.rb in Discourse
LIKE = 2
OFF_TOPIC = 3
INAPPROPRIATE = 4
NOTIFY_USER = 6
NOTIFY_MODERATORS = 7
SPAM = 8


class PostsService:
    """Service for post operations."""

    def __init__(self, http_client: "HTTPClient") -> None:
        """Initialize posts service.

        Args:
            http_client: HTTP client instance
        """
        self.http_client = http_client

    def _post_path(self, post_id: PostId, *parts: str) -> str:
        encoded = self.http_client.encode_url_component(post_id)
        return "/".join((f"/posts/{encoded}",) + parts)

    def list_posts(self) -> LatestPostsResponseType:
        """List latest posts across topics."""
        return self.http_client.request("/posts")

    def get_post(self, post_id: PostId) -> PostType:
        """Retrieve a single post.

        Likes are counted in ``actions_summary``: the entry with ``id == 2``.
        """
        return self.http_client.request(self._post_path(post_id))

    def get_post_raw(self, post_id: PostId) -> str:
        """Get the raw markdown of a post. The server answers with plain text."""
        return self.http_client.request(
            self._post_path(post_id, "raw"), options={"skip_path_suffixing": True}
        )

    def get_post_cooked(self, post_id: PostId) -> CookedResponseType:
        """Get only the cooked HTML of a post."""
        return self.http_client.request(self._post_path(post_id, "cooked"))

    def create_topic_post_pm(self, payload: CreatePostRequestType) -> PostType:
        """Create a new topic, a new post, or a private message.

        Args:
            payload: ``raw`` plus ``title`` for a topic or private message,
                ``topic_id`` for a reply, ``target_recipients`` and
                ``archetype="private_message"`` for a private message

        Returns:
            The created post
        """
        return self.http_client.request("/posts", "POST", payload)

    def update_post(self, post_id: PostId, post: UpdatePostRequestType) -> PostType:
        """Update a single post."""
        return self.http_client.request(self._post_path(post_id), "PUT", {"post": post})

    def delete_post(self, post_id: PostId, permanently: bool = False) -> None:
        """Delete a single post.

        Args:
            post_id: Post id
            permanently: Needs ``SiteSetting.can_permanently_delete``, and a
                first call without it at least five minutes earlier
        """
        return self.http_client.request(
            self._post_path(post_id), "DELETE", {"force_destroy": permanently}
        )

    def get_post_replies(self, post_id: PostId) -> List[PostType]:
        """List replies to a post."""
        return self.http_client.request(self._post_path(post_id, "replies"))

    def perform_post_action(
        self,
        post_id: PostId,
        post_action_type_id: int,
        flag_topic: Optional[bool] = None,
    ) -> PostType:
        """Perform a post action such as a like or a flag.

        Returns:
            The updated post
        """
        payload = {"id": post_id, "post_action_type_id": post_action_type_id}
        if flag_topic is not None:
            payload["flag_topic"] = flag_topic
        return self.http_client.request("/post_actions", "POST", payload)

    def delete_post_action(self, post_id: PostId, post_action_type_id: int) -> PostType:
        """Undo a post action such as a like."""
        encoded = self.http_client.encode_url_component(post_id)
        return self.http_client.request(
            f"/post_actions/{encoded}",
            "DELETE",
            QueryParams(post_action_type_id=post_action_type_id),
        )

    def like_post(self, post_id: PostId) -> PostType:
        return self.perform_post_action(post_id, LIKE)

    def unlike_post(self, post_id: PostId) -> PostType:
        return self.delete_post_action(post_id, LIKE)

    def lock_post(self, post_id: PostId) -> PostType:
        """Lock a post from being edited. Needs moderator permission."""
        return self.http_client.request(self._post_path(post_id, "locked"), "PUT", {"locked": True})

    def unlock_post(self, post_id: PostId) -> PostType:
        return self.http_client.request(self._post_path(post_id, "locked"), "PUT", {"locked": False})
