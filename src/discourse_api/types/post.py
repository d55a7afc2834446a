from typing import Any, List, Optional, TypedDict, NotRequired


class PostType(TypedDict):
    """A single post as the server renders it."""
    id: int
    name: Optional[str]
    username: str
    avatar_template: str
    created_at: str
    raw: NotRequired[str]
    cooked: str
    post_number: int
    post_type: int
    updated_at: str
    reply_count: int
    reply_to_post_number: Optional[int]
    quote_count: int
    reads: int
    score: float
    yours: bool
    topic_id: int
    topic_slug: str
    display_username: Optional[str]
    version: int
    can_edit: bool
    can_delete: bool
    can_recover: bool
    can_wiki: bool
    user_title: Optional[str]
    bookmarked: bool
    actions_summary: List[Any]
    moderator: bool
    admin: bool
    staff: bool
    user_id: int
    hidden: bool
    trust_level: int
    deleted_at: Optional[str]
    user_deleted: bool
    edit_reason: Optional[str]
    wiki: bool


class CreatePostRequestType(TypedDict, total=False):
    title: str  # required for a new topic or private message
    raw: str
    topic_id: int  # required for a reply
    category: int
    target_recipients: str  # comma separated, private messages only
    archetype: str
    created_at: str
    reply_to_post_number: int
    embed_url: str
    external_id: str


class UpdatePostRequestType(TypedDict, total=False):
    raw: str
    edit_reason: str


class LatestPostsResponseType(TypedDict):
    latest_posts: List[PostType]


class CookedResponseType(TypedDict):
    cooked: str
