from typing import Any, List, Optional, TypedDict, NotRequired

from .post import PostType
from .user import BasicUserType


class BasicTopicType(TypedDict):
    id: int
    title: str
    fancy_title: str
    slug: str
    posts_count: int


class SuggestedTopicType(BasicTopicType, total=False):
    reply_count: int
    highest_post_number: int
    image_url: Optional[str]
    created_at: str
    last_posted_at: str
    bumped: bool
    bumped_at: str
    archetype: str
    unseen: bool
    pinned: bool
    excerpt: str
    visible: bool
    closed: bool
    archived: bool
    bookmarked: Optional[bool]
    liked: Optional[bool]
    tags: List[str]
    like_count: int
    views: int
    category_id: int
    posters: List[Any]


class PostStreamType(TypedDict):
    posts: List[PostType]
    stream: NotRequired[List[int]]


class TopicType(BasicTopicType, total=False):
    post_stream: PostStreamType
    timeline_lookup: List[Any]
    suggested_topics: List[SuggestedTopicType]
    tags: List[str]
    created_at: str
    views: int
    reply_count: int
    like_count: int
    last_posted_at: str
    visible: bool
    closed: bool
    archived: bool
    archetype: str
    category_id: int
    user_id: int
    details: Any


class TopicListType(TypedDict):
    more_topics_url: NotRequired[str]
    can_create_topic: bool
    per_page: int
    topics: List[SuggestedTopicType]


class LatestTopicsResponseType(TypedDict):
    topic_list: TopicListType
    users: List[BasicUserType]
    primary_groups: List[Any]
    flair_groups: NotRequired[List[Any]]


class TopicPostsResponseType(TypedDict):
    id: int
    post_stream: PostStreamType


class TopicStatusResponseType(TypedDict):
    success: str
    topic_status_update: NotRequired[Optional[str]]


class InviteToTopicResponseType(TypedDict):
    user: BasicUserType
