from typing import Any, Dict, List, Optional, TypedDict, NotRequired


class BasicUserType(TypedDict):
    id: int
    username: str
    name: NotRequired[Optional[str]]
    avatar_template: str


class UserType(BasicUserType, total=False):
    title: Optional[str]
    trust_level: int
    moderator: bool
    admin: bool
    created_at: str
    last_seen_at: Optional[str]
    last_posted_at: Optional[str]
    badge_count: int
    post_count: int
    profile_view_count: int
    time_read: int
    primary_group_name: Optional[str]
    flair_name: Optional[str]
    custom_fields: Dict[str, Any]
    user_fields: Dict[str, str]


class UserInfoType(TypedDict):
    user_badges: List[Any]
    badges: NotRequired[List[Any]]
    badge_types: NotRequired[List[Any]]
    users: NotRequired[List[BasicUserType]]
    user: UserType
