from typing import Any, List, Optional, TypedDict, NotRequired


class NotificationType(TypedDict):
    id: int
    user_id: int
    external_id: Optional[str]
    notification_type: int
    read: bool
    high_priority: bool
    created_at: str
    post_number: Optional[int]
    topic_id: Optional[int]
    fancy_title: NotRequired[str]
    slug: Optional[str]
    data: Any


class NotificationsType(TypedDict):
    notifications: List[NotificationType]
    total_rows_notifications: int
    seen_notification_id: int
    load_more_notifications: str


class MarkReadResponseType(TypedDict, total=False):
    success: str
