from typing import Optional, TypedDict, NotRequired


class ChatMessageType(TypedDict):
    id: int
    message: str
    cooked: str
    created_at: str
    edited: NotRequired[bool]
    excerpt: str
    deleted_at: NotRequired[Optional[str]]
    deleted_by_id: NotRequired[Optional[int]]
    thread_id: NotRequired[Optional[int]]
    chat_channel_id: int
