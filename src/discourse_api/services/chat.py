"""Chat service for the Discourse API Python client."""

from typing import TYPE_CHECKING, Any, Dict, Iterable, Mapping, Optional, Union

from ..types import ChatMessageType

if TYPE_CHECKING:
    from ..http import HTTPClient

UploadRef = Union[int, Mapping[str, Any]]


def _upload_ids(uploads: Iterable[UploadRef]):
    return [upload if isinstance(upload, int) else upload["id"] for upload in uploads]


class ChatService:
    """Service for chat channel messages."""

    def __init__(self, http_client: "HTTPClient") -> None:
        """Initialize chat service.

        Args:
            http_client: HTTP client instance
        """
        self.http_client = http_client

    def _message_options(
        self,
        data: Dict[str, Any],
        in_reply_to_id: Optional[int],
        uploads: Optional[Iterable[UploadRef]],
    ) -> Dict[str, Any]:
        if uploads:
            data["upload_ids"] = _upload_ids(uploads)
        if in_reply_to_id:
            data["in_reply_to_id"] = in_reply_to_id
        return data

    def send_message(
        self,
        channel_id: int,
        message: str,
        in_reply_to_id: Optional[int] = None,
        uploads: Optional[Iterable[UploadRef]] = None,
    ) -> ChatMessageType:
        """Send a message to a channel.

        Args:
            channel_id: The id of the channel
            message: Raw text of the message
            in_reply_to_id: Message id to reply to
            uploads: Upload ids, or upload objects returned by create_upload
        """
        data = self._message_options({"message": message}, in_reply_to_id, uploads)
        return self.http_client.request(f"/chat/{channel_id}", "POST", data)

    def edit_message(
        self,
        channel_id: int,
        message_id: int,
        message: str,
        in_reply_to_id: Optional[int] = None,
        uploads: Optional[Iterable[UploadRef]] = None,
    ) -> ChatMessageType:
        """Replace the text of a channel message."""
        data = self._message_options({"new_message": message}, in_reply_to_id, uploads)
        return self.http_client.request(f"/chat/{channel_id}/edit/{message_id}", "PUT", data)

    def delete_message(self, channel_id: int, message_id: int) -> None:
        """Delete a message from a channel."""
        return self.http_client.request(
            f"/chat/api/channels/{channel_id}/messages/{message_id}", "DELETE"
        )
