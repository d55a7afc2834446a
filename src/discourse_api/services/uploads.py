"""Uploads service for the Discourse API Python client."""

import os
from typing import TYPE_CHECKING, Optional, Union

from ..http import MultipartForm
from ..types import UploadType

if TYPE_CHECKING:
    from ..http import HTTPClient

UPLOAD_TYPES = ("avatar", "profile_background", "card_background", "custom_emoji", "composer")


class UploadsService:
    """Service for upload endpoints."""

    def __init__(self, http_client: "HTTPClient") -> None:
        self.http_client = http_client

    def create_upload(
        self,
        file: Union[str, "os.PathLike[str]", bytes],
        type: str = "composer",
        user_id: Optional[int] = None,
        synchronous: bool = True,
        filename: Optional[str] = None,
    ) -> UploadType:
        """Create an upload.

        Args:
            file: Path of the file, or its content
            type: One of avatar, profile_background, card_background,
                custom_emoji, composer
            user_id: Required when uploading an avatar
            synchronous: Ask the server to return the id and url right away
            filename: Name given to the server; defaults to the file's
                basename for paths

        Returns:
            The created upload
        """
        if type not in UPLOAD_TYPES:
            raise ValueError(f"type must be one of {', '.join(UPLOAD_TYPES)}")

        if isinstance(file, bytes):
            content = file
        else:
            with open(file, "rb") as fh:
                content = fh.read()
            filename = filename or os.path.basename(os.fspath(file))

        form = MultipartForm(
            fields={"type": type, "synchronous": str(synchronous).lower()},
            files={"file": (filename, content)},
        )
        if user_id is not None:
            form.fields["user_id"] = str(user_id)
        return self.http_client.request("/uploads", "POST", form)
