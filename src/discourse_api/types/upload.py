from typing import Optional, TypedDict, NotRequired


class UploadType(TypedDict):
    id: int
    url: str
    original_filename: str
    filesize: int
    width: NotRequired[int]
    height: NotRequired[int]
    thumbnail_width: NotRequired[int]
    thumbnail_height: NotRequired[int]
    extension: str
    short_url: str
    short_path: str
    retain_hours: Optional[int]
    human_filesize: str
    dominant_color: NotRequired[Optional[str]]
