"""Services module for the Discourse API Python client."""

from .chat import ChatService
from .notifications import NotificationsService
from .posts import PostsService
from .site import SiteService
from .topics import TopicsService
from .uploads import UploadsService
from .users import UsersService

__all__ = [
    "ChatService",
    "NotificationsService",
    "PostsService",
    "SiteService",
    "TopicsService",
    "UploadsService",
    "UsersService",
]
