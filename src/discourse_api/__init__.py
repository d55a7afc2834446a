"""
Discourse API Python client

A Python client for the Discourse REST API.
- Admin api key or user api key authentication, mutually exclusive
- User api key handshake (authorization link + RSA decryption)
- Webhook relay routing Discourse events to handlers
- Type hints with TypedDict response shapes
"""

from .auth import AuthConfig
from .client import DiscourseClient
from .errors import (
    ApiError,
    AuthConfigError,
    DecryptionError,
    DiscourseError,
    MissingUserApiKeyError,
    PayloadParseError,
    UserApiKeyError,
)
from .http import HTTPClient, MultipartForm, QueryParams
from .types import (
    ClientOptionsType as ClientOptions,
    RequestOptionsType as RequestOptions,
    GenerateUserApiKeyParamsType as GenerateUserApiKeyParams,
    UserApiKeyLinkType as UserApiKeyLink,
    UserApiKeyPayloadType as UserApiKeyPayload,
    PostType,
    TopicType,
    UploadType,
    UserInfoType,
    NotificationsType,
    ChatMessageType,
)
from .user_api_key import decrypt_user_api_key, generate_user_api_key
from .webhook import WebhookDispatcher, WebhookReceptor, WebhookResponse


def DiscourseApi(base_url: str, options: ClientOptions = None, **kwargs) -> DiscourseClient:
    """Factory function to create a Discourse client.

    Args:
        base_url: URL of the site, without the trailing slash
        options: Client configuration

    Returns:
        DiscourseClient instance
    """
    return DiscourseClient(base_url, options, **kwargs)


__all__ = [
    "DiscourseApi",
    "DiscourseClient",
    "AuthConfig",
    "HTTPClient",
    "MultipartForm",
    "QueryParams",
    "WebhookDispatcher",
    "WebhookReceptor",
    "WebhookResponse",
    "generate_user_api_key",
    "decrypt_user_api_key",
    "DiscourseError",
    "ApiError",
    "AuthConfigError",
    "MissingUserApiKeyError",
    "UserApiKeyError",
    "DecryptionError",
    "PayloadParseError",
    "ClientOptions",
    "RequestOptions",
    "GenerateUserApiKeyParams",
    "UserApiKeyLink",
    "UserApiKeyPayload",
    "PostType",
    "TopicType",
    "UploadType",
    "UserInfoType",
    "NotificationsType",
    "ChatMessageType",
]
