"""
Discourse API Python client.

Authenticates either with an admin api key (api_key + api_username) or a
delegated user api key (user_api_key + user_api_client_id), never both.
All methods are synchronous.
"""

from typing import Any, Optional

from .auth import AuthConfig
from .errors import MissingUserApiKeyError
from .http import HTTPClient
from .services import (
    ChatService,
    NotificationsService,
    PostsService,
    SiteService,
    TopicsService,
    UploadsService,
    UsersService,
)
from .types import (
    ApiOptionsType,
    ClientOptionsType,
    GenerateUserApiKeyParamsType,
    RequestOptionsType,
    UserApiKeyLinkType,
    UserApiKeyPayloadType,
)
from .user_api_key import (
    decrypt_user_api_key,
    generate_user_api_key,
    generate_user_api_key_async,
)
from .webhook import WebhookReceptor


class DiscourseClient:
    """Discourse API client.

    Endpoint methods are grouped in services (``posts``, ``topics``,
    ``uploads``, ``notifications``, ``users``, ``site``, ``chat``); the most
    used ones are also exposed on the client itself.
    """

    def __init__(self, base_url: str, options: Optional[ClientOptionsType] = None, **kwargs: Any):
        """Initialize Discourse client.

        Args:
            base_url: URL of the site, e.g. https://meta.discourse.org
            options: Credentials plus timeout and session
            **kwargs: Same keys as options, taking precedence over them
        """
        opts = dict(options or {})
        opts.update(kwargs)
        opts['base_url'] = base_url

        self._options = AuthConfig(opts)
        self.http = HTTPClient(opts, self._options)
        self.base_url = self.http.base_url

        self.site = SiteService(self.http)
        self.posts = PostsService(self.http)
        self.topics = TopicsService(self.http)
        self.uploads = UploadsService(self.http)
        self.notifications = NotificationsService(self.http)
        self.users = UsersService(self.http)
        self._chat = ChatService(self.http)
        self._webhook = WebhookReceptor(api=self)

    @property
    def options(self) -> AuthConfig:
        """Credentials. Assigning a mapping replaces all four fields."""
        return self._options

    @options.setter
    def options(self, new_options: ApiOptionsType) -> None:
        self._options = AuthConfig(new_options)
        self.http.auth = self._options

    @property
    def chat(self) -> ChatService:
        return self._chat

    @property
    def webhook(self) -> WebhookReceptor:
        return self._webhook

    def request(
        self,
        endpoint: str,
        method: str = 'GET',
        data: Optional[Any] = None,
        options: Optional[RequestOptionsType] = None,
    ) -> Any:
        """Send a request. See HTTPClient.request."""
        return self.http.request(endpoint, method, data, options)

    # User api keys
    def generate_user_api_key(self, params: Optional[GenerateUserApiKeyParamsType] = None) -> UserApiKeyLinkType:
        """Build the authorization link for a new user api key.

        Slow when no ``public_key`` is given, since a keypair is generated.
        Keep the returned nonce and private_key: they are needed to read and
        check the key the user brings back.

        See https://meta.discourse.org/t/user-api-keys-specification/48536
        """
        return generate_user_api_key(self.base_url, params)

    async def generate_user_api_key_async(
        self, params: Optional[GenerateUserApiKeyParamsType] = None
    ) -> UserApiKeyLinkType:
        """Async version of generate_user_api_key."""
        return await generate_user_api_key_async(self.base_url, params)

    def decrypt_user_api_key(self, private_key: str, encrypted: str) -> UserApiKeyPayloadType:
        """Decrypt the user api key returned by the authorization page.

        The caller must check that the returned nonce matches the one from
        generate_user_api_key.
        """
        return decrypt_user_api_key(private_key, encrypted)

    def revoke_user_api_key(self, user_api_key: Optional[str] = None) -> Any:
        """Revoke a user api key.

        Args:
            user_api_key: Key to revoke; defaults to options.user_api_key
        """
        user_api_key = user_api_key or self.options.user_api_key
        if not user_api_key:
            raise MissingUserApiKeyError()
        return self.http.request(
            "/user-api-key/revoke",
            "POST",
            None,
            {"headers": {"User-Api-Key": user_api_key}, "override_headers": True},
        )

    # Shortcuts
    def get_site(self):
        return self.site.get_site()

    def get_post(self, post_id):
        return self.posts.get_post(post_id)

    def create_topic_post_pm(self, payload):
        return self.posts.create_topic_post_pm(payload)

    def get_topic(self, topic_id, around_post_number=None):
        return self.topics.get_topic(topic_id, around_post_number)

    def list_latest(self, **kwargs):
        return self.topics.list_latest(**kwargs)

    def create_upload(self, file, **kwargs):
        return self.uploads.create_upload(file, **kwargs)

    def get_notifications(self, load_more_url=None):
        return self.notifications.get_notifications(load_more_url)

    def get_user(self, username):
        return self.users.get_user(username)
