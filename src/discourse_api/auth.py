"""
Authentication options for the Discourse API client.

Discourse accepts two mutually exclusive credential sets: an admin api key
(``Api-Key`` + ``Api-Username``) or a delegated user api key
(``User-Api-Key`` + ``User-Api-Client-Id``).
"""

from typing import Dict, Mapping, Optional

from .errors import AuthConfigError

ADMIN_KEY_FIELDS = ("api_key", "api_username")
USER_KEY_FIELDS = ("user_api_key", "user_api_client_id")


def check_compatibility(options: Mapping[str, Optional[str]]) -> None:
    """Reject option sets mixing admin-key and user-key credentials.

    Raises:
        AuthConfigError: If both credential groups have a value
    """
    has_admin_key = any(options.get(name) for name in ADMIN_KEY_FIELDS)
    has_user_key = any(options.get(name) for name in USER_KEY_FIELDS)
    if has_admin_key and has_user_key:
        raise AuthConfigError()


class AuthConfig:
    """Credential storage owned by one client.

    Every assignment is validated on the spot, so a conflicting field fails
    at the moment it is set rather than on the next request.
    """

    def __init__(self, options: Optional[Mapping[str, Optional[str]]] = None):
        storage = {name: None for name in ADMIN_KEY_FIELDS + USER_KEY_FIELDS}
        if options:
            for name in storage:
                storage[name] = options.get(name)
        check_compatibility(storage)
        self._storage: Dict[str, Optional[str]] = storage

    def _set(self, name: str, value: Optional[str]) -> None:
        candidate = dict(self._storage)
        candidate[name] = value
        check_compatibility(candidate)
        self._storage = candidate

    @property
    def api_username(self) -> Optional[str]:
        return self._storage["api_username"]

    @api_username.setter
    def api_username(self, value: Optional[str]) -> None:
        self._set("api_username", value)

    @property
    def api_key(self) -> Optional[str]:
        return self._storage["api_key"]

    @api_key.setter
    def api_key(self, value: Optional[str]) -> None:
        self._set("api_key", value)

    @property
    def user_api_key(self) -> Optional[str]:
        return self._storage["user_api_key"]

    @user_api_key.setter
    def user_api_key(self, value: Optional[str]) -> None:
        self._set("user_api_key", value)

    @property
    def user_api_client_id(self) -> Optional[str]:
        return self._storage["user_api_client_id"]

    @user_api_client_id.setter
    def user_api_client_id(self, value: Optional[str]) -> None:
        self._set("user_api_client_id", value)

    def to_dict(self) -> Dict[str, Optional[str]]:
        return dict(self._storage)

    def __repr__(self) -> str:
        configured = sorted(name for name, value in self._storage.items() if value)
        return f"AuthConfig(configured={configured})"


def build_headers(config: AuthConfig) -> Dict[str, str]:
    """
    Build the default authentication headers for a request.

    Args:
        config: client credentials

    Returns:
        headers dictionary
    """
    headers: Dict[str, str] = {}
    if config.api_key:
        headers['Api-Key'] = config.api_key
    if config.api_username:
        headers['Api-Username'] = config.api_username
    if config.user_api_key:
        headers['User-Api-Key'] = config.user_api_key
    if config.user_api_client_id:
        headers['User-Api-Client-Id'] = config.user_api_client_id
    return headers
