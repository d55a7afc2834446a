from typing import TypedDict, Union, NotRequired


class GenerateUserApiKeyParamsType(TypedDict, total=False):
    application_name: str  # shown in the user's Apps tab
    auth_redirect: str
    scopes: str  # comma-separated
    client_id: str
    push_url: str  # required only when push/notifications scopes are requested
    public_key: str


class UserApiKeyLinkType(TypedDict):
    """Authorization link plus the material needed to read its answer."""
    url: str
    nonce: str
    public_key: NotRequired[str]
    private_key: NotRequired[str]


class UserApiKeyPayloadType(TypedDict):
    """Decrypted answer of the user api key authorization page."""
    key: str
    nonce: str
    push: bool
    api: Union[str, int]
