from typing import Any, Dict, Mapping, Optional, TypedDict


class ClientOptionsType(TypedDict, total=False):
    base_url: str
    api_key: str  # admin key, sent as Api-Key
    api_username: str  # sent as Api-Username
    user_api_key: str  # delegated key, sent as User-Api-Key
    user_api_client_id: str  # sent as User-Api-Client-Id
    timeout: float
    session: Any  # anything exposing requests' request(method, url, ...)


class ApiOptionsType(TypedDict, total=False):
    api_key: str
    api_username: str
    user_api_key: str
    user_api_client_id: str


class RequestOptionsType(TypedDict, total=False):
    skip_path_suffixing: bool  # don't append .json to path endpoints
    headers: Dict[str, str]
    override_headers: bool  # replace the default headers instead of merging
    query_params: Optional[Mapping[str, Any]]
