"""
HTTP client for the Discourse API Python client.

Every endpoint call funnels through HTTPClient.request, which suffixes
path endpoints with ``.json``, computes authentication headers from the
client's AuthConfig, and turns error responses into ApiError.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union
from urllib.parse import quote

import requests

from .auth import AuthConfig, build_headers
from .errors import ApiError, parse_body
from .types import RequestOptionsType

logger = logging.getLogger(__name__)

JSON_SUFFIX = ".json"
DEFAULT_TIMEOUT = 10


class QueryParams(dict):
    """Request data that belongs in the query string rather than the body."""


@dataclass
class MultipartForm:
    """Multipart form content.

    Attributes:
        fields: plain form fields
        files: form name -> (filename, content) pairs
    """
    fields: Dict[str, str] = field(default_factory=dict)
    files: Dict[str, Tuple[Optional[str], bytes]] = field(default_factory=dict)


def suffix_endpoint(endpoint: str, skip_path_suffixing: bool = False) -> str:
    """Append ``.json`` to a path endpoint, ahead of its query string.

    Endpoints not starting with ``/`` are absolute URLs and are returned
    unchanged.

    Args:
        endpoint: '/t/5?foo=bar' style path or an absolute URL
        skip_path_suffixing: leave the path as given

    Returns:
        Endpoint to request, e.g. '/t/5.json?foo=bar'
    """
    if not endpoint.startswith("/"):
        return endpoint

    path, sep, query = endpoint.partition("?")
    if not skip_path_suffixing and not path.endswith(JSON_SUFFIX):
        path += JSON_SUFFIX
    return f"{path}{sep}{query}"


def strip_content_type(headers: Dict[str, str]) -> Dict[str, str]:
    """Drop any Content-Type header so the transport sets the multipart boundary."""
    return {name: value for name, value in headers.items() if name.lower() != "content-type"}


class HTTPClient:
    """Request composer shared by every service of one client."""

    def __init__(self, opts: Dict[str, Any], auth: AuthConfig):
        """Initialize HTTP client.

        Args:
            opts: Configuration options including base_url, timeout, session
            auth: Credentials used to compute default headers
        """
        self.base_url = (opts.get('base_url') or '').rstrip('/')
        self.timeout = opts.get('timeout', DEFAULT_TIMEOUT)
        # Anything with requests' request(method, url, ...) signature
        self.session = opts.get('session') or requests
        self.auth = auth

    def _headers(self, options: RequestOptionsType) -> Dict[str, str]:
        """Build headers for one request.

        With ``override_headers`` the caller's headers are used as they are;
        otherwise they are layered on top of the authentication headers.
        """
        if options.get('override_headers'):
            return dict(options.get('headers') or {})
        headers = build_headers(self.auth)
        headers.update(options.get('headers') or {})
        return headers

    def _url(self, endpoint: str, options: RequestOptionsType) -> str:
        endpoint = suffix_endpoint(endpoint, bool(options.get('skip_path_suffixing')))
        if endpoint.startswith("/"):
            return f"{self.base_url}{endpoint}"
        return endpoint

    def request(
        self,
        endpoint: str,
        method: str = 'GET',
        data: Optional[Any] = None,
        options: Optional[RequestOptionsType] = None,
    ) -> Union[Dict[str, Any], list, str, None]:
        """
        Make HTTP request to the Discourse API.

        Args:
            endpoint: Path on the site (e.g. '/posts') or an absolute URL
            method: HTTP method
            data: JSON payload, raw str or bytes body, QueryParams, or MultipartForm
            options: Per-call overrides (headers, override_headers,
                skip_path_suffixing, query_params)

        Returns:
            Parsed JSON response, text, or None for empty responses

        Raises:
            ApiError: When the server answers with an error status
            requests.RequestException: When no response was received
        """
        options = options or {}
        headers = self._headers(options)
        params = options.get('query_params')
        kwargs: Dict[str, Any] = {}

        if isinstance(data, QueryParams):
            params = data
        elif isinstance(data, MultipartForm):
            headers = strip_content_type(headers)
            kwargs['data'] = data.fields
            kwargs['files'] = data.files
        elif isinstance(data, (str, bytes)):
            kwargs['data'] = data
        elif data is not None:
            kwargs['json'] = data

        url = self._url(endpoint, options)
        logger.debug("%s %s", method, url)

        response = self.session.request(
            method,
            url,
            headers=headers,
            params=params,
            timeout=self.timeout,
            **kwargs,
        )

        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            if exc.response is None:
                raise
            error = ApiError.from_http_error(exc)
            logger.warning("%s %s failed: %s", method, url, error.message)
            raise error from exc

        # Handle 204 No Content
        if response.status_code == 204:
            return None
        return parse_body(response)

    @staticmethod
    def encode_url_component(component: Union[str, int]) -> str:
        """Encode URL component (similar to encodeURIComponent in JS).

        Args:
            component: String or id to encode

        Returns:
            URL-encoded string
        """
        return quote(str(component), safe='')

