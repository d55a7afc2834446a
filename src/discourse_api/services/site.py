"""Site service for the Discourse API Python client."""

from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from ..http import HTTPClient


class SiteService:
    """Service for site-wide endpoints."""

    def __init__(self, http_client: "HTTPClient") -> None:
        self.http_client = http_client

    def get_site(self) -> Dict[str, Any]:
        """Get the info of the site.

        Returns:
            Parsed JSON from GET /site
        """
        return self.http_client.request("/site")
