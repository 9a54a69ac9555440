"""
Telraam API client, based on httpx
Sets up the connection with the headers required by every Telraam endpoint
"""
import httpx
import logging
import re
from typing import Dict, Optional

from pydantic import ValidationError

from telraam import VER, __version__
from telraam.config import get_settings
from telraam.endpoints import Endpoint, R
from telraam.errors import ConfigurationError, DecodeError, TransportError

logger = logging.getLogger(__name__)

APP_USER_AGENT = f"telraam/{__version__}"
API_KEY_HEADER = "X-Api-Key"

# visible ASCII, space and tab: what an HTTP header value may hold
_HEADER_VALUE = re.compile(r"[\x20-\x7e\t]+")


class TelraamClient:
    """Synchronous HTTPS client for the Telraam API"""

    def __init__(
        self,
        api_token: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Args:
            api_token: token from https://telraam.net/en/admin/mijn-eigen-telraam/tokens
            base_url: API host, defaults to settings.base_url
            timeout: seconds per request, defaults to settings.timeout
            transport: custom httpx transport (tests use httpx.MockTransport)

        Raises:
            ConfigurationError: the token cannot be sent as a header value
        """
        settings = get_settings()
        if not api_token or not _HEADER_VALUE.fullmatch(api_token):
            raise ConfigurationError("invalid API token: not a valid HTTP header value")

        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.api_version = settings.api_version or VER
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": APP_USER_AGENT,
            API_KEY_HEADER: api_token,
        }
        self._client = httpx.Client(
            headers=headers,
            timeout=timeout if timeout is not None else settings.timeout,
            transport=transport,
        )
        logger.debug(f"Telraam client ready for {self.base_url}/{self.api_version}")

    def __repr__(self) -> str:
        return f"TelraamClient(base_url={self.base_url!r}, api_token='***')"

    def __enter__(self) -> "TelraamClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def url_for(self, endpoint: Endpoint) -> str:
        """Full URL of an endpoint, path params included"""
        url = f"{self.base_url}/{self.api_version}/{endpoint.PATH}"
        # path params, for things like segment or MAC ids
        path_params = endpoint.path_params()
        if path_params is not None:
            url = f"{url}/{path_params}"
        return url

    def send(self, endpoint: Endpoint[R]) -> R:
        """
        Send a request to the given endpoint, the response is endpoint specific

        The status envelope is not checked here; use the accessors of the
        returned response (or Response.take) to get at the payload.

        Raises:
            TransportError: the HTTP round trip failed
            DecodeError: the body is not JSON or does not fit the response model
        """
        url = self.url_for(endpoint)
        params = _query_params(endpoint.params())

        payload = endpoint.payload()
        content = payload.model_dump_json() if payload is not None else None

        logger.debug(f"{endpoint.METHOD} {url}")
        try:
            response = self._client.request(endpoint.METHOD, url, params=params, content=content)
        except httpx.HTTPError as e:
            logger.error(f"Error calling Telraam {endpoint.PATH or '/'}: {e}")
            raise TransportError(f"{endpoint.METHOD} {url} failed: {e}") from e

        if response.is_error:
            # Telraam reports failures in the status envelope, keep decoding
            logger.warning(f"Telraam answered HTTP {response.status_code} for {url}")

        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(f"response from {url} is not JSON: {e}") from e

        try:
            return endpoint.response_model.model_validate(data)
        except ValidationError as e:
            raise DecodeError(f"unexpected response from {url}: {e}") from e


def _query_params(params: Dict[str, Optional[str]]) -> Dict[str, str]:
    # absent values are left out of the query string
    return {key: value for key, value in params.items() if value is not None}
