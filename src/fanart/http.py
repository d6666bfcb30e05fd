"""Base HTTP client shared by the fanart.tv lookup and the key server provider."""

import json
import logging
from typing import Any

from rnet import Client, Response

from fanart.config import REQUEST_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


class BaseClient:
    """Base class for all HTTP clients.

    Owns a single long-lived transport handle that is shared by every call
    made through the instance and released by ``close``.
    """

    def __init__(self) -> None:
        """Initialize the BaseClient with a configured HTTP client."""
        self._client: Client = Client(timeout=REQUEST_TIMEOUT_SECONDS)

    async def _get(self, url: str, headers: dict[str, str] | None = None) -> Response:
        """Issue a GET request and return the raw response.

        Status codes are left to the caller; transport failures propagate.

        Args:
            url (str): The full URL to fetch.
            headers (dict[str, str] | None): Extra HTTP headers to send.

        Returns:
            Response: The response, whatever its status.
        """
        get_kwargs = {}
        if headers:
            get_kwargs["headers"] = headers
        return await self._client.get(url, **get_kwargs)

    async def _read_json(self, response: Response) -> Any | None:
        """Read a response body and decode it as JSON.

        Returns:
            The decoded value, or None if the body is empty or not valid JSON.
        """
        body = await response.text()
        if not body or not body.strip():
            return None
        try:
            return json.loads(body)
        except ValueError:
            logger.debug("Response body is not valid JSON (%d bytes)", len(body))
            return None

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        if hasattr(self._client, "close") and callable(self._client.close):
            await self._client.close()
