"""Providers that resolve named API credentials for the HTTP clients."""

import asyncio
import logging
import os
from typing import Protocol

from fanart.config import (
    FANART_API_KEY_ENV,
    FANART_SECRET_NAME,
    KEY_SERVER_API_KEY,
    KEY_SERVER_SUBSCRIPTION_KEY,
    KEY_SERVER_URL,
)
from fanart.exceptions import ConfigurationError, UnknownSecretError
from fanart.http import BaseClient

logger = logging.getLogger(__name__)


class SecretProvider(Protocol):
    """Anything that can resolve an API credential by name."""

    async def get_secret(self, name: str) -> str | None: ...


class EnvSecretProvider:
    """
    Resolves secrets from environment variables.

    Variables are read on every call so a key exported after start-up is
    picked up by the next lookup.
    """

    def __init__(self, variables: dict[str, str] | None = None) -> None:
        self._variables = variables if variables is not None else {FANART_SECRET_NAME: FANART_API_KEY_ENV}

    async def get_secret(self, name: str) -> str | None:
        variable = self._variables.get(name)
        if variable is None:
            logger.debug("No environment variable mapped for secret '%s'", name)
            return None
        value = os.getenv(variable, "").strip()
        return value or None


class KeyServerSecretProvider(BaseClient):
    """
    Fetches secrets from a key server and caches them for the lifetime of the provider.

    Each name is fetched at most once; failures are cached as None as well.
    If the server rejects our credentials (401/403) every later request
    returns None without contacting it again.
    """

    ROUTES: dict[str, str] = {
        "theaudiodb": "theaudiodb-key",
        "spotify": "spotify-key",
        "lastfm": "lastfm-key",
        "lastfm-secret": "lastfm-secret-key",
        "fanarttv": "fanarttv-key",
    }

    def __init__(
        self,
        server_url: str | None,
        server_key: str | None,
        subscription_key: str | None = None,
    ) -> None:
        if not server_url or not server_key:
            raise ConfigurationError("Key server URL and API key must both be configured.")
        super().__init__()
        if not server_url.startswith(("http://", "https://")):
            server_url = "https://" + server_url
        self._server_url = server_url.rstrip("/")
        self._server_key = server_key
        self._subscription_key = subscription_key
        self._fetches: dict[str, asyncio.Task] = {}
        self.auth_failed = False

    @classmethod
    def from_env(cls) -> "KeyServerSecretProvider":
        """Build a provider from the FANART_KEY_SERVER_* environment variables."""
        return cls(KEY_SERVER_URL, KEY_SERVER_API_KEY, KEY_SERVER_SUBSCRIPTION_KEY)

    async def get_secret(self, name: str) -> str | None:
        """
        Returns the secret for name, fetching it on first use.

        Cancelling the caller does not cancel the shared fetch, other callers
        waiting on the same name still get its result.

        Raises:
            UnknownSecretError: If the key server has no route for name.
        """
        if self.auth_failed:
            return None

        route = self.ROUTES.get(name)
        if route is None:
            raise UnknownSecretError(f"Unknown secret: {name}")

        fetch = self._fetches.get(name)
        if fetch is None:
            fetch = asyncio.ensure_future(self._fetch_secret(name, route))
            self._fetches[name] = fetch
        return await asyncio.shield(fetch)

    async def refresh_secret(self, name: str) -> str | None:
        """Drops the cached value for name and fetches it again."""
        logger.debug("Forcing refresh for API key '%s'.", name)
        self._fetches.pop(name, None)
        return await self.get_secret(name)

    def _headers(self) -> dict[str, str]:
        headers = {"X-API-KEY": self._server_key}
        if self._subscription_key:
            headers["Ocp-Apim-Subscription-Key"] = self._subscription_key
        return headers

    async def _fetch_secret(self, name: str, route: str) -> str | None:
        url = f"{self._server_url}/api/{route}"
        logger.debug("Fetching API key '%s' from server: %s", name, url)
        try:
            response = await self._get(url, headers=self._headers())

            if response.status in (401, 403):
                self.auth_failed = True
                logger.critical(
                    "Authentication failed for the key server (Status: %s). "
                    "All future API key requests for this session will be disabled.",
                    response.status,
                )
                return None

            if not response.ok:
                logger.error("Error fetching API key '%s' (Status: %s)", name, response.status)
                return None

            payload = await self._read_json(response)
            value = None
            if isinstance(payload, dict):
                # Field name is matched case-insensitively ("value" or "Value")
                value = next((v for k, v in payload.items() if k.lower() == "value"), None)

            if isinstance(value, str):
                value = value.strip().strip('"')
            if not isinstance(value, str) or not value:
                logger.error("API key response for '%s' is missing the 'value' field or is empty.", name)
                return None

            logger.debug("Successfully fetched API key '%s'.", name)
            return value
        except Exception as e:
            logger.error("An exception occurred while fetching API key '%s': %s", name, e)
            return None
