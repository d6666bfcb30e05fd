from unittest.mock import AsyncMock

import pytest

from fanart.client import FanartClient
from fanart.models import ArtistImages, LookupResult
from fanart.secrets import EnvSecretProvider, KeyServerSecretProvider


@pytest.fixture
def fanart_client():
    """Fixture to provide a FanartClient instance with a mocked ArtworkLookupClient."""
    client = FanartClient(secret_provider=AsyncMock())
    client._artwork_client = AsyncMock()  # Mock the artwork client
    return client


@pytest.mark.asyncio
async def test_get_artist_images_success(fanart_client):
    """Test successful retrieval of artist images by MBID."""
    # Arrange
    mbid = "b10bbbfc-cf9e-42e0-be17-e2c3e1d2600d"
    expected = LookupResult.success(ArtistImages(logo_url="https://fanart.tv/logo.png"))
    fanart_client._artwork_client.get_artist_images.return_value = expected

    # Act
    result = await fanart_client.get_artist_images(mbid)

    # Assert
    fanart_client._artwork_client.get_artist_images.assert_called_once_with(mbid)
    assert result == expected


@pytest.mark.asyncio
async def test_get_artist_images_not_found(fanart_client):
    """Test a not found result is passed through unchanged."""
    # Arrange
    fanart_client._artwork_client.get_artist_images.return_value = LookupResult.not_found()

    # Act
    result = await fanart_client.get_artist_images("999-not-found")

    # Assert
    assert result == LookupResult.not_found()


def test_defaults_to_env_secret_provider():
    client = FanartClient()

    assert isinstance(client._secret_provider, EnvSecretProvider)
    assert client._artwork_client._secret_provider is client._secret_provider
    assert client.api_disabled is False


@pytest.mark.asyncio
async def test_close(fanart_client):
    """Test that the close method closes the artwork client."""
    # Act
    await fanart_client.close()

    # Assert
    fanart_client._artwork_client.close.assert_called_once()


@pytest.mark.asyncio
async def test_close_also_closes_key_server():
    """Test a key server provider is closed together with the client."""
    provider = KeyServerSecretProvider("keys.example.com", "server-key")
    provider._client = AsyncMock()
    client = FanartClient(secret_provider=provider)
    client._artwork_client = AsyncMock()

    async with client:
        pass

    client._artwork_client.close.assert_called_once()
    provider._client.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_get_artist_images_blank_id():
    """Test a missing MBID goes straight through to a not found result."""
    client = FanartClient(secret_provider=AsyncMock())

    result = await client.get_artist_images(None)

    assert result == LookupResult.not_found()
    client._secret_provider.get_secret.assert_not_called()
