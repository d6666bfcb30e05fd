from unittest.mock import AsyncMock, MagicMock

import pytest

from fanart.http import BaseClient


@pytest.fixture
def base_client():
    """Fixture to provide a BaseClient instance with a mocked client."""
    client = BaseClient()
    client._client = AsyncMock()  # Mock the rnet.Client
    return client


def make_response(body: str) -> MagicMock:
    mock_response = MagicMock()
    mock_response.status = 200
    mock_response.ok = True
    mock_response.text = AsyncMock(return_value=body)
    return mock_response


@pytest.mark.asyncio
async def test_get_without_headers(base_client):
    """Test a plain GET passes only the URL to the transport."""
    mock_response = make_response("{}")
    base_client._client.get.return_value = mock_response

    response = await base_client._get("http://example.com")

    assert response is mock_response
    base_client._client.get.assert_awaited_once_with("http://example.com")


@pytest.mark.asyncio
async def test_get_with_headers(base_client):
    """Test headers are forwarded to the transport."""
    base_client._client.get.return_value = make_response("{}")

    await base_client._get("http://example.com", headers={"X-Test": "True"})

    base_client._client.get.assert_awaited_once_with(
        "http://example.com", headers={"X-Test": "True"}
    )


@pytest.mark.asyncio
async def test_get_does_not_interpret_status(base_client):
    """Test error statuses are returned as-is for the caller to map."""
    mock_response = make_response("Not Found")
    mock_response.status = 404
    mock_response.ok = False
    base_client._client.get.return_value = mock_response

    response = await base_client._get("http://example.com/nonexistent")

    assert response.status == 404


@pytest.mark.asyncio
async def test_get_propagates_transport_errors(base_client):
    """Test connection errors are not swallowed."""
    base_client._client.get.side_effect = ConnectionError("Failed to connect")

    with pytest.raises(ConnectionError):
        await base_client._get("http://example.com/bad-connection")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body, expected",
    [
        ('{"key": "value"}', {"key": "value"}),
        ("[1, 2]", [1, 2]),
        ("null", None),
        ("", None),
        ("   \n", None),
        ("<html>oops</html>", None),
        ('{"key": ', None),
    ],
)
async def test_read_json(base_client, body, expected):
    """Test JSON decoding of response bodies."""
    assert await base_client._read_json(make_response(body)) == expected


@pytest.mark.asyncio
async def test_close(base_client):
    """Test that close closes the underlying transport."""
    await base_client.close()

    base_client._client.close.assert_awaited_once()
