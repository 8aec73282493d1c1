"""Tests for the CDN media tier."""

import asyncio
from unittest.mock import AsyncMock, Mock, patch

import httpx
import pytest

from exercisedb.integrations.cdn.client import BROWSER_USER_AGENT, CdnClient
from tests._factories import make_gif_bytes


def _mock_response(status_code: int, content: bytes = b"") -> Mock:
    response = Mock()
    response.status_code = status_code
    response.content = content
    response.headers = {"Content-Type": "application/octet-stream"}
    return response


def test_media_url():
    client = CdnClient(base_url="https://cdn.example.com/")
    assert client.media_url("0001.gif") == "https://cdn.example.com/media/0001.gif"


@pytest.mark.asyncio
async def test_fetch_success_returns_bytes():
    gif = make_gif_bytes("cdn")
    client = CdnClient(base_url="https://cdn.example.com", timeout_seconds=15)

    with patch("httpx.AsyncClient") as mock_client:
        mock_client_instance = AsyncMock()
        mock_client.return_value.__aenter__.return_value = mock_client_instance
        mock_client_instance.get.return_value = _mock_response(200, gif)

        outcome = await client.fetch("0001.gif")

    assert outcome.status == "hit"
    assert outcome.content == gif

    # Verify the request was made correctly
    mock_client.assert_called_once_with(timeout=15)
    mock_client_instance.get.assert_called_once()
    call_args = mock_client_instance.get.call_args
    assert call_args[0][0] == "https://cdn.example.com/media/0001.gif"
    assert call_args[1]["headers"] == {"User-Agent": BROWSER_USER_AGENT}


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [403, 404, 500, 503])
async def test_fetch_non_200_is_a_miss(status_code, caplog):
    client = CdnClient()

    with patch("httpx.AsyncClient") as mock_client:
        mock_client_instance = AsyncMock()
        mock_client.return_value.__aenter__.return_value = mock_client_instance
        mock_client_instance.get.return_value = _mock_response(status_code)

        outcome = await client.fetch("missing.gif")

    assert outcome.status == "miss"
    assert str(status_code) in caplog.text


@pytest.mark.asyncio
async def test_fetch_transport_error_is_logged_error(caplog):
    client = CdnClient()

    with patch("httpx.AsyncClient") as mock_client:
        mock_client_instance = AsyncMock()
        mock_client.return_value.__aenter__.return_value = mock_client_instance
        mock_client_instance.get.side_effect = httpx.ConnectError("Network error")

        outcome = await client.fetch("0001.gif")

    assert outcome.status == "error"
    assert "ConnectError" in caplog.text


@pytest.mark.asyncio
async def test_fetch_httpx_timeout_is_logged_error():
    client = CdnClient()

    with patch("httpx.AsyncClient") as mock_client:
        mock_client_instance = AsyncMock()
        mock_client.return_value.__aenter__.return_value = mock_client_instance
        mock_client_instance.get.side_effect = httpx.ReadTimeout("read timed out")

        outcome = await client.fetch("0001.gif")

    assert outcome.status == "error"


@pytest.mark.asyncio
async def test_fetch_exceeding_deadline_is_abandoned(caplog):
    client = CdnClient(timeout_seconds=0.05)

    async def slow_get(*args, **kwargs):
        await asyncio.sleep(5)
        return _mock_response(200, make_gif_bytes())

    with patch("httpx.AsyncClient") as mock_client:
        mock_client_instance = AsyncMock()
        mock_client.return_value.__aenter__.return_value = mock_client_instance
        mock_client_instance.get.side_effect = slow_get

        outcome = await client.fetch("0001.gif")

    assert outcome.status == "error"
    assert outcome.detail == "timeout"
    assert "Timed out" in caplog.text


@pytest.mark.asyncio
async def test_unit_tests_cannot_reach_the_network():
    """Outbound requests fail fast unless a test is marked integration."""
    client = CdnClient()
    with pytest.raises(Exception, match="outbound HTTP"):
        async with httpx.AsyncClient() as http_client:
            await http_client.get(client.media_url("0001.gif"))
