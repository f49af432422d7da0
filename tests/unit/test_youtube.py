"""Unit tests for the YouTube search client."""

import asyncio
from unittest.mock import AsyncMock, patch

import aiohttp
import pytest

from chefti.exceptions import UpstreamSearchError
from chefti.services.youtube import YouTubeSearch, embed_url, parse_search_items

PAYLOAD = {
    "items": [
        {"id": {"kind": "youtube#video", "videoId": "vid1"}, "snippet": {"title": "Rice bowl", "description": "Easy"}},
        {"id": {"kind": "youtube#channel", "channelId": "chan"}, "snippet": {"title": "A channel"}},
        {"id": {"videoId": "vid2"}, "snippet": {"title": "Bean stew"}},
        {"id": "not-a-dict"},
    ]
}


class TestEmbedUrl:
    def test_embed_url(self):
        assert embed_url("abc123") == "https://www.youtube.com/embed/abc123"


class TestParseSearchItems:
    def test_keeps_order_and_skips_non_videos(self):
        candidates = parse_search_items(PAYLOAD)

        assert [c.id for c in candidates] == ["vid1", "vid2"]
        assert candidates[0].title == "Rice bowl"
        assert candidates[0].description == "Easy"
        assert candidates[1].description == ""

    @pytest.mark.parametrize("payload", [None, {}, {"items": None}, {"items": []}])
    def test_empty_payloads(self, payload):
        assert parse_search_items(payload) == []


class TestYouTubeSearchInit:
    def test_init_with_valid_key(self) -> None:
        client = YouTubeSearch(api_key="test-key")

        assert client.api_key == "test-key"
        assert client.max_results == 15
        assert client.timeout_seconds == 10

    def test_init_with_empty_key_raises(self) -> None:
        with pytest.raises(ValueError, match="YOUTUBE_API_KEY"):
            YouTubeSearch(api_key="")

    def test_request_params(self) -> None:
        client = YouTubeSearch(api_key="test-key", max_results=5)

        assert client._params("rice tutorial") == {
            "part": "snippet",
            "q": "rice tutorial",
            "key": "test-key",
            "type": "video",
            "maxResults": "5",
            "videoEmbeddable": "true",
        }


class TestYouTubeSearch:
    """Tests for search(); the HTTP call itself is patched out."""

    @pytest.mark.asyncio
    @patch.object(YouTubeSearch, "_fetch", new_callable=AsyncMock)
    async def test_search_returns_candidates(self, mock_fetch) -> None:
        mock_fetch.return_value = PAYLOAD

        candidates = await YouTubeSearch(api_key="test").search("rice recipe")

        mock_fetch.assert_awaited_once_with("rice recipe")
        assert [c.id for c in candidates] == ["vid1", "vid2"]

    @pytest.mark.asyncio
    @patch.object(YouTubeSearch, "_fetch", new_callable=AsyncMock)
    async def test_empty_result_is_not_an_error(self, mock_fetch) -> None:
        mock_fetch.return_value = {"items": []}

        assert await YouTubeSearch(api_key="test").search("rice") == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [
        aiohttp.ClientConnectionError("connection refused"),
        asyncio.TimeoutError(),
        ValueError("bad json"),
    ])
    async def test_failures_raise_upstream_search_error(self, error) -> None:
        with patch.object(YouTubeSearch, "_fetch", new_callable=AsyncMock, side_effect=error):
            with pytest.raises(UpstreamSearchError) as exc:
                await YouTubeSearch(api_key="test").search("rice")

        assert str(exc.value) == "video search failed"
        assert exc.value.__cause__ is error
