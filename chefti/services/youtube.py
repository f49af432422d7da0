"""YouTube Data API client used to find a cooking video for the request.

This module provides the YouTubeSearch class, a thin async wrapper around the
v3 `search` endpoint that returns candidates in the provider's relevance
order. Failures are surfaced as UpstreamSearchError; there are no retries.
"""

from typing import Any, Optional

import aiohttp

from chefti.exceptions import UpstreamSearchError
from chefti.models.models import SearchCandidate
from chefti.utils.logger import logger

EMBED_URL_TEMPLATE = "https://www.youtube.com/embed/{video_id}"


def embed_url(video_id: str) -> str:
    """Embeddable player URL for a video id."""
    return EMBED_URL_TEMPLATE.format(video_id=video_id)


def parse_search_items(payload: Optional[dict[str, Any]]) -> list[SearchCandidate]:
    """Map a search response body onto SearchCandidate objects.

    Keeps the order of `items`. Items without `id.videoId` (channels,
    playlists, malformed entries) are skipped.

    Args:
        payload: Decoded JSON body of the search response.

    Returns:
        List of candidates, possibly empty.
    """
    candidates: list[SearchCandidate] = []
    for item in (payload or {}).get("items") or []:
        if not isinstance(item, dict):
            continue
        item_id = item.get("id")
        video_id = item_id.get("videoId") if isinstance(item_id, dict) else None
        if not video_id:
            continue
        snippet = item.get("snippet") or {}
        candidates.append(
            SearchCandidate(
                id=video_id,
                title=snippet.get("title") or "",
                description=snippet.get("description") or "",
            )
        )
    return candidates


class YouTubeSearch:
    """Search YouTube for embeddable cooking videos.

    One HTTP session per call; the client itself holds only configuration,
    so a single instance can serve concurrent requests.
    """

    def __init__(
        self,
        api_key: str,
        search_url: str = "https://www.googleapis.com/youtube/v3/search",
        max_results: int = 15,
        timeout_seconds: int = 10,
    ) -> None:
        """Initialize YouTubeSearch with configuration.

        Args:
            api_key: YouTube Data API key.
            search_url: Search endpoint URL.
            max_results: Number of results requested per query.
            timeout_seconds: Total request timeout.

        Raises:
            ValueError: If api_key is None or empty string.
        """
        if not api_key:
            raise ValueError("YOUTUBE_API_KEY is required")

        self.api_key = api_key
        self.search_url = search_url
        self.max_results = max_results
        self.timeout_seconds = timeout_seconds

    def _params(self, query: str) -> dict[str, str]:
        return {
            "part": "snippet",
            "q": query,
            "key": self.api_key,
            "type": "video",
            "maxResults": str(self.max_results),
            "videoEmbeddable": "true",
        }

    async def _fetch(self, query: str) -> dict[str, Any]:
        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.get(self.search_url, params=self._params(query)) as response:
                response.raise_for_status()
                return await response.json()

    async def search(self, query: str) -> list[SearchCandidate]:
        """Run one search and return candidates in relevance order.

        Args:
            query: Free-text search query.

        Returns:
            List of SearchCandidate (may be empty when nothing matched).

        Raises:
            UpstreamSearchError: On transport errors, non-2xx responses, timeouts
                or an undecodable body.
        """
        logger.info(f"Searching YouTube: {query!r}")
        try:
            payload = await self._fetch(query)
        except Exception as e:
            logger.warning(f"YouTube search failed: {e}", extra={"service": "video_search"})
            raise UpstreamSearchError() from e

        candidates = parse_search_items(payload)
        logger.info(f"YouTube returned {len(candidates)} candidate video(s)")
        return candidates
