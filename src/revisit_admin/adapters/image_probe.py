"""Check that an image URL actually points at an image."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

logger = logging.getLogger(__name__)


class ImageProbe(Protocol):
    """Interface for verifying image sources before they are saved."""

    async def is_image(self, url: str) -> bool:
        """Return True when the URL resolves to an image."""


@dataclass
class HttpxImageProbe(ImageProbe):
    """Image probe implemented with httpx."""

    http_client: httpx.AsyncClient
    timeout: float = 10

    @classmethod
    def create(cls) -> "HttpxImageProbe":
        """Create a probe with a managed httpx session."""
        return cls(http_client=httpx.AsyncClient(follow_redirects=True))

    async def is_image(self, url: str) -> bool:
        """Fetch headers for the URL and check for an image content type."""
        if url.startswith("data:image/"):
            return True
        if not url.startswith(("http://", "https://")):
            return False
        try:
            response = await self.http_client.head(url, timeout=self.timeout)
            if response.status_code == httpx.codes.METHOD_NOT_ALLOWED:
                response = await self.http_client.get(url, timeout=self.timeout)
        except httpx.HTTPError:
            logger.warning("Image probe failed for %s", url, exc_info=True)
            return False
        content_type = response.headers.get("content-type", "")
        return response.is_success and content_type.startswith("image/")

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()
