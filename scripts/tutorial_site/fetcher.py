#!/usr/bin/env python3
"""
Content fetcher.
Retrieves chapter Markdown over HTTP; failures become placeholder content.
"""
import sys
from typing import Optional

import httpx

from . import config


def is_failed_content(text: str) -> bool:
    """True when `text` is the failed-load placeholder."""
    return bool(text) and text.startswith(config.FAILED_CONTENT_MARKER)


class ContentFetcher:
    """
    Async fetcher bound to the site's base URL.

    Use as an async context manager, or pass an existing `httpx.AsyncClient`
    (which the caller then owns and closes).
    """

    def __init__(self, base_url: Optional[str] = None, client: Optional[httpx.AsyncClient] = None,
                 timeout: float = config.REQUEST_TIMEOUT,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url or config.get_base_url()
        self._owns_client = client is None
        # 3xx responses are followed to the final document
        self._client = client or httpx.AsyncClient(base_url=self.base_url, timeout=timeout,
                                                   follow_redirects=True, transport=transport)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def fetch(self, filename: str) -> str:
        """
        Return the text of `filename`, or the failed-load placeholder.

        Any transport error or non-2xx status ends this attempt; there are no retries.
        """
        try:
            response = await self._client.get(filename)
            response.raise_for_status()
            return response.text
        except httpx.HTTPStatusError as e:
            print(f"  [Fetch] Error loading {filename}: {e.response.status_code} "
                  f"{e.response.reason_phrase}", file=sys.stderr)
        except httpx.HTTPError as e:
            print(f"  [Fetch] Error loading {filename}: {type(e).__name__}: {e}", file=sys.stderr)
        return config.FAILED_CONTENT_PLACEHOLDER
