import asyncio

import httpx
import pytest

from tutorial_site.chapters import CHAPTERS
from tutorial_site.fetcher import ContentFetcher

BASE_URL = "http://tutorial.test/"


def chapter_markdown(chapter):
    return (
        f"# {chapter.title}\n"
        "\n"
        f"Welcome to chapter {chapter.id}.\n"
        "Second line of the intro.\n"
        "\n"
        "```\n"
        "python\n"
        "def greet():\n"
        f"    print('chapter {chapter.id}')\n"
        "```\n"
    )


@pytest.fixture
def chapter_sources():
    """Markdown source for every registered chapter, keyed by filename."""
    return {ch.filename: chapter_markdown(ch) for ch in CHAPTERS}


@pytest.fixture
def make_fetcher():
    """
    Build a ContentFetcher backed by an in-memory site.

    Files missing from `sources` answer 404. A filename mapped in `gates`
    blocks until its asyncio.Event is set.
    """
    def factory(sources, gates=None):
        gates = gates or {}

        async def handler(request):
            filename = request.url.path.lstrip("/")
            if filename in gates:
                await gates[filename].wait()
            if filename not in sources:
                return httpx.Response(404, text="Not Found")
            return httpx.Response(200, text=sources[filename])

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url=BASE_URL)
        return ContentFetcher(BASE_URL, client=client)

    return factory


@pytest.fixture
def run_async():
    return asyncio.run
