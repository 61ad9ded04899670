#!/usr/bin/env python3
"""
Navigation state and controller.

The controller drives one chapter load per navigation event:

    fetch -> normalize fences -> render Markdown -> highlight -> commit view

Every load is tagged with a sequence number from `NavigationState`. When a
newer load was issued while a fetch was in flight, the older result is
discarded, so the last request always wins.
"""
from dataclasses import dataclass
from typing import Optional, Sequence

from .chapters import CHAPTERS, Chapter, find_by_filename, find_chapter, parse_fragment
from .fences import normalize_fences
from .fetcher import ContentFetcher, is_failed_content
from .highlighter import highlight_css, highlight_html
from .page_renderer import render_banner, render_page_html
from .renderer import render_markdown, wrap_article
from .sidebar import build_sidebar, sync_active_marker


@dataclass
class PageView:
    """What the page currently shows."""
    chapter_id: Optional[int] = None
    title: str = ""
    markdown: str = ""
    content_html: str = ""
    sidebar_html: str = ""
    fragment: str = ""
    banner_visible: bool = False


class NavigationState:
    """Chapter registry plus the active chapter and request sequence for one page session."""

    def __init__(self, chapters: Sequence[Chapter] = CHAPTERS):
        self._chapters = tuple(chapters)
        if not self._chapters:
            raise ValueError("NavigationState needs at least one chapter")
        self._active_id: Optional[int] = None
        self._requested_id: Optional[int] = None
        self._sequence = 0

    @property
    def chapters(self) -> tuple:
        return self._chapters

    @property
    def first(self) -> Chapter:
        return self._chapters[0]

    @property
    def active_id(self) -> Optional[int]:
        return self._active_id

    @property
    def requested_id(self) -> Optional[int]:
        return self._requested_id

    def find(self, chapter_id: Optional[int]) -> Optional[Chapter]:
        return find_chapter(self._chapters, chapter_id)

    def find_by_filename(self, filename: str) -> Optional[Chapter]:
        return find_by_filename(self._chapters, filename)

    def resolve_fragment(self, fragment: Optional[str]) -> Optional[Chapter]:
        """Chapter addressed by `fragment`, or None if it is absent or unknown."""
        return self.find(parse_fragment(fragment))

    def resolve_initial(self, fragment: Optional[str]) -> Chapter:
        """Chapter to show on page load: the addressed one, else the first."""
        return self.resolve_fragment(fragment) or self.first

    def next_sequence(self, chapter_id: int) -> int:
        self._sequence += 1
        self._requested_id = chapter_id
        return self._sequence

    def is_latest(self, sequence: int) -> bool:
        return sequence == self._sequence

    def activate(self, chapter: Chapter) -> None:
        self._active_id = chapter.id


class NavigationController:
    """Loads chapters into a `PageView` in response to navigation events."""

    def __init__(self, fetcher: ContentFetcher, state: Optional[NavigationState] = None):
        self.fetcher = fetcher
        self.state = state or NavigationState()
        self.view = PageView(sidebar_html=build_sidebar(self.state.chapters))

    async def start(self, fragment: Optional[str] = None) -> bool:
        """Page load: show the chapter named by `fragment`, or the first one."""
        self.view.sidebar_html = build_sidebar(self.state.chapters)
        requested = parse_fragment(fragment)
        chapter = self.state.resolve_initial(fragment)
        if requested is not None and chapter.id != requested:
            print(f"  [Nav] Unknown chapter in fragment '{fragment}', showing '{chapter.title}'")
        return await self.load(chapter)

    async def select(self, chapter_id: int) -> bool:
        """User picked a chapter from the list."""
        chapter = self.state.find(chapter_id)
        if chapter is None:
            print(f"  [Nav] Unknown chapter id {chapter_id}, ignoring")
            return False
        return await self.load(chapter)

    async def on_fragment_change(self, fragment: Optional[str]) -> bool:
        """Back/forward navigation. Unknown fragments are ignored."""
        chapter = self.state.resolve_fragment(fragment)
        if chapter is None:
            return False
        if chapter.id == self.state.requested_id:
            return False
        return await self.load(chapter)

    async def load(self, chapter: Chapter) -> bool:
        """
        Fetch, render and display `chapter`.
        Returns False when a newer request superseded this one.
        """
        sequence = self.state.next_sequence(chapter.id)
        content = await self.fetcher.fetch(chapter.filename)

        if not self.state.is_latest(sequence):
            print(f"  [Nav] Discarding stale response for {chapter.filename}")
            return False

        content = normalize_fences(content)
        content_html = highlight_html(wrap_article(render_markdown(content)))

        self.view.chapter_id = chapter.id
        self.view.title = chapter.title
        self.view.markdown = content
        self.view.content_html = content_html
        self.view.sidebar_html = sync_active_marker(self.view.sidebar_html, chapter.filename)
        self.view.fragment = str(chapter.id)
        self.view.banner_visible = is_failed_content(content)
        self.state.activate(chapter)
        return True

    def dismiss_banner(self) -> None:
        """Hide the failed-load banner until the next failing load."""
        self.view.banner_visible = False

    def render_page(self) -> str:
        """Complete HTML document for the current view."""
        return render_page_html(
            self.view.title,
            self.view.content_html,
            self.view.sidebar_html,
            banner_html=render_banner(self.view.banner_visible),
            extra_styles=highlight_css(),
        )
