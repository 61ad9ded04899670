#!/usr/bin/env python3
"""
Static page builder.
Drives the navigation controller against a running site and writes the
resulting pages to disk.
"""
import sys
from pathlib import Path
from typing import Optional

from tqdm import tqdm

from . import config
from .fetcher import ContentFetcher
from .navigation import NavigationController
from .page_renderer import validate_output_safety


def write_page(html_content: str, out_file: Path) -> bool:
    """Validate and write one page. Returns False if the page was rejected."""
    is_safe, error_msg = validate_output_safety(html_content, out_file.name)
    if not is_safe:
        print(f"  [X] SAFETY CHECK FAILED for {out_file.name}: {error_msg}", file=sys.stderr)
        print(f"  [!] Not writing {out_file.name}", file=sys.stderr)
        return False
    out_file.write_text(html_content, encoding='utf-8')
    print(f"  [OK] Validated and saved {out_file.name}")
    return True


def _report_banner(controller: NavigationController) -> None:
    if controller.view.banner_visible:
        chapter = controller.state.find(controller.view.chapter_id)
        print(f"  Warning: {chapter.filename} failed to load, page shows placeholder content",
              file=sys.stderr)


async def build_site(base_url: Optional[str] = None, output_dir: Optional[Path] = None,
                     fragment: Optional[str] = None, build_all: bool = False,
                     fetcher: Optional[ContentFetcher] = None) -> int:
    """
    Render the page for `fragment` (or every chapter with `build_all`).
    Returns the number of pages that failed validation.
    """
    output_dir = Path(output_dir or config.OUTPUT_DIR)
    output_dir.mkdir(parents=True, exist_ok=True)

    if fetcher is not None:
        return await _render_pages(NavigationController(fetcher), output_dir, fragment, build_all)

    async with ContentFetcher(base_url or config.get_base_url()) as own_fetcher:
        return await _render_pages(NavigationController(own_fetcher), output_dir, fragment, build_all)


async def _render_pages(controller: NavigationController, output_dir: Path,
                        fragment: Optional[str], build_all: bool) -> int:
    failures = 0

    if not build_all:
        await controller.start(fragment)
        _report_banner(controller)
        if not write_page(controller.render_page(), output_dir / "index.html"):
            failures += 1
        return failures

    for chapter in tqdm(controller.state.chapters, desc="Rendering chapters", unit="chapter"):
        await controller.select(chapter.id)
        _report_banner(controller)
        out_file = output_dir / f"{Path(chapter.filename).stem}.html"
        if not write_page(controller.render_page(), out_file):
            failures += 1

    return failures
