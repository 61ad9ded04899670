#!/usr/bin/env python3
"""
Tutorial Site Package
=====================

Loads the Python tutorial chapters from a static site, repairs malformed
code fences, renders Markdown to HTML, highlights code and keeps the
chapter navigation in sync.

Modules:
    - config: Configuration constants and the base URL
    - chapters: Chapter registry and fragment parsing
    - fetcher: HTTP content fetcher with placeholder fallback
    - fences: Code fence normalizer
    - renderer: Markdown to HTML conversion
    - highlighter: Syntax highlighting of rendered code blocks
    - sidebar: Chapter list and active marker
    - page_renderer: Unified HTML page generation
    - navigation: Navigation state and controller
    - site_builder: Writes rendered pages to disk

Usage:
    from tutorial_site import run
    run()  # Renders the first chapter from http://localhost:8000/

    # Or every chapter from another server:
    run(base_url="http://localhost:9000/", build_all=True)
"""

__version__ = "1.0.0"

import asyncio
from pathlib import Path
from typing import Optional


def run(base_url: str = "", fragment: Optional[str] = None, build_all: bool = False,
        output_dir: Optional[str] = None) -> int:
    """
    Run the page builder.

    Args:
        base_url: URL the chapter Markdown files are served from.
                  Leave empty for the local default (port 8000).
        fragment: Initial chapter fragment, e.g. "#5".
        build_all: Render every chapter instead of a single page.
        output_dir: Directory for the generated HTML.

    Returns:
        Number of pages that failed validation.
    """
    from . import config
    from .site_builder import build_site

    if base_url:
        config.set_base_url(base_url)
        print(f"--> Using Base URL: {config.get_base_url()}")

    print(">>> Rendering tutorial pages...")
    failures = asyncio.run(build_site(
        output_dir=Path(output_dir) if output_dir else None,
        fragment=fragment,
        build_all=build_all,
    ))
    print(">>> Done." if not failures else f">>> Done with {failures} failed page(s).")
    return failures


def run_with_args(argv=None) -> int:
    """
    Run the page builder with command-line arguments.
    This is the CLI entry point.
    """
    import argparse

    from . import config

    parser = argparse.ArgumentParser(
        description="Render the Python tutorial chapters into static HTML pages.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    tutorial-site                                # First chapter from localhost:8000
    tutorial-site --fragment '#5'                # Chapter 5
    tutorial-site --all --output-dir public      # Every chapter
        """
    )
    parser.add_argument(
        "--base-url",
        default="",
        help=f"URL the chapters are served from (default: {config.get_base_url()})"
    )
    parser.add_argument(
        "--fragment",
        default=None,
        help="Chapter to render, as an address fragment (e.g. '#5')"
    )
    parser.add_argument(
        "--all",
        dest="build_all",
        action="store_true",
        help="Render every chapter"
    )
    parser.add_argument(
        "--output-dir",
        default=str(config.OUTPUT_DIR),
        help="Directory for generated HTML"
    )

    args = parser.parse_args(argv)
    failures = run(base_url=args.base_url, fragment=args.fragment,
                   build_all=args.build_all, output_dir=args.output_dir)
    return 1 if failures else 0


# Export key functions and classes for direct imports
from .config import (
    FAILED_CONTENT_MARKER,
    set_base_url,
    get_base_url,
)

from .chapters import (
    CHAPTERS,
    Chapter,
    find_chapter,
    find_by_filename,
    parse_fragment,
)

from .fetcher import (
    ContentFetcher,
    is_failed_content,
)

from .fences import (
    normalize_fences,
)

from .renderer import (
    render_markdown,
    wrap_article,
)

from .highlighter import (
    highlight_html,
    highlight_css,
)

from .sidebar import (
    build_sidebar,
    sync_active_marker,
    active_filenames,
)

from .page_renderer import (
    render_page_html,
    validate_output_safety,
)

from .navigation import (
    NavigationController,
    NavigationState,
    PageView,
)


__all__ = [
    # Main entry points
    'run',
    'run_with_args',
    # Config
    'FAILED_CONTENT_MARKER',
    'set_base_url',
    'get_base_url',
    # Chapters
    'CHAPTERS',
    'Chapter',
    'find_chapter',
    'find_by_filename',
    'parse_fragment',
    # Fetcher
    'ContentFetcher',
    'is_failed_content',
    # Fences
    'normalize_fences',
    # Renderer
    'render_markdown',
    'wrap_article',
    # Highlighter
    'highlight_html',
    'highlight_css',
    # Sidebar
    'build_sidebar',
    'sync_active_marker',
    'active_filenames',
    # Page renderer
    'render_page_html',
    'validate_output_safety',
    # Navigation
    'NavigationController',
    'NavigationState',
    'PageView',
]
