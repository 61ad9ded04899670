#!/usr/bin/env python3
"""
Page renderer - unified HTML page generation.
The single source of truth for creating tutorial page skeletons.
"""
import re
from html import escape

from bs4 import BeautifulSoup

from . import config


def render_banner(visible: bool) -> str:
    """Dismissible notice shown while the displayed chapter failed to load."""
    display = "block" if visible else "none"
    return f"""<div id="load-banner" class="load-banner" style="display:{display};">
        <p>Some content could not be loaded. Make sure the site is served over HTTP
        (for example <code>python -m http.server {config.DEFAULT_PORT}</code>) and reload the page.</p>
        <button id="banner-close" class="banner-close" aria-label="Dismiss">&times;</button>
    </div>"""


def render_page_html(title: str, body_content: str, sidebar_html: str, banner_html: str = "",
                     extra_styles: str = "") -> str:
    """
    Unified page renderer - THE ONLY function that creates the HTML skeleton.

    Args:
        title: Page title (chapter title)
        body_content: Rendered, highlighted chapter HTML
        sidebar_html: Chapter list HTML
        banner_html: Failed-load banner HTML
        extra_styles: Additional CSS (highlighter style rules)
    """
    page_title = f"{escape(title)} - {escape(config.SITE_TITLE)}" if title else escape(config.SITE_TITLE)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>{page_title}</title>
    <style>{extra_styles}</style>
</head>
<body>
    <aside class="sidebar" id="sidebar">
        {sidebar_html}
    </aside>
    <div class="main-wrapper">
        {banner_html}
        <main class="content" id="tutorial-content">
            <!-- content-start -->
            {body_content}
            <!-- content-end -->
        </main>
    </div>
</body>
</html>"""


def _chapter_text(content: str) -> str:
    """Visible chapter text, without the article footer."""
    soup = BeautifulSoup(content, 'html.parser')
    for footer in soup.select('.article-footer'):
        footer.decompose()
    return soup.get_text(strip=True)


def validate_output_safety(html_content: str, filename: str) -> tuple:
    """
    Validates that output HTML is safe to write (not empty/corrupted).
    Returns: (is_safe: bool, error_message: str)
    """
    if not html_content:
        return False, f"Empty content for {filename}"

    # Check 1: Exactly one content area
    content_count = html_content.count('id="tutorial-content"')
    if content_count != 1:
        return False, f"Invalid tutorial-content count: {content_count} (expected 1)"

    # Check 2: Extract content and verify length using content markers
    match = re.search(r'<!-- content-start -->(.*?)<!-- content-end -->', html_content, re.DOTALL)
    if not match:
        return False, "Content markers missing"
    content = match.group(1)
    text_len = len(_chapter_text(content))
    if text_len < config.MIN_CONTENT_LENGTH:
        return False, f"Content too short: {text_len} chars (minimum {config.MIN_CONTENT_LENGTH})"

    # Check 3: Has at least one heading
    if not re.search(r'<h[1-6][^>]*>', content, re.IGNORECASE):
        return False, "No headings found in content"

    # Check 4: Has exactly one sidebar
    sidebar_count = html_content.count('class="sidebar"')
    if sidebar_count != 1:
        return False, f"Invalid sidebar count: {sidebar_count} (expected 1)"

    # Check 5: Exactly one active chapter entry
    active_count = len(re.findall(r'<li class="[^"]*\bactive\b[^"]*"', html_content))
    if active_count != 1:
        return False, f"Invalid active chapter count: {active_count} (expected 1)"

    return True, ""
