#!/usr/bin/env python3
"""
Markdown renderer.
Converts normalized chapter Markdown into an HTML fragment.
"""
from markdown_it import MarkdownIt

from . import config

_md = MarkdownIt(config.MARKDOWN_PRESET, config.MARKDOWN_OPTIONS)


def render_markdown(text: str) -> str:
    """Convert Markdown to HTML (GFM: fenced code, tables, strikethrough, hard line breaks)."""
    return _md.render(text or "")


def wrap_article(html_content: str) -> str:
    """Wrap rendered chapter HTML in the article container with its footer."""
    return f"""
            <div class="markdown-body">
                {html_content}
                <div class="article-footer">
                    <p>{config.LAST_UPDATED}</p>
                </div>
            </div>
        """
