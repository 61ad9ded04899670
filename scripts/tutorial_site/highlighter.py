#!/usr/bin/env python3
"""
Syntax highlighter.
Applies Pygments highlighting to every <pre><code> block of rendered HTML.
"""
import sys

from bs4 import BeautifulSoup
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name, guess_lexer
from pygments.util import ClassNotFound

from . import config

LANG_PREFIXES = ("language-", "lang-")

_FORMATTER = HtmlFormatter(nowrap=True)


def code_language(code_el) -> str:
    """Language hint from a `language-*` class, or "" if none."""
    for cls in code_el.get('class') or []:
        for prefix in LANG_PREFIXES:
            if cls.startswith(prefix):
                return cls[len(prefix):]
    return ""


def _lexer_for(source: str, language: str):
    if language:
        return get_lexer_by_name(language)
    return guess_lexer(source)


def highlight_html(html_content: str) -> str:
    """
    Highlight code blocks in place and return the updated HTML.

    Blocks that cannot be highlighted (unknown language, lexer failure)
    are left as plain text; the rest of the page is still processed.
    """
    soup = BeautifulSoup(html_content, 'html.parser')
    css_class = config.HIGHLIGHT_CSS_CLASS

    for code in soup.select('pre > code'):
        classes = code.get('class') or []
        if css_class in classes:
            continue
        source = code.get_text()
        if not source.strip():
            continue

        language = code_language(code)
        try:
            lexer = _lexer_for(source, language)
            spans = highlight(source, lexer, _FORMATTER)
        except ClassNotFound:
            print(f"  [Highlight] No lexer for language '{language or '?'}', leaving block plain",
                  file=sys.stderr)
            continue
        except Exception as e:
            print(f"  [Highlight] Failed to highlight {language or 'untagged'} block: "
                  f"{type(e).__name__}: {e}", file=sys.stderr)
            continue

        # parsed inside <pre> so whitespace-only indentation nodes are kept
        fragment = BeautifulSoup(f"<pre>{spans}</pre>", 'html.parser').pre
        code.clear()
        for node in list(fragment.contents):
            code.append(node)
        code['class'] = classes + [css_class]

    return str(soup)


def highlight_css() -> str:
    """Style rules for highlighted blocks, scoped to the highlight class."""
    formatter = HtmlFormatter(style=config.HIGHLIGHT_STYLE)
    return formatter.get_style_defs(f".{config.HIGHLIGHT_CSS_CLASS}")
