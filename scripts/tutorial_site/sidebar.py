#!/usr/bin/env python3
"""
Sidebar builder for tutorial navigation.
Creates the chapter list and keeps its active marker in sync.
"""
from html import escape
from typing import List, Optional, Sequence

from bs4 import BeautifulSoup

from .chapters import Chapter


def build_sidebar(chapters: Sequence[Chapter], active_filename: Optional[str] = None) -> str:
    """Build the sidebar HTML with one entry per chapter."""
    html = '''
    <div class="sidebar-header">
        <span class="header-title">Contents</span>
    </div>
    <ul class="toc" id="toc-list">
    '''

    for ch in chapters:
        active = " active" if ch.filename == active_filename else ""
        html += f'<li class="chapter-item{active}">'
        html += (f'<a href="#{ch.id}" data-filename="{escape(ch.filename)}">'
                 f'<span class="emoji">{ch.emoji}</span> {escape(ch.title)}</a>')
        html += '</li>'

    html += '</ul>'
    return html


def sync_active_marker(sidebar_html: str, filename: str) -> str:
    """
    Mark the entry whose link points at `filename` as active and clear all others.
    """
    soup = BeautifulSoup(sidebar_html, 'html.parser')
    for link in soup.select('.toc li > a[data-filename]'):
        item = link.parent
        classes = [c for c in (item.get('class') or []) if c != 'active']
        if link['data-filename'] == filename:
            classes.append('active')
        item['class'] = classes
    return str(soup)


def active_filenames(sidebar_html: str) -> List[str]:
    """Filenames of the entries currently marked active."""
    soup = BeautifulSoup(sidebar_html, 'html.parser')
    return [li.a['data-filename'] for li in soup.select('.toc li.active') if li.a]
