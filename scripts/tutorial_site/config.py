#!/usr/bin/env python3
"""
Tutorial site configuration and global settings.
Shared across all tutorial_site modules.
"""
from pathlib import Path

# --- CONFIGURATION ---
DEFAULT_PORT = 8000
BASE_URL = f"http://localhost:{DEFAULT_PORT}/"  # Set via --base-url argument
OUTPUT_DIR = Path("site_output")
REQUEST_TIMEOUT = 10.0

SITE_TITLE = "Python Tutorial"
LAST_UPDATED = "Last updated: November 2, 2025"

# --- FAILED LOAD PLACEHOLDER ---
FAILED_CONTENT_MARKER = "## Failed to load content"
FAILED_CONTENT_PLACEHOLDER = (
    f"{FAILED_CONTENT_MARKER}\n\n"
    "An error occurred while fetching the file. Check the console output for details."
)

# --- RENDERING ---
# GitHub-flavoured Markdown (tables, strikethrough, autolinks); newlines become <br>
MARKDOWN_PRESET = "gfm-like"
MARKDOWN_OPTIONS = {"breaks": True}

HIGHLIGHT_STYLE = "default"
HIGHLIGHT_CSS_CLASS = "hljs"

# Content safety guardrails
MIN_CONTENT_LENGTH = 40  # Minimum visible characters of chapter text (footer excluded)


def set_base_url(url: str):
    """Set the base URL chapters are fetched from."""
    global BASE_URL
    BASE_URL = url if url.endswith("/") else url + "/"


def get_base_url() -> str:
    """Get the current base URL."""
    return BASE_URL
