#!/usr/bin/env python3
"""
Code fence normalizer.
Repairs fences whose language tag sits on its own line after the opening marker.
"""
import re
import sys

FENCE_RE = re.compile(r'^[ ]{0,3}(`{3,}|~{3,})[ \t]*(.*?)[ \t]*$')
LANG_TOKEN_RE = re.compile(r'^[A-Za-z0-9_+\-#.]+$')


def _split_ending(line: str) -> tuple:
    """Split a line into (body, line_ending)."""
    stripped = line.rstrip('\r\n')
    return stripped, line[len(stripped):]


def _is_closing(body: str, marker: str) -> bool:
    m = FENCE_RE.match(body)
    if not m or m.group(2):
        return False
    fence = m.group(1)
    return fence[0] == marker[0] and len(fence) >= len(marker)


def _repair(text: str) -> str:
    lines = text.splitlines(keepends=True)
    out = []
    open_marker = None
    i = 0
    while i < len(lines):
        body, ending = _split_ending(lines[i])

        if open_marker is not None:
            if _is_closing(body, open_marker):
                open_marker = None
            out.append(lines[i])
            i += 1
            continue

        m = FENCE_RE.match(body)
        if not m:
            out.append(lines[i])
            i += 1
            continue

        open_marker = m.group(1)
        if m.group(2) or i + 1 >= len(lines):
            out.append(lines[i])
            i += 1
            continue

        lang_body, lang_ending = _split_ending(lines[i + 1])
        # "```\npython\n" but not "```\nx\n```" (a one-line code block)
        is_tag = (
            LANG_TOKEN_RE.match(lang_body)
            and lang_ending
            and i + 2 < len(lines)
            and not _is_closing(_split_ending(lines[i + 2])[0], open_marker)
        )
        if is_tag:
            out.append(f"{body[:m.end(1)]}{lang_body}{lang_ending}")
            i += 2
        else:
            out.append(lines[i])
            i += 1

    return "".join(out)


def normalize_fences(text: str) -> str:
    """
    Rewrite "```" + newline + bare language token + newline into "```token" + newline.

    Well-formed fences, closing fences and everything outside fences are left as-is.
    On an unexpected failure the original text is returned unchanged.
    """
    if not text:
        return text
    try:
        return _repair(text)
    except Exception as e:
        print(f"  [Fences] Error preprocessing code fences: {type(e).__name__}: {e}", file=sys.stderr)
        return text
