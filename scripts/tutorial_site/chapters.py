#!/usr/bin/env python3
"""
Chapter registry.
The fixed, ordered list of tutorial chapters and lookups over it.
"""
import re
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

FRAGMENT_RE = re.compile(r'#?([0-9]+)')


@dataclass(frozen=True)
class Chapter:
    id: int
    title: str
    filename: str
    emoji: str


CHAPTERS = (
    Chapter(0, "Getting Started", "tutorial-00-README.md", "🚀"),
    Chapter(1, "Introduction to Python", "tutorial-01-introduction-to-python.md", "👋"),
    Chapter(2, "Variables and Data Types", "tutorial-02-variables-and-data-types.md", "📦"),
    Chapter(3, "Operators and Expressions", "tutorial-03-operators-and-expressions.md", "➗"),
    Chapter(4, "Control Flow", "tutorial-04-control-flow.md", "🔄"),
    Chapter(5, "Loops", "tutorial-05-loops.md", "🔁"),
    Chapter(6, "Functions", "tutorial-06-functions.md", "📝"),
    Chapter(7, "Collections", "tutorial-07-collections.md", "📚"),
    Chapter(8, "Strings and Files", "tutorial-08-strings-and-files.md", "📄"),
    Chapter(9, "Errors and Exceptions", "tutorial-09-errors-and-exceptions.md", "⚠️"),
    Chapter(10, "Mini Project", "tutorial-10-mini-project.md", "🎮"),
    Chapter(11, "Introduction to OOP", "tutorial-11-introduction-to-oop.md", "🎯"),
    Chapter(12, "Advanced OOP", "tutorial-12-advanced-oop.md", "🚀"),
    Chapter(13, "OOP Design Patterns", "tutorial-13-oop-design-patterns.md", "🏗️"),
)


def validate_registry(chapters: Iterable[Chapter]) -> tuple:
    """
    Checks that chapter ids and filenames are unique.
    Returns: (is_valid: bool, error_message: str)
    """
    seen_ids = set()
    seen_files = set()
    for ch in chapters:
        if ch.id in seen_ids:
            return False, f"Duplicate chapter id: {ch.id}"
        if ch.filename in seen_files:
            return False, f"Duplicate chapter filename: {ch.filename}"
        seen_ids.add(ch.id)
        seen_files.add(ch.filename)
    if not seen_ids:
        return False, "Chapter registry is empty"
    return True, ""


def find_chapter(chapters: Sequence[Chapter], chapter_id: Optional[int]) -> Optional[Chapter]:
    """Return the chapter with the given id, or None."""
    if chapter_id is None:
        return None
    return next((ch for ch in chapters if ch.id == chapter_id), None)


def find_by_filename(chapters: Sequence[Chapter], filename: str) -> Optional[Chapter]:
    """Return the chapter stored in `filename`, or None."""
    return next((ch for ch in chapters if ch.filename == filename), None)


def parse_fragment(fragment: Optional[str]) -> Optional[int]:
    """
    Parse an address fragment ("#5" or "5") into a chapter id.
    Anything but ASCII decimal digits yields None.
    """
    if not fragment:
        return None
    m = FRAGMENT_RE.fullmatch(fragment.strip())
    if not m:
        return None
    return int(m.group(1))


_ok, _error = validate_registry(CHAPTERS)
if not _ok:
    raise ValueError(_error)
