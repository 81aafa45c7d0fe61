"""Best-effort extraction of installed/skipped/errored items from CLI output.

The shadcn CLI prints plain text such as::

    Installing components...
      - button
      - card
    Skipping existing files:
      - input

A marker line opens a section; ``-`` prefixed lines that follow are items of
that section. Marker strings are English-only; unrecognized output yields an
empty result rather than an error.
"""

from __future__ import annotations

from enum import Enum

from shadcn_runner.types import ClassifiedResult


class Section(str, Enum):
    NONE = "none"
    INSTALLED = "installed"
    SKIPPED = "skipped"
    ERRORED = "errored"


INSTALL_MARKERS = ("Installing",)
SKIP_MARKERS = ("Skipping",)
ERROR_MARKERS = ("Error", "Failed")

ITEM_PREFIX = "-"


def section_for_line(line: str) -> Section | None:
    """Return the section a marker line opens, or None for non-marker lines."""
    if any(m in line for m in INSTALL_MARKERS):
        return Section.INSTALLED
    if any(m in line for m in SKIP_MARKERS):
        return Section.SKIPPED
    if any(m in line for m in ERROR_MARKERS):
        return Section.ERRORED
    return None


def item_for_line(line: str) -> str | None:
    """Return the list item on a line, or None if it is not a list item."""
    stripped = line.strip()
    if not stripped.startswith(ITEM_PREFIX):
        return None
    return stripped[len(ITEM_PREFIX):].strip()


def classify_output(text: str | None) -> ClassifiedResult:
    """Partition CLI output into installed, skipped, and errored items."""
    result = ClassifiedResult()
    if not text:
        return result

    sections: dict[Section, list[str]] = {}
    current = Section.NONE
    for line in text.splitlines():
        opened = section_for_line(line)
        if opened is not None:
            current = opened
            # A repeated marker starts a new batch
            sections[opened] = []
            continue
        if current is Section.NONE:
            continue
        item = item_for_line(line)
        if item is not None:
            sections[current].append(item)

    result.installed = sections.get(Section.INSTALLED)
    result.skipped = sections.get(Section.SKIPPED)
    result.errored = sections.get(Section.ERRORED)
    return result
