"""Markdown changelog generation.

Changes are grouped into fixed sections, always in this order:

1. Breaking (major)
2. Minor
3. Patch
4. Uncategorized (unknown)

Empty sections are left out. Within a section, changes keep the order
they were given in. The first line of a commit message becomes the list
item; any further lines are emitted below it, indented with a tab.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from monoreleaser.core.commits import Semantic, group_changes_by_semantic, message_lines

if TYPE_CHECKING:
    from collections.abc import Iterable

    from monoreleaser.core.commits import Change

CHANGELOG_TITLE = "# What's Changed"

SECTION_HEADINGS: dict[Semantic, str] = {
    Semantic.MAJOR: "## \U0001f494 Breaking",
    Semantic.MINOR: "## \U0001f680 Minor",
    Semantic.PATCH: "## \U0001f41b Patch",
    Semantic.UNKNOWN: "## \U0001f4e6 Uncategorized",
}


def generate_changelog(changes: Iterable[Change]) -> str:
    """Generate a markdown changelog from changes.

    Args:
        changes: Classified changes, usually newest first

    Returns:
        Markdown formatted changelog. The same input always renders
        to the same string.
    """
    lines = [CHANGELOG_TITLE]

    for semantic, section in group_changes_by_semantic(changes).items():
        if not section:
            continue
        lines.append(SECTION_HEADINGS[semantic])
        for change in section:
            lines.extend(format_change(change))
        lines.append("")

    return "\n".join(lines) + "\n"


def format_change(change: Change) -> list[str]:
    """Format a change as a markdown list item plus tab-indented continuation lines."""
    header, *body = message_lines(change.message)
    return [f"- {header}", *(f"\t{line}" for line in body)]
