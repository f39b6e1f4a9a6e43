"""Sort Directive — parses a raw `sort` query value into direction + candidate key.

Invariants:
    - None or blank input → None (caller falls back to the default entirely)
    - Leading "-" → DESC, leading "+" → ASC, no sign → ASC; the sign is stripped
    - The remaining text is returned verbatim (no case folding here)
"""

from dataclasses import dataclass

from todo_api.core.domain_types import SortDirection


@dataclass(frozen=True)
class SortDirective:
    direction: SortDirection
    candidate_key: str


def parse_sort_directive(raw: str | None) -> SortDirective | None:
    """Parse e.g. "-completed" into SortDirective(DESC, "completed")."""
    if raw is None or not raw.strip():
        return None

    text = raw.strip()
    direction = SortDirection.ASC
    if text.startswith("-"):
        direction = SortDirection.DESC
        text = text[1:]
    elif text.startswith("+"):
        text = text[1:]

    return SortDirective(direction=direction, candidate_key=text)
