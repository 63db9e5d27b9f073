"""Extraction of declared scopes from a document's ``## Scope`` section.

A document declares its scopes as a bullet list under a level-2 heading::

    ## Scope
    - api/auth
    - `api/users`

Only the first such section is honoured. It ends at the next heading of
level 1 or 2; deeper headings and prose inside the section are ignored.
"""

import re
from enum import Enum
from pathlib import Path
from typing import List

SCOPE_HEADING = re.compile(r"^##\s+scope$", re.IGNORECASE)
SECTION_END = re.compile(r"^#{1,2}\s")
LIST_ITEM = re.compile(r"^[-*]\s+(.+)")


class ScanState(Enum):
    """Position of the line scanner relative to the scope section."""

    OUTSIDE = "outside"
    INSIDE = "inside"
    DONE = "done"


def extract_scopes(text: str) -> List[str]:
    """Return the scopes declared in the first ``## Scope`` section.

    Args:
        text: Full markdown document

    Returns:
        Scope strings in source order, back-ticks stripped. Empty when the
        document has no scope section.
    """
    scopes: List[str] = []
    state = ScanState.OUTSIDE

    for line in text.splitlines():
        if state is ScanState.DONE:
            break

        stripped = line.strip()

        if state is ScanState.OUTSIDE:
            if SCOPE_HEADING.match(stripped):
                state = ScanState.INSIDE
            continue

        if SECTION_END.match(stripped):
            state = ScanState.DONE
            continue

        match = LIST_ITEM.match(stripped)
        if match:
            scope = match.group(1).strip().replace("`", "")
            if scope:
                scopes.append(scope)

    return scopes


def read_scopes(path: Path) -> List[str]:
    """Read a UTF-8 document and extract its declared scopes.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    return extract_scopes(Path(path).read_text(encoding="utf-8"))
