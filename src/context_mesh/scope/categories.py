"""Documentation categories used to order resolved documents."""

from pathlib import PurePosixPath
from typing import Tuple

# Earlier categories sort first within a root.
CATEGORY_ORDER: Tuple[Tuple[str, int], ...] = (
    ("decisions", 0),
    ("constraints", 1),
    ("architecture", 2),
    ("playbooks", 3),
)

UNCATEGORIZED_WEIGHT = 99


def category_weight(relative_path: str) -> int:
    """Weight of the first known category among the path's directories.

    Args:
        relative_path: Root-relative document path, '/' or '\\' separated

    Returns:
        The category's weight, or UNCATEGORIZED_WEIGHT if none applies
    """
    segments = set(PurePosixPath(relative_path.replace("\\", "/")).parent.parts)
    for name, weight in CATEGORY_ORDER:
        if name in segments:
            return weight
    return UNCATEGORIZED_WEIGHT
