"""Scope declaration parsing, matching and ordering."""

from .categories import CATEGORY_ORDER, UNCATEGORIZED_WEIGHT, category_weight
from .extractor import ScanState, extract_scopes, read_scopes
from .matcher import GLOBAL_SCOPE, any_scope_matches, scope_matches

__all__ = [
    "CATEGORY_ORDER",
    "UNCATEGORIZED_WEIGHT",
    "category_weight",
    "ScanState",
    "extract_scopes",
    "read_scopes",
    "GLOBAL_SCOPE",
    "any_scope_matches",
    "scope_matches",
]
