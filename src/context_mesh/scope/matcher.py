"""Hierarchical, wildcard-aware scope matching."""

from typing import Iterable

GLOBAL_SCOPE = "*"
SUBTREE_SUFFIX = "/*"


def _subtree_prefix(scope: str) -> str:
    return scope[: -len(SUBTREE_SUFFIX)]


def _within(scope: str, prefix: str) -> bool:
    return scope == prefix or scope.startswith(prefix + "/")


def scope_matches(declared: str, query: str) -> bool:
    """Check whether a declared scope satisfies a query scope.

    Not symmetric: a document scoped ``api/*`` answers a query for
    ``api/auth``, and a document scoped ``api/auth`` answers a query for
    ``api/*``, but ``api/auth`` never answers ``api``.

    Args:
        declared: Scope listed in a document's ``## Scope`` section
        query: Scope requested by the caller

    Returns:
        True if the document should be returned for the query
    """
    if declared == GLOBAL_SCOPE or query == GLOBAL_SCOPE:
        return True

    if declared == query:
        return True

    if declared.endswith(SUBTREE_SUFFIX):
        if _within(query, _subtree_prefix(declared)):
            return True

    if query.endswith(SUBTREE_SUFFIX):
        prefix = _subtree_prefix(query)
        if _within(declared, prefix):
            return True
        # Only reachable when both sides are subtrees of the same prefix,
        # which the equality check above already covers.
        if declared.endswith(SUBTREE_SUFFIX) and _subtree_prefix(declared) == prefix:
            return True

    return False


def any_scope_matches(declared_scopes: Iterable[str], query: str) -> bool:
    """True if at least one declared scope satisfies the query."""
    return any(scope_matches(scope, query) for scope in declared_scopes)
