"""Context Mesh - resolve scoped context documents from a hub and a local root."""

__version__ = "0.1.0"

from .config import Config
from .exceptions import ContextMeshError, UsageError
from .formatter import render, render_no_results
from .models import ContextDocument, Origin, OutputFormat, ResolverRequest
from .resolver import ContextResolver, resolve
from .scope import any_scope_matches, category_weight, extract_scopes, scope_matches

__all__ = [
    "Config",
    "ContextMeshError",
    "UsageError",
    "render",
    "render_no_results",
    "ContextDocument",
    "Origin",
    "OutputFormat",
    "ResolverRequest",
    "ContextResolver",
    "resolve",
    "any_scope_matches",
    "category_weight",
    "extract_scopes",
    "scope_matches",
]
