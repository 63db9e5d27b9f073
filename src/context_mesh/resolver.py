"""Resolve a scope query against the hub and local context roots."""

import logging
from pathlib import Path
from typing import List, Optional

from .config import Config
from .models import ContextDocument, Origin, ResolverRequest
from .scanner.markdown import MarkdownScanner
from .scope.categories import category_weight
from .scope.extractor import read_scopes
from .scope.matcher import any_scope_matches

logger = logging.getLogger(__name__)


class ContextResolver:
    """Finds the context documents whose declared scopes match a query.

    Hub documents always precede local ones. Within a root, documents are
    ordered by category weight and then by relative path. The same relative
    path under both roots yields two separate documents.
    """

    def __init__(self, config: Optional[Config] = None):
        self.scanner = MarkdownScanner(config)

    def resolve(self, request: ResolverRequest) -> List[ContextDocument]:
        """Resolve a request into an ordered list of documents.

        Missing roots produce a warning and contribute nothing. An empty
        result is not an error.
        """
        hub_docs: List[ContextDocument] = []
        if request.hub_root is not None:
            hub_docs = self._resolve_root(
                request.hub_root, Origin.HUB, request.query_scope, "Hub"
            )

        local_docs = self._resolve_root(
            request.local_root, Origin.LOCAL, request.query_scope, "Local"
        )

        return hub_docs + local_docs

    def _resolve_root(
        self, root: Path, origin: Origin, query: str, label: str
    ) -> List[ContextDocument]:
        root_dir = root.resolve()
        if not root_dir.is_dir():
            logger.warning("%s directory not found: %s", label, root_dir)
            return []

        documents: List[ContextDocument] = []
        for file_path in self.scanner.scan(root_dir):
            try:
                scopes = read_scopes(file_path)
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Skipping unreadable file %s: %s", file_path, e)
                continue

            if not any_scope_matches(scopes, query):
                continue

            relative_path = file_path.relative_to(root_dir).as_posix()
            documents.append(
                ContextDocument(
                    absolute_path=file_path,
                    relative_path=relative_path,
                    declared_scopes=scopes,
                    origin=origin,
                    category_weight=category_weight(relative_path),
                )
            )

        documents.sort(key=ContextDocument.sort_key)
        logger.debug("%s root %s: %d matching documents", label, root_dir, len(documents))
        return documents


def resolve(request: ResolverRequest, config: Optional[Config] = None) -> List[ContextDocument]:
    """Resolve a request with a fresh ContextResolver."""
    return ContextResolver(config).resolve(request)
