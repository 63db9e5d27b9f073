"""Rendering of resolved documents as a bundle or a listing."""

import logging
from typing import List, Sequence

from .models import ContextDocument, OutputFormat

logger = logging.getLogger(__name__)

RULE = "─" * 60
SCOPE_SEPARATOR = ", "


def render(
    documents: Sequence[ContextDocument],
    output_format: OutputFormat,
    query_scope: str,
) -> str:
    """Render documents in resolution order.

    Args:
        documents: Resolved documents, already ordered
        output_format: bundle (raw concatenated content) or list (summary)
        query_scope: The scope that was queried, shown in the list header

    Returns:
        Text ready to write to stdout
    """
    if OutputFormat(output_format) is OutputFormat.LIST:
        return render_list(documents, query_scope)
    return render_bundle(documents)


def render_list(documents: Sequence[ContextDocument], query_scope: str) -> str:
    """One summary line per document between two rules, plus a total."""
    lines: List[str] = [
        "",
        f"📋 Context files for scope: {query_scope}",
        "",
        RULE,
    ]
    for doc in documents:
        scopes = SCOPE_SEPARATOR.join(doc.declared_scopes)
        lines.append(f"  [{doc.origin.value}] {doc.relative_path}  ({scopes})")
    lines.extend([RULE, "", f"Total: {len(documents)} file(s)", ""])
    return "\n".join(lines)


def render_bundle(documents: Sequence[ContextDocument]) -> str:
    """Concatenate each document's current content under a delimiter line."""
    parts: List[str] = []
    for doc in documents:
        try:
            content = doc.absolute_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Skipping unreadable file %s: %s", doc.absolute_path, e)
            continue
        parts.append(f"===== FILE: {doc.origin.value} > {doc.relative_path} =====")
        parts.append(content)
        parts.append("")
    return "\n".join(parts)


def render_no_results(query_scope: str) -> str:
    """Informational message for a query that matched nothing."""
    return f"No context files found for scope: {query_scope}"
