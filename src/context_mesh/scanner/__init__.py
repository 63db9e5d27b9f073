"""Markdown document discovery."""

from .markdown import MarkdownScanner, scan_markdown_files

__all__ = ["MarkdownScanner", "scan_markdown_files"]
