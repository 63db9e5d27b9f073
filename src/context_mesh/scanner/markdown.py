"""Recursive markdown file scanner."""

import logging
import os
from pathlib import Path
from typing import List, Optional

from ..config import Config, MARKDOWN_SUFFIX

logger = logging.getLogger(__name__)


class MarkdownScanner:
    """Enumerates markdown files beneath a context root."""

    def __init__(self, config: Optional[Config] = None):
        """Initialize scanner with configuration.

        Args:
            config: Application configuration; only markdown_suffix is used
        """
        self.suffix = config.markdown_suffix if config else MARKDOWN_SUFFIX

    def scan(self, root: Path) -> List[Path]:
        """Collect every markdown file beneath root, at any depth.

        Args:
            root: Directory to scan

        Returns:
            Absolute paths of matching regular files, in no particular order.
            Empty if root does not exist; the caller decides whether to warn.
        """
        if not root.is_dir():
            return []

        files: List[Path] = []

        # Directory symlinks are listed but never descended into
        for dirpath, _dirnames, filenames in os.walk(
            root, onerror=self._on_walk_error, followlinks=False
        ):
            current = Path(dirpath)
            for filename in filenames:
                if not filename.endswith(self.suffix):
                    continue
                file_path = current / filename
                try:
                    if not file_path.is_file():
                        continue
                except OSError:
                    continue
                files.append(file_path)

        logger.debug("Found %d markdown files under %s", len(files), root)
        return files

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        logger.warning("Skipping unreadable directory %s: %s", error.filename, error.strerror)


def scan_markdown_files(root: Path, suffix: str = MARKDOWN_SUFFIX) -> List[Path]:
    """Return all files under root whose name ends with suffix."""
    return MarkdownScanner(Config(markdown_suffix=suffix)).scan(Path(root))
