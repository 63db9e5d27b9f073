"""Configuration management for the Context Mesh resolver."""

import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .models import DEFAULT_LOCAL_ROOT, OutputFormat


load_dotenv()


MARKDOWN_SUFFIX = ".md"


class Config(BaseModel):
    """Application configuration."""

    # Roots
    hub_path: Optional[Path] = Field(default=None)
    local_path: Path = Field(default=DEFAULT_LOCAL_ROOT)

    # Output Settings
    output_format: OutputFormat = Field(default=OutputFormat.BUNDLE)

    # Scanner Settings
    markdown_suffix: str = Field(default=MARKDOWN_SUFFIX)

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        def _parse_format(value: Optional[str]) -> OutputFormat:
            try:
                return OutputFormat(value.strip().lower()) if value else OutputFormat.BUNDLE
            except ValueError:
                return OutputFormat.BUNDLE

        hub_env = os.getenv("CONTEXT_HUB")
        local_env = os.getenv("CONTEXT_LOCAL")

        return cls(
            hub_path=Path(hub_env) if hub_env else None,
            local_path=Path(local_env) if local_env else DEFAULT_LOCAL_ROOT,
            output_format=_parse_format(os.getenv("CONTEXT_FORMAT")),
        )
