"""Core data models for the Context Mesh scope resolver."""

from enum import Enum
from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import UsageError


DEFAULT_LOCAL_ROOT = Path("context")


class Origin(str, Enum):
    """Which root a document was discovered under."""

    HUB = "hub"
    LOCAL = "local"


class OutputFormat(str, Enum):
    """How resolved documents are rendered."""

    BUNDLE = "bundle"
    LIST = "list"


class ContextDocument(BaseModel):
    """A markdown document whose declared scopes matched the query."""

    model_config = ConfigDict(frozen=True)

    absolute_path: Path
    relative_path: str  # root-relative, POSIX separators
    declared_scopes: List[str] = Field(default_factory=list)
    origin: Origin
    category_weight: int

    def sort_key(self) -> tuple[int, str]:
        """Ordering within a single root."""
        return (self.category_weight, self.relative_path)


class ResolverRequest(BaseModel):
    """A single scope resolution query."""

    model_config = ConfigDict(frozen=True)

    query_scope: str
    hub_root: Optional[Path] = None
    local_root: Path = Field(default=DEFAULT_LOCAL_ROOT)
    output_format: OutputFormat = OutputFormat.BUNDLE

    @field_validator("query_scope")
    @classmethod
    def validate_query_scope(cls, v: str) -> str:
        """Reject blank scopes; surrounding whitespace is dropped."""
        v = v.strip()
        if not v:
            raise ValueError("scope argument is required")
        return v

    @classmethod
    def create(cls, **kwargs) -> "ResolverRequest":
        """Build a request, raising UsageError instead of ValidationError."""
        try:
            return cls(**kwargs)
        except ValidationError as e:
            messages = "; ".join(
                str(err.get("ctx", {}).get("error", err["msg"])) for err in e.errors()
            )
            raise UsageError(messages) from e
