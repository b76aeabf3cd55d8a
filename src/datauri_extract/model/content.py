"""Content data structures for data URI extraction (matches, boundaries, resources)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class LeadInKind(Enum):
    """Syntactic context a data URI was found in."""

    URL_FUNCTION = "url"  # CSS url(...)
    SRC_ATTRIBUTE = "src"
    HREF_ATTRIBUTE = "href"


@dataclass(frozen=True, slots=True)
class LeadInMatch:
    kind: LeadInKind
    # Keyword as written in the document ("SRC", "href", "Url", ...)
    keyword: str
    mime_type: str
    quote: str | None
    match_start: int
    payload_start: int

    @property
    def has_quote(self) -> bool:
        return bool(self.quote)


@dataclass(frozen=True, slots=True)
class PayloadBoundary:
    payload_end: int  # exclusive
    next_cursor: int


@dataclass(frozen=True, slots=True)
class ExtractedResource:
    data: bytes
    mime_type: str
    extension: str  # with leading dot
    content_hash: str  # full hex digest
    file_name: str


@dataclass(frozen=True, slots=True)
class ResourceRecord:
    """What a run remembers about a written resource; the bytes are not kept."""

    file_name: str
    mime_type: str
    content_hash: str
    size: int

    @classmethod
    def from_resource(cls, resource: ExtractedResource) -> ResourceRecord:
        return cls(
            file_name=resource.file_name,
            mime_type=resource.mime_type,
            content_hash=resource.content_hash,
            size=len(resource.data),
        )


@dataclass(slots=True)
class RewriteResult:
    resources: list[ResourceRecord] = field(default_factory=list)
    output_path: Path | None = None

    @property
    def match_count(self) -> int:
        return len(self.resources)

    @property
    def file_names(self) -> list[str]:
        """Distinct extracted file names in first-seen order."""
        seen: dict[str, None] = {}
        for res in self.resources:
            seen.setdefault(res.file_name, None)
        return list(seen)


__all__ = [
    "ExtractedResource",
    "LeadInKind",
    "LeadInMatch",
    "PayloadBoundary",
    "ResourceRecord",
    "RewriteResult",
]
