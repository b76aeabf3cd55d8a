"""Extraction options for datauri-extract.

This module defines the configuration consumed by the file pipeline, the
resource writer and the content type mapping. The defaults reproduce the
classic behavior: ``File_<8 hex>`` names, a ``.bin`` fallback extension,
``<stem>-new<suffix>`` output and no atomic replace of the output file.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# SHA-1 hex digest length
MAX_HASH_LENGTH = 40


@dataclass(frozen=True)
class ExtractOptions:
    """Configuration options for a single extraction run."""

    # Extension used when a MIME type has no mapping entry
    default_extension: str = ".bin"

    # Number of hex characters of the content digest used in file names
    hash_length: int = 8

    # Resource file name prefix
    file_prefix: str = "File_"

    # Inserted between the input stem and its extension to name the output
    output_suffix: str = "-new"

    # Buffer the rewritten text and replace it into place only on success
    atomic_output: bool = False

    # Text encoding of the input and output documents
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if not 1 <= self.hash_length <= MAX_HASH_LENGTH:
            raise ValueError(
                f"Invalid hash length {self.hash_length}. Valid values: 1-{MAX_HASH_LENGTH}"
            )
        if not self.default_extension.startswith(".") or len(self.default_extension) < 2:
            raise ValueError(
                f"Invalid default extension '{self.default_extension}': "
                "expected a leading dot, e.g. '.bin'"
            )

    @classmethod
    def from_cli(
        cls,
        *,
        default_extension: str = ".bin",
        hash_length: int = 8,
        atomic: bool = False,
        encoding: str = "utf-8",
    ) -> ExtractOptions:
        """Build ExtractOptions from CLI argument values.

        Args:
            default_extension: Fallback extension, with or without the leading dot
            hash_length: Hex characters of the digest to keep (1-40)
            atomic: Whether to commit the output file only on success
            encoding: Document text encoding

        Returns:
            ExtractOptions instance with normalized values

        Raises:
            ValueError: If any argument has an invalid value
        """
        ext = default_extension.strip()
        if not ext or ext == ".":
            raise ValueError("Invalid default extension: must not be empty")
        if not ext.startswith("."):
            ext = f".{ext}"
        if any(ch in ext for ch in "/\\") or any(ch.isspace() for ch in ext):
            raise ValueError(f"Invalid default extension '{default_extension}'")

        return cls(
            default_extension=ext.lower(),
            hash_length=hash_length,
            atomic_output=atomic,
            encoding=encoding,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization/logging."""
        return {
            "default_extension": self.default_extension,
            "hash_length": self.hash_length,
            "file_prefix": self.file_prefix,
            "output_suffix": self.output_suffix,
            "atomic_output": self.atomic_output,
            "encoding": self.encoding,
        }


__all__ = [
    "MAX_HASH_LENGTH",
    "ExtractOptions",
]
