from __future__ import annotations

import logging
from pathlib import Path

from .content_types import ContentTypeMapping
from .diagnostics import log_name_collision
from .ids import compute_content_hash
from .model.content import ExtractedResource
from .model.options import ExtractOptions

logger = logging.getLogger(__name__)


def generate_resource_name(content_hash: str, ext: str, *, prefix: str = "File_", length: int = 8) -> str:
    return f"{prefix}{content_hash[:length]}{ext}"


class ResourceWriter:
    """Persist decoded payloads under content-derived names.

    Holds no registry of earlier writes: identical bytes re-derive the same
    name and the second write simply overwrites the first.
    """

    def __init__(self, mapping: ContentTypeMapping, options: ExtractOptions | None = None) -> None:
        self.mapping = mapping
        self.options = options or ExtractOptions()

    def write(self, data: bytes, mime_type: str, resource_dir: Path) -> ExtractedResource:
        ext = self.mapping.extension_for(mime_type)
        content_hash = compute_content_hash(data)
        filename = generate_resource_name(
            content_hash,
            ext,
            prefix=self.options.file_prefix,
            length=self.options.hash_length,
        )
        dest = resource_dir / filename
        if dest.is_file() and dest.read_bytes() != data:
            log_name_collision(filename, content_hash)
        dest.write_bytes(data)
        logger.debug("Wrote %s (%d bytes, %s)", dest, len(data), mime_type)

        return ExtractedResource(
            data=data,
            mime_type=mime_type,
            extension=ext,
            content_hash=content_hash,
            file_name=filename,
        )


__all__ = ["ResourceWriter", "generate_resource_name"]
