from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from datauri_extract.diagnostics import log_unknown_mime_type

DEFAULT_EXTENSION = ".bin"

# Keys are lowercase; lookups are normalized before hitting the table.
DEFAULT_CONTENT_TYPES: Mapping[str, str] = MappingProxyType(
    {
        # images
        "image/png": ".png",
        "image/apng": ".apng",
        "image/jpeg": ".jpg",
        "image/jpg": ".jpg",
        "image/pjpeg": ".jpg",
        "image/gif": ".gif",
        "image/webp": ".webp",
        "image/avif": ".avif",
        "image/bmp": ".bmp",
        "image/x-ms-bmp": ".bmp",
        "image/tiff": ".tiff",
        "image/svg+xml": ".svg",
        "image/x-icon": ".ico",
        "image/vnd.microsoft.icon": ".ico",
        # fonts
        "font/woff": ".woff",
        "font/woff2": ".woff2",
        "font/ttf": ".ttf",
        "font/otf": ".otf",
        "font/sfnt": ".ttf",
        "application/font-woff": ".woff",
        "application/font-woff2": ".woff2",
        "application/x-font-woff": ".woff",
        "application/x-font-ttf": ".ttf",
        "application/x-font-truetype": ".ttf",
        "application/x-font-opentype": ".otf",
        "application/font-sfnt": ".ttf",
        "application/vnd.ms-fontobject": ".eot",
        # audio / video
        "audio/mpeg": ".mp3",
        "audio/mp3": ".mp3",
        "audio/ogg": ".ogg",
        "audio/wav": ".wav",
        "audio/x-wav": ".wav",
        "audio/webm": ".weba",
        "video/mp4": ".mp4",
        "video/webm": ".webm",
        "video/ogg": ".ogv",
        # text and documents
        "text/css": ".css",
        "text/html": ".html",
        "text/plain": ".txt",
        "text/javascript": ".js",
        "text/xml": ".xml",
        "application/javascript": ".js",
        "application/json": ".json",
        "application/xml": ".xml",
        "application/pdf": ".pdf",
        "application/zip": ".zip",
        "application/octet-stream": ".bin",
    }
)


class ContentTypeMapping(Mapping[str, str]):
    """Immutable MIME type -> file extension lookup.

    Keys are matched case-insensitively. Misses are reported and answered with
    ``default_extension``, so :meth:`extension_for` never fails.
    """

    __slots__ = ("_table", "_default")

    def __init__(
        self,
        entries: Mapping[str, str] | None = None,
        *,
        default_extension: str = DEFAULT_EXTENSION,
        include_defaults: bool = True,
    ) -> None:
        table: dict[str, str] = dict(DEFAULT_CONTENT_TYPES) if include_defaults else {}
        for mime, ext in (entries or {}).items():
            table[mime.lower()] = ext if ext.startswith(".") else f".{ext}"
        self._table: Mapping[str, str] = MappingProxyType(table)
        self._default = default_extension

    @property
    def default_extension(self) -> str:
        return self._default

    def extension_for(self, mime_type: str) -> str:
        ext = self._table.get(mime_type.lower())
        if ext is None:
            log_unknown_mime_type(mime_type, self._default)
            return self._default
        return ext

    def __getitem__(self, mime_type: str) -> str:
        return self._table[mime_type.lower()]

    def __contains__(self, mime_type: object) -> bool:
        return isinstance(mime_type, str) and mime_type.lower() in self._table

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"ContentTypeMapping({len(self)} entries, default={self._default!r})"


__all__ = ["DEFAULT_CONTENT_TYPES", "DEFAULT_EXTENSION", "ContentTypeMapping"]
