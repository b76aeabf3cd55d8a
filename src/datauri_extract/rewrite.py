"""Streaming rewrite of data URIs into references to extracted files.

The engine drives a strictly sequential loop over the document:

    scan -> copy untouched text -> resolve boundary -> decode -> write -> emit

and flushes the untouched tail once the scanner finds nothing more. Output
goes to any text sink as it is produced, so a fatal error leaves everything
emitted up to that point in the sink and every resource written so far on
disk.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import suppress
from pathlib import Path
from typing import Protocol

from .decode import decode_payload
from .errors import UnknownLeadInKindError
from .model.content import LeadInKind, LeadInMatch, ResourceRecord, RewriteResult
from .resources import ResourceWriter
from .scan import find_lead_in, resolve_boundary

logger = logging.getLogger(__name__)


class TextSink(Protocol):  # pragma: no cover - interface
    def write(self, s: str, /) -> int: ...


ProgressCallback = Callable[[str, dict[str, int | str]], None] | None


def _safe_emit(on_progress: ProgressCallback, event: str, payload: dict[str, int | str]) -> None:
    if on_progress is None:
        return
    with suppress(Exception):
        on_progress(event, payload)


def replacement_text(match: LeadInMatch, file_name: str) -> str:
    """Text that takes the place of a consumed data URI.

    ``url(...)`` is never re-quoted; attributes are always double-quoted and
    keep the keyword's original case.
    """

    if match.kind is LeadInKind.URL_FUNCTION:
        return f"url({file_name})"
    if match.kind in (LeadInKind.SRC_ATTRIBUTE, LeadInKind.HREF_ATTRIBUTE):
        return f'{match.keyword}="{file_name}"'
    raise UnknownLeadInKindError(match.keyword)


def rewrite_document(
    document: str,
    out: TextSink,
    writer: ResourceWriter,
    resource_dir: Path,
    on_progress: ProgressCallback = None,
) -> RewriteResult:
    """Rewrite ``document`` into ``out``, extracting payloads into ``resource_dir``.

    Raises:
        UnterminatedCaptureError: a payload or ``url(`` has no terminator
        MalformedBase64Error: a payload does not decode
        UnknownLeadInKindError: defensive, unreachable through the scanner
    """

    result = RewriteResult()
    cursor = 0
    _safe_emit(on_progress, "scan:start", {"length": len(document)})

    while True:
        match = find_lead_in(document, cursor)
        if match is None:
            break

        out.write(document[cursor : match.match_start])

        boundary = resolve_boundary(document, match)
        payload = document[match.payload_start : boundary.payload_end]
        data = decode_payload(payload, offset=match.payload_start)
        resource = writer.write(data, match.mime_type, resource_dir)

        out.write(replacement_text(match, resource.file_name))
        result.resources.append(ResourceRecord.from_resource(resource))
        logger.debug(
            "Replaced %s data URI at %d-%d with %s",
            match.kind.value,
            match.match_start,
            boundary.next_cursor,
            resource.file_name,
        )
        _safe_emit(
            on_progress,
            "resource:written",
            {"file_name": resource.file_name, "offset": match.match_start},
        )

        cursor = boundary.next_cursor

    out.write(document[cursor:])
    _safe_emit(on_progress, "scan:finalized", {"resources": result.match_count})
    return result


__all__ = ["ProgressCallback", "TextSink", "replacement_text", "rewrite_document"]
