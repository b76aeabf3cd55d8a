from __future__ import annotations

import re

from ..errors import UnknownLeadInKindError, UnterminatedCaptureError
from ..model.content import LeadInKind, LeadInMatch, PayloadBoundary

# Unquoted attribute values end at whitespace or the tag close.
_ATTR_END_RE = re.compile(r"\s|>")


def _find_or_raise(document: str, needle: str, start: int) -> int:
    idx = document.find(needle, start)
    if idx == -1:
        raise UnterminatedCaptureError(start)
    return idx


def resolve_boundary(document: str, match: LeadInMatch) -> PayloadBoundary:
    """Find where the payload of ``match`` ends and where scanning resumes.

    Quote terminators are searched literally: an escaped quote inside the
    payload still ends it.
    """

    start = match.payload_start

    if match.kind is LeadInKind.URL_FUNCTION:
        if match.quote:
            end = _find_or_raise(document, match.quote, start)
            close = document.find(")", end + 1)
            if close == -1:
                # reported from the closing quote, not the byte after it
                raise UnterminatedCaptureError(end, "url(")
            return PayloadBoundary(payload_end=end, next_cursor=close + 1)
        end = _find_or_raise(document, ")", start)
        return PayloadBoundary(payload_end=end, next_cursor=end + 1)

    if match.kind in (LeadInKind.SRC_ATTRIBUTE, LeadInKind.HREF_ATTRIBUTE):
        if match.quote:
            end = _find_or_raise(document, match.quote, start)
            return PayloadBoundary(payload_end=end, next_cursor=end + 1)
        m = _ATTR_END_RE.search(document, start)
        if m is None:
            raise UnterminatedCaptureError(start)
        return PayloadBoundary(payload_end=m.start(), next_cursor=m.start())

    raise UnknownLeadInKindError(match.keyword)


__all__ = ["resolve_boundary"]
