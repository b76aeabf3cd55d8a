from __future__ import annotations

import re

from ..errors import UnknownLeadInKindError
from ..model.content import LeadInKind, LeadInMatch

# One MIME segment: no tspecials, no whitespace
_MIME_SEGMENT = r"[^\s(){}<>@,;:\\\"/\[\]?=]+"

LEAD_IN_RE = re.compile(
    r"(?:(?P<url>url)\(|(?P<attr>src|href)\s*=)"  # url( or src= / href=
    r"\s*(?P<quote>[\"'])?"  # optional opening quote
    rf"data:(?P<mime>{_MIME_SEGMENT}/{_MIME_SEGMENT});base64,",
    re.IGNORECASE,
)


def lead_in_kind(keyword: str) -> LeadInKind:
    """Map a matched keyword (any case) to its LeadInKind."""

    try:
        return LeadInKind(keyword.lower())
    except ValueError as exc:
        raise UnknownLeadInKindError(keyword) from exc


def find_lead_in(document: str, from_offset: int = 0) -> LeadInMatch | None:
    """Find the leftmost data URI lead-in at or after ``from_offset``.

    Returns None when the rest of the document holds no candidate.
    """

    m = LEAD_IN_RE.search(document, from_offset)
    if m is None:
        return None
    keyword = m.group("url") or m.group("attr")
    return LeadInMatch(
        kind=lead_in_kind(keyword),
        keyword=keyword,
        mime_type=m.group("mime"),
        quote=m.group("quote"),
        match_start=m.start(),
        payload_start=m.end(),
    )


__all__ = ["LEAD_IN_RE", "find_lead_in", "lead_in_kind"]
