from __future__ import annotations

import base64
import binascii
import re

from .errors import MalformedBase64Error

# Line-wrapped payloads are accepted; whitespace is not part of the alphabet.
_WHITESPACE_RE = re.compile(r"[ \t\r\n\f\v]+")


def decode_payload(text: str, offset: int = 0) -> bytes:
    """Decode a base64 payload using the standard alphabet.

    ``offset`` is the payload position in the document and is only used to
    report failures.
    """

    compact = _WHITESPACE_RE.sub("", text)
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise MalformedBase64Error(offset, cause=exc) from exc


__all__ = ["decode_payload"]
