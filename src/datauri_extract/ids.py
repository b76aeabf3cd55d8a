from __future__ import annotations

import hashlib


def compute_content_hash(data: bytes) -> str:
    """Return the full SHA-1 hex digest of ``data``."""

    return hashlib.sha1(data).hexdigest()


def compute_content_id(data: bytes, length: int = 8) -> str:
    """Compute a deterministic short hex id from content bytes.

    _id = sha1(<data>)[:length]
    Identical bytes always yield the identical id, within and across runs.
    """

    return compute_content_hash(data)[:length]
