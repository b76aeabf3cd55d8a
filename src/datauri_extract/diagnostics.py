"""Centralized diagnostic logging for the extraction pipeline.

Messages here are single-line and meant for the error stream. They do not
overlap with ProgressReporter, which only renders progress for end users.
"""

from __future__ import annotations

import logging

from datauri_extract.model.options import ExtractOptions

logger = logging.getLogger(__name__)


def log_extract_configuration(options: ExtractOptions) -> None:
    """Log the options of a run for debugging.

    Args:
        options: Extraction options to log
    """
    logger.info("Extraction configuration:")
    logger.info("  Default extension: %s", options.default_extension)
    logger.info("  Hash length: %d", options.hash_length)
    logger.info("  Output suffix: %s", options.output_suffix)
    logger.info("  Atomic output: %s", "enabled" if options.atomic_output else "disabled")


def log_unknown_mime_type(mime_type: str, fallback: str) -> None:
    """Report a MIME type missing from the mapping (non-fatal)."""
    logger.warning("Unknown mime type: '%s'. Using '%s'.", mime_type, fallback)


def log_name_collision(file_name: str, content_hash: str) -> None:
    """Report an existing resource with the same name but different bytes."""
    logger.warning(
        "Overwriting %s with different content (digest %s shares its prefix)",
        file_name,
        content_hash,
    )


def log_error_policy(error_type: str, action: str, details: str | None = None) -> None:
    """Log how a failure is handled.

    Args:
        error_type: Type of error (e.g., "UnterminatedCaptureError")
        action: Action taken (e.g., "keep_partial_output", "discard_output")
        details: Optional additional details
    """
    if details:
        logger.info("Error policy: %s -> %s (%s)", error_type, action, details)
    else:
        logger.info("Error policy: %s -> %s", error_type, action)


__all__ = [
    "log_error_policy",
    "log_extract_configuration",
    "log_name_collision",
    "log_unknown_mime_type",
]
