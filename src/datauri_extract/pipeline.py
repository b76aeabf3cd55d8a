from __future__ import annotations

import io
import logging
from pathlib import Path

from .content_types import ContentTypeMapping
from .diagnostics import log_error_policy, log_extract_configuration
from .errors import ExtractError
from .model.content import RewriteResult
from .model.options import ExtractOptions
from .resources import ResourceWriter
from .rewrite import ProgressCallback, rewrite_document
from .textio import atomic_write_text, open_output, read_document

logger = logging.getLogger(__name__)


def derive_output_path(input_path: Path, suffix: str = "-new") -> Path:
    """Return ``<dir>/<stem><suffix><ext>`` for ``input_path``.

    page.html -> page-new.html; styles.min.css -> styles.min-new.css
    """

    return input_path.with_name(f"{input_path.stem}{suffix}{input_path.suffix}")


def extract_file(
    input_path: Path,
    options: ExtractOptions | None = None,
    *,
    mapping: ContentTypeMapping | None = None,
    on_progress: ProgressCallback = None,
) -> RewriteResult:
    """Extract every base64 data URI of ``input_path`` into sibling files.

    The rewritten document is written to :func:`derive_output_path` and the
    resources to the input's directory. By default the output is streamed, so
    a failure leaves a partial output file behind; with
    ``options.atomic_output`` it is only replaced into place on success.
    Resources written before a failure are never removed.

    Raises:
        ExtractError: on the first fatal extraction error
    """

    opts = options or ExtractOptions()
    log_extract_configuration(opts)

    mapping = mapping or ContentTypeMapping(default_extension=opts.default_extension)
    writer = ResourceWriter(mapping, opts)
    resource_dir = input_path.parent
    output_path = derive_output_path(input_path, opts.output_suffix)

    document = read_document(input_path, encoding=opts.encoding)
    logger.info("Rewriting %s -> %s", input_path, output_path)

    try:
        if opts.atomic_output:
            buffer = io.StringIO(newline="")
            result = rewrite_document(
                document, buffer, writer, resource_dir, on_progress=on_progress
            )
            atomic_write_text(output_path, buffer.getvalue(), encoding=opts.encoding)
        else:
            with open_output(output_path, encoding=opts.encoding) as out:
                result = rewrite_document(
                    document, out, writer, resource_dir, on_progress=on_progress
                )
    except ExtractError as exc:
        action = "discard_output" if opts.atomic_output else "keep_partial_output"
        log_error_policy(type(exc).__name__, action, str(exc))
        raise

    result.output_path = output_path
    logger.info("Extracted %d data URI(s) from %s", result.match_count, input_path)
    return result


__all__ = ["derive_output_path", "extract_file"]
