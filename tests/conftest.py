import base64
import hashlib
import logging
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


PNG_B64 = "iVBORw0KGgo="
JPEG_B64 = "/9j/4AAQ"


def expected_name(payload_b64: str, ext: str, length: int = 8) -> str:
    """File name the writer derives for a base64 payload."""
    digest = hashlib.sha1(base64.b64decode(payload_b64)).hexdigest()
    return f"File_{digest[:length]}{ext}"


@pytest.fixture
def write_doc(tmp_path: Path):
    """Write a document into tmp_path and return its path."""

    def _write(text: str, name: str = "page.html") -> Path:
        path = tmp_path / name
        path.write_bytes(text.encode("utf-8"))
        return path

    return _write


@pytest.fixture
def isolate_logging():
    """Isolate logging configuration between tests.

    The CLI attaches a RichHandler to the package logger and sets its level;
    both are restored afterwards so other tests see the defaults.
    """
    original_handlers = logging.root.handlers[:]
    original_level = logging.root.level
    pkg_logger = logging.getLogger("datauri_extract")
    pkg_handlers = pkg_logger.handlers[:]
    pkg_level = pkg_logger.level

    logging.root.handlers.clear()
    logging.root.addHandler(logging.NullHandler())

    yield

    logging.root.handlers.clear()
    logging.root.handlers.extend(original_handlers)
    logging.root.setLevel(original_level)
    pkg_logger.handlers[:] = pkg_handlers
    pkg_logger.setLevel(pkg_level)
