from __future__ import annotations

from pathlib import Path

import pytest
from conftest import PNG_B64, expected_name

from datauri_extract.content_types import ContentTypeMapping
from datauri_extract.errors import MalformedBase64Error, UnterminatedCaptureError
from datauri_extract.model.options import ExtractOptions
from datauri_extract.pipeline import derive_output_path, extract_file


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("page.html", "page-new.html"),
        ("styles.min.css", "styles.min-new.css"),
        ("README", "README-new"),
    ],
)
def test_derive_output_path(tmp_path: Path, name: str, expected: str) -> None:
    assert derive_output_path(tmp_path / name) == tmp_path / expected


def test_derive_output_path_custom_suffix(tmp_path: Path) -> None:
    assert derive_output_path(tmp_path / "a.css", ".out") == tmp_path / "a.out.css"


def test_extract_file_writes_sibling_output(write_doc, tmp_path: Path) -> None:
    src = write_doc(f'<img src="data:image/png;base64,{PNG_B64}">\n')
    result = extract_file(src)

    name = expected_name(PNG_B64, ".png")
    out = tmp_path / "page-new.html"
    assert result.output_path == out
    assert out.read_text(encoding="utf-8") == f'<img src="{name}">\n'
    assert (tmp_path / name).read_bytes() == b"\x89PNG\r\n\x1a\n"
    # input untouched
    assert src.read_text(encoding="utf-8").startswith('<img src="data:')


def test_passthrough_is_byte_identical(write_doc, tmp_path: Path) -> None:
    raw = "\ufeff<p>café</p>\r\n<img src='x.png'>\r\n"
    src = write_doc(raw, name="doc.htm")
    extract_file(src)
    assert (tmp_path / "doc-new.htm").read_bytes() == src.read_bytes()


def test_same_name_across_runs(write_doc, tmp_path: Path) -> None:
    first = write_doc(f"url(data:image/png;base64,{PNG_B64})", name="a.css")
    second = write_doc(f"<img src=data:IMAGE/PNG;base64,{PNG_B64}>", name="b.html")
    r1 = extract_file(first)
    r2 = extract_file(second)
    assert r1.file_names == r2.file_names == [expected_name(PNG_B64, ".png")]


def test_custom_mapping_and_options(write_doc, tmp_path: Path) -> None:
    src = write_doc("<img src='data:application/x-custom;base64,AAAA'>")
    options = ExtractOptions(default_extension=".dat", output_suffix=".out")
    result = extract_file(src, options, mapping=ContentTypeMapping({"application/x-custom": ".cst"}))
    name = expected_name("AAAA", ".cst")
    assert result.file_names == [name]
    assert (tmp_path / "page.out.html").read_text(encoding="utf-8") == f'<img src="{name}">'


def test_failure_leaves_partial_output(write_doc, tmp_path: Path) -> None:
    src = write_doc("<p>x</p><img src='data:image/png;base64,AAAA'><img src=\"data:image/png;base64,AAAA")
    with pytest.raises(UnterminatedCaptureError):
        extract_file(src)
    out = tmp_path / "page-new.html"
    assert out.read_text(encoding="utf-8") == f'<p>x</p><img src="{expected_name("AAAA", ".png")}"><img '
    assert (tmp_path / expected_name("AAAA", ".png")).exists()


def test_atomic_output_keeps_previous_file_on_failure(write_doc, tmp_path: Path) -> None:
    src = write_doc("<img src='data:image/png;base64,AAAA'><img src='data:image/png;base64,A*A='>")
    out = tmp_path / "page-new.html"
    out.write_text("previous", encoding="utf-8")

    with pytest.raises(MalformedBase64Error):
        extract_file(src, ExtractOptions(atomic_output=True))

    assert out.read_text(encoding="utf-8") == "previous"
    # resources extracted before the failure remain
    assert (tmp_path / expected_name("AAAA", ".png")).exists()


def test_atomic_output_success(write_doc, tmp_path: Path) -> None:
    src = write_doc("a\r\nurl('data:image/png;base64,AAAA')\r\n")
    result = extract_file(src, ExtractOptions(atomic_output=True))
    assert result.output_path is not None
    assert result.output_path.read_bytes() == f"a\r\nurl({expected_name('AAAA', '.png')})\r\n".encode()
    assert not list(tmp_path.glob("tmp*"))


def test_latin1_document_passes_through_unchanged(tmp_path: Path) -> None:
    src = tmp_path / "legacy.html"
    raw = "<p>café, naïve</p>\r\n".encode("latin-1")
    src.write_bytes(raw)

    result = extract_file(src)

    assert result.match_count == 0
    assert (tmp_path / "legacy-new.html").read_bytes() == raw


@pytest.mark.parametrize("atomic", [False, True])
def test_latin1_document_with_data_uri(tmp_path: Path, atomic: bool) -> None:
    src = tmp_path / "legacy.html"
    src.write_bytes(
        "<p>été</p><img src='data:image/png;base64,AAAA'>ñ".encode("latin-1")
    )

    extract_file(src, ExtractOptions(atomic_output=atomic))

    name = expected_name("AAAA", ".png")
    expected = "<p>été</p>".encode("latin-1") + f'<img src="{name}">'.encode() + "ñ".encode("latin-1")
    assert (tmp_path / "legacy-new.html").read_bytes() == expected
    assert (tmp_path / name).read_bytes() == b"\x00\x00\x00"
