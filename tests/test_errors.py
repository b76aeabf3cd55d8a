"""Tests for extraction exception classes."""

from __future__ import annotations

from datauri_extract.errors import (
    ExtractError,
    MalformedBase64Error,
    UnknownLeadInKindError,
    UnterminatedCaptureError,
)


class TestExtractErrors:
    def test_unterminated_capture_basic(self) -> None:
        error = UnterminatedCaptureError(31)
        assert error.offset == 31
        assert error.what == "capture"
        assert str(error) == "No end to capture starting at position: 31"

    def test_unterminated_url(self) -> None:
        error = UnterminatedCaptureError(12, "url(")
        assert str(error) == "No end to url( starting at position: 12"

    def test_malformed_base64_with_cause(self) -> None:
        cause = ValueError("Incorrect padding")
        error = MalformedBase64Error(7, cause=cause)
        assert error.cause is cause
        assert str(error) == "Malformed base64 payload at position: 7: Incorrect padding"

    def test_malformed_base64_without_cause(self) -> None:
        assert str(MalformedBase64Error(3)) == "Malformed base64 payload at position: 3"

    def test_unknown_lead_in_kind(self) -> None:
        error = UnknownLeadInKindError("poster")
        assert error.keyword == "poster"
        assert str(error) == "Unknown match 'poster'. Valid kinds: url, src, href"

    def test_all_are_extract_errors(self) -> None:
        for error in (
            UnterminatedCaptureError(0),
            MalformedBase64Error(0),
            UnknownLeadInKindError("x"),
        ):
            assert isinstance(error, ExtractError)
            assert isinstance(error, RuntimeError)
