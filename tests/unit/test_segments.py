"""Extraction of the first image from multi-part replies."""

import pytest

from gemini_mocks.core import (
    InlineImage,
    MultipartExtractor,
    RawResponse,
    first_image,
)
from gemini_mocks.core.types import BinarySegment, TextSegment

pytestmark = pytest.mark.unit


class TestFirstImage:
    def test_text_then_image_returns_the_image(self):
        png = b"\x89PNG\r\n\x1a\n"
        segments = [
            TextSegment("Here's your image"),
            BinarySegment(data=png, mime_type="image/png"),
        ]

        assert first_image(segments) == InlineImage(data=png, mime_type="image/png")

    def test_first_of_several_binary_segments_wins(self):
        segments = [
            BinarySegment(data=b"first", mime_type="image/jpeg"),
            TextSegment("between"),
            BinarySegment(data=b"second", mime_type="image/png"),
        ]

        image = first_image(segments)

        assert image is not None
        assert image.data == b"first"
        assert image.mime_type == "image/jpeg"

    @pytest.mark.parametrize(
        "segments",
        [[], [TextSegment("I can't draw that.")], [TextSegment("a"), TextSegment("b")]],
    )
    def test_no_binary_segment_returns_none(self, segments):
        assert first_image(segments) is None

    def test_repeated_calls_return_equal_results(self):
        extractor = MultipartExtractor()
        segments = (TextSegment("x"), BinarySegment(b"data", "image/webp"))

        assert extractor.first_image(segments) == extractor.first_image(segments)

    def test_extract_reads_response_segments(self):
        response = RawResponse(
            text="caption",
            segments=(TextSegment("caption"), BinarySegment(b"img", "image/png")),
        )

        assert MultipartExtractor().extract(response) == InlineImage(b"img", "image/png")


class TestSegmentTypes:
    def test_binary_segment_rejects_text_payload(self):
        with pytest.raises(TypeError):
            BinarySegment(data="not bytes", mime_type="image/png")  # type: ignore[arg-type]

    def test_inline_image_base64_helpers(self):
        image = InlineImage.from_base64("aGVsbG8=", "image/png")

        assert image.data == b"hello"
        assert image.to_base64() == "aGVsbG8="
