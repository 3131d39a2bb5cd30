"""Extraction of image payloads from multi-part model replies."""

from collections.abc import Iterable
import logging

from gemini_mocks.core.types import (
    BinarySegment,
    InlineImage,
    RawResponse,
    ResponseSegment,
)

log = logging.getLogger(__name__)


class MultipartExtractor:
    """Picks the first inline binary part out of an ordered segment list.

    A reply without any binary part is an expected outcome (the model may
    decline to draw) and yields None rather than an error.
    """

    def first_image(self, segments: Iterable[ResponseSegment]) -> InlineImage | None:
        """Return the first binary segment as an image, or None."""
        for segment in segments:
            if isinstance(segment, BinarySegment):
                return InlineImage(data=bytes(segment.data), mime_type=segment.mime_type)
        log.debug("No inline binary segment found in response.")
        return None

    def extract(self, response: RawResponse) -> InlineImage | None:
        """Return the first image carried by a raw response, or None."""
        return self.first_image(response.segments)


def first_image(segments: Iterable[ResponseSegment]) -> InlineImage | None:
    """Module-level shortcut for ``MultipartExtractor().first_image``."""
    return MultipartExtractor().first_image(segments)
