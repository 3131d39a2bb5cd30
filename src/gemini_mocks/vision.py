"""Image description and image-to-image editing."""

from __future__ import annotations

import logging

from gemini_mocks.adapters.base import GenerationAdapter
from gemini_mocks.core.segments import MultipartExtractor
from gemini_mocks.core.types import GenerationRequest, InlineImage, Modality, _require
from gemini_mocks.mockdata.prompts import DESCRIBE_IMAGE
from gemini_mocks.telemetry import TelemetryContext, TelemetryContextProtocol

log = logging.getLogger(__name__)


def as_image(image: InlineImage | str, mime_type: str | None = None) -> InlineImage:
    """Accept an ``InlineImage`` or a base64 payload plus its mime type."""
    if isinstance(image, InlineImage):
        return image
    _require(
        condition=bool(mime_type),
        message="is required when the image is a base64 string",
        field_name="mime_type",
    )
    return InlineImage.from_base64(image, mime_type)


class VisionOperations:
    """Describe and edit single images through an adapter."""

    def __init__(
        self,
        adapter: GenerationAdapter,
        *,
        image_model: str | None = None,
        extractor: MultipartExtractor | None = None,
        telemetry: TelemetryContextProtocol | None = None,
    ) -> None:
        self._adapter = adapter
        self._image_model = image_model
        self._extractor = extractor or MultipartExtractor()
        self._telemetry = telemetry or TelemetryContext()

    async def describe_image(
        self, image: InlineImage | str, mime_type: str | None = None
    ) -> str | None:
        """Return a detailed description of the image, or None if empty.

        Raises:
            APIError: If the remote call did not complete.
        """
        request = GenerationRequest(
            instruction=DESCRIBE_IMAGE,
            modality=Modality.TEXT,
            image=as_image(image, mime_type),
        )
        with self._telemetry("vision.describe"):
            response = await self._adapter.generate(request)
        return response.text or None

    async def edit_image(
        self,
        image: InlineImage | str,
        prompt: str,
        mime_type: str | None = None,
    ) -> InlineImage | None:
        """Edit the image as the prompt describes.

        Returns:
            The first image part of the reply, or None when the model
            returned no image.

        Raises:
            APIError: If the remote call did not complete.
        """
        request = GenerationRequest(
            instruction=prompt,
            modality=Modality.IMAGE,
            model=self._image_model,
            image=as_image(image, mime_type),
        )
        with self._telemetry("vision.edit"):
            response = await self._adapter.generate(request)
        edited = self._extractor.extract(response)
        if edited is None:
            log.info("Image edit returned no image part (%d segments).", len(response.segments))
        return edited
