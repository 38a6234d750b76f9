"""Identity compressor.

Handy for local development and tests, and as a template for real adapters:
implement BaseImageCompressor and register the engine in CompressorFactory.
"""

from intake.compression.base import BaseImageCompressor


class PassthroughImageCompressor(BaseImageCompressor):
    """Returns the source image unchanged."""

    async def compress_file(
        self,
        image: str,
        orientation: int,
        ratio: int | None = None,
        quality: int | None = None,
        max_width: int | None = None,
        max_height: int | None = None,
    ) -> str:
        _ = orientation, ratio, quality, max_width, max_height
        return image
