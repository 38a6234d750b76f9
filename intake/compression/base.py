from abc import ABC, abstractmethod


class BaseImageCompressor(ABC):
    """Contract for all image compression adapters."""

    @abstractmethod
    async def compress_file(
        self,
        image: str,
        orientation: int,
        ratio: int | None = None,
        quality: int | None = None,
        max_width: int | None = None,
        max_height: int | None = None,
    ) -> str:
        """Compress an image given as a base64 data URL.

        Args:
            image: ``data:<mime>;base64,<payload>`` URL of the source image.
            orientation: EXIF orientation (1-8); -1 and -2 leave the image as is.
            ratio: Scale in percent of the source dimensions.
            quality: Encoder quality in percent, for lossy formats.
            max_width: Upper bound on the output width in pixels.
            max_height: Upper bound on the output height in pixels.

        Returns:
            Data URL of the compressed image, same mimetype as the source.

        Raises:
            CompressionError: on any failure.
        """
