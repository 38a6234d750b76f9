import asyncio
import io

from PIL import Image, UnidentifiedImageError

from intake.compression.base import BaseImageCompressor
from intake.compression.codec import decode_data_url, encode_data_url
from intake.compression.exceptions import CompressionError, ImageDecodeError

# EXIF orientation -> transpose that brings the image upright
_ORIENTATION_TRANSPOSE = {
    2: Image.Transpose.FLIP_LEFT_RIGHT,
    3: Image.Transpose.ROTATE_180,
    4: Image.Transpose.FLIP_TOP_BOTTOM,
    5: Image.Transpose.TRANSPOSE,
    6: Image.Transpose.ROTATE_270,
    7: Image.Transpose.TRANSVERSE,
    8: Image.Transpose.ROTATE_90,
}
_LOSSY_FORMATS = frozenset({"JPEG", "WEBP"})
_JPEG_MODES = frozenset({"RGB", "L", "CMYK"})
# Multi-picture JPEGs from phone cameras open as MPO; re-encode the primary frame as JPEG
_SAVE_FORMAT = {"MPO": "JPEG"}


class PillowImageCompressor(BaseImageCompressor):
    """Downscales and re-encodes images with Pillow.

    The output keeps the source format, except MPO which is written as
    plain JPEG. Decoding and encoding run in a worker thread.
    """

    def __init__(self, default_ratio: int = 50, default_quality: int = 50) -> None:
        self._default_ratio = default_ratio
        self._default_quality = default_quality

    async def compress_file(
        self,
        image: str,
        orientation: int,
        ratio: int | None = None,
        quality: int | None = None,
        max_width: int | None = None,
        max_height: int | None = None,
    ) -> str:
        mime_type, content = decode_data_url(image)
        compressed = await asyncio.to_thread(
            self._compress,
            content,
            orientation,
            ratio if ratio is not None else self._default_ratio,
            quality if quality is not None else self._default_quality,
            max_width,
            max_height,
        )
        return encode_data_url(compressed, mime_type)

    def _compress(
        self,
        content: bytes,
        orientation: int,
        ratio: int,
        quality: int,
        max_width: int | None,
        max_height: int | None,
    ) -> bytes:
        try:
            with Image.open(io.BytesIO(content)) as source:
                image_format = _save_format(source.format)
                image = _apply_orientation(source, orientation)
                size = target_size(image.size, ratio, max_width, max_height)
                if size != image.size:
                    image = image.resize(size, Image.Resampling.LANCZOS)
                return _encode(image, image_format, quality)
        except UnidentifiedImageError as exc:
            raise ImageDecodeError(f"Not a decodable image: {exc}") from exc
        except Exception as exc:
            raise CompressionError(f"pillow compression failed: {exc}") from exc


def target_size(
    size: tuple[int, int],
    ratio: int,
    max_width: int | None = None,
    max_height: int | None = None,
) -> tuple[int, int]:
    """Scale ``size`` by ``ratio`` percent, shrinking further to fit the bounds."""
    width, height = size
    scale = ratio / 100
    if max_width:
        scale = min(scale, max_width / width)
    if max_height:
        scale = min(scale, max_height / height)
    return max(1, round(width * scale)), max(1, round(height * scale))


def _save_format(source_format: str | None) -> str:
    if source_format is None:
        return "PNG"
    return _SAVE_FORMAT.get(source_format, source_format)


def _apply_orientation(image: Image.Image, orientation: int) -> Image.Image:
    method = _ORIENTATION_TRANSPOSE.get(orientation)
    if method is None:
        return image
    return image.transpose(method)


def _encode(image: Image.Image, image_format: str, quality: int) -> bytes:
    buf = io.BytesIO()
    if image_format in _LOSSY_FORMATS:
        if image_format == "JPEG" and image.mode not in _JPEG_MODES:
            image = image.convert("RGB")
        image.save(buf, format=image_format, quality=quality)
    else:
        image.save(buf, format=image_format, optimize=True)
    return buf.getvalue()
