from unittest.mock import AsyncMock

import pytest

from intake.compression.adapter import ImageCompressionAdapter
from intake.compression.base import BaseImageCompressor
from intake.compression.codec import encode_data_url
from intake.compression.exceptions import CompressionError, ImageDecodeError
from intake.processor.models import CandidateFile, CompressionParams


def _image_file(content: bytes = b"0123456789") -> CandidateFile:
    return CandidateFile.from_bytes("photo.jpg", content, mime_type="image/jpeg")


def _make_adapter(compressed: bytes = b"01234") -> tuple[ImageCompressionAdapter, AsyncMock]:
    compressor = AsyncMock(spec=BaseImageCompressor)
    compressor.compress_file.return_value = encode_data_url(compressed, "image/jpeg")
    return ImageCompressionAdapter(compressor), compressor


class TestAppliesTo:
    @pytest.mark.parametrize("mime_type", ["image/png", "image/jpeg", "application/x-image"])
    def test_image_types(self, mime_type: str) -> None:
        file = CandidateFile.from_bytes("f", b"", mime_type=mime_type)
        assert ImageCompressionAdapter.applies_to(file)

    @pytest.mark.parametrize(
        "mime_type", ["", "video/mp4", "text/plain", "image/svg+xml", "image/SVG+xml"]
    )
    def test_other_types(self, mime_type: str) -> None:
        file = CandidateFile.from_bytes("f", b"", mime_type=mime_type)
        assert not ImageCompressionAdapter.applies_to(file)


class TestTransform:
    @pytest.mark.asyncio
    async def test_returns_new_file_with_same_name_and_type(self) -> None:
        adapter, _compressor = _make_adapter(compressed=b"01234")
        result = await adapter.transform(_image_file(), CompressionParams())
        assert result == CandidateFile(
            name="photo.jpg", mime_type="image/jpeg", byte_size=5, content=b"01234"
        )

    @pytest.mark.asyncio
    async def test_sends_data_url_and_params(self) -> None:
        adapter, compressor = _make_adapter()
        file = _image_file()
        params = CompressionParams(orientation=3, max_width=800, max_height=600, quality=70, ratio=80)

        await adapter.transform(file, params)

        compressor.compress_file.assert_awaited_once_with(
            encode_data_url(file.content, "image/jpeg"), 3, 80, 70, 800, 600
        )

    @pytest.mark.asyncio
    async def test_default_params_leave_compressor_defaults(self) -> None:
        adapter, compressor = _make_adapter()
        file = _image_file()

        await adapter.transform(file, CompressionParams())

        compressor.compress_file.assert_awaited_once_with(
            encode_data_url(file.content, "image/jpeg"), -1, None, None, None, None
        )

    @pytest.mark.asyncio
    async def test_compression_error_propagates(self) -> None:
        adapter, compressor = _make_adapter()
        compressor.compress_file.side_effect = ImageDecodeError("broken")

        with pytest.raises(ImageDecodeError, match="broken"):
            await adapter.transform(_image_file(), CompressionParams())

    @pytest.mark.asyncio
    async def test_wraps_unexpected_errors(self) -> None:
        adapter, compressor = _make_adapter()
        compressor.compress_file.side_effect = RuntimeError("engine crashed")

        with pytest.raises(CompressionError, match="photo.jpg") as exc_info:
            await adapter.transform(_image_file(), CompressionParams())
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    @pytest.mark.asyncio
    async def test_raises_when_compressor_returns_garbage(self) -> None:
        adapter, compressor = _make_adapter()
        compressor.compress_file.return_value = "not a data url"

        with pytest.raises(ImageDecodeError):
            await adapter.transform(_image_file(), CompressionParams())
