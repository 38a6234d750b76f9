import pytest

from intake.compression.factory import CompressorFactory
from intake.compression.passthrough_adapter import PassthroughImageCompressor
from intake.compression.pillow_adapter import PillowImageCompressor
from intake.config.settings import Settings


class TestCompressorFactory:
    def test_creates_pillow_compressor(self) -> None:
        compressor = CompressorFactory.create(Settings(compression_engine="pillow"))
        assert isinstance(compressor, PillowImageCompressor)

    def test_creates_passthrough_compressor(self) -> None:
        compressor = CompressorFactory.create(Settings(compression_engine="passthrough"))
        assert isinstance(compressor, PassthroughImageCompressor)

    def test_is_case_insensitive(self) -> None:
        compressor = CompressorFactory.create(Settings(compression_engine="Pillow"))
        assert isinstance(compressor, PillowImageCompressor)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown compression engine"):
            CompressorFactory.create(Settings(compression_engine="imagemagick"))
