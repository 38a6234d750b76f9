from typing import ClassVar

from intake.compression.base import BaseImageCompressor
from intake.compression.passthrough_adapter import PassthroughImageCompressor
from intake.compression.pillow_adapter import PillowImageCompressor
from intake.config.settings import Settings


class CompressorFactory:
    """Creates the configured image compressor."""

    ENGINES: ClassVar[tuple[str, ...]] = ("pillow", "passthrough")

    @classmethod
    def create(cls, settings: Settings) -> BaseImageCompressor:
        engine = settings.compression_engine.lower()
        if engine == "pillow":
            return PillowImageCompressor(
                default_ratio=settings.compression_default_ratio,
                default_quality=settings.compression_default_quality,
            )
        if engine == "passthrough":
            return PassthroughImageCompressor()
        raise ValueError(
            f"Unknown compression engine '{engine}'. Choose from: {list(cls.ENGINES)}"
        )
