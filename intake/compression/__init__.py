from intake.compression.adapter import ImageCompressionAdapter
from intake.compression.base import BaseImageCompressor
from intake.compression.exceptions import CompressionError, ImageDecodeError
from intake.compression.factory import CompressorFactory

__all__ = [
    "BaseImageCompressor",
    "CompressionError",
    "CompressorFactory",
    "ImageCompressionAdapter",
    "ImageDecodeError",
]
