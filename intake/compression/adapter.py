from intake.compression.base import BaseImageCompressor
from intake.compression.codec import decode_data_url, encode_data_url
from intake.compression.exceptions import CompressionError
from intake.processor.models import CandidateFile, CompressionParams

# Vector formats have no pixels to rescale
VECTOR_MIME_TYPES = frozenset({"image/svg+xml"})


class ImageCompressionAdapter:
    """Runs image candidates through an image compressor.

    The file crosses the compressor boundary as a base64 data URL and comes
    back as a new CandidateFile with the same name and mimetype.
    """

    def __init__(self, compressor: BaseImageCompressor) -> None:
        self._compressor = compressor

    @staticmethod
    def applies_to(file: CandidateFile) -> bool:
        return "image" in file.mime_type and file.mime_type.lower() not in VECTOR_MIME_TYPES

    async def transform(self, file: CandidateFile, params: CompressionParams) -> CandidateFile:
        """Compress ``file`` and return the result.

        Raises:
            CompressionError: on any failure, including ones raised by the compressor.
        """
        try:
            compressed = await self._compressor.compress_file(
                encode_data_url(file.content, file.mime_type),
                params.orientation,
                params.ratio,
                params.quality,
                params.max_width,
                params.max_height,
            )
            _, content = decode_data_url(compressed)
        except CompressionError:
            raise
        except Exception as exc:
            raise CompressionError(f"Compression of '{file.name}' failed: {exc}") from exc
        return CandidateFile.from_bytes(file.name, content, mime_type=file.mime_type)
