class CompressionError(Exception):
    """Raised when an image cannot be compressed."""


class ImageDecodeError(CompressionError):
    """Raised when a payload is not a decodable data URL or image."""
