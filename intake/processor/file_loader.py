import mimetypes
from pathlib import Path

from intake.processor.exceptions import FileReadError
from intake.processor.models import CandidateFile


def guess_mime_type(path: Path) -> str:
    """Mimetype from the file extension, or "" when unknown."""
    mime_type, _ = mimetypes.guess_type(path.name)
    return mime_type or ""


class FileLoader:
    """Reads a file from disk into a CandidateFile."""

    def __init__(self, files_root: Path | None = None) -> None:
        self._files_root = files_root

    def load(self, path: Path) -> CandidateFile:
        """Read the file at ``path``, relative paths resolved against files_root.

        Raises:
            FileNotFoundError: if nothing exists at the resolved path.
            FileReadError: if the path cannot be read.
        """
        resolved = self._resolve_path(path)
        if not resolved.exists():
            raise FileNotFoundError(f"File not found: {resolved}")
        try:
            content = resolved.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Cannot read {resolved}: {exc}") from exc
        return CandidateFile.from_bytes(resolved.name, content, mime_type=guess_mime_type(resolved))

    def _resolve_path(self, path: Path) -> Path:
        if self._files_root is None or path.is_absolute():
            return path
        return self._files_root / path
