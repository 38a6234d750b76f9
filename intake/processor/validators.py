from intake.processor.models import CandidateFile


def fits_size(file: CandidateFile, max_byte_size: int | None) -> bool:
    """Return True if the file is within the size ceiling (None means unlimited)."""
    if max_byte_size is None:
        return True
    return file.byte_size <= max_byte_size


def selection_exhausted(allow_multiple: bool, added_count: int) -> bool:
    """Return True if single-selection mode already holds its one file.

    Only files added earlier in the same batch count; the batch length does not.
    """
    return not allow_multiple and added_count >= 1
