from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from intake.config.settings import Settings


class RejectReason(str, Enum):
    """Why a candidate did not make it into the working set."""

    TYPE = "type"
    SIZE = "size"
    SINGLE_SELECTION_EXCEEDED = "single_selection_exceeded"


class FileStatus(str, Enum):
    ADDED = "added"
    REJECTED = "rejected"


class CompressionMode(str, Enum):
    OFF = "off"
    DEFAULT = "default"
    EXPLICIT = "explicit"


@dataclass(frozen=True)
class CandidateFile:
    """Immutable descriptor of a user-selected file."""

    name: str
    mime_type: str
    byte_size: int
    content: bytes = field(default=b"", repr=False)

    @classmethod
    def from_bytes(cls, name: str, content: bytes, mime_type: str = "") -> "CandidateFile":
        return cls(name=name, mime_type=mime_type, byte_size=len(content), content=content)


@dataclass(frozen=True)
class CompressionParams:
    """Parameters forwarded to the image compressor.

    Unset values fall back to the compressor's own defaults.
    """

    orientation: int = -1
    max_width: int | None = None
    max_height: int | None = None
    quality: int | None = None
    ratio: int | None = None


@dataclass(frozen=True)
class CompressionSetting:
    """Whether and how image candidates are compressed."""

    mode: CompressionMode = CompressionMode.OFF
    params: CompressionParams | None = None

    @classmethod
    def off(cls) -> "CompressionSetting":
        return cls(mode=CompressionMode.OFF)

    @classmethod
    def default(cls) -> "CompressionSetting":
        return cls(mode=CompressionMode.DEFAULT)

    @classmethod
    def explicit(cls, params: CompressionParams) -> "CompressionSetting":
        return cls(mode=CompressionMode.EXPLICIT, params=params)

    @classmethod
    def coerce(cls, value: "bool | CompressionParams | CompressionSetting | None") -> "CompressionSetting":
        """Build a setting from the caller-facing ``bool | params`` option."""
        if isinstance(value, CompressionSetting):
            return value
        if isinstance(value, CompressionParams):
            return cls.explicit(value)
        if value:
            return cls.default()
        return cls.off()

    @property
    def enabled(self) -> bool:
        return self.mode is not CompressionMode.OFF

    def resolve_params(self) -> CompressionParams:
        if self.mode is CompressionMode.EXPLICIT and self.params is not None:
            return self.params
        return CompressionParams()


@dataclass(frozen=True)
class ProcessingConfig:
    """Acceptance rules applied to one batch of candidates."""

    accept: str = "*"
    max_byte_size: int | None = None
    allow_multiple: bool = True
    compression: CompressionSetting = field(default_factory=CompressionSetting.off)

    def __post_init__(self) -> None:
        if self.max_byte_size is not None and self.max_byte_size <= 0:
            raise ValueError(f"max_byte_size must be positive or None, got {self.max_byte_size}")

    @classmethod
    def from_settings(cls, settings: "Settings") -> "ProcessingConfig":
        return cls(
            accept=settings.accept_spec,
            max_byte_size=settings.max_file_size_bytes,
            allow_multiple=settings.allow_multiple,
            compression=_compression_from_settings(settings),
        )


def _compression_from_settings(settings: "Settings") -> CompressionSetting:
    if not settings.compression_enabled:
        return CompressionSetting.off()
    params = CompressionParams(
        orientation=settings.compression_orientation,
        max_width=settings.compression_max_width,
        max_height=settings.compression_max_height,
        quality=settings.compression_quality,
        ratio=settings.compression_ratio,
    )
    if params == CompressionParams():
        return CompressionSetting.default()
    return CompressionSetting.explicit(params)


@dataclass(frozen=True)
class AddedFile:
    """A candidate accepted into the working set, possibly compressed."""

    file: CandidateFile
    original_size: int | None = None


@dataclass(frozen=True)
class RejectedFile:
    """A candidate turned away, with the reason."""

    file: CandidateFile
    reason: RejectReason
    original_size: int | None = None


Outcome = AddedFile | RejectedFile


@dataclass(frozen=True)
class ProgressEvent:
    file: CandidateFile
    remaining_count: int
    status: FileStatus


ProgressListener = Callable[[ProgressEvent], None]


@dataclass
class ResultPartition:
    """Accepted and rejected candidates of one batch, each in input order."""

    added_files: list[AddedFile] = field(default_factory=list)
    rejected_files: list[RejectedFile] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.added_files) + len(self.rejected_files)
