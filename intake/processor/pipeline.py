from abc import ABC, abstractmethod
from dataclasses import dataclass

from intake.processor.models import AddedFile, CandidateFile, Outcome, RejectedFile, RejectReason


@dataclass(slots=True)
class FileContext:
    """State of one candidate while it moves through the steps."""

    file: CandidateFile
    remaining_count: int
    added_count: int
    original_size: int | None = None
    reason: RejectReason | None = None

    @property
    def rejected(self) -> bool:
        return self.reason is not None

    def to_outcome(self) -> Outcome:
        if self.reason is not None:
            return RejectedFile(file=self.file, reason=self.reason, original_size=self.original_size)
        return AddedFile(file=self.file, original_size=self.original_size)


class PipelineStep(ABC):
    @abstractmethod
    async def run(self, context: FileContext) -> FileContext:
        raise NotImplementedError
