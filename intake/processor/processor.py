from collections.abc import Iterable

from intake.compression.adapter import ImageCompressionAdapter
from intake.compression.exceptions import CompressionError
from intake.compression.factory import CompressorFactory
from intake.config.settings import Settings
from intake.logging.logger import Log
from intake.processor.models import (
    CandidateFile,
    FileStatus,
    ProcessingConfig,
    ProgressEvent,
    ProgressListener,
    RejectedFile,
    ResultPartition,
)
from intake.processor.pipeline import FileContext, PipelineStep
from intake.processor.steps import (
    AcceptTypeStep,
    CompressImageStep,
    SingleSelectionStep,
    SizeLimitStep,
)


class IngestionPipeline:
    """Sorts a batch of candidate files into added and rejected.

    Per candidate: accept type -> single selection -> compression -> size.
    Candidates are evaluated strictly one after another in input order, and
    the progress event for a candidate is emitted before the next one starts.
    A compression failure aborts the whole batch.
    """

    def __init__(self, compression_adapter: ImageCompressionAdapter | None = None) -> None:
        self._compression_adapter = compression_adapter

    async def process(
        self,
        candidates: Iterable[CandidateFile],
        config: ProcessingConfig,
        on_file_processed: ProgressListener | None = None,
    ) -> ResultPartition:
        """Evaluate every candidate and return the partition.

        Raises:
            CompressionError: if compressing any candidate fails.
            ValueError: if compression is requested without a compression adapter.
        """
        files = list(candidates)
        steps = self.build_steps(config)
        partition = ResultPartition()
        remaining = len(files)
        Log.info(
            f"Processing {remaining} files (accept={config.accept!r}, "
            f"max_byte_size={config.max_byte_size}, multiple={config.allow_multiple}, "
            f"compression={config.compression.mode.value})"
        )

        for file in files:
            remaining -= 1
            context = FileContext(
                file=file,
                remaining_count=remaining,
                added_count=len(partition.added_files),
            )
            try:
                context = await self._run_steps(steps, context)
            except CompressionError:
                Log.exception(f"Compression failed for {file.name}, aborting batch")
                raise

            status = self._record(partition, context)
            if on_file_processed is not None:
                on_file_processed(
                    ProgressEvent(file=context.file, remaining_count=remaining, status=status)
                )

        Log.info(
            f"Batch done: {len(partition.added_files)} added, "
            f"{len(partition.rejected_files)} rejected"
        )
        return partition

    def build_steps(self, config: ProcessingConfig) -> list[PipelineStep]:
        steps: list[PipelineStep] = [
            AcceptTypeStep(config.accept),
            SingleSelectionStep(config.allow_multiple),
        ]
        if config.compression.enabled:
            if self._compression_adapter is None:
                raise ValueError("Compression requested but no compression adapter is configured")
            steps.append(
                CompressImageStep(self._compression_adapter, config.compression.resolve_params())
            )
        steps.append(SizeLimitStep(config.max_byte_size))
        return steps

    @staticmethod
    async def _run_steps(steps: list[PipelineStep], context: FileContext) -> FileContext:
        for step in steps:
            context = await step.run(context)
            if context.rejected:
                break
        return context

    @staticmethod
    def _record(partition: ResultPartition, context: FileContext) -> FileStatus:
        outcome = context.to_outcome()
        if isinstance(outcome, RejectedFile):
            partition.rejected_files.append(outcome)
            Log.info(f"Rejected {outcome.file.name}: {outcome.reason.value}")
            return FileStatus.REJECTED
        partition.added_files.append(outcome)
        Log.debug(f"Added {outcome.file.name} ({context.remaining_count} remaining)")
        return FileStatus.ADDED


def build_pipeline(settings: Settings) -> IngestionPipeline:
    """Build an IngestionPipeline with the configured compressor."""
    compressor = CompressorFactory.create(settings)
    return IngestionPipeline(compression_adapter=ImageCompressionAdapter(compressor))
