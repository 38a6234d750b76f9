from intake.compression.adapter import ImageCompressionAdapter
from intake.logging.logger import Log
from intake.processor.accept_matcher import is_accepted
from intake.processor.models import CompressionParams, RejectReason
from intake.processor.pipeline import FileContext, PipelineStep
from intake.processor.validators import fits_size, selection_exhausted


class AcceptTypeStep(PipelineStep):
    def __init__(self, accept: str) -> None:
        self._accept = accept

    async def run(self, context: FileContext) -> FileContext:
        if not is_accepted(context.file, self._accept):
            context.reason = RejectReason.TYPE
        return context


class SingleSelectionStep(PipelineStep):
    def __init__(self, allow_multiple: bool) -> None:
        self._allow_multiple = allow_multiple

    async def run(self, context: FileContext) -> FileContext:
        if selection_exhausted(self._allow_multiple, context.added_count):
            context.reason = RejectReason.SINGLE_SELECTION_EXCEEDED
        return context


class CompressImageStep(PipelineStep):
    def __init__(self, adapter: ImageCompressionAdapter, params: CompressionParams) -> None:
        self._adapter = adapter
        self._params = params

    async def run(self, context: FileContext) -> FileContext:
        if not self._adapter.applies_to(context.file):
            return context
        original_size = context.file.byte_size
        context.file = await self._adapter.transform(context.file, self._params)
        context.original_size = original_size
        Log.debug(
            f"Compressed {context.file.name}: {original_size} -> {context.file.byte_size} bytes"
        )
        return context


class SizeLimitStep(PipelineStep):
    def __init__(self, max_byte_size: int | None) -> None:
        self._max_byte_size = max_byte_size

    async def run(self, context: FileContext) -> FileContext:
        if not fits_size(context.file, self._max_byte_size):
            context.reason = RejectReason.SIZE
        return context
