import asyncio
import sys
from pathlib import Path

from intake.config.settings import Settings
from intake.logging.logger import Log
from intake.processor.file_loader import FileLoader
from intake.processor.models import ProcessingConfig, ProgressEvent
from intake.processor.processor import build_pipeline


def _log_progress(event: ProgressEvent) -> None:
    Log.info(f"{event.file.name}: {event.status.value} ({event.remaining_count} remaining)")


def main(argv: list[str] | None = None) -> None:
    """Entry point: settings -> logging -> pipeline -> process the given paths."""
    settings = Settings()
    Log.configure(settings.log_level)

    args = sys.argv[1:] if argv is None else argv
    loader = FileLoader()
    candidates = [loader.load(Path(arg)) for arg in args]

    pipeline = build_pipeline(settings)
    result = asyncio.run(
        pipeline.process(
            candidates,
            ProcessingConfig.from_settings(settings),
            on_file_processed=_log_progress,
        )
    )

    for added in result.added_files:
        Log.info(f"Added {added.file.name} ({added.file.byte_size} bytes)")
    for rejected in result.rejected_files:
        Log.info(f"Rejected {rejected.file.name}: {rejected.reason.value}")


if __name__ == "__main__":
    main()
