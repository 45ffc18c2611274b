import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path

from tablemap_client.config.settings import Settings
from tablemap_client.logging.logger import Log
from tablemap_client.normalization.normalizer import ResponseNormalizer
from tablemap_client.selection.picker import build_picker
from tablemap_client.upload.factory import UploadClientFactory
from tablemap_client.upload.orchestrator import UploadOrchestrator, WorkflowSnapshot
from tablemap_client.upload.state import WorkflowState


def build_orchestrator(settings: Settings) -> UploadOrchestrator:
    """Build an UploadOrchestrator with the configured upload client."""
    return UploadOrchestrator(
        client=UploadClientFactory.create(settings),
        normalizer=ResponseNormalizer(),
        preview_dir=settings.preview_dir,
    )


def render(snapshot: WorkflowSnapshot) -> str:
    if snapshot.error is not None:
        return snapshot.error
    if snapshot.result is not None:
        return snapshot.result.text
    return ""


async def run(settings: Settings, paths: Sequence[Path]) -> int:
    """Pick -> select -> submit -> print. Returns the process exit code."""
    candidates = build_picker(settings).pick(paths)
    async with build_orchestrator(settings) as orchestrator:
        orchestrator.select(candidates)
        if orchestrator.preview is not None:
            Log.info(f"Preview available at {orchestrator.preview.uri}")
        state = await orchestrator.submit()
        print(render(orchestrator.snapshot()))
    return 0 if state is WorkflowState.SUCCEEDED else 1


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: settings -> logging -> upload the first acceptable image."""
    args = sys.argv[1:] if argv is None else list(argv)
    settings = Settings()
    Log.configure(settings.log_level)
    return asyncio.run(run(settings, [Path(arg) for arg in args]))


if __name__ == "__main__":
    sys.exit(main())
