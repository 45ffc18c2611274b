"""Upload-and-analyze workflow: selection -> upload -> normalization."""

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from types import TracebackType

from tablemap_client.logging.logger import Log
from tablemap_client.normalization.base import BaseResponseNormalizer
from tablemap_client.normalization.models import NormalizedResult
from tablemap_client.normalization.normalizer import ResponseNormalizer
from tablemap_client.preview.handle import PreviewHandle
from tablemap_client.selection.models import SelectedFile
from tablemap_client.selection.selector import select_first
from tablemap_client.upload.client_base import BaseUploadClient
from tablemap_client.upload.exceptions import NoFileSelectedError, UploadTransportError
from tablemap_client.upload.state import WorkflowState, validate_transition

NO_FILE_MESSAGE = "Please select an image first."


def _caller_cancelled() -> bool:
    current = asyncio.current_task()
    return current is not None and current.cancelling() > 0


@dataclass(frozen=True)
class WorkflowSnapshot:
    """Read-only view of the workflow for rendering."""

    state: WorkflowState
    file_name: str | None
    preview_uri: str | None
    result: NormalizedResult | None
    error: str | None

    @property
    def loading(self) -> bool:
        return self.state is WorkflowState.UPLOADING

    @property
    def submit_enabled(self) -> bool:
        return not self.loading


class UploadOrchestrator:
    """Owns the workflow state, the selected file and its preview.

    All state changes go through ``_transition``, which validates the edge and
    replaces result and error together, so a Failed workflow never carries a
    result and an Uploading one never shows a stale error. At most one upload
    runs at a time; selecting a new file cancels it and any late response is
    discarded.
    """

    def __init__(
        self,
        client: BaseUploadClient,
        normalizer: BaseResponseNormalizer | None = None,
        *,
        preview_dir: Path | None = None,
    ) -> None:
        self._client = client
        self._normalizer = normalizer if normalizer is not None else ResponseNormalizer()
        self._preview_dir = preview_dir

        self._state = WorkflowState.IDLE
        self._file: SelectedFile | None = None
        self._preview: PreviewHandle | None = None
        self._result: NormalizedResult | None = None
        self._error: str | None = None

        self._generation = 0
        self._inflight: asyncio.Future[object] | None = None
        self._closed = False

    @property
    def state(self) -> WorkflowState:
        return self._state

    @property
    def selected_file(self) -> SelectedFile | None:
        return self._file

    @property
    def preview(self) -> PreviewHandle | None:
        return self._preview

    @property
    def result(self) -> NormalizedResult | None:
        return self._result

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def submit_enabled(self) -> bool:
        return self._state is not WorkflowState.UPLOADING

    def snapshot(self) -> WorkflowSnapshot:
        return WorkflowSnapshot(
            state=self._state,
            file_name=self._file.name if self._file is not None else None,
            preview_uri=self._preview.uri if self._preview is not None else None,
            result=self._result,
            error=self._error,
        )

    def select(self, candidates: Sequence[SelectedFile]) -> bool:
        """Adopt the first candidate; an empty list changes nothing.

        Returns True if a new file was chosen.
        """
        self._ensure_open()
        file = select_first(candidates)
        if file is None:
            Log.debug("Empty selection ignored")
            return False

        preview = PreviewHandle.create(file, self._preview_dir)
        self._release_preview()
        self._cancel_inflight()
        self._generation += 1
        self._file = file
        self._preview = preview
        self._transition(WorkflowState.FILE_CHOSEN)
        Log.info(f"Selected {file.name} ({file.media_type}, {file.size_bytes} bytes)")
        return True

    async def submit(self) -> WorkflowState:
        """Upload the chosen file and adopt the normalized response.

        Returns the workflow state after the attempt. Transport failures end in
        Failed; a second submit while Uploading is ignored.
        """
        self._ensure_open()
        if self._state is WorkflowState.UPLOADING:
            Log.debug("Upload already in flight, submit ignored")
            return self._state

        try:
            file = self._require_file()
        except NoFileSelectedError as exc:
            self._error = str(exc)
            Log.warning(f"Submit rejected: {exc}")
            return self._state

        generation = self._generation
        self._transition(WorkflowState.UPLOADING)
        Log.info(f"Uploading {file.name}")

        task = asyncio.ensure_future(self._client.upload(file))
        self._inflight = task
        try:
            payload = await task
        except asyncio.CancelledError:
            if self._is_stale(generation) and not _caller_cancelled():
                Log.info(f"Upload of {file.name} cancelled")
                return self._state
            if not self._is_stale(generation):
                self._transition(WorkflowState.FAILED, error="Upload cancelled")
            raise
        except UploadTransportError as exc:
            if self._is_stale(generation):
                Log.info(f"Discarding failure of superseded upload {file.name}: {exc}")
                return self._state
            Log.error(f"Upload of {file.name} failed: {exc}")
            self._transition(WorkflowState.FAILED, error=str(exc))
            return self._state
        except Exception as exc:
            if not self._is_stale(generation):
                self._transition(WorkflowState.FAILED, error=f"Upload failed: {exc}")
            raise
        finally:
            if self._inflight is task:
                self._inflight = None

        if self._is_stale(generation):
            Log.info(f"Discarding response for superseded upload {file.name}")
            return self._state

        result = self._normalizer.normalize(payload)
        self._transition(WorkflowState.SUCCEEDED, result=result)
        Log.info(f"Upload of {file.name} completed")
        return self._state

    async def aclose(self) -> None:
        """Cancel any upload, release the preview and close the client."""
        if self._closed:
            return
        self._closed = True
        task = self._inflight
        self._cancel_inflight()
        if self._state is WorkflowState.UPLOADING:
            self._transition(WorkflowState.FAILED, error="Upload cancelled")
        if task is not None:
            await asyncio.wait([task])
        self._release_preview()
        await self._client.aclose()

    async def __aenter__(self) -> "UploadOrchestrator":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    def _transition(
        self,
        target: WorkflowState,
        *,
        result: NormalizedResult | None = None,
        error: str | None = None,
    ) -> None:
        validate_transition(self._state, target)
        Log.debug(f"Workflow {self._state.value} -> {target.value}")
        self._state = target
        self._result = result
        self._error = error

    def _require_file(self) -> SelectedFile:
        if self._file is None:
            raise NoFileSelectedError(NO_FILE_MESSAGE)
        return self._file

    def _is_stale(self, generation: int) -> bool:
        return self._closed or generation != self._generation

    def _cancel_inflight(self) -> None:
        if self._inflight is not None and not self._inflight.done():
            self._inflight.cancel()
        self._inflight = None

    def _release_preview(self) -> None:
        if self._preview is not None:
            self._preview.revoke()
            self._preview = None

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("Orchestrator is closed")
