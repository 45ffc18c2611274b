from enum import Enum

from tablemap_client.upload.exceptions import InvalidTransitionError


class WorkflowState(str, Enum):
    IDLE = "idle"
    FILE_CHOSEN = "file_chosen"
    UPLOADING = "uploading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


_ALLOWED = {
    WorkflowState.IDLE: {WorkflowState.FILE_CHOSEN},
    WorkflowState.FILE_CHOSEN: {WorkflowState.FILE_CHOSEN, WorkflowState.UPLOADING},
    WorkflowState.UPLOADING: {
        WorkflowState.SUCCEEDED,
        WorkflowState.FAILED,
        WorkflowState.FILE_CHOSEN,
    },
    WorkflowState.SUCCEEDED: {WorkflowState.FILE_CHOSEN, WorkflowState.UPLOADING},
    WorkflowState.FAILED: {WorkflowState.FILE_CHOSEN, WorkflowState.UPLOADING},
}


def validate_transition(current: WorkflowState, target: WorkflowState) -> None:
    if target not in _ALLOWED.get(current, set()):
        raise InvalidTransitionError(
            f"Invalid workflow transition: {current.value} -> {target.value}"
        )
