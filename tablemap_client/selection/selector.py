import mimetypes
from collections.abc import Sequence
from pathlib import Path

from tablemap_client.selection.models import SelectedFile

DEFAULT_MEDIA_TYPE = "application/octet-stream"


def select_first(candidates: Sequence[SelectedFile]) -> SelectedFile | None:
    """Pick the first candidate; None when nothing was offered."""
    if not candidates:
        return None
    return candidates[0]


def guess_media_type(name: str) -> str:
    media_type, _ = mimetypes.guess_type(name)
    return media_type or DEFAULT_MEDIA_TYPE


def load_selected_file(path: Path) -> SelectedFile:
    """Read a file from disk into a SelectedFile.

    Raises:
        FileNotFoundError: if the path does not point to a file.
    """
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")
    content = path.read_bytes()
    return SelectedFile(
        name=path.name,
        content=content,
        media_type=guess_media_type(path.name),
        size_bytes=len(content),
    )
