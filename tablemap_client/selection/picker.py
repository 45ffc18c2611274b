"""Picking surface: turns user-supplied paths into acceptable candidates."""

from collections.abc import Iterable
from pathlib import Path

from tablemap_client.config.settings import Settings
from tablemap_client.logging.logger import Log
from tablemap_client.selection.models import FileConstraints, SelectedFile
from tablemap_client.selection.selector import load_selected_file


class FilePicker:
    """Offers files that satisfy the declared constraints.

    Declared constraints are filtered here, at the surface, the way a browser
    file input honours its ``accept`` attribute. The selector itself never
    re-checks them.
    """

    def __init__(self, constraints: FileConstraints) -> None:
        self._constraints = constraints

    @property
    def constraints(self) -> FileConstraints:
        return self._constraints

    def pick(self, paths: Iterable[Path]) -> list[SelectedFile]:
        candidates: list[SelectedFile] = []
        for path in paths:
            try:
                size_bytes = path.stat().st_size
                if size_bytes > self._constraints.max_size_bytes:
                    Log.warning(
                        f"Skipping {path.name}: {size_bytes} bytes exceeds "
                        f"{self._constraints.max_size_bytes}"
                    )
                    continue
                file = load_selected_file(path)
            except OSError as exc:
                Log.warning(f"Skipping {path}: {exc}")
                continue
            if not self._constraints.accepts(file):
                Log.warning(
                    f"Skipping {file.name}: {file.media_type}, {file.size_bytes} bytes "
                    "is outside the accepted types or size"
                )
                continue
            candidates.append(file)
        return candidates


def build_picker(settings: Settings) -> FilePicker:
    """Build a FilePicker from the declared media types and size limit."""
    return FilePicker(
        FileConstraints(
            accepted_media_types=frozenset(settings.accepted_media_types),
            max_size_bytes=settings.max_upload_bytes,
        )
    )
