import mimetypes
import os
import tempfile
from pathlib import Path
from types import TracebackType

from tablemap_client.logging.logger import Log
from tablemap_client.selection.models import SelectedFile


class PreviewHandle:
    """Revocable on-disk copy of a selected file that a viewer can render.

    The copy lives until ``revoke()`` is called; revoking more than once is a
    no-op. Use as a context manager to guarantee release.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._revoked = False

    @classmethod
    def create(cls, file: SelectedFile, directory: Path | None = None) -> "PreviewHandle":
        """Write the file bytes to a fresh temp file and return its handle."""
        suffix = Path(file.name).suffix or mimetypes.guess_extension(file.media_type) or ""
        fd, raw_path = tempfile.mkstemp(prefix="preview-", suffix=suffix, dir=directory)
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(file.content)
        except OSError:
            Path(raw_path).unlink(missing_ok=True)
            raise
        Log.debug(f"Created preview for {file.name} at {raw_path}")
        return cls(Path(raw_path).resolve())

    @property
    def path(self) -> Path:
        return self._path

    @property
    def uri(self) -> str:
        return self._path.as_uri()

    @property
    def revoked(self) -> bool:
        return self._revoked

    def revoke(self) -> None:
        if self._revoked:
            return
        self._revoked = True
        self._path.unlink(missing_ok=True)
        Log.debug(f"Revoked preview {self._path}")

    def __enter__(self) -> "PreviewHandle":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.revoke()
