import base64
from pathlib import Path

import pytest

from tablemap_client.selection.models import SelectedFile

# 1x1 transparent PNG
_PNG_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)


@pytest.fixture()
def png_bytes() -> bytes:
    return _PNG_BYTES


@pytest.fixture()
def png_file(png_bytes: bytes) -> SelectedFile:
    return SelectedFile(
        name="layout.png",
        content=png_bytes,
        media_type="image/png",
        size_bytes=len(png_bytes),
    )


@pytest.fixture()
def png_on_disk(tmp_path: Path, png_bytes: bytes) -> Path:
    path = tmp_path / "layout.png"
    path.write_bytes(png_bytes)
    return path
