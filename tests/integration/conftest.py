from pathlib import Path

import pytest

from tablemap_client.config.settings import Settings


@pytest.fixture()
def preview_dir(tmp_path: Path) -> Path:
    path = tmp_path / "previews"
    path.mkdir()
    return path


@pytest.fixture()
def example_settings(preview_dir: Path) -> Settings:
    return Settings(upload_client="example", preview_dir=preview_dir)
