"""Example upload client adapter.

Stands in for the analysis service during local development and tests. Use it
as a reference when adding new transports: implement BaseUploadClient and
register the name in UploadClientFactory.
"""

import json
from typing import ClassVar

from tablemap_client.selection.models import SelectedFile
from tablemap_client.upload.client_base import BaseUploadClient


class ExampleClientAdapter(BaseUploadClient):
    """Returns a fixed layout wrapped the way the real service wraps it.

    No network calls.
    """

    DEFAULT_LAYOUT: ClassVar[dict[str, object]] = {
        "objects": [
            {"type": "table", "x": 120, "y": 250, "width": 50, "height": 50},
            {"type": "bar", "x": 300, "y": 400, "width": 100, "height": 50},
            {"type": "wall", "x": 0, "y": 0, "width": 800, "height": 20},
            {"type": "chair", "x": 130, "y": 260, "width": 20, "height": 20},
        ]
    }

    def __init__(self, layout: dict[str, object] | None = None) -> None:
        self._layout = layout if layout is not None else self.DEFAULT_LAYOUT
        self.uploaded: list[SelectedFile] = []

    async def upload(self, file: SelectedFile) -> object:
        self.uploaded.append(file)
        return {
            "message": "Image processed successfully",
            "response": json.dumps(self._layout),
        }
