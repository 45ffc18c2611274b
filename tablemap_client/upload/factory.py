from typing import ClassVar

from tablemap_client.config.settings import Settings
from tablemap_client.upload.client_base import BaseUploadClient
from tablemap_client.upload.example_client_adapter import ExampleClientAdapter
from tablemap_client.upload.http_client_adapter import HttpUploadClient


class UploadClientFactory:
    """Creates the configured upload client."""

    CLIENTS: ClassVar[tuple[str, ...]] = ("http", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseUploadClient:
        name = settings.upload_client.lower()
        if name == "example":
            return ExampleClientAdapter()
        if name == "http":
            return HttpUploadClient(
                base_url=settings.upload_base_url,
                path=settings.upload_path,
                field_name=settings.upload_field_name,
                timeout_seconds=settings.upload_timeout_seconds,
            )
        raise ValueError(
            f"Unknown upload client '{name}'. Choose from: {list(cls.CLIENTS)}"
        )
