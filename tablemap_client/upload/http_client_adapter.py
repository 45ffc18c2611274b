import httpx

from tablemap_client.logging.logger import Log
from tablemap_client.selection.models import SelectedFile
from tablemap_client.upload.client_base import BaseUploadClient
from tablemap_client.upload.exceptions import UploadTransportError


class HttpUploadClient(BaseUploadClient):
    """Uploads images as single-part multipart/form-data over httpx."""

    def __init__(
        self,
        *,
        base_url: str,
        path: str = "/upload",
        field_name: str = "image",
        timeout_seconds: float | None = 120.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._path = path
        self._field_name = field_name
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_seconds,
            transport=transport,
        )

    async def upload(self, file: SelectedFile) -> object:
        files = {self._field_name: (file.name, file.content, file.media_type)}
        try:
            response = await self._client.post(self._path, files=files)
        except httpx.TimeoutException as exc:
            raise UploadTransportError("Upload failed: request timed out") from exc
        except httpx.HTTPError as exc:
            raise UploadTransportError(f"Upload failed: {exc}") from exc

        if not response.is_success:
            reason = response.reason_phrase or str(response.status_code)
            raise UploadTransportError(f"Upload failed: {reason}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise UploadTransportError(
                f"Upload failed: response is not valid JSON ({exc})"
            ) from exc
        Log.debug(f"Server responded {response.status_code} for {file.name}")
        return payload

    async def aclose(self) -> None:
        await self._client.aclose()
