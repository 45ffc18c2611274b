from abc import ABC, abstractmethod

from tablemap_client.selection.models import SelectedFile


class BaseUploadClient(ABC):
    """Contract for sending one image to the analysis service."""

    @abstractmethod
    async def upload(self, file: SelectedFile) -> object:
        """POST the file and return the parsed JSON body.

        Raises:
            UploadTransportError: on network failure, timeout, non-success
                status or a body that is not JSON.
        """

    async def aclose(self) -> None:
        """Release any connections held by the client."""
