from dataclasses import dataclass


@dataclass(frozen=True)
class SelectedFile:
    """An image chosen by the user, ready to be previewed and uploaded."""

    name: str
    content: bytes
    media_type: str
    size_bytes: int


@dataclass(frozen=True)
class FileConstraints:
    """What the picking surface declares as acceptable."""

    accepted_media_types: frozenset[str]
    max_size_bytes: int

    def accepts(self, file: SelectedFile) -> bool:
        return (
            file.media_type in self.accepted_media_types
            and file.size_bytes <= self.max_size_bytes
        )
