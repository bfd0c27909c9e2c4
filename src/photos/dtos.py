from dataclasses import dataclass
from uuid import UUID


class PhotoNotFoundError(Exception):
    def __init__(self, photo_id: UUID) -> None:
        self.photo_id = photo_id
        super().__init__("Photo not found")


class InvalidPhotoDataError(Exception):
    pass


@dataclass(frozen=True)
class PhotoDTO:
    id: UUID
    url: str
    alt: str
    display_order: int
    is_active: bool = True
    caption: str | None = None
