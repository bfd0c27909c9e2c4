from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.models.base import Base, TimeStamp
from src.photos.dtos import PhotoDTO


class Photo(Base, TimeStamp):
    __tablename__ = TableNames.PHOTOS.value

    url: Mapped[str] = mapped_column(Text, nullable=False)
    alt: Mapped[str] = mapped_column(String(255), nullable=False)
    caption: Mapped[str | None] = mapped_column(Text, nullable=True)
    display_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def to_dto(self) -> PhotoDTO:
        return PhotoDTO(
            id=self.id,
            url=self.url,
            alt=self.alt,
            display_order=self.display_order,
            is_active=self.is_active,
            caption=self.caption,
        )

    def __repr__(self) -> str:
        return f"<Photo {self.alt}>"
