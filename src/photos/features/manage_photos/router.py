from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict

from src.auth.dependencies import require_admin
from src.photos.dtos import InvalidPhotoDataError, PhotoNotFoundError
from src.photos.features.manage_photos.read_model import PhotoReadModel, SqlPhotoReadModel
from src.photos.features.manage_photos.write_model import PhotoWriteModel, SqlPhotoWriteModel
from src.photos.urls import ADMIN_PHOTO_URL, ADMIN_PHOTOS_URL, PHOTOS_URL

router = APIRouter()


class PhotoResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    url: str
    alt: str
    caption: str | None = None
    display_order: int
    is_active: bool


class PhotoCreateRequest(BaseModel):
    url: str
    alt: str
    caption: str | None = None


def get_photo_read_model() -> PhotoReadModel:
    return SqlPhotoReadModel()


def get_photo_write_model() -> PhotoWriteModel:
    return SqlPhotoWriteModel()


@router.get(PHOTOS_URL, response_model=list[PhotoResponse])
async def list_active_photos(
    read_model: PhotoReadModel = Depends(get_photo_read_model),
) -> list[PhotoResponse]:
    """Public gallery, active photos only."""
    photos = await read_model.list_photos(active_only=True)
    return [PhotoResponse.model_validate(photo) for photo in photos]


@router.get(ADMIN_PHOTOS_URL, response_model=list[PhotoResponse], dependencies=[Depends(require_admin)])
async def list_all_photos(
    read_model: PhotoReadModel = Depends(get_photo_read_model),
) -> list[PhotoResponse]:
    photos = await read_model.list_photos(active_only=False)
    return [PhotoResponse.model_validate(photo) for photo in photos]


@router.post(
    ADMIN_PHOTOS_URL,
    response_model=PhotoResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def add_photo(
    request: PhotoCreateRequest,
    write_model: PhotoWriteModel = Depends(get_photo_write_model),
) -> PhotoResponse:
    try:
        photo = await write_model.add_photo(request.url, request.alt, request.caption)
    except InvalidPhotoDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return PhotoResponse.model_validate(photo)


@router.delete(
    ADMIN_PHOTO_URL,
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
async def delete_photo(
    photo_id: UUID,
    write_model: PhotoWriteModel = Depends(get_photo_write_model),
) -> None:
    try:
        await write_model.delete_photo(photo_id)
    except PhotoNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
