from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict

from src.auth.dependencies import require_admin
from src.templates.dtos import (
    EmailTemplateCreateDTO,
    EmailTemplateUpdateDTO,
    InvalidTemplateDataError,
    TemplateNotFoundError,
    TemplateStatus,
    TemplateVariableDTO,
    VariableType,
)
from src.templates.features.manage_templates.read_model import SqlTemplateReadModel, TemplateReadModel
from src.templates.features.manage_templates.write_model import SqlTemplateWriteModel, TemplateWriteModel
from src.templates.urls import (
    ADMIN_TEMPLATE_DUPLICATE_URL,
    ADMIN_TEMPLATE_PUBLISH_URL,
    ADMIN_TEMPLATE_URL,
    ADMIN_TEMPLATES_URL,
)

router = APIRouter(dependencies=[Depends(require_admin)])


class TemplateVariableSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    key: str
    type: VariableType = VariableType.STRING
    fallback_value: str | float | None = None


class TemplateResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    subject: str | None = None
    html: str
    variables: list[TemplateVariableSchema] = []
    status: TemplateStatus
    published_at: datetime | None = None


class TemplateCreateRequest(BaseModel):
    name: str
    html: str
    subject: str | None = None
    variables: list[TemplateVariableSchema] = []
    publish: bool = False


class TemplateUpdateRequest(BaseModel):
    name: str | None = None
    subject: str | None = None
    html: str | None = None


def get_template_read_model() -> TemplateReadModel:
    return SqlTemplateReadModel()


def get_template_write_model() -> TemplateWriteModel:
    return SqlTemplateWriteModel()


@router.get(ADMIN_TEMPLATES_URL, response_model=list[TemplateResponse])
async def list_templates(
    read_model: TemplateReadModel = Depends(get_template_read_model),
) -> list[TemplateResponse]:
    templates = await read_model.list_templates()
    return [TemplateResponse.model_validate(template) for template in templates]


@router.post(ADMIN_TEMPLATES_URL, response_model=TemplateResponse, status_code=status.HTTP_201_CREATED)
async def create_template(
    request: TemplateCreateRequest,
    write_model: TemplateWriteModel = Depends(get_template_write_model),
) -> TemplateResponse:
    data = EmailTemplateCreateDTO(
        name=request.name,
        html=request.html,
        subject=request.subject,
        variables=tuple(
            TemplateVariableDTO(key=v.key, type=v.type, fallback_value=v.fallback_value)
            for v in request.variables
        ),
        publish=request.publish,
    )
    try:
        template = await write_model.create_template(data)
    except InvalidTemplateDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return TemplateResponse.model_validate(template)


@router.get(ADMIN_TEMPLATE_URL, response_model=TemplateResponse)
async def get_template(
    template_id: UUID,
    read_model: TemplateReadModel = Depends(get_template_read_model),
) -> TemplateResponse:
    template = await read_model.get_template(template_id)
    if template is None:
        raise HTTPException(status_code=404, detail="Template not found")
    return TemplateResponse.model_validate(template)


@router.patch(ADMIN_TEMPLATE_URL, response_model=TemplateResponse)
async def update_template(
    template_id: UUID,
    request: TemplateUpdateRequest,
    write_model: TemplateWriteModel = Depends(get_template_write_model),
) -> TemplateResponse:
    update = EmailTemplateUpdateDTO(**request.model_dump(exclude_unset=True))
    try:
        template = await write_model.update_template(template_id, update)
    except TemplateNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidTemplateDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return TemplateResponse.model_validate(template)


@router.delete(ADMIN_TEMPLATE_URL, status_code=status.HTTP_204_NO_CONTENT)
async def delete_template(
    template_id: UUID,
    write_model: TemplateWriteModel = Depends(get_template_write_model),
) -> None:
    try:
        await write_model.delete_template(template_id)
    except TemplateNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post(ADMIN_TEMPLATE_DUPLICATE_URL, response_model=TemplateResponse, status_code=status.HTTP_201_CREATED)
async def duplicate_template(
    template_id: UUID,
    write_model: TemplateWriteModel = Depends(get_template_write_model),
) -> TemplateResponse:
    try:
        template = await write_model.duplicate_template(template_id)
    except TemplateNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return TemplateResponse.model_validate(template)


@router.post(ADMIN_TEMPLATE_PUBLISH_URL, response_model=TemplateResponse)
async def publish_template(
    template_id: UUID,
    write_model: TemplateWriteModel = Depends(get_template_write_model),
) -> TemplateResponse:
    try:
        template = await write_model.publish_template(template_id)
    except TemplateNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return TemplateResponse.model_validate(template)
