"""
Resources API Router - shared equipment board.

Anyone can browse; only the farmer who listed an item may edit or remove it.
"""

from logging import getLogger
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel
from farmer_network.application.commands.resources import (
    CreateResourceCommand,
    CreateResourceHandler,
    DeleteResourceCommand,
    DeleteResourceHandler,
    UpdateResourceCommand,
    UpdateResourceHandler,
)
from farmer_network.application.queries.resources import (
    ListResourcesQuery,
    ListResourcesHandler,
)
from farmer_network.application.dto import CamelModel, ResourceDTO
from farmer_network.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from farmer_network.domain.value_objects.resource_id import ResourceId
from farmer_network.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


class CreateResourceRequest(CamelModel):
    name: str
    status: str
    owner: str
    contact: str
    location: str
    next_available: str


class UpdateResourceRequest(CamelModel):
    name: Optional[str] = None
    status: Optional[str] = None
    owner: Optional[str] = None
    contact: Optional[str] = None
    location: Optional[str] = None
    next_available: Optional[str] = None


class ResourceResponse(BaseModel):
    resource: ResourceDTO


class ListResourcesResponse(BaseModel):
    resources: list[ResourceDTO]


class DeleteResourceResponse(BaseModel):
    success: bool


router = APIRouter(prefix="/api/resources", tags=["resources"])


def _parse_resource_id(resource_id: str) -> ResourceId:
    try:
        return ResourceId(resource_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Resource not found"
        ) from e


@router.get("", response_model=ListResourcesResponse, status_code=status.HTTP_200_OK)
@inject
async def list_resources(handler: FromDishka[ListResourcesHandler]):
    resources = await handler.execute(ListResourcesQuery())
    return ListResourcesResponse(
        resources=[ResourceDTO.from_entity(r) for r in resources]
    )


@router.post("", response_model=ResourceResponse, status_code=status.HTTP_201_CREATED)
@inject
async def create_resource(
    request: CreateResourceRequest,
    handler: FromDishka[CreateResourceHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    try:
        resource = await handler.execute(
            CreateResourceCommand(
                created_by=current_user.user_id,
                name=request.name,
                status=request.status,
                owner=request.owner,
                contact=request.contact,
                location=request.location,
                next_available=request.next_available,
            )
        )
        return ResourceResponse(resource=ResourceDTO.from_entity(resource))
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.patch(
    "/{resource_id}",
    response_model=ResourceResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def update_resource(
    resource_id: str,
    request: UpdateResourceRequest,
    handler: FromDishka[UpdateResourceHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    try:
        resource = await handler.execute(
            UpdateResourceCommand(
                resource_id=_parse_resource_id(resource_id),
                requester_id=current_user.user_id,
                **request.model_dump(exclude_unset=True),
            )
        )
        return ResourceResponse(resource=ResourceDTO.from_entity(resource))
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e


@router.delete(
    "/{resource_id}",
    response_model=DeleteResourceResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def delete_resource(
    resource_id: str,
    handler: FromDishka[DeleteResourceHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    try:
        success = await handler.execute(
            DeleteResourceCommand(
                resource_id=_parse_resource_id(resource_id),
                requester_id=current_user.user_id,
            )
        )
        return DeleteResourceResponse(success=success)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e
