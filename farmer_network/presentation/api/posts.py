"""
Posts API Router - the community feed.

Create takes multipart form data so images can ride along with the text.
Stored images are served from the /uploads static mount.
"""

from logging import getLogger
from typing import Optional
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel
from farmer_network.application.commands.posts import (
    CreatePostCommand,
    CreatePostHandler,
    DeletePostCommand,
    DeletePostHandler,
    ImageUpload,
)
from farmer_network.application.queries.posts import ListPostsQuery, ListPostsHandler
from farmer_network.application.dto import PostDTO
from farmer_network.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from farmer_network.domain.value_objects.post_id import PostId
from farmer_network.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


class PostResponse(BaseModel):
    post: PostDTO


class ListPostsResponse(BaseModel):
    posts: list[PostDTO]


class DeletePostResponse(BaseModel):
    success: bool


router = APIRouter(prefix="/api/posts", tags=["posts"])


def _parse_post_id(post_id: str) -> PostId:
    try:
        return PostId(post_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Post not found"
        ) from e


@router.get("", response_model=ListPostsResponse, status_code=status.HTTP_200_OK)
@inject
async def list_posts(
    handler: FromDishka[ListPostsHandler],
    community: Optional[str] = None,
):
    """Newest first, optionally filtered to one community."""
    views = await handler.execute(ListPostsQuery(community=community))
    return ListPostsResponse(
        posts=[PostDTO.from_entity(v.post, v.author) for v in views]
    )


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
@inject
async def create_post(
    handler: FromDishka[CreatePostHandler],
    text: str = Form(default=""),
    location: Optional[str] = Form(default=None),
    community: Optional[str] = Form(default=None),
    images: Optional[list[UploadFile]] = File(default=None),
    current_user: AuthUser = Depends(get_current_user),
):
    uploads = []
    for image in images or []:
        # browsers send an empty part when no file was picked
        if not image.filename:
            continue
        uploads.append(ImageUpload(filename=image.filename, content=await image.read()))

    try:
        view = await handler.execute(
            CreatePostCommand(
                author_id=current_user.user_id,
                text=text,
                location=location,
                community=community,
                images=tuple(uploads),
            )
        )
        return PostResponse(post=PostDTO.from_entity(view.post, view.author))
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete(
    "/{post_id}",
    response_model=DeletePostResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def delete_post(
    post_id: str,
    handler: FromDishka[DeletePostHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Delete one of the caller's own posts."""
    command = DeletePostCommand(
        post_id=_parse_post_id(post_id),
        requester_id=current_user.user_id,
    )
    try:
        success = await handler.execute(command)
        return DeletePostResponse(success=success)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e
