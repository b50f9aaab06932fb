"""
Comments API Router - comments hang off a post, oldest first.
"""

from logging import getLogger
from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel
from farmer_network.application.commands.posts import (
    CreateCommentCommand,
    CreateCommentHandler,
)
from farmer_network.application.queries.posts import (
    ListCommentsQuery,
    ListCommentsHandler,
)
from farmer_network.application.dto import CommentDTO
from farmer_network.domain.exceptions import DomainValidationError, EntityNotFoundError
from farmer_network.domain.value_objects.post_id import PostId
from farmer_network.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


class CreateCommentRequest(BaseModel):
    text: str


class CommentResponse(BaseModel):
    comment: CommentDTO


class ListCommentsResponse(BaseModel):
    comments: list[CommentDTO]


router = APIRouter(prefix="/api/comments", tags=["comments"])


def _parse_post_id(post_id: str) -> PostId:
    try:
        return PostId(post_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Post not found"
        ) from e


@router.get(
    "/{post_id}",
    response_model=ListCommentsResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def list_comments(post_id: str, handler: FromDishka[ListCommentsHandler]):
    try:
        views = await handler.execute(ListCommentsQuery(post_id=_parse_post_id(post_id)))
        return ListCommentsResponse(
            comments=[CommentDTO.from_entity(v.comment, v.author) for v in views]
        )
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post(
    "/{post_id}",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_comment(
    post_id: str,
    request: CreateCommentRequest,
    handler: FromDishka[CreateCommentHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    try:
        view = await handler.execute(
            CreateCommentCommand(
                post_id=_parse_post_id(post_id),
                author_id=current_user.user_id,
                text=request.text,
            )
        )
        return CommentResponse(comment=CommentDTO.from_entity(view.comment, view.author))
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
