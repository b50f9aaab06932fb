"""
Conversations API Router - direct messaging between farmers.

Guidelines:
- Receives handlers via Dependency Injection (Dishka)
- Thin layer: only handles HTTP concerns (request/response)
- Acting identity always comes from the bearer token

Flow:
  HTTP Request → Router → Command → Handler → Repository → Database
                                 ↓
  HTTP Response ← Router ← Result ←
"""

from logging import getLogger
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel
from farmer_network.application.commands.conversations import (
    FindOrCreateConversationCommand,
    FindOrCreateConversationHandler,
)
from farmer_network.application.commands.messages import (
    AppendMessageCommand,
    AppendMessageHandler,
)
from farmer_network.application.queries.conversations import (
    ListConversationsQuery,
    ListConversationsHandler,
)
from farmer_network.application.queries.messages import (
    ListMessagesQuery,
    ListMessagesHandler,
)
from farmer_network.application.dto import ConversationDTO, MessageDTO
from farmer_network.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from farmer_network.domain.value_objects.conversation_id import ConversationId
from farmer_network.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class FindOrCreateConversationRequest(BaseModel):
    """Request body: the other participants (the caller is added if absent)."""

    participants: list[str]


class SendMessageRequest(BaseModel):
    text: str


class ConversationResponse(BaseModel):
    conversation: ConversationDTO


class ListConversationsResponse(BaseModel):
    conversations: list[ConversationDTO]


class MessageResponse(BaseModel):
    message: MessageDTO


class ListMessagesResponse(BaseModel):
    messages: list[MessageDTO]


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/conversations", tags=["conversations"])


def _parse_conversation_id(conversation_id: str) -> ConversationId:
    """A malformed id cannot name an existing conversation."""
    try:
        return ConversationId(conversation_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Conversation not found"
        ) from e


# ==================== ENDPOINTS ====================


@router.get(
    "",
    response_model=ListConversationsResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def list_conversations(
    handler: FromDishka[ListConversationsHandler],
    user: Optional[str] = None,
    current_user: AuthUser = Depends(get_current_user),
):
    """
    List the caller's conversations, most recent activity first.

    `?user=` is accepted for older clients but must name the caller.
    """
    if user is not None and user.strip() != current_user.username:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only list your own conversations",
        )

    conversations = await handler.execute(
        ListConversationsQuery(username=current_user.username)
    )
    return ListConversationsResponse(
        conversations=[ConversationDTO.from_entity(c) for c in conversations]
    )


@router.get(
    "/{conversation_id}/messages",
    response_model=ListMessagesResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def list_messages(
    conversation_id: str,
    handler: FromDishka[ListMessagesHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Full message history, oldest first."""
    try:
        query = ListMessagesQuery(
            conversation_id=_parse_conversation_id(conversation_id),
            requester=current_user.username,
        )
        messages = await handler.execute(query)
        return ListMessagesResponse(
            messages=[MessageDTO.from_entity(m) for m in messages]
        )
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e


@router.post(
    "/{conversation_id}/messages",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def send_message(
    conversation_id: str,
    request: SendMessageRequest,
    handler: FromDishka[AppendMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Append a message as the authenticated user."""
    try:
        command = AppendMessageCommand(
            conversation_id=_parse_conversation_id(conversation_id),
            sender=current_user.username,
            text=request.text,
        )
        message = await handler.execute(command)
        return MessageResponse(message=MessageDTO.from_entity(message))
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e


@router.post(
    "",
    response_model=ConversationResponse,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def find_or_create_conversation(
    request: FindOrCreateConversationRequest,
    response: Response,
    handler: FromDishka[FindOrCreateConversationHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """
    Return the conversation for this participant set, creating it if needed.

    201 when a new conversation was created, 200 when it already existed.
    """
    try:
        command = FindOrCreateConversationCommand(
            participants=tuple(request.participants),
            requester=current_user.username,
        )
        result = await handler.execute(command)
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    if not result.created:
        response.status_code = status.HTTP_200_OK
    return ConversationResponse(
        conversation=ConversationDTO.from_entity(result.conversation)
    )
