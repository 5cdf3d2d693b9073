"""REST endpoints for conversation messages.

Message bodies are sanitized once, at write time, before they reach the
store. Reads re-apply the sanitizer when SANITIZE_ON_READ is enabled.
"""

import uuid

from fastapi import APIRouter, HTTPException

from content_sanitizer.gateway.message_store import StoredMessage, message_store
from content_sanitizer.gateway.sanitization import sanitize_content
from content_sanitizer.processing.sanitizer import content_sanitizer
from content_sanitizer.shared.config import settings
from content_sanitizer.shared.schemas import MessageCreate, MessageResponse, MessageUpdate

router = APIRouter()


def _to_response(message: StoredMessage) -> MessageResponse:
    response = MessageResponse.model_validate(message)
    if settings.SANITIZE_ON_READ:
        response.content = content_sanitizer.sanitize(response.content)
    return response


@router.post(
    "/conversations/{conversation_id}/messages",
    response_model=MessageResponse,
    status_code=201,
)
async def send_message(conversation_id: uuid.UUID, message: MessageCreate) -> MessageResponse:
    """Sanitize and store a new message."""
    result = sanitize_content(message.content)
    stored = message_store.add(
        conversation_id=conversation_id,
        sender_id=message.sender_id,
        content=result.text,
        was_sanitized=result.was_sanitized,
    )
    return _to_response(stored)


@router.get(
    "/conversations/{conversation_id}/messages",
    response_model=list[MessageResponse],
)
async def list_messages(conversation_id: uuid.UUID) -> list[MessageResponse]:
    """List messages of a conversation in the order they were sent."""
    messages = message_store.list_messages(conversation_id)
    if messages is None:
        raise HTTPException(status_code=404, detail="Conversation not found")

    return [_to_response(message) for message in messages]


@router.patch(
    "/conversations/{conversation_id}/messages/{message_id}",
    response_model=MessageResponse,
)
async def edit_message(
    conversation_id: uuid.UUID,
    message_id: uuid.UUID,
    update: MessageUpdate,
) -> MessageResponse:
    """Edit a message; the new body goes through the sanitizer like a new one."""
    stored = message_store.get(conversation_id, message_id)
    if stored is None:
        raise HTTPException(status_code=404, detail="Message not found")

    result = sanitize_content(update.content)
    message_store.update(stored, content=result.text, was_sanitized=result.was_sanitized)
    return _to_response(stored)
