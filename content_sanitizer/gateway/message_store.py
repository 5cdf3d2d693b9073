"""In-memory message store standing in for the messaging persistence layer.

Only sanitized bodies are ever handed to the store.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class StoredMessage:
    """A persisted conversation message."""

    conversation_id: uuid.UUID
    sender_id: uuid.UUID
    content: str
    was_sanitized: bool
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    is_edited: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    edited_at: datetime | None = None


class MessageStore:
    """Conversation messages kept in insertion order."""

    def __init__(self):
        self._conversations: dict[uuid.UUID, list[StoredMessage]] = {}

    def add(
        self,
        conversation_id: uuid.UUID,
        sender_id: uuid.UUID,
        content: str,
        was_sanitized: bool,
    ) -> StoredMessage:
        message = StoredMessage(
            conversation_id=conversation_id,
            sender_id=sender_id,
            content=content,
            was_sanitized=was_sanitized,
        )
        self._conversations.setdefault(conversation_id, []).append(message)
        return message

    def list_messages(self, conversation_id: uuid.UUID) -> list[StoredMessage] | None:
        """Messages of a conversation, or None if it has none yet."""
        messages = self._conversations.get(conversation_id)
        return list(messages) if messages is not None else None

    def get(self, conversation_id: uuid.UUID, message_id: uuid.UUID) -> StoredMessage | None:
        for message in self._conversations.get(conversation_id, []):
            if message.id == message_id:
                return message
        return None

    def update(self, message: StoredMessage, content: str, was_sanitized: bool) -> StoredMessage:
        message.content = content
        message.was_sanitized = message.was_sanitized or was_sanitized
        message.is_edited = True
        message.edited_at = datetime.now(timezone.utc)
        return message

    def clear(self) -> None:
        self._conversations.clear()


message_store = MessageStore()
