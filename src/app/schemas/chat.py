from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal


class CreateChatRequest(BaseModel):
    """
    Payload for the POST /chats endpoint.
    """
    prompt: str = Field(min_length=1)
    model: str = Field(min_length=1, max_length=255)
    quality: Literal["high", "low"]
    screenshot_url: str | None = None


class CreateChatResponse(BaseModel):
    """
    Response from the POST /chats endpoint.
    """
    chat_id: UUID
    last_message_id: UUID


class CreateMessageRequest(BaseModel):
    """
    Payload for the POST /chats/{chat_id}/messages endpoint.
    """
    text: str
    role: Literal["assistant", "user"]


class CompletionRequest(BaseModel):
    model: str = Field(min_length=1, max_length=255)


class MessageOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    chat_id: UUID
    role: str
    content: str
    position: int
    created_at: datetime | None = None


class ChatOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    model: str
    quality: str
    prompt: str
    title: str
    shadcn: bool
    created_at: datetime | None = None
    messages: List[MessageOut] = []
