from uuid import UUID

from fastapi import APIRouter, Depends, status
from openai import APIError
from sqlalchemy.orm import Session

from src.app import dependencies
from src.app.schemas import chat as chat_schema
from src.app.schemas import core as core_schema
from src.app.services import chat_service

router = APIRouter()


@router.post(
    "",
    response_model=chat_schema.CreateChatResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a chat from a prompt (and optional screenshot)"
)
async def create_chat(
    payload: chat_schema.CreateChatRequest,
    db: Session = Depends(dependencies.get_db)
):
    """
    Handles chat creation.
    1. Generates a title and matches the closest example (in parallel).
    2. Describes the screenshot, if one was given.
    3. Builds the first user message according to the requested quality.
    4. Stores the system and user messages.
    """
    try:
        chat_id, last_message_id = await chat_service.create_chat(
            db,
            prompt=payload.prompt,
            model=payload.model,
            quality=payload.quality,
            screenshot_url=payload.screenshot_url,
        )
    except APIError as e:
        raise chat_service.GenerationError(f"LLM provider error: {e}") from e

    return chat_schema.CreateChatResponse(chat_id=chat_id, last_message_id=last_message_id)


@router.get(
    "/{chat_id}",
    response_model=chat_schema.ChatOut,
    responses={404: {"model": core_schema.ErrorResponse}},
    summary="Get a chat with its messages"
)
async def get_chat(
    chat_id: UUID,
    db: Session = Depends(dependencies.get_db)
):
    return chat_service.get_chat(db, chat_id)


@router.post(
    "/{chat_id}/messages",
    response_model=chat_schema.MessageOut,
    status_code=status.HTTP_201_CREATED,
    summary="Append a message to a chat"
)
async def create_message(
    chat_id: UUID,
    payload: chat_schema.CreateMessageRequest,
    db: Session = Depends(dependencies.get_db)
):
    return chat_service.create_message(db, chat_id, payload.text, payload.role)
