from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from openai import APIError
from sqlalchemy.orm import Session

from src.app import dependencies
from src.app.schemas import chat as chat_schema
from src.app.services import chat_service

router = APIRouter()


@router.post(
    "/{message_id}/completion",
    summary="Stream the next assistant reply after a message"
)
async def stream_completion(
    message_id: UUID,
    payload: chat_schema.CompletionRequest,
    db: Session = Depends(dependencies.get_db)
):
    """
    Streams plain text deltas. The client stores the finished reply with
    POST /chats/{chat_id}/messages (role=assistant).
    """
    try:
        deltas = await chat_service.stream_completion(db, message_id, payload.model)
    except APIError as e:
        raise chat_service.GenerationError(f"LLM provider error: {e}") from e

    return StreamingResponse(deltas, media_type="text/plain")
