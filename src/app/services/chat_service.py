import asyncio
import logging
from collections.abc import AsyncIterator
from typing import Literal
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from src.app.models import models
from src.app.config import get_settings
from src.app import prompts
from src.app.services.llm_client import get_llm_client, first_choice_content

settings = get_settings()
logger = logging.getLogger(__name__)

RECREATE_INSTRUCTION = "RECREATE THIS APP AS CLOSELY AS POSSIBLE: "

# Context window for completions: the leading messages plus the most recent ones
MAX_CONTEXT_MESSAGES = 10
LEADING_MESSAGES = 3
TRAILING_MESSAGES = 7

TITLE_MAX_LENGTH = 255

# Retries when a concurrent append takes the same position
APPEND_ATTEMPTS = 3


class ChatNotFound(HTTPException):
    def __init__(self, chat_id: UUID):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Chat {chat_id} not found.",
        )


class MessageNotFound(HTTPException):
    def __init__(self, message_id: UUID):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Message {message_id} not found.",
        )


class GenerationError(HTTPException):
    """
    Raised when the LLM provider fails or a chat could not be seeded.
    Returns HTTP 502 - Bad Gateway.
    """
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=detail,
        )


async def fetch_title(client, prompt: str) -> str:
    response = await client.chat.completions.create(
        model=settings.TITLE_MODEL,
        messages=[
            {"role": "system", "content": prompts.TITLE_PROMPT},
            {"role": "user", "content": prompt},
        ],
    )
    logger.debug(f"[createChat] title response: {response}")
    title = (first_choice_content(response) or "").strip() or prompt
    return title[:TITLE_MAX_LENGTH]


async def fetch_top_example(client, prompt: str) -> str:
    response = await client.chat.completions.create(
        model=settings.EXAMPLE_MODEL,
        messages=[
            {"role": "system", "content": prompts.EXAMPLE_MATCH_PROMPT},
            {"role": "user", "content": prompt},
        ],
    )
    logger.debug(f"[createChat] example response: {response}")
    return first_choice_content(response) or "none"


async def describe_screenshot(client, screenshot_url: str) -> str | None:
    """
    Asks the vision model for a detailed description of a screenshot so the
    coding model can recreate it.
    """
    response = await client.chat.completions.create(
        model=settings.VISION_MODEL,
        temperature=0.2,
        max_tokens=1000,
        messages=[
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": prompts.SCREENSHOT_TO_CODE_PROMPT},
                    {"type": "image_url", "image_url": {"url": screenshot_url}},
                ],
            }
        ],
    )
    logger.debug(f"[createChat] screenshot response: {response}")
    return first_choice_content(response)


async def build_user_message(
    client,
    prompt: str,
    quality: Literal["high", "low"],
    screenshot_description: str | None,
) -> str:
    """
    High quality runs the request through the architect model first.
    Low quality uses the prompt as-is, plus the screenshot description.
    """
    if quality == "high":
        response = await client.chat.completions.create(
            model=settings.ARCHITECT_MODEL,
            messages=[
                {"role": "system", "content": prompts.SOFTWARE_ARCHITECT_PROMPT},
                {
                    "role": "user",
                    "content": screenshot_description + prompt if screenshot_description else prompt,
                },
            ],
            temperature=0.2,
            max_tokens=3000,
        )
        logger.debug(f"[createChat] architect response: {response}")
        user_message = first_choice_content(response) or prompt
        logger.info("[createChat] userMessage built (high quality)")
        return user_message

    if screenshot_description:
        logger.info("[createChat] userMessage built (low quality, with screenshot)")
        return prompt + RECREATE_INSTRUCTION + screenshot_description

    logger.info("[createChat] userMessage built (low quality, no screenshot)")
    return prompt


async def create_chat(
    db: Session,
    prompt: str,
    model: str,
    quality: Literal["high", "low"],
    screenshot_url: str | None = None,
) -> tuple[UUID, UUID]:
    """
    Creates a chat and seeds it with the coding system prompt and the first
    user message. Returns (chat_id, last_message_id).
    """
    try:
        logger.info(f"[createChat] model={model} quality={quality} screenshot_url={screenshot_url}")
        logger.info(f"[createChat] prompt: {prompt}")

        # 1. Persist the chat first so its id can tag the LLM session
        chat = models.Chat(model=model, quality=quality, prompt=prompt, title="", shadcn=True)
        db.add(chat)
        db.commit()
        db.refresh(chat)

        async with get_llm_client(session_id=str(chat.id)) as client:
            # 2. Title and example lookup are independent
            title, most_similar_example = await asyncio.gather(
                fetch_title(client, prompt),
                fetch_top_example(client, prompt),
            )
            logger.info(f"[createChat] title: {title}")
            logger.info(f"[createChat] mostSimilarExample: {most_similar_example}")

            # 3. Optional screenshot description
            screenshot_description = None
            if screenshot_url:
                screenshot_description = await describe_screenshot(client, screenshot_url)
                logger.info(f"[createChat] screenshot description: {screenshot_description}")

            # 4. First user message
            user_message = await build_user_message(client, prompt, quality, screenshot_description)

        # 5. Title and seed messages in one commit
        chat.title = title
        db.add_all([
            models.Message(
                chat_id=chat.id,
                role="system",
                content=prompts.get_main_coding_prompt(most_similar_example),
                position=0,
            ),
            models.Message(chat_id=chat.id, role="user", content=user_message, position=1),
        ])
        db.commit()
        db.refresh(chat)

        last_message = max(chat.messages, key=lambda m: m.position, default=None)
        if not last_message:
            raise GenerationError("No new message")
        logger.info(f"[createChat] chat {chat.id} ready, last message {last_message.id}")

        return chat.id, last_message.id

    except Exception as e:
        db.rollback()
        logger.exception(f"[createChat] Error: {e}")
        raise


def get_chat(db: Session, chat_id: UUID) -> models.Chat:
    chat = db.scalar(
        select(models.Chat)
        .where(models.Chat.id == chat_id)
        .options(selectinload(models.Chat.messages))
    )
    if not chat:
        raise ChatNotFound(chat_id)
    return chat


def create_message(
    db: Session,
    chat_id: UUID,
    text: str,
    role: Literal["assistant", "user"],
) -> models.Message:
    """
    Appends a message to a chat at the next free position.
    """
    chat = db.get(models.Chat, chat_id)
    if not chat:
        raise ChatNotFound(chat_id)

    for attempt in range(1, APPEND_ATTEMPTS + 1):
        message = models.Message(
            chat_id=chat_id, role=role, content=text, position=_next_position(db, chat_id)
        )
        try:
            db.add(message)
            db.commit()
            db.refresh(message)
            return message
        except IntegrityError as e:
            # Another writer took the position; recompute and try again
            db.rollback()
            logger.warning(f"Position clash appending to chat {chat_id} (attempt {attempt}): {e}")
            if attempt == APPEND_ATTEMPTS:
                raise
        except Exception as e:
            db.rollback()
            logger.error(f"Error saving message for chat {chat_id}: {e}")
            raise


def _next_position(db: Session, chat_id: UUID) -> int:
    max_position = db.scalar(
        select(func.max(models.Message.position)).where(models.Message.chat_id == chat_id)
    )
    return 0 if max_position is None else max_position + 1


def get_message(db: Session, message_id: UUID) -> models.Message:
    message = db.get(models.Message, message_id)
    if not message:
        raise MessageNotFound(message_id)
    return message


def get_completion_context(db: Session, message: models.Message) -> list[dict[str, str]]:
    """
    Returns the chat history up to and including the given message, formatted
    for the chat completions API. Long histories keep the first few messages
    (system prompt and original request) and the most recent ones.
    """
    records = db.scalars(
        select(models.Message)
        .where(
            models.Message.chat_id == message.chat_id,
            models.Message.position <= message.position,
        )
        .order_by(models.Message.position)
    ).all()

    history = [{"role": r.role, "content": r.content} for r in records]
    if len(history) > MAX_CONTEXT_MESSAGES:
        history = history[:LEADING_MESSAGES] + history[-TRAILING_MESSAGES:]
    return history


async def stream_completion(db: Session, message_id: UUID, model: str) -> AsyncIterator[str]:
    """
    Streams the next assistant reply for the chat containing message_id.
    The lookup and the provider request happen before this returns, so a
    missing message or a provider error surfaces before streaming starts.
    """
    message = get_message(db, message_id)
    history = get_completion_context(db, message)
    client = get_llm_client(session_id=str(message.chat_id))

    logger.info(f"Streaming completion for message {message_id} with {len(history)} messages using {model}")
    try:
        stream = await client.chat.completions.create(
            model=model,
            messages=history,
            stream=True,
            temperature=0.2,
            max_tokens=9000,
        )
    except Exception:
        await client.close()
        raise
    return _stream_deltas(client, stream)


async def _stream_deltas(client, stream) -> AsyncIterator[str]:
    try:
        async for chunk in stream:
            if not chunk.choices:
                continue
            delta = chunk.choices[0].delta
            if delta is not None and delta.content:
                yield delta.content
    finally:
        await client.close()
