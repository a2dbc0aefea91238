import logging
from typing import Any

from openai import AsyncOpenAI

from src.app.config import get_settings

settings = get_settings()
logger = logging.getLogger(__name__)


def get_llm_client(session_id: str | None = None) -> AsyncOpenAI:
    """
    Builds an async OpenAI SDK client pointed at the Together API.
    When a Helicone key is configured, traffic goes through the Helicone
    gateway and is grouped under the given session id.
    """
    if not settings.HELICONE_API_KEY:
        return AsyncOpenAI(
            api_key=settings.TOGETHER_API_KEY,
            base_url=settings.TOGETHER_BASE_URL,
        )

    headers = {
        "Helicone-Auth": f"Bearer {settings.HELICONE_API_KEY}",
        "Helicone-Property-appname": settings.HELICONE_APP_NAME,
        "Helicone-Session-Name": settings.HELICONE_SESSION_NAME,
    }
    if session_id:
        headers["Helicone-Session-Id"] = session_id

    logger.info(f"Using Helicone gateway {settings.HELICONE_BASE_URL} for session {session_id}")
    return AsyncOpenAI(
        api_key=settings.TOGETHER_API_KEY,
        base_url=settings.HELICONE_BASE_URL,
        default_headers=headers,
    )


def first_choice_content(response: Any) -> str | None:
    """Returns the text of the first choice of a chat completion, if any."""
    if not response or not getattr(response, "choices", None):
        return None
    message = response.choices[0].message
    if message is None:
        return None
    return message.content
