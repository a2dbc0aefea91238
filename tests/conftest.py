import os

# Settings and the engine are created at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["TOGETHER_API_KEY"] = "test-key"
os.environ.pop("HELICONE_API_KEY", None)

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from src.app import prompts
from src.app.config import get_settings
from src.app.database import SessionLocal, engine
from src.app.models import models
from src.app.services import chat_service

settings = get_settings()


def completion(content):
    """Builds a minimal non-streaming chat completion."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


async def completion_stream(parts):
    for part in parts:
        yield SimpleNamespace(choices=[SimpleNamespace(delta=SimpleNamespace(content=part))])


class FakeLLM:
    """
    Stands in for the AsyncOpenAI client. Replies are chosen from the model
    and system prompt of each request.
    """

    def __init__(self):
        self.title = "Quiz Master"
        self.example = "quiz app"
        self.screenshot_description = "A white page with a big blue button. "
        self.plan = "Build a quiz app with a score board."
        self.stream_parts = ["```tsx\n", "export default function App() {}", "\n```"]
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=AsyncMock(side_effect=self._reply)))
        self.close = AsyncMock()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    @property
    def calls(self):
        return [c.kwargs for c in self.chat.completions.create.call_args_list]

    def calls_for(self, model):
        return [c for c in self.calls if c["model"] == model]

    def _reply(self, **kwargs):
        if kwargs.get("stream"):
            return completion_stream(self.stream_parts)
        if kwargs["model"] == settings.VISION_MODEL:
            return completion(self.screenshot_description)
        if kwargs["model"] == settings.ARCHITECT_MODEL:
            return completion(self.plan)
        system = kwargs["messages"][0]["content"]
        if system == prompts.TITLE_PROMPT:
            return completion(self.title)
        if system == prompts.EXAMPLE_MATCH_PROMPT:
            return completion(self.example)
        raise AssertionError(f"Unexpected LLM request: {kwargs}")


@pytest.fixture
def fake_llm(monkeypatch):
    llm = FakeLLM()
    sessions = []

    def _get_llm_client(session_id=None):
        sessions.append(session_id)
        return llm

    llm.sessions = sessions
    monkeypatch.setattr(chat_service, "get_llm_client", _get_llm_client)
    return llm


@pytest.fixture
def db_session():
    """Fresh tables per test on the shared in-memory database."""
    models.Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        models.Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    from fastapi.testclient import TestClient
    from main import app

    with TestClient(app) as test_client:
        yield test_client
