import pytest
from fastapi.testclient import TestClient

from api import create_app
from config import Settings
from db import Store, StoreError
from agent.llm.base import LLMClient, LLMResponse


class FakeLLM(LLMClient):
    def __init__(self, reply: str = "Mensen eerst.\n---\nHet probleem.\n---\nSamen verder.", error=None):
        self.reply = reply
        self.error = error
        self.calls: list[dict] = []

    async def complete(self, system, user, max_tokens=500, temperature=0.7):
        self.calls.append({
            "system": system,
            "user": user,
            "max_tokens": max_tokens,
            "temperature": temperature,
        })
        if self.error:
            raise self.error
        return LLMResponse(content=self.reply, tokens_used=42, model="fake")


class BrokenStore(Store):
    """Store whose reads always fail."""

    def __init__(self):
        super().__init__("/nonexistent/unused.db")

    def list_entries(self):
        raise StoreError("database unavailable")


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        openai_api_key="test-key",
        database_url=f"sqlite:///{tmp_path / 'test.db'}",
        frontend_dist=str(tmp_path / "dist"),
    )


@pytest.fixture
def store(tmp_path):
    s = Store(tmp_path / "test.db")
    s.init_db()
    return s


@pytest.fixture
def llm():
    return FakeLLM()


@pytest.fixture
def client(settings, store, llm):
    return TestClient(create_app(settings, store=store, llm=llm))
