"""
Shared fixtures: an app wired to an in-memory SQLite database and a
recording chat model in place of ChatOpenAI. Zero network calls.
"""
import pytest
from fastapi.testclient import TestClient
from langchain_core.messages import AIMessage

from app.client.api import ApiClient
from app.core.config import Settings
from app.core.database import Database
from app.main import create_app
from app.services.student.student import StudentStore


class RecordingChatModel:
    """Stands in for the chat model: records prompts, replays canned answers."""

    def __init__(self):
        self.responses = []
        self.error = None
        self.calls = []

    async def ainvoke(self, messages, *args, **kwargs):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return AIMessage(content=self.responses.pop(0) if self.responses else "")


class FakeProviderError(Exception):
    """Shaped like openai.APIStatusError: provider error object in `body`."""

    def __init__(self, message, body=None):
        super().__init__(message)
        self.body = body


@pytest.fixture
def test_settings():
    return Settings(_env_file=None, DATABASE_URL="sqlite://", OPENAI_API_KEY="test-key", LOG_LEVEL="WARNING")


@pytest.fixture
def fake_llm():
    return RecordingChatModel()


@pytest.fixture
def provider_error():
    return FakeProviderError


@pytest.fixture
def client(test_settings, fake_llm):
    app = create_app(test_settings, llm=fake_llm)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def api(client):
    return ApiClient("http://testserver/api", http_client=client)


@pytest.fixture
def database(test_settings):
    db = Database.from_settings(test_settings)
    db.create_tables()
    yield db
    db.close()


@pytest.fixture
def store(database):
    with database.session() as session:
        yield StudentStore(session)


@pytest.fixture
def make_student(client):
    def _make(name="Ada", age=20, class_="CS101", **extra):
        body = {"name": name, "age": age, "class": class_, **extra}
        res = client.post("/api/students", json=body)
        assert res.status_code == 201, res.text
        return res.json()
    return _make
