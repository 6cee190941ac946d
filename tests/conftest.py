import pytest
from unittest import mock
from fastapi.testclient import TestClient
from dumbify import database
from dumbify.api import app, limiter, settings

# Disable rate limiting for all tests
limiter.enabled = False

SAMPLE_EXPLANATION = (
    "## 🎯 Quick Summary\n"
    "It prints hello to the screen.\n\n"
    "## 🔍 Line by Line\n"
    "- `print('hello')` shows the word hello"
)


def make_completion(content):
    message = mock.Mock()
    message.content = content
    choice = mock.Mock()
    choice.message = message
    completion = mock.Mock()
    completion.choices = [choice]
    return completion


@pytest.fixture(scope="module")
def client():
    return TestClient(app)

@pytest.fixture
def base_payload():
    return {
        "code": "print('hello')",
        "tone": "baby",
    }

@pytest.fixture
def completion_factory():
    return make_completion

@pytest.fixture
def api_key():
    # Override the settings object the running app reads from
    original = settings.OPENROUTER_API_KEY
    settings.OPENROUTER_API_KEY = "test-key"
    yield settings
    settings.OPENROUTER_API_KEY = original

@pytest.fixture
def mock_openai():
    with mock.patch("dumbify.dispatcher.OpenAI") as mock_client:
        instance = mock_client.return_value
        instance.chat.completions.create.return_value = make_completion(SAMPLE_EXPLANATION)
        yield mock_client

@pytest.fixture
def temp_db(tmp_path):
    db_path = tmp_path / "test_explanations.db"
    with mock.patch("dumbify.database.DB_NAME", str(db_path)):
        database.init_db()
        yield str(db_path)
