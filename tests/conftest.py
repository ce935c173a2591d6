# tests/conftest.py
from types import SimpleNamespace

import pytest

from flask_app import create_app
from src.ai.gateway import build_provider_chain
from src.ai.providers import DemoProvider, GeminiProvider, OpenAIProvider
from src.database.memory_store import SummaryStore


class FakeGeminiClient:
    """Stands in for google.genai.Client; generate_content lives on client.models."""

    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.calls = []
        self.models = self

    def generate_content(self, model, contents, config=None):
        self.calls.append({'model': model, 'contents': contents, 'config': config})
        if self.error:
            raise self.error
        return SimpleNamespace(text=self.text)


class FakeChatModel:
    """Stands in for langchain_openai.ChatOpenAI."""

    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    def invoke(self, messages):
        self.calls.append(messages)
        if self.error:
            raise self.error
        return SimpleNamespace(content=self.content)


class RecordingDispatcher:
    """Collects send requests instead of delivering them."""

    def __init__(self, error=None):
        self.error = error
        self.sent = []

    def send(self, request):
        if self.error:
            raise self.error
        self.sent.append(request)


def make_providers(gemini_client=None, openai_model=None):
    """Provider chain where a fake client means the credential is configured."""
    gemini = GeminiProvider("gemini-key" if gemini_client else None, client=gemini_client)
    openai = OpenAIProvider("openai-key" if openai_model else None, llm=openai_model)
    return [gemini, openai, DemoProvider(gemini, openai)]


@pytest.fixture
def store():
    return SummaryStore()


@pytest.fixture
def dispatcher():
    return RecordingDispatcher()


@pytest.fixture
def make_app(store, dispatcher, tmp_path):
    def _make_app(providers=None, dispatcher=dispatcher, **config):
        overrides = {'TESTING': True, 'EMAIL_OUTBOX_DIR': str(tmp_path / 'outbox')}
        overrides.update(config)
        return create_app(
            config_overrides=overrides,
            config_name='testing',
            store=store,
            dispatcher=dispatcher,
            providers=providers if providers is not None else build_provider_chain(None, None),
        )
    return _make_app


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def created_summary(client):
    response = client.post('/api/generate-summary', json={
        'transcript': "Alice: Let's ship Friday.\nBob: Agreed, I'll update the release notes.",
        'prompt': "List action items",
    })
    assert response.status_code == 200
    return response.get_json()
