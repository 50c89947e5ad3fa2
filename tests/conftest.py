"""Pytest configuration and shared fixtures."""
import os
from types import SimpleNamespace

import pytest

from personachat.llm import LLMProvider
from personachat.settings import SettingsStore

TEST_API_KEY = "AIzaSy-test-key-0000"


class FakeProvider(LLMProvider):
    """In-memory stand-in for the Gemini provider."""

    def __init__(self, api_key: str, reply: str = "Happy to help!", error: Exception | None = None):
        self.api_key = api_key
        self.reply = reply
        self.error = error
        self.calls: list[tuple[str, str]] = []
        self.closed = False

    async def generate_response(self, instruction: str, message: str) -> str:
        self.calls.append((instruction, message))
        if self.error is not None:
            raise self.error
        return self.reply

    async def close(self) -> None:
        self.closed = True


class FakeProviderFactory:
    """Provider factory recording every provider it builds."""

    def __init__(self, reply: str = "Happy to help!", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.providers: list[FakeProvider] = []

    def __call__(self, api_key: str) -> FakeProvider:
        provider = FakeProvider(api_key, reply=self.reply, error=self.error)
        self.providers.append(provider)
        return provider

    @property
    def call_count(self) -> int:
        return sum(len(p.calls) for p in self.providers)


class FakeModels:
    """Mimics client.aio.models of the google-genai SDK."""

    def __init__(self, response=None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    async def generate_content(self, *, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return self.response


def make_genai_client(models: FakeModels) -> SimpleNamespace:
    """Wrap FakeModels in the client.aio.models shape."""
    return SimpleNamespace(aio=SimpleNamespace(models=models))


@pytest.fixture(scope="session")
def gemini_api_key():
    """Return the real Gemini API key from environment, if any."""
    return os.getenv("GEMINI_API_KEY")


@pytest.fixture
def settings_path(tmp_path):
    """Path of a settings file inside a temporary data directory."""
    return tmp_path / "data" / "settings.json"


@pytest.fixture
def empty_settings(settings_path):
    """Opened settings store without an API key."""
    store = SettingsStore(settings_path).open()
    yield store
    store.close()


@pytest.fixture
def keyed_settings(settings_path):
    """Opened settings store with a saved API key."""
    store = SettingsStore(settings_path).open()
    store.save_api_key(TEST_API_KEY)
    yield store
    store.close()


@pytest.fixture
def provider_factory():
    """Factory producing providers that answer successfully."""
    return FakeProviderFactory()
