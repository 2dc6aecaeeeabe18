from types import SimpleNamespace

import pytest

from hangman.services import llm_picker


class FakeClient:
    """Stands in for openai.OpenAI; replies with the queued contents in order."""

    def __init__(self, replies):
        self._replies = list(replies)
        self.calls = 0
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def _create(self, **kwargs):
        self.calls += 1
        reply = self._replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, SimpleNamespace):
            return reply
        message = SimpleNamespace(content=reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def online(monkeypatch):
    monkeypatch.setenv("OFFLINE_MODE", "false")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")


def install(monkeypatch, client):
    monkeypatch.setattr(llm_picker, "OpenAI", lambda api_key: client)


def test_offline_returns_none(monkeypatch):
    monkeypatch.setenv("OFFLINE_MODE", "true")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    assert llm_picker.pick_with_llm() is None


def test_missing_key_returns_none(monkeypatch):
    monkeypatch.setenv("OFFLINE_MODE", "false")
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    assert llm_picker.pick_with_llm() is None


def test_returns_cleaned_word(monkeypatch, online):
    install(monkeypatch, FakeClient(['  "Lantern"\n']))
    assert llm_picker.pick_with_llm() == "lantern"


def test_retries_after_error_and_bad_word(monkeypatch, online):
    client = FakeClient([RuntimeError("boom"), "two words", "meadow"])
    install(monkeypatch, client)
    assert llm_picker.pick_with_llm(retries=2) == "meadow"
    assert client.calls == 3


def test_gives_up_after_retries(monkeypatch, online):
    client = FakeClient(["123", "", "nope!"])
    install(monkeypatch, client)
    assert llm_picker.pick_with_llm(retries=2) is None
    assert client.calls == 3


def test_malformed_response_is_not_raised(monkeypatch, online):
    client = FakeClient([
        SimpleNamespace(choices=[]),
        SimpleNamespace(choices=[SimpleNamespace()]),
        SimpleNamespace(choices=[]),
    ])
    install(monkeypatch, client)
    assert llm_picker.pick_with_llm(retries=2) is None
    assert client.calls == 3


def test_recovers_after_empty_choices(monkeypatch, online):
    client = FakeClient([SimpleNamespace(choices=[]), "walnut"])
    install(monkeypatch, client)
    assert llm_picker.pick_with_llm(retries=1) == "walnut"
