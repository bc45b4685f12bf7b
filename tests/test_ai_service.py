"""Tests for provider selection and API-key fallback in AIService."""

from types import SimpleNamespace

import pytest

from paste2resume.config import AISettings, Settings
from paste2resume.exceptions import ConfigurationError
from paste2resume.services import ai_service as ai_module
from paste2resume.services.ai_service import AIService


@pytest.mark.parametrize("model, provider", [
    ("gpt-4o-mini", "openai"),
    ("o3-mini", "openai"),
    ("claude-3-5-sonnet-latest", "anthropic"),
    ("llama3.1", "ollama"),
    ("mistral", "ollama"),
])
def test_determine_provider(model, provider):
    assert AIService.determine_provider(model) == provider


def test_hosted_model_used_when_key_present(settings, monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    assert AIService(settings).resolve_model("gpt-4o-mini") == "gpt-4o-mini"


def test_missing_key_falls_back_to_ollama(settings, monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    assert AIService(settings).resolve_model("claude-3-haiku-20240307") == "llama3.1"


def test_missing_key_without_fallback_raises(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    settings = Settings(_env_file=None, ai_settings=AISettings(fallback_model=None))

    with pytest.raises(ConfigurationError, match="OPENAI_API_KEY"):
        AIService(settings).resolve_model("gpt-4o-mini")


def test_ollama_completion(settings, monkeypatch):
    calls = []

    def fake_chat(model, messages, options):
        calls.append({"model": model, "messages": messages, "options": options})
        return {"message": {"content": "  name: Jane  "}}

    monkeypatch.setattr(ai_module.ollama, "chat", fake_chat)

    result = AIService(settings).generate_completion(
        "USER INFO: x", model="llama3.1", system_prompt="Extract", temperature=0.0
    )

    assert result == "name: Jane"
    assert calls[0]["model"] == "llama3.1"
    assert calls[0]["messages"] == [
        {"role": "system", "content": "Extract"},
        {"role": "user", "content": "USER INFO: x"},
    ]
    assert calls[0]["options"] == {"temperature": 0.0}


def test_openai_completion(settings, monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    calls = []

    def create(**kwargs):
        calls.append(kwargs)
        message = SimpleNamespace(content=" <html></html> ")
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])

    service = AIService(settings)
    service._clients["openai"] = SimpleNamespace(
        chat=SimpleNamespace(completions=SimpleNamespace(create=create))
    )

    result = service.generate_completion("prompt", model="gpt-4o-mini", temperature=0.2)

    assert result == "<html></html>"
    assert calls[0]["model"] == "gpt-4o-mini"
    assert calls[0]["temperature"] == 0.2
    assert calls[0]["max_tokens"] == settings.ai_settings.max_tokens
    assert calls[0]["messages"] == [{"role": "user", "content": "prompt"}]


def test_anthropic_completion_passes_system_prompt(settings, monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "test-key")
    calls = []

    def create(**kwargs):
        calls.append(kwargs)
        return SimpleNamespace(content=[SimpleNamespace(text="name: Jane\n")])

    service = AIService(settings)
    service._clients["anthropic"] = SimpleNamespace(messages=SimpleNamespace(create=create))

    result = service.generate_completion(
        "prompt", model="claude-3-5-haiku-latest", system_prompt="Extract", max_tokens=500
    )

    assert result == "name: Jane"
    assert calls[0]["system"] == "Extract"
    assert calls[0]["max_tokens"] == 500


def test_provider_errors_propagate(settings, monkeypatch):
    def failing_chat(**kwargs):
        raise ConnectionError("ollama is not running")

    monkeypatch.setattr(ai_module.ollama, "chat", failing_chat)

    with pytest.raises(ConnectionError):
        AIService(settings).generate_completion("prompt", model="llama3.1")
