from __future__ import annotations

from typing import Any

import pytest

from research_report import config, generation
from research_report.models import GenerationRequest
from research_report.providers.base import LLMProvider


class FakeProvider(LLMProvider):
    name = "fake"

    def __init__(self, result: Any = "# Report\n") -> None:
        self.result = result
        self.calls: list[tuple[str, GenerationRequest]] = []

    def generate(self, model: str, request: GenerationRequest):
        self.calls.append((model, request))
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


@pytest.fixture
def clean_env(monkeypatch):
    for var in (
        "LLM_PROVIDER",
        "LLM_MODEL",
        "SYNTHESIZER_PROVIDER",
        "SYNTHESIZER_MODEL",
        "SYNTHESIZER_MODEL_FAST",
        "SYNTHESIZER_MODEL_BALANCED",
        "SYNTHESIZER_MODEL_DEEP_DIVE",
        "SYNTHESIS_TEMPERATURE",
        "REWRITE_TEMPERATURE",
        "ANTHROPIC_MAX_TOKENS",
        "HF_INFERENCE_PROVIDER",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("LANGSMITH_TRACING", "false")
    monkeypatch.setattr(config, "_config", None)
    return monkeypatch


@pytest.fixture
def fake_provider(clean_env):
    provider = FakeProvider()
    requested: list[str] = []
    options: list[dict] = []

    def _get_provider(name: str, **kwargs):
        requested.append(name)
        options.append(kwargs)
        return provider

    clean_env.setattr(generation, "get_provider", _get_provider)
    provider.requested = requested
    provider.options = options
    return provider
