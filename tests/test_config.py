from __future__ import annotations

import pytest

from research_report import config
from research_report.models import ResearchMode


def test_defaults(clean_env) -> None:
    cfg = config.load_config()
    assert cfg.default_provider == "gemini"
    assert cfg.synthesis_temperature == 0.5
    assert cfg.rewrite_temperature == 0.7
    assert cfg.get_model("synthesizer", ResearchMode.DEEP_DIVE) == "gemini-2.5-pro"
    assert cfg.get_model("synthesizer", "fast") == "gemini-2.5-flash"


def test_global_model_overrides_every_mode(clean_env) -> None:
    clean_env.setenv("LLM_PROVIDER", "openai")
    clean_env.setenv("LLM_MODEL", "gpt-4.1")
    cfg = config.load_config()
    for mode in ResearchMode:
        assert cfg.get_model("synthesizer", mode) == "gpt-4.1"


def test_role_and_mode_overrides(clean_env) -> None:
    clean_env.setenv("SYNTHESIZER_PROVIDER", "anthropic")
    clean_env.setenv("SYNTHESIZER_MODEL_DEEP_DIVE", "claude-opus-4-20250514")
    clean_env.setenv("REWRITE_TEMPERATURE", "0.9")
    cfg = config.load_config()
    role = cfg.get_role("synthesizer")
    assert role.provider == "anthropic"
    assert cfg.get_model("synthesizer", ResearchMode.DEEP_DIVE) == "claude-opus-4-20250514"
    assert cfg.get_model("synthesizer", ResearchMode.FAST) == "claude-haiku-3-5-20241022"
    assert cfg.rewrite_temperature == 0.9


def test_unknown_provider_has_no_default_models(clean_env) -> None:
    clean_env.setenv("LLM_PROVIDER", "mystery")
    with pytest.raises(ValueError):
        config.load_config().get_model("synthesizer", ResearchMode.BALANCED)


def test_get_config_is_cached_until_reload(clean_env) -> None:
    first = config.get_config()
    assert config.get_config() is first
    config.reload_config()
    assert config.get_config() is not first


def test_provider_options_come_from_env(clean_env) -> None:
    clean_env.setenv("ANTHROPIC_MAX_TOKENS", "2048")
    clean_env.setenv("HF_INFERENCE_PROVIDER", "sambanova")
    cfg = config.load_config()
    assert cfg.provider_options("anthropic") == {"max_tokens": 2048}
    assert cfg.provider_options("huggingface") == {"hf_provider": "sambanova"}
    assert cfg.provider_options("gemini") == {}


def test_provider_option_defaults(clean_env) -> None:
    cfg = config.load_config()
    assert cfg.provider_options("anthropic") == {"max_tokens": 16000}
    assert cfg.provider_options("huggingface") == {"hf_provider": "novita"}
