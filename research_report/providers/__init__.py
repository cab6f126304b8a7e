"""Generation provider registry.

Supported providers:
  - gemini      (Google Gemini via OpenAI-compatible endpoint)
  - openai      (OpenAI GPT models)
  - anthropic   (Anthropic Claude models, accepts ``max_tokens``)
  - huggingface (HuggingFace Inference API, accepts ``hf_provider``)

Instances are cached per name and constructor options, so changing
``ANTHROPIC_MAX_TOKENS`` or ``HF_INFERENCE_PROVIDER`` and reloading the
config yields a fresh client.
"""

from typing import Dict, Tuple

from .base import LLMProvider

_cache: Dict[Tuple[str, Tuple[Tuple[str, object], ...]], LLMProvider] = {}


def _create(name: str, options: Dict[str, object]) -> LLMProvider:
    if name == "gemini":
        from .gemini_provider import GeminiProvider
        return GeminiProvider(**options)
    if name == "openai":
        from .openai_provider import OpenAIProvider
        return OpenAIProvider(**options)
    if name == "anthropic":
        from .anthropic_provider import AnthropicProvider
        return AnthropicProvider(**options)
    if name == "huggingface":
        from .huggingface_provider import HuggingFaceProvider
        return HuggingFaceProvider(**options)
    raise ValueError(
        f"Unknown provider: '{name}'. "
        f"Supported: {', '.join(list_providers())}"
    )


def get_provider(name: str, **options) -> LLMProvider:
    """Get or create a provider instance for *name* built with *options*."""
    cache_key = (name, tuple(sorted(options.items())))
    if cache_key not in _cache:
        _cache[cache_key] = _create(name, options)
    return _cache[cache_key]


def clear_cache():
    _cache.clear()


def list_providers() -> list:
    return ["gemini", "openai", "anthropic", "huggingface"]


__all__ = ["LLMProvider", "get_provider", "list_providers", "clear_cache"]
