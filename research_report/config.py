"""Centralised configuration.

Provider, model tier and temperature are driven by environment variables.
Both report pipelines select their model through the ``synthesizer`` role;
they differ only in temperature.

Env vars
--------
LLM_PROVIDER                Default provider (gemini / openai / anthropic / huggingface)
LLM_MODEL                   Force one model for every mode (auto-selected if empty)

GEMINI_API_KEY              Google Gemini
OPENAI_API_KEY              OpenAI
ANTHROPIC_API_KEY           Anthropic
HF_TOKEN                    HuggingFace

SYNTHESIZER_PROVIDER        Per-role override
SYNTHESIZER_MODEL           Per-role override (all modes)
SYNTHESIZER_MODEL_<MODE>    Per-mode override, e.g. SYNTHESIZER_MODEL_DEEP_DIVE

SYNTHESIS_TEMPERATURE       Default 0.5
REWRITE_TEMPERATURE         Default 0.7

ANTHROPIC_MAX_TOKENS        Output cap for Claude (default 16000)
HF_INFERENCE_PROVIDER       HF routing provider (default novita)
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .models import ResearchMode

load_dotenv()

# ---- model tiers per provider ----
MODE_MODELS: Dict[str, Dict[ResearchMode, str]] = {
    "gemini": {
        ResearchMode.FAST: "gemini-2.5-flash",
        ResearchMode.BALANCED: "gemini-2.5-flash",
        ResearchMode.DEEP_DIVE: "gemini-2.5-pro",
    },
    "openai": {
        ResearchMode.FAST: "gpt-4o-mini",
        ResearchMode.BALANCED: "gpt-4o",
        ResearchMode.DEEP_DIVE: "gpt-4o",
    },
    "anthropic": {
        ResearchMode.FAST: "claude-haiku-3-5-20241022",
        ResearchMode.BALANCED: "claude-sonnet-4-20250514",
        ResearchMode.DEEP_DIVE: "claude-opus-4-20250514",
    },
    "huggingface": {
        ResearchMode.FAST: "Qwen/Qwen2.5-72B-Instruct",
        ResearchMode.BALANCED: "Qwen/Qwen2.5-72B-Instruct",
        ResearchMode.DEEP_DIVE: "meta-llama/Llama-3.3-70B-Instruct",
    },
}
ROLES = ["synthesizer"]

SYNTHESIS_TEMPERATURE = 0.5
REWRITE_TEMPERATURE = 0.7
ANTHROPIC_MAX_TOKENS = 16000
HF_INFERENCE_PROVIDER = "novita"


@dataclass
class RoleConfig:
    provider: str
    model: str = ""
    mode_models: Dict[str, str] = field(default_factory=dict)


@dataclass
class AppConfig:
    default_provider: str = "gemini"
    default_model: str = ""
    synthesis_temperature: float = SYNTHESIS_TEMPERATURE
    rewrite_temperature: float = REWRITE_TEMPERATURE
    anthropic_max_tokens: int = ANTHROPIC_MAX_TOKENS
    hf_provider: str = HF_INFERENCE_PROVIDER
    roles: Dict[str, RoleConfig] = field(default_factory=dict)

    def get_role(self, name: str) -> RoleConfig:
        """Return config for *name*, falling back to the global default."""
        if name in self.roles:
            return self.roles[name]
        return RoleConfig(provider=self.default_provider, model=self.default_model)

    def get_model(self, role: str, mode: ResearchMode) -> str:
        """Resolve the model for *role* at the tier selected by *mode*."""
        rc = self.get_role(role)
        mode = ResearchMode(mode)
        if mode.value in rc.mode_models:
            return rc.mode_models[mode.value]
        if rc.model:
            return rc.model
        tiers = MODE_MODELS.get(rc.provider)
        if not tiers:
            raise ValueError(f"No default models known for provider '{rc.provider}'")
        return tiers[mode]

    def provider_options(self, provider: str) -> Dict[str, Any]:
        """Constructor options for *provider* taken from this config."""
        if provider == "anthropic":
            return {"max_tokens": self.anthropic_max_tokens}
        if provider == "huggingface":
            return {"hf_provider": self.hf_provider}
        return {}


def load_config() -> AppConfig:
    provider = os.getenv("LLM_PROVIDER", "gemini")
    model = os.getenv("LLM_MODEL", "")

    cfg = AppConfig(
        default_provider=provider,
        default_model=model,
        synthesis_temperature=float(
            os.getenv("SYNTHESIS_TEMPERATURE", str(SYNTHESIS_TEMPERATURE))
        ),
        rewrite_temperature=float(
            os.getenv("REWRITE_TEMPERATURE", str(REWRITE_TEMPERATURE))
        ),
        anthropic_max_tokens=int(
            os.getenv("ANTHROPIC_MAX_TOKENS", str(ANTHROPIC_MAX_TOKENS))
        ),
        hf_provider=os.getenv("HF_INFERENCE_PROVIDER", HF_INFERENCE_PROVIDER),
    )

    for role in ROLES:
        pfx = role.upper()
        p = os.getenv(f"{pfx}_PROVIDER")
        m = os.getenv(f"{pfx}_MODEL")
        per_mode = {}
        for mode in ResearchMode:
            mm = os.getenv(f"{pfx}_MODEL_{mode.name}")
            if mm:
                per_mode[mode.value] = mm
        if p or m or per_mode:
            cfg.roles[role] = RoleConfig(
                provider=p or provider,
                model=m or ("" if p else model),
                mode_models=per_mode,
            )
    return cfg


_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config():
    global _config
    _config = load_config()
