"""FastAPI surface over the synthesis and rewrite pipelines.

Routes every generation call through the pluggable provider abstraction
(Gemini / OpenAI / Claude / HuggingFace).
"""

import os
from typing import List, Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from .config import MODE_MODELS, get_config
from .errors import GenerationUnavailable
from .models import Citation, FileData, ResearchMode, ResearchUpdate
from .prompts import PROMPT_VERSION
from .providers import list_providers
from .synthesis import rewrite_report, synthesize_report

load_dotenv()

app = FastAPI(
    title="Research Report API",
    description="Evidence-grounded report synthesis and rewriting",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        os.environ.get("FRONTEND_URL", "http://localhost:3000"),
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── request / response models ───────────────────────────────────────

class SynthesizeRequest(BaseModel):
    query: str
    history: List[ResearchUpdate] = Field(default_factory=list)
    citations: List[Citation] = Field(default_factory=list)
    mode: ResearchMode = ResearchMode.BALANCED
    file: Optional[FileData] = None


class RewriteRequest(BaseModel):
    report: str
    instruction: str
    mode: ResearchMode = ResearchMode.BALANCED
    file: Optional[FileData] = None


class ReportResponse(BaseModel):
    report: str


# ── helpers ──────────────────────────────────────────────────────────

def _get_error_hint(error_msg: str) -> str:
    lower = error_msg.lower()
    if "content filter" in lower:
        return "The request may have been blocked by the provider's safety filters."
    if "402" in lower or "payment" in lower:
        return "API credits depleted. Check your billing at the provider's dashboard."
    if "404" in lower or "not found" in lower:
        return "Model not found or temporarily unavailable."
    if "401" in lower or "unauthorized" in lower:
        return "Invalid API key. Check your .env file."
    if "403" in lower:
        return "Access denied. Your API key may lack permissions for this model."
    if "api_key" in lower or "token is required" in lower:
        return "Provider credentials are missing. Check your .env file."
    if "rate" in lower or "429" in lower:
        return "Rate limited. Try again shortly."
    return ""


def _error_detail(exc: Exception) -> dict:
    msg = str(exc)
    return {"error": msg, "hint": _get_error_hint(msg)}


# ── routes ───────────────────────────────────────────────────────────

@app.post("/api/report/synthesize", response_model=ReportResponse)
async def synthesize(request: SynthesizeRequest):
    try:
        result = await synthesize_report(
            request.query,
            request.history,
            request.citations,
            request.mode,
            request.file,
        )
    except GenerationUnavailable as exc:
        raise HTTPException(status_code=502, detail=_error_detail(exc))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=_error_detail(exc))
    return ReportResponse(report=result.report)


@app.post("/api/report/rewrite", response_model=ReportResponse)
async def rewrite(request: RewriteRequest):
    try:
        report = await rewrite_report(
            request.report,
            request.instruction,
            request.mode,
            request.file,
        )
    except GenerationUnavailable as exc:
        raise HTTPException(status_code=502, detail=_error_detail(exc))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=_error_detail(exc))
    return ReportResponse(report=report)


@app.get("/api/config")
async def get_app_config():
    """Return current provider configuration (no secrets)."""
    cfg = get_config()
    return {
        "default_provider": cfg.default_provider,
        "default_model": cfg.default_model,
        "synthesis_temperature": cfg.synthesis_temperature,
        "rewrite_temperature": cfg.rewrite_temperature,
        "prompt_version": PROMPT_VERSION,
        "available_providers": list_providers(),
        "mode_models": {
            provider: {mode.value: model for mode, model in tiers.items()}
            for provider, tiers in MODE_MODELS.items()
        },
        "role_overrides": {
            role: {"provider": rc.provider, "model": rc.model, "mode_models": rc.mode_models}
            for role, rc in cfg.roles.items()
        },
    }


@app.get("/api/health")
async def health_check():
    cfg = get_config()
    return {
        "status": "healthy",
        "version": "1.0.0",
        "provider": cfg.default_provider,
        "env_check": {
            "gemini_key": bool(os.environ.get("GEMINI_API_KEY")),
            "openai_key": bool(os.environ.get("OPENAI_API_KEY")),
            "anthropic_key": bool(os.environ.get("ANTHROPIC_API_KEY")),
            "hf_token": bool(os.environ.get("HF_TOKEN")),
            "langsmith": bool(os.environ.get("LANGSMITH_API_KEY")),
        },
    }
