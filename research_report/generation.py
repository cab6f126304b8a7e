"""Request packaging, invocation and response validation.

Every pipeline goes through ``generate()``: exactly one provider call, no
retries. Failure policy is applied afterwards by ``require_text`` (hard) or
``text_or_notice`` (soft), so the pipelines decide which one they want.
"""

import logging
from typing import Optional

from .config import get_config
from .errors import GenerationUnavailable
from .events import emit
from .models import FileData, GenerationRequest, InlineDataPart, ResearchMode, TextPart
from .providers import get_provider

logger = logging.getLogger(__name__)

MODEL_ROLE = "synthesizer"


def build_request(prompt: str, file: Optional[FileData], temperature: float) -> GenerationRequest:
    """One text part, plus one inline part when *file* is given."""
    parts = [TextPart(text=prompt)]
    if file is not None:
        parts.append(InlineDataPart(mime_type=file.mime_type, data=file.data, name=file.name))
    return GenerationRequest(parts=tuple(parts), temperature=temperature)


def generate(request: GenerationRequest, mode: ResearchMode, stage: str) -> Optional[str]:
    """Send *request* to the provider configured for the synthesizer role."""
    cfg = get_config()
    role = cfg.get_role(MODEL_ROLE)
    model = cfg.get_model(MODEL_ROLE, mode)
    provider = get_provider(role.provider, **cfg.provider_options(role.provider))

    emit({
        "type": "llm-call-start",
        "model": model,
        "provider": role.provider,
        "stage": stage,
        "parts": len(request.parts),
        "temperature": request.temperature,
    })
    try:
        result = provider.generate(model, request)
    except Exception as exc:
        emit({
            "type": "llm-call-error",
            "model": model,
            "provider": role.provider,
            "stage": stage,
            "error": str(exc)[:200],
        })
        logger.error("%s call to %s/%s failed: %s", stage, role.provider, model, exc)
        raise

    emit({
        "type": "llm-call-end",
        "model": model,
        "provider": role.provider,
        "stage": stage,
        "has_response": result is not None,
        "output_length": len(result or ""),
    })
    return result


def require_response(result: Optional[str], stage: str) -> str:
    if result is None:
        raise GenerationUnavailable(
            f"The API did not return a response during report {stage}. "
            "This might be due to content filters blocking the request.",
            stage=stage,
        )
    return result


def require_text(result: Optional[str], stage: str) -> str:
    """Trimmed text, or ``GenerationUnavailable`` if there is none."""
    text = require_response(result, stage).strip()
    if not text:
        raise GenerationUnavailable(
            f"The API did not return a response during report {stage}. "
            "This might be due to content filters blocking the request.",
            stage=stage,
        )
    return text


def text_or_notice(result: Optional[str], stage: str, notice: str) -> str:
    """Trimmed text, or *notice* if the response carried none.

    A missing response is still a hard failure.
    """
    text = require_response(result, stage).strip()
    if not text:
        logger.warning("Empty response during report %s; returning notice", stage)
        emit({"type": "report-empty", "stage": stage})
        return notice
    return text
