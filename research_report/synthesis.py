"""Report synthesis and rewrite pipelines.

Both pipelines build a prompt, make a single generation call and validate
the result. They deliberately differ on an empty response:

  - synthesis returns ``EMPTY_REPORT_NOTICE`` as the report, so the research
    artifact stays renderable;
  - rewrite raises ``GenerationUnavailable``, because an empty rewrite has
    nothing to show.

A missing response raises ``GenerationUnavailable`` in both.
"""

import asyncio
import logging
from typing import Optional, Sequence

from langsmith import traceable

from .config import get_config
from .evidence import build_narrative, extract_evidence
from .generation import build_request, generate, require_text, text_or_notice
from .models import Citation, FileData, ResearchMode, ResearchUpdate, SynthesisResult
from .prompts import build_rewrite_prompt, build_synthesis_prompt

logger = logging.getLogger(__name__)

EMPTY_REPORT_NOTICE = "Failed to generate an initial report. The response from the AI was empty."


def assemble_synthesis_prompt(
    query: str,
    history: Sequence[ResearchUpdate],
    file: Optional[FileData] = None,
) -> str:
    return build_synthesis_prompt(
        query=query,
        evidence=extract_evidence(history),
        narrative=build_narrative(history),
        file=file,
    )


@traceable(name="synthesize_report")
async def synthesize_report(
    query: str,
    history: Sequence[ResearchUpdate],
    citations: Sequence[Citation],
    mode: ResearchMode,
    file: Optional[FileData] = None,
) -> SynthesisResult:
    # Citations are rendered separately by the caller and never enter the prompt.
    prompt = assemble_synthesis_prompt(query, history, file)
    logger.info(
        "Synthesizing report: %d updates, %d citations, file=%s, prompt=%d chars",
        len(history), len(citations), file.name if file else None, len(prompt),
    )

    request = build_request(prompt, file, get_config().synthesis_temperature)
    result = await asyncio.to_thread(generate, request, mode, "synthesis")
    return SynthesisResult(report=text_or_notice(result, "synthesis", EMPTY_REPORT_NOTICE))


@traceable(name="rewrite_report")
async def rewrite_report(
    original_report: str,
    instruction: str,
    mode: ResearchMode,
    file: Optional[FileData] = None,
) -> str:
    prompt = build_rewrite_prompt(original_report, instruction, file)
    logger.info(
        "Rewriting report (%d chars) with instruction %r, file=%s",
        len(original_report), instruction[:80], file.name if file else None,
    )

    request = build_request(prompt, file, get_config().rewrite_temperature)
    result = await asyncio.to_thread(generate, request, mode, "rewrite")
    return require_text(result, "rewrite")
