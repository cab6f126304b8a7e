"""Evidence-grounded research report synthesis and rewriting."""

from .errors import GenerationUnavailable
from .evidence import build_narrative, extract_evidence
from .models import (
    Citation,
    FileData,
    ResearchMode,
    ResearchUpdate,
    SynthesisResult,
    TextContent,
    TextListContent,
)
from .prompts import PROMPT_VERSION, build_rewrite_prompt, build_synthesis_prompt
from .synthesis import EMPTY_REPORT_NOTICE, rewrite_report, synthesize_report

__all__ = [
    "Citation",
    "EMPTY_REPORT_NOTICE",
    "FileData",
    "GenerationUnavailable",
    "PROMPT_VERSION",
    "ResearchMode",
    "ResearchUpdate",
    "SynthesisResult",
    "TextContent",
    "TextListContent",
    "build_narrative",
    "build_rewrite_prompt",
    "build_synthesis_prompt",
    "extract_evidence",
    "rewrite_report",
    "synthesize_report",
]
