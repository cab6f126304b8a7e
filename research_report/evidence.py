"""Evidence extraction from a research history.

The evidence corpus is the primary ground truth handed to the synthesizer:
the content of every ``read`` step, in order. The narrative is a one-line-per-
step rendering of the whole history, used as secondary context.
"""

from typing import Sequence

from .models import ResearchUpdate, TextContent, TextListContent, UpdateContent

READ_TYPE = "read"
CORPUS_SEPARATOR = "\n\n---\n\n"
LIST_SEPARATOR = " | "


def render_content(content: UpdateContent, separator: str = "\n\n") -> str:
    if isinstance(content, TextContent):
        return content.value
    if isinstance(content, TextListContent):
        return separator.join(content.values)
    # Validated updates only carry the two variants above.
    raise TypeError(f"Unsupported update content: {type(content).__name__}")


def extract_evidence(history: Sequence[ResearchUpdate]) -> str:
    """Join the content of all ``read`` steps; empty string when there are none."""
    return CORPUS_SEPARATOR.join(
        render_content(h.content) for h in history if h.type == READ_TYPE
    )


def render_update(update: ResearchUpdate) -> str:
    prefix = f"{update.persona} " if update.persona else ""
    return f"{prefix}{update.type}: {render_content(update.content, LIST_SEPARATOR)}"


def build_narrative(history: Sequence[ResearchUpdate]) -> str:
    return "\n".join(render_update(h) for h in history)
