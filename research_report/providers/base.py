"""Abstract base class for generation providers."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..models import GenerationRequest, InlineDataPart, TextPart


class LLMProvider(ABC):
    """Base class for all generation providers.

    Every provider accepts a ``GenerationRequest`` (one text part plus an
    optional inline binary part) and returns:

      - ``None`` when the service gave back no response to use at all
        (blocked request, no choices / candidates);
      - a possibly empty string otherwise.
    """

    name: str = "base"

    @abstractmethod
    def generate(self, model: str, request: GenerationRequest) -> Optional[str]:
        """Send *request* to *model* and return the response text."""
        ...

    def get_available_models(self) -> List[str]:
        """Return commonly used model IDs for this provider."""
        return []

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


def data_uri(part: InlineDataPart) -> str:
    return f"data:{part.mime_type};base64,{part.data}"


def openai_content(request: GenerationRequest, files_as: str = "image_url") -> List[Dict[str, Any]]:
    """Translate *request* parts into OpenAI-style chat content blocks.

    Images always travel as ``image_url`` data URIs. Other MIME types use
    ``files_as``: ``"image_url"`` for endpoints that accept any inline data
    that way (Gemini, HF), ``"file"`` for the OpenAI file content block.
    """
    content: List[Dict[str, Any]] = []
    for part in request.parts:
        if isinstance(part, TextPart):
            content.append({"type": "text", "text": part.text})
        elif part.mime_type.startswith("image/") or files_as == "image_url":
            content.append({"type": "image_url", "image_url": {"url": data_uri(part)}})
        else:
            content.append({
                "type": "file",
                "file": {"filename": part.name or "attachment", "file_data": data_uri(part)},
            })
    return content
