"""Anthropic Claude provider.

The Messages API takes attachments as typed content blocks:
  - image/*          -> "image" block with a base64 source
  - application/pdf  -> "document" block with a base64 source
  - text/*           -> decoded and sent as a "document" with a text source

Other MIME types are rejected.

Requires: ANTHROPIC_API_KEY environment variable.
"""

import base64
import os
from typing import Any, Dict, List, Optional

import anthropic

from ..models import GenerationRequest, InlineDataPart, TextPart
from .base import LLMProvider


def _attachment_block(part: InlineDataPart) -> Dict[str, Any]:
    mime = part.mime_type
    if mime.startswith("image/"):
        return {
            "type": "image",
            "source": {"type": "base64", "media_type": mime, "data": part.data},
        }
    if mime == "application/pdf":
        return {
            "type": "document",
            "source": {"type": "base64", "media_type": mime, "data": part.data},
        }
    if mime.startswith("text/"):
        text = base64.b64decode(part.data).decode("utf-8", errors="replace")
        return {
            "type": "document",
            "source": {"type": "text", "media_type": "text/plain", "data": text},
        }
    raise ValueError(f"Anthropic provider cannot attach files of type '{mime}'")


class AnthropicProvider(LLMProvider):
    name = "anthropic"

    DEFAULT_MODELS = [
        "claude-sonnet-4-20250514",
        "claude-haiku-3-5-20241022",
    ]

    def __init__(self, max_tokens: int = 16000):
        api_key = os.environ.get("ANTHROPIC_API_KEY", "")
        if not api_key:
            raise ValueError(
                "ANTHROPIC_API_KEY is required. "
                "Get one at https://console.anthropic.com/settings/keys"
            )
        self.max_tokens = max_tokens
        self.client = anthropic.Anthropic(api_key=api_key)

    def generate(self, model: str, request: GenerationRequest) -> Optional[str]:
        # Attachments precede the prompt text.
        attachments = [_attachment_block(p) for p in request.parts if isinstance(p, InlineDataPart)]
        texts = [{"type": "text", "text": p.text} for p in request.parts if isinstance(p, TextPart)]

        response = self.client.messages.create(
            model=model,
            messages=[{"role": "user", "content": attachments + texts}],
            temperature=request.temperature,
            max_tokens=self.max_tokens,
        )
        if response is None:
            return None

        text = ""
        for block in response.content:
            if block.type == "text":
                text += block.text
        return text

    def get_available_models(self) -> List[str]:
        return self.DEFAULT_MODELS
