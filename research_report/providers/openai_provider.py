"""OpenAI provider (GPT-4o, etc.).

Images are sent as ``image_url`` data URIs, everything else (PDFs, text
files) as ``file`` content blocks.

Requires: OPENAI_API_KEY environment variable.
"""

import os
from typing import List, Optional

from openai import OpenAI

from ..models import GenerationRequest
from .base import LLMProvider, openai_content


class OpenAIProvider(LLMProvider):
    name = "openai"

    DEFAULT_MODELS = [
        "gpt-4o",
        "gpt-4o-mini",
    ]

    def __init__(self):
        api_key = os.environ.get("OPENAI_API_KEY", "")
        if not api_key:
            raise ValueError(
                "OPENAI_API_KEY is required. "
                "Get one at https://platform.openai.com/api-keys"
            )
        self.client = OpenAI(api_key=api_key)

    def generate(self, model: str, request: GenerationRequest) -> Optional[str]:
        response = self.client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": openai_content(request, files_as="file")}],
            temperature=request.temperature,
        )
        if response is None or not response.choices:
            return None
        return response.choices[0].message.content or ""

    def get_available_models(self) -> List[str]:
        return self.DEFAULT_MODELS
