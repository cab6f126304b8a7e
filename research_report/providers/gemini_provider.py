"""Google Gemini provider via OpenAI-compatible endpoint.

Gemini natively supports the OpenAI chat completions format:
  base_url = https://generativelanguage.googleapis.com/v1beta/openai/

Attachments of any MIME type are sent as base64 data URIs in an
``image_url`` content block, which the endpoint maps to inline data.

Requires: GEMINI_API_KEY environment variable.
"""

import os
from typing import List, Optional

from openai import OpenAI

from ..models import GenerationRequest
from .base import LLMProvider, openai_content


class GeminiProvider(LLMProvider):
    name = "gemini"

    DEFAULT_MODELS = [
        "gemini-2.5-pro",
        "gemini-2.5-flash",
    ]

    def __init__(self):
        api_key = os.environ.get("GEMINI_API_KEY", "")
        if not api_key:
            raise ValueError(
                "GEMINI_API_KEY is required. "
                "Get one at https://aistudio.google.com/apikey"
            )
        self.client = OpenAI(
            api_key=api_key,
            base_url="https://generativelanguage.googleapis.com/v1beta/openai/",
        )

    def generate(self, model: str, request: GenerationRequest) -> Optional[str]:
        response = self.client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": openai_content(request, files_as="image_url")}],
            temperature=request.temperature,
        )
        if response is None or not response.choices:
            return None
        return response.choices[0].message.content or ""

    def get_available_models(self) -> List[str]:
        return self.DEFAULT_MODELS
