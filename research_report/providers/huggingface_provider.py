"""HuggingFace Inference API provider.

Supports multiple HF inference providers (novita, sambanova, auto, etc.).
Attachments use OpenAI-style ``image_url`` data URIs, so only vision
models will make use of them. Handles DeepSeek <think> tag cleaning.

Requires: HF_TOKEN environment variable.
"""

import os
import re
from typing import List, Optional

from huggingface_hub import InferenceClient

from ..models import GenerationRequest
from .base import LLMProvider, openai_content


class HuggingFaceProvider(LLMProvider):
    name = "huggingface"

    DEFAULT_MODELS = [
        "Qwen/Qwen2.5-72B-Instruct",
        "meta-llama/Llama-3.3-70B-Instruct",
    ]

    def __init__(self, hf_provider: str = "novita"):
        api_key = os.environ.get("HF_TOKEN", "")
        if not api_key:
            raise ValueError(
                "HF_TOKEN is required. "
                "Get one at https://huggingface.co/settings/tokens"
            )
        self.hf_provider = hf_provider
        self.client = InferenceClient(
            api_key=api_key,
            provider=hf_provider,
        )

    def generate(self, model: str, request: GenerationRequest) -> Optional[str]:
        completion = self.client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": openai_content(request, files_as="image_url")}],
            temperature=request.temperature,
        )
        if completion is None or not completion.choices:
            return None
        content = completion.choices[0].message.content or ""

        # Strip DeepSeek <think> blocks
        if "<think>" in content and "</think>" in content:
            content = re.sub(r"<think>.*?</think>", "", content, flags=re.DOTALL).strip()
        return content

    def get_available_models(self) -> List[str]:
        return self.DEFAULT_MODELS
