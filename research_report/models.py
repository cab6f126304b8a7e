"""Data models for the report pipelines."""

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ResearchMode(str, Enum):
    FAST = "fast"
    BALANCED = "balanced"
    DEEP_DIVE = "deep_dive"


# ---------- research history ----------

class TextContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    value: str


class TextListContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["text_list"] = "text_list"
    values: List[str] = Field(default_factory=list)


UpdateContent = Annotated[
    Union[TextContent, TextListContent], Field(discriminator="kind")
]


class ResearchUpdate(BaseModel):
    """One step of a research session.

    ``content`` accepts a plain string or a list of strings and stores it as
    the matching ``UpdateContent`` variant.
    """

    model_config = ConfigDict(frozen=True)

    type: str = Field(..., description="Action kind, e.g. 'search', 'read', 'thought'")
    content: UpdateContent
    persona: Optional[str] = Field(default=None, description="Sub-agent label")

    @field_validator("content", mode="before")
    @classmethod
    def _coerce_content(cls, value: Any) -> Any:
        if isinstance(value, str):
            return {"kind": "text", "value": value}
        if isinstance(value, (list, tuple)):
            return {"kind": "text_list", "values": list(value)}
        return value


class Citation(BaseModel):
    url: str
    title: str = ""


class FileData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    mime_type: str = Field(..., alias="mimeType")
    data: str = Field(..., description="Base64 payload, passed through unchanged")


# ---------- pipeline output ----------

class SynthesisResult(BaseModel):
    report: str


# ---------- generation request ----------

@dataclass(frozen=True)
class TextPart:
    text: str


@dataclass(frozen=True)
class InlineDataPart:
    mime_type: str
    data: str
    name: str = ""


@dataclass(frozen=True)
class GenerationRequest:
    parts: Tuple[Union[TextPart, InlineDataPart], ...]
    temperature: float

    @property
    def text(self) -> str:
        return "".join(p.text for p in self.parts if isinstance(p, TextPart))
