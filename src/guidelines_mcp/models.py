"""Pydantic representations of fetch and extraction values."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_ENTITIES: Tuple[Tuple[str, str], ...] = (
    ("&nbsp;", " "),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&amp;", "&"),
)


class ExtractionConfig(BaseModel):
    """Immutable knobs for the document pipeline."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    entities: Tuple[Tuple[str, str], ...] = DEFAULT_ENTITIES
    primary_tag: str = "main"
    secondary_tag: str = "body"
    line_cap: int = Field(default=50, gt=0)
    sample_length: int = Field(default=500, ge=0)

    @field_validator("entities")
    @classmethod
    def validate_entity_order(
        cls, value: Tuple[Tuple[str, str], ...]
    ) -> Tuple[Tuple[str, str], ...]:
        names = [name for name, _ in value]
        if "&amp;" in names:
            later = names[names.index("&amp;") + 1 :]
            if any("&" in name for name in later):
                raise ValueError("'&amp;' must be decoded after every other '&' entity")
        return value


class Source(BaseModel):
    """Registry entry describing the fetched reference document."""

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    kind: str
    canonical_url: str
    description: Optional[str] = None


class FailureKind(str, Enum):
    INVALID_SOURCE = "invalid_source"
    TRANSPORT_FAILURE = "transport_failure"
    DECODE_FAILURE = "decode_failure"


class FetchFailure(BaseModel):
    """Tagged failure produced by a source instead of raising."""

    kind: FailureKind
    detail: Optional[str] = None

    @property
    def message(self) -> str:
        if self.kind is FailureKind.INVALID_SOURCE:
            return "Invalid URL"
        if self.kind is FailureKind.TRANSPORT_FAILURE:
            return f"Network error: {self.detail or 'HTTP request failed'}"
        return "Encoding error occurred"


class FetchResult(BaseModel):
    """Either the decoded markup or a failure, never both."""

    text: Optional[str] = None
    failure: Optional[FetchFailure] = None

    @model_validator(mode="after")
    def check_exclusive(self) -> "FetchResult":
        if (self.text is None) == (self.failure is None):
            raise ValueError("FetchResult needs exactly one of `text` or `failure`")
        return self

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, text: str) -> "FetchResult":
        return cls(text=text)

    @classmethod
    def failed(cls, kind: FailureKind, detail: Optional[str] = None) -> "FetchResult":
        return cls(failure=FetchFailure(kind=kind, detail=detail))


class ToolResponse(BaseModel):
    """Payload handed to the protocol boundary."""

    text: str
    is_error: bool = False
