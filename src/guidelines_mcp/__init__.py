"""Swift API Design Guidelines over the Model Context Protocol."""

from .config import Settings, get_settings
from .extraction import DocumentPipeline, extract, locate_body, section_excerpt
from .models import ExtractionConfig, FailureKind, FetchResult, ToolResponse
from .retrieval import read_guidelines

__all__ = [
    "Settings",
    "get_settings",
    "DocumentPipeline",
    "extract",
    "locate_body",
    "section_excerpt",
    "ExtractionConfig",
    "FailureKind",
    "FetchResult",
    "ToolResponse",
    "read_guidelines",
]
