"""Abstract base class for reference document sources."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..models import FetchResult, Source


class BaseSource(ABC):
    """Common interface for remote documents."""

    name: str

    def __init__(self) -> None:
        if not getattr(self, "name", None):
            raise ValueError("Source classes must define `name`.")
        self._registry_source = self.build_source()

    @abstractmethod
    def build_source(self) -> Source:
        """Return the Source registry entry for this document."""

    @property
    def registry_source(self) -> Source:
        return self._registry_source

    @abstractmethod
    async def fetch_markup(self) -> FetchResult:
        """Fetch the raw document, reporting failures in the result instead of raising."""
