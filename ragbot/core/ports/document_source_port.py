"""Document Source Port Interface."""

from abc import ABC, abstractmethod
from pathlib import Path

from ..domain import Document


class DocumentSourcePort(ABC):
    """Abstract interface for reading source documents from a directory."""

    @abstractmethod
    def load(self, directory: Path) -> list[Document]:
        """Load every supported document in the directory."""
        ...
