"""Notes Port Interface."""

from abc import ABC, abstractmethod
from typing import Any


class NotesPort(ABC):
    """Abstract interface for the external notes record store."""

    @abstractmethod
    def create_note(self, name: str, notes: str) -> dict[str, Any]:
        """Store one note record and return the upstream response body."""
        ...

    @abstractmethod
    def check_connection(self) -> dict[str, Any]:
        """Probe the service and return non-secret diagnostics."""
        ...
