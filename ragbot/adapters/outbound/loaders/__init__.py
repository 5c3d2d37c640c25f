"""Document loaders."""

from .directory_loader import DirectoryLoader

__all__ = ["DirectoryLoader"]
