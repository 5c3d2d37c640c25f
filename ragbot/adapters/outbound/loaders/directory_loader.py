"""Loads PDF and plain-text documents from a local directory."""

import logging
from collections.abc import Callable
from pathlib import Path

from pypdf import PdfReader

from ....core.domain import Document
from ....core.domain.exceptions import DocumentLoadError, PDFExtractionError
from ....core.domain.utils import clean_text
from ....core.ports.document_source_port import DocumentSourcePort

logger = logging.getLogger(__name__)


class DirectoryLoader(DocumentSourcePort):
    """Reads every supported file in a directory (non-recursive).

    PDF files produce one Document per page; pages with no extractable text
    (scanned images, blank pages) are dropped rather than kept as empty
    Documents. Text files produce one Document. Unsupported files are
    skipped, unreadable files are logged and skipped, and a missing
    directory yields no documents.
    """

    DEFAULT_EXTENSIONS = (".pdf", ".txt")

    def __init__(self, supported_extensions: tuple[str, ...] = DEFAULT_EXTENSIONS) -> None:
        handlers: dict[str, Callable[[Path], list[Document]]] = {
            ".pdf": self._load_pdf,
            ".txt": self._load_text,
        }
        self._handlers = {
            ext.lower(): handlers[ext.lower()]
            for ext in supported_extensions
            if ext.lower() in handlers
        }

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return tuple(self._handlers)

    def load(self, directory: Path) -> list[Document]:
        """Load all supported documents in ``directory``.

        Args:
            directory: Folder to scan.

        Returns:
            Documents in file-name order, then page order.
        """
        directory = Path(directory)
        if not directory.is_dir():
            logger.warning("Documents directory %s does not exist", directory)
            return []

        documents: list[Document] = []
        for path in sorted(p for p in directory.iterdir() if p.is_file()):
            handler = self._handlers.get(path.suffix.lower())
            if handler is None:
                logger.debug("Skipping unsupported file %s", path.name)
                continue
            try:
                loaded = handler(path)
            except DocumentLoadError as e:
                logger.warning("Error loading %s: %s", path.name, e.cause or e.message)
                continue
            logger.info("Loaded %d document(s) from %s", len(loaded), path.name)
            documents.extend(loaded)

        logger.info("Loaded %d documents from %s", len(documents), directory)
        return documents

    def _load_pdf(self, path: Path) -> list[Document]:
        """One Document per PDF page that has extractable text."""
        try:
            reader = PdfReader(path)
            pages = [page.extract_text() or "" for page in reader.pages]
        except Exception as e:
            raise PDFExtractionError(
                f"Failed to extract text from {path.name}", cause=e, context={"file": path.name}
            ) from e

        documents = []
        for page_number, raw in enumerate(pages, start=1):
            text = clean_text(raw)
            if text.strip():
                documents.append(Document(text=text, source_id=path.name, page_number=page_number))
        return documents

    def _load_text(self, path: Path) -> list[Document]:
        """A text file becomes a single Document."""
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentLoadError(
                f"Failed to read {path.name}", cause=e, context={"file": path.name}
            ) from e

        text = clean_text(raw)
        if not text.strip():
            return []
        return [Document(text=text, source_id=path.name)]
