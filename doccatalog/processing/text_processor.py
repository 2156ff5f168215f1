from doccatalog.catalog.models import Document, ProcessingStatus
from doccatalog.logging.logger import Log
from doccatalog.processing.base import BaseDocumentProcessor
from doccatalog.processing.exceptions import DocumentValidationError


class TextProcessor(BaseDocumentProcessor):
    """Accepts any document with non-empty content."""

    DEFAULT_DELAY_SECONDS = 0.1

    @property
    def name(self) -> str:
        return "TextProcessor"

    def process(self, document: Document) -> ProcessingStatus:
        Log.info(f"Processing text document: {document.title}")
        if not document.content:
            raise DocumentValidationError("Document content is empty")
        self._simulate_work()
        return ProcessingStatus.COMPLETED
