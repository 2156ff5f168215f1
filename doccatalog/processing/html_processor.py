from doccatalog.catalog.models import Document, ProcessingStatus
from doccatalog.logging.logger import Log
from doccatalog.processing.base import BaseDocumentProcessor
from doccatalog.processing.exceptions import DocumentValidationError


class HtmlProcessor(BaseDocumentProcessor):
    """Checks that content carries an ``<html>`` or ``<!DOCTYPE`` marker."""

    DEFAULT_DELAY_SECONDS = 0.2
    MARKERS: tuple[str, ...] = ("<html>", "<!DOCTYPE")

    @property
    def name(self) -> str:
        return "HtmlProcessor"

    def process(self, document: Document) -> ProcessingStatus:
        Log.info(f"Processing HTML document: {document.title}")
        # Case-sensitive: "<HTML>" does not count.
        if not any(marker in document.content for marker in self.MARKERS):
            raise DocumentValidationError("Invalid HTML structure")
        self._simulate_work()
        return ProcessingStatus.COMPLETED
