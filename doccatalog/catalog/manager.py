from doccatalog.catalog.models import (
    Document,
    DocumentType,
    ProcessingResult,
    ProcessingStatus,
)
from doccatalog.logging.logger import Log
from doccatalog.processing.base import BaseDocumentProcessor
from doccatalog.processing.exceptions import ProcessingError


class DocumentManager:
    """Holds documents and processors, runs lookups and batch processing.

    Lookups are linear scans in insertion order. The documents they return are
    the manager's own objects, not copies: treat them as read-only, and do not
    rely on a returned list after adding documents.
    """

    def __init__(self) -> None:
        self._documents: list[Document] = []
        self._processors: list[BaseDocumentProcessor] = []

    def add_processor(self, processor: BaseDocumentProcessor) -> None:
        self._processors.append(processor)

    def add_document(self, document: Document) -> None:
        self._documents.append(document)

    def find_by_author(self, author: str) -> list[Document]:
        """Documents whose author equals *author*, ignoring case."""
        wanted = author.lower()
        return [d for d in self._documents if d.metadata.author.lower() == wanted]

    def find_by_type(self, doc_type: DocumentType) -> list[Document]:
        return [d for d in self._documents if d.doc_type == doc_type]

    def find_by_tag(self, tag: str) -> list[Document]:
        """Documents tagged with *tag*. Unlike author lookup, case matters."""
        return [d for d in self._documents if tag in d.metadata.tags]

    def search(self, term: str) -> list[Document]:
        """Documents whose title or content contains *term*, ignoring case."""
        return [d for d in self._documents if d.contains(term)]

    def process_all_documents(self) -> list[ProcessingResult]:
        """Run every processor against every document.

        Results are ordered document-major, processor-minor. A processor
        failure is recorded as a failed result and never stops the batch.
        """
        Log.info(
            f"Processing {len(self._documents)} documents with "
            f"{len(self._processors)} processors"
        )
        results: list[ProcessingResult] = []
        for document in self._documents:
            for processor in self._processors:
                results.append(self._run(processor, document))

        failed = sum(1 for r in results if not r.ok)
        Log.info(f"Batch finished: {len(results) - failed} completed, {failed} failed")
        return results

    def document_count(self) -> int:
        return len(self._documents)

    def processor_count(self) -> int:
        return len(self._processors)

    @staticmethod
    def _run(processor: BaseDocumentProcessor, document: Document) -> ProcessingResult:
        try:
            status = processor.process(document)
        except ProcessingError as exc:
            Log.warning(
                f"{processor.name} rejected document {document.id}: {exc}",
                document_id=document.id,
                processor=processor.name,
            )
            return ProcessingResult.failed(document.id, processor.name, str(exc))
        if status is not ProcessingStatus.COMPLETED:
            reason = f"{processor.name} returned {status.value}"
            Log.warning(reason, document_id=document.id, processor=processor.name)
            return ProcessingResult.failed(document.id, processor.name, reason)
        return ProcessingResult.completed(document.id, processor.name)
