from doccatalog.catalog.manager import DocumentManager
from doccatalog.catalog.models import Document, DocumentType
from doccatalog.config.settings import Settings
from doccatalog.logging.logger import Log
from doccatalog.processing.factory import ProcessorFactory


def sample_documents() -> list[Document]:
    """A small fixed catalog used by the demo run."""
    readme = Document.create(
        "doc-1",
        "Getting Started",
        "Welcome to the catalog. Add documents, tag them and run processors.",
        DocumentType.TEXT,
        "Alice",
    )
    readme.add_tag("guide")

    landing = Document.create(
        "doc-2",
        "Landing Page",
        "<!DOCTYPE html><html><body><h1>Hello</h1></body></html>",
        DocumentType.HTML,
        "bob",
    )
    landing.add_tag("web")

    draft = Document.create("doc-3", "Untitled Draft", "", DocumentType.MARKDOWN, "alice")
    draft.add_tag("draft")

    return [readme, landing, draft]


def build_manager(settings: Settings) -> DocumentManager:
    """Build a manager with the configured processors and the sample catalog."""
    manager = DocumentManager()
    for processor in ProcessorFactory.create_all(settings):
        manager.add_processor(processor)
    for document in sample_documents():
        manager.add_document(document)
    return manager


def main() -> None:
    """Entry point: configure logging -> build catalog -> process everything."""
    settings = Settings()
    Log.configure(settings.log_level)

    manager = build_manager(settings)
    Log.info(
        f"Catalog holds {manager.document_count()} documents, "
        f"{manager.processor_count()} processors"
    )

    for result in manager.process_all_documents():
        if result.ok:
            Log.info(f"{result.document_id} / {result.processor_name}: {result.status.value}")
        else:
            Log.error(f"{result.document_id} / {result.processor_name}: {result.error}")

    for document in manager.find_by_author("alice"):
        Log.info(f"By alice: {document.title} ({document.metadata.word_count} words)")


if __name__ == "__main__":
    main()
