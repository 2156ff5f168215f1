from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import ClassVar


class DocumentType(str, Enum):
    """Closed set of document kinds the catalog knows about."""

    TEXT = "text"
    MARKDOWN = "markdown"
    HTML = "html"
    PDF = "pdf"
    WORD = "word"


class ProcessingStatus(str, Enum):
    """Outcome of one processor/document invocation."""

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


def count_words(text: str) -> int:
    """Number of whitespace-delimited tokens in *text*."""
    return len(text.split())


@dataclass
class DocumentMetadata:
    """Author, word count, language and tags attached to a document."""

    author: str
    word_count: int = 0
    language: str = "en"
    tags: list[str] = field(default_factory=list)


@dataclass
class Document:
    """A single catalogued document.

    ``metadata.word_count`` is derived from ``content`` at construction and is
    not kept in sync afterwards: call :meth:`update_word_count` after changing
    ``content``.

    ``created_at`` is fixed at construction and cannot be reassigned.
    """

    SUMMARY_LENGTH: ClassVar[int] = 100

    id: str
    title: str
    content: str
    doc_type: DocumentType
    metadata: DocumentMetadata
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        id: str,
        title: str,
        content: str,
        doc_type: DocumentType,
        author: str,
    ) -> "Document":
        """Build a document with metadata derived from *content*.

        All inputs are accepted as-is, empty strings included.
        """
        metadata = DocumentMetadata(author=author, word_count=count_words(content))
        return cls(
            id=id,
            title=title,
            content=content,
            doc_type=doc_type,
            metadata=metadata,
        )

    def __setattr__(self, name: str, value: object) -> None:
        if name == "created_at" and "created_at" in self.__dict__:
            raise AttributeError("created_at is read-only")
        super().__setattr__(name, value)

    def add_tag(self, tag: str) -> None:
        """Append *tag* unless it is already present (case-sensitive)."""
        if tag not in self.metadata.tags:
            self.metadata.tags.append(tag)

    def remove_tag(self, tag: str) -> bool:
        """Remove *tag* and report whether it was present."""
        try:
            self.metadata.tags.remove(tag)
        except ValueError:
            return False
        return True

    def get_summary(self) -> str:
        """First ``SUMMARY_LENGTH`` characters of the content."""
        return self.content[: self.SUMMARY_LENGTH]

    def update_word_count(self) -> None:
        self.metadata.word_count = count_words(self.content)

    def contains(self, term: str) -> bool:
        """Case-insensitive substring match against title or content."""
        needle = term.lower()
        return needle in self.title.lower() or needle in self.content.lower()


@dataclass(frozen=True)
class ProcessingResult:
    """Outcome of running one processor against one document."""

    document_id: str
    processor_name: str
    status: ProcessingStatus
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is ProcessingStatus.COMPLETED and self.error is None

    @classmethod
    def completed(cls, document_id: str, processor_name: str) -> "ProcessingResult":
        return cls(
            document_id=document_id,
            processor_name=processor_name,
            status=ProcessingStatus.COMPLETED,
        )

    @classmethod
    def failed(cls, document_id: str, processor_name: str, reason: str) -> "ProcessingResult":
        return cls(
            document_id=document_id,
            processor_name=processor_name,
            status=ProcessingStatus.FAILED,
            error=reason,
        )
