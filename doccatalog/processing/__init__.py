from doccatalog.processing.base import BaseDocumentProcessor
from doccatalog.processing.exceptions import DocumentValidationError, ProcessingError
from doccatalog.processing.factory import ProcessorFactory
from doccatalog.processing.html_processor import HtmlProcessor
from doccatalog.processing.text_processor import TextProcessor

__all__ = [
    "BaseDocumentProcessor",
    "DocumentValidationError",
    "HtmlProcessor",
    "ProcessingError",
    "ProcessorFactory",
    "TextProcessor",
]
