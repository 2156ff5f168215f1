import logging
from collections.abc import Generator
from unittest.mock import MagicMock

import pytest

from doccatalog.catalog.models import Document, DocumentType


@pytest.fixture()
def clean_logger() -> Generator[logging.Logger, None, None]:
    """Detach catalog log handlers and restore them, with the level, afterwards."""
    logger = logging.getLogger("doccatalog")
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    logger.handlers.clear()
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


@pytest.fixture()
def fake_sleep() -> MagicMock:
    """Stand-in for time.sleep so processors return immediately."""
    return MagicMock()


@pytest.fixture()
def text_document() -> Document:
    return Document.create("t-1", "Notes", "hello world", DocumentType.TEXT, "alice")


@pytest.fixture()
def html_document() -> Document:
    return Document.create(
        "h-1",
        "Home",
        "<!DOCTYPE html><html></html>",
        DocumentType.HTML,
        "Bob",
    )


@pytest.fixture()
def empty_document() -> Document:
    return Document.create("e-1", "Empty", "", DocumentType.MARKDOWN, "carol")
