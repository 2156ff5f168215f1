import time
from abc import ABC, abstractmethod
from collections.abc import Callable

from doccatalog.catalog.models import Document, ProcessingStatus

SleepFn = Callable[[float], None]


class BaseDocumentProcessor(ABC):
    """Contract for all document processors.

    Implementations inspect a document without mutating it. The simulated
    processing cost is delegated to *sleep* so callers can swap it out.
    """

    DEFAULT_DELAY_SECONDS: float = 0.0

    def __init__(
        self,
        delay_seconds: float | None = None,
        sleep: SleepFn = time.sleep,
    ) -> None:
        self._delay_seconds = (
            self.DEFAULT_DELAY_SECONDS if delay_seconds is None else delay_seconds
        )
        self._sleep = sleep

    @property
    @abstractmethod
    def name(self) -> str:
        """Stable, human-readable processor identifier."""

    @abstractmethod
    def process(self, document: Document) -> ProcessingStatus:
        """Validate and process a single document.

        Args:
            document: Document to inspect. Must not be modified.

        Returns:
            ProcessingStatus.COMPLETED on success.

        Raises:
            DocumentValidationError: if the document fails validation.
        """

    def _simulate_work(self) -> None:
        if self._delay_seconds > 0:
            self._sleep(self._delay_seconds)
