import time

from doccatalog.config.settings import Settings
from doccatalog.processing.base import BaseDocumentProcessor, SleepFn
from doccatalog.processing.html_processor import HtmlProcessor
from doccatalog.processing.text_processor import TextProcessor


class ProcessorFactory:
    """Creates document processors from settings."""

    PROCESSORS: dict[str, type[BaseDocumentProcessor]] = {
        "text": TextProcessor,
        "html": HtmlProcessor,
    }

    @classmethod
    def create(
        cls,
        name: str,
        settings: Settings,
        sleep: SleepFn = time.sleep,
    ) -> BaseDocumentProcessor:
        key = name.lower()
        processor_cls = cls.PROCESSORS.get(key)
        if processor_cls is None:
            raise ValueError(
                f"Unknown processor '{key}'. Choose from: {list(cls.PROCESSORS)}"
            )
        return processor_cls(
            delay_seconds=cls._resolve_delay_seconds(key, settings),
            sleep=sleep,
        )

    @classmethod
    def create_all(
        cls,
        settings: Settings,
        sleep: SleepFn = time.sleep,
    ) -> list[BaseDocumentProcessor]:
        """Create every processor listed in ``settings.processors``, in order."""
        return [cls.create(name, settings, sleep=sleep) for name in settings.processors]

    @classmethod
    def _resolve_delay_seconds(cls, key: str, settings: Settings) -> float:
        delay_map = {
            "text": settings.text_processing_delay_ms,
            "html": settings.html_processing_delay_ms,
        }
        return delay_map[key] / 1000
