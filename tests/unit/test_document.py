from datetime import datetime, timezone

import pytest

from doccatalog.catalog.models import Document, DocumentMetadata, DocumentType


def _doc(content: str = "hello world", title: str = "Title") -> Document:
    return Document.create("d-1", title, content, DocumentType.TEXT, "alice")


class TestDocumentCreate:
    def test_counts_words(self) -> None:
        assert _doc("hello world").metadata.word_count == 2

    def test_empty_content_has_zero_words(self) -> None:
        assert _doc("").metadata.word_count == 0

    def test_counts_words_across_mixed_whitespace(self) -> None:
        assert _doc("  one\ttwo\n\nthree  ").metadata.word_count == 3

    def test_default_metadata(self) -> None:
        doc = _doc()
        assert doc.metadata == DocumentMetadata(author="alice", word_count=2)
        assert doc.metadata.language == "en"
        assert doc.metadata.tags == []

    def test_stores_fields(self) -> None:
        doc = Document.create("x", "T", "c", DocumentType.PDF, "Dan")
        assert doc.id == "x"
        assert doc.title == "T"
        assert doc.content == "c"
        assert doc.doc_type is DocumentType.PDF
        assert doc.metadata.author == "Dan"

    def test_accepts_empty_strings(self) -> None:
        doc = Document.create("", "", "", DocumentType.WORD, "")
        assert doc.id == ""
        assert doc.metadata.word_count == 0

    def test_created_at_is_set_to_now(self) -> None:
        before = datetime.now(timezone.utc)
        doc = _doc()
        after = datetime.now(timezone.utc)
        assert before <= doc.created_at <= after

    def test_tags_not_shared_between_documents(self) -> None:
        a = _doc()
        b = _doc()
        a.add_tag("x")
        assert b.metadata.tags == []


class TestTags:
    def test_add_tag_is_idempotent(self) -> None:
        doc = _doc()
        doc.add_tag("rust")
        doc.add_tag("rust")
        assert doc.metadata.tags == ["rust"]

    def test_add_tag_preserves_order(self) -> None:
        doc = _doc()
        for tag in ("b", "a", "c", "a"):
            doc.add_tag(tag)
        assert doc.metadata.tags == ["b", "a", "c"]

    def test_add_tag_is_case_sensitive(self) -> None:
        doc = _doc()
        doc.add_tag("Draft")
        doc.add_tag("draft")
        assert doc.metadata.tags == ["Draft", "draft"]

    def test_remove_absent_tag_returns_false(self) -> None:
        doc = _doc()
        doc.add_tag("keep")
        assert doc.remove_tag("missing") is False
        assert doc.metadata.tags == ["keep"]

    def test_remove_present_tag_returns_true(self) -> None:
        doc = _doc()
        doc.add_tag("a")
        doc.add_tag("b")
        assert doc.remove_tag("a") is True
        assert doc.metadata.tags == ["b"]

    def test_remove_tag_is_case_sensitive(self) -> None:
        doc = _doc()
        doc.add_tag("web")
        assert doc.remove_tag("WEB") is False
        assert doc.metadata.tags == ["web"]


class TestSummary:
    @pytest.mark.parametrize("length", [0, 99, 100])
    def test_short_content_returned_whole(self, length: int) -> None:
        content = "x" * length
        assert _doc(content).get_summary() == content

    def test_long_content_truncated_to_100(self) -> None:
        content = "a" * 100 + "b"
        summary = _doc(content).get_summary()
        assert len(summary) == 100
        assert summary == "a" * 100

    def test_truncates_on_character_boundary(self) -> None:
        content = "é" * 150
        assert _doc(content).get_summary() == "é" * 100


class TestWordCount:
    def test_stale_until_recomputed(self) -> None:
        doc = _doc("one two")
        doc.content = "one two three four"
        assert doc.metadata.word_count == 2

        doc.update_word_count()
        assert doc.metadata.word_count == 4

    def test_recompute_to_zero(self) -> None:
        doc = _doc("one two")
        doc.content = "   "
        doc.update_word_count()
        assert doc.metadata.word_count == 0


class TestContains:
    def test_matches_content_ignoring_case(self) -> None:
        assert _doc("hello world").contains("WORLD") is True

    def test_matches_title_ignoring_case(self) -> None:
        assert _doc("body", title="Quarterly Report").contains("quarterly") is True

    def test_no_match(self) -> None:
        assert _doc("hello world", title="Greeting").contains("planet") is False


class TestCreatedAt:
    def test_cannot_be_reassigned(self) -> None:
        doc = _doc()
        original = doc.created_at
        with pytest.raises(AttributeError, match="read-only"):
            doc.created_at = datetime(2000, 1, 1, tzinfo=timezone.utc)
        assert doc.created_at == original

    def test_other_fields_stay_mutable(self) -> None:
        doc = _doc()
        doc.title = "Renamed"
        assert doc.title == "Renamed"
