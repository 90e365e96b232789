"""Tests for corpus-wide statistics."""

import pytest

from services.corpus.corpus_stats import compute_stats, extract_type, round_half_up


class TestExtractType:
    @pytest.mark.parametrize(
        "url,expected",
        [
            ("https://files.test/report.PDF", "pdf"),
            ("a.txt", "txt"),
            ("https://files.test/notes.md?version=2#top", "md"),
            ("https://files.test/archive.tar.gz", "gz"),
            ("https://files.test/folder/", "unknown"),
            ("https://files.test/README", "unknown"),
            ("", "unknown"),
        ],
    )
    def test_extension_of_last_segment(self, url, expected):
        assert extract_type(url) == expected

    def test_dots_in_host_are_ignored(self):
        assert extract_type("https://files.example.com/download") == "unknown"


class TestRoundHalfUp:
    @pytest.mark.parametrize("value,expected", [(0.0, 0), (1.4, 1), (1.5, 2), (2.5, 3), (2.49, 2)])
    def test_rounds_halves_up(self, value, expected):
        assert round_half_up(value) == expected


class TestComputeStats:
    """Tests for compute_stats()."""

    def test_empty_corpus(self):
        stats = compute_stats([])

        assert stats.total_documents == 0
        assert stats.total_words == 0
        assert stats.total_characters == 0
        assert stats.average_words_per_document == 0
        assert stats.average_characters_per_document == 0
        assert stats.document_types == {}
        assert stats.largest_document is None
        assert stats.smallest_document is None

    def test_totals_and_histogram(self, make_item):
        items = [
            make_item("1", "A", "one two three", "https://f.test/a.pdf"),
            make_item("2", "B", "four five", "https://f.test/b.PDF"),
            make_item("3", "C", "six", "https://calls.test/c"),
        ]
        stats = compute_stats(items)

        assert stats.total_documents == 3
        assert stats.total_words == 6
        assert stats.total_characters == len("one two three") + len("four five") + len("six")
        assert stats.average_words_per_document == 2
        assert stats.document_types == {"pdf": 2, "unknown": 1}
        assert stats.largest_document.id == "1"
        assert stats.largest_document.word_count == 3
        assert stats.smallest_document.id == "3"
        assert stats.smallest_document.title == "C"

    def test_averages_round_half_up(self, make_item):
        # 5 words over 2 items is 2.5
        stats = compute_stats([make_item("1", content="a b"), make_item("2", content="c d e")])
        assert stats.average_words_per_document == 3

    def test_ties_keep_the_first_item(self, make_item):
        items = [make_item("1", content="a b"), make_item("2", content="c d"), make_item("3", content="e f")]
        stats = compute_stats(items)

        assert stats.largest_document.id == "1"
        assert stats.smallest_document.id == "1"

    def test_single_item_is_both_extremes(self, make_item):
        stats = compute_stats([make_item("only", content="")])

        assert stats.largest_document.id == "only"
        assert stats.smallest_document.id == "only"
        assert stats.largest_document.word_count == 0
