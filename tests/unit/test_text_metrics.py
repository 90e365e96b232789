"""Tests for per-text statistics."""

import pytest

from services.corpus.text_metrics import calculate_metrics, count_words


class TestCountWords:
    @pytest.mark.parametrize(
        "text,expected",
        [("", 0), ("   ", 0), ("one", 1), ("one  two\tthree\nfour", 4)],
    )
    def test_counts_whitespace_separated_words(self, text, expected):
        assert count_words(text) == expected


class TestCalculateMetrics:
    """Tests for calculate_metrics()."""

    def test_two_paragraphs(self):
        text = "Hello world. This is a test!\n\nSecond paragraph here."
        metrics = calculate_metrics(text)

        assert metrics.word_count == 9
        assert metrics.character_count == 52
        assert metrics.sentence_count == 3
        assert metrics.paragraph_count == 2
        assert metrics.average_word_length == pytest.approx(52 / 9)
        assert metrics.average_sentence_length == pytest.approx(3.0)
        assert metrics.average_paragraph_length == pytest.approx(4.5)

    def test_empty_text_has_zero_counts_and_no_division_error(self):
        metrics = calculate_metrics("")

        assert metrics.word_count == 0
        assert metrics.sentence_count == 0
        assert metrics.paragraph_count == 0
        assert metrics.average_word_length == 0
        assert metrics.average_sentence_length == 0
        assert metrics.average_paragraph_length == 0

    def test_text_without_delimiters_has_no_sentences(self):
        metrics = calculate_metrics("no delimiters at all")

        assert metrics.sentence_count == 0
        assert metrics.paragraph_count == 1
        assert metrics.average_sentence_length == 4

    def test_runs_of_delimiters_count_once(self):
        assert calculate_metrics("Really?! Yes...").sentence_count == 2

    def test_multiple_blank_lines_separate_one_paragraph_break(self):
        assert calculate_metrics("first\n\n\n  \nsecond").paragraph_count == 2

    def test_is_stable(self):
        text = "Same input. Same output."
        assert calculate_metrics(text) == calculate_metrics(text)
