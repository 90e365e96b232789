"""Per-text statistics computed for uploaded documents and corpus stats."""

import re

from shared.models.corpus import DocumentMetrics

_SENTENCE_DELIMITERS = re.compile(r"[.!?]+")
_PARAGRAPH_SEPARATOR = re.compile(r"\n\s*\n")


def count_words(text: str) -> int:
    return len(text.split())


def calculate_metrics(text: str) -> DocumentMetrics:
    """Compute word, character, sentence and paragraph statistics.

    Sentences are counted as runs of ``.``, ``!`` or ``?``; paragraphs as
    fragments between blank lines. Blank text yields zero counts, and every
    average divides by at least 1.

    Args:
        text (str): The text to measure.

    Returns:
        DocumentMetrics: The computed metrics.
    """
    word_count = count_words(text)
    character_count = len(text)
    sentence_count = len(_SENTENCE_DELIMITERS.split(text)) - 1
    paragraph_count = len(_PARAGRAPH_SEPARATOR.split(text)) if text.strip() else 0

    return DocumentMetrics(
        word_count=word_count,
        character_count=character_count,
        sentence_count=sentence_count,
        paragraph_count=paragraph_count,
        average_word_length=character_count / max(word_count, 1),
        average_sentence_length=word_count / max(sentence_count, 1),
        average_paragraph_length=word_count / max(paragraph_count, 1),
    )
