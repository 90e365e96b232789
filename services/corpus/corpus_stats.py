"""Corpus-wide statistics over an assembled list of CorpusItems."""

import math
from urllib.parse import urlparse

from services.corpus.text_metrics import count_words
from shared.models.corpus import CorpusItem, CorpusStats, DocumentExtremum

UNKNOWN_TYPE = "unknown"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for non-negative input."""
    return int(math.floor(value + 0.5))


def extract_type(url: str) -> str:
    """Return the lower-cased file extension of the url's last path segment.

    Query strings and fragments are ignored. Returns "unknown" when the last
    segment has no extension.
    """
    path = urlparse(url).path if url else ""
    segment = path.rstrip("/").rsplit("/", 1)[-1]
    if "." not in segment:
        return UNKNOWN_TYPE
    extension = segment.rsplit(".", 1)[-1].lower()
    return extension or UNKNOWN_TYPE


def compute_stats(items: list[CorpusItem]) -> CorpusStats:
    """Aggregate word/character totals, averages, a type histogram and extremes.

    The first item seeds both extremes; later items replace them only on a
    strictly larger or smaller word count, so ties keep the earlier item.

    Args:
        items (list[CorpusItem]): The assembled corpus.

    Returns:
        CorpusStats: All-zero stats with null extremes for an empty corpus.
    """
    if not items:
        return CorpusStats()

    total_words = 0
    total_characters = 0
    document_types: dict[str, int] = {}
    largest: DocumentExtremum | None = None
    smallest: DocumentExtremum | None = None

    for item in items:
        word_count = count_words(item.content)
        total_words += word_count
        total_characters += len(item.content)

        doc_type = extract_type(item.url)
        document_types[doc_type] = document_types.get(doc_type, 0) + 1

        current = DocumentExtremum(id=item.id, title=item.title, word_count=word_count)
        if largest is None or word_count > largest.word_count:
            largest = current
        if smallest is None or word_count < smallest.word_count:
            smallest = current

    total_documents = len(items)
    return CorpusStats(
        total_documents=total_documents,
        total_words=total_words,
        total_characters=total_characters,
        average_words_per_document=round_half_up(total_words / total_documents),
        average_characters_per_document=round_half_up(total_characters / total_documents),
        document_types=document_types,
        largest_document=largest,
        smallest_document=smallest,
    )
