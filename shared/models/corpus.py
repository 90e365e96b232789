"""Pydantic models for the corpus core.

Hierarchy:
  CorpusItem : uniform view over a document or a call recording.
  Chunk : one bounded window of a document's text.
  DocumentMetrics : per-text statistics.
  CorpusStats : aggregate statistics over a CorpusItem list.
  SearchResult : one ranked lexical match.
  CorpusStatus / CorpusDocumentSummary / CorpusDocumentContent : caller views.

All models serialise with camelCase aliases (``model_dump(by_alias=True)``)
and accept both field names and aliases on input.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CorpusItemType(str, Enum):
    DOCUMENT = "document"
    CALL_RECORDING = "call_recording"


class CorpusItem(CamelModel):
    """Derived, request-scoped view of a source record. Never persisted.

    Attributes:
        id:             Source record id, stable across assembly calls.
        title:          Display title.
        content:        Full text; never empty for call recordings.
        url:            File URL or recording URL.
        type:           Which normalisation rule produced the item.
        has_transcript: True only for call recordings with a non-blank transcript.
                        None for documents.
    """

    id: str
    title: str
    content: str
    url: str
    type: CorpusItemType
    has_transcript: bool | None = None


class Chunk(CamelModel):
    content: str
    index: int


class DocumentMetrics(CamelModel):
    word_count: int
    character_count: int
    sentence_count: int
    paragraph_count: int
    average_word_length: float
    average_sentence_length: float
    average_paragraph_length: float


class DocumentExtremum(CamelModel):
    """Reference to the largest or smallest item by word count."""

    id: str
    title: str
    word_count: int


class CorpusStats(CamelModel):
    total_documents: int = 0
    total_words: int = 0
    total_characters: int = 0
    average_words_per_document: int = 0
    average_characters_per_document: int = 0
    document_types: dict[str, int] = {}
    largest_document: DocumentExtremum | None = None
    smallest_document: DocumentExtremum | None = None


class SearchResult(CamelModel):
    id: str
    title: str
    url: str
    matches: int
    snippet: str
    relevance: int


class CorpusStatus(CamelModel):
    exists: bool
    document_count: int
    call_recording_count: int
    total_count: int


class CorpusDocumentSummary(CamelModel):
    id: str
    title: str
    url: str
    type: CorpusItemType
    content_preview: str
    content_length: int
    word_count: int


class CorpusDocumentContent(CamelModel):
    id: str
    title: str
    url: str
    content: str
    content_length: int
    word_count: int


class PreparedDocument(CamelModel):
    """What the upload pipeline stores alongside a freshly extracted document."""

    chunks: list[Chunk]
    metrics: DocumentMetrics
