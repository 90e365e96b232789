"""Pydantic models for the HTTP boundary: request bodies and response envelopes."""

from shared.models.corpus import (
    CamelModel,
    CorpusDocumentContent,
    CorpusDocumentSummary,
    CorpusStats,
    CorpusStatus,
    SearchResult,
)


class QueryRequest(CamelModel):
    """Natural language question against a company's knowledge base."""

    company_id: str
    query: str
    company_name: str | None = None


class KnowledgeAnswer(CamelModel):
    """Answer produced from the corpus plus the status it was based on."""

    answer: str
    processed_at: str
    model: str | None = None
    corpus_status: CorpusStatus


class PrepareDocumentRequest(CamelModel):
    """Extracted text of a document that is about to be stored."""

    content: str


class SearchResponse(CamelModel):
    search_term: str
    results: list[SearchResult]
    count: int


class DocumentsResponse(CamelModel):
    documents: list[CorpusDocumentSummary]
    count: int


class DocumentContentResponse(CamelModel):
    document: CorpusDocumentContent


class StatsResponse(CamelModel):
    stats: CorpusStats
