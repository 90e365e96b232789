"""Corpus router: status, listing, content, statistics and lexical search per company."""

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from server.dependencies.auth import verify_api_key
from services.corpus.CorpusService import CorpusService
from shared.exceptions.corpus_errors import CorpusItemNotFoundError, CorpusUnavailableError
from shared.models.search import (
    DocumentContentResponse,
    DocumentsResponse,
    PrepareDocumentRequest,
    SearchResponse,
    StatsResponse,
)

router = APIRouter(tags=["corpus"], dependencies=[Depends(verify_api_key)])


def _camel(model) -> JSONResponse:
    return JSONResponse(content=model.model_dump(by_alias=True, mode="json"))


def _corpus_service(request: Request) -> CorpusService:
    return request.app.state.corpus_service


@router.get("/corpus/{company_id}/status")
async def get_corpus_status(request: Request, company_id: str) -> JSONResponse:
    """Report document and call recording counts without loading content.

    Args:
        request (Request): FastAPI request (provides app.state.corpus_service).
        company_id (str): The company to inspect.

    Returns:
        JSONResponse: {exists, documentCount, callRecordingCount, totalCount}.
    """
    try:
        status = await _corpus_service(request).get_status(company_id)
    except CorpusUnavailableError as exc:
        raise HTTPException(status_code=503, detail=str(exc))
    return _camel(status)


@router.get("/corpus/{company_id}/stats")
async def get_corpus_stats(request: Request, company_id: str) -> JSONResponse:
    """Corpus-wide word/character totals, averages, type histogram and extremes."""
    try:
        stats = await _corpus_service(request).get_stats(company_id)
    except CorpusUnavailableError as exc:
        raise HTTPException(status_code=503, detail=str(exc))
    return _camel(StatsResponse(stats=stats))


@router.get("/corpus/{company_id}/documents")
async def get_corpus_documents(request: Request, company_id: str) -> JSONResponse:
    """List every corpus item with a 200 character preview."""
    try:
        documents = await _corpus_service(request).get_documents(company_id)
    except CorpusUnavailableError as exc:
        raise HTTPException(status_code=503, detail=str(exc))
    return _camel(DocumentsResponse(documents=documents, count=len(documents)))


@router.get("/corpus/{company_id}/documents/{item_id}/content")
async def get_document_content(request: Request, company_id: str, item_id: str) -> JSONResponse:
    """Return the full content of one document or call recording.

    Raises:
        HTTPException: 404 if the item belongs to neither store of the company,
            503 if a store cannot be read.
    """
    try:
        document = await _corpus_service(request).get_document_content(company_id, item_id)
    except CorpusItemNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except CorpusUnavailableError as exc:
        raise HTTPException(status_code=503, detail=str(exc))
    return _camel(DocumentContentResponse(document=document))


@router.get("/corpus/{company_id}/search")
async def search_corpus(
    request: Request,
    company_id: str,
    search_term: str = Query(..., alias="searchTerm"),
) -> JSONResponse:
    """Case-insensitive literal search ranked by ten points per match.

    Raises:
        HTTPException: 400 for a blank term, 503 if a store cannot be read.
    """
    if not search_term.strip():
        raise HTTPException(status_code=400, detail="Search term must not be empty.")
    try:
        results = await _corpus_service(request).do_search(company_id, search_term)
    except CorpusUnavailableError as exc:
        raise HTTPException(status_code=503, detail=str(exc))
    return _camel(SearchResponse(search_term=search_term, results=results, count=len(results)))


@router.post("/documents/prepare")
async def prepare_document(request: Request, body: PrepareDocumentRequest) -> JSONResponse:
    """Chunk and measure extracted document text before the upload pipeline stores it."""
    prepared = _corpus_service(request).prepare_document(body.content)
    return _camel(prepared)
