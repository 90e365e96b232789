import httpx
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from server.dependencies.auth import verify_api_key
from shared.clients.ClientInterface import ClientRequestError
from shared.clients.llm.LLMClientInterface import LLMResponseError
from shared.exceptions.corpus_errors import CorpusEmptyError, CorpusUnavailableError
from shared.models.search import QueryRequest

router = APIRouter(prefix="/query", tags=["query"])


@router.post("")
async def ask_knowledge_base(
    request: Request,
    body: QueryRequest,
    _: None = Depends(verify_api_key),
) -> JSONResponse:
    """Answer a question from a company's documents and call recordings.

    Args:
        request (Request): FastAPI request (provides app.state.knowledge_service).
        body (QueryRequest): JSON body with companyId, query and optional companyName.
        _ (None): Auth dependency result (unused).

    Returns:
        JSONResponse: {success: true, data: {answer, processedAt, model, corpusStatus}}.

    Raises:
        HTTPException: 400 for a blank query, 501 without a configured LLM,
            502 if the LLM backend fails, 503 if a store cannot be read.
    """
    if not body.query.strip():
        raise HTTPException(status_code=400, detail="Query must not be empty.")

    knowledge_service = request.app.state.knowledge_service
    if knowledge_service is None:
        raise HTTPException(status_code=501, detail="Knowledge-base questions are disabled (no LLM_ENGINE configured).")

    try:
        answer = await knowledge_service.do_ask(body.company_id, body.query, body.company_name)
    except CorpusEmptyError as exc:
        return JSONResponse(
            status_code=400,
            content={"success": False, "error": {"message": str(exc), "code": "CORPUS_EMPTY"}},
        )
    except CorpusUnavailableError as exc:
        raise HTTPException(status_code=503, detail=str(exc))
    except (httpx.HTTPError, ClientRequestError, LLMResponseError) as exc:
        request.app.state.helper_config.get_logger().error("LLM request for company %s failed: %s", body.company_id, exc)
        raise HTTPException(status_code=502, detail="The language model backend could not answer the question.")

    return JSONResponse(content={"success": True, "data": answer.model_dump(by_alias=True, mode="json")})
