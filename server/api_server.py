"""FastAPI application entry point for corpus_bridge."""

import os
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from shared.logging.logging_setup import setup_logging
from shared.helper.HelperConfig import HelperConfig
from shared.clients.store.StoreClientInterface import StoreClientInterface
from shared.clients.llm.LLMClientInterface import LLMClientInterface
from shared.clients.store.StoreClientManager import StoreClientManager
from shared.clients.llm.LLMClientManager import LLMClientManager
from services.corpus.CorpusService import CorpusService
from services.corpus.KnowledgeService import KnowledgeService
from server.routers.CorpusRouter import router as corpus_router
from server.routers.QueryRouter import router as query_router

logging = setup_logging()
app_version = os.getenv("APP_VERSION", "unknown")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # when the app starts
    app.state.logging = logging
    app.state.helper_config = HelperConfig(logger=logging)

    store_client = StoreClientManager(helper_config=app.state.helper_config).get_client()
    llm_client = LLMClientManager(helper_config=app.state.helper_config).get_client()
    clients = [client for client in (store_client, llm_client) if client is not None]

    logging.info("Booting all clients...")
    for client in clients:
        await client.boot()
    logging.info("All clients booted successfully.")

    app.state.store_client = store_client
    app.state.llm_client = llm_client

    app.state.corpus_service = CorpusService(
        helper_config=app.state.helper_config,
        store_client=store_client,
    )
    app.state.knowledge_service = None
    if llm_client is not None:
        app.state.knowledge_service = KnowledgeService(
            helper_config=app.state.helper_config,
            corpus_service=app.state.corpus_service,
            llm_client=llm_client,
        )

    await check_connections(store_client, llm_client)

    # while the app is running...
    yield

    # when the app shuts down, close all client connections
    logging.info("Shutting down, closing all clients...")
    for client in clients:
        await client.close()
    logging.info("All clients closed.")


app = FastAPI(
    title="corpus_bridge",
    description=(
        "Read-only knowledge-base service over a company's documents and call recordings. "
        "Assembles the corpus on demand from both stores and serves status, listings, "
        "statistics and lexical search under /corpus/{companyId}. "
        "Questions are answered from the whole corpus via POST /query."
    ),
    version=app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(corpus_router)
app.include_router(query_router)


@app.exception_handler(ValidationError)
async def malformed_record_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """A store or backend record failed validation, e.g. a call recording with an unparseable date.

    Request bodies are validated by FastAPI with RequestValidationError and never reach this handler.
    """
    logging.error("Malformed backend record while serving %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=500,
        content={"detail": f"A backend returned a malformed {exc.title} record.", "code": "MALFORMED_RECORD"},
    )


async def check_connections(
    store_client: StoreClientInterface,
    llm_client: LLMClientInterface | None,
) -> None:
    """Check connectivity to all configured backends on startup.

    Failures are non-fatal: store outages surface per request as 503, and an
    unreachable LLM only affects POST /query.
    """
    checks = [("Store", store_client, "Corpus requests will fail until it is reachable.")]
    if llm_client is not None:
        checks.append(("LLM", llm_client, "Knowledge-base questions will fail."))

    for label, client, consequence in checks:
        try:
            result: httpx.Response = await client.do_healthcheck()
        except httpx.HTTPError as e:
            logging.warning("%s client '%s' is not reachable (%s). %s", label, client.__class__.__name__, e, consequence)
            continue
        if not result.is_success:
            logging.warning(
                "%s client '%s' is not reachable (status %d). %s",
                label,
                client.__class__.__name__,
                result.status_code,
                consequence,
            )


if __name__ == "__main__":
    import uvicorn

    logging.info(
        "Starting corpus_bridge API Server v%s from root dir: %s on port 8000...",
        app_version,
        os.environ.get("ROOT_DIR", "unknown"),
    )
    uvicorn.run(app, host="0.0.0.0", port=8000)
