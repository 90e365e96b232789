"""Corpus service.

Assembles a company's corpus on demand from the document store and the
call-recording store, and answers status, listing, content, statistics and
search requests over it. Nothing is cached: every call reads both stores
again, so the corpus can never be stale relative to the stores.
"""

import asyncio

import httpx

from services.corpus.content_normalizer import normalize_call_recording, normalize_document
from services.corpus.corpus_search import search_items
from services.corpus.corpus_stats import compute_stats
from services.corpus.text_chunker import CHUNK_OVERLAP, CHUNK_SIZE, build_chunks, validate_chunk_args
from services.corpus.text_metrics import calculate_metrics, count_words
from shared.clients.ClientInterface import ClientRequestError
from shared.clients.store.StoreClientInterface import StoreClientInterface
from shared.exceptions.corpus_errors import CorpusItemNotFoundError, CorpusUnavailableError
from shared.helper.HelperConfig import HelperConfig
from shared.models.corpus import (
    CorpusDocumentContent,
    CorpusDocumentSummary,
    CorpusItem,
    CorpusStats,
    CorpusStatus,
    PreparedDocument,
    SearchResult,
)

PREVIEW_LENGTH = 200

# errors that mean "the store could not be read"; anything else propagates as is
STORE_ERRORS = (httpx.HTTPError, ClientRequestError)


class CorpusService:
    """Read-only view over the two stores of a company's knowledge base."""

    def __init__(self, helper_config: HelperConfig, store_client: StoreClientInterface) -> None:
        self.logging = helper_config.get_logger()
        self._store = store_client
        self.chunk_size = int(helper_config.get_number_val("CHUNK_SIZE", default=CHUNK_SIZE))
        self.chunk_overlap = int(helper_config.get_number_val("CHUNK_OVERLAP", default=CHUNK_OVERLAP))
        # chunk settings are checked once, at construction
        validate_chunk_args(self.chunk_size, self.chunk_overlap)

    ##########################################
    ################ ASSEMBLY ################
    ##########################################

    async def do_assemble(self, company_id: str) -> list[CorpusItem]:
        """Fetch and normalise every document and call recording of a company.

        Both stores are read concurrently. Documents come first, then call
        recordings, each in store order.

        Args:
            company_id (str): The company whose corpus is assembled.

        Returns:
            list[CorpusItem]: The complete corpus.

        Raises:
            CorpusUnavailableError: If either store cannot be read. No partial corpus is returned.
        """
        documents, recordings = await asyncio.gather(
            self._read_store(company_id, "document", self._store.do_fetch_documents(company_id)),
            self._read_store(company_id, "call recording", self._store.do_fetch_call_recordings(company_id)),
        )

        items = [normalize_document(doc) for doc in documents]
        items.extend(normalize_call_recording(rec) for rec in recordings)

        self.logging.info(
            "Assembled corpus for company %s: %d documents, %d call recordings.",
            company_id, len(documents), len(recordings),
        )
        return items

    async def _read_store(self, company_id: str, source: str, read):
        try:
            return await read
        except STORE_ERRORS as exc:
            self.logging.error("Reading the %s store for company %s failed: %s", source, company_id, exc)
            raise CorpusUnavailableError(company_id, source) from exc

    ##########################################
    ################ STATUS ##################
    ##########################################

    async def get_status(self, company_id: str) -> CorpusStatus:
        """Report how much content a company has, without loading it.

        Args:
            company_id (str): The company to inspect.

        Returns:
            CorpusStatus: Counts per store; ``exists`` is False for an empty corpus.

        Raises:
            CorpusUnavailableError: If either store cannot be read.
        """
        document_count, call_recording_count = await asyncio.gather(
            self._read_store(company_id, "document", self._store.do_count_documents(company_id)),
            self._read_store(company_id, "call recording", self._store.do_count_call_recordings(company_id)),
        )
        total = document_count + call_recording_count
        return CorpusStatus(
            exists=total > 0,
            document_count=document_count,
            call_recording_count=call_recording_count,
            total_count=total,
        )

    ##########################################
    ############### DOCUMENTS ################
    ##########################################

    async def get_documents(self, company_id: str) -> list[CorpusDocumentSummary]:
        """List the corpus with previews instead of full content.

        Args:
            company_id (str): The company to list.

        Returns:
            list[CorpusDocumentSummary]: One summary per corpus item, in corpus order.
        """
        items = await self.do_assemble(company_id)
        return [
            CorpusDocumentSummary(
                id=item.id,
                title=item.title,
                url=item.url,
                type=item.type,
                content_preview=self._preview(item.content),
                content_length=len(item.content),
                word_count=count_words(item.content),
            )
            for item in items
        ]

    async def get_document_content(self, company_id: str, item_id: str) -> CorpusDocumentContent:
        """Return the full content of one corpus item.

        Args:
            company_id (str): The company owning the item.
            item_id (str): Id of a document or call recording.

        Returns:
            CorpusDocumentContent: The item with its full content.

        Raises:
            CorpusItemNotFoundError: If neither store has the item for this company.
        """
        items = await self.do_assemble(company_id)
        item = next((candidate for candidate in items if candidate.id == item_id), None)
        if item is None:
            raise CorpusItemNotFoundError(company_id, item_id)
        return CorpusDocumentContent(
            id=item.id,
            title=item.title,
            url=item.url,
            content=item.content,
            content_length=len(item.content),
            word_count=count_words(item.content),
        )

    @staticmethod
    def _preview(content: str) -> str:
        if len(content) > PREVIEW_LENGTH:
            return content[:PREVIEW_LENGTH] + "..."
        return content

    ##########################################
    ############ STATS & SEARCH ##############
    ##########################################

    async def get_stats(self, company_id: str) -> CorpusStats:
        """Compute corpus-wide statistics for a company."""
        return compute_stats(await self.do_assemble(company_id))

    async def do_search(self, company_id: str, term: str) -> list[SearchResult]:
        """Search a company's corpus for a literal term.

        Args:
            company_id (str): The company to search.
            term (str): The literal search term.

        Returns:
            list[SearchResult]: Results ranked by relevance.

        Raises:
            ValueError: If the term is blank. Checked before any store read.
            CorpusUnavailableError: If either store cannot be read.
        """
        if not term or not term.strip():
            raise ValueError("Search term must not be empty.")
        items = await self.do_assemble(company_id)
        results = search_items(items, term)
        self.logging.info(
            "Search for %r in corpus of company %s: %d of %d items matched.",
            term[:80], company_id, len(results), len(items),
        )
        return results

    ##########################################
    ############### UPLOADS ##################
    ##########################################

    def prepare_document(self, text: str) -> PreparedDocument:
        """Chunk and measure freshly extracted document text for storage.

        Args:
            text (str): The extracted document text.

        Returns:
            PreparedDocument: Indexed chunks plus document metrics.
        """
        return PreparedDocument(
            chunks=build_chunks(text, self.chunk_size, self.chunk_overlap),
            metrics=calculate_metrics(text),
        )
