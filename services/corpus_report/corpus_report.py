"""Corpus report runner.

Prints status, statistics and the document list of one company's corpus,
optionally followed by the results of a lexical search.

Usage:
    python -m services.corpus_report.corpus_report <company_id> [--search TERM]
"""

import argparse
import asyncio

from shared.clients.store.StoreClientManager import StoreClientManager
from services.corpus.CorpusService import CorpusService
from shared.exceptions.corpus_errors import CorpusUnavailableError
from shared.helper.HelperConfig import HelperConfig
from shared.logging.logging_setup import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="corpus_report",
        description="Report on the knowledge-base corpus of one company.",
    )
    parser.add_argument("company_id", help="Company whose corpus is reported")
    parser.add_argument("--search", metavar="TERM", default=None, help="Also run a literal search for TERM")
    return parser


async def run_report(corpus_service: CorpusService, company_id: str, search_term: str | None, logger) -> int:
    """Log a full report for one company.

    Args:
        corpus_service (CorpusService): Service bound to a booted store client.
        company_id (str): The company to report on.
        search_term (str | None): Optional literal search term.
        logger: The application logger.

    Returns:
        int: Process exit code (0 on success, 1 if the corpus is unavailable).
    """
    try:
        status = await corpus_service.get_status(company_id)
        logger.info(
            "Corpus of company %s: %d documents, %d call recordings (%d total).",
            company_id, status.document_count, status.call_recording_count, status.total_count,
            color="cyan",
        )
        if not status.exists:
            logger.warning("Company %s has no corpus content.", company_id)
            return 0

        stats = await corpus_service.get_stats(company_id)
        logger.info(
            "Words: %d total, %d average. Characters: %d total, %d average.",
            stats.total_words, stats.average_words_per_document,
            stats.total_characters, stats.average_characters_per_document,
        )
        for type_key, count in sorted(stats.document_types.items()):
            logger.info("  type %s: %d", type_key, count)
        if stats.largest_document is not None:
            logger.info("Largest: %s (%d words)", stats.largest_document.title, stats.largest_document.word_count)
        if stats.smallest_document is not None:
            logger.info("Smallest: %s (%d words)", stats.smallest_document.title, stats.smallest_document.word_count)

        for document in await corpus_service.get_documents(company_id):
            logger.info("- [%s] %s (%d words): %s", document.type.value, document.title, document.word_count, document.content_preview)

        if search_term:
            results = await corpus_service.do_search(company_id, search_term)
            logger.info("Search for %r: %d results.", search_term, len(results), color="green")
            for result in results:
                logger.info("  %s (relevance %d): %s", result.title, result.relevance, result.snippet)
    except CorpusUnavailableError as e:
        logger.error("Corpus report for company %s failed: %s", company_id, e)
        return 1
    return 0


async def main(argv: list[str] | None = None) -> int:
    """Boot the store client, run the report and close the client again."""
    args = build_parser().parse_args(argv)
    logger = setup_logging()
    config = HelperConfig(logger=logger)
    async with StoreClientManager(helper_config=config).get_client() as store_client:
        corpus_service = CorpusService(helper_config=config, store_client=store_client)
        return await run_report(corpus_service, args.company_id, args.search, logger)


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
