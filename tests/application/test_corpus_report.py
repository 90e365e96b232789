"""Tests for the corpus report runner."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from services.corpus.CorpusService import CorpusService
from services.corpus_report.corpus_report import build_parser, run_report
from shared.exceptions.corpus_errors import CorpusUnavailableError


class TestBuildParser:
    def test_company_and_search(self):
        args = build_parser().parse_args(["acme", "--search", "pricing"])
        assert args.company_id == "acme"
        assert args.search == "pricing"

    def test_search_is_optional(self):
        assert build_parser().parse_args(["acme"]).search is None

    def test_company_is_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestRunReport:
    """Tests for run_report() against a mocked store."""

    async def test_full_report_with_search(self, helper_config, store_client, make_document):
        store_client.do_fetch_documents.return_value = [make_document("d1", "Pricing", "pricing is fair")]
        store_client.do_count_documents.return_value = 1
        service = CorpusService(helper_config=helper_config, store_client=store_client)
        logger = MagicMock()

        exit_code = await run_report(service, "acme", "pricing", logger)

        assert exit_code == 0
        logged = " ".join(str(call.args) for call in logger.info.call_args_list)
        assert "Pricing" in logged
        assert "**pricing**" in logged

    async def test_empty_corpus_stops_after_status(self, helper_config, store_client):
        service = CorpusService(helper_config=helper_config, store_client=store_client)
        logger = MagicMock()

        assert await run_report(service, "nobody", None, logger) == 0
        logger.warning.assert_called_once()
        store_client.do_fetch_documents.assert_not_awaited()

    async def test_unavailable_store_exits_non_zero(self):
        service = MagicMock()
        service.get_status = AsyncMock(side_effect=CorpusUnavailableError("acme", "document"))
        logger = MagicMock()

        assert await run_report(service, "acme", None, logger) == 1
        logger.error.assert_called_once()
