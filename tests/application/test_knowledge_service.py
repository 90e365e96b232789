"""Unit tests for knowledge-base question answering."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from services.corpus.KnowledgeService import (
    SYSTEM_PROMPT,
    KnowledgeService,
    build_context,
    build_prompt,
    clean_answer,
)
from shared.clients.llm.LLMClientInterface import LLMResponse
from shared.exceptions.corpus_errors import CorpusEmptyError
from shared.models.corpus import CorpusStatus


class TestPromptHelpers:
    def test_context_block(self, make_item):
        context = build_context([make_item("1", "A", "alpha"), make_item("2", "B", "beta")])
        assert context == "Document: A\nContent: alpha\n---\n\nDocument: B\nContent: beta\n---\n"

    def test_prompt_contains_question_context_and_company(self):
        prompt = build_prompt("What is the price?", "CONTEXT BLOCK", "Acme Inc")

        assert "Acme Inc's knowledge base" in prompt
        assert "Question: What is the price?" in prompt
        assert prompt.endswith("Context:\nCONTEXT BLOCK")

    def test_prompt_without_company_name(self):
        assert "the company's knowledge base" in build_prompt("q", "c")

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("```html\n<div>Answer</div>\n```", "<div>Answer</div>"),
            ("'''<div>Answer</div>'''", "<div>Answer</div>"),
            ("  <div>Answer</div>  ", "<div>Answer</div>"),
        ],
    )
    def test_clean_answer_strips_fences(self, raw, expected):
        assert clean_answer(raw) == expected


@pytest.fixture
def corpus_service(make_item):
    service = MagicMock()
    service.get_status = AsyncMock(return_value=CorpusStatus(exists=True, document_count=1, call_recording_count=1, total_count=2))
    service.do_assemble = AsyncMock(return_value=[make_item("d1", "Price list", "Basic plan costs 10 EUR.")])
    return service


@pytest.fixture
def llm_client():
    client = MagicMock()
    client.chat_model = "llama3"
    client.do_chat = AsyncMock(return_value=LLMResponse(text="```html\n<div>10 EUR</div>\n```"))
    return client


class TestKnowledgeService:
    """Tests for KnowledgeService.do_ask()."""

    async def test_answers_from_the_corpus(self, helper_config, corpus_service, llm_client):
        service = KnowledgeService(helper_config=helper_config, corpus_service=corpus_service, llm_client=llm_client)

        answer = await service.do_ask("acme", "How much is the basic plan?", "Acme")

        assert answer.answer == "<div>10 EUR</div>"
        assert answer.model == "llama3"
        assert answer.corpus_status.total_count == 2
        assert answer.processed_at

        messages = llm_client.do_chat.await_args.args[0]
        assert messages[0] == {"role": "system", "content": SYSTEM_PROMPT}
        assert messages[1]["role"] == "user"
        assert "Question: How much is the basic plan?" in messages[1]["content"]
        assert "Document: Price list\nContent: Basic plan costs 10 EUR." in messages[1]["content"]

    async def test_empty_corpus_is_rejected(self, helper_config, corpus_service, llm_client):
        corpus_service.get_status.return_value = CorpusStatus(exists=False, document_count=0, call_recording_count=0, total_count=0)
        service = KnowledgeService(helper_config=helper_config, corpus_service=corpus_service, llm_client=llm_client)

        with pytest.raises(CorpusEmptyError):
            await service.do_ask("acme", "Anything?")

        corpus_service.do_assemble.assert_not_awaited()
        llm_client.do_chat.assert_not_awaited()

    async def test_blank_query_is_rejected(self, helper_config, corpus_service, llm_client):
        service = KnowledgeService(helper_config=helper_config, corpus_service=corpus_service, llm_client=llm_client)

        with pytest.raises(ValueError):
            await service.do_ask("acme", "   ")

        corpus_service.get_status.assert_not_awaited()
