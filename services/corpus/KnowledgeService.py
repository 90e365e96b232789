"""Knowledge-base question answering over an assembled corpus.

status check → corpus assembly → context block → analyst prompt → LLM → cleaned answer.
The generative call itself is delegated to an LLMClientInterface.
"""

import re
from datetime import datetime, timezone

from services.corpus.CorpusService import CorpusService
from shared.clients.llm.LLMClientInterface import LLMClientInterface
from shared.exceptions.corpus_errors import CorpusEmptyError
from shared.helper.HelperConfig import HelperConfig
from shared.models.corpus import CorpusItem
from shared.models.search import KnowledgeAnswer

_CODE_FENCE = re.compile(r"^(?:```|''')(?:html)?\s*|\s*(?:```|''')$")

SYSTEM_PROMPT = "You are a helpful AI assistant that analyzes company documents and call recordings."


def build_context(items: list[CorpusItem]) -> str:
    """Concatenate corpus items into one context block for the prompt."""
    return "\n".join(f"Document: {item.title}\nContent: {item.content}\n---\n" for item in items)


def build_prompt(query: str, context: str, company_name: str | None = None) -> str:
    """Wrap a question and its context in the analyst instructions.

    Args:
        query (str): The user's question.
        context (str): Output of build_context().
        company_name (str | None): Display name used in the instructions.

    Returns:
        str: The full prompt.
    """
    return f"""You are an expert AI assistant with deep knowledge in analyzing and interpreting business documents. You have access to {company_name or 'the company'}'s knowledge base.

Your task is to provide comprehensive, analytical, and actionable insights based on the information in the documents. While staying faithful to the source material, you should:

1. ANALYZE the information thoroughly
2. SYNTHESIZE related information from different parts of the documents
3. STRUCTURE your response in a clear, user-friendly format using HTML
4. HIGHLIGHT key points, numbers, and comparisons using HTML formatting
5. PROVIDE practical insights and recommendations when relevant

Question: {query}

When answering:
- Start with a clear, direct answer to the question
- Use HTML lists, tables or sections to organize information
- Use <strong> tags for important terms and numbers
- If something can only be inferred from the context, say so
- If information is missing or unclear, specify what additional details would be helpful
- Wrap your entire response in a <div> container

Context:
{context}"""


def clean_answer(answer: str) -> str:
    """Strip a leading/trailing ``` or ''' fence (optionally tagged html) from a model answer."""
    return _CODE_FENCE.sub("", answer).strip()


class KnowledgeService:
    """Answers natural language questions from a company's corpus."""

    def __init__(
        self,
        helper_config: HelperConfig,
        corpus_service: CorpusService,
        llm_client: LLMClientInterface,
    ) -> None:
        self.logging = helper_config.get_logger()
        self._corpus = corpus_service
        self._llm = llm_client

    async def do_ask(self, company_id: str, query: str, company_name: str | None = None) -> KnowledgeAnswer:
        """Answer a question using the whole corpus of a company as context.

        Args:
            company_id (str): The company whose knowledge base is queried.
            query (str): The question.
            company_name (str | None): Optional display name for the prompt.

        Returns:
            KnowledgeAnswer: The cleaned answer plus the corpus status it was based on.

        Raises:
            ValueError: If the query is blank.
            CorpusEmptyError: If the company has neither documents nor call recordings.
            CorpusUnavailableError: If either store cannot be read.
        """
        if not query or not query.strip():
            raise ValueError("Query must not be empty.")

        status = await self._corpus.get_status(company_id)
        if not status.exists:
            raise CorpusEmptyError(company_id)

        items = await self._corpus.do_assemble(company_id)
        prompt = build_prompt(query, build_context(items), company_name)
        self.logging.info(
            "Asking knowledge base of company %s: query=%r items=%d prompt_chars=%d",
            company_id, query[:80], len(items), len(prompt),
        )

        response = await self._llm.do_chat([
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ])

        return KnowledgeAnswer(
            answer=clean_answer(response.text),
            processed_at=datetime.now(timezone.utc).isoformat(),
            model=self._llm.chat_model,
            corpus_status=status,
        )
