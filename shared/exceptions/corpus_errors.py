"""Error types raised by the corpus core and its store clients."""


class CorpusError(Exception):
    """Base class for all corpus related errors."""


class CorpusUnavailableError(CorpusError):
    """One of the two backing stores could not be read.

    Partial corpora are never returned; the original store error is chained
    as ``__cause__``.
    """

    def __init__(self, company_id: str, source: str):
        self.company_id = company_id
        self.source = source
        super().__init__(f"Corpus for company '{company_id}' is unavailable: {source} store could not be read.")


class CorpusItemNotFoundError(CorpusError):
    """The requested item id matches neither store for the company."""

    def __init__(self, company_id: str, item_id: str):
        self.company_id = company_id
        self.item_id = item_id
        super().__init__(f"Item '{item_id}' not found in corpus of company '{company_id}'.")


class CorpusEmptyError(CorpusError):
    """Raised at the question-answering boundary when a company has no content."""

    def __init__(self, company_id: str):
        self.company_id = company_id
        super().__init__(f"No documents or call recordings found in the knowledge base for company '{company_id}'.")
