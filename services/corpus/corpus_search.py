"""Case-insensitive literal substring search with snippets."""

import re

from shared.models.corpus import CorpusItem, SearchResult

SNIPPET_CONTEXT = 100   # characters kept on each side of the first match
RELEVANCE_PER_MATCH = 10
HIGHLIGHT = "**"


def _highlight(window: str, pattern: re.Pattern) -> str:
    return pattern.sub(lambda m: f"{HIGHLIGHT}{m.group(0)}{HIGHLIGHT}", window)


def build_snippet(content: str, first_index: int, term_length: int, pattern: re.Pattern) -> str:
    """Cut the context window around the first match and mark every match inside it.

    Args:
        content (str): The item content.
        first_index (int): Start offset of the first match.
        term_length (int): Length of the matched text.
        pattern (re.Pattern): Case-insensitive pattern of the escaped term.

    Returns:
        str: ``"..." + highlighted window + "..."``.
    """
    start = max(0, first_index - SNIPPET_CONTEXT)
    end = min(len(content), first_index + term_length + SNIPPET_CONTEXT)
    return f"...{_highlight(content[start:end], pattern)}..."


def search_items(items: list[CorpusItem], term: str) -> list[SearchResult]:
    """Rank items by the number of literal, case-insensitive occurrences of term.

    Items without a match produce no result. Relevance is ten points per
    match; results are sorted by relevance descending and equal relevance
    keeps the input order.

    Args:
        items (list[CorpusItem]): The assembled corpus.
        term (str): The search term, matched literally.

    Returns:
        list[SearchResult]: Ranked results.

    Raises:
        ValueError: If term is empty or whitespace only.
    """
    if not term or not term.strip():
        raise ValueError("Search term must not be empty.")

    pattern = re.compile(re.escape(term), re.IGNORECASE)
    results: list[SearchResult] = []
    for item in items:
        found = list(pattern.finditer(item.content))
        if not found:
            continue
        first = found[0]
        results.append(
            SearchResult(
                id=item.id,
                title=item.title,
                url=item.url,
                matches=len(found),
                snippet=build_snippet(item.content, first.start(), len(first.group(0)), pattern),
                relevance=len(found) * RELEVANCE_PER_MATCH,
            )
        )

    # sorted() is stable
    return sorted(results, key=lambda result: result.relevance, reverse=True)
