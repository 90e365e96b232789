"""
Shared test fixtures for the corpus bridge test suite.

Provides: HelperConfig with a plain logger, store record factories, a mocked store client
"""

import logging
import os
import tempfile
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

# server.api_server configures file logging at import time
os.environ.setdefault("ROOT_DIR", tempfile.mkdtemp(prefix="corpus_bridge_tests_"))

from shared.clients.store.models.CallRecordingRecord import CallRecordingRecord
from shared.clients.store.models.DocumentRecord import DocumentRecord
from shared.helper.HelperConfig import HelperConfig
from shared.models.corpus import CorpusItem, CorpusItemType


@pytest.fixture
def helper_config():
    """HelperConfig backed by a standard library logger."""
    return HelperConfig(logger=logging.getLogger("corpus_bridge.tests"))


@pytest.fixture
def make_document():
    def _make(doc_id: str = "d1", name: str = "Doc", content: str = "some text", file_url: str = "https://files.test/doc.pdf"):
        return DocumentRecord(engine="Rest", id=doc_id, name=name, content=content, file_url=file_url)

    return _make


@pytest.fixture
def make_call():
    def _make(
        call_id: str = "c1",
        contact_id: str = "C1",
        date: datetime = datetime(2024, 1, 5, 10, 0, tzinfo=timezone.utc),
        duration=120,
        summary: str | None = None,
        tags: list[str] | None = None,
        full_transcript: str | None = None,
        recording_url: str = "https://calls.test/c1.mp3",
    ):
        return CallRecordingRecord(
            engine="Rest",
            id=call_id,
            contact_id=contact_id,
            date=date,
            duration=duration,
            summary=summary,
            tags=tags or [],
            recording_url=recording_url,
            full_transcript=full_transcript,
        )

    return _make


@pytest.fixture
def make_item():
    def _make(item_id: str = "1", title: str = "A", content: str = "", url: str = "a.txt", item_type: CorpusItemType = CorpusItemType.DOCUMENT):
        return CorpusItem(id=item_id, title=title, content=content, url=url, type=item_type)

    return _make


@pytest.fixture
def store_client():
    """
    Mocked store client.

    Returns:
        MagicMock: Async fetch/count methods returning empty results by default
    """
    store = MagicMock()
    store.do_fetch_documents = AsyncMock(return_value=[])
    store.do_fetch_call_recordings = AsyncMock(return_value=[])
    store.do_count_documents = AsyncMock(return_value=0)
    store.do_count_call_recordings = AsyncMock(return_value=0)
    return store
