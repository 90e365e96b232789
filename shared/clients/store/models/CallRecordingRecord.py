"""Call recording record as returned by a store client, independent of the backend."""

from datetime import datetime

from pydantic import BaseModel


class CallRecordingRecord(BaseModel):
    """
    A single call recording.

    ``full_transcript`` is lifted from ``analysis.transcription.fullTranscript``
    of the raw record and is None when no analysis has run yet.
    """
    engine: str
    id: str
    contact_id: str
    date: datetime
    duration: int | float | None = None
    summary: str | None = None
    tags: list[str] = []
    recording_url: str = ""
    full_transcript: str | None = None


class CallRecordingsListResponse(BaseModel):
    """
    One page of a call recording listing.
    """
    engine: str
    call_recordings: list[CallRecordingRecord] = []
    currentPage: int
    nextPage: int | None = None
    overallCount: int | None = None
