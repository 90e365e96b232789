"""Normalisation of raw store records into CorpusItem views.

Documents are passed through verbatim. Call recordings use their transcript
when one exists and otherwise get a descriptive sentence, so that every
CorpusItem has searchable content.
"""

from datetime import datetime, timezone

from shared.clients.store.models.CallRecordingRecord import CallRecordingRecord
from shared.clients.store.models.DocumentRecord import DocumentRecord
from shared.models.corpus import CorpusItem, CorpusItemType


def _format_date(value: datetime) -> str:
    """Render a call date as YYYY-MM-DD, in UTC for timezone-aware values."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%d")


def _format_duration(duration: int | float | None) -> str:
    if duration is None:
        return "unknown"
    if isinstance(duration, float) and duration.is_integer():
        return str(int(duration))
    return str(duration)


def normalize_document(record: DocumentRecord) -> CorpusItem:
    """Convert a document record into a CorpusItem without touching its content.

    Args:
        record (DocumentRecord): The stored document.

    Returns:
        CorpusItem: The document view.
    """
    return CorpusItem(
        id=record.id,
        title=record.name,
        content=record.content,
        url=record.file_url,
        type=CorpusItemType.DOCUMENT,
    )


def normalize_call_recording(record: CallRecordingRecord) -> CorpusItem:
    """Convert a call recording record into a CorpusItem.

    Args:
        record (CallRecordingRecord): The stored call recording.

    Returns:
        CorpusItem: The call view; ``has_transcript`` tells which content rule applied.
    """
    date = _format_date(record.date)
    transcript = record.full_transcript
    has_transcript = bool(transcript and transcript.strip())

    if has_transcript:
        content = transcript
    else:
        summary_part = f"Summary: {record.summary}" if record.summary else ""
        tags_part = f"Tags: {', '.join(record.tags)}" if record.tags else ""
        content = (
            f"Call recording with contact {record.contact_id} on {date}. "
            f"Duration: {_format_duration(record.duration)} seconds. "
            f"{summary_part} {tags_part}"
        )

    return CorpusItem(
        id=record.id,
        title=f"Call with {record.contact_id} on {date}",
        content=content,
        url=record.recording_url,
        type=CorpusItemType.CALL_RECORDING,
        has_transcript=has_transcript,
    )
