"""Fixed-size character chunking with overlap."""

from shared.models.corpus import Chunk

CHUNK_SIZE = 512        # characters per chunk
CHUNK_OVERLAP = 100     # characters shared by consecutive chunks


def validate_chunk_args(chunk_size: int, chunk_overlap: int) -> None:
    """Raise ValueError unless chunk_size > 0 and 0 <= chunk_overlap < chunk_size."""
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}.")
    if chunk_overlap < 0 or chunk_overlap >= chunk_size:
        raise ValueError(f"chunk_overlap must be in [0, {chunk_size}), got {chunk_overlap}.")


def chunk_text(text: str, chunk_size: int = CHUNK_SIZE, chunk_overlap: int = CHUNK_OVERLAP) -> list[str]:
    """Split text into consecutive windows of at most chunk_size characters.

    Each window after the first starts ``chunk_size - chunk_overlap`` characters
    after the previous one, so neighbours share ``chunk_overlap`` characters.
    Dropping the first ``chunk_overlap`` characters of every chunk but the first
    and concatenating gives back the original text.

    Args:
        text (str): The text to split.
        chunk_size (int): Maximum window length.
        chunk_overlap (int): Characters shared by consecutive windows.

    Returns:
        list[str]: Ordered chunks; empty for empty text.

    Raises:
        ValueError: If chunk_size is not positive or chunk_overlap is outside [0, chunk_size).
    """
    validate_chunk_args(chunk_size, chunk_overlap)
    if not text:
        return []

    step = chunk_size - chunk_overlap
    chunks: list[str] = []
    start = 0
    while True:
        end = start + chunk_size
        chunks.append(text[start:end])
        if end >= len(text):
            break
        start += step
    return chunks


def build_chunks(text: str, chunk_size: int = CHUNK_SIZE, chunk_overlap: int = CHUNK_OVERLAP) -> list[Chunk]:
    """Same as chunk_text but returns indexed Chunk models for storage."""
    return [
        Chunk(content=content, index=index)
        for index, content in enumerate(chunk_text(text, chunk_size, chunk_overlap))
    ]
