"""Document record as returned by a store client, independent of the backend."""

from pydantic import BaseModel


class DocumentRecord(BaseModel):
    """
    A single uploaded document with its extracted text.

    Chunks and upload metrics live in the store as well but are not read by
    the corpus core, so they are not part of this model.
    """
    engine: str
    id: str
    name: str
    content: str = ""
    file_url: str = ""


class DocumentsListResponse(BaseModel):
    """
    One page of a document listing.
    """
    engine: str
    documents: list[DocumentRecord] = []
    currentPage: int
    nextPage: int | None = None
    overallCount: int | None = None
