from shared.clients.store.StoreClientInterface import StoreClientInterface
from shared.clients.store.models.DocumentRecord import DocumentRecord, DocumentsListResponse
from shared.clients.store.models.CallRecordingRecord import CallRecordingRecord, CallRecordingsListResponse
from urllib.parse import urlparse, parse_qs, quote


class StoreClientRest(StoreClientInterface):
    """Store client for the company content REST API.

    Listings are paginated as ``{"count": int, "next": url | null, "results": [...]}``
    and records use the raw field names of the content database (``_id``,
    ``fileUrl``, ``contactId``, ``analysis.transcription.fullTranscript``).
    """

    ##########################################
    ################ GETTER ##################
    ##########################################

    ################ GENERAL ##################
    def _get_engine_name(self) -> str:
        return "Rest"

    ################ ENDPOINTS ##################
    def _get_endpoint_healthcheck(self) -> str:
        return "/api/health/"

    def _get_endpoint_documents(self, company_id: str, page: int = 1, page_size: int = 100) -> str:
        return self._paginated(f"/api/companies/{quote(str(company_id), safe='')}/documents/", page, page_size)

    def _get_endpoint_call_recordings(self, company_id: str, page: int = 1, page_size: int = 100) -> str:
        return self._paginated(f"/api/companies/{quote(str(company_id), safe='')}/call-recordings/", page, page_size)

    def _paginated(self, plain_url: str, page: int, page_size: int) -> str:
        separator = "?"
        if page:
            plain_url += f"{separator}page={page}"
            separator = "&"
        if page_size:
            plain_url += f"{separator}page_size={page_size}"
        return plain_url

    ##########################################
    ########### RESPONSE PARSER ##############
    ##########################################

    ############### LIST RESPONSES ###############
    def _parse_endpoint_documents(self, response: dict) -> DocumentsListResponse:
        meta = self._parse_listing_meta(response)
        docs = [
            self._parse_document(item)
            for item in self._usable_records(response, "document", ("_id",))
        ]
        return DocumentsListResponse(
            engine=self._get_engine_name(),
            documents=docs,
            currentPage=meta["current_page"],
            nextPage=meta["next_page"],
            overallCount=meta["overall_results_count"],
        )

    def _parse_endpoint_call_recordings(self, response: dict) -> CallRecordingsListResponse:
        meta = self._parse_listing_meta(response)
        recordings = [
            self._parse_call_recording(item)
            for item in self._usable_records(response, "call recording", ("_id", "date"))
        ]
        return CallRecordingsListResponse(
            engine=self._get_engine_name(),
            call_recordings=recordings,
            currentPage=meta["current_page"],
            nextPage=meta["next_page"],
            overallCount=meta["overall_results_count"],
        )

    def _usable_records(self, response: dict, kind: str, required: tuple[str, ...]) -> list[dict]:
        """Drop records lacking any of the required fields; they cannot be normalised into unique items."""
        usable = []
        for item in response.get("results", []):
            missing = [field for field in required if item.get(field) is None]
            if missing:
                self.logging.warning("Skipping %s %r without %s.", kind, item.get("_id"), " or ".join(missing))
                continue
            usable.append(item)
        return usable

    def _parse_listing_count(self, response: dict) -> int:
        count = response.get("count")
        if count is None:
            return len(response.get("results", []))
        return int(count)

    def _parse_listing_meta(self, listing_response: dict) -> dict:
        """
        Parse the pagination metadata from a listing response.

        Args:
            listing_response (dict): The raw response from a listing endpoint.

        Returns:
            dict: current_page, next_page and overall_results_count.
        """
        next_url = listing_response.get("next")
        next_page: int | None = None
        if next_url:
            params = parse_qs(urlparse(next_url).query)
            page_values = params.get("page", [])
            if page_values and page_values[0].isdigit():
                next_page = int(page_values[0])
        current_page = next_page - 1 if next_page else 1

        return {
            "current_page": current_page,
            "next_page": next_page,
            "overall_results_count": listing_response.get("count"),
        }

    ############### RECORDS ###############
    def _parse_document(self, item: dict) -> DocumentRecord:
        return DocumentRecord(
            engine=self._get_engine_name(),
            id=str(item.get("_id")),
            name=item.get("name") or "",
            content=item.get("content") or "",
            file_url=item.get("fileUrl") or "",
        )

    def _parse_call_recording(self, item: dict) -> CallRecordingRecord:
        transcription = (item.get("analysis") or {}).get("transcription") or {}
        return CallRecordingRecord(
            engine=self._get_engine_name(),
            id=str(item.get("_id")),
            contact_id=str(item.get("contactId") or ""),
            # pydantic parses ISO strings and raises on anything malformed
            date=item.get("date"),
            duration=item.get("duration"),
            summary=item.get("summary"),
            tags=item.get("tags") or [],
            recording_url=item.get("recordingUrl") or "",
            full_transcript=transcription.get("fullTranscript"),
        )
