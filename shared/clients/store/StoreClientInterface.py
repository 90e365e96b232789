from abc import abstractmethod
from shared.helper.HelperConfig import HelperConfig
from shared.clients.ClientInterface import ClientInterface
from shared.clients.store.models.DocumentRecord import DocumentRecord, DocumentsListResponse
from shared.clients.store.models.CallRecordingRecord import CallRecordingRecord, CallRecordingsListResponse


class StoreClientInterface(ClientInterface):
    """Read access to the two authoritative stores of a company's content.

    The document store and the call-recording store are disjoint; each read
    method touches exactly one of them. Nothing is cached here, every call
    goes to the backend.
    """

    def __init__(self, helper_config: HelperConfig):
        super().__init__(helper_config=helper_config)
        self.page_size = int(helper_config.get_number_val(f"{self.get_client_type().upper()}_PAGE_SIZE", default=300))

    ##########################################
    ################ GETTER ##################
    ##########################################

    ################ GENERAL ##################
    def _get_client_type(self) -> str:
        return "store"

    ################ ENDPOINTS ##################
    @abstractmethod
    def _get_endpoint_documents(self, company_id: str, page: int = 1, page_size: int = 100) -> str:
        """
        Returns the endpoint path for listing a company's documents.

        Args:
            company_id (str): The company whose documents are listed.
            page (int): The page number for paginated listing.
            page_size (int): The number of documents per page.

        Returns:
            str: The endpoint path (e.g. "/api/companies/{id}/documents/?page=1&page_size=100")
        """
        pass

    @abstractmethod
    def _get_endpoint_call_recordings(self, company_id: str, page: int = 1, page_size: int = 100) -> str:
        """
        Returns the endpoint path for listing a company's call recordings.

        Args:
            company_id (str): The company whose call recordings are listed.
            page (int): The page number for paginated listing.
            page_size (int): The number of call recordings per page.

        Returns:
            str: The endpoint path (e.g. "/api/companies/{id}/call-recordings/?page=1&page_size=100")
        """
        pass

    ##########################################
    ########### RESPONSE PARSER ##############
    ##########################################

    @abstractmethod
    def _parse_endpoint_documents(self, response: dict) -> DocumentsListResponse:
        """
        Parses one page of the document listing.

        Args:
            response (dict): The raw JSON response.

        Returns:
            DocumentsListResponse: The parsed page.
        """
        pass

    @abstractmethod
    def _parse_endpoint_call_recordings(self, response: dict) -> CallRecordingsListResponse:
        """
        Parses one page of the call recording listing.

        Records that lack an id or a date are dropped by the implementation;
        malformed dates must raise.

        Args:
            response (dict): The raw JSON response.

        Returns:
            CallRecordingsListResponse: The parsed page.
        """
        pass

    ##########################################
    ############### REQUESTS #################
    ##########################################

    ############# LISTING REQUESTS ##############
    async def do_fetch_documents(self, company_id: str) -> list[DocumentRecord]:
        """
        Fetches all documents of a company, in store order.

        Args:
            company_id (str): The company to read.

        Returns:
            list[DocumentRecord]: Every document of the company.

        Raises:
            httpx.HTTPError: If the store cannot be reached.
            ClientRequestError: If the store answers with a non-2xx status.
        """
        documents: list[DocumentRecord] = []
        page = 1
        while True:
            resp = await self.do_request(
                method="GET",
                endpoint=self._get_endpoint_documents(company_id, page=page, page_size=self.page_size),
                raise_on_error=True,
            )
            documents_list_response = self._parse_endpoint_documents(resp.json())
            documents.extend(documents_list_response.documents)
            self.logging.debug("Fetched documents page %d for company %s from %s, %d so far of %s", page, company_id, self._get_engine_name(), len(documents), documents_list_response.overallCount)
            page = documents_list_response.nextPage
            if not page:
                break
        return documents

    async def do_fetch_call_recordings(self, company_id: str) -> list[CallRecordingRecord]:
        """
        Fetches all call recordings of a company, in store order, with or without transcript.

        Args:
            company_id (str): The company to read.

        Returns:
            list[CallRecordingRecord]: Every usable call recording of the company.

        Raises:
            httpx.HTTPError: If the store cannot be reached.
            ClientRequestError: If the store answers with a non-2xx status.
            pydantic.ValidationError: If a record carries a malformed date.
        """
        recordings: list[CallRecordingRecord] = []
        page = 1
        while True:
            resp = await self.do_request(
                method="GET",
                endpoint=self._get_endpoint_call_recordings(company_id, page=page, page_size=self.page_size),
                raise_on_error=True,
            )
            recordings_list_response = self._parse_endpoint_call_recordings(resp.json())
            recordings.extend(recordings_list_response.call_recordings)
            self.logging.debug("Fetched call recordings page %d for company %s from %s, %d so far of %s", page, company_id, self._get_engine_name(), len(recordings), recordings_list_response.overallCount)
            page = recordings_list_response.nextPage
            if not page:
                break
        return recordings

    ############# COUNT REQUESTS ##############
    async def do_count_documents(self, company_id: str) -> int:
        """
        Counts a company's documents without transferring their content.

        Args:
            company_id (str): The company to count.

        Returns:
            int: The number of documents.
        """
        resp = await self.do_request(
            method="GET",
            endpoint=self._get_endpoint_documents(company_id, page=1, page_size=1),
            raise_on_error=True,
        )
        return self._parse_listing_count(resp.json())

    async def do_count_call_recordings(self, company_id: str) -> int:
        """
        Counts a company's call recordings without transferring their content.

        Args:
            company_id (str): The company to count.

        Returns:
            int: The number of call recordings.
        """
        resp = await self.do_request(
            method="GET",
            endpoint=self._get_endpoint_call_recordings(company_id, page=1, page_size=1),
            raise_on_error=True,
        )
        return self._parse_listing_count(resp.json())

    @abstractmethod
    def _parse_listing_count(self, response: dict) -> int:
        """
        Extracts the overall result count from a listing response.

        Args:
            response (dict): The raw JSON response.

        Returns:
            int: The overall number of records.
        """
        pass
