from abc import abstractmethod

from pydantic import BaseModel

from shared.clients.ClientInterface import ClientInterface
from shared.helper.HelperConfig import HelperConfig


class LLMResponse(BaseModel):
    """Normalised completion returned by every generative backend."""

    text: str


class LLMResponseError(Exception):
    """The generative backend answered 2xx but the body holds no reply text."""


class LLMClientInterface(ClientInterface):
    def __init__(self, helper_config: HelperConfig):
        super().__init__(helper_config=helper_config)

        # chat / completion config
        self.chat_model = helper_config.get_string_val(f"{self.get_client_type().upper()}_CHAT_MODEL", default=None)
        self.temperature = helper_config.get_number_val(f"{self.get_client_type().upper()}_TEMPERATURE", default=0.7)
        self.max_output_tokens = int(helper_config.get_number_val(f"{self.get_client_type().upper()}_MAX_OUTPUT_TOKENS", default=2048))

    ##########################################
    ################ GETTER ##################
    ##########################################

    ################ GENERAL ##################
    def _get_client_type(self) -> str:
        return "llm"

    ################ ENDPOINTS ##################
    @abstractmethod
    def _get_endpoint_chat(self) -> str:
        """Returns the endpoint path for chat/completion requests (e.g. "/api/chat")."""
        pass

    ################ PAYLOAD BUILDER ##################
    @abstractmethod
    def get_chat_payload(self, messages: list[dict]) -> dict:
        """Build the backend-specific request body for a chat/completion request.

        Args:
            messages (list[dict]): OpenAI-format messages
                (e.g. [{"role": "user", "content": "..."}]).

        Returns:
            dict: JSON-serialisable request body.
        """
        pass

    ##########################################
    ################# OTHER ##################
    ##########################################

    @abstractmethod
    def extract_chat_response(self, response_data: dict) -> str:
        """Extract the assistant reply text from a raw chat API response.

        All backend specific response shapes are resolved here so that callers
        only ever see LLMResponse.

        Args:
            response_data (dict): The parsed JSON response body.

        Returns:
            str: The assistant reply text.

        Raises:
            LLMResponseError: If no reply text can be found.
        """
        pass

    ##########################################
    ############### REQUESTS #################
    ##########################################

    async def do_chat(self, messages: list[dict]) -> LLMResponse:
        """Send a chat/completion request and return the normalised reply.

        Args:
            messages (list[dict]): OpenAI-format messages.

        Returns:
            LLMResponse: The assistant reply.

        Raises:
            ClientRequestError: If the backend answers with a non-2xx status.
            LLMResponseError: If the response does not contain a valid reply.
        """
        body = self.get_chat_payload(messages)
        response = await self.do_request(
            method="POST",
            endpoint=self._get_endpoint_chat(),
            json=body,
            raise_on_error=True,
        )
        return LLMResponse(text=self.extract_chat_response(response.json()))
