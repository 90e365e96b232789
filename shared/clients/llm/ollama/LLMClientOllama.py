from shared.clients.llm.LLMClientInterface import LLMClientInterface, LLMResponseError


class LLMClientOllama(LLMClientInterface):
    ##########################################
    ################ GETTER ##################
    ##########################################

    ################ GENERAL ##################
    def _get_engine_name(self) -> str:
        return "Ollama"

    ################ ENDPOINTS ##################
    def _get_endpoint_healthcheck(self) -> str:
        return "/api/tags"

    def _get_endpoint_chat(self) -> str:
        return "/api/chat"

    ################ PAYLOAD BUILDER ##################
    def get_chat_payload(self, messages: list[dict]) -> dict:
        """Build the Ollama chat request body.

        Args:
            messages (list[dict]): OpenAI-format messages.

        Returns:
            dict: {"model": "...", "messages": [...], "stream": False, "options": {...}}
        """
        return {
            "model": self.chat_model,
            "messages": messages,
            "stream": False,
            "options": {
                "temperature": self.temperature,
                "num_predict": self.max_output_tokens,
            },
        }

    ##########################################
    ################# OTHER ##################
    ##########################################

    def extract_chat_response(self, response_data: dict) -> str:
        """Extract the assistant reply text from an Ollama /api/chat response.

        Falls back to the top-level "response" key of /api/generate style bodies.

        Args:
            response_data (dict): The parsed JSON response body.

        Returns:
            str: The assistant reply text.

        Raises:
            LLMResponseError: If the response does not contain a valid message.
        """
        message = response_data.get("message") or {}
        content = message.get("content")
        if content is None:
            content = response_data.get("response")
        if content is None:
            raise LLMResponseError(
                "Ollama chat response does not contain a valid message. "
                "Response keys: %s" % list(response_data.keys())
            )
        return content
