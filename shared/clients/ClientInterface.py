from abc import ABC, abstractmethod
from typing import Any

import httpx
from httpx._types import QueryParamTypes

from shared.helper.HelperConfig import HelperConfig
from shared.models.config import EnvConfig


class ClientRequestError(Exception):
    """A backend answered with a non-2xx status while raise_on_error was set."""

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"Request to {url} failed with status {status_code}")


class ClientInterface(ABC):
    """Base for every HTTP backend of the bridge (stores, LLMs).

    Configuration is read from ``<TYPE>_<ENGINE>_<KEY>`` environment variables,
    e.g. ``STORE_REST_BASE_URL``. Every engine has a ``BASE_URL`` and an
    optional ``API_KEY`` that is sent as a bearer token.
    """

    def __init__(self, helper_config: HelperConfig):
        self.logging = helper_config.get_logger()
        self._helper_config = helper_config
        self.timeout = helper_config.get_number_val(f"{self.get_client_type().upper()}_TIMEOUT", default=30.0)

        self._client: httpx.AsyncClient | None = None
        self.validate_full_configuration()
        self._base_url: str = self.get_config_val("BASE_URL")
        self._api_key: str = self.get_config_val("API_KEY", default="")

    async def __aenter__(self) -> "ClientInterface":
        await self.boot()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    ##########################################
    ############### CHECKER ##################
    ##########################################

    def validate_full_configuration(self) -> None:
        """
        Resolves every configuration value the engine declares.

        Raises:
            ValueError: If a required value is missing or has the wrong type.
        """
        for config in self._get_required_config():
            self.get_config_val(raw_key=config.env_key, default=config.default, val_type=config.val_type)

    ##########################################
    ################ GETTER ##################
    ##########################################

    ################ GENERAL ##################
    def get_client_type(self) -> str:
        """E.g. "store" or "llm"."""
        return self._get_client_type().lower()

    @abstractmethod
    def _get_client_type(self) -> str:
        pass

    def get_engine_name(self) -> str:
        """E.g. "rest" or "ollama"."""
        return self._get_engine_name().lower()

    @abstractmethod
    def _get_engine_name(self) -> str:
        pass

    ################ CONFIG ##################
    def _get_required_config(self) -> list[EnvConfig]:
        """
        Returns the configuration keys the engine needs. Engines with more
        settings extend this list.

        Returns:
            list[EnvConfig]: Raw key names (without prefix), types and defaults.
        """
        return [
            EnvConfig(env_key="BASE_URL", val_type="string", default=None),
            EnvConfig(env_key="API_KEY", val_type="string", default=""),
        ]

    def _get_config_key_name(self, raw_key: str) -> str:
        return f"{self.get_client_type().upper()}_{self.get_engine_name().upper()}_{raw_key.upper()}"

    def get_config_val(self, raw_key: str, default: Any = None, val_type: str = "string") -> Any:
        """
        Reads one prefixed configuration value of this client.

        Args:
            raw_key (str): Key without prefix, e.g. "BASE_URL".
            default (Any): Returned when the variable is unset; None makes it required.
            val_type (str): "string", "number", "bool" or "list".

        Raises:
            ValueError: If the value is missing, malformed or val_type is unknown.
        """
        getters = {
            "string": self._helper_config.get_string_val,
            "number": self._helper_config.get_number_val,
            "bool": self._helper_config.get_bool_val,
            "list": self._helper_config.get_list_val,
        }
        if val_type not in getters:
            raise ValueError(f"Unsupported config value type '{val_type}' for env key '{raw_key}' in {self.get_client_type().upper()} client '{self.get_engine_name()}'.")
        return getters[val_type](self._get_config_key_name(raw_key), default=default)

    ################ AUTH ##################
    def _get_auth_header(self) -> dict:
        if self._api_key:
            return {"Authorization": f"Bearer {self._api_key}"}
        return {}

    ################ ENDPOINTS ##################
    def _get_base_url(self) -> str:
        return self._base_url

    @abstractmethod
    def _get_endpoint_healthcheck(self) -> str:
        """
        Returns:
            str: Path of a cheap GET that answers 2xx when the backend is up.
        """
        pass

    ##########################################
    ############### REQUESTS #################
    ##########################################

    async def do_healthcheck(self) -> httpx.Response:
        """Send the healthcheck request. Error statuses are returned, not raised."""
        return await self.do_request(method="GET", endpoint=self._get_endpoint_healthcheck())

    ##########################################
    ############ CORE REQUESTS ###############
    ##########################################

    async def boot(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        """Open the underlying httpx client.

        Args:
            transport: Optional custom transport, e.g. ``httpx.MockTransport`` in tests.
        """
        self._client = httpx.AsyncClient(timeout=self.timeout, transport=transport)

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def do_request(
        self,
        method: str = "GET",
        json: dict | None = None,
        params: QueryParamTypes | None = None,
        endpoint: str = "",
        additional_headers: dict | None = None,
        raise_on_error: bool = False,
    ) -> httpx.Response:
        """Send an HTTP request to the backend.

        Args:
            method: HTTP method (GET, POST, ...).
            json: JSON-serialisable body.
            params: URL query parameters.
            endpoint: Path to append to the base URL (leading slash optional).
            additional_headers: Extra headers that override the defaults.
            raise_on_error: Raise ClientRequestError on a non-2xx status.

        Returns:
            The raw httpx.Response.

        Raises:
            RuntimeError: If the client is not booted.
            httpx.HTTPError: On transport failures (connection refused, timeouts).
            ClientRequestError: On a non-2xx status when raise_on_error is True.
        """
        if self._client is None:
            raise RuntimeError("HTTP client not initialised. Call boot() before making requests.")

        endpoint = endpoint.strip()
        url = self._get_base_url().rstrip("/") + ("/" + endpoint.lstrip("/") if endpoint else "")
        headers = {**self._get_auth_header(), **(additional_headers or {})}

        response = await self._client.request(method, url, headers=headers, params=params, json=json)

        if raise_on_error and response.status_code >= 300:
            self.logging.error(
                "Request to %s failed with status %d: %s",
                url,
                response.status_code,
                response.text[:200],
            )
            raise ClientRequestError(url, response.status_code)

        return response
