"""Tests for engine selection in the client managers."""

import pytest

from shared.clients.llm.LLMClientManager import LLMClientManager
from shared.clients.llm.ollama.LLMClientOllama import LLMClientOllama
from shared.clients.store.StoreClientManager import StoreClientManager
from shared.clients.store.rest.StoreClientRest import StoreClientRest


class TestStoreClientManager:
    def test_instantiates_configured_engine(self, helper_config, monkeypatch):
        monkeypatch.setenv("STORE_ENGINE", "REST")
        monkeypatch.setenv("STORE_REST_BASE_URL", "http://store.test")

        client = StoreClientManager(helper_config=helper_config).get_client()

        assert isinstance(client, StoreClientRest)
        assert client.get_engine_name() == "rest"
        assert client.get_client_type() == "store"

    def test_missing_engine_raises(self, helper_config, monkeypatch):
        monkeypatch.delenv("STORE_ENGINE", raising=False)
        with pytest.raises(ValueError):
            StoreClientManager(helper_config=helper_config)

    def test_unsupported_engine_raises(self, helper_config, monkeypatch):
        monkeypatch.setenv("STORE_ENGINE", "carrierpigeon")
        with pytest.raises(ValueError, match="Unsupported store engine"):
            StoreClientManager(helper_config=helper_config)


class TestLLMClientManager:
    def test_llm_is_optional(self, helper_config, monkeypatch):
        monkeypatch.delenv("LLM_ENGINE", raising=False)
        assert LLMClientManager(helper_config=helper_config).get_client() is None

    def test_instantiates_configured_engine(self, helper_config, monkeypatch):
        monkeypatch.setenv("LLM_ENGINE", "ollama")
        monkeypatch.setenv("LLM_OLLAMA_BASE_URL", "http://ollama.test")
        monkeypatch.setenv("LLM_CHAT_MODEL", "llama3")

        client = LLMClientManager(helper_config=helper_config).get_client()

        assert isinstance(client, LLMClientOllama)

    def test_unsupported_engine_raises(self, helper_config, monkeypatch):
        monkeypatch.setenv("LLM_ENGINE", "nonexistent")
        with pytest.raises(ValueError, match="Unsupported LLM engine"):
            LLMClientManager(helper_config=helper_config)
