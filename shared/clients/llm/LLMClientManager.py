from shared.helper.HelperConfig import HelperConfig
from shared.clients.llm.LLMClientInterface import LLMClientInterface


class LLMClientManager:
    """Instantiates the generative backend used for knowledge-base questions.

    The backend is optional: without LLM_ENGINE the corpus endpoints still
    work and only question answering is disabled.
    """

    def __init__(self, helper_config: HelperConfig):
        self.helper_config = helper_config
        self.logging = helper_config.get_logger()
        self.client = self._initialize_client()

    def _initialize_client(self) -> LLMClientInterface | None:
        """Instantiate the LLM client for the configured engine, if any.

        Returns:
            LLMClientInterface | None: The client, or None if LLM_ENGINE is unset.

        Raises:
            ValueError: If the engine is unsupported or cannot be imported.
        """
        engine = self.helper_config.get_string_val("LLM_ENGINE", default="")
        if not engine:
            self.logging.warning("LLM_ENGINE is not set, knowledge-base questions are disabled.")
            return None
        engine = engine.strip().lower().capitalize()
        class_name = f"LLMClient{engine}"
        try:
            module = __import__(
                f"shared.clients.llm.{engine.lower()}.{class_name}",
                fromlist=[class_name],
            )
            client_class = getattr(module, class_name)
        except (ImportError, AttributeError) as e:
            raise ValueError("Unsupported LLM engine '%s'. Error: %s" % (engine, e))
        client = client_class(helper_config=self.helper_config)
        self.logging.debug("Instantiated LLM client for engine: %s", engine)
        return client

    def get_client(self) -> LLMClientInterface | None:
        """Return the instantiated LLM client, or None when disabled."""
        return self.client
