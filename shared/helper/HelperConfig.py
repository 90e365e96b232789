"""Environment based configuration for the corpus bridge."""

import logging
import os
from typing import Any

_TRUE_VALUES = ("true", "1", "yes", "on")


class HelperConfig:
    """Reads every setting from environment variables.

    Keys are case-insensitive (upper-cased before lookup) and an empty value
    counts as unset. A getter called without a default treats the key as
    required and raises ``ValueError`` when it is missing.
    """

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def _read(self, key: str, default: Any) -> tuple[str, str | None, Any]:
        """Return ``(KEY, stripped raw value or None, default)``, raising for missing required keys."""
        key = key.upper()
        raw = (os.getenv(key) or "").strip() or None
        if raw is None and default is None:
            raise ValueError(f"Environment variable '{key}' is not set.")
        return key, raw, default

    def get_string_val(self, key: str, default: str | None = None) -> str:
        _, raw, default = self._read(key, default)
        return raw if raw is not None else default

    def get_number_val(self, key: str, default: float | int | None = None) -> float | int:
        """Read an int (no dot) or float environment variable.

        Raises:
            ValueError: If the variable is missing without default or is not numeric.
        """
        key, raw, default = self._read(key, default)
        if raw is None:
            return default
        try:
            return float(raw) if "." in raw else int(raw)
        except ValueError:
            raise ValueError(f"Environment variable '{key}' is not a valid number: '{raw}'.")

    def get_bool_val(self, key: str, default: bool | None = None) -> bool:
        _, raw, default = self._read(key, default)
        if raw is None:
            return default
        return raw.lower() in _TRUE_VALUES

    def get_list_val(self, key: str, default: list | None = None, separator: str = ",", element_type: type = str) -> list:
        """Read a list environment variable written as "[elem1,elem2,...]".

        Args:
            key (str): Environment variable name.
            default (list | None): Fallback when unset; None makes the key required.
            separator (str): Delimiter between elements.
            element_type (type): Each element is cast with this type.

        Raises:
            ValueError: If the key is missing without default, the brackets are
                missing, or an element cannot be cast.
        """
        key, raw, default = self._read(key, default)
        if raw is None:
            return default
        if not (raw.startswith("[") and raw.endswith("]")):
            raise ValueError(f"Environment variable '{key}' must be in the format '[elem1{separator}elem2{separator}...]'. Got: '{raw}'")
        try:
            return [element_type(elem.strip()) for elem in raw[1:-1].split(separator) if elem.strip()]
        except ValueError as e:
            raise ValueError(f"Environment variable '{key}' contains invalid elements: {e}. Type set to {element_type.__name__}. Got: '{raw}'")

    def get_logger(self) -> logging.Logger:
        return self._logger
