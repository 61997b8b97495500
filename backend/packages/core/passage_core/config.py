"""
Strategy configuration.

This module provides default strategy settings loaded from environment
variables.
"""

import json
from pathlib import Path
from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict

# Find .env file in project root
_env_file = Path(__file__).parent.parent.parent.parent.parent / ".env"


class StrategySettings(BaseSettings):
    """
    Strategy configuration from environment variables.

    All settings are prefixed with PASSAGE_ in environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="PASSAGE_",
        env_file=str(_env_file) if _env_file.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_path: str = "/auth"
    callback_methods: str = "GET"  # Comma-separated HTTP methods
    # JSON object: {"github": {"strategy": "oauth", "client_id": "..."}}
    providers_json: str = "{}"
    log_level: str = "INFO"

    def get_callback_methods(self) -> list[str]:
        """Default callback methods, upper-cased and in configured order."""
        return [m.strip().upper() for m in self.callback_methods.split(",") if m.strip()]

    def get_providers(self) -> dict[str, dict[str, Any]]:
        """
        Parse provider configuration.

        Returns:
            Mapping of provider name to its configuration.

        Raises:
            ValueError: If providers_json is not a JSON object of objects.
        """
        try:
            providers = json.loads(self.providers_json or "{}")
        except json.JSONDecodeError as e:
            raise ValueError("PASSAGE_PROVIDERS_JSON is not valid JSON") from e

        if not isinstance(providers, dict) or not all(
            isinstance(config, dict) for config in providers.values()
        ):
            raise ValueError("PASSAGE_PROVIDERS_JSON must map provider names to objects")
        return providers


# Global instance
strategy_settings = StrategySettings()
