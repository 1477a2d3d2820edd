"""Chat backend configuration (endpoint, credentials, sampling, timeout).

Lookup order in load_config():

    1. apisettings.json   full settings, snake_case or PascalCase keys
    2. apikey.txt         legacy single-key file, implies the OpenAI endpoint
    3. built-in defaults  a local OpenAI-compatible server on :8080

A missing or unreadable settings file is logged and skipped, never raised.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_pascal

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path("apisettings.json")
LEGACY_KEY_PATH = Path("apikey.txt")
OPENAI_BASE_URL = "https://api.openai.com/v1"


class ApiConfiguration(BaseModel):
    """Settings for the chat-completion backend."""

    # Older settings files were written with PascalCase keys ("ApiKey").
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)

    api_key: str = ""
    base_url: str = "http://localhost:8080/v1"
    model: str = "gpt-3.5-turbo"
    temperature: float = 0.7
    max_tokens: int = 800
    stream_response: bool = False
    timeout_seconds: int = 60

    @property
    def is_local_model(self) -> bool:
        return "openai.com" not in self.base_url


def load_config(
    path: Path = DEFAULT_SETTINGS_PATH,
    legacy_key_path: Path = LEGACY_KEY_PATH,
) -> ApiConfiguration:
    """Load settings, falling back to the legacy key file and then defaults."""
    path = Path(path)
    legacy_key_path = Path(legacy_key_path)

    if path.is_file():
        try:
            config = ApiConfiguration.model_validate_json(path.read_text(encoding="utf-8"))
            logger.info("Loaded API configuration from %s", path)
            return config
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            logger.error("Error loading API configuration from %s: %s", path, e)
            logger.warning("Using fallback configuration instead.")
    else:
        logger.info("Configuration file '%s' not found.", path)

    if legacy_key_path.is_file():
        try:
            api_key = legacy_key_path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Error reading legacy key file %s: %s", legacy_key_path, e)
        else:
            logger.warning("Using legacy %s configuration.", legacy_key_path)
            return ApiConfiguration(api_key=api_key, base_url=OPENAI_BASE_URL)

    logger.warning("No configuration found. Using default settings.")
    return ApiConfiguration()


def save_config(config: ApiConfiguration, path: Path = DEFAULT_SETTINGS_PATH) -> None:
    """Persist settings as indented JSON with snake_case keys."""
    Path(path).write_text(config.model_dump_json(indent=2), encoding="utf-8")
    logger.info("Configuration saved to %s", path)
