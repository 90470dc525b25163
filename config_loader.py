import logging
import os

import toml
from dotenv import load_dotenv

from errors import ConfigError
from models import Config, ProviderConfig, ServerConfig

logger = logging.getLogger(__name__)


def load_config(config_path: str = None) -> Config:
    """Load configuration from TOML file, then apply environment overrides.

    The file is optional. ``OPENWEATHER_API_KEY``, ``HOST`` and ``PORT`` from
    the environment (or a ``.env`` file) take precedence over its values.
    """
    config_path = config_path or os.getenv("CONFIG_PATH", "config.toml")
    load_dotenv()

    try:
        config_data = {}
        if os.path.exists(config_path):
            with open(config_path, "r") as f:
                config_data = toml.load(f)

        # Parse server config
        server_data = dict(config_data.get("server", {}))
        if os.getenv("HOST"):
            server_data["host"] = os.getenv("HOST")
        if os.getenv("PORT"):
            server_data["port"] = int(os.getenv("PORT"))
        server_config = ServerConfig(**server_data)

        # Parse provider config
        provider_data = dict(config_data.get("provider", {}))
        api_key = os.getenv("OPENWEATHER_API_KEY")
        if api_key:
            provider_data["api_key"] = api_key
        provider_config = ProviderConfig(**provider_data)

    except Exception as e:
        raise ConfigError(f"Failed to load config: {e}", error="Invalid configuration")

    if not provider_config.api_key:
        if provider_config.require_api_key:
            raise ConfigError("OPENWEATHER_API_KEY is not set")
        logger.warning(
            "OPENWEATHER_API_KEY is not set; data requests will fail with 500"
        )

    return Config(server=server_config, provider=provider_config)
