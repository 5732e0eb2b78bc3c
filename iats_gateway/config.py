"""Client configuration via environment variables."""

import logging

from pydantic import SecretStr
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    agent_code: str = ""
    password: SecretStr = SecretStr("")
    server_id: str = "NA"
    transport_timeout: int = 30  # Seconds, connect and read
    log_level: str = "INFO"

    model_config = {"env_prefix": "IATS_", "env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


def configure_logging(config: Settings = settings) -> None:
    """Apply the standard log format for applications embedding the client."""
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
