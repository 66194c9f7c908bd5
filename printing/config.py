from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PRINTNODE_", env_file=None, extra="ignore")

    api_url: str = "https://api.printnode.com"
    api_key: str = ""
    request_timeout: float = 15.0
    log_level: str = "INFO"

    # Seeded into every new print job that is not given its own options.
    # JSON in the environment, e.g. PRINTNODE_DEFAULT_OPTIONS='{"paper": "A4"}'
    default_options: dict[str, Any] = {}

    # Disk name -> root directory for file based content
    storage_disks: dict[str, str] = {"local": "storage"}


settings = Settings()
