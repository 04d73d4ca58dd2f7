import os
from pathlib import Path
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

__all__ = ["Settings", "settings"]

ENV_PREFIX = "CRAZYLAMBDAS_"
CONFIG_FILE_ENV = f"{ENV_PREFIX}CONFIG"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Package settings from ``CRAZYLAMBDAS_*`` variables and an optional JSON file.

    ``CRAZYLAMBDAS_CONFIG`` names the JSON file. Environment variables take
    precedence over values read from the file.
    """

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra="ignore")

    thread_name_prefix: str = Field(default="crazylambdas", min_length=1)
    daemon_threads: bool = False
    random_seed: Optional[int] = Field(default=None, ge=0)

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(threadName)s - %(levelname)s - %(message)s"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = str(v).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {v!r}.")
        return level

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: tuple[PydanticBaseSettingsSource, ...] = (init_settings, env_settings)

        config_path = os.getenv(CONFIG_FILE_ENV)
        if config_path:
            path = Path(config_path).expanduser()
            if not path.exists():
                raise FileNotFoundError(f"crazylambdas config file not found at {path}")
            sources += (JsonConfigSettingsSource(settings_cls, json_file=path),)

        return sources

    @classmethod
    def load(cls) -> "Settings":
        return cls()


settings = Settings.load()
