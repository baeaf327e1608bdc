from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from loguru import logger


class Environment(BaseSettings):
    app_title: str = Field("Lab Report Service")

    # optional YAML file replacing the built-in test catalog
    catalog_path: str | None = Field(None)

    # fixed seed makes generated values reproducible
    result_seed: int | None = Field(None)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


environment = Environment()

logger.info("Environment variables loaded successfully.")
