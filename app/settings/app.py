from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='app_')

    app_name: str = "BFHL API"
    host: str = "0.0.0.0"
    port: int = Field(3000, validation_alias=AliasChoices("app_port", "port"))
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"
