from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # Deployment overrides reported by GET /
    app_env: str = Field(
        default="development",
        validation_alias=AliasChoices("APP_ENV", "NODE_ENV"),
    )
    hostname: str = "unknown"

    # App
    app_name: str = "Docker Learning App"
    version: str = "1.0.0"
    welcome_message: str = "Welcome to Docker Learning App!"


settings = Settings()
