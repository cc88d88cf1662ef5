# tasks_api/core/config.py
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # app
    app_env: str = Field("local", alias="APP_ENV")
    app_title: str = Field("Tasks API", alias="APP_TITLE")
    app_version: str = Field("1.0.0", alias="APP_VERSION")

    # server
    backend_host: str = Field("0.0.0.0", alias="BACKEND_HOST")
    backend_port: int = Field(3001, alias="BACKEND_PORT")

    log_level: str = Field("INFO", alias="LOG_LEVEL")

    # comma separated, empty disables CORS
    cors_allow_origins: str = Field("", alias="CORS_ALLOW_ORIGINS")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]


settings = Settings()
