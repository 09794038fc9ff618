# src/inject_kernel/config/base_settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict

class AppSettings(BaseSettings):
    """
    Settings for the example server built on the registry.
    Read from INJECT_* environment variables or a local .env file.
    """

    app_name: str = "inject example"
    database_url: str = "sqlite://"
    log_level: str = "INFO"
    log_prefix: str = "CUSTOM LOGGER: "
    home_template: str = "Hello, now it's $now!"
    host: str = "127.0.0.1"
    port: int = 8080

    model_config = SettingsConfigDict(
        env_prefix="INJECT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
