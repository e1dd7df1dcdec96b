from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Настройки приложения; переопределяются через переменные окружения."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    secret_key: str = Field(min_length=1)
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = Field(1, ge=1)
    refresh_token_expire_days: int = Field(30, ge=1)
    database_url: str = "sqlite:///./app.db"
    cors_origin: str = "http://localhost:5173"
    refresh_cleanup_interval_seconds: int = Field(0, ge=0)
    app_host: str = "0.0.0.0"
    app_port: int = Field(8083, ge=1)
    log_level: str = "INFO"


settings = Settings()
