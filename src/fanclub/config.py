from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parent.parent.parent / ".env"),
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Database
    database_url: str
    db_echo: bool = False

    # Session cookie
    session_secret: str
    session_algorithm: str = "HS256"
    session_cookie_name: str = "userSession"
    session_max_age_days: int = 7

    # football-data.org
    football_api_url: str = "https://api.football-data.org/v4"
    football_api_token: str | None = None
    football_api_timeout_seconds: float = 15.0
    fixtures_window_days: int = 7

    @property
    def secure_cookies(self) -> bool:
        """Secure cookies everywhere except local development and tests."""
        return self.app_env.lower() not in ("development", "test")


settings = Settings()
