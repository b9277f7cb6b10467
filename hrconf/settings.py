"""Configuration via pydantic-settings."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Sample values for previews; no real org context is available there
    preview_department: str = "ENG"
    preview_location: str = "NY"
    preview_employee_type: str = "EMP"
    preview_default_count: int = 5
    preview_max_count: int = 100  # upper bound for count on the API/CLI surfaces

    # API
    api_base_path: str = "/formats"
    cors_origins: str = ""  # comma-separated; empty → allow all

    # Logging
    log_level: str = "INFO"

    model_config = {"env_prefix": "HRCONF_", "env_file": ".env", "extra": "ignore"}


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return a cached singleton Settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
