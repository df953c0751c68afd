from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# .env at project root (parent of pkgcheck/) or in CWD
_env_path = Path(__file__).resolve().parent.parent.parent / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=[str(_env_path), ".env"],
        env_file_encoding="utf-8",
        extra="ignore",
    )

    AFFECTED_DATASET_PATH: str = "affected_packages.json"
    # When set, the snapshot is fetched over HTTP instead of read from disk.
    AFFECTED_DATASET_URL: str = ""
    DATASET_TIMEOUT_SECONDS: float = 30.0
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False


settings = Settings()
