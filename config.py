"""Application configuration handled via environment variables."""

# pylint: disable=invalid-name, arguments-differ

from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# === Load .env and .env.local (if exists) ===
load_dotenv(dotenv_path=".env")
if Path(".env.local").exists():
    load_dotenv(dotenv_path=".env.local", override=True)

# === Dynamically detect project root ===
PROJECT_ROOT = Path(__file__).resolve().parent
FALLBACK_CACHE = PROJECT_ROOT / ".cache"


class Config(BaseSettings):  # pylint: disable=too-few-public-methods
    """Centralized application settings."""

    # === General ===
    ENVIRONMENT: str = Field("development", env="ENVIRONMENT")
    DEBUG: bool = Field(True, env="DEBUG")
    PORT: int = Field(8000, env="PORT")

    # === Paths ===
    LOG_DIR: Path = Field(PROJECT_ROOT / "data/logs", env="LOG_DIR")

    # === Conversion ===
    DEFAULT_LOCALE: str = Field("en", env="DEFAULT_LOCALE")
    SUPPORTED_LOCALES: Tuple[str, ...] = Field(("en",), env="SUPPORTED_LOCALES")
    MAX_INPUT_LENGTH: int = Field(100_000, env="MAX_INPUT_LENGTH")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown keys like system-provided "timezone"
    )

    def model_post_init(self, __context):  # type: ignore[override]
        """Expand the log directory and fall back to a cache dir when unwritable."""
        self.LOG_DIR = self.LOG_DIR.expanduser()
        self.DEFAULT_LOCALE = self.DEFAULT_LOCALE.strip().lower() or "en"
        try:
            self.LOG_DIR.mkdir(parents=True, exist_ok=True)
        except PermissionError:
            self.LOG_DIR = FALLBACK_CACHE / "logs"
            self.LOG_DIR.mkdir(parents=True, exist_ok=True)


config = Config()
