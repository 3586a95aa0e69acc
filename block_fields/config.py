from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    # Application settings
    app_name: str = "Block Fields"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"
    log_json: bool = True

    # Block storage
    blocks_file: Path = Path("data/blocks.json")

    # Theme directories probed for block template overrides
    template_directory: Path = Path("theme")
    stylesheet_directory: Path = Path("theme")
    compat_directory: Path = Path("theme-compat")

    model_config = SettingsConfigDict(
        env_prefix="BLOCK_FIELDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
