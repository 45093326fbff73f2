from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).parent.parent / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "CardCatalog"
    debug: bool = False

    host: str = "0.0.0.0"
    port: int = 3000

    data_dir: Path = DATA_DIR
    cards_file: str = "cards.json"
    sets_file: str = "sets.json"

    # Seconds clients may reuse a listing before revalidating
    cache_max_age: int = 3600

    cors_allow_origins: list[str] = ["*"]
    gzip_minimum_size: int = 1000

    log_level: str = "INFO"

    @property
    def cards_path(self) -> Path:
        return self.data_dir / self.cards_file

    @property
    def sets_path(self) -> Path:
        return self.data_dir / self.sets_file


settings = Settings()


def get_settings() -> Settings:
    """Dependency that provides application settings."""
    return settings
