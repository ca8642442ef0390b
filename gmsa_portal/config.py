from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Storage
    data_dir: Path = Path("data")
    requests_file: str = "requests.json"

    # Generated scripts
    script_extension: str = "ps1"

    # Observability
    log_events: bool = True

    class Config:
        env_file = ".env"
        env_prefix = "GMSA_"

    @property
    def requests_path(self) -> Path:
        return self.data_dir / self.requests_file


@lru_cache
def get_settings() -> Settings:
    return Settings()
