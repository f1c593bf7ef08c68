from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="STANDINGS_")

    env: Literal["prod", "dev"] = "prod"
    log_level: str = "INFO"

    # Server
    host: str = "127.0.0.1"
    port: int = 8080

    # Pre-computed leaderboard snapshot
    data_path: Path = Path("data/leaderboards.json")

    # Leaderboard size
    default_leaderboard_limit: int = 500
    max_leaderboard_limit: int = 1000

    @property
    def is_dev(self) -> bool:
        return self.env == "dev"


load_dotenv()
settings = Config()
