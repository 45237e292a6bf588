from enum import Enum
from pathlib import Path

from pydantic_settings import BaseSettings


ROOT = Path(__file__).resolve().parent.parent


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    env: Env = Env.local
    html_dir: Path = ROOT / "assets/html"
    assets_dir: Path = ROOT / "assets"
    recents_days: int = 30
    initial_mode: str = "all"
    initial_collection: str | None = None
    log_level: str = "INFO"
