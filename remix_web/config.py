from enum import Enum
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


ROOT = Path(__file__).resolve().parent.parent


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: Env = Env.local
    html_dir: Path = ROOT / "assets" / "html"
    assets_dir: Path = ROOT / "assets"
    db_url: str = "sqlite+aiosqlite:///remix.db"
    saved_recipes_key: str = "savedRecipes"
    mealdb_url: str = "https://www.themealdb.com/api/json/v1/1/"
    # Only ever read here, never sent to the browser.
    openai_api_key: str | None = None
    remix_model: str = "gpt-4.1"
    remix_max_tokens: int = 300
    remix_temperature: float = 0.9
    max_kitchens: int = 1000
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000
