from enum import Enum
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: Env = Env.local
    database_url: str = "sqlite:///./recipes.db"
    spoonacular_api_key: str = ""
    mealdb_url: str = "https://www.themealdb.com/api/json/v1/1"
    cocktaildb_url: str = "https://www.thecocktaildb.com/api/json/v1/1"
    spoonacular_url: str = "https://api.spoonacular.com"
    # None means no timeout on catalog calls
    catalog_timeout: Optional[float] = None
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000
