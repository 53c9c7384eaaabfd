"""
This module loads the runtime configuration from the environment.
Values come from the process environment or a local .env file.
app.config.py
"""
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

DEFAULT_MONGO_URL = "mongodb://localhost/project-mongo"
DEFAULT_DB_NAME = "project-mongo"
DEFAULT_COLLECTION = "netflixes"
DEFAULT_DATA_FILE = Path(__file__).resolve().parent / "data" / "netflix-titles.json"

FALSY_VALUES = {"0", "false", "no", "off"}


def is_truthy(value: Optional[str]) -> bool:
    if value is None:
        return False
    value = value.strip()
    return bool(value) and value.lower() not in FALSY_VALUES


class Settings(BaseModel):
    mongo_url: str = DEFAULT_MONGO_URL
    # None means the database named in mongo_url, else DEFAULT_DB_NAME
    db_name: Optional[str] = None
    collection_name: str = DEFAULT_COLLECTION
    host: str = "0.0.0.0"
    port: int = 8080
    reset_database: bool = False
    data_file: Path = DEFAULT_DATA_FILE
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env=None):
        if env is None:
            load_dotenv()
            env = os.environ

        return cls(
            mongo_url=env.get("MONGO_URL") or DEFAULT_MONGO_URL,
            db_name=env.get("DB_NAME") or None,
            collection_name=env.get("COLLECTION_NAME") or DEFAULT_COLLECTION,
            host=env.get("HOST") or "0.0.0.0",
            port=env.get("PORT") or 8080,
            reset_database=is_truthy(env.get("RESET_DATABASE")),
            data_file=env.get("DATA_FILE") or DEFAULT_DATA_FILE,
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
        )
