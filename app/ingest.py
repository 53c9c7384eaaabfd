"""
This module is responsible for seeding the titles collection from the static
Netflix dataset. It clears the collection, validates every title against the
TitleRecord schema and inserts the titles one by one. Failed titles are
counted and logged, they never stop the load.
app.ingest.py
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from pydantic import ValidationError
from pymongo.errors import PyMongoError
from tqdm import tqdm

from app.config import Settings
from app.db import TitleStore
from app.schemas import SeedResult, TitleRecord

logger = logging.getLogger(__name__)


def load_dataset(path: Path) -> List[Dict[str, Any]]:
    with open(path, "r", encoding="utf-8") as f:
        titles = json.load(f)
    if not isinstance(titles, list):
        raise ValueError(f"{path} must contain a JSON array of titles")
    return titles


def seed_database(store: TitleStore, titles: List[Dict[str, Any]]) -> SeedResult:
    result = SeedResult(deleted=store.delete_all())
    logger.info("Deleted %d existing titles", result.deleted)

    for count, raw in enumerate(tqdm(titles, desc="Seeding titles")):
        try:
            record = TitleRecord.model_validate(raw)
            store.insert(record.to_document())
        except (ValidationError, PyMongoError) as e:
            result.failed += 1
            title = raw.get("title") if isinstance(raw, dict) else None
            logger.warning("[%d] Skipped %s: %s", count, title or "Untitled", e)
            continue
        result.inserted += 1

    logger.info("Seeded %d of %d titles (%d failed)", result.inserted, result.total, result.failed)
    return result


def reset_database(settings: Settings) -> SeedResult:
    store = TitleStore.from_settings(settings)
    try:
        return seed_database(store, load_dataset(settings.data_file))
    finally:
        store.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    reset_database(Settings.from_env())
