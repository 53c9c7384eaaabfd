"""
This module handles the connection to the MongoDB database.
It provides the TitleStore, a thin wrapper around the titles collection
that is built once at startup and passed to the request handlers.
app.db.py
"""
from typing import Any, Dict, List, Optional, Union

from pymongo import MongoClient
from pymongo.collection import Collection

from app.config import DEFAULT_DB_NAME, Settings

MOVIE_TYPE = "Movie"

COUNTRY_PIPELINE = [
    {"$group": {"_id": "$country", "titles": {"$push": "$$ROOT"}}},
]


class TitleStore:
    def __init__(self, collection: Collection, client: Optional[MongoClient] = None):
        self.collection = collection
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "TitleStore":
        # MongoClient connects lazily, so this never blocks or raises on an unreachable server
        client = MongoClient(settings.mongo_url)
        if settings.db_name:
            db = client[settings.db_name]
        else:
            db = client.get_default_database(DEFAULT_DB_NAME)
        return cls(db[settings.collection_name], client=client)

    def ping(self):
        return self.collection.database.client.admin.command("ping")

    def find_movies(self) -> List[Dict[str, Any]]:
        return list(self.collection.find({"type": MOVIE_TYPE}))

    def group_by_country(self) -> List[Dict[str, Any]]:
        return list(self.collection.aggregate(COUNTRY_PIPELINE))

    def find_movie(self, show_id: Union[int, float]) -> Optional[Dict[str, Any]]:
        return self.collection.find_one({"show_id": show_id, "type": MOVIE_TYPE})

    def delete_all(self) -> int:
        return self.collection.delete_many({}).deleted_count

    def insert(self, document: Dict[str, Any]):
        return self.collection.insert_one(document).inserted_id

    def close(self):
        if self._client is not None:
            self._client.close()
