"""
Pydantic models for the Netflix titles catalog.

``TitleRecord`` is the write-side schema used by the seeder: it coerces the
raw dataset values (numeric strings, the dataset's "September 9, 2019" dates,
empty strings) into the types stored in MongoDB. ``TitleDocument`` is a
stored title as it is returned to clients, with the ``_id`` key kept.
app.schemas.py
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DATE_FORMATS = ("%B %d, %Y", "%b %d, %Y", "%Y-%m-%d")


class TitleRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    show_id: Optional[int] = None
    title: Optional[str] = None
    director: Optional[str] = None
    cast: Optional[str] = None
    country: Optional[str] = None
    date_added: Optional[datetime] = None
    release_year: Optional[int] = None
    rating: Optional[str] = None
    duration: Optional[str] = None
    listed_in: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None

    @field_validator("show_id", "release_year", mode="before")
    @classmethod
    def blank_number_is_absent(cls, value):
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @field_validator("date_added", mode="before")
    @classmethod
    def parse_date_added(cls, value):
        if not isinstance(value, str):
            return value
        value = value.strip()
        if not value:
            return None
        for fmt in DATE_FORMATS:
            try:
                return datetime.strptime(value, fmt)
            except ValueError:
                continue
        # Anything else (ISO timestamps included) is left to pydantic
        return value

    def to_document(self) -> dict:
        """Fields to write to the collection; absent values are not stored."""
        return self.model_dump(exclude_none=True)


class TitleDocument(TitleRecord):
    id: str = Field(alias="_id")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("id", mode="before")
    @classmethod
    def object_id_to_str(cls, value):
        return str(value)


class SeedResult(BaseModel):
    deleted: int = 0
    inserted: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.inserted + self.failed


class RouteDescriptor(BaseModel):
    path: str
    methods: List[str]
    middlewares: List[str] = Field(default_factory=list)
