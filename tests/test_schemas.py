"""Unit tests for the title schemas."""
from datetime import datetime

import pytest
from bson import ObjectId
from pydantic import ValidationError

from app.schemas import SeedResult, TitleDocument, TitleRecord


class TestTitleRecord:
    def test_coerces_numeric_strings(self):
        record = TitleRecord.model_validate({"show_id": "81145628", "release_year": "2019"})

        assert record.show_id == 81145628
        assert record.release_year == 2019

    def test_parses_dataset_dates(self):
        record = TitleRecord.model_validate({"date_added": " September 9, 2019"})

        assert record.date_added == datetime(2019, 9, 9)

    def test_parses_iso_dates(self):
        record = TitleRecord.model_validate({"date_added": "2019-09-09T00:00:00"})

        assert record.date_added == datetime(2019, 9, 9)

    def test_blank_values_are_absent(self):
        record = TitleRecord.model_validate({"show_id": "", "release_year": " ", "date_added": ""})

        assert record.show_id is None
        assert record.release_year is None
        assert record.date_added is None

    def test_rejects_non_numeric_release_year(self):
        with pytest.raises(ValidationError):
            TitleRecord.model_validate({"title": "A", "release_year": "abc"})

    def test_rejects_unparseable_date(self):
        with pytest.raises(ValidationError):
            TitleRecord.model_validate({"date_added": "sometime last year"})

    def test_document_omits_absent_fields(self):
        record = TitleRecord.model_validate({"show_id": 1, "title": "A", "type": "Movie", "extra": "x"})

        assert record.to_document() == {"show_id": 1, "title": "A", "type": "Movie"}

    def test_keeps_multi_country_string(self):
        record = TitleRecord.model_validate({"country": "United States, India"})

        assert record.country == "United States, India"


class TestTitleDocument:
    def test_object_id_is_rendered_as_string(self):
        oid = ObjectId()
        doc = TitleDocument.model_validate({"_id": oid, "show_id": 1, "title": "A"})

        assert doc.id == str(oid)
        assert doc.model_dump(by_alias=True, exclude_none=True) == {
            "_id": str(oid),
            "show_id": 1,
            "title": "A",
        }


class TestSeedResult:
    def test_total(self):
        assert SeedResult(deleted=4, inserted=3, failed=2).total == 5
