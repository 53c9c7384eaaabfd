"""This module serves as a service layer for the titles collection, providing
the read queries behind the HTTP endpoints: listing movies, grouping titles
by country and looking a movie up by its show id.
Every function takes the TitleStore to query; store errors propagate.
app.movie_service.py
"""
import math
from typing import Dict, List, Optional, Union

from app.db import TitleStore
from app.schemas import TitleDocument

# Key used for titles stored without a country
ABSENT_COUNTRY_KEY = "null"

# Largest magnitude BSON can store as an int64
INT64_LIMIT = 2 ** 63

RADIX_PREFIXES = {"0x": 16, "0o": 8, "0b": 2}
DECIMAL_CHARS = set("0123456789+-.eE")
INFINITY = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def _as_query_number(value: Union[int, float]) -> Union[int, float]:
    if isinstance(value, int):
        if abs(value) < INT64_LIMIT:
            return value
        try:
            return float(value)
        except OverflowError:
            return math.inf
    if math.isfinite(value) and value.is_integer() and abs(value) < INT64_LIMIT:
        return int(value)
    return value


def coerce_show_id(token: str) -> Union[int, float]:
    """Convert a path token to a number the way a numeric cast does.

    Surrounding whitespace is ignored and an empty token is 0. Unsigned
    ``0x``/``0o``/``0b`` literals are read in their radix and ``Infinity``
    is the only spelling of infinity. Integers beyond the int64 range are
    returned as floats. Tokens that are not numbers become NaN, which
    matches no stored show id.
    """
    token = token.strip()
    if not token:
        return 0
    if token in INFINITY:
        return INFINITY[token]

    radix = RADIX_PREFIXES.get(token[:2].lower())
    if radix is not None:
        digits = token[2:]
        if not (digits.isascii() and digits.isalnum()):
            return math.nan
        try:
            return _as_query_number(int(digits, radix))
        except ValueError:
            return math.nan

    if not set(token) <= DECIMAL_CHARS:
        return math.nan
    try:
        return _as_query_number(float(token))
    except ValueError:
        return math.nan


def list_movies(store: TitleStore) -> List[TitleDocument]:
    return [TitleDocument.model_validate(doc) for doc in store.find_movies()]


def titles_by_country(store: TitleStore) -> Dict[str, List[TitleDocument]]:
    grouped = {}
    for group in store.group_by_country():
        country = group["_id"]
        key = ABSENT_COUNTRY_KEY if country is None else str(country)
        grouped[key] = [TitleDocument.model_validate(doc) for doc in group["titles"]]
    return grouped


def get_movie(store: TitleStore, token: str) -> Optional[TitleDocument]:
    doc = store.find_movie(coerce_show_id(token))
    if not doc:
        return None
    return TitleDocument.model_validate(doc)
