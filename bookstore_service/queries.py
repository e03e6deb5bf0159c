"""
Query documents for the bookstore runner.

Every filter, update, projection, sort, pipeline and index key used by the
runner is built here so it can be inspected without a database.
"""

import math
from typing import Any, Dict, List, Tuple

from pymongo import ASCENDING, DESCENDING

SortSpec = List[Tuple[str, int]]


# ---------------------- FILTERS ----------------------

def genre_filter(genre: str) -> Dict[str, Any]:
    return {"genre": genre}


def published_after_filter(year: int) -> Dict[str, Any]:
    """Strictly later than *year*; a book from *year* itself is excluded."""
    return {"published_year": {"$gt": year}}


def author_filter(author: str) -> Dict[str, Any]:
    return {"author": author}


def title_filter(title: str) -> Dict[str, Any]:
    return {"title": title}


def in_stock_published_after_filter(year: int) -> Dict[str, Any]:
    # implicit AND of both conditions
    return {"in_stock": True, **published_after_filter(year)}


# ---------------------- UPDATES ----------------------

def set_price_update(price: float) -> Dict[str, Any]:
    return {"$set": {"price": price}}


# ---------------------- PROJECTION / SORT ----------------------

SUMMARY_PROJECTION = {"title": 1, "author": 1, "price": 1, "_id": 0}

PRICE_ASCENDING: SortSpec = [("price", ASCENDING)]
PRICE_DESCENDING: SortSpec = [("price", DESCENDING)]


# ---------------------- AGGREGATION PIPELINES ----------------------

def average_price_by_genre_pipeline() -> List[Dict[str, Any]]:
    return [
        {"$group": {"_id": "$genre", "avgPrice": {"$avg": "$price"}}},
    ]


def top_author_pipeline(limit: int = 1) -> List[Dict[str, Any]]:
    """Authors ranked by number of books, truncated to *limit* entries."""
    return [
        {"$group": {"_id": "$author", "totalBooks": {"$sum": 1}}},
        {"$sort": {"totalBooks": -1}},
        {"$limit": limit},
    ]


def books_by_decade_pipeline() -> List[Dict[str, Any]]:
    """Count books per publication decade, oldest decade first.

    The bucket key is ``floor(published_year / 10) * 10``, see ``decade_of``.
    """
    decade = {
        "$multiply": [
            {"$floor": {"$divide": ["$published_year", 10]}},
            10,
        ]
    }
    return [
        {"$project": {"decade": decade}},
        {"$group": {"_id": "$decade", "count": {"$sum": 1}}},
        {"$sort": {"_id": 1}},
    ]


def decade_of(year: int) -> int:
    """Same bucketing as the ``$project`` stage of ``books_by_decade_pipeline``."""
    return int(math.floor(year / 10) * 10)


# ---------------------- INDEX KEYS ----------------------

TITLE_INDEX: SortSpec = [("title", ASCENDING)]
AUTHOR_YEAR_INDEX: SortSpec = [("author", ASCENDING), ("published_year", ASCENDING)]
