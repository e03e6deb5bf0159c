"""
Database executor: one thin call per operation the runner performs.

Every function takes a pymongo ``Collection`` and hands back what the driver
returns (documents, a count, an index name or explain statistics). Driver
errors are never caught or retried here.
"""

from typing import Any, Dict, List, Optional

from pymongo.collection import Collection

from config import MISSING_DOCUMENT_POLICY
from logger import logger
from models import PageRequest
from queries import SortSpec, set_price_update, title_filter

POLICY_IGNORE = "ignore"
POLICY_ERROR = "error"


class DocumentNotFoundError(LookupError):
    """An update or delete matched no document under the ``error`` policy."""

    def __init__(self, collection_name: str, mongo_filter: Dict[str, Any]):
        self.collection_name = collection_name
        self.mongo_filter = mongo_filter
        super().__init__(f"No document in {collection_name!r} matches {mongo_filter}")


def _check_missing(
    collection: Collection,
    mongo_filter: Dict[str, Any],
    matched: int,
    policy: Optional[str],
) -> None:
    if matched:
        return
    policy = policy or MISSING_DOCUMENT_POLICY
    if policy == POLICY_ERROR:
        raise DocumentNotFoundError(collection.name, mongo_filter)
    if policy != POLICY_IGNORE:
        raise ValueError(f"Unknown missing-document policy: {policy!r}")
    logger.warning("[MUTATION] No document matched %s, nothing changed", mongo_filter)


# ---------------------- READS ----------------------

def find_books(
    collection: Collection,
    mongo_filter: Optional[Dict[str, Any]] = None,
    projection: Optional[Dict[str, int]] = None,
    sort: Optional[SortSpec] = None,
    skip: int = 0,
    limit: int = 0,
) -> List[Dict[str, Any]]:
    """Run a find and materialise the cursor. ``limit=0`` means no limit."""
    mongo_filter = mongo_filter or {}
    cursor = collection.find(mongo_filter, projection)
    if sort:
        cursor = cursor.sort(sort)
    if skip:
        cursor = cursor.skip(skip)
    if limit:
        cursor = cursor.limit(limit)

    docs = list(cursor)
    logger.info("[QUERY] filter=%s sort=%s skip=%d limit=%d -> %d docs",
                mongo_filter, sort, skip, limit, len(docs))
    return docs


def paginate_books(
    collection: Collection,
    page_request: PageRequest,
    mongo_filter: Optional[Dict[str, Any]] = None,
) -> List[Dict[str, Any]]:
    """Return one page in natural order: offset ``(page - 1) * page_size``."""
    return find_books(
        collection,
        mongo_filter,
        skip=page_request.skip,
        limit=page_request.page_size,
    )


# ---------------------- MUTATIONS ----------------------

def update_price(
    collection: Collection,
    title: str,
    price: float,
    policy: Optional[str] = None,
) -> int:
    """Set the price of the first book with *title*; returns modified_count."""
    mongo_filter = title_filter(title)
    result = collection.update_one(mongo_filter, set_price_update(price))
    logger.info("[MUTATION] update %s matched=%d modified=%d",
                mongo_filter, result.matched_count, result.modified_count)
    _check_missing(collection, mongo_filter, result.matched_count, policy)
    return result.modified_count


def delete_by_title(
    collection: Collection,
    title: str,
    policy: Optional[str] = None,
) -> int:
    """Delete the first book with *title*; returns deleted_count."""
    mongo_filter = title_filter(title)
    result = collection.delete_one(mongo_filter)
    logger.info("[MUTATION] delete %s deleted=%d", mongo_filter, result.deleted_count)
    _check_missing(collection, mongo_filter, result.deleted_count, policy)
    return result.deleted_count


# ---------------------- AGGREGATION ----------------------

def aggregate_books(
    collection: Collection,
    pipeline: List[Dict[str, Any]],
) -> List[Dict[str, Any]]:
    results = list(collection.aggregate(pipeline))
    logger.info("[AGGREGATE] %d stages -> %d docs", len(pipeline), len(results))
    return results


# ---------------------- INDEXES ----------------------

def create_books_index(collection: Collection, keys: SortSpec) -> str:
    name = collection.create_index(keys)
    logger.info("[INDEX] created %s on %s", name, keys)
    return name


def explain_query(
    collection: Collection,
    mongo_filter: Dict[str, Any],
) -> Dict[str, Any]:
    """Explain a find with ``executionStats`` verbosity and return those stats."""
    explain = collection.database.command(
        {
            "explain": {"find": collection.name, "filter": mongo_filter},
            "verbosity": "executionStats",
        }
    )
    stats = explain.get("executionStats", {})
    logger.info("[INDEX] explain %s examined=%s returned=%s",
                mongo_filter, stats.get("totalDocsExamined"), stats.get("nReturned"))
    return stats
