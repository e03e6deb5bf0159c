#!/usr/bin/env python3
"""
Bookstore query runner.

Usage:
    python runner.py

Connects to ``MONGODB_URI`` (default ``mongodb://127.0.0.1:27017``), runs a
fixed sequence of reads, mutations, aggregations and index calls against
``plp_bookstore.books`` and prints each result. The connection is closed on
every exit path; any error aborts the run and propagates.
"""

import sys
from typing import Any, Callable, Dict, Optional, TextIO

from pymongo import MongoClient

import config
from cluster_manager import connect_to_cluster, get_books_collection
from db_executor import (
    aggregate_books,
    create_books_index,
    delete_by_title,
    explain_query,
    find_books,
    paginate_books,
    update_price,
)
from logger import configure_logging, logger
from models import PageRequest
from queries import (
    AUTHOR_YEAR_INDEX,
    PRICE_ASCENDING,
    PRICE_DESCENDING,
    SUMMARY_PROJECTION,
    TITLE_INDEX,
    author_filter,
    average_price_by_genre_pipeline,
    books_by_decade_pipeline,
    genre_filter,
    in_stock_published_after_filter,
    published_after_filter,
    title_filter,
    top_author_pipeline,
)
from response_formatter import format_explain, format_line, section_header

RunReport = Dict[str, Any]


def run(
    mongo_uri: str = config.MONGODB_URI,
    client_factory: Callable[[str], MongoClient] = connect_to_cluster,
    out: Optional[TextIO] = None,
) -> RunReport:
    """Run every operation in order and return the raw results by key."""
    out = out or sys.stdout
    report: RunReport = {}
    client = None

    def emit(key: str, label: str, value: Any) -> None:
        report[key] = value
        print(format_line(label, value), file=out)

    try:
        client = client_factory(mongo_uri)
        print("Connected to MongoDB server", file=out)
        books = get_books_collection(client)

        # ---- Basic CRUD ----
        print(section_header(2, "Basic CRUD operations"), file=out)
        emit("fantasy_books", f"{config.TARGET_GENRE} Books",
             find_books(books, genre_filter(config.TARGET_GENRE)))
        emit("modern_books", f"Books published after {config.RECENT_YEAR}",
             find_books(books, published_after_filter(config.RECENT_YEAR)))
        emit("author_books", f"Books by {config.TARGET_AUTHOR}",
             find_books(books, author_filter(config.TARGET_AUTHOR)))
        emit("price_update", "Price update result",
             update_price(books, config.PRICE_UPDATE_TITLE, config.NEW_PRICE))
        emit("delete", "Delete result",
             delete_by_title(books, config.DELETE_TITLE))

        # ---- Advanced queries ----
        print(section_header(3, "Advanced queries"), file=out)
        emit("in_stock_modern", f"In-stock books after {config.RECENT_YEAR}",
             find_books(books, in_stock_published_after_filter(config.RECENT_YEAR)))
        emit("projection", "Books with projection (title, author, price)",
             find_books(books, projection=SUMMARY_PROJECTION))
        emit("price_ascending", "Books sorted by price (ascending)",
             find_books(books, sort=PRICE_ASCENDING))
        emit("price_descending", "Books sorted by price (descending)",
             find_books(books, sort=PRICE_DESCENDING))
        page_request = PageRequest(page=config.EXAMPLE_PAGE, page_size=config.PAGE_SIZE)
        emit("page",
             f"Books page {page_request.page} ({page_request.page_size} per page)",
             paginate_books(books, page_request))

        # ---- Aggregation ----
        print(section_header(4, "Aggregation pipelines"), file=out)
        emit("avg_price_by_genre", "Average price by genre",
             aggregate_books(books, average_price_by_genre_pipeline()))
        emit("top_author", "Author with the most books",
             aggregate_books(books, top_author_pipeline()))
        emit("books_by_decade", "Books grouped by decade",
             aggregate_books(books, books_by_decade_pipeline()))

        # ---- Indexing ----
        print(section_header(5, "Indexing"), file=out)
        emit("title_index", "Index created on title",
             create_books_index(books, TITLE_INDEX))
        emit("compound_index", "Compound index created on author + published_year",
             create_books_index(books, AUTHOR_YEAR_INDEX))
        stats = explain_query(books, title_filter(config.EXPLAIN_TITLE))
        report["explain"] = stats
        print(f"Explain output for title search: {format_explain(stats)}", file=out)

        logger.info("[RUN] Completed %d operations", len(report))
        return report

    except Exception as e:
        logger.error("[RUN] Aborted after %d operations: %s", len(report), e)
        raise
    finally:
        if client is not None:
            client.close()
            print("Connection closed", file=out)


def main() -> None:
    configure_logging(config.LOG_LEVEL)
    run()


if __name__ == "__main__":
    main()
