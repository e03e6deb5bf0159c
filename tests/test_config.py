import importlib

import pytest
from pydantic import ValidationError

import config
from models import Book, PageRequest


@pytest.fixture()
def reload_config():
    yield lambda: importlib.reload(config)
    importlib.reload(config)


def test_uri_falls_back_to_localhost(monkeypatch, reload_config):
    monkeypatch.delenv("MONGODB_URI", raising=False)
    assert reload_config().MONGODB_URI == "mongodb://127.0.0.1:27017"


def test_uri_from_environment(monkeypatch, reload_config):
    monkeypatch.setenv("MONGODB_URI", "mongodb://db.internal:27017")
    monkeypatch.setenv("MISSING_DOCUMENT_POLICY", "error")
    cfg = reload_config()
    assert cfg.MONGODB_URI == "mongodb://db.internal:27017"
    assert cfg.MISSING_DOCUMENT_POLICY == "error"
    assert (cfg.DATABASE_NAME, cfg.COLLECTION_NAME) == ("plp_bookstore", "books")


def test_page_request_offset():
    assert PageRequest(page=2, page_size=5).skip == 5
    assert PageRequest(page=1, page_size=5).skip == 0


@pytest.mark.parametrize("kwargs", [{"page": 0}, {"page_size": 0}, {"page_size": 101}])
def test_page_request_rejects_out_of_range(kwargs):
    with pytest.raises(ValidationError):
        PageRequest(**kwargs)


def test_book_keeps_extra_fields():
    book = Book(title="Dune", author="Frank Herbert", genre="Science Fiction",
                published_year=1965, price=9.99, pages=412)
    doc = book.to_document()
    assert doc["pages"] == 412
    assert doc["in_stock"] is True
