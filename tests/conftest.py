import mongomock
import pytest

from config import COLLECTION_NAME, DATABASE_NAME
from models import Book

SEED_BOOKS = [
    Book(title="To Kill a Mockingbird", author="Harper Lee", genre="Fiction",
         published_year=1960, price=12.99, in_stock=True),
    Book(title="1984", author="George Orwell", genre="Dystopian",
         published_year=1949, price=10.99, in_stock=True),
    Book(title="The Great Gatsby", author="F. Scott Fitzgerald", genre="Fiction",
         published_year=1925, price=9.99, in_stock=True),
    Book(title="Brave New World", author="Aldous Huxley", genre="Dystopian",
         published_year=1932, price=11.50, in_stock=False),
    Book(title="The Hobbit", author="J.R.R. Tolkien", genre="Fantasy",
         published_year=1937, price=14.99, in_stock=True),
    Book(title="The Catcher in the Rye", author="J.D. Salinger", genre="Fiction",
         published_year=1951, price=8.99, in_stock=True),
    Book(title="Pride and Prejudice", author="Jane Austen", genre="Romance",
         published_year=1813, price=7.99, in_stock=True),
    Book(title="The Lord of the Rings", author="J.R.R. Tolkien", genre="Fantasy",
         published_year=1954, price=19.99, in_stock=True),
    Book(title="Animal Farm", author="George Orwell", genre="Political Satire",
         published_year=1945, price=8.50, in_stock=False),
    Book(title="The Alchemist", author="Paulo Coelho", genre="Fiction",
         published_year=1988, price=10.99, in_stock=True),
    Book(title="Moby Dick", author="Herman Melville", genre="Adventure",
         published_year=1851, price=12.50, in_stock=False),
    Book(title="Wuthering Heights", author="Emily Brontë", genre="Gothic Fiction",
         published_year=1847, price=9.99, in_stock=True),
]


@pytest.fixture()
def mongo_client():
    client = mongomock.MongoClient()
    yield client
    client.close()


@pytest.fixture()
def empty_books(mongo_client):
    return mongo_client[DATABASE_NAME][COLLECTION_NAME]


@pytest.fixture()
def books(empty_books):
    empty_books.insert_many([b.to_document() for b in SEED_BOOKS])
    return empty_books
