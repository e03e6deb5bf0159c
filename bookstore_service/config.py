import os
from dotenv import load_dotenv

load_dotenv()

MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://127.0.0.1:27017")
SERVER_SELECTION_TIMEOUT_MS = int(os.getenv("SERVER_SELECTION_TIMEOUT_MS", "30000"))

# Not configurable: the runner always works on the bookstore collection.
DATABASE_NAME = "plp_bookstore"
COLLECTION_NAME = "books"

# "ignore" reports a zero count when an update/delete matches nothing,
# "error" raises DocumentNotFoundError instead.
MISSING_DOCUMENT_POLICY = os.getenv("MISSING_DOCUMENT_POLICY", "ignore")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# ---- Demo parameters ----
TARGET_GENRE = "Fantasy"
TARGET_AUTHOR = "George Orwell"
RECENT_YEAR = 2010

PRICE_UPDATE_TITLE = "1984"
NEW_PRICE = 14.99
DELETE_TITLE = "The Hobbit"
EXPLAIN_TITLE = "1984"

EXAMPLE_PAGE = 2
PAGE_SIZE = 5
