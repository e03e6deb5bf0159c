from pymongo import MongoClient
from pymongo.collection import Collection

from config import COLLECTION_NAME, DATABASE_NAME, SERVER_SELECTION_TIMEOUT_MS
from logger import logger


def connect_to_cluster(mongo_uri: str) -> MongoClient:
    """Create a MongoClient and make sure the server answers a ping.

    Driver errors are not wrapped; the client is closed before they propagate.
    """
    client = MongoClient(mongo_uri, serverSelectionTimeoutMS=SERVER_SELECTION_TIMEOUT_MS)
    try:
        client.admin.command("ping")  # force connection test
    except Exception:
        client.close()
        raise
    logger.info("[CONNECT] Connected to %s", client.address)
    return client


def get_books_collection(client: MongoClient) -> Collection:
    return client[DATABASE_NAME][COLLECTION_NAME]
