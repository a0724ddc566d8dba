"""
MongoDB Connection Utility

Used by the "mongo" storage backend. MongoDB stores one document per
storage key:

    {"_id": "jobportal_jobs", "value": "<JSON list>"}

WHY key/value documents?
- Mirrors the browser local-storage model the document store was built on
- Each collection is read and rewritten as a whole, no per-record indexes
"""
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.collection import Collection
from jobportal.core.config import get_settings
from jobportal.core.log import get_logger

logger = get_logger(__name__)

# Global client (connection pooling handled internally by pymongo)
_client: MongoClient = None
_db: Database = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        _client = MongoClient(get_settings().mongodb_uri)
    return _client


def get_mongo_db() -> Database:
    """Get the jobportal database"""
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client[get_settings().mongodb_db]
    return _db


def get_collection(name: str = None) -> Collection:
    """Get a collection; defaults to the key/value store collection."""
    db = get_mongo_db()
    return db[name or get_settings().mongodb_collection]


def check_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        client = get_mongo_client()
        # ping command checks connection
        client.admin.command('ping')
        return True
    except Exception as e:
        logger.warning("MongoDB connection failed: %s", e)
        return False
