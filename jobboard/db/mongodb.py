"""
MongoDB Connection Utility

MongoDB stores:
- Job postings (jobs and internships)
- Newsletter subscribers

WHY MongoDB for these?
- Job postings carry many optional, loosely structured fields
- No joins needed: each posting/subscriber is self-contained
"""
from pymongo import MongoClient, ASCENDING, DESCENDING
from pymongo.database import Database
from pymongo.collection import Collection
from jobboard.core.config import get_settings
from jobboard.core.logging import get_logger

logger = get_logger(__name__)

# Global client (connection pooling handled internally by pymongo)
_client: MongoClient = None
_db: Database = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        _client = MongoClient(get_settings().mongo_uri)
    return _client


def get_mongo_db() -> Database:
    """Get the job board database"""
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client[get_settings().mongodb_db]
    return _db


def get_collection(name: str, db: Database = None) -> Collection:
    """
    Get a specific collection.
    Collections we'll use:
    - jobs: Job and internship postings
    - subscribers: Daily digest subscribers
    """
    if db is None:
        db = get_mongo_db()
    return db[name]


def test_mongo_connection() -> bool:
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
        logger.warning(f"MongoDB connection failed: {e}")
        return False


# Collection name constants (avoid typos)
COLLECTIONS = {
    "jobs": "jobs",
    "subscribers": "subscribers",
}


def init_mongo_indexes(db: Database = None):
    """
    Create indexes for better query performance.
    Call this once during app startup.
    """
    if db is None:
        db = get_mongo_db()

    # Listing and the daily digest both sort/filter on postedAt
    db[COLLECTIONS["jobs"]].create_index([("postedAt", DESCENDING)])

    # One subscription per address
    db[COLLECTIONS["subscribers"]].create_index([("email", ASCENDING)], unique=True)

    logger.info("MongoDB indexes created successfully")
