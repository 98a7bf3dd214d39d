"""
MongoDB Service - CRUD operations for document collections.

Collections in this database:
1. jobs        - Job and internship postings shown on the board
2. subscribers - Email addresses that receive the daily digest

Each service takes its Collection in the constructor so routes and the
digest can be pointed at any database (tests use an in-memory one).
"""

from datetime import datetime, timezone
from typing import List, Dict, Any
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument, DESCENDING
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from jobboard.core.errors import NotFoundError, ConflictError
from jobboard.core.logging import get_logger
from jobboard.db.mongodb import get_collection, COLLECTIONS

logger = get_logger(__name__)


# ============================================================
# HELPER: Convert ObjectId to string for JSON serialization
# ============================================================

def serialize_doc(doc: dict) -> dict:
    """Convert MongoDB document to JSON-serializable dict."""
    if doc is None:
        return None
    if "_id" in doc:
        doc["_id"] = str(doc["_id"])
    return doc


def serialize_docs(docs: list) -> list:
    """Convert list of MongoDB documents to JSON-serializable list."""
    return [serialize_doc(doc) for doc in docs]


def to_object_id(value: str) -> ObjectId:
    """Parse a path id; malformed ids are reported as missing records."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise NotFoundError("Job not found")


# ============================================================
# JOBS COLLECTION
# ============================================================

class JobService:
    """
    Handles job posting storage.
    Documents use the camelCase field names the web client renders.
    """

    def __init__(self, collection: Collection = None):
        if collection is None:
            collection = get_collection(COLLECTIONS["jobs"])
        self.collection: Collection = collection

    def list_all(self) -> List[dict]:
        """All postings, newest first."""
        cursor = self.collection.find().sort("postedAt", DESCENDING)
        return serialize_docs(list(cursor))

    def insert(self, data: Dict[str, Any]) -> dict:
        """
        Insert a job posting.

        Args:
            data: Posting fields keyed by their stored (camelCase) names

        Returns:
            The stored document, with _id as string
        """
        doc = dict(data)
        if not doc.get("postedAt"):
            doc["postedAt"] = datetime.now(timezone.utc)
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        logger.info(f"Job created: {doc['_id']} ({doc.get('title')} at {doc.get('company')})")
        return serialize_doc(doc)

    def get_by_id(self, job_id: str) -> dict:
        """Fetch one posting or raise NotFoundError."""
        doc = self.collection.find_one({"_id": to_object_id(job_id)})
        if doc is None:
            raise NotFoundError("Job not found")
        return serialize_doc(doc)

    def update(self, job_id: str, changes: Dict[str, Any]) -> dict:
        """Apply a partial update and return the updated posting."""
        oid = to_object_id(job_id)
        if not changes:
            return self.get_by_id(job_id)

        doc = self.collection.find_one_and_update(
            {"_id": oid},
            {"$set": changes},
            return_document=ReturnDocument.AFTER
        )
        if doc is None:
            raise NotFoundError("Job not found")
        logger.info(f"Job updated: {job_id} fields={sorted(changes)}")
        return serialize_doc(doc)

    def delete(self, job_id: str) -> None:
        result = self.collection.delete_one({"_id": to_object_id(job_id)})
        if result.deleted_count == 0:
            raise NotFoundError("Job not found")
        logger.info(f"Job deleted: {job_id}")

    def posted_since(self, since: datetime) -> List[dict]:
        """Postings with postedAt >= since, newest first (daily digest)."""
        cursor = self.collection.find(
            {"postedAt": {"$gte": since}}
        ).sort("postedAt", DESCENDING)
        return serialize_docs(list(cursor))


# ============================================================
# SUBSCRIBERS COLLECTION
# ============================================================

class SubscriberService:
    """
    Handles digest subscribers.
    Email uniqueness is enforced by a unique index (see init_mongo_indexes)
    and checked up front for a friendlier error.
    """

    def __init__(self, collection: Collection = None):
        if collection is None:
            collection = get_collection(COLLECTIONS["subscribers"])
        self.collection: Collection = collection

    def exists(self, email: str) -> bool:
        return self.collection.find_one({"email": email}) is not None

    def insert(self, email: str) -> str:
        """
        Store a new subscriber.

        Raises:
            ConflictError if the address is already subscribed
        """
        if self.exists(email):
            raise ConflictError("Already subscribed")

        doc = {"email": email, "subscribedAt": datetime.now(timezone.utc)}
        try:
            result = self.collection.insert_one(doc)
        except DuplicateKeyError:
            # Lost a race against a concurrent subscribe
            raise ConflictError("Already subscribed")
        return str(result.inserted_id)

    def list_emails(self) -> List[str]:
        return [doc["email"] for doc in self.collection.find({}, {"email": 1})]


# ============================================================
# CONVENIENCE FUNCTION: Get all services
# ============================================================

def get_mongo_services() -> dict:
    """
    Get all MongoDB service instances.

    Usage:
        services = get_mongo_services()
        services['jobs'].list_all()
    """
    return {
        "jobs": JobService(),
        "subscribers": SubscriberService(),
    }
