"""
Database client factory for MongoDB.

A single MongoClient is shared by the whole process; pymongo pools
connections internally, so every request thread borrows from the same pool.
"""

import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection

from .config import get_settings

logger = logging.getLogger(__name__)

# Module-level client cache
_client: Optional[MongoClient] = None


def get_mongo_client() -> MongoClient:
    """
    Get the process-wide MongoDB client.

    The client is created lazily on first use. Server selection and
    individual operations are bounded by ``settings.request_timeout``.

    Returns:
        Connected MongoClient (timezone-aware datetimes)
    """
    global _client

    if _client is None:
        settings = get_settings()
        if not settings.mongo_uri:
            raise RuntimeError(
                "MongoDB configuration missing. "
                "Set the MONGO_URI environment variable."
            )
        timeout_ms = int(settings.request_timeout * 1000)
        _client = MongoClient(
            settings.mongo_uri,
            tz_aware=True,
            serverSelectionTimeoutMS=timeout_ms,
            timeoutMS=timeout_ms,
        )
        logger.info("MongoDB client created for database %s", settings.mongo_db)

    return _client


def get_tasks_collection() -> Collection:
    """
    Get the collection that stores task documents.

    Returns:
        pymongo Collection named by MONGO_COLLECTION in database MONGO_DB
    """
    settings = get_settings()
    if not settings.mongo_collection:
        raise RuntimeError(
            "MongoDB configuration missing. "
            "Set the MONGO_COLLECTION environment variable."
        )
    client = get_mongo_client()
    return client[settings.mongo_db][settings.mongo_collection]


def ping_database() -> bool:
    """Return True if the primary answers a ping within the timeout."""
    client = get_mongo_client()
    client.admin.command("ping")
    return True


def close_mongo_client() -> None:
    """Close the cached client, if one was created."""
    global _client
    if _client is not None:
        _client.close()
        logger.info("MongoDB client closed")
    _client = None


def reset_client_cache() -> None:
    """
    Reset the cached database client without closing it.

    Useful for testing or when configuration changes.
    """
    global _client
    _client = None
