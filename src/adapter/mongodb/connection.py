"""MongoDB client for the word collection."""

import os
import logging

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import ConnectionFailure, PyMongoError

logger = logging.getLogger(__name__)

logging.getLogger('pymongo').setLevel(logging.WARNING)

MONGO_URL = os.getenv('MONGO_URL')
DATABASE_NAME = os.getenv('MONGODB_DATABASE', 'wordbook')
WORDS_COLLECTION_NAME = 'words'

_client_cache: MongoClient | None = None
_connection_attempted = False
_connection_failed = False


def reset_client() -> None:
    global _client_cache, _connection_attempted, _connection_failed
    _client_cache = None
    _connection_attempted = False
    _connection_failed = False


def get_mongodb_client() -> MongoClient | None:
    """Return a cached, healthy client; None when MongoDB is unreachable.

    A missing MONGO_URL or a failed first connection is treated as a
    configuration problem and not retried until reset_client(). Once a
    connection has succeeded, later failures are retried on every call.
    """
    global _client_cache, _connection_attempted, _connection_failed

    if _client_cache is not None:
        try:
            _client_cache.admin.command('ping')
            return _client_cache
        except PyMongoError:
            logger.debug("[MONGODB] Cached client failed ping, reconnecting")
            _client_cache = None

    if _connection_failed:
        return None

    if not MONGO_URL:
        logger.error("[MONGODB] MONGO_URL not configured")
        _connection_failed = True
        return None

    try:
        client = MongoClient(
            MONGO_URL,
            serverSelectionTimeoutMS=5000,
            connectTimeoutMS=5000,
            socketTimeoutMS=30000,
            maxPoolSize=10,
            retryWrites=True,
            retryReads=True,
        )
        client.admin.command('ping')
    except (ConnectionFailure, PyMongoError) as e:
        if _connection_attempted:
            logger.warning("[MONGODB] Reconnection failed", extra={"error": str(e)[:200]})
        else:
            logger.error("[MONGODB] Initial connection failed", extra={"error": str(e)[:200]})
            _connection_failed = True
        return None

    if not _connection_attempted:
        logger.info("[MONGODB] Connected", extra={"database": DATABASE_NAME})
    _connection_attempted = True
    _client_cache = client
    return client


def get_database() -> Database | None:
    client = get_mongodb_client()
    return client[DATABASE_NAME] if client is not None else None
