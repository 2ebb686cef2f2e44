"""
MongoDB connection bootstrap.

This module creates the motor client used by the MongoDB todo store,
verifies the connection with a ``ping`` command and hands back the
collection the store operates on.  It is only used when the
``mongo`` storage backend is selected; the in‑memory store needs no
database at all.

Connection problems at startup are fatal: :func:`connect` raises
``RuntimeError`` and the application refuses to start rather than
serving requests against an unreachable database.
"""

import logging
from typing import Tuple

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import ConfigurationError, PyMongoError

from .config import Settings

logger = logging.getLogger(__name__)


async def connect(settings: Settings) -> Tuple[AsyncIOMotorClient, AsyncIOMotorCollection]:
    """Open a client, ping the server and return ``(client, collection)``.

    Raises
    ------
    RuntimeError
        If ``MONGODB_URI`` is not set, cannot be parsed or the server
        does not answer the ping.
    """
    if not settings.mongodb_uri:
        raise RuntimeError("MONGODB_URI not set in environment")
    try:
        client = AsyncIOMotorClient(settings.mongodb_uri)
    except (ConfigurationError, ValueError) as exc:
        raise RuntimeError(f"Invalid MongoDB connection string: {exc}") from exc
    try:
        await client.admin.command("ping")
    except PyMongoError as exc:
        client.close()
        raise RuntimeError(f"Could not connect to MongoDB: {exc}") from exc
    logger.info("Connected to MongoDB")
    collection = client[settings.mongodb_database][settings.mongodb_collection]
    return client, collection
