# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from pymongo import MongoClient
from pymongo.collection import Collection

from ureg.config import Settings


def connect(settings: Settings) -> MongoClient:
    """Create the process-wide client. Connections are opened lazily by the pool."""
    return MongoClient(settings.mongo_uri, serverSelectionTimeoutMS=settings.mongo_timeout_ms)


def users_collection(client: MongoClient, settings: Settings) -> Collection:
    return client[settings.mongo_db][settings.mongo_collection]
