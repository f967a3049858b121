# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from ureg.core.errors import PersistenceError
from ureg.core.models import USER_FIELDS, User

logger = logging.getLogger("ureg.repo")


def _object_id(user_id: str) -> Optional[ObjectId]:
    """Parse a path id. Malformed ids can never match a record."""
    try:
        return ObjectId(str(user_id or "").strip())
    except (InvalidId, TypeError):
        return None


class UserRepository:
    """CRUD access to user documents in a MongoDB collection.

    Not-found is reported as None, never raised. Driver failures are re-raised
    as PersistenceError.
    """

    def __init__(self, collection: Collection):
        self._col = collection

    def list_all(self) -> List[User]:
        try:
            return [User.from_document(d) for d in self._col.find()]
        except PyMongoError as e:
            raise PersistenceError(f"No se pudo listar usuarios: {e}") from e

    def find_by_id(self, user_id: str) -> Optional[User]:
        oid = _object_id(user_id)
        if oid is None:
            return None
        try:
            doc = self._col.find_one({"_id": oid})
        except PyMongoError as e:
            raise PersistenceError(f"No se pudo leer el usuario '{user_id}': {e}") from e
        return User.from_document(doc) if doc else None

    def create(self, *, name: str, email: str, password_hash: str) -> User:
        doc: Dict[str, Any] = {"name": name, "email": email, "password": password_hash}
        try:
            res = self._col.insert_one(doc)
        except PyMongoError as e:
            raise PersistenceError(f"No se pudo crear el usuario: {e}") from e
        logger.debug("inserted user %s", res.inserted_id)
        return User(id=str(res.inserted_id), name=name, email=email, password_hash=password_hash)

    def update_by_id(self, user_id: str, fields: Dict[str, Any]) -> Optional[User]:
        """Overwrite the supplied fields; keys outside the User schema are dropped."""
        oid = _object_id(user_id)
        if oid is None:
            return None
        changes = {k: v for k, v in fields.items() if k in USER_FIELDS}
        try:
            if not changes:
                doc = self._col.find_one({"_id": oid})
            else:
                doc = self._col.find_one_and_update(
                    {"_id": oid},
                    {"$set": changes},
                    return_document=ReturnDocument.AFTER,
                )
        except PyMongoError as e:
            raise PersistenceError(f"No se pudo actualizar el usuario '{user_id}': {e}") from e
        return User.from_document(doc) if doc else None

    def delete_by_id(self, user_id: str) -> None:
        oid = _object_id(user_id)
        if oid is None:
            return
        try:
            self._col.delete_one({"_id": oid})
        except PyMongoError as e:
            raise PersistenceError(f"No se pudo eliminar el usuario '{user_id}': {e}") from e
