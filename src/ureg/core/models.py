# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

# Only these document keys are ever written by the application.
USER_FIELDS = ("name", "email", "password")


@dataclass(frozen=True)
class User:
    id: str
    name: str
    email: str
    password_hash: str

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "User":
        """Map a stored document to a User, ignoring unknown keys."""
        return cls(
            id=str(doc["_id"]),
            name=str(doc.get("name") or ""),
            email=str(doc.get("email") or ""),
            password_hash=str(doc.get("password") or ""),
        )

    def to_view(self) -> Dict[str, str]:
        """Template payload (never includes the password hash)."""
        return {"id": self.id, "name": self.name, "email": self.email}
