# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

DEFAULT_TIME_COST = 10


def make_hasher(time_cost: int = DEFAULT_TIME_COST) -> PasswordHasher:
    """Build an argon2 hasher with a fixed cost factor (random salt per hash)."""
    return PasswordHasher(time_cost=time_cost)


_PH = make_hasher()


def hash_password(plain: str, *, hasher: PasswordHasher | None = None) -> str:
    if not plain:
        raise ValueError("Password vacío")
    return (hasher or _PH).hash(plain)


def verify_password(hash_value: str, plain: str, *, hasher: PasswordHasher | None = None) -> bool:
    if not hash_value or not plain:
        return False
    try:
        return (hasher or _PH).verify(hash_value, plain)
    except (VerificationError, InvalidHashError):
        return False
