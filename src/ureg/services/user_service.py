# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from argon2 import PasswordHasher

from ureg.auth.passwords import hash_password
from ureg.core.errors import ValidationError
from ureg.core.models import User
from ureg.core.validation import FormValidator, user_form_validator
from ureg.infra.user_repo import UserRepository

logger = logging.getLogger("ureg.users")


def _text(form: Mapping[str, Any], key: str) -> str:
    v = form.get(key)
    return "" if v is None else str(v)


class UserService:
    """Validate, hash and persist users.

    Shared by the HTTP handlers and the create_user script so both apply the
    same password rules.
    """

    def __init__(
        self,
        repo: UserRepository,
        *,
        hasher: PasswordHasher,
        validator: Optional[FormValidator] = None,
    ):
        self.repo = repo
        self.hasher = hasher
        self.validator = validator or user_form_validator()

    def _check(self, form: Mapping[str, Any]) -> str:
        # Passwords are validated as submitted (no trimming).
        password = form.get("password")
        password = "" if password is None else str(password)
        errors = self.validator.validate({"password": password})
        if errors:
            raise ValidationError(errors)
        return password

    def list_users(self) -> List[User]:
        return self.repo.list_all()

    def get_user(self, user_id: str) -> Optional[User]:
        return self.repo.find_by_id(user_id)

    def create_user(self, form: Mapping[str, Any]) -> User:
        password = self._check(form)
        user = self.repo.create(
            name=_text(form, "name"),
            email=_text(form, "email"),
            password_hash=hash_password(password, hasher=self.hasher),
        )
        logger.info("Usuario creado: %s", user.id)
        return user

    def update_user(self, user_id: str, form: Mapping[str, Any]) -> Optional[User]:
        """Overwrite the submitted name/email and the re-hashed password.

        Fields missing from the form keep their stored value. None if the id
        is absent.
        """
        password = self._check(form)
        changes: Dict[str, str] = {k: _text(form, k) for k in ("name", "email") if form.get(k) is not None}
        changes["password"] = hash_password(password, hasher=self.hasher)
        user = self.repo.update_by_id(user_id, changes)
        if user is None:
            logger.info("Actualización ignorada, usuario inexistente: %s", user_id)
        else:
            logger.info("Usuario actualizado: %s", user.id)
        return user

    def delete_user(self, user_id: str) -> None:
        self.repo.delete_by_id(user_id)
        logger.info("Usuario eliminado (si existía): %s", user_id)
