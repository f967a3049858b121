# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from argon2 import PasswordHasher
from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates
from pymongo.collection import Collection

from ureg.auth.passwords import make_hasher
from ureg.config import Settings
from ureg.core.validation import FormValidator
from ureg.infra.db import connect, users_collection
from ureg.infra.user_repo import UserRepository
from ureg.routes.policies import PersistenceFailurePolicy
from ureg.routes.users import UserHandlers
from ureg.services.user_service import UserService

logger = logging.getLogger("ureg.app")

BASE_DIR = Path(__file__).resolve().parent

USERS_PREFIX = "/users"


def create_app(
    settings: Optional[Settings] = None,
    *,
    collection: Optional[Collection] = None,
    hasher: Optional[PasswordHasher] = None,
    validator: Optional[FormValidator] = None,
    failure_policy: Optional[PersistenceFailurePolicy] = None,
) -> FastAPI:
    """Build the application, wiring every collaborator explicitly.

    Anything not passed in is built from settings (Mongo collection from the
    connection string, argon2 hasher with the configured cost).
    """
    settings = settings or Settings.from_env()

    if collection is None:
        client = connect(settings)
        collection = users_collection(client, settings)
        logger.info("Usando colección %s.%s", settings.mongo_db, settings.mongo_collection)

    service = UserService(
        UserRepository(collection),
        hasher=hasher or make_hasher(settings.hash_time_cost),
        validator=validator,
    )
    templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))
    handlers = UserHandlers(service, templates, prefix=USERS_PREFIX, failure_policy=failure_policy)

    app = FastAPI()
    app.include_router(handlers.router())

    @app.get("/", include_in_schema=False)
    def root():
        return RedirectResponse(url=handlers.list_url, status_code=302)

    app.state.settings = settings
    app.state.user_service = service
    return app
