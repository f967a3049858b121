# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Form, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from ureg.core.errors import PersistenceError, ValidationError
from ureg.core.models import User
from ureg.routes.policies import LogAndRedirect, PersistenceFailurePolicy
from ureg.services.user_service import UserService

logger = logging.getLogger("ureg.users")

MSG_LIST_UNAVAILABLE = "No se pudo cargar la lista de usuarios."


class UserHandlers:
    """Route handlers for /users.

    Every route owns its failure path: validation errors re-render the
    originating form (HTTP 200), store failures go through the injected
    policy, unknown ids send the browser back to the list.
    """

    def __init__(
        self,
        service: UserService,
        templates: Jinja2Templates,
        *,
        prefix: str = "/users",
        failure_policy: Optional[PersistenceFailurePolicy] = None,
    ):
        self.service = service
        self.templates = templates
        self.prefix = prefix
        self.list_url = f"{prefix}/"
        self.failure_policy = failure_policy or LogAndRedirect(self.list_url)

    # ------------------ Rendering ------------------

    def _to_list(self) -> RedirectResponse:
        return RedirectResponse(url=self.list_url, status_code=302)

    def _render_list(self, request: Request, users: List[User], errors: Optional[List[str]], status_code: int = 200):
        return self.templates.TemplateResponse(
            request,
            "index.html",
            {
                "users": [u.to_view() for u in users],
                "errors": errors,
                "prefix": self.prefix,
            },
            status_code=status_code,
        )

    def _render_edit(self, request: Request, user: User, errors: Optional[List[str]]):
        return self.templates.TemplateResponse(
            request,
            "partials/edit.html",
            {"user": user.to_view(), "errors": errors, "prefix": self.prefix},
        )

    # ------------------ Routes ------------------

    def list_users(self, request: Request):
        try:
            users = self.service.list_users()
        except PersistenceError as e:
            logger.error("Error al listar usuarios: %s", e, exc_info=e)
            return self._render_list(request, [], [MSG_LIST_UNAVAILABLE], status_code=503)
        return self._render_list(request, users, None)

    def create_user(
        self,
        request: Request,
        name: str = Form(""),
        email: str = Form(""),
        password: str = Form(""),
    ):
        try:
            self.service.create_user({"name": name, "email": email, "password": password})
        except ValidationError as ve:
            try:
                users = self.service.list_users()
            except PersistenceError as e:
                return self.failure_policy("crear", e)
            return self._render_list(request, users, ve.messages)
        except PersistenceError as e:
            return self.failure_policy("crear", e)
        return self._to_list()

    def edit_form(self, request: Request, user_id: str):
        try:
            user = self.service.get_user(user_id)
        except PersistenceError as e:
            return self.failure_policy("leer", e)
        if user is None:
            return self._to_list()
        return self._render_edit(request, user, None)

    async def update_user(self, request: Request, user_id: str):
        # FormData keeps only the keys that were submitted.
        form = await request.form()
        fields = {k: str(form[k]) for k in ("name", "email", "password") if k in form}
        try:
            await run_in_threadpool(self.service.update_user, user_id, fields)
        except ValidationError as ve:
            try:
                user = await run_in_threadpool(self.service.get_user, user_id)
            except PersistenceError as e:
                return self.failure_policy("actualizar", e)
            if user is None:
                return self._to_list()
            return self._render_edit(request, user, ve.messages)
        except PersistenceError as e:
            return self.failure_policy("actualizar", e)
        return self._to_list()

    def delete_user(self, user_id: str):
        try:
            self.service.delete_user(user_id)
        except PersistenceError as e:
            return self.failure_policy("eliminar", e)
        return self._to_list()

    def router(self) -> APIRouter:
        r = APIRouter(prefix=self.prefix)
        r.add_api_route("/", self.list_users, methods=["GET"], response_class=HTMLResponse)
        r.add_api_route("/", self.create_user, methods=["POST"], response_class=HTMLResponse)
        r.add_api_route("/edit/{user_id}", self.edit_form, methods=["GET"], response_class=HTMLResponse)
        r.add_api_route("/update/{user_id}", self.update_user, methods=["POST"], response_class=HTMLResponse)
        r.add_api_route("/delete/{user_id}", self.delete_user, methods=["GET"])
        return r
