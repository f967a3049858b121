# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""What a handler does when the user store fails.

A policy is any callable ``(action, exc) -> Response``. The default keeps the
user flow simple: the failure is logged server-side and the browser is sent
back to the list as if nothing happened.
"""

from __future__ import annotations

import logging
from typing import Callable

from fastapi import Response
from fastapi.responses import RedirectResponse

from ureg.core.errors import PersistenceError

PersistenceFailurePolicy = Callable[[str, PersistenceError], Response]

logger = logging.getLogger("ureg.users")


class LogAndRedirect:
    def __init__(self, url: str = "/users/"):
        self.url = url

    def __call__(self, action: str, exc: PersistenceError) -> Response:
        logger.error("Error al %s usuario: %s", action, exc, exc_info=exc)
        return RedirectResponse(url=self.url, status_code=302)
