# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from typing import List


class ValidationError(ValueError):
    """Submitted form data failed one or more validation rules."""

    def __init__(self, messages: List[str]):
        self.messages = list(messages)
        super().__init__("; ".join(self.messages))


class PersistenceError(RuntimeError):
    """The user store is unreachable or rejected a read/write."""
