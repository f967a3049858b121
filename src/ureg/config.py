# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import os
from dataclasses import dataclass

from ureg.auth.passwords import DEFAULT_TIME_COST


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "y"}


@dataclass(frozen=True)
class Settings:
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db: str = "ureg"
    mongo_collection: str = "users"
    mongo_timeout_ms: int = 5000
    hash_time_cost: int = DEFAULT_TIME_COST
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            mongo_uri=os.getenv("UREG_MONGO_URI", cls.mongo_uri),
            mongo_db=os.getenv("UREG_MONGO_DB", cls.mongo_db),
            mongo_collection=os.getenv("UREG_MONGO_COLLECTION", cls.mongo_collection),
            mongo_timeout_ms=int(os.getenv("UREG_MONGO_TIMEOUT_MS", str(cls.mongo_timeout_ms))),
            hash_time_cost=int(os.getenv("UREG_HASH_TIME_COST", str(cls.hash_time_cost))),
            log_level=os.getenv("UREG_LOG_LEVEL", cls.log_level).upper(),
            host=os.getenv("UREG_HOST", cls.host),
            port=int(os.getenv("UREG_PORT", str(cls.port))),
            reload=_env_bool("UREG_RELOAD"),
        )
