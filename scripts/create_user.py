#!/usr/bin/env python3
from __future__ import annotations

from getpass import getpass

from ureg.auth.passwords import make_hasher
from ureg.config import Settings
from ureg.core.errors import PersistenceError, ValidationError
from ureg.infra.db import connect, users_collection
from ureg.infra.user_repo import UserRepository
from ureg.services.user_service import UserService


def main() -> None:
    name = input("Nombre: ")
    email = input("Email: ")

    pw1 = getpass("Password: ")
    pw2 = getpass("Repeat password: ")
    if pw1 != pw2:
        raise SystemExit("Passwords no coinciden")

    settings = Settings.from_env()
    client = connect(settings)
    service = UserService(
        UserRepository(users_collection(client, settings)),
        hasher=make_hasher(settings.hash_time_cost),
    )

    try:
        user = service.create_user({"name": name, "email": email, "password": pw1})
    except ValidationError as e:
        raise SystemExit("\n".join(e.messages))
    except PersistenceError as e:
        raise SystemExit(str(e))
    finally:
        client.close()

    print(f"OK -> {user.id}")


if __name__ == "__main__":
    main()
