import builtins
import importlib.util
from pathlib import Path

import mongomock
import pytest


@pytest.fixture()
def script(monkeypatch):
    path = Path(__file__).resolve().parents[1] / "scripts" / "create_user.py"
    spec = importlib.util.spec_from_file_location("create_user_script", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    monkeypatch.setenv("UREG_HASH_TIME_COST", "1")
    return module


class _Client(mongomock.MongoClient):
    closed = False

    def close(self):
        self.closed = True
        super().close()


def _answers(monkeypatch, script, *, name="Ana", email="ana@x", pw1="Abcdefg1", pw2="Abcdefg1"):
    inputs = iter([name, email])
    passwords = iter([pw1, pw2])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(inputs))
    monkeypatch.setattr(script, "getpass", lambda prompt="": next(passwords))


def test_password_mismatch_exits_before_connecting(monkeypatch, script):
    _answers(monkeypatch, script, pw2="Otra1234")
    connects = []
    monkeypatch.setattr(script, "connect", lambda settings: connects.append(settings))

    with pytest.raises(SystemExit, match="no coinciden"):
        script.main()
    assert connects == []


def test_creates_user_and_closes_client(monkeypatch, script, capsys):
    _answers(monkeypatch, script)
    client = _Client()
    monkeypatch.setattr(script, "connect", lambda settings: client)

    script.main()

    doc = client["ureg"]["users"].find_one({})
    assert (doc["name"], doc["email"]) == ("Ana", "ana@x")
    assert doc["password"] != "Abcdefg1"
    assert client.closed
    assert "OK -> " in capsys.readouterr().out


def test_invalid_password_exits_and_closes_client(monkeypatch, script):
    _answers(monkeypatch, script, pw1="abc", pw2="abc")
    client = _Client()
    monkeypatch.setattr(script, "connect", lambda settings: client)

    with pytest.raises(SystemExit):
        script.main()
    assert client.closed
    assert client["ureg"]["users"].count_documents({}) == 0
