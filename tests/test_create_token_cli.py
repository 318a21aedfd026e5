from __future__ import annotations

from jose import jwt

from scripts import create_token
from staff_admin.config import get_settings


def test_create_token_prints_verifiable_admin_token(monkeypatch, capsys) -> None:
    monkeypatch.setenv("TOKEN_SECRET", "cli-secret")
    get_settings.cache_clear()
    try:
        exit_code = create_token.main(["ops@example.com", "--minutes", "5"])
    finally:
        get_settings.cache_clear()

    assert exit_code == 0
    token = capsys.readouterr().out.strip()
    claims = jwt.decode(token, "cli-secret", algorithms=["HS256"])
    assert claims["sub"] == "ops@example.com"
    assert claims["role"] == "admin"


def test_create_token_warns_on_default_secret(monkeypatch, capsys) -> None:
    monkeypatch.delenv("TOKEN_SECRET", raising=False)
    monkeypatch.chdir("/")
    get_settings.cache_clear()
    try:
        create_token.main(["someone", "--role", "staff"])
    finally:
        get_settings.cache_clear()

    assert "default secret" in capsys.readouterr().err
