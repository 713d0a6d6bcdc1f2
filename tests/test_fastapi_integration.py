# tests/test_fastapi_integration.py
from typing import Optional

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from pkg_secret_parsers.config.settings import SecretParserSettings
from pkg_secret_parsers.domain.entities import ParsedSecret
from pkg_secret_parsers.domain.value_objects import InputLengthRestrictions
from pkg_secret_parsers.integrations.fastapi import FastAPIClientSecrets, create_fastapi_client_secrets


@pytest.fixture
def client() -> TestClient:
    client_secrets = create_fastapi_client_secrets(
        settings=SecretParserSettings(
            input_length_restrictions=InputLengthRestrictions(client_id=20, client_secret=20),
        )
    )
    assert isinstance(client_secrets, FastAPIClientSecrets)

    app = FastAPI()

    @app.post("/connect/token")
    async def token(secret: ParsedSecret = Depends(client_secrets.require_client_secret)):
        return {"client_id": secret.id, "type": secret.type.value}

    @app.post("/connect/introspect")
    async def introspect(secret: Optional[ParsedSecret] = Depends(client_secrets.get_client_secret)):
        return {"authenticated": secret is not None}

    return TestClient(app)


def test_form_credentials(client):
    resp = client.post("/connect/token", data={"client_id": "app", "client_secret": "s3cret"})

    assert resp.status_code == 200
    assert resp.json() == {"client_id": "app", "type": "SharedSecret"}


def test_json_credentials(client):
    resp = client.post("/connect/token", json={"client_id": "app", "client_secret": "s3cret"})

    assert resp.status_code == 200
    assert resp.json()["client_id"] == "app"


def test_missing_credentials_is_invalid_client(client):
    resp = client.post("/connect/token", data={"client_id": "app"})

    assert resp.status_code == 401
    assert resp.json()["detail"]["error"] == "invalid_client"


def test_malformed_json_is_invalid_client(client):
    resp = client.post(
        "/connect/token",
        content=b'{"client_id": "app", ',
        headers={"Content-Type": "application/json"},
    )

    assert resp.status_code == 401


def test_over_length_is_invalid_client(client):
    resp = client.post("/connect/token", json={"client_id": "a" * 21, "client_secret": "s"})

    assert resp.status_code == 401


def test_optional_dependency(client):
    assert client.post("/connect/introspect", data={}).json() == {"authenticated": False}
    assert client.post(
        "/connect/introspect", data={"client_id": "app", "client_secret": "x"}
    ).json() == {"authenticated": True}


def test_factory_reads_environment(monkeypatch):
    monkeypatch.setenv("INPUT_LENGTH_CLIENT_ID", "5")
    monkeypatch.delenv("INPUT_LENGTH_CLIENT_SECRET", raising=False)

    client_secrets = create_fastapi_client_secrets()
    parser = client_secrets.parse_use_case.parsers[0]

    assert parser._restrictions == InputLengthRestrictions(client_id=5)
