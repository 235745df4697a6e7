"""Tests for configuration, credential resolution and the app factory."""

import base64
import json

import pytest

from luckydraw import config, create_app
from luckydraw.credentials import load_store_credentials
from luckydraw.errors import ConfigurationError, InvalidCredentialsError, MissingCredentialsError

_CREDENTIAL_VARS = ("MONGODB_CREDENTIALS", "MONGODB_CREDENTIALS_FILE", "MONGODB_URI")


def _b64(obj) -> str:
    return base64.b64encode(json.dumps(obj).encode("utf-8")).decode("ascii")


class TestCredentials:
    """Tests for load_store_credentials."""

    def test_base64_blob(self):
        env = {"MONGODB_CREDENTIALS": _b64({"uri": "mongodb://db:27017", "database": "promo"})}
        creds = load_store_credentials(env)
        assert creds.uri == "mongodb://db:27017"
        assert creds.database == "promo"
        assert creds.source == "MONGODB_CREDENTIALS"

    def test_connection_string_key(self):
        env = {"MONGODB_CREDENTIALS": _b64({"connectionString": "mongodb://db"})}
        creds = load_store_credentials(env)
        assert creds.uri == "mongodb://db"
        assert creds.database is None

    def test_file(self, tmp_path):
        path = tmp_path / "credentials.json"
        path.write_text(json.dumps({"uri": "mongodb://file-host"}), encoding="utf-8")

        creds = load_store_credentials({"MONGODB_CREDENTIALS_FILE": str(path)})

        assert creds.uri == "mongodb://file-host"

    def test_blob_takes_priority(self, tmp_path):
        path = tmp_path / "credentials.json"
        path.write_text(json.dumps({"uri": "mongodb://file-host"}), encoding="utf-8")
        env = {
            "MONGODB_CREDENTIALS": _b64({"uri": "mongodb://blob-host"}),
            "MONGODB_CREDENTIALS_FILE": str(path),
            "MONGODB_URI": "mongodb://plain-host",
        }
        assert load_store_credentials(env).uri == "mongodb://blob-host"

    def test_plain_uri(self):
        creds = load_store_credentials({"MONGODB_URI": "mongodb://plain-host"})
        assert creds.uri == "mongodb://plain-host"

    def test_missing(self):
        with pytest.raises(MissingCredentialsError):
            load_store_credentials({})

    def test_invalid_base64(self):
        with pytest.raises(InvalidCredentialsError):
            load_store_credentials({"MONGODB_CREDENTIALS": "not base64!!"})

    def test_blob_without_uri(self):
        with pytest.raises(InvalidCredentialsError):
            load_store_credentials({"MONGODB_CREDENTIALS": _b64({"database": "promo"})})

    def test_missing_file(self, tmp_path):
        with pytest.raises(InvalidCredentialsError):
            load_store_credentials({"MONGODB_CREDENTIALS_FILE": str(tmp_path / "nope.json")})

    def test_file_not_json(self, tmp_path):
        path = tmp_path / "credentials.json"
        path.write_text("uri=mongodb://x", encoding="utf-8")
        with pytest.raises(InvalidCredentialsError):
            load_store_credentials({"MONGODB_CREDENTIALS_FILE": str(path)})


class TestConfig:
    """Tests for config selection helpers."""

    @pytest.mark.parametrize(
        ("env", "expected"),
        [
            ("production", config.ProductionConfig),
            ("testing", config.TestingConfig),
            ("development", config.DevelopmentConfig),
            ("anything-else", config.DevelopmentConfig),
        ],
    )
    def test_get_config(self, monkeypatch, env, expected):
        monkeypatch.setenv("APP_ENV", env)
        assert config.get_config() is expected

    def test_cors_origins(self):
        assert config.cors_origins("*") == "*"
        assert config.cors_origins("") == "*"
        assert config.cors_origins("https://a.example, https://b.example") == [
            "https://a.example",
            "https://b.example",
        ]


class TestCreateApp:
    """Tests for the application factory."""

    def test_exits_without_credentials(self, monkeypatch):
        for name in _CREDENTIAL_VARS:
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setattr("luckydraw.load_dotenv", lambda: False)

        with pytest.raises(SystemExit) as exc:
            create_app(config.TestingConfig)

        assert exc.value.code == 1

    def test_uses_injected_client(self, app, mongo_client):
        assert app.extensions["mongo_client"] is mongo_client
        assert app.extensions["mongo_db"].name == config.TestingConfig.MONGODB_DB

    def test_rejects_bad_auth_mode(self, mongo_client):
        class BadAuthConfig(config.TestingConfig):
            SALES_AUTH_MODE = "magic"

        with pytest.raises(ConfigurationError):
            create_app(BadAuthConfig, mongo_client=mongo_client)

    def test_token_mode(self, mongo_client):
        class TokenConfig(config.TestingConfig):
            SALES_AUTH_MODE = "token"
            SALES_API_TOKEN = "s3cret"

        client = create_app(TokenConfig, mongo_client=mongo_client).test_client()

        denied = client.post("/add-order-number", json={"orderNumber": "ORD-1"}, headers={"x-role": "sales"})
        allowed = client.post("/add-order-number", json={"orderNumber": "ORD-1"}, headers={"x-sales-token": "s3cret"})

        assert denied.status_code == 403
        assert allowed.status_code == 201
