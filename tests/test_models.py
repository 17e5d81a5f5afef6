"""Tests for the Client model, form validation, settings and logging."""

import logging
from logging.handlers import RotatingFileHandler

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pydantic import ValidationError

from loyalty_app.core import Settings, get_settings, setup_logging
from loyalty_app.core.exceptions import ClientNotFoundError, LoyaltyAppError, StoreError
from loyalty_app.models import Client
from loyalty_app.schemas.client import validate_client_form
from main import create_app


class TestClientModel:
    """Tests for document mapping and loyalty derivations."""

    def test_from_document(self):
        oid = ObjectId()
        client = Client.from_document({"_id": oid, "name": "Alice", "phone": "060", "loyaltyPoints": 3})

        assert client.id == str(oid)
        assert client.address == ""
        assert client.to_dict() == {
            "id": str(oid), "name": "Alice", "phone": "060", "address": "", "loyaltyPoints": 3,
        }

    def test_to_document_has_no_id(self):
        doc = Client(id="abc", name="Alice", phone="060").to_document()
        assert doc == {"name": "Alice", "phone": "060", "address": "", "loyaltyPoints": 0}

    @pytest.mark.parametrize("points,stamps,used,available", [
        (0, 0, 0, False),
        (9, 9, 0, False),
        (10, 0, 1, True),
        (13, 3, 1, True),
        (20, 0, 2, True),
    ])
    def test_loyalty_derivations(self, points, stamps, used, available):
        client = Client(id="1", name="Alice", phone="060", loyalty_points=points)
        assert client.stamps() == stamps
        assert client.rewards_used() == used
        assert client.reward_available() is available

    def test_custom_threshold(self):
        client = Client(id="1", name="Alice", phone="060", loyalty_points=5)
        assert client.reward_available(5)
        assert client.stamps(5) == 0


class TestClientForm:
    """Tests for add/edit form validation."""

    def test_valid(self):
        form, errors = validate_client_form({"name": "Al", "phone": "06000000", "address": None})
        assert errors == {}
        assert form.address == ""

    def test_short_fields(self):
        form, errors = validate_client_form({"name": "A", "phone": "0600", "address": ""})
        assert form is None
        assert errors == {
            "name": "Le nom doit contenir au moins 2 caractères",
            "phone": "Le numéro de téléphone doit contenir au moins 8 chiffres",
        }

    def test_missing_name(self):
        _, errors = validate_client_form({"phone": "0600000000"})
        assert list(errors) == ["name"]


class TestErrors:

    def test_status_codes(self):
        assert ClientNotFoundError().status_code == 404
        assert ClientNotFoundError().code == "CLIENT_NOT_FOUND"
        assert StoreError().message == "Erreur serveur"
        assert isinstance(StoreError(), LoyaltyAppError)


class TestSettings:
    """Tests for configuration."""

    def test_defaults(self, settings):
        assert settings.MONGODB_DB == "loyalty-app"
        assert settings.MONGODB_COLLECTION == "clients"
        assert settings.REWARD_THRESHOLD == 10

    def test_missing_uri(self, monkeypatch):
        monkeypatch.delenv("MONGODB_URI", raising=False)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_blank_uri(self):
        with pytest.raises(ValidationError):
            Settings(MONGODB_URI="  ", _env_file=None)

    def test_startup_fails_without_uri(self, monkeypatch, tmp_path):
        """The app refuses to start when the connection string is missing."""
        monkeypatch.delenv("MONGODB_URI", raising=False)
        monkeypatch.chdir(tmp_path)
        get_settings.cache_clear()
        try:
            with pytest.raises(ValidationError):
                with TestClient(create_app()):
                    pass
        finally:
            get_settings.cache_clear()


class TestLogging:

    def test_rotating_file_handler(self, tmp_path):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging(Settings(MONGODB_URI="mongodb://localhost", LOGS_PATH=str(tmp_path), _env_file=None))
            assert any(isinstance(h, RotatingFileHandler) for h in root.handlers)
            assert logging.getLogger("pymongo").level == logging.WARNING
            assert (tmp_path / "loyalty_app.log").exists()
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers = saved_handlers
            root.setLevel(saved_level)
