"""Tests for TrelloAuthorization and CredentialManager."""

import json
import stat
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from trellokit.core.auth import (
    CredentialManager,
    CredentialNotFoundError,
    InvalidCredentialsError,
    TrelloAuthorization,
)
from trellokit.core.config import APIConfig, TrelloKitConfig, set_config

# =============================================================================
# TrelloAuthorization
# =============================================================================


class TestTrelloAuthorization:
    """Tests for the authorization model."""

    def test_query_params_with_token(self):
        """Test key and token are both sent."""
        auth = TrelloAuthorization(app_key="k", user_token="t")

        assert auth.is_authorized is True
        assert auth.as_query_params() == {"key": "k", "token": "t"}

    def test_query_params_without_token(self):
        """Test an app key alone allows public reads only."""
        auth = TrelloAuthorization(app_key="k")

        assert auth.is_authorized is False
        assert auth.as_query_params() == {"key": "k"}

    def test_accepts_camel_case_names(self):
        """Test the credentials-file spelling is accepted."""
        auth = TrelloAuthorization(**{"appKey": "k", "userToken": "t"})

        assert auth.app_key == "k"
        assert auth.user_token == "t"

    def test_empty_app_key_rejected(self):
        """Test the app key cannot be empty."""
        with pytest.raises(ValidationError):
            TrelloAuthorization(app_key="")


class TestDefaultAuthorization:
    """Tests for the process-wide default."""

    def test_set_default(self):
        """Test set_default replaces the default."""
        auth = TrelloAuthorization(app_key="custom")
        TrelloAuthorization.set_default(auth)

        assert TrelloAuthorization.default() is auth

    def test_default_built_from_config(self):
        """Test the default comes from the active config when it has a key."""
        set_config(TrelloKitConfig(api=APIConfig(app_key="cfg-key", user_token="cfg-token")))
        TrelloAuthorization.set_default(None)

        auth = TrelloAuthorization.default()

        assert auth.app_key == "cfg-key"
        assert auth.user_token == "cfg-token"

    def test_default_falls_back_to_credentials_file(self, credentials_file):
        """Test the credentials file is used when config has no key."""
        TrelloAuthorization.set_default(None)

        with patch.object(CredentialManager, "CREDENTIALS_PATH", credentials_file):
            auth = TrelloAuthorization.default()

        assert auth.app_key == "file-key"
        assert auth.user_token == "file-token"

    def test_default_without_any_source(self, temp_dir):
        """Test a missing key everywhere raises CredentialNotFoundError."""
        TrelloAuthorization.set_default(None)

        with patch.object(CredentialManager, "CREDENTIALS_PATH", temp_dir / "none.json"):
            with pytest.raises(CredentialNotFoundError):
                TrelloAuthorization.default()


# =============================================================================
# CredentialManager
# =============================================================================


class TestCredentialManager:
    """Tests for loading and saving the credentials file."""

    def test_load_credentials(self, credentials_file):
        """Test a flat credentials file loads."""
        with patch.object(CredentialManager, "CREDENTIALS_PATH", credentials_file):
            auth = CredentialManager().load_credentials()

        assert auth == TrelloAuthorization(app_key="file-key", user_token="file-token")

    def test_load_nested_credentials(self, temp_dir):
        """Test credentials nested under a 'trello' key load."""
        path = temp_dir / "credentials.json"
        path.write_text(json.dumps({"trello": {"appKey": "nested", "userToken": "tok"}}))

        with patch.object(CredentialManager, "CREDENTIALS_PATH", path):
            auth = CredentialManager().load_credentials()

        assert auth.app_key == "nested"

    def test_load_missing_file(self, temp_dir):
        """Test a missing file reports its path."""
        path = temp_dir / "missing.json"

        with patch.object(CredentialManager, "CREDENTIALS_PATH", path):
            with pytest.raises(CredentialNotFoundError) as exc_info:
                CredentialManager().load_credentials()

        assert exc_info.value.path == path
        assert "Credentials not found" in str(exc_info.value)

    def test_load_invalid_json(self, temp_dir):
        """Test invalid JSON raises InvalidCredentialsError."""
        path = temp_dir / "credentials.json"
        path.write_text("{ invalid json }")

        with patch.object(CredentialManager, "CREDENTIALS_PATH", path):
            with pytest.raises(InvalidCredentialsError) as exc_info:
                CredentialManager().load_credentials()

        assert "invalid JSON" in str(exc_info.value)

    def test_load_empty_object(self, temp_dir):
        """Test an empty object is rejected."""
        path = temp_dir / "credentials.json"
        path.write_text("{}")

        with patch.object(CredentialManager, "CREDENTIALS_PATH", path):
            with pytest.raises(InvalidCredentialsError):
                CredentialManager().load_credentials()

    def test_load_missing_app_key(self, temp_dir):
        """Test a missing app key is named in the details."""
        path = temp_dir / "credentials.json"
        path.write_text(json.dumps({"userToken": "only-token"}))

        with patch.object(CredentialManager, "CREDENTIALS_PATH", path):
            with pytest.raises(InvalidCredentialsError) as exc_info:
                CredentialManager().load_credentials()

        assert "Missing required fields" in exc_info.value.details
        assert "appKey" in exc_info.value.details

    def test_save_credentials(self, temp_dir):
        """Test saving writes camelCase JSON readable only by the owner."""
        path = temp_dir / ".trellokit" / "credentials.json"
        auth = TrelloAuthorization(app_key="k", user_token="t")

        with patch.object(CredentialManager, "CREDENTIALS_PATH", path):
            written = CredentialManager().save_credentials(auth)
            assert CredentialManager().verify_credentials() is True

        assert written == path
        assert json.loads(path.read_text()) == {"appKey": "k", "userToken": "t"}
        assert stat.S_IMODE(path.stat().st_mode) == 0o600
