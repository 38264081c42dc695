"""Authorization - app key / user token pairs and the credentials file.

Every Trello request carries a `key` (identifies the application) and, for
anything private, a `token` (authorizes it for one member). The process-wide
default authorization is built from the active configuration, or from
`~/.trellokit/credentials.json` when the configuration carries no key.
"""

from __future__ import annotations

import json
import threading
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from trellokit.core.config import get_config

# =============================================================================
# Custom Exception Classes
# =============================================================================


class CredentialError(Exception):
    """Base exception for all credential-related errors."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.details:
            return f"{self.message}\n  Details: {self.details}"
        return self.message


class CredentialNotFoundError(CredentialError):
    """Raised when no credentials are configured anywhere."""

    def __init__(self, path: Path):
        super().__init__(
            f"Credentials not found at {path}",
            "Set TRELLO_APP_KEY and TRELLO_USER_TOKEN, or run 'trellokit config init'.",
        )
        self.path = path


class InvalidCredentialsError(CredentialError):
    """Raised when credentials are malformed or invalid."""

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message, details)


class CredentialPermissionError(CredentialError):
    """Raised when there are permission issues accessing credentials."""

    def __init__(self, path: Path, operation: str, original_error: Exception):
        self.path = path
        self.operation = operation
        self.original_error = original_error
        super().__init__(
            f"Permission denied when {operation} credentials at {path}",
            f"Check file permissions. Original error: {original_error}",
        )


# =============================================================================
# Authorization Model
# =============================================================================


class TrelloAuthorization(BaseModel):
    """An app key and optional user token."""

    app_key: str = Field(..., min_length=1, alias="appKey")
    user_token: str | None = Field(default=None, alias="userToken")

    model_config = ConfigDict(populate_by_name=True)

    @property
    def is_authorized(self) -> bool:
        """True when requests will act on behalf of a member."""
        return bool(self.user_token)

    def as_query_params(self) -> dict[str, str]:
        params = {"key": self.app_key}
        if self.user_token:
            params["token"] = self.user_token
        return params

    @classmethod
    def default(cls) -> TrelloAuthorization:
        """Get the process-wide default authorization.

        Raises:
            CredentialNotFoundError: If neither config nor credentials file has a key.
            InvalidCredentialsError: If the credentials file is malformed.
        """
        global _default_auth
        with _default_lock:
            if _default_auth is None:
                _default_auth = _build_default()
            return _default_auth

    @classmethod
    def set_default(cls, auth: TrelloAuthorization | None) -> None:
        """Replace the default authorization (None rebuilds it on next use)."""
        global _default_auth
        with _default_lock:
            _default_auth = auth


_default_auth: TrelloAuthorization | None = None
_default_lock = threading.Lock()


def _build_default() -> TrelloAuthorization:
    api = get_config().api
    if api.app_key:
        return TrelloAuthorization(app_key=api.app_key, user_token=api.user_token)
    return CredentialManager().load_credentials()


# =============================================================================
# Credential Manager
# =============================================================================


class CredentialManager:
    """Loads and saves credentials in ~/.trellokit/credentials.json."""

    CREDENTIALS_PATH = Path.home() / ".trellokit" / "credentials.json"

    def load_credentials(self) -> TrelloAuthorization:
        """Load credentials from file.

        Returns:
            TrelloAuthorization: The stored key and token.

        Raises:
            CredentialNotFoundError: If the credentials file does not exist.
            InvalidCredentialsError: If the credentials file is malformed or invalid.
            CredentialPermissionError: If there are permission issues reading the file.
        """
        if not self.CREDENTIALS_PATH.exists():
            raise CredentialNotFoundError(self.CREDENTIALS_PATH)

        try:
            with open(self.CREDENTIALS_PATH) as f:
                try:
                    data = json.load(f)
                except json.JSONDecodeError as e:
                    raise InvalidCredentialsError(
                        "Credentials file contains invalid JSON",
                        f"JSON parse error at line {e.lineno}, column {e.colno}: {e.msg}",
                    ) from e
        except PermissionError as e:
            raise CredentialPermissionError(self.CREDENTIALS_PATH, "reading", e) from e

        if not data:
            raise InvalidCredentialsError(
                "Credentials file is empty or contains an empty JSON object",
                "Run 'trellokit config init' or set TRELLO_APP_KEY.",
            )

        # Credentials may be nested under a 'trello' key
        if isinstance(data, dict) and "trello" in data:
            data = data["trello"]

        if not isinstance(data, dict):
            raise InvalidCredentialsError("Credentials file must contain a JSON object")

        try:
            return TrelloAuthorization(**data)
        except ValidationError as e:
            missing_fields = []
            invalid_fields = []
            for error in e.errors():
                field = ".".join(str(loc) for loc in error["loc"])
                if error["type"] == "missing":
                    missing_fields.append(field)
                else:
                    invalid_fields.append(f"{field}: {error['msg']}")

            details_parts = []
            if missing_fields:
                details_parts.append(f"Missing required fields: {', '.join(missing_fields)}")
            if invalid_fields:
                details_parts.append(f"Invalid fields: {'; '.join(invalid_fields)}")

            raise InvalidCredentialsError(
                "Credentials file has invalid structure",
                " | ".join(details_parts) if details_parts else str(e),
            ) from e

    def save_credentials(self, auth: TrelloAuthorization) -> Path:
        """Write credentials to file, readable only by the current user.

        Raises:
            CredentialPermissionError: If the file cannot be written.
        """
        try:
            self.CREDENTIALS_PATH.parent.mkdir(parents=True, exist_ok=True)
            self.CREDENTIALS_PATH.write_text(
                json.dumps(auth.model_dump(by_alias=True), indent=2) + "\n"
            )
            self.CREDENTIALS_PATH.chmod(0o600)
        except PermissionError as e:
            raise CredentialPermissionError(self.CREDENTIALS_PATH, "writing", e) from e
        return self.CREDENTIALS_PATH

    def verify_credentials(self) -> bool:
        """Verify that credentials exist and are loadable.

        NOTE: This does NOT check the token with the service.

        Raises:
            CredentialNotFoundError: If the credentials file does not exist.
            InvalidCredentialsError: If the credentials are malformed.
            CredentialPermissionError: If there are permission issues.
        """
        self.load_credentials()
        return True
