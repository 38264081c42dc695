"""Core module - exports configuration, authorization, validation and exceptions."""

from trellokit.core.exceptions import (
    ConfigError,
    ObjectDeletedError,
    RequestProcessorShutDownError,
    TrelloConnectionError,
    TrelloError,
    TrelloInteractionError,
    TrelloRequestError,
    TrelloTimeoutError,
    TrelloValidationError,
)

from trellokit.core.config import (
    APIConfig,
    RequestConfig,
    SyncConfig,
    TrelloKitConfig,
    get_config,
    load_config,
    reset_config,
    save_config,
    set_config,
)

from trellokit.core.auth import (
    CredentialError,
    CredentialManager,
    CredentialNotFoundError,
    CredentialPermissionError,
    InvalidCredentialsError,
    TrelloAuthorization,
)

from trellokit.core.cache import Cache, get_cache

from trellokit.core.validation import (
    EnumerationRule,
    NotNullOrWhiteSpaceRule,
    NotNullRule,
    NullableHasValueRule,
    NumericRule,
    PositionRule,
    UriRule,
    ValidationRule,
    validate_value,
)

__all__ = [
    # Exceptions
    "TrelloError",
    "TrelloValidationError",
    "TrelloRequestError",
    "TrelloTimeoutError",
    "TrelloConnectionError",
    "TrelloInteractionError",
    "RequestProcessorShutDownError",
    "ObjectDeletedError",
    "ConfigError",
    # Configuration
    "APIConfig",
    "SyncConfig",
    "RequestConfig",
    "TrelloKitConfig",
    "get_config",
    "set_config",
    "reset_config",
    "load_config",
    "save_config",
    # Authorization
    "CredentialError",
    "CredentialNotFoundError",
    "InvalidCredentialsError",
    "CredentialPermissionError",
    "TrelloAuthorization",
    "CredentialManager",
    # Cache
    "Cache",
    "get_cache",
    # Validation
    "ValidationRule",
    "NotNullRule",
    "NullableHasValueRule",
    "NotNullOrWhiteSpaceRule",
    "EnumerationRule",
    "NumericRule",
    "UriRule",
    "PositionRule",
    "validate_value",
]
