"""
Medusa Python SDK

Sync and async clients for the Medusa commerce API with bearer-token or
session-cookie authentication.
"""

from .sdk import Medusa, AsyncMedusa, create_medusa, create_async_medusa
from .client import Client, AsyncClient
from .auth import Auth, AsyncAuth
from .types import (
    MedusaConfig,
    AuthConfig,
    AuthMode,
    TokenStorage,
    LoginResult,
    LoginToken,
    LoginRedirect,
    EmailPassCredentials,
    ResetPasswordData,
)
from .errors import (
    MedusaError,
    NetworkError,
    FetchError,
    AuthenticationError,
    ConfigurationError,
    is_medusa_error,
    is_retryable_error,
)
from .storage import MemoryStorage, FileStorage, NoStorage

__version__ = "0.1.0"
__all__ = [
    # SDK
    "Medusa",
    "AsyncMedusa",
    "create_medusa",
    "create_async_medusa",
    # Transport
    "Client",
    "AsyncClient",
    # Auth
    "Auth",
    "AsyncAuth",
    # Types
    "MedusaConfig",
    "AuthConfig",
    "AuthMode",
    "TokenStorage",
    "LoginResult",
    "LoginToken",
    "LoginRedirect",
    "EmailPassCredentials",
    "ResetPasswordData",
    # Errors
    "MedusaError",
    "NetworkError",
    "FetchError",
    "AuthenticationError",
    "ConfigurationError",
    "is_medusa_error",
    "is_retryable_error",
    # Storage
    "MemoryStorage",
    "FileStorage",
    "NoStorage",
]
