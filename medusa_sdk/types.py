"""
Medusa SDK Type Definitions

Configuration, credential storage interface and auth result types shared by
the sync and async clients.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Literal, Optional, Protocol, Union, runtime_checkable


DEFAULT_JWT_STORAGE_KEY = "medusa_auth_token"

StorageMethod = Literal["memory", "file", "nostore", "custom"]


class AuthMode(str, Enum):
    """How the client authenticates subsequent requests."""
    BEARER = "bearer"
    SESSION = "session"

    @classmethod
    def coerce(cls, value: Union["AuthMode", str]) -> "AuthMode":
        """Accept enum members or their string values ("jwt" aliases bearer)."""
        if isinstance(value, cls):
            return value
        if value == "jwt":
            return cls.BEARER
        return cls(value)


@runtime_checkable
class TokenStorage(Protocol):
    """Token storage interface for custom implementations."""

    def get_token(self) -> Optional[str]:
        """Get the stored token."""
        ...

    def set_token(self, token: str) -> None:
        """Store a token, replacing any previous one."""
        ...

    def clear_token(self) -> None:
        """Remove the stored token."""
        ...


@dataclass
class AuthConfig:
    """Authentication options."""

    # bearer: Authorization header from storage; session: server cookie
    type: Union[AuthMode, str] = AuthMode.BEARER
    # Entry name used by persistent stores
    jwt_token_storage_key: str = DEFAULT_JWT_STORAGE_KEY
    # Which built-in store to use ("custom" requires `storage`)
    jwt_token_storage_method: StorageMethod = "memory"
    # Custom store for tokens (used when jwt_token_storage_method="custom")
    storage: Optional[TokenStorage] = None
    # Token file for the "file" storage method (default: ~/.medusa/tokens.json)
    storage_path: Optional[str] = None


@dataclass
class MedusaConfig:
    """SDK configuration options."""

    # API base URL, may include a path prefix (https://shop.example.com/api)
    base_url: str
    # Publishable API key for store routes
    publishable_key: Optional[str] = None
    # Secret API key for admin routes (sent as HTTP basic auth)
    api_key: Optional[str] = None
    # Headers added to every request
    global_headers: Optional[Dict[str, str]] = None
    # Authentication options
    auth: AuthConfig = field(default_factory=AuthConfig)
    # Request timeout in seconds (default: 30)
    timeout: float = 30.0
    # Retry attempts for idempotent requests (default: 0)
    retry_attempts: int = 0
    # Enable debug logging (default: False)
    debug: bool = False
    # Logger to use instead of the package logger
    logger: Optional[logging.Logger] = None


@dataclass(frozen=True)
class LoginToken:
    """Login completed; the token authenticates subsequent requests."""

    token: str


@dataclass(frozen=True)
class LoginRedirect:
    """Login must continue at a third-party provider (e.g. OAuth)."""

    location: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LoginRedirect":
        return cls(location=data["location"])


LoginResult = Union[LoginToken, LoginRedirect]


@dataclass
class ResetPasswordData:
    """Data identifying the account whose password is being reset."""

    # e.g. the email address for the emailpass provider
    identifier: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API requests."""
        return {"identifier": self.identifier}


@dataclass
class EmailPassCredentials:
    """Email and password payload for the emailpass provider."""

    email: str
    password: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API requests."""
        return {
            "email": self.email,
            "password": self.password,
        }
