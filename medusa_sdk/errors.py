"""
Medusa SDK Error Classes

Errors raised by the transport and the authentication layer.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

import httpx


class MedusaError(Exception):
    """Base error class for the Medusa SDK."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "name": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "status_code": self.status_code,
            "details": self.details,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class NetworkError(MedusaError):
    """Network error (connection issues, timeouts)."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, retryable: bool = True):
        super().__init__("NETWORK_ERROR", message, 0, details)
        self.retryable = retryable


class FetchError(MedusaError):
    """Non-2xx response from the API."""

    def __init__(
        self,
        message: str,
        status_text: str,
        status_code: int,
        code: Optional[str] = None,
        type: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(code or "FETCH_ERROR", message, status_code, details)
        self.status_text = status_text
        self.type = type

    @classmethod
    def from_response(cls, response: httpx.Response) -> "FetchError":
        """Create error from a failed HTTP response.

        The server's JSON body (``{"type", "code", "message"}``) is used when
        present; otherwise the reason phrase becomes the message.
        """
        body: Dict[str, Any] = {}
        try:
            parsed = response.json()
            if isinstance(parsed, dict):
                body = parsed
        except ValueError:
            pass

        status_text = response.reason_phrase
        return cls(
            message=body.get("message") or status_text or f"HTTP {response.status_code}",
            status_text=status_text,
            status_code=response.status_code,
            code=body.get("code"),
            type=body.get("type"),
            details=body or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["status_text"] = self.status_text
        result["type"] = self.type
        return result


class AuthenticationError(FetchError):
    """Authentication error (failed auth route, missing credentials)."""

    def __init__(
        self,
        message: str,
        status_code: int = 401,
        status_text: str = "Unauthorized",
        code: str = "AUTHENTICATION_FAILED",
        type: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_text, status_code, code, type, details)

    @classmethod
    def from_fetch_error(cls, error: FetchError) -> "AuthenticationError":
        """Re-type a transport error raised by an auth route."""
        return cls(
            message=error.message,
            status_code=error.status_code,
            status_text=error.status_text,
            code=error.code if error.code != "FETCH_ERROR" else "AUTHENTICATION_FAILED",
            type=error.type,
            details=error.details,
        )


class ConfigurationError(MedusaError):
    """Configuration error."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("CONFIGURATION_ERROR", message, 0, details)


def is_medusa_error(error: Any) -> bool:
    """Check if error is a MedusaError."""
    return isinstance(error, MedusaError)


def is_retryable_error(error: Any) -> bool:
    """Check if error is retryable."""
    if isinstance(error, NetworkError):
        return error.retryable
    if isinstance(error, MedusaError):
        # Retry on server errors (5xx)
        return 500 <= error.status_code < 600
    return False
