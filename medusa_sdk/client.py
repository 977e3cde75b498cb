"""
Medusa SDK Transport

Client classes that turn ``fetch(path, ...)`` calls into HTTP requests
against the Medusa API. They own the credential store and attach the
configured authentication to every outgoing request.
"""

import asyncio
import base64
import logging
import time
from typing import Any, Dict, List, Mapping, Optional, Tuple
from urllib.parse import urlparse

import httpx

from .errors import (
    ConfigurationError,
    FetchError,
    MedusaError,
    NetworkError,
    is_retryable_error,
)
from .storage import FileStorage, MemoryStorage, NoStorage
from .types import AuthConfig, AuthMode, MedusaConfig, TokenStorage


logger = logging.getLogger("medusa_sdk")

PUBLISHABLE_KEY_HEADER = "x-publishable-api-key"

# Retry delays for exponential backoff
RETRY_DELAYS = [1.0, 2.0, 4.0]

IDEMPOTENT_METHODS = frozenset({"GET", "HEAD"})

HeadersInput = Optional[Mapping[str, Optional[str]]]


def encode_query(query: Mapping[str, Any], prefix: Optional[str] = None) -> List[Tuple[str, str]]:
    """Flatten a query mapping into bracketed key/value pairs.

    ``{"fields": "id", "q": {"name": "x"}, "ids": ["a", "b"]}`` becomes
    ``fields=id&q[name]=x&ids[0]=a&ids[1]=b``. ``None`` values are dropped.
    """
    pairs: List[Tuple[str, str]] = []
    for key, value in query.items():
        name = f"{prefix}[{key}]" if prefix else str(key)
        pairs.extend(_encode_value(name, value))
    return pairs


def _encode_value(name: str, value: Any) -> List[Tuple[str, str]]:
    if value is None:
        return []
    if isinstance(value, Mapping):
        return encode_query(value, name)
    if isinstance(value, (list, tuple)):
        pairs: List[Tuple[str, str]] = []
        for index, item in enumerate(value):
            pairs.extend(_encode_value(f"{name}[{index}]", item))
        return pairs
    if isinstance(value, bool):
        return [(name, "true" if value else "false")]
    return [(name, str(value))]


class BaseClient:
    """Configuration, credential storage and header handling shared by both clients."""

    def __init__(self, config: MedusaConfig) -> None:
        self._validate_config(config)

        self.config = config
        self._base_url = config.base_url.rstrip("/")
        self._auth_mode = AuthMode.coerce(config.auth.type)
        self._timeout = config.timeout
        self._retry_attempts = config.retry_attempts
        self._global_headers = dict(config.global_headers or {})
        self._debug = config.debug
        self._logger = config.logger or logger
        self._storage = self._create_storage(config.auth)
        self._default_headers = self._build_default_headers()

        self._log(
            "Initiating Medusa client (auth=%s) with default headers: %s",
            self._auth_mode.value,
            sorted(self._default_headers),
        )

    def _validate_config(self, config: MedusaConfig) -> None:
        """Validate configuration."""
        if not config.base_url:
            raise ConfigurationError("base_url is required")
        parsed = urlparse(config.base_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigurationError(
                "Invalid base_url. Expected an absolute http(s) URL",
                {"base_url": config.base_url},
            )
        try:
            AuthMode.coerce(config.auth.type)
        except ValueError:
            raise ConfigurationError(
                f"Invalid auth type {config.auth.type!r}. Expected 'bearer' or 'session'"
            )
        if config.timeout <= 0:
            raise ConfigurationError("timeout must be positive")
        if config.retry_attempts < 0:
            raise ConfigurationError("retry_attempts must not be negative")

    def _create_storage(self, auth: AuthConfig) -> TokenStorage:
        """Create the credential store selected by the auth config."""
        if auth.storage is not None:
            if not isinstance(auth.storage, TokenStorage):
                raise ConfigurationError(
                    "auth.storage must implement get_token, set_token and clear_token"
                )
            return auth.storage

        method = auth.jwt_token_storage_method
        if method == "memory":
            return MemoryStorage()
        if method == "file":
            return FileStorage(auth.storage_path, key=auth.jwt_token_storage_key)
        if method == "nostore":
            return NoStorage()
        if method == "custom":
            raise ConfigurationError("auth.storage is required for the 'custom' storage method")
        raise ConfigurationError(f"Unknown jwt_token_storage_method {method!r}")

    def _build_default_headers(self) -> Dict[str, str]:
        headers = {
            "content-type": "application/json",
            "accept": "application/json",
        }
        if self.config.api_key:
            encoded = base64.b64encode(f"{self.config.api_key}:".encode()).decode()
            headers["authorization"] = f"Basic {encoded}"
        if self.config.publishable_key:
            headers[PUBLISHABLE_KEY_HEADER] = self.config.publishable_key
        return headers

    def _log(self, message: str, *args: Any) -> None:
        """Log debug message."""
        if self._debug:
            self._logger.debug(f"[Medusa] {message}", *args)

    # =========================================================================
    # Credential Store
    # =========================================================================

    @property
    def auth_mode(self) -> AuthMode:
        return self._auth_mode

    @property
    def storage(self) -> TokenStorage:
        return self._storage

    def get_token(self) -> Optional[str]:
        """Get the stored authentication token."""
        return self._storage.get_token()

    def set_token(self, token: str) -> None:
        """Replace the stored authentication token."""
        self._storage.set_token(token)

    def clear_token(self) -> None:
        """Remove the stored authentication token."""
        self._storage.clear_token()

    # =========================================================================
    # Request Building
    # =========================================================================

    def _build_url(self, path: str, query: Optional[Mapping[str, Any]] = None) -> httpx.URL:
        """Join path to the base URL, merging ``query`` into any query on the path."""
        url = httpx.URL(f"{self._base_url}/{path.lstrip('/')}")
        if query:
            url = url.copy_merge_params(encode_query(query))
        return url

    def _bearer_header(self) -> Dict[str, str]:
        if self._auth_mode is AuthMode.SESSION:
            return {}
        token = self._storage.get_token()
        return {"authorization": f"Bearer {token}"} if token else {}

    def _build_headers(self, headers: HeadersInput = None) -> httpx.Headers:
        """Merge defaults, global headers, credentials and per-call headers.

        Later sources win; a ``None`` value removes the header. An explicit
        per-call Authorization header bypasses the credential store.
        """
        request_headers = httpx.Headers(self._default_headers)
        custom: Dict[str, Optional[str]] = dict(self._global_headers)
        explicit_auth = bool(headers) and any(
            key.lower() == "authorization" for key in headers  # type: ignore[union-attr]
        )
        if not explicit_auth:
            custom.update(self._bearer_header())
        if headers:
            custom.update(headers)

        for key, value in custom.items():
            if value is None:
                request_headers.pop(key, None)
            else:
                request_headers[key] = value
        return request_headers

    def _handle_response(self, response: httpx.Response, request_headers: httpx.Headers) -> Any:
        """Return parsed JSON for JSON requests, raise on non-2xx statuses."""
        self._log("Received response with status %s", response.status_code)
        if response.status_code >= 300:
            raise FetchError.from_response(response)

        if "application/json" not in request_headers.get("accept", ""):
            return response
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            raise FetchError(
                message="Response body is not valid JSON",
                status_text=response.reason_phrase,
                status_code=response.status_code,
                code="INVALID_RESPONSE",
                details={"content_type": response.headers.get("content-type", "")},
            )


class Client(BaseClient):
    """
    Synchronous transport.

    Every SDK call ends in :meth:`fetch`, which attaches credentials, performs
    the request and returns the parsed JSON body.
    """

    def __init__(self, config: MedusaConfig) -> None:
        super().__init__(config)
        # Cookie jar keeps the server session in session mode
        self._http_client = httpx.Client(timeout=self._timeout)

    def fetch(
        self,
        path: str,
        method: str = "GET",
        headers: HeadersInput = None,
        body: Optional[Any] = None,
        query: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        Send a request to the API.

        Args:
            path: Route path relative to the base URL
            method: HTTP method
            headers: Per-request headers; ``None`` values remove a header
            body: JSON-serializable request body
            query: Query parameters (nested mappings use bracket notation)

        Returns:
            Parsed JSON body, or the raw response when the request does not
            accept JSON

        Raises:
            FetchError: On a non-2xx response
            NetworkError: When the request could not be completed
        """
        normalized_method = method.upper()
        url = self._build_url(path, query)
        request_headers = self._build_headers(headers)

        attempts = self._retry_attempts + 1 if normalized_method in IDEMPOTENT_METHODS else 1
        for attempt in range(attempts):
            try:
                return self._execute_request(normalized_method, url, request_headers, body)
            except MedusaError as error:
                if not is_retryable_error(error) or attempt == attempts - 1:
                    raise
                delay = RETRY_DELAYS[min(attempt, len(RETRY_DELAYS) - 1)]
                self._log("Retrying %s %s in %ss (%s)", normalized_method, url, delay, error.code)
                time.sleep(delay)

        raise NetworkError("Request failed after retries")

    def _execute_request(
        self,
        method: str,
        url: httpx.URL,
        headers: httpx.Headers,
        body: Optional[Any],
    ) -> Any:
        """Execute a single HTTP request."""
        self._log("Performing request to: %s %s", method, url)
        try:
            response = self._http_client.request(
                method,
                url,
                headers=headers,
                json=body,
            )
        except httpx.TimeoutException:
            raise NetworkError("Request timeout", {"timeout": self._timeout})
        except httpx.RequestError as e:
            raise NetworkError(str(e))

        return self._handle_response(response, headers)

    def close(self) -> None:
        """Close the HTTP client."""
        self._http_client.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class AsyncClient(BaseClient):
    """
    Asynchronous transport.

    Same contract as :class:`Client`; the underlying ``httpx.AsyncClient`` is
    created on first use.
    """

    def __init__(self, config: MedusaConfig) -> None:
        super().__init__(config)
        self._http_client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self._timeout)
        return self._http_client

    async def fetch(
        self,
        path: str,
        method: str = "GET",
        headers: HeadersInput = None,
        body: Optional[Any] = None,
        query: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Send a request to the API. See :meth:`Client.fetch`."""
        normalized_method = method.upper()
        url = self._build_url(path, query)
        request_headers = self._build_headers(headers)

        attempts = self._retry_attempts + 1 if normalized_method in IDEMPOTENT_METHODS else 1
        for attempt in range(attempts):
            try:
                return await self._execute_request(normalized_method, url, request_headers, body)
            except MedusaError as error:
                if not is_retryable_error(error) or attempt == attempts - 1:
                    raise
                delay = RETRY_DELAYS[min(attempt, len(RETRY_DELAYS) - 1)]
                self._log("Retrying %s %s in %ss (%s)", normalized_method, url, delay, error.code)
                await asyncio.sleep(delay)

        raise NetworkError("Request failed after retries")

    async def _execute_request(
        self,
        method: str,
        url: httpx.URL,
        headers: httpx.Headers,
        body: Optional[Any],
    ) -> Any:
        """Execute a single HTTP request."""
        self._log("Performing request to: %s %s", method, url)
        try:
            client = self._get_client()
            response = await client.request(
                method,
                url,
                headers=headers,
                json=body,
            )
        except httpx.TimeoutException:
            raise NetworkError("Request timeout", {"timeout": self._timeout})
        except httpx.RequestError as e:
            raise NetworkError(str(e))

        return self._handle_response(response, headers)

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> "AsyncClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
