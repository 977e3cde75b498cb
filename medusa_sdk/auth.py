"""
Medusa SDK Authentication

Obtains identity tokens from the auth routes and makes them the credential
of subsequent requests: stored in the client's token store in bearer mode,
or exchanged for a server session cookie in session mode.
"""

from typing import Any, Dict, Mapping, Optional, Union

from .client import AsyncClient, Client
from .errors import AuthenticationError, FetchError
from .types import (
    AuthMode,
    EmailPassCredentials,
    LoginRedirect,
    LoginResult,
    LoginToken,
    ResetPasswordData,
)


REFRESH_PATH = "/auth/token/refresh"
SESSION_PATH = "/auth/session"

Payload = Union[EmailPassCredentials, Mapping[str, Any]]


def _payload(data: Any) -> Dict[str, Any]:
    if hasattr(data, "to_dict"):
        return data.to_dict()
    return dict(data)


def _auth_path(actor: str, provider: str, action: Optional[str] = None) -> str:
    path = f"/{actor}/auth/{provider}"
    return f"{path}/{action}" if action else path


def _token_from(response: Any) -> str:
    token = response.get("token") if isinstance(response, dict) else None
    if not token:
        raise AuthenticationError(
            "Authentication response did not include a token",
            status_code=0,
            status_text="",
            code="INVALID_AUTH_RESPONSE",
        )
    return token


def _login_result_from(response: Any) -> LoginResult:
    if isinstance(response, dict) and response.get("location"):
        return LoginRedirect.from_dict(response)
    return LoginToken(token=_token_from(response))


def _not_authenticated() -> AuthenticationError:
    return AuthenticationError(
        "No authentication token available to refresh",
        code="NOT_AUTHENTICATED",
    )


class Auth:
    """
    Authentication operations for the synchronous client.

    Available as ``sdk.auth``.
    """

    def __init__(self, client: Client) -> None:
        self._client = client

    def _fetch(self, path: str, **kwargs: Any) -> Any:
        """Call an auth route, reporting failures as authentication errors."""
        try:
            return self._client.fetch(path, **kwargs)
        except AuthenticationError:
            raise
        except FetchError as e:
            raise AuthenticationError.from_fetch_error(e) from e

    def register(self, actor: str, method: str, payload: Payload) -> str:
        """
        Retrieve a registration token for a user, customer or custom actor.

        The token is returned, not stored: pass it on to create the actor
        or to :meth:`update_provider`.

        Args:
            actor: Actor type, e.g. ``user`` or ``customer``
            method: Auth provider, e.g. ``emailpass`` or ``google``
            payload: Provider data, e.g. email and password

        Returns:
            The registration token
        """
        response = self._fetch(
            _auth_path(actor, method, "register"),
            method="POST",
            body=_payload(payload),
        )
        return _token_from(response)

    def login(self, actor: str, method: str, payload: Payload) -> LoginResult:
        """
        Authenticate an actor.

        Returns:
            ``LoginToken`` once authenticated; subsequent requests carry the
            credential. ``LoginRedirect`` when the provider requires the user
            to continue at ``location`` (third-party OAuth); nothing is stored.
        """
        response = self._fetch(
            _auth_path(actor, method),
            method="POST",
            body=_payload(payload),
        )
        result = _login_result_from(response)
        if isinstance(result, LoginToken):
            self._set_token(result.token)
        return result

    def callback(self, actor: str, method: str, query: Optional[Mapping[str, Any]] = None) -> str:
        """
        Validate an OAuth callback from a third-party provider.

        ``query`` holds every query parameter the provider redirected with;
        they are forwarded as-is for the provider to validate.
        """
        response = self._fetch(
            _auth_path(actor, method, "callback"),
            method="GET",
            query=query,
        )
        token = _token_from(response)
        self._set_token(token)
        return token

    def refresh(self) -> str:
        """Exchange the current credential for a fresh token."""
        if self._client.auth_mode is AuthMode.BEARER and not self._client.get_token():
            raise _not_authenticated()

        response = self._fetch(REFRESH_PATH, method="POST")
        token = _token_from(response)
        self._set_token(token)
        return token

    def logout(self) -> None:
        """
        Delete the authentication session and forget the stored token.

        Logging out without a session succeeds.
        """
        try:
            if self._client.auth_mode is AuthMode.SESSION or self._client.get_token():
                self._fetch(SESSION_PATH, method="DELETE")
        except AuthenticationError as e:
            if e.status_code != 401:
                raise
        finally:
            self._client.clear_token()

    def reset_password(
        self,
        actor: str,
        provider: str,
        body: Union[ResetPasswordData, Mapping[str, Any]],
    ) -> None:
        """
        Request a password reset token, delivered to the user out of band.

        The API answers the same way whether or not the identifier exists.
        """
        self._fetch(
            _auth_path(actor, provider, "reset-password"),
            method="POST",
            body=_payload(body),
            headers={"accept": "text/plain"},
        )

    def update_provider(
        self,
        actor: str,
        provider: str,
        body: Mapping[str, Any],
        token: str,
    ) -> None:
        """
        Update an actor's provider data, e.g. set a new password.

        Authenticates with ``token`` (from :meth:`register` or a reset
        password email) instead of the stored credential.
        """
        self._fetch(
            _auth_path(actor, provider, "update"),
            method="POST",
            body=_payload(body),
            headers={"authorization": f"Bearer {token}"},
        )

    def _set_token(self, token: str) -> None:
        if self._client.auth_mode is AuthMode.SESSION:
            self._fetch(
                SESSION_PATH,
                method="POST",
                headers={"authorization": f"Bearer {token}"},
            )
        else:
            self._client.set_token(token)


class AsyncAuth:
    """
    Authentication operations for the asynchronous client.

    Available as ``sdk.auth``; see :class:`Auth` for the semantics.
    """

    def __init__(self, client: AsyncClient) -> None:
        self._client = client

    async def _fetch(self, path: str, **kwargs: Any) -> Any:
        try:
            return await self._client.fetch(path, **kwargs)
        except AuthenticationError:
            raise
        except FetchError as e:
            raise AuthenticationError.from_fetch_error(e) from e

    async def register(self, actor: str, method: str, payload: Payload) -> str:
        """Retrieve a registration token without storing it."""
        response = await self._fetch(
            _auth_path(actor, method, "register"),
            method="POST",
            body=_payload(payload),
        )
        return _token_from(response)

    async def login(self, actor: str, method: str, payload: Payload) -> LoginResult:
        """Authenticate an actor, or return the provider redirect."""
        response = await self._fetch(
            _auth_path(actor, method),
            method="POST",
            body=_payload(payload),
        )
        result = _login_result_from(response)
        if isinstance(result, LoginToken):
            await self._set_token(result.token)
        return result

    async def callback(self, actor: str, method: str, query: Optional[Mapping[str, Any]] = None) -> str:
        """Validate an OAuth callback, forwarding the provider's query as-is."""
        response = await self._fetch(
            _auth_path(actor, method, "callback"),
            method="GET",
            query=query,
        )
        token = _token_from(response)
        await self._set_token(token)
        return token

    async def refresh(self) -> str:
        """Exchange the current credential for a fresh token."""
        if self._client.auth_mode is AuthMode.BEARER and not self._client.get_token():
            raise _not_authenticated()

        response = await self._fetch(REFRESH_PATH, method="POST")
        token = _token_from(response)
        await self._set_token(token)
        return token

    async def logout(self) -> None:
        """Delete the authentication session and forget the stored token."""
        try:
            if self._client.auth_mode is AuthMode.SESSION or self._client.get_token():
                await self._fetch(SESSION_PATH, method="DELETE")
        except AuthenticationError as e:
            if e.status_code != 401:
                raise
        finally:
            self._client.clear_token()

    async def reset_password(
        self,
        actor: str,
        provider: str,
        body: Union[ResetPasswordData, Mapping[str, Any]],
    ) -> None:
        """Request a password reset token, delivered to the user out of band."""
        await self._fetch(
            _auth_path(actor, provider, "reset-password"),
            method="POST",
            body=_payload(body),
            headers={"accept": "text/plain"},
        )

    async def update_provider(
        self,
        actor: str,
        provider: str,
        body: Mapping[str, Any],
        token: str,
    ) -> None:
        """Update an actor's provider data using an explicitly supplied token."""
        await self._fetch(
            _auth_path(actor, provider, "update"),
            method="POST",
            body=_payload(body),
            headers={"authorization": f"Bearer {token}"},
        )

    async def _set_token(self, token: str) -> None:
        if self._client.auth_mode is AuthMode.SESSION:
            await self._fetch(
                SESSION_PATH,
                method="POST",
                headers={"authorization": f"Bearer {token}"},
            )
        else:
            self._client.set_token(token)
