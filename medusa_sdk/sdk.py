"""
Medusa SDK entry points.

Wire one configuration to one transport, one credential store and the API
namespaces built on them. Each instance holds its own credentials, so several
independently authenticated SDKs can live in the same process.
"""

from typing import Any

from .admin import Admin, AsyncAdmin
from .auth import AsyncAuth, Auth
from .client import AsyncClient, Client
from .types import MedusaConfig


class Medusa:
    """
    Medusa SDK - synchronous entry point.

    Example:
        sdk = Medusa(MedusaConfig(base_url="http://localhost:9000"))
        sdk.auth.login("user", "emailpass", {"email": "...", "password": "..."})
        sdk.admin.fulfillment_set.delete("fuset_123")
    """

    def __init__(self, config: MedusaConfig) -> None:
        self.client = Client(config)
        self.auth = Auth(self.client)
        self.admin = Admin(self.client)

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self.client.close()

    def __enter__(self) -> "Medusa":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class AsyncMedusa:
    """Medusa SDK - asynchronous entry point."""

    def __init__(self, config: MedusaConfig) -> None:
        self.client = AsyncClient(config)
        self.auth = AsyncAuth(self.client)
        self.admin = AsyncAdmin(self.client)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.close()

    async def __aenter__(self) -> "AsyncMedusa":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()


def create_medusa(config: MedusaConfig) -> Medusa:
    """Create a new synchronous Medusa SDK."""
    return Medusa(config)


def create_async_medusa(config: MedusaConfig) -> AsyncMedusa:
    """Create a new asynchronous Medusa SDK."""
    return AsyncMedusa(config)
