"""Admin API namespaces."""

from ..client import AsyncClient, Client
from .fulfillment_set import AsyncFulfillmentSet, FulfillmentSet


class Admin:
    """Admin routes, available as ``sdk.admin``."""

    def __init__(self, client: Client) -> None:
        self.fulfillment_set = FulfillmentSet(client)


class AsyncAdmin:
    """Admin routes for the async SDK."""

    def __init__(self, client: AsyncClient) -> None:
        self.fulfillment_set = AsyncFulfillmentSet(client)


__all__ = [
    "Admin",
    "AsyncAdmin",
    "FulfillmentSet",
    "AsyncFulfillmentSet",
]
