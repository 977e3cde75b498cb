"""
Admin fulfillment set routes.

Available as ``sdk.admin.fulfillment_set``.
"""

from typing import Any, Dict, Mapping, Optional

from ..client import AsyncClient, Client, HeadersInput


class FulfillmentSet:
    """Fulfillment sets and their service zones."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def delete(self, id: str, headers: HeadersInput = None) -> Dict[str, Any]:
        """
        Delete a fulfillment set.

        Returns:
            The deletion's details (``id``, ``object``, ``deleted``)
        """
        return self._client.fetch(
            f"/admin/fulfillment-sets/{id}",
            method="DELETE",
            headers=headers,
        )

    def create_service_zone(
        self,
        id: str,
        body: Mapping[str, Any],
        query: Optional[Mapping[str, Any]] = None,
        headers: HeadersInput = None,
    ) -> Dict[str, Any]:
        """
        Add a service zone to a fulfillment set.

        Args:
            id: The fulfillment set's ID
            body: The service zone's details, e.g. ``name`` and ``geo_zones``
            query: Fields to retrieve in the returned fulfillment set
            headers: Headers to pass in the request

        Returns:
            ``{"fulfillment_set": {...}}``
        """
        return self._client.fetch(
            f"/admin/fulfillment-sets/{id}/service-zones",
            method="POST",
            headers=headers,
            body=dict(body),
            query=query,
        )

    def retrieve_service_zone(
        self,
        fulfillment_set_id: str,
        service_zone_id: str,
        query: Optional[Mapping[str, Any]] = None,
        headers: HeadersInput = None,
    ) -> Dict[str, Any]:
        """Retrieve a service zone. Returns ``{"service_zone": {...}}``."""
        return self._client.fetch(
            f"/admin/fulfillment-sets/{fulfillment_set_id}/service-zones/{service_zone_id}",
            method="GET",
            headers=headers,
            query=query,
        )

    def update_service_zone(
        self,
        fulfillment_set_id: str,
        service_zone_id: str,
        body: Mapping[str, Any],
        query: Optional[Mapping[str, Any]] = None,
        headers: HeadersInput = None,
    ) -> Dict[str, Any]:
        """Update a service zone. Returns ``{"fulfillment_set": {...}}``."""
        return self._client.fetch(
            f"/admin/fulfillment-sets/{fulfillment_set_id}/service-zones/{service_zone_id}",
            method="POST",
            headers=headers,
            body=dict(body),
            query=query,
        )

    def delete_service_zone(
        self,
        fulfillment_set_id: str,
        service_zone_id: str,
        headers: HeadersInput = None,
    ) -> Dict[str, Any]:
        """
        Delete a service zone.

        Returns:
            The deletion's details; ``parent`` holds the fulfillment set
        """
        return self._client.fetch(
            f"/admin/fulfillment-sets/{fulfillment_set_id}/service-zones/{service_zone_id}",
            method="DELETE",
            headers=headers,
        )


class AsyncFulfillmentSet:
    """Fulfillment sets and their service zones (async)."""

    def __init__(self, client: AsyncClient) -> None:
        self._client = client

    async def delete(self, id: str, headers: HeadersInput = None) -> Dict[str, Any]:
        return await self._client.fetch(
            f"/admin/fulfillment-sets/{id}",
            method="DELETE",
            headers=headers,
        )

    async def create_service_zone(
        self,
        id: str,
        body: Mapping[str, Any],
        query: Optional[Mapping[str, Any]] = None,
        headers: HeadersInput = None,
    ) -> Dict[str, Any]:
        return await self._client.fetch(
            f"/admin/fulfillment-sets/{id}/service-zones",
            method="POST",
            headers=headers,
            body=dict(body),
            query=query,
        )

    async def retrieve_service_zone(
        self,
        fulfillment_set_id: str,
        service_zone_id: str,
        query: Optional[Mapping[str, Any]] = None,
        headers: HeadersInput = None,
    ) -> Dict[str, Any]:
        return await self._client.fetch(
            f"/admin/fulfillment-sets/{fulfillment_set_id}/service-zones/{service_zone_id}",
            method="GET",
            headers=headers,
            query=query,
        )

    async def update_service_zone(
        self,
        fulfillment_set_id: str,
        service_zone_id: str,
        body: Mapping[str, Any],
        query: Optional[Mapping[str, Any]] = None,
        headers: HeadersInput = None,
    ) -> Dict[str, Any]:
        return await self._client.fetch(
            f"/admin/fulfillment-sets/{fulfillment_set_id}/service-zones/{service_zone_id}",
            method="POST",
            headers=headers,
            body=dict(body),
            query=query,
        )

    async def delete_service_zone(
        self,
        fulfillment_set_id: str,
        service_zone_id: str,
        headers: HeadersInput = None,
    ) -> Dict[str, Any]:
        return await self._client.fetch(
            f"/admin/fulfillment-sets/{fulfillment_set_id}/service-zones/{service_zone_id}",
            method="DELETE",
            headers=headers,
        )
