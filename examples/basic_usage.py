"""
Medusa Python SDK - Basic Usage Example

This example demonstrates bearer and session authentication with the sync
and async SDKs.
"""

import asyncio
from medusa_sdk import (
    AsyncMedusa,
    AuthConfig,
    AuthenticationError,
    LoginRedirect,
    LoginToken,
    Medusa,
    MedusaConfig,
    NetworkError,
)


def sync_example():
    """Synchronous SDK example (bearer token)."""
    print("=== Sync SDK Example ===\n")

    sdk = Medusa(MedusaConfig(
        base_url="http://localhost:9000",
        debug=True,
    ))

    try:
        result = sdk.auth.login("user", "emailpass", {
            "email": "admin@medusa-test.com",
            "password": "supersecret",
        })
        if isinstance(result, LoginRedirect):
            print(f"Continue authentication at: {result.location}")
        elif isinstance(result, LoginToken):
            print("Logged in")
            zone = sdk.admin.fulfillment_set.retrieve_service_zone(
                "fset_123",
                "serzo_123",
                {"fields": "id,*geo_zones"},
            )
            print(f"Service zone: {zone['service_zone']['id']}")
            sdk.auth.logout()
    except AuthenticationError as e:
        print(f"Auth failed ({e.status_code}): {e.message}")
    except NetworkError as e:
        print(f"Error (expected without a running server): {e.message}")
    finally:
        sdk.close()


async def async_example():
    """Asynchronous SDK example (session cookie)."""
    print("\n=== Async SDK Example ===\n")

    config = MedusaConfig(
        base_url="http://localhost:9000",
        publishable_key="pk_123",
        auth=AuthConfig(type="session"),
    )
    async with AsyncMedusa(config) as sdk:
        try:
            # Reset flow: the token arrives by email
            await sdk.auth.reset_password("customer", "emailpass", {"identifier": "customer@gmail.com"})
            # await sdk.auth.update_provider("customer", "emailpass", {"password": "new"}, token)
            token = await sdk.auth.callback("customer", "google", {"code": "123"})
            print(f"Session established with token {token[:8]}...")
        except AuthenticationError as e:
            print(f"Auth failed ({e.status_code}): {e.message}")
        except NetworkError as e:
            print(f"Error (expected without a running server): {e.message}")


if __name__ == "__main__":
    sync_example()
    asyncio.run(async_example())
