"""
Property tests for the credential store behaviour of the auth service
"""

import httpx
import respx
from hypothesis import given, settings, strategies as st

from medusa_sdk import LoginToken, Medusa, MedusaConfig


BASE_URL = "https://api.medusa.test"

tokens = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789._-",
    min_size=1,
    max_size=64,
)
actors = st.sampled_from(["user", "customer", "seller"])
providers = st.sampled_from(["emailpass", "google", "github"])


@settings(max_examples=50, deadline=None)
@given(token=tokens, actor=actors, provider=providers)
def test_login_stores_returned_token(token, actor, provider):
    """A successful bearer login leaves exactly the returned token in the store."""
    sdk = Medusa(MedusaConfig(base_url=BASE_URL))
    with respx.mock(base_url=BASE_URL) as router:
        router.post(f"/{actor}/auth/{provider}").mock(
            return_value=httpx.Response(200, json={"token": token})
        )

        result = sdk.auth.login(actor, provider, {"email": "a@b.com", "password": "x"})

    assert result == LoginToken(token=token)
    assert sdk.client.get_token() == token


@settings(max_examples=50, deadline=None)
@given(prior=st.one_of(st.none(), tokens), token=tokens, actor=actors)
def test_register_never_mutates_store(prior, token, actor):
    sdk = Medusa(MedusaConfig(base_url=BASE_URL))
    if prior is not None:
        sdk.client.set_token(prior)

    with respx.mock(base_url=BASE_URL) as router:
        router.post(f"/{actor}/auth/emailpass/register").mock(
            return_value=httpx.Response(200, json={"token": token})
        )

        sdk.auth.register(actor, "emailpass", {"email": "a@b.com", "password": "x"})

    assert sdk.client.get_token() == prior


@settings(max_examples=50, deadline=None)
@given(prior=st.one_of(st.none(), tokens))
def test_logout_always_empties_store(prior):
    sdk = Medusa(MedusaConfig(base_url=BASE_URL))
    if prior is not None:
        sdk.client.set_token(prior)

    with respx.mock(base_url=BASE_URL, assert_all_called=False) as router:
        router.delete("/auth/session").mock(return_value=httpx.Response(200, json={"success": True}))

        sdk.auth.logout()

    assert sdk.client.get_token() is None
