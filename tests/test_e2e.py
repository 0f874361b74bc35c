"""End-to-end tests against the live Animality API.

Usage
-----
Set a valid token then run with the `e2e` marker:

    export ANIMALITY_E2E_TOKEN="your token"
    pytest tests/test_e2e.py -v -m e2e

If ANIMALITY_E2E_TOKEN is not set the entire module is skipped automatically.
"""

from __future__ import annotations

import os

import pytest

from animality import Animal, AnimalityClient, HTTPStatusError

TOKEN = os.environ.get("ANIMALITY_E2E_TOKEN", "").strip()

pytestmark = pytest.mark.e2e

if not TOKEN:
    pytest.skip("ANIMALITY_E2E_TOKEN not set — skipping e2e tests", allow_module_level=True)


@pytest.fixture(scope="module")
def client():
    with AnimalityClient(TOKEN, timeout=30.0) as c:
        yield c


def test_image_returns_url(client):
    link = client.image(Animal.DOG)
    assert link.startswith("http")


def test_fact_returns_text(client):
    assert client.fact(Animal.CAT).strip()


@pytest.mark.asyncio
async def test_async_image(client):
    link = await client.image_async("Fox")
    assert link.startswith("http")


def test_bad_token_is_rejected():
    with pytest.raises(HTTPStatusError) as exc_info:
        AnimalityClient("definitely-not-a-token", timeout=30.0).fact(Animal.DOG)
    assert exc_info.value.status_code >= 400
