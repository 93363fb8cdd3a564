"""Live fixtures: real Pinata API, gated on credentials in the environment."""

from __future__ import annotations

import os

import pytest

from pinata_sdk.client import PinataClient


@pytest.fixture
async def live_api():
    """PinataClient against api.pinata.cloud. Skips without credentials."""
    key = os.environ.get("PINATA_API_KEY")
    secret = os.environ.get("PINATA_SECRET_API_KEY")
    if not key or not secret:
        pytest.skip("PINATA_API_KEY / PINATA_SECRET_API_KEY not set")
    client = PinataClient(key, secret)
    yield client
    await client.aclose()
