"""Shared fixtures for pinata_sdk tests."""

from __future__ import annotations

import pytest

from pinata_sdk.client import PinataClient
from pinata_sdk.models.config import ClientConfig

from tests.mocks import VALID_KEY, VALID_SECRET, FakePinataService

TEST_BASE_URL = "https://api.pinata.test"


def make_test_config(**overrides) -> ClientConfig:
    """Build a ClientConfig suitable for testing."""
    defaults = dict(
        api_key=VALID_KEY,
        secret_api_key=VALID_SECRET,
        base_url=TEST_BASE_URL,
        timeout=5.0,
    )
    defaults.update(overrides)
    return ClientConfig(**defaults)


@pytest.fixture
def service():
    """Fresh fake Pinata service."""
    return FakePinataService()


@pytest.fixture
async def api(service):
    """PinataClient wired to the fake service."""
    client = PinataClient.from_config(make_test_config(), transport=service.transport)
    yield client
    await client.aclose()


@pytest.fixture
def sample_tree(tmp_path):
    """Directory ``d`` holding ``a.txt`` and ``sub/b.txt``."""
    root = tmp_path / "d"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_bytes(b"alpha")
    (root / "sub" / "b.txt").write_bytes(b"bravo")
    return root
