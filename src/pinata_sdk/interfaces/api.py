"""PinningAPI protocol - the operations exposed by the Pinata client."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pinata_sdk.models.filters import PinJobsFilter, PinListFilter
from pinata_sdk.models.metadata import ChangePinMetadata
from pinata_sdk.models.requests import HashPinPolicy, PinByFile, PinByHash, PinByJson
from pinata_sdk.models.results import (
    PinByHashResult,
    PinJobs,
    PinList,
    PinnedObject,
    TotalPinnedData,
)


@runtime_checkable
class PinningAPI(Protocol):
    """One method per Pinata endpoint. Every call is a single round trip."""

    async def test_authentication(self) -> None:
        """Raise if the configured credentials are rejected."""
        ...

    async def set_hash_pin_policy(self, policy: HashPinPolicy) -> None:
        """Change the replication policy of one pinned hash."""
        ...

    async def pin_by_hash(self, request: PinByHash) -> PinByHashResult:
        """Queue an existing IPFS hash for background pinning."""
        ...

    async def get_pin_jobs(self, filters: PinJobsFilter | None = None) -> PinJobs:
        """List queued pin-by-hash jobs."""
        ...

    async def pin_json(self, request: PinByJson) -> PinnedObject:
        """Pin a JSON serializable object."""
        ...

    async def pin_file(self, request: PinByFile) -> PinnedObject:
        """Upload and pin local files or directories."""
        ...

    async def unpin(self, ipfs_hash: str) -> None:
        """Remove a pin."""
        ...

    async def change_hash_metadata(self, change: ChangePinMetadata) -> None:
        """Update name and key/values of pinned content."""
        ...

    async def get_total_user_pinned_data(self) -> TotalPinnedData:
        """Account-wide pin count and sizes."""
        ...

    async def get_pin_list(self, filters: PinListFilter | None = None) -> PinList:
        """List pinned content."""
        ...
