"""Request models for pinning operations and pin policies."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Iterable

from pinata_sdk.models.metadata import MetadataValue, PinMetadata


# ---------------------------------------------------------------------------
# Pin policy
# ---------------------------------------------------------------------------


class Region(str, Enum):
    """Regions Pinata currently replicates to."""

    FRA1 = "FRA1"  # Frankfurt, Germany (max 2 replications)
    NYC1 = "NYC1"  # New York City, USA (max 2 replications)


@dataclass(frozen=True)
class RegionPolicy:
    """Desired replication count for one region."""

    id: Region
    desired_replication_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": Region(self.id).value,
            "desiredReplicationCount": self.desired_replication_count,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RegionPolicy:
        return cls(
            id=Region(data["id"]),
            desired_replication_count=int(data["desiredReplicationCount"]),
        )


@dataclass(frozen=True)
class PinPolicy:
    regions: list[RegionPolicy] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"regions": [r.to_dict() for r in self.regions]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PinPolicy:
        return cls(regions=[RegionPolicy.from_dict(r) for r in data["regions"]])


@dataclass(frozen=True)
class HashPinPolicy:
    """New pin policy for a single pinned hash.

    Only affects the content for this hash, not the account level policy.
    """

    ipfs_pin_hash: str
    regions: list[RegionPolicy]

    def to_dict(self) -> dict[str, Any]:
        return {
            "ipfsPinHash": self.ipfs_pin_hash,
            "newPinPolicy": PinPolicy(list(self.regions)).to_dict(),
        }


@dataclass(frozen=True)
class PinOptions:
    """Extra options accepted by the pin endpoints."""

    host_nodes: list[str] | None = None  # multiaddrs already storing the content
    custom_pin_policy: PinPolicy | None = None
    cid_version: int | None = None  # 0 or 1
    wrap_with_directory: bool | None = None  # file pins only

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.host_nodes is not None:
            data["hostNodes"] = list(self.host_nodes)
        if self.custom_pin_policy is not None:
            data["customPinPolicy"] = self.custom_pin_policy.to_dict()
        if self.cid_version is not None:
            data["cidVersion"] = self.cid_version
        if self.wrap_with_directory is not None:
            data["wrapWithDirectory"] = self.wrap_with_directory
        return data


# ---------------------------------------------------------------------------
# Pin requests
# ---------------------------------------------------------------------------


class _PinRequest:
    """Chained setters shared by the pin request types.

    Each setter returns a new request; the receiver is left unchanged.
    """

    pinata_metadata: PinMetadata | None
    pinata_options: PinOptions | None

    def set_metadata(self, keyvalues: dict[str, MetadataValue]):
        return replace(self, pinata_metadata=PinMetadata(keyvalues=dict(keyvalues)))

    def set_metadata_with_name(self, name: str, keyvalues: dict[str, MetadataValue] | None = None):
        return replace(
            self, pinata_metadata=PinMetadata(name=name, keyvalues=dict(keyvalues or {}))
        )

    def set_options(self, options: PinOptions):
        return replace(self, pinata_options=options)

    def _extras(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.pinata_metadata is not None:
            data["pinataMetadata"] = self.pinata_metadata.to_dict()
        if self.pinata_options is not None:
            data["pinataOptions"] = self.pinata_options.to_dict()
        return data


@dataclass(frozen=True)
class PinByHash(_PinRequest):
    """Pin an existing IPFS hash in the background.

    The content must already be available from another node on the network.
    """

    hash_to_pin: str
    pinata_metadata: PinMetadata | None = None
    pinata_options: PinOptions | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"hashToPin": self.hash_to_pin, **self._extras()}


@dataclass(frozen=True)
class PinByJson(_PinRequest):
    """Pin any JSON serializable object."""

    pinata_content: Any
    pinata_metadata: PinMetadata | None = None
    pinata_options: PinOptions | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"pinataContent": self.pinata_content, **self._extras()}


@dataclass(frozen=True)
class PinByFile(_PinRequest):
    """Pin one or more local files or directories.

    A directory is uploaded with its whole tree and Pinata returns the hash
    of the directory itself.
    """

    paths: tuple[str, ...]
    pinata_metadata: PinMetadata | None = None
    pinata_options: PinOptions | None = None

    def __init__(
        self,
        paths: str | os.PathLike | Iterable[str | os.PathLike],
        pinata_metadata: PinMetadata | None = None,
        pinata_options: PinOptions | None = None,
    ) -> None:
        if isinstance(paths, (str, os.PathLike)):
            paths = (paths,)
        object.__setattr__(self, "paths", tuple(os.fspath(p) for p in paths))
        object.__setattr__(self, "pinata_metadata", pinata_metadata)
        object.__setattr__(self, "pinata_options", pinata_options)
        if not self.paths:
            raise ValueError("PinByFile needs at least one path")

    def form_fields(self) -> dict[str, str]:
        """Text fields sent next to the file parts, JSON-encoded."""
        return {k: json.dumps(v, allow_nan=False) for k, v in self._extras().items()}
