"""Response models decoded from Pinata JSON bodies.

Each ``from_dict`` raises ``KeyError``, ``TypeError`` or ``ValueError`` when
the body does not have the expected shape; the client turns those into
:class:`~pinata_sdk.errors.DecodeError`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pinata_sdk.models.filters import JobStatus
from pinata_sdk.models.requests import PinPolicy


def _str(data: dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key}: expected string, got {type(value).__name__}")
    return value


def _opt_str(data: dict[str, Any], key: str) -> str | None:
    if data.get(key) is None:
        return None
    return _str(data, key)


def _int(data: dict[str, Any], key: str) -> int:
    value = data[key]
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise TypeError(f"{key}: expected integer, got {type(value).__name__}")
    return int(value)


def _mapping(data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise TypeError(f"expected JSON object, got {type(data).__name__}")
    return data


def _opt_bool(data: dict[str, Any], key: str) -> bool | None:
    value = data.get(key)
    if value is not None and not isinstance(value, bool):
        raise TypeError(f"{key}: expected boolean, got {type(value).__name__}")
    return value


def _opt_mapping(data: dict[str, Any], key: str) -> dict[str, Any] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, dict):
        raise TypeError(f"{key}: expected JSON object, got {type(value).__name__}")
    return value


def _opt_str_list(data: dict[str, Any], key: str) -> list[str] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise TypeError(f"{key}: expected list of strings")
    return value


@dataclass
class PinnedObject:
    """Content pinned directly through pinJSONToIPFS / pinFileToIPFS."""

    ipfs_hash: str
    pin_size: int  # bytes
    timestamp: str  # ISO 8601
    is_duplicate: bool | None = None

    @classmethod
    def from_dict(cls, data: Any) -> PinnedObject:
        data = _mapping(data)
        return cls(
            ipfs_hash=_str(data, "IpfsHash"),
            pin_size=_int(data, "PinSize"),
            timestamp=_str(data, "Timestamp"),
            is_duplicate=_opt_bool(data, "isDuplicate"),
        )


@dataclass
class PinByHashResult:
    """Pin job created by pinByHash."""

    id: str  # Pinata's id for the pin job
    ipfs_hash: str
    status: JobStatus
    name: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> PinByHashResult:
        data = _mapping(data)
        return cls(
            id=_str(data, "id"),
            ipfs_hash=_str(data, "ipfsHash"),
            status=JobStatus(data["status"]),
            name=_opt_str(data, "name"),
        )


@dataclass
class PinJob:
    """A queued pin-by-hash job."""

    id: str
    ipfs_pin_hash: str
    date_queued: str  # ISO 8601
    status: JobStatus
    name: str | None = None
    keyvalues: dict[str, Any] | None = None
    host_nodes: list[str] | None = None
    pin_policy: PinPolicy | None = None

    @classmethod
    def from_dict(cls, data: Any) -> PinJob:
        data = _mapping(data)
        policy = data.get("pin_policy")
        return cls(
            id=_str(data, "id"),
            ipfs_pin_hash=_str(data, "ipfs_pin_hash"),
            date_queued=_str(data, "date_queued"),
            status=JobStatus(data["status"]),
            name=_opt_str(data, "name"),
            keyvalues=_opt_mapping(data, "keyvalues"),
            host_nodes=_opt_str_list(data, "host_nodes"),
            pin_policy=PinPolicy.from_dict(policy) if policy is not None else None,
        )


@dataclass
class PinJobs:
    count: int  # total jobs matching the filter, across all pages
    rows: list[PinJob] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> PinJobs:
        data = _mapping(data)
        return cls(
            count=_int(data, "count"),
            rows=[PinJob.from_dict(r) for r in data["rows"]],
        )


@dataclass
class TotalPinnedData:
    """Account-wide pin usage."""

    pin_count: int
    pin_size_total: str  # bytes of unique content
    pin_size_with_replications_total: str  # bytes including replicas

    @classmethod
    def from_dict(cls, data: Any) -> TotalPinnedData:
        data = _mapping(data)
        return cls(
            pin_count=_int(data, "pin_count"),
            pin_size_total=str(_int(data, "pin_size_total")),
            pin_size_with_replications_total=str(
                _int(data, "pin_size_with_replications_total")
            ),
        )


@dataclass
class RegionInfo:
    region_id: str
    current_replication_count: int
    desired_replication_count: int

    @classmethod
    def from_dict(cls, data: Any) -> RegionInfo:
        data = _mapping(data)
        return cls(
            region_id=_str(data, "regionId"),
            current_replication_count=_int(data, "currentReplicationCount"),
            desired_replication_count=_int(data, "desiredReplicationCount"),
        )


@dataclass
class PinListMetadata:
    name: str | None = None
    keyvalues: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> PinListMetadata:
        data = _mapping(data)
        return cls(name=_opt_str(data, "name"), keyvalues=_opt_mapping(data, "keyvalues"))


@dataclass
class PinListItem:
    """One pin record from the pin list."""

    id: str
    ipfs_pin_hash: str
    size: int
    user_id: str
    date_pinned: str
    date_unpinned: str | None = None
    metadata: PinListMetadata = field(default_factory=PinListMetadata)
    regions: list[RegionInfo] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> PinListItem:
        data = _mapping(data)
        metadata = data.get("metadata")
        return cls(
            id=_str(data, "id"),
            ipfs_pin_hash=_str(data, "ipfs_pin_hash"),
            size=_int(data, "size"),
            user_id=_str(data, "user_id"),
            date_pinned=_str(data, "date_pinned"),
            date_unpinned=_opt_str(data, "date_unpinned"),
            metadata=PinListMetadata.from_dict(metadata) if metadata else PinListMetadata(),
            regions=[RegionInfo.from_dict(r) for r in data.get("regions") or []],
        )


@dataclass
class PinList:
    count: int
    rows: list[PinListItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> PinList:
        data = _mapping(data)
        return cls(
            count=_int(data, "count"),
            rows=[PinListItem.from_dict(r) for r in data["rows"]],
        )
