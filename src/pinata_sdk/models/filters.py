"""Query filters for the pin job queue and pin list endpoints."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any


class SortDirection(str, Enum):
    """Sort direction by queue/pin date."""

    ASC = "ASC"
    DESC = "DESC"


class JobStatus(str, Enum):
    """Status of a pin-by-hash job."""

    PRECHECKING = "prechecking"  # preliminary validations running
    SEARCHING = "searching"  # looking for the content on the network
    RETRIEVING = "retrieving"  # content found, being fetched
    EXPIRED = "expired"  # not found after a day of searching
    OVER_FREE_LIMIT = "over_free_limit"
    OVER_MAX_SIZE = "over_max_size"
    INVALID_OBJECT = "invalid_object"  # not readable by IPFS nodes
    BAD_HOST_NODE = "bad_host_node"  # host node invalid or unreachable


class PinStatus(str, Enum):
    """Pin list status filter."""

    ALL = "all"
    PINNED = "pinned"
    UNPINNED = "unpinned"


class KeyValueOp(str, Enum):
    """Comparison operators for metadata key/value queries."""

    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    NE = "ne"
    EQ = "eq"
    BETWEEN = "between"
    NOT_BETWEEN = "notBetween"
    LIKE = "like"
    NOT_LIKE = "notLike"
    ILIKE = "iLike"
    NOT_ILIKE = "notILike"
    REGEXP = "regexp"
    IREGEXP = "iRegexp"


@dataclass(frozen=True)
class KeyValueQuery:
    value: Any
    op: KeyValueOp = KeyValueOp.EQ
    second_value: Any = None  # upper bound for between / notBetween

    def to_dict(self) -> dict[str, Any]:
        data = {"value": self.value, "op": KeyValueOp(self.op).value}
        if self.second_value is not None:
            data["secondValue"] = self.second_value
        return data


def _param(value: Any) -> str | int:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    return value


@dataclass(frozen=True)
class PinJobsFilter:
    """Filters for ``GET /pinning/pinJobs``. Every field is optional.

    Example::

        filters = (
            PinJobsFilter()
            .set_sort(SortDirection.ASC)
            .set_status(JobStatus.PRECHECKING)
        )
    """

    sort: SortDirection | None = None
    status: JobStatus | None = None
    ipfs_pin_hash: str | None = None
    limit: int | None = None
    offset: int | None = None

    def set_sort(self, direction: SortDirection) -> PinJobsFilter:
        return replace(self, sort=direction)

    def set_status(self, status: JobStatus) -> PinJobsFilter:
        return replace(self, status=status)

    def set_ipfs_pin_hash(self, ipfs_pin_hash: str) -> PinJobsFilter:
        return replace(self, ipfs_pin_hash=ipfs_pin_hash)

    def set_limit(self, limit: int) -> PinJobsFilter:
        """Results per page."""
        return replace(self, limit=limit)

    def set_offset(self, offset: int) -> PinJobsFilter:
        """Record offset, used to fetch further pages."""
        return replace(self, offset=offset)

    def to_params(self) -> dict[str, str | int]:
        # pinJobs takes snake_case query names
        fields = {
            "sort": self.sort,
            "status": self.status,
            "ipfs_pin_hash": self.ipfs_pin_hash,
            "limit": self.limit,
            "offset": self.offset,
        }
        return {k: _param(v) for k, v in fields.items() if v is not None}


@dataclass(frozen=True)
class PinListFilter:
    """Filters for ``GET /data/pinList``. Every field is optional."""

    hash_contains: str | None = None
    pin_start: datetime | str | None = None
    pin_end: datetime | str | None = None
    unpin_start: datetime | str | None = None
    unpin_end: datetime | str | None = None
    pin_size_min: int | None = None
    pin_size_max: int | None = None
    status: PinStatus | None = None
    page_limit: int | None = None
    page_offset: int | None = None
    metadata_name: str | None = None
    metadata_keyvalues: dict[str, KeyValueQuery] = field(default_factory=dict)

    def set_hash_contains(self, hash_contains: str) -> PinListFilter:
        return replace(self, hash_contains=hash_contains)

    def set_pin_start(self, when: datetime | str) -> PinListFilter:
        return replace(self, pin_start=when)

    def set_pin_end(self, when: datetime | str) -> PinListFilter:
        return replace(self, pin_end=when)

    def set_unpin_start(self, when: datetime | str) -> PinListFilter:
        return replace(self, unpin_start=when)

    def set_unpin_end(self, when: datetime | str) -> PinListFilter:
        return replace(self, unpin_end=when)

    def set_pin_size_min(self, size: int) -> PinListFilter:
        return replace(self, pin_size_min=size)

    def set_pin_size_max(self, size: int) -> PinListFilter:
        return replace(self, pin_size_max=size)

    def set_status(self, status: PinStatus) -> PinListFilter:
        return replace(self, status=status)

    def set_page_limit(self, limit: int) -> PinListFilter:
        return replace(self, page_limit=limit)

    def set_page_offset(self, offset: int) -> PinListFilter:
        return replace(self, page_offset=offset)

    def set_metadata_name(self, name: str) -> PinListFilter:
        return replace(self, metadata_name=name)

    def add_keyvalue(self, key: str, query: KeyValueQuery) -> PinListFilter:
        return replace(self, metadata_keyvalues={**self.metadata_keyvalues, key: query})

    def to_params(self) -> dict[str, str | int]:
        fields = {
            "hashContains": self.hash_contains,
            "pinStart": self.pin_start,
            "pinEnd": self.pin_end,
            "unpinStart": self.unpin_start,
            "unpinEnd": self.unpin_end,
            "pinSizeMin": self.pin_size_min,
            "pinSizeMax": self.pin_size_max,
            "status": self.status,
            "pageLimit": self.page_limit,
            "pageOffset": self.page_offset,
            "metadata[name]": self.metadata_name,
        }
        params = {k: _param(v) for k, v in fields.items() if v is not None}
        if self.metadata_keyvalues:
            params["metadata[keyvalues]"] = json.dumps(
                {k: q.to_dict() for k, q in self.metadata_keyvalues.items()}
            )
        return params
