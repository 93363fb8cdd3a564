"""Data models for the pinata_sdk client."""

from pinata_sdk.models.config import API_URL, ClientConfig
from pinata_sdk.models.metadata import DELETE, ChangePinMetadata, MetadataValue, PinMetadata
from pinata_sdk.models.requests import (
    HashPinPolicy,
    PinByFile,
    PinByHash,
    PinByJson,
    PinOptions,
    PinPolicy,
    Region,
    RegionPolicy,
)
from pinata_sdk.models.filters import (
    JobStatus,
    KeyValueOp,
    KeyValueQuery,
    PinJobsFilter,
    PinListFilter,
    PinStatus,
    SortDirection,
)
from pinata_sdk.models.results import (
    PinByHashResult,
    PinJob,
    PinJobs,
    PinList,
    PinListItem,
    PinListMetadata,
    PinnedObject,
    RegionInfo,
    TotalPinnedData,
)

__all__ = [
    "API_URL", "ClientConfig",
    "DELETE", "ChangePinMetadata", "MetadataValue", "PinMetadata",
    "HashPinPolicy", "PinByFile", "PinByHash", "PinByJson", "PinOptions",
    "PinPolicy", "Region", "RegionPolicy",
    "JobStatus", "KeyValueOp", "KeyValueQuery", "PinJobsFilter", "PinListFilter",
    "PinStatus", "SortDirection",
    "PinByHashResult", "PinJob", "PinJobs", "PinList", "PinListItem",
    "PinListMetadata", "PinnedObject", "RegionInfo", "TotalPinnedData",
]
