"""pinata_sdk - async client for the Pinata IPFS pinning API."""

from pinata_sdk.client import PinataClient
from pinata_sdk.config import load_config
from pinata_sdk.errors import (
    ApiError,
    CredentialError,
    DecodeError,
    InvalidApiKeyError,
    InvalidSecretApiKeyError,
    PinataError,
)
from pinata_sdk.models import (
    API_URL,
    DELETE,
    ChangePinMetadata,
    ClientConfig,
    HashPinPolicy,
    JobStatus,
    KeyValueOp,
    KeyValueQuery,
    PinByFile,
    PinByHash,
    PinByHashResult,
    PinByJson,
    PinJob,
    PinJobs,
    PinJobsFilter,
    PinList,
    PinListFilter,
    PinListItem,
    PinMetadata,
    PinnedObject,
    PinOptions,
    PinPolicy,
    PinStatus,
    Region,
    RegionPolicy,
    SortDirection,
    TotalPinnedData,
)
from pinata_sdk.upload import FilePart, assemble_parts, collect_file_parts

__version__ = "1.1.0"

__all__ = [
    "PinataClient", "load_config",
    "ApiError", "CredentialError", "DecodeError", "InvalidApiKeyError",
    "InvalidSecretApiKeyError", "PinataError",
    "API_URL", "ClientConfig",
    "DELETE", "ChangePinMetadata", "PinMetadata",
    "HashPinPolicy", "PinByFile", "PinByHash", "PinByJson", "PinOptions",
    "PinPolicy", "Region", "RegionPolicy",
    "JobStatus", "KeyValueOp", "KeyValueQuery", "PinJobsFilter", "PinListFilter",
    "PinStatus", "SortDirection",
    "PinByHashResult", "PinJob", "PinJobs", "PinList", "PinListItem",
    "PinnedObject", "TotalPinnedData",
    "FilePart", "assemble_parts", "collect_file_parts",
]
