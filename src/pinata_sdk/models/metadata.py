"""Pin metadata models: display name plus custom key/value tags."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Union


class _DeleteMarker:
    """Sentinel telling Pinata to drop a key from existing metadata."""

    _instance: _DeleteMarker | None = None

    def __new__(cls) -> _DeleteMarker:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "DELETE"

    def __reduce__(self) -> str:
        return "DELETE"


DELETE = _DeleteMarker()

MetadataValue = Union[str, int, float, _DeleteMarker]


def _encode_value(key: str, value: Any, allow_delete: bool) -> Any:
    if value is DELETE:
        if not allow_delete:
            raise ValueError(
                f"metadata key {key!r}: DELETE is only valid when changing existing metadata"
            )
        return None  # Pinata removes keys set to null
    # bool is an int subclass but Pinata has no boolean keyvalue type
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise TypeError(
            f"metadata key {key!r}: unsupported value type {type(value).__name__}"
        )
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"metadata key {key!r}: {value} is not a finite number")
    return value


@dataclass(frozen=True)
class PinMetadata:
    """Optional name and key/value tags attached to pinned content."""

    name: str | None = None
    keyvalues: dict[str, MetadataValue] = field(default_factory=dict)

    def to_dict(self, allow_delete: bool = False) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.name is not None:
            data["name"] = self.name
        data["keyvalues"] = {
            k: _encode_value(k, v, allow_delete) for k, v in self.keyvalues.items()
        }
        return data


@dataclass(frozen=True)
class ChangePinMetadata:
    """Update request for the name and key/values of already pinned content.

    Leave ``metadata.name`` as ``None`` to keep the current name. Keys mapped
    to :data:`DELETE` are removed; keys left out are untouched.
    """

    ipfs_pin_hash: str
    metadata: PinMetadata

    def to_dict(self) -> dict[str, Any]:
        return {"ipfsPinHash": self.ipfs_pin_hash, **self.metadata.to_dict(allow_delete=True)}
