"""Protocol interfaces for pinata_sdk components."""

from pinata_sdk.interfaces.api import PinningAPI

__all__ = ["PinningAPI"]
