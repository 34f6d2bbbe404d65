"""Data Transfer Objects: plain containers that cross layer boundaries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LocationLineDTO:
    """Output: one stocked location as shown in the location report."""

    location_code: str
    item_code: str
    item_name: str
    quantity: int
