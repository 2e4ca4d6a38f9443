# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

"""
Availability zone record and options.

Availability zones have no ID; they are addressed by name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from ..core.encoding import build_query_string, build_request_body
from ._base import Model

REQUEST_KEY = "availability_zone"
RESPONSE_KEY = "availability_zone"
COLLECTION_KEY = "availability_zones"
LINKS_KEY = "availability_zones_links"


@dataclass(frozen=True)
class AvailabilityZone(Model):
    """
    :param name: Name of the availability zone (its identifier).
    :param description: Human-readable description.
    :param availability_zone_profile_id: ID of the backing availability zone profile.
    :param enabled: Whether the zone is available for use.
    """

    name: str = ""
    description: str = ""
    availability_zone_profile_id: str = ""
    enabled: bool = False


@dataclass(frozen=True)
class AvailabilityZoneListOpts:
    """Filtering and sorting of availability zone collections."""

    name: str = field(default="", metadata={"q": "name"})
    description: str = field(default="", metadata={"q": "description"})
    availability_zone_profile_id: str = field(default="", metadata={"q": "availability_zone_profile_id"})
    enabled: bool = field(default=False, metadata={"q": "enabled"})
    limit: int = field(default=0, metadata={"q": "limit"})
    marker: str = field(default="", metadata={"q": "marker"})
    sort_key: str = field(default="", metadata={"q": "sort_key"})
    sort_dir: str = field(default="", metadata={"q": "sort_dir"})

    def to_query_string(self) -> str:
        return build_query_string(self)


@dataclass(frozen=True)
class AvailabilityZoneCreateOpts:
    """Request body for creating an availability zone. Every field is sent."""

    description: str = field(default="", metadata={"json": "description"})
    name: str = field(default="", metadata={"json": "name"})
    availability_zone_profile_id: str = field(default="", metadata={"json": "availability_zone_profile_id"})
    enabled: bool = field(default=False, metadata={"json": "enabled"})

    def to_request_body(self) -> Dict[str, Any]:
        return build_request_body(self, REQUEST_KEY)


@dataclass(frozen=True)
class AvailabilityZoneUpdateOpts:
    """Request body for updating an availability zone. Every field is sent, so pass the full desired state."""

    description: str = field(default="", metadata={"json": "description"})
    name: str = field(default="", metadata={"json": "name"})
    availability_zone_profile_id: str = field(default="", metadata={"json": "availability_zone_profile_id"})
    enabled: bool = field(default=False, metadata={"json": "enabled"})

    def to_request_body(self) -> Dict[str, Any]:
        return build_request_body(self, REQUEST_KEY)


__all__ = [
    "AvailabilityZone",
    "AvailabilityZoneListOpts",
    "AvailabilityZoneCreateOpts",
    "AvailabilityZoneUpdateOpts",
]
