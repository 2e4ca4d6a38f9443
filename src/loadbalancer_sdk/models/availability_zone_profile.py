# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

"""Availability zone profile record and options."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict

from ..core._error_codes import DECODE_INVALID_JSON
from ..core.encoding import build_query_string, build_request_body
from ..core.errors import DecodeError
from ._base import Model

REQUEST_KEY = "availability_zone_profile"
RESPONSE_KEY = "availability_zone_profile"
COLLECTION_KEY = "availability_zone_profiles"
LINKS_KEY = "availabilityzone_profile_links"


@dataclass(frozen=True)
class AvailabilityZoneProfile(Model):
    """
    Provider configuration for an availability zone (compute zone, network, ...).

    :param id: ID of the availability zone profile.
    :param name: Name of the availability zone profile.
    :param provider_name: Provider this profile is for.
    :param availability_zone_data: JSON string containing the zone metadata.
    """

    id: str = ""
    name: str = ""
    provider_name: str = ""
    availability_zone_data: str = ""

    def load_availability_zone_data(self) -> Dict[str, Any]:
        if not self.availability_zone_data:
            return {}
        try:
            return json.loads(self.availability_zone_data)
        except ValueError as exc:
            raise DecodeError(
                f"availability_zone_data of profile {self.id!r} is not valid JSON",
                subcode=DECODE_INVALID_JSON,
            ) from exc


@dataclass(frozen=True)
class AvailabilityZoneProfileListOpts:
    """Filtering and sorting of availability zone profile collections."""

    id: str = field(default="", metadata={"q": "id"})
    name: str = field(default="", metadata={"q": "name"})
    provider_name: str = field(default="", metadata={"q": "provider_name"})
    availability_zone_data: str = field(default="", metadata={"q": "availability_zone_data"})
    limit: int = field(default=0, metadata={"q": "limit"})
    marker: str = field(default="", metadata={"q": "marker"})
    sort_key: str = field(default="", metadata={"q": "sort_key"})
    sort_dir: str = field(default="", metadata={"q": "sort_dir"})

    def to_query_string(self) -> str:
        return build_query_string(self)


@dataclass(frozen=True)
class AvailabilityZoneProfileCreateOpts:
    """Request body for creating an availability zone profile. Every field is sent."""

    name: str = field(default="", metadata={"json": "name"})
    provider_name: str = field(default="", metadata={"json": "provider_name"})
    availability_zone_data: str = field(default="", metadata={"json": "availability_zone_data"})

    def to_request_body(self) -> Dict[str, Any]:
        return build_request_body(self, REQUEST_KEY)


@dataclass(frozen=True)
class AvailabilityZoneProfileUpdateOpts:
    """Request body for updating an availability zone profile. Every field is sent, so pass the full desired state."""

    name: str = field(default="", metadata={"json": "name"})
    provider_name: str = field(default="", metadata={"json": "provider_name"})
    availability_zone_data: str = field(default="", metadata={"json": "availability_zone_data"})

    def to_request_body(self) -> Dict[str, Any]:
        return build_request_body(self, REQUEST_KEY)


__all__ = [
    "AvailabilityZoneProfile",
    "AvailabilityZoneProfileListOpts",
    "AvailabilityZoneProfileCreateOpts",
    "AvailabilityZoneProfileUpdateOpts",
]
