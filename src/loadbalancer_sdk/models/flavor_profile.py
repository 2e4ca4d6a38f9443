# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

"""
Flavor profile record and options.

A flavor profile holds provider-specific settings (compute flavor, topology,
...) as an opaque JSON string; flavors point at a profile.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict

from ..core._error_codes import DECODE_INVALID_JSON
from ..core.encoding import build_query_string, build_request_body
from ..core.errors import DecodeError
from ._base import Model

REQUEST_KEY = "flavorprofile"
RESPONSE_KEY = "flavor_profile"
COLLECTION_KEY = "flavorprofiles"
LINKS_KEY = "flavor_profile_links"


@dataclass(frozen=True)
class FlavorProfile(Model):
    """
    :param id: ID of the flavor profile.
    :param name: Name of the flavor profile.
    :param provider_name: Provider this flavor profile is for.
    :param flavor_data: JSON string containing the flavor metadata.
    """

    id: str = ""
    name: str = ""
    provider_name: str = ""
    flavor_data: str = ""

    def load_flavor_data(self) -> Dict[str, Any]:
        """Parse :attr:`flavor_data`; an empty string yields ``{}``."""
        if not self.flavor_data:
            return {}
        try:
            return json.loads(self.flavor_data)
        except ValueError as exc:
            raise DecodeError(
                f"flavor_data of flavor profile {self.id!r} is not valid JSON",
                subcode=DECODE_INVALID_JSON,
            ) from exc


@dataclass(frozen=True)
class FlavorProfileListOpts:
    """Filtering and sorting of flavor profile collections."""

    id: str = field(default="", metadata={"q": "id"})
    name: str = field(default="", metadata={"q": "name"})
    provider_name: str = field(default="", metadata={"q": "provider_name"})
    flavor_data: str = field(default="", metadata={"q": "flavor_data"})
    limit: int = field(default=0, metadata={"q": "limit"})
    marker: str = field(default="", metadata={"q": "marker"})
    sort_key: str = field(default="", metadata={"q": "sort_key"})
    sort_dir: str = field(default="", metadata={"q": "sort_dir"})

    def to_query_string(self) -> str:
        return build_query_string(self)


@dataclass(frozen=True)
class FlavorProfileCreateOpts:
    """Request body for creating a flavor profile. Every field is sent."""

    name: str = field(default="", metadata={"json": "name"})
    provider_name: str = field(default="", metadata={"json": "provider_name"})
    flavor_data: str = field(default="", metadata={"json": "flavor_data"})

    def to_request_body(self) -> Dict[str, Any]:
        return build_request_body(self, REQUEST_KEY)


@dataclass(frozen=True)
class FlavorProfileUpdateOpts:
    """Request body for updating a flavor profile. Every field is sent, so pass the full desired state."""

    name: str = field(default="", metadata={"json": "name"})
    provider_name: str = field(default="", metadata={"json": "provider_name"})
    flavor_data: str = field(default="", metadata={"json": "flavor_data"})

    def to_request_body(self) -> Dict[str, Any]:
        return build_request_body(self, REQUEST_KEY)


__all__ = [
    "FlavorProfile",
    "FlavorProfileListOpts",
    "FlavorProfileCreateOpts",
    "FlavorProfileUpdateOpts",
]
