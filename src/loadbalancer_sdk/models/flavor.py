# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

"""Flavor record and options."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from ..core.encoding import build_query_string, build_request_body
from ._base import Model

REQUEST_KEY = "flavor"
RESPONSE_KEY = "flavor"
COLLECTION_KEY = "flavors"
LINKS_KEY = "flavor_links"


@dataclass(frozen=True)
class Flavor(Model):
    """
    A load balancer flavor: a named, operator-defined set of provider settings.

    :param id: Unique ID of the flavor.
    :param name: Human-readable name; does not have to be unique.
    :param description: Human-readable description.
    :param flavor_profile_id: ID of the flavor profile backing this flavor.
    :param enabled: Whether the flavor is available for use.
    """

    id: str = ""
    name: str = ""
    description: str = ""
    flavor_profile_id: str = ""
    enabled: bool = False


@dataclass(frozen=True)
class FlavorListOpts:
    """
    Filtering and sorting of flavor collections.

    ``enabled=False`` is not sent: zero values are omitted from queries.
    """

    id: str = field(default="", metadata={"q": "id"})
    name: str = field(default="", metadata={"q": "name"})
    description: str = field(default="", metadata={"q": "description"})
    flavor_profile_id: str = field(default="", metadata={"q": "flavor_profile_id"})
    enabled: bool = field(default=False, metadata={"q": "enabled"})
    limit: int = field(default=0, metadata={"q": "limit"})
    marker: str = field(default="", metadata={"q": "marker"})
    sort_key: str = field(default="", metadata={"q": "sort_key"})
    sort_dir: str = field(default="", metadata={"q": "sort_dir"})

    def to_query_string(self) -> str:
        return build_query_string(self)


@dataclass(frozen=True)
class FlavorCreateOpts:
    """Request body for creating a flavor. Every field is sent."""

    description: str = field(default="", metadata={"json": "description"})
    name: str = field(default="", metadata={"json": "name"})
    flavor_profile_id: str = field(default="", metadata={"json": "flavor_profile_id"})
    enabled: bool = field(default=False, metadata={"json": "enabled"})

    def to_request_body(self) -> Dict[str, Any]:
        return build_request_body(self, REQUEST_KEY)


@dataclass(frozen=True)
class FlavorUpdateOpts:
    """Request body for updating a flavor. Every field is sent, so pass the full desired state."""

    description: str = field(default="", metadata={"json": "description"})
    name: str = field(default="", metadata={"json": "name"})
    flavor_profile_id: str = field(default="", metadata={"json": "flavor_profile_id"})
    enabled: bool = field(default=False, metadata={"json": "enabled"})

    def to_request_body(self) -> Dict[str, Any]:
        return build_request_body(self, REQUEST_KEY)


__all__ = ["Flavor", "FlavorListOpts", "FlavorCreateOpts", "FlavorUpdateOpts"]
