# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

"""Availability zone operations namespace."""

from __future__ import annotations

from ..common.constants import AVAILABILITY_ZONES_PATH
from ..core.encoding import UpdateOptsBuilder
from ..core.results import DeleteResult, GetResult, UpdateResult
from ..models import availability_zone as _az
from ..models.availability_zone import AvailabilityZone
from ._base import ResourceDefinition, _ResourceOperations


class AvailabilityZoneOperations(_ResourceOperations[AvailabilityZone]):
    """
    Availability zone operations.

    Availability zones have no ID; ``get``, ``update`` and ``delete`` take the
    zone name.

    Accessed via ``client.availability_zones``.

    Example::

        client.availability_zones.create(
            AvailabilityZoneCreateOpts(name="east", availability_zone_profile_id=profile_id, enabled=True)
        ).raise_for_error()

        zone = client.availability_zones.get("east").extract()
        client.availability_zones.delete("east").raise_for_error()
    """

    definition = ResourceDefinition(
        name="availability_zones",
        path=AVAILABILITY_ZONES_PATH,
        request_key=_az.REQUEST_KEY,
        response_key=_az.RESPONSE_KEY,
        collection_key=_az.COLLECTION_KEY,
        links_key=_az.LINKS_KEY,
        decode=AvailabilityZone.from_dict,
    )

    def get(self, name: str) -> GetResult[AvailabilityZone]:
        return super().get(name)

    def update(self, name: str, opts: UpdateOptsBuilder) -> UpdateResult[AvailabilityZone]:
        return super().update(name, opts)

    def delete(self, name: str) -> DeleteResult:
        return super().delete(name)


__all__ = ["AvailabilityZoneOperations"]
