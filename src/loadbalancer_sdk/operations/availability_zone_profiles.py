# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

"""Availability zone profile operations namespace."""

from __future__ import annotations

from ..common.constants import AVAILABILITY_ZONE_PROFILES_PATH
from ..models import availability_zone_profile as _azp
from ..models.availability_zone_profile import AvailabilityZoneProfile
from ._base import ResourceDefinition, _ResourceOperations


class AvailabilityZoneProfileOperations(_ResourceOperations[AvailabilityZoneProfile]):
    """
    Availability zone profile operations.

    Accessed via ``client.availability_zone_profiles``.

    Example::

        profile = client.availability_zone_profiles.create(
            AvailabilityZoneProfileCreateOpts(
                name="az-east",
                provider_name="amphora",
                availability_zone_data='{"compute_zone": "nova-east"}',
            )
        ).extract()
        print(profile.load_availability_zone_data()["compute_zone"])
    """

    definition = ResourceDefinition(
        name="availability_zone_profiles",
        path=AVAILABILITY_ZONE_PROFILES_PATH,
        request_key=_azp.REQUEST_KEY,
        response_key=_azp.RESPONSE_KEY,
        collection_key=_azp.COLLECTION_KEY,
        links_key=_azp.LINKS_KEY,
        decode=AvailabilityZoneProfile.from_dict,
    )


__all__ = ["AvailabilityZoneProfileOperations"]
