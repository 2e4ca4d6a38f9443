# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

"""Flavor profile operations namespace."""

from __future__ import annotations

from ..common.constants import FLAVOR_PROFILES_PATH
from ..models import flavor_profile as _fp
from ..models.flavor_profile import FlavorProfile
from ._base import ResourceDefinition, _ResourceOperations


class FlavorProfileOperations(_ResourceOperations[FlavorProfile]):
    """
    Flavor profile operations. Flavor profiles hold provider-specific settings
    that flavors expose to users; managing them usually requires admin rights.

    Accessed via ``client.flavor_profiles``.

    Example::

        created = client.flavor_profiles.create(
            FlavorProfileCreateOpts(
                name="amphora-single",
                provider_name="amphora",
                flavor_data='{"loadbalancer_topology": "SINGLE"}',
            )
        ).extract()

        for profile in client.flavor_profiles.list(FlavorProfileListOpts(provider_name="amphora")):
            print(profile.id, profile.load_flavor_data())

        client.flavor_profiles.delete(created.id).raise_for_error()
    """

    definition = ResourceDefinition(
        name="flavor_profiles",
        path=FLAVOR_PROFILES_PATH,
        request_key=_fp.REQUEST_KEY,
        response_key=_fp.RESPONSE_KEY,
        collection_key=_fp.COLLECTION_KEY,
        links_key=_fp.LINKS_KEY,
        decode=FlavorProfile.from_dict,
    )


__all__ = ["FlavorProfileOperations"]
