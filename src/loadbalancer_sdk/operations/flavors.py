# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

"""Flavor operations namespace."""

from __future__ import annotations

from ..common.constants import FLAVORS_PATH
from ..models import flavor as _flavor
from ..models.flavor import Flavor
from ._base import ResourceDefinition, _ResourceOperations


class FlavorOperations(_ResourceOperations[Flavor]):
    """
    Flavor operations.

    Accessed via ``client.flavors``.

    Example::

        flavor = client.flavors.create(
            FlavorCreateOpts(name="basic", flavor_profile_id=profile_id, enabled=True)
        ).extract()

        result = client.flavors.update(flavor.id, FlavorUpdateOpts(name="basic-v2", enabled=True))
        print(result.extract().name)

        pager = client.flavors.list(FlavorListOpts(limit=50, sort_key="name"))
        for page in pager.pages():
            print([f.name for f in page.extract()])
    """

    definition = ResourceDefinition(
        name="flavors",
        path=FLAVORS_PATH,
        request_key=_flavor.REQUEST_KEY,
        response_key=_flavor.RESPONSE_KEY,
        collection_key=_flavor.COLLECTION_KEY,
        links_key=_flavor.LINKS_KEY,
        decode=Flavor.from_dict,
    )


__all__ = ["FlavorOperations"]
