# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

"""
Typed records and options values for the Load Balancer SDK.

- :mod:`~loadbalancer_sdk.models.flavor_profile`: ``FlavorProfile`` and its options.
- :mod:`~loadbalancer_sdk.models.flavor`: ``Flavor`` and its options.
- :mod:`~loadbalancer_sdk.models.availability_zone_profile`: ``AvailabilityZoneProfile`` and its options.
- :mod:`~loadbalancer_sdk.models.availability_zone`: ``AvailabilityZone`` and its options.

Note:
    This ``__init__.py`` does NOT import/export models. Import directly from
    the specific module files to avoid duplicate documentation entries.
"""

__all__ = []
