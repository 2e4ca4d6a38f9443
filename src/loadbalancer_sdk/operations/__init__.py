# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

"""
Operation namespace classes for the Load Balancer SDK.

This module contains the operation namespace classes that organize
related operations under intuitive namespaces:
- FlavorProfileOperations: flavor profile CRUD and listing
- FlavorOperations: flavor CRUD and listing
- AvailabilityZoneProfileOperations: availability zone profile CRUD and listing
- AvailabilityZoneOperations: availability zone CRUD and listing, addressed by name
"""

__all__ = []
