# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

"""
Common constants shared across the Load Balancer SDK.

Import directly from :mod:`~loadbalancer_sdk.common.constants`.
"""

__all__ = []
