# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

"""
Data access layer for the Load Balancer SDK.

Contains the internal service client that authenticates, correlates and
issues HTTP requests against the load balancer API. Not part of the public API.
"""

__all__ = []
