# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

"""
Core infrastructure components for the Load Balancer SDK.

This module contains the foundational components: options encoding, result
envelopes, pagination, configuration, HTTP transport, authentication,
telemetry and error handling.
"""

from .results import (
    RawResponse,
    RequestMetadata,
    LoadBalancerResponse,
    Result,
    CreateResult,
    GetResult,
    UpdateResult,
    DeleteResult,
)
from .pagination import Page, LinkedPage, Pager, PagerState

__all__ = [
    "RawResponse",
    "RequestMetadata",
    "LoadBalancerResponse",
    "Result",
    "CreateResult",
    "GetResult",
    "UpdateResult",
    "DeleteResult",
    "Page",
    "LinkedPage",
    "Pager",
    "PagerState",
]
