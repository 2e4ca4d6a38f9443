# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

"""
Python SDK for the OpenStack load balancer (Octavia) v2 API.

Example::

    from loadbalancer_sdk import LoadBalancerClient, StaticTokenCredential
    from loadbalancer_sdk.models.flavor import FlavorListOpts

    with LoadBalancerClient("https://octavia.example.com/v2", StaticTokenCredential(token)) as client:
        for flavor in client.flavors.list(FlavorListOpts(enabled=True)):
            print(flavor.id, flavor.name)
"""

from .__version__ import __version__
from .client import LoadBalancerClient
from .core._auth import StaticTokenCredential
from .core.config import LoadBalancerConfig
from .core.telemetry import TelemetryConfig

__all__ = [
    "__version__",
    "LoadBalancerClient",
    "LoadBalancerConfig",
    "StaticTokenCredential",
    "TelemetryConfig",
]
