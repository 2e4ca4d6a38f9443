# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

import requests

from azure.core.credentials import TokenCredential

from .core._auth import _AuthManager
from .core.config import LoadBalancerConfig
from .data._service import _ServiceClient
from .operations.availability_zone_profiles import AvailabilityZoneProfileOperations
from .operations.availability_zones import AvailabilityZoneOperations
from .operations.flavor_profiles import FlavorProfileOperations
from .operations.flavors import FlavorOperations


class LoadBalancerClient:
    """
    High-level client for the OpenStack load balancer (Octavia) v2 API.

    Operations are organized under namespaces:

    - ``client.flavor_profiles``: flavor profile CRUD and listing
    - ``client.flavors``: flavor CRUD and listing
    - ``client.availability_zone_profiles``: availability zone profile CRUD and listing
    - ``client.availability_zones``: availability zone CRUD and listing (by name)

    Single-resource operations return result envelopes that hold any failure
    until the caller extracts; ``list`` returns a lazy pager.

    **Context Manager Support (Recommended)**:
        Using the client as a context manager enables connection pooling and
        guarantees cleanup::

            with LoadBalancerClient(endpoint, credential) as client:
                for flavor in client.flavors.list():
                    print(flavor.name)

    **Without Context Manager**::

            client = LoadBalancerClient(endpoint, credential)
            try:
                flavor = client.flavors.get(flavor_id).extract()
            finally:
                client.close()

    :param endpoint: Versioned load balancer endpoint from the service catalog,
        for example ``"https://octavia.example.com/v2"``. Trailing slash is removed.
    :type endpoint: :class:`str`
    :param credential: Credential whose token is sent as ``X-Auth-Token``, for
        example :class:`~loadbalancer_sdk.core._auth.StaticTokenCredential`.
    :type credential: ~azure.core.credentials.TokenCredential
    :param config: Optional configuration for timeouts, retries and telemetry.
        Defaults to :meth:`~loadbalancer_sdk.core.config.LoadBalancerConfig.from_env`.
    :type config: ~loadbalancer_sdk.core.config.LoadBalancerConfig or None

    :raises ValueError: If ``endpoint`` is missing or empty after trimming.
    """

    def __init__(
        self,
        endpoint: str,
        credential: TokenCredential,
        config: Optional[LoadBalancerConfig] = None,
    ) -> None:
        self.auth = _AuthManager(credential)
        self._endpoint = (endpoint or "").strip().rstrip("/")
        if not self._endpoint:
            raise ValueError("endpoint is required.")
        self._config = config or LoadBalancerConfig.from_env()
        self._service: Optional[_ServiceClient] = None
        self._session: Optional[requests.Session] = None
        self._owns_session: bool = False

        self.flavor_profiles = FlavorProfileOperations(self)
        self.flavors = FlavorOperations(self)
        self.availability_zone_profiles = AvailabilityZoneProfileOperations(self)
        self.availability_zones = AvailabilityZoneOperations(self)

    def __enter__(self) -> "LoadBalancerClient":
        """
        Enter the context manager.

        Creates an HTTP session for connection pooling. All operations within
        the context reuse this session.
        """
        if self._session is None:
            self._session = requests.Session()
            self._owns_session = True
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """
        Close the client and release resources.

        Closes the HTTP session (if owned) and the internal service client.
        Safe to call multiple times.
        """
        if self._service is not None:
            self._service.close()
            self._service = None
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None
            self._owns_session = False

    def _get_service(self) -> _ServiceClient:
        """
        Get or create the internal service client.

        Construction is deferred until the first API call. When a session
        exists (from the context manager) it is shared for connection pooling.
        """
        if self._service is None:
            self._service = _ServiceClient(
                self.auth,
                self._endpoint,
                self._config,
                session=self._session,
            )
        return self._service

    @contextmanager
    def _scoped_service(self) -> Iterator[_ServiceClient]:
        """Yield the service client while a global request id scope is active."""
        service = self._get_service()
        with service._call_scope():
            yield service
