# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

"""
Shared pytest fixtures and configuration for Load Balancer SDK tests.

This module provides common test fixtures, mock objects, and configuration
that can be used across all test modules.
"""

import pytest
from unittest.mock import MagicMock

from azure.core.credentials import AccessToken, TokenCredential

from loadbalancer_sdk.core.config import LoadBalancerConfig


@pytest.fixture
def mock_credential():
    """TokenCredential mock issuing a fixed token."""
    credential = MagicMock(spec=TokenCredential)
    credential.get_token.return_value = AccessToken("test-token", 9999999999)
    return credential


@pytest.fixture
def test_config():
    """Configuration with retries and backoff disabled."""
    return LoadBalancerConfig(http_retries=1, http_backoff=0.0, http_timeout=5)


@pytest.fixture
def endpoint():
    """Standard versioned load balancer endpoint."""
    return "https://octavia.example.com/v2"


@pytest.fixture
def flavor_document():
    """A flavor as returned by the service."""
    return {
        "id": "5548c807-e6e8-43d7-9ea4-b38d34dd74a0",
        "name": "Basic",
        "description": "A basic standalone Octavia load balancer.",
        "flavor_profile_id": "9daa2768-74e7-4d13-bf5d-1b8e0dc239e1",
        "enabled": True,
    }
