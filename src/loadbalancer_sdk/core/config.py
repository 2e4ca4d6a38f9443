# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .telemetry import TelemetryConfig


@dataclass(frozen=True)
class LoadBalancerConfig:
    """
    Configuration settings for Load Balancer client operations.

    :param http_retries: Maximum number of attempts for HTTP requests (default: 5).
    :type http_retries: int or None
    :param http_backoff: Base delay in seconds for exponential backoff (default: 0.5).
    :type http_backoff: float or None
    :param http_max_backoff: Maximum delay between retry attempts in seconds (default: 60.0).
    :type http_max_backoff: float or None
    :param http_timeout: Request timeout in seconds (default: method-dependent).
    :type http_timeout: float or None
    :param http_jitter: Whether to add jitter to retry delays (default: True).
    :type http_jitter: bool or None
    :param http_retry_transient_errors: Whether to retry 429, 502, 503 and 504 responses (default: True).
    :type http_retry_transient_errors: bool or None
    :param user_agent: ``User-Agent`` header value (default: ``loadbalancer-sdk-python/<version>``).
    :type user_agent: str or None
    :param telemetry: Logging, tracing and hook configuration. Telemetry is off when ``None``.
    :type telemetry: ~loadbalancer_sdk.core.telemetry.TelemetryConfig or None
    """

    # HTTP retry and resilience configuration
    http_retries: Optional[int] = None
    http_backoff: Optional[float] = None
    http_max_backoff: Optional[float] = None
    http_timeout: Optional[float] = None
    http_jitter: Optional[bool] = None
    http_retry_transient_errors: Optional[bool] = None

    user_agent: Optional[str] = None
    telemetry: Optional[TelemetryConfig] = None

    @classmethod
    def from_env(cls) -> "LoadBalancerConfig":
        """
        Create a configuration instance with default settings.

        :return: Configuration instance with default values.
        :rtype: ~loadbalancer_sdk.core.config.LoadBalancerConfig
        """
        # Environment-free defaults; None lets HttpClient pick its own
        return cls(
            http_retries=None,
            http_backoff=None,
            http_max_backoff=None,
            http_timeout=None,
            http_jitter=None,
            http_retry_transient_errors=None,
            user_agent=None,
            telemetry=None,
        )
