# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

"""
HTTP client with automatic retry logic, timeout handling, and optional session support.

This module provides :class:`~loadbalancer_sdk.core._http._HttpClient`, a wrapper
around the requests library that adds configurable retry behavior for transient
network errors and throttling responses, timeout management based on HTTP
method, and optional connection pooling via session reuse.
"""

from __future__ import annotations

import random
import time
from typing import Any, Optional

import requests

from ._error_codes import TRANSIENT_STATUS


class _HttpClient:
    """
    HTTP client with configurable retry logic, timeout handling, and optional session support.

    :param retries: Maximum number of attempts. Default is 5.
    :type retries: :class:`int` | None
    :param backoff: Base delay in seconds between retry attempts. Default is 0.5.
    :type backoff: :class:`float` | None
    :param max_backoff: Maximum delay between attempts in seconds. Default is 60.0.
    :type max_backoff: :class:`float` | None
    :param timeout: Default request timeout in seconds. If None, uses per-method defaults.
    :type timeout: :class:`float` | None
    :param jitter: Add +/-25% random variation to retry delays. Default is True.
    :type jitter: :class:`bool` | None
    :param retry_transient_errors: Retry 429, 502, 503 and 504 responses. Default is True.
    :type retry_transient_errors: :class:`bool` | None
    :param session: Optional requests.Session for connection pooling.
    :type session: :class:`requests.Session` | None
    """

    def __init__(
        self,
        retries: Optional[int] = None,
        backoff: Optional[float] = None,
        max_backoff: Optional[float] = None,
        timeout: Optional[float] = None,
        jitter: Optional[bool] = None,
        retry_transient_errors: Optional[bool] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.max_attempts = retries if retries is not None else 5
        self.base_delay = backoff if backoff is not None else 0.5
        self.max_backoff = max_backoff if max_backoff is not None else 60.0
        self.default_timeout: Optional[float] = timeout
        self.jitter = jitter if jitter is not None else True
        self.retry_transient_errors = retry_transient_errors if retry_transient_errors is not None else True
        self.transient_status_codes = set(TRANSIENT_STATUS)
        self._session = session

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """
        Execute an HTTP request with automatic retry logic and timeout management.

        Applies default timeouts based on HTTP method (120s for POST/DELETE, 10s for others),
        retries network errors and transient status codes with exponential backoff, and
        returns the last response once attempts are exhausted.

        :param method: HTTP method (GET, POST, PUT, DELETE, etc.).
        :type method: :class:`str`
        :param url: Target URL for the request.
        :type url: :class:`str`
        :param kwargs: Additional arguments passed to ``requests.request()`` or
            ``session.request()``, including headers, json, etc.
        :return: HTTP response object.
        :rtype: :class:`requests.Response`
        :raises requests.exceptions.RequestException: If all retry attempts fail.
        """
        if "timeout" not in kwargs:
            if self.default_timeout is not None:
                kwargs["timeout"] = self.default_timeout
            else:
                m = (method or "").lower()
                kwargs["timeout"] = 120 if m in ("post", "delete") else 10

        attempts = max(1, self.max_attempts)
        for attempt in range(attempts):
            try:
                if self._session is not None:
                    response = self._session.request(method, url, **kwargs)
                else:
                    response = requests.request(method, url, **kwargs)
            except requests.exceptions.RequestException:
                if attempt == attempts - 1:
                    raise
                time.sleep(self._calculate_retry_delay(attempt))
                continue

            if (
                self.retry_transient_errors
                and response.status_code in self.transient_status_codes
                and attempt < attempts - 1
            ):
                time.sleep(self._calculate_retry_delay(attempt, response))
                continue
            return response

        # This should never be reached due to the logic above
        raise RuntimeError("Unexpected end of retry loop")

    def _calculate_retry_delay(self, attempt: int, response: Optional[requests.Response] = None) -> float:
        """
        Delay before the next attempt.

        A valid integer ``Retry-After`` header wins (capped at ``max_backoff``);
        otherwise ``base_delay * 2**attempt`` capped at ``max_backoff``, with
        +/-25% jitter when enabled.
        """
        if response is not None and "Retry-After" in (response.headers or {}):
            try:
                return min(int(response.headers["Retry-After"]), self.max_backoff)
            except (ValueError, TypeError):
                pass

        delay = min(self.base_delay * (2**attempt), self.max_backoff)
        if self.jitter:
            jitter_range = delay * 0.25
            delay = max(0, delay + random.uniform(-jitter_range, jitter_range))
        return delay

    def close(self) -> None:
        """
        Close the HTTP client and release resources.

        If a session was provided, this method closes it. Safe to call multiple times.
        """
        if self._session is not None:
            self._session.close()
            self._session = None
