# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

"""Load balancer API client: authentication, correlation and status checking."""

from __future__ import annotations

import json
import time
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple
from urllib.parse import quote

import requests

from ..__version__ import __version__
from ..common.constants import (
    DEFAULT_OK_CODES,
    HEADER_AUTH_TOKEN,
    HEADER_GLOBAL_REQUEST_ID,
    HEADER_RETRY_AFTER,
    HEADER_SERVICE_REQUEST_ID,
    PAGE_OK_CODES,
)
from ..core._auth import _AuthManager
from ..core._error_codes import TRANSPORT_AUTH, TRANSPORT_CONNECTION, TRANSPORT_ERROR, TRANSPORT_TIMEOUT
from ..core._http import _HttpClient
from ..core.config import LoadBalancerConfig
from ..core.errors import HttpStatusError, TransportError
from ..core.results import RawResponse, RequestMetadata
from ..core.telemetry import create_telemetry_manager

_EXCERPT_LIMIT = 200

_GLOBAL_REQUEST_ID: ContextVar[Optional[str]] = ContextVar("loadbalancer_global_request_id", default=None)


def _new_global_request_id() -> str:
    return f"req-{uuid.uuid4()}"


def _parse_fault(body: bytes) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(faultstring, faultcode)`` from an Octavia error body, if present."""
    try:
        payload = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, ValueError):
        return None, None
    if not isinstance(payload, dict):
        return None, None
    fault_string = payload.get("faultstring") or payload.get("description") or payload.get("message")
    fault_code = payload.get("faultcode")
    return (
        fault_string if isinstance(fault_string, str) else None,
        fault_code if isinstance(fault_code, str) else None,
    )


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class _ServiceClient:
    """
    Low-level client for the load balancer v2 API.

    :param auth: Token provider for the ``X-Auth-Token`` header.
    :type auth: ~loadbalancer_sdk.core._auth._AuthManager
    :param endpoint: Versioned service endpoint, e.g. ``"https://octavia.example.com/v2"``.
    :type endpoint: :class:`str`
    :param config: Client configuration; defaults to :meth:`LoadBalancerConfig.from_env`.
    :type config: ~loadbalancer_sdk.core.config.LoadBalancerConfig or None
    :param session: Optional pooled session shared with the owning client.
    :type session: :class:`requests.Session` or None
    """

    def __init__(
        self,
        auth: _AuthManager,
        endpoint: str,
        config: Optional[LoadBalancerConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.auth = auth
        self.endpoint = (endpoint or "").strip().rstrip("/")
        if not self.endpoint:
            raise ValueError("endpoint is required.")
        self.config = config or LoadBalancerConfig.from_env()
        self._http = _HttpClient(
            retries=self.config.http_retries,
            backoff=self.config.http_backoff,
            max_backoff=self.config.http_max_backoff,
            timeout=self.config.http_timeout,
            jitter=self.config.http_jitter,
            retry_transient_errors=self.config.http_retry_transient_errors,
            session=session,
        )
        self._telemetry = create_telemetry_manager(self.config.telemetry)
        self._user_agent = self.config.user_agent or f"loadbalancer-sdk-python/{__version__}"

    def service_url(self, *parts: str) -> str:
        """Join the endpoint with URL-quoted path segments."""
        segments = [quote(str(p), safe="") for p in parts if p is not None and str(p) != ""]
        return "/".join([self.endpoint, *segments])

    @contextmanager
    def _call_scope(self, global_request_id: Optional[str] = None) -> Iterator[str]:
        """
        Share one ``X-OpenStack-Request-ID`` across every request issued inside the scope.

        :param global_request_id: Reuse an existing id instead of generating one.
        :return: The active global request id.
        """
        gid = global_request_id or _new_global_request_id()
        token = _GLOBAL_REQUEST_ID.set(gid)
        try:
            yield gid
        finally:
            _GLOBAL_REQUEST_ID.reset(token)

    def _headers(self, global_request_id: str) -> Dict[str, str]:
        """
        Build request headers.

        :raises TransportError: If the credential cannot provide a token.
        """
        try:
            token = self.auth._acquire_token(self.endpoint).access_token
        except Exception as exc:
            raise TransportError(
                f"Could not acquire a token for {self.endpoint}: {exc}",
                subcode=TRANSPORT_AUTH,
                details={"endpoint": self.endpoint, "global_request_id": global_request_id},
                is_transient=False,
            ) from exc
        headers = {
            HEADER_AUTH_TOKEN: token,
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": self._user_agent,
        }
        headers.update(self._telemetry.get_additional_headers())
        headers[HEADER_GLOBAL_REQUEST_ID] = global_request_id
        return headers

    def _request(
        self,
        method: str,
        url: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        ok_codes: Optional[Iterable[int]] = None,
        operation: Optional[str] = None,
        resource: Optional[str] = None,
    ) -> Tuple[RawResponse, RequestMetadata]:
        """
        Send one request and check its status.

        :param method: HTTP verb.
        :param url: Absolute request URL.
        :param json: Request body, serialized as JSON.
        :param ok_codes: Accepted status codes; defaults per verb.
        :param operation: Operation name for telemetry, e.g. ``"flavors.get"``.
        :param resource: Resource collection name for telemetry.
        :return: The captured response and its request metadata.
        :raises TransportError: If no response was received.
        :raises HttpStatusError: If the status code is not accepted.
        """
        verb = method.upper()
        accepted = tuple(ok_codes) if ok_codes is not None else DEFAULT_OK_CODES.get(verb, (200,))
        client_request_id = str(uuid.uuid4())
        global_request_id = _GLOBAL_REQUEST_ID.get() or _new_global_request_id()

        kwargs: Dict[str, Any] = {"headers": self._headers(global_request_id)}
        if json is not None:
            kwargs["json"] = json

        with self._telemetry.trace_request(
            operation or verb.lower(),
            verb,
            url,
            client_request_id,
            global_request_id,
            resource=resource,
        ) as ctx:
            status_error: Optional[HttpStatusError] = None
            start = time.perf_counter()
            try:
                response = self._http._request(verb.lower(), url, **kwargs)
            except requests.exceptions.Timeout as exc:
                raise TransportError(
                    f"{verb} {url} timed out",
                    subcode=TRANSPORT_TIMEOUT,
                    details={"method": verb, "url": url, "global_request_id": global_request_id},
                ) from exc
            except requests.exceptions.ConnectionError as exc:
                raise TransportError(
                    f"{verb} {url} could not connect: {exc}",
                    subcode=TRANSPORT_CONNECTION,
                    details={"method": verb, "url": url, "global_request_id": global_request_id},
                ) from exc
            except requests.exceptions.RequestException as exc:
                raise TransportError(
                    f"{verb} {url} failed: {exc}",
                    subcode=TRANSPORT_ERROR,
                    details={"method": verb, "url": url, "global_request_id": global_request_id},
                ) from exc

            raw = RawResponse.from_response(response)
            if not raw.url:
                raw = RawResponse(status_code=raw.status_code, headers=raw.headers, body=raw.body, url=url)
            service_request_id = raw.headers.get(HEADER_SERVICE_REQUEST_ID)
            metadata = RequestMetadata(
                client_request_id=client_request_id,
                global_request_id=global_request_id,
                service_request_id=service_request_id,
                http_status_code=raw.status_code,
                timing_ms=(time.perf_counter() - start) * 1000,
            )

            if raw.status_code not in accepted:
                status_error = self._status_error(verb, url, raw, accepted, global_request_id, service_request_id)
            self._telemetry.record_response(ctx, raw.status_code, service_request_id, status_error)

        # Raised outside the trace: the response was already recorded.
        if status_error is not None:
            raise status_error
        return raw, metadata

    @staticmethod
    def _status_error(
        verb: str,
        url: str,
        raw: RawResponse,
        accepted: Tuple[int, ...],
        global_request_id: str,
        service_request_id: Optional[str],
    ) -> HttpStatusError:
        fault_string, fault_code = _parse_fault(raw.body)
        excerpt = raw.body[:_EXCERPT_LIMIT].decode("utf-8", errors="replace")
        message = f"{verb} {url} returned {raw.status_code}, expected one of {list(accepted)}"
        if fault_string:
            message = f"{message}: {fault_string}"
        return HttpStatusError(
            message,
            raw.status_code,
            accepted_codes=accepted,
            fault_string=fault_string,
            fault_code=fault_code,
            global_request_id=global_request_id,
            request_id=service_request_id,
            body_excerpt=excerpt or None,
            retry_after=_parse_retry_after(raw.headers.get(HEADER_RETRY_AFTER)),
            response=raw,
        )

    def _get_page(self, url: str, *, operation: Optional[str] = None, resource: Optional[str] = None) -> RawResponse:
        """Fetch one collection page; 204 is accepted as an empty page."""
        raw, _ = self._request("get", url, ok_codes=PAGE_OK_CODES, operation=operation, resource=resource)
        return raw

    def close(self) -> None:
        """Release the underlying HTTP client."""
        self._http.close()
