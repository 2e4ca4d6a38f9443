# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

"""
Result envelopes for Load Balancer SDK operations.

Single-resource operations never raise on the wire; they return an envelope
holding the captured response and any failure. Decoding is deferred until the
caller asks for it:

- :class:`RawResponse`: immutable capture of status, headers and body bytes
- :class:`RequestMetadata`: request identifiers and timing for diagnostics
- :class:`Result`: base envelope with :meth:`Result.extract_into` and :meth:`Result.extract_err`
- :class:`CreateResult`, :class:`GetResult`, :class:`UpdateResult`: typed record envelopes
- :class:`DeleteResult`: error-only envelope
- :class:`LoadBalancerResponse`: record plus telemetry, from ``.with_detail_response()``

Example::

    result = client.flavors.get(flavor_id)
    flavor = result.extract()          # raises the stored error, if any
    print(flavor.name)

    response = result.with_detail_response()
    print(response.telemetry["service_request_id"])

    err = client.flavors.delete(flavor_id).extract_err()
    if err is not None:
        print(err.to_dict())
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Mapping, Optional, TypeVar

import requests
from requests.structures import CaseInsensitiveDict

from ._error_codes import DECODE_INVALID_JSON, DECODE_MISSING_KEY, DECODE_SHAPE_MISMATCH
from .errors import DecodeError, LoadBalancerError

T = TypeVar("T")

_EXCERPT_LIMIT = 200


@dataclass(frozen=True)
class RawResponse:
    """
    Immutable capture of an HTTP response.

    :param status_code: HTTP status code.
    :type status_code: :class:`int`
    :param headers: Response headers (case-insensitive lookup).
    :type headers: :class:`~typing.Mapping`
    :param body: Raw body bytes, already fully read.
    :type body: :class:`bytes`
    :param url: URL the response was fetched from.
    :type url: :class:`str`
    """

    status_code: int
    headers: Mapping[str, str] = field(default_factory=CaseInsensitiveDict)
    body: bytes = b""
    url: str = ""

    @classmethod
    def from_response(cls, response: requests.Response) -> "RawResponse":
        """Capture a :class:`requests.Response`, reading its body once."""
        return cls(
            status_code=response.status_code,
            headers=CaseInsensitiveDict(response.headers or {}),
            body=response.content or b"",
            url=response.url or "",
        )

    def json(self) -> Any:
        """
        Decode the body as JSON.

        :raises DecodeError: If the body is empty or not valid JSON.
        """
        try:
            return json.loads(self.body.decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as exc:
            excerpt = self.body[:_EXCERPT_LIMIT].decode("utf-8", errors="replace")
            raise DecodeError(
                f"Response body from {self.url or 'request'} is not valid JSON (status={self.status_code})",
                subcode=DECODE_INVALID_JSON,
                details={"body_excerpt": excerpt, "status_code": self.status_code},
            ) from exc


@dataclass(frozen=True)
class RequestMetadata:
    """
    HTTP request/response metadata for diagnostics and tracing.

    :param client_request_id: Client-generated identifier of this single HTTP request.
    :type client_request_id: :class:`str` | None
    :param global_request_id: ``X-OpenStack-Request-ID`` sent by the client, shared by
        every request of one SDK call.
    :type global_request_id: :class:`str` | None
    :param service_request_id: ``x-openstack-request-id`` returned by the service.
    :type service_request_id: :class:`str` | None
    :param http_status_code: HTTP response status code.
    :type http_status_code: :class:`int` | None
    :param timing_ms: Request duration in milliseconds.
    :type timing_ms: :class:`float` | None
    """

    client_request_id: Optional[str] = None
    global_request_id: Optional[str] = None
    service_request_id: Optional[str] = None
    http_status_code: Optional[int] = None
    timing_ms: Optional[float] = None


@dataclass
class LoadBalancerResponse(Generic[T]):
    """
    A decoded record together with the telemetry of the request that produced it.

    :param result: The extracted record.
    :param telemetry: ``client_request_id``, ``global_request_id``,
        ``service_request_id``, ``http_status_code`` and ``timing_ms``.
    :type telemetry: :class:`dict`
    """

    result: T
    telemetry: Dict[str, Any] = field(default_factory=dict)


class Result:
    """
    Deferred-decode wrapper around a captured response and an optional failure.

    If ``error`` is set it is surfaced verbatim by every extraction method and
    the body is never decoded. The response is never mutated, so repeated
    extraction decodes the same bytes and returns equal values.

    :param response: Captured response, if the request produced one.
    :type response: :class:`RawResponse` | None
    :param error: Failure from encoding, transport or status checking.
    :type error: :class:`~loadbalancer_sdk.core.errors.LoadBalancerError` | None
    :param metadata: Request metadata for diagnostics.
    :type metadata: :class:`RequestMetadata` | None
    """

    __slots__ = ("_response", "_error", "_metadata")

    def __init__(
        self,
        response: Optional[RawResponse] = None,
        error: Optional[LoadBalancerError] = None,
        metadata: Optional[RequestMetadata] = None,
    ) -> None:
        self._response = response
        self._error = error
        self._metadata = metadata or RequestMetadata()

    @property
    def response(self) -> Optional[RawResponse]:
        return self._response

    @property
    def error(self) -> Optional[LoadBalancerError]:
        return self._error

    @property
    def metadata(self) -> RequestMetadata:
        return self._metadata

    @property
    def ok(self) -> bool:
        return self._error is None

    @property
    def status_code(self) -> Optional[int]:
        return self._response.status_code if self._response is not None else None

    @property
    def headers(self) -> Mapping[str, str]:
        if self._response is None:
            return CaseInsensitiveDict()
        return self._response.headers

    def extract_err(self) -> Optional[LoadBalancerError]:
        """Return the stored failure, or ``None`` if the request succeeded."""
        return self._error

    def raise_for_error(self) -> None:
        """Raise the stored failure, if any."""
        if self._error is not None:
            raise self._error

    def extract_into(self, key: Optional[str] = None) -> Any:
        """
        Decode the body and optionally unwrap one top-level key.

        :param key: Envelope key to unwrap, e.g. ``"flavor"``.
        :type key: :class:`str` | None
        :return: The decoded JSON document, or the value under ``key``.
        :raises LoadBalancerError: The stored failure, without decoding.
        :raises DecodeError: If the body is not JSON, not an object, or lacks ``key``.
        """
        self.raise_for_error()
        if self._response is None:
            raise DecodeError("Result holds neither a response nor an error", subcode=DECODE_SHAPE_MISMATCH)
        body = self._response.json()
        if key is None:
            return body
        if not isinstance(body, dict):
            raise DecodeError(
                f"Expected a JSON object with key '{key}', got {type(body).__name__}",
                subcode=DECODE_SHAPE_MISMATCH,
            )
        value = body.get(key)
        if value is None:
            raise DecodeError(
                f"Response body has no '{key}' envelope",
                subcode=DECODE_MISSING_KEY,
                details={"key": key, "keys": sorted(body)},
            )
        return value

    def _telemetry(self) -> Dict[str, Any]:
        return {
            "client_request_id": self._metadata.client_request_id,
            "global_request_id": self._metadata.global_request_id,
            "service_request_id": self._metadata.service_request_id,
            "http_status_code": self._metadata.http_status_code,
            "timing_ms": self._metadata.timing_ms,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code!r}, error={self._error!r})"


class ResourceResult(Result, Generic[T]):
    """
    Envelope for operations that return a single resource.

    :param decode: Converts the unwrapped JSON object into the typed record.
    :param envelope_key: Key the resource is nested under in the response body.
    """

    __slots__ = ("_decode", "_envelope_key")

    def __init__(
        self,
        decode: Callable[[Any], T],
        envelope_key: str,
        response: Optional[RawResponse] = None,
        error: Optional[LoadBalancerError] = None,
        metadata: Optional[RequestMetadata] = None,
    ) -> None:
        super().__init__(response, error, metadata)
        self._decode = decode
        self._envelope_key = envelope_key

    @property
    def envelope_key(self) -> str:
        return self._envelope_key

    def extract(self, envelope_key: Optional[str] = None) -> T:
        """
        Decode the typed record.

        :param envelope_key: Override for the bound envelope key.
        :return: The typed record.
        :raises LoadBalancerError: The stored failure, without decoding.
        :raises DecodeError: If the envelope is missing or the record shape mismatches.
        """
        return self._decode(self.extract_into(envelope_key or self._envelope_key))

    def with_detail_response(self) -> LoadBalancerResponse[T]:
        """Return the extracted record together with request telemetry."""
        return LoadBalancerResponse(result=self.extract(), telemetry=self._telemetry())


class CreateResult(ResourceResult[T]):
    """Result of a create operation. Call :meth:`extract` to get the new resource."""

    __slots__ = ()


class GetResult(ResourceResult[T]):
    """Result of a get operation. Call :meth:`extract` to get the resource."""

    __slots__ = ()


class UpdateResult(ResourceResult[T]):
    """Result of an update operation. Call :meth:`extract` to get the updated resource."""

    __slots__ = ()


class DeleteResult(Result):
    """Result of a delete operation. Call :meth:`extract_err` to check for failure."""

    __slots__ = ()


__all__ = [
    "RawResponse",
    "RequestMetadata",
    "LoadBalancerResponse",
    "Result",
    "ResourceResult",
    "CreateResult",
    "GetResult",
    "UpdateResult",
    "DeleteResult",
]
