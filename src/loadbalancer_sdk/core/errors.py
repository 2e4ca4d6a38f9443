# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

"""
Structured error types for the Load Balancer SDK.

Every failure the SDK surfaces is a :class:`LoadBalancerError`. Errors are never
recovered locally; they are stored in a result envelope or raised from pager
iteration so the caller decides what to do.
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Dict, Iterable, Optional

from ._error_codes import (
    DECODE_LINK_MALFORMED,
    TRANSPORT_CANCELLED,
    TRANSPORT_ERROR,
    _http_subcode,
    _is_transient_status,
)


class LoadBalancerError(Exception):
    """Base structured error for the Load Balancer SDK."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        subcode: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        source: Optional[str] = None,
        is_transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.subcode = subcode
        self.status_code = status_code
        self.details = details or {}
        self.source = source or "client"
        self.is_transient = is_transient
        self.timestamp = _dt.datetime.now(_dt.timezone.utc).isoformat()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "subcode": self.subcode,
            "status_code": self.status_code,
            "details": self.details,
            "source": self.source,
            "is_transient": self.is_transient,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:  # pragma: no cover
        return f"{self.__class__.__name__}(code={self.code!r}, subcode={self.subcode!r}, message={self.message!r})"


class EncodingError(LoadBalancerError):
    """An options value could not be serialized to a query string or request body."""

    def __init__(self, message: str, *, subcode: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="encoding_error", subcode=subcode, details=details, source="client")


class TransportError(LoadBalancerError):
    """The request never produced an HTTP response (connection failure, timeout, ...)."""

    def __init__(
        self,
        message: str,
        *,
        subcode: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        is_transient: bool = True,
    ):
        super().__init__(
            message,
            code="transport_error",
            subcode=subcode or TRANSPORT_ERROR,
            details=details,
            source="transport",
            is_transient=is_transient,
        )


class CancelledError(TransportError):
    """A fetch or traversal was cancelled before it completed."""

    def __init__(self, message: str = "Operation cancelled", *, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, subcode=TRANSPORT_CANCELLED, details=details, is_transient=False)


class HttpStatusError(LoadBalancerError):
    """A response was received but its status code is not in the accepted set."""

    def __init__(
        self,
        message: str,
        status_code: int,
        *,
        accepted_codes: Optional[Iterable[int]] = None,
        fault_string: Optional[str] = None,
        fault_code: Optional[str] = None,
        global_request_id: Optional[str] = None,
        request_id: Optional[str] = None,
        body_excerpt: Optional[str] = None,
        retry_after: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        response: Optional[Any] = None,
    ) -> None:
        d = details or {}
        if accepted_codes is not None:
            d["accepted_codes"] = sorted(accepted_codes)
        if fault_string is not None:
            d["fault_string"] = fault_string
        if fault_code is not None:
            d["fault_code"] = fault_code
        if global_request_id is not None:
            d["global_request_id"] = global_request_id
        if request_id is not None:
            d["request_id"] = request_id
        if body_excerpt is not None:
            d["body_excerpt"] = body_excerpt
        if retry_after is not None:
            d["retry_after"] = retry_after
        super().__init__(
            message,
            code="http_error",
            subcode=_http_subcode(status_code),
            status_code=status_code,
            details=d,
            source="server",
            is_transient=_is_transient_status(status_code),
        )
        # Captured RawResponse of the rejected request, if any
        self.response = response


HTTPStatusError = HttpStatusError


class DecodeError(LoadBalancerError):
    """A response body does not match the expected envelope or record shape."""

    def __init__(self, message: str, *, subcode: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="decode_error", subcode=subcode, details=details, source="client")


class LinkMalformedError(DecodeError):
    """A pagination link is present but cannot be used to reach the next page."""

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, subcode=DECODE_LINK_MALFORMED, details=details)


__all__ = [
    "LoadBalancerError",
    "EncodingError",
    "TransportError",
    "CancelledError",
    "HttpStatusError",
    "HTTPStatusError",
    "DecodeError",
    "LinkMalformedError",
]
