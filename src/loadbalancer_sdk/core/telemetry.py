# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

"""
Telemetry infrastructure for the Load Balancer SDK.

Provides OpenTelemetry-based tracing and metrics, standard-library logging,
and an extensible hook system for custom telemetry providers. Spans and
instruments come from ``opentelemetry-api``; without a configured SDK they
are no-ops.
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Generator, List, Optional, Protocol, Union, runtime_checkable

from opentelemetry import metrics, trace
from opentelemetry.trace import Status, StatusCode

from ..common.constants import (
    OTEL_ATTR_HTTP_METHOD,
    OTEL_ATTR_HTTP_STATUS_CODE,
    OTEL_ATTR_HTTP_URL,
    OTEL_ATTR_LB_GLOBAL_REQUEST_ID,
    OTEL_ATTR_LB_OPERATION,
    OTEL_ATTR_LB_REQUEST_ID,
    OTEL_ATTR_LB_RESOURCE,
    OTEL_ATTR_LB_SERVICE_REQUEST_ID,
)

_INSTRUMENTATION_NAME = "loadbalancer_sdk"
_SCHEMA_URL = "https://opentelemetry.io/schemas/1.21.0"

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class TelemetryConfig:
    """Configuration for SDK telemetry and observability.

    Telemetry is opt-in.

    Example:
        Request logging::

            config = LoadBalancerConfig(
                telemetry=TelemetryConfig(enable_logging=True, log_level="DEBUG")
            )

        Custom hook::

            config = LoadBalancerConfig(
                telemetry=TelemetryConfig(hooks=[MyCustomTelemetryHook()])
            )
    """

    # Signal toggles
    enable_tracing: bool = False
    enable_metrics: bool = False
    enable_logging: bool = False

    # Logging configuration
    log_level: str = "WARNING"
    logger_name: str = "loadbalancer_sdk"

    # Custom hooks
    hooks: List["TelemetryHook"] = field(default_factory=list)


@dataclass
class RequestContext:
    """Context passed to telemetry hooks for each HTTP request."""

    client_request_id: str
    global_request_id: str

    method: str
    url: str
    operation: str  # e.g. "flavors.list", "flavor_profiles.get"
    resource: Optional[str] = None

    start_time: float = field(default_factory=time.perf_counter)

    # Custom data bag for hooks to share state
    custom_data: Dict[str, Any] = field(default_factory=dict)

    _span: Any = field(default=None, repr=False)


@dataclass
class ResponseContext:
    """Response information passed to telemetry hooks."""

    status_code: int
    duration_ms: float
    service_request_id: Optional[str] = None
    error: Optional[Exception] = None


@runtime_checkable
class TelemetryHook(Protocol):
    """Protocol for custom telemetry hooks.

    All methods are optional - implement only what you need.

    Example:
        class StatsdHook:
            def __init__(self, statsd):
                self.statsd = statsd

            def on_request_end(self, request: RequestContext, response: ResponseContext):
                self.statsd.timing(f"octavia.{request.operation}.duration", response.duration_ms)
    """

    def on_request_start(self, context: RequestContext) -> None:
        """Called before each HTTP request is sent."""
        ...

    def on_request_end(self, request: RequestContext, response: ResponseContext) -> None:
        """Called after each HTTP request completes."""
        ...

    def on_request_error(self, request: RequestContext, error: Exception) -> None:
        """Called when the request fails without a response."""
        ...

    def get_additional_headers(self) -> Dict[str, str]:
        """Return additional headers to include in requests."""
        ...


class TelemetryManager:
    """Manages telemetry instrumentation for the Load Balancer SDK.

    This class is internal and not part of the public API.
    """

    def __init__(self, config: Optional[TelemetryConfig] = None) -> None:
        self._config = config or TelemetryConfig()
        self._tracer: Optional[trace.Tracer] = None
        self._logger: Optional[logging.Logger] = None
        self._hooks = list(self._config.hooks)

        self._request_duration: Optional[Any] = None
        self._request_count: Optional[Any] = None
        self._error_count: Optional[Any] = None

        self._initialize()

    @property
    def is_tracing_enabled(self) -> bool:
        return self._tracer is not None

    @property
    def is_metrics_enabled(self) -> bool:
        return self._request_duration is not None

    def _initialize(self) -> None:
        if self._config.enable_tracing:
            self._tracer = trace.get_tracer(_INSTRUMENTATION_NAME, schema_url=_SCHEMA_URL)

        if self._config.enable_metrics:
            meter = metrics.get_meter(_INSTRUMENTATION_NAME, schema_url=_SCHEMA_URL)
            self._request_duration = meter.create_histogram(
                name="loadbalancer.client.request.duration",
                description="Duration of load balancer API requests",
                unit="ms",
            )
            self._request_count = meter.create_counter(
                name="loadbalancer.client.request.count",
                description="Number of load balancer API requests",
                unit="1",
            )
            self._error_count = meter.create_counter(
                name="loadbalancer.client.error.count",
                description="Number of load balancer API errors",
                unit="1",
            )

        if self._config.enable_logging:
            self._logger = logging.getLogger(self._config.logger_name)
            self._logger.setLevel(getattr(logging, self._config.log_level.upper()))

    @contextmanager
    def trace_request(
        self,
        operation: str,
        method: str,
        url: str,
        client_request_id: str,
        global_request_id: str,
        resource: Optional[str] = None,
    ) -> Generator[RequestContext, None, None]:
        """Create a traced request context.

        Usage:
            with telemetry.trace_request("flavors.get", "GET", url, req_id, global_id) as ctx:
                response = self._http._request(...)
                telemetry.record_response(ctx, response.status_code)
        """
        ctx = RequestContext(
            client_request_id=client_request_id,
            global_request_id=global_request_id,
            method=method,
            url=url,
            operation=operation,
            resource=resource,
        )

        self._dispatch("on_request_start", ctx)

        span = None
        if self._tracer is not None:
            attributes = {
                OTEL_ATTR_LB_OPERATION: operation,
                OTEL_ATTR_HTTP_METHOD: method,
                OTEL_ATTR_HTTP_URL: url,
                OTEL_ATTR_LB_REQUEST_ID: client_request_id,
                OTEL_ATTR_LB_GLOBAL_REQUEST_ID: global_request_id,
            }
            if resource:
                attributes[OTEL_ATTR_LB_RESOURCE] = resource
            span = self._tracer.start_span(f"LoadBalancer {operation}", kind=trace.SpanKind.CLIENT, attributes=attributes)
            ctx._span = span

        try:
            yield ctx
        except Exception as e:
            if span is not None:
                span.set_status(Status(StatusCode.ERROR, str(e)))
                span.record_exception(e)
            if self._logger:
                self._logger.warning("%s %s failed: %s", ctx.operation, ctx.method, e)
            self._dispatch("on_request_error", ctx, e)
            raise
        finally:
            if span is not None:
                span.end()

    def record_response(
        self,
        ctx: RequestContext,
        status_code: int,
        service_request_id: Optional[str] = None,
        error: Optional[Exception] = None,
    ) -> None:
        """Record response metrics, log and dispatch to hooks."""
        duration_ms = (time.perf_counter() - ctx.start_time) * 1000
        response = ResponseContext(
            status_code=status_code,
            duration_ms=duration_ms,
            service_request_id=service_request_id,
            error=error,
        )

        if ctx._span is not None:
            ctx._span.set_attribute(OTEL_ATTR_HTTP_STATUS_CODE, status_code)
            if service_request_id:
                ctx._span.set_attribute(OTEL_ATTR_LB_SERVICE_REQUEST_ID, service_request_id)
            if error is not None:
                ctx._span.set_status(Status(StatusCode.ERROR, str(error)))

        if self._request_duration is not None:
            attributes = {"operation": ctx.operation, "method": ctx.method, "status_code": status_code}
            if ctx.resource:
                attributes["resource"] = ctx.resource
            self._request_duration.record(duration_ms, attributes)
            self._request_count.add(1, attributes)
            if status_code >= 400:
                self._error_count.add(1, attributes)

        if self._logger:
            level = logging.WARNING if status_code >= 400 else logging.DEBUG
            self._logger.log(
                level,
                "%s %s %s %d %.1fms",
                ctx.operation,
                ctx.method,
                ctx.url,
                status_code,
                duration_ms,
                extra={
                    "client_request_id": ctx.client_request_id,
                    "global_request_id": ctx.global_request_id,
                    "service_request_id": service_request_id,
                },
            )

        self._dispatch("on_request_end", ctx, response)

    def _dispatch(self, method_name: str, *args: Any) -> None:
        for hook in self._hooks:
            callback = getattr(hook, method_name, None)
            if callback is None:
                continue
            try:
                callback(*args)
            except Exception:
                # Hooks must not break requests
                _LOGGER.debug("Telemetry hook %r failed in %s", hook, method_name, exc_info=True)

    def get_additional_headers(self) -> Dict[str, str]:
        """Collect additional headers from all hooks."""
        headers: Dict[str, str] = {}
        for hook in self._hooks:
            callback = getattr(hook, "get_additional_headers", None)
            if callback is None:
                continue
            try:
                hook_headers = callback()
            except Exception:
                _LOGGER.debug("Telemetry hook %r failed in get_additional_headers", hook, exc_info=True)
                continue
            if hook_headers:
                headers.update(hook_headers)
        return headers


class NoOpTelemetryManager:
    """No-op telemetry manager when telemetry is disabled."""

    is_tracing_enabled = False
    is_metrics_enabled = False

    @contextmanager
    def trace_request(
        self,
        operation: str,
        method: str,
        url: str,
        client_request_id: str,
        global_request_id: str,
        resource: Optional[str] = None,
    ) -> Generator[RequestContext, None, None]:
        yield RequestContext(
            client_request_id=client_request_id,
            global_request_id=global_request_id,
            method=method,
            url=url,
            operation=operation,
            resource=resource,
        )

    def record_response(self, *args: Any, **kwargs: Any) -> None:
        pass

    def get_additional_headers(self) -> Dict[str, str]:
        return {}


def create_telemetry_manager(
    config: Optional[TelemetryConfig],
) -> Union[TelemetryManager, NoOpTelemetryManager]:
    """Factory to create appropriate telemetry manager."""
    if config is None:
        return NoOpTelemetryManager()

    has_any_enabled = config.enable_tracing or config.enable_metrics or config.enable_logging or config.hooks
    if not has_any_enabled:
        return NoOpTelemetryManager()

    return TelemetryManager(config)


__all__ = [
    "TelemetryConfig",
    "TelemetryHook",
    "TelemetryManager",
    "NoOpTelemetryManager",
    "RequestContext",
    "ResponseContext",
    "create_telemetry_manager",
]
