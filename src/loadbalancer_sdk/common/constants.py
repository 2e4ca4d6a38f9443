# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

"""
Constants for the Load Balancer (Octavia) v2 API.

Path segments, header names and OpenTelemetry attribute keys used across the SDK.
"""

# Service path prefix for every load balancer resource
LBAAS_PATH = "lbaas"

# Collection path segments
FLAVOR_PROFILES_PATH = "flavorprofiles"
FLAVORS_PATH = "flavors"
AVAILABILITY_ZONE_PROFILES_PATH = "availabilityzoneprofiles"
AVAILABILITY_ZONES_PATH = "availabilityzones"

# Request/response headers
HEADER_AUTH_TOKEN = "X-Auth-Token"
HEADER_GLOBAL_REQUEST_ID = "X-OpenStack-Request-ID"
"""Sent by the client; oslo.middleware accepts ``req-<uuid>`` values as the global request id."""

HEADER_SERVICE_REQUEST_ID = "x-openstack-request-id"
"""Returned by the service for every request it handles."""

HEADER_RETRY_AFTER = "Retry-After"

# Default accepted status codes per HTTP verb
DEFAULT_OK_CODES = {
    "GET": (200,),
    "POST": (201, 202),
    "PUT": (201, 202),
    "DELETE": (202, 204),
}
PAGE_OK_CODES = (200, 204)
UPDATE_OK_CODES = (200, 202)

# OpenTelemetry semantic attribute keys
OTEL_ATTR_HTTP_METHOD = "http.request.method"
OTEL_ATTR_HTTP_URL = "url.full"
OTEL_ATTR_HTTP_STATUS_CODE = "http.response.status_code"
OTEL_ATTR_LB_OPERATION = "loadbalancer.operation"
OTEL_ATTR_LB_RESOURCE = "loadbalancer.resource"
OTEL_ATTR_LB_REQUEST_ID = "loadbalancer.client_request_id"
OTEL_ATTR_LB_GLOBAL_REQUEST_ID = "loadbalancer.global_request_id"
OTEL_ATTR_LB_SERVICE_REQUEST_ID = "loadbalancer.service_request_id"
