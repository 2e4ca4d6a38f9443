# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

"""
Unit tests for result envelopes in loadbalancer_sdk.core.results.

Tests cover:
- RawResponse capture and JSON decoding
- Deferred extraction with envelope unwrapping
- Verbatim surfacing of stored failures without decoding
- Idempotent extraction
"""

import json
from unittest.mock import MagicMock

import pytest

from loadbalancer_sdk.core._error_codes import DECODE_INVALID_JSON, DECODE_MISSING_KEY, DECODE_SHAPE_MISMATCH, HTTP_500
from loadbalancer_sdk.core.errors import DecodeError, HttpStatusError, TransportError
from loadbalancer_sdk.core.results import (
    CreateResult,
    DeleteResult,
    GetResult,
    LoadBalancerResponse,
    RawResponse,
    RequestMetadata,
    Result,
    UpdateResult,
)
from loadbalancer_sdk.models.flavor import Flavor
from loadbalancer_sdk.models.flavor_profile import FlavorProfile


def _raw(status_code, body):
    payload = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
    return RawResponse(status_code=status_code, body=payload, url="https://lb/v2/lbaas/flavorprofiles/a1")


class TestRawResponse:
    def test_from_response_reads_body_once(self):
        response = MagicMock()
        response.status_code = 200
        response.headers = {"X-OpenStack-Request-ID": "req-1"}
        response.content = b'{"a": 1}'
        response.url = "https://lb/v2"

        raw = RawResponse.from_response(response)

        assert raw.status_code == 200
        assert raw.headers["x-openstack-request-id"] == "req-1"
        assert raw.json() == {"a": 1}

    def test_invalid_json_raises_decode_error(self):
        raw = RawResponse(status_code=200, body=b"<html>oops</html>")
        with pytest.raises(DecodeError) as ei:
            raw.json()
        assert ei.value.subcode == DECODE_INVALID_JSON
        assert "oops" in ei.value.details["body_excerpt"]


class TestRequestMetadata:
    def test_default_values(self):
        metadata = RequestMetadata()
        assert metadata.client_request_id is None
        assert metadata.global_request_id is None
        assert metadata.service_request_id is None
        assert metadata.http_status_code is None
        assert metadata.timing_ms is None

    def test_is_frozen(self):
        metadata = RequestMetadata(client_request_id="test")
        with pytest.raises(AttributeError):
            metadata.client_request_id = "new-value"  # type: ignore


class TestExtraction:
    def test_flavor_profile_extracts_exact_fields(self):
        body = {"flavor_profile": {"id": "a1", "name": "n1", "provider_name": "p1", "flavor_data": "{}"}}
        result = GetResult(FlavorProfile.from_dict, "flavor_profile", response=_raw(200, body))

        profile = result.extract()

        assert profile == FlavorProfile(id="a1", name="n1", provider_name="p1", flavor_data="{}")
        assert result.extract_err() is None
        assert result.ok is True

    def test_repeated_extract_returns_equal_records(self):
        body = {"flavor": {"id": "f1", "name": "gold", "enabled": True}}
        result = CreateResult(Flavor.from_dict, "flavor", response=_raw(201, body))

        first = result.extract()
        second = result.extract()

        assert first == second
        assert first is not second

    def test_missing_envelope_key_raises(self):
        result = GetResult(Flavor.from_dict, "flavor", response=_raw(200, {"flavors": []}))
        with pytest.raises(DecodeError) as ei:
            result.extract()
        assert ei.value.subcode == DECODE_MISSING_KEY

    def test_null_envelope_value_raises(self):
        result = GetResult(Flavor.from_dict, "flavor", response=_raw(200, {"flavor": None}))
        with pytest.raises(DecodeError):
            result.extract()

    def test_non_object_body_raises(self):
        result = GetResult(Flavor.from_dict, "flavor", response=_raw(200, [1, 2]))
        with pytest.raises(DecodeError) as ei:
            result.extract()
        assert ei.value.subcode == DECODE_SHAPE_MISMATCH

    def test_shape_mismatch_raises(self):
        result = UpdateResult(Flavor.from_dict, "flavor", response=_raw(200, {"flavor": {"enabled": "yes"}}))
        with pytest.raises(DecodeError):
            result.extract()

    def test_envelope_key_override(self):
        body = {"flavor_profile": {"id": "a1"}, "flavorprofile": {"id": "b2"}}
        result = GetResult(FlavorProfile.from_dict, "flavor_profile", response=_raw(200, body))
        assert result.extract("flavorprofile").id == "b2"

    def test_extract_into_without_key_returns_document(self):
        result = Result(response=_raw(200, {"anything": 1}))
        assert result.extract_into() == {"anything": 1}

    def test_with_detail_response_carries_telemetry(self):
        metadata = RequestMetadata(global_request_id="req-g", service_request_id="req-s", http_status_code=200)
        result = GetResult(Flavor.from_dict, "flavor", response=_raw(200, {"flavor": {"id": "f1"}}), metadata=metadata)

        detail = result.with_detail_response()

        assert isinstance(detail, LoadBalancerResponse)
        assert detail.result.id == "f1"
        assert detail.telemetry["global_request_id"] == "req-g"
        assert detail.telemetry["service_request_id"] == "req-s"


class TestStoredFailures:
    def test_status_error_surfaced_without_decoding(self):
        error = HttpStatusError("GET failed", 500)
        # Body is not JSON; decoding it would raise DecodeError instead
        result = GetResult(Flavor.from_dict, "flavor", response=_raw(500, b"Internal Server Error"), error=error)

        with pytest.raises(HttpStatusError) as ei:
            result.extract()

        assert ei.value is error
        assert ei.value.subcode == HTTP_500
        assert result.extract_err() is error
        assert result.ok is False
        assert result.status_code == 500

    def test_transport_error_without_response(self):
        error = TransportError("connection refused")
        result = GetResult(Flavor.from_dict, "flavor", error=error)

        with pytest.raises(TransportError):
            result.extract()
        assert result.status_code is None
        assert len(result.headers) == 0

    def test_delete_204_has_no_error(self):
        result = DeleteResult(response=RawResponse(status_code=204))
        assert result.extract_err() is None
        result.raise_for_error()

    def test_delete_failure_raises_on_demand(self):
        error = HttpStatusError("DELETE failed", 409)
        result = DeleteResult(response=RawResponse(status_code=409), error=error)
        assert result.extract_err() is error
        with pytest.raises(HttpStatusError):
            result.raise_for_error()
