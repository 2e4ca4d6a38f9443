# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

"""Tests for the resource operation namespaces."""

import json
import unittest
from dataclasses import dataclass, field
from unittest.mock import MagicMock

import requests
from azure.core.credentials import AccessToken, TokenCredential

from loadbalancer_sdk.client import LoadBalancerClient
from loadbalancer_sdk.core._error_codes import ENCODING_UNSUPPORTED_TYPE, HTTP_404, HTTP_500, TRANSPORT_AUTH
from loadbalancer_sdk.core.errors import DecodeError, EncodingError, HttpStatusError, TransportError
from loadbalancer_sdk.core.pagination import PagerState
from loadbalancer_sdk.core.results import CreateResult, DeleteResult, GetResult, UpdateResult
from loadbalancer_sdk.models.availability_zone import AvailabilityZoneUpdateOpts
from loadbalancer_sdk.models.availability_zone_profile import AvailabilityZoneProfileListOpts
from loadbalancer_sdk.models.flavor import Flavor, FlavorCreateOpts, FlavorListOpts, FlavorUpdateOpts
from loadbalancer_sdk.models.flavor_profile import FlavorProfile, FlavorProfileCreateOpts
from tests.unit.test_helpers import ENDPOINT, TestableService

PROFILE = {"id": "a1", "name": "n1", "provider_name": "p1", "flavor_data": "{}"}


@dataclass(frozen=True)
class _BadListOpts:
    limit: float = field(default=1.5, metadata={"q": "limit"})


class _OperationsTestCase(unittest.TestCase):
    def setUp(self):
        credential = MagicMock(spec=TokenCredential)
        credential.get_token.return_value = AccessToken("test-token", 9999999999)
        self.client = LoadBalancerClient(ENDPOINT, credential)

    def use(self, responses):
        service = TestableService(responses)
        self.client._service = service
        return service

    def use_failing_credential(self):
        self.client.auth.credential.get_token.side_effect = RuntimeError("token service unreachable")
        service = self.use([])
        service.auth = self.client.auth
        return service


class TestSingleResourceOperations(_OperationsTestCase):
    def test_get_flavor_profile(self):
        service = self.use([(200, {}, {"flavor_profile": PROFILE})])

        result = self.client.flavor_profiles.get("a1")

        self.assertIsInstance(result, GetResult)
        self.assertEqual(result.extract(), FlavorProfile(**PROFILE))
        method, url, _ = service.calls[0]
        self.assertEqual(method, "get")
        self.assertEqual(url, ENDPOINT + "/lbaas/flavorprofiles/a1")

    def test_create_flavor_profile_posts_request_envelope(self):
        service = self.use([(201, {}, {"flavor_profile": PROFILE})])

        result = self.client.flavor_profiles.create(
            FlavorProfileCreateOpts(name="n1", provider_name="p1", flavor_data="{}")
        )

        self.assertIsInstance(result, CreateResult)
        self.assertEqual(result.extract().id, "a1")
        method, url, kwargs = service.calls[0]
        self.assertEqual((method, url), ("post", ENDPOINT + "/lbaas/flavorprofiles"))
        self.assertEqual(kwargs["json"], {"flavorprofile": {"name": "n1", "provider_name": "p1", "flavor_data": "{}"}})

    def test_flavor_paths_and_keys(self):
        service = self.use([(200, {}, {"flavor": {"id": "f1", "name": "gold", "enabled": True}})])

        flavor = self.client.flavors.get("f1").extract()

        self.assertEqual(flavor, Flavor(id="f1", name="gold", enabled=True))
        self.assertEqual(service.calls[0][1], ENDPOINT + "/lbaas/flavors/f1")

    def test_update_accepts_200_and_202(self):
        service = self.use(
            [
                (200, {}, {"flavor": {"id": "f1", "name": "a"}}),
                (202, {}, {"flavor": {"id": "f1", "name": "b"}}),
            ]
        )

        first = self.client.flavors.update("f1", FlavorUpdateOpts(name="a"))
        second = self.client.flavors.update("f1", FlavorUpdateOpts(name="b"))

        self.assertIsInstance(first, UpdateResult)
        self.assertEqual(first.extract().name, "a")
        self.assertEqual(second.extract().name, "b")
        method, url, kwargs = service.calls[0]
        self.assertEqual((method, url), ("put", ENDPOINT + "/lbaas/flavors/f1"))
        self.assertEqual(kwargs["json"]["flavor"]["enabled"], False)

    def test_delete_204_has_no_error(self):
        service = self.use([(204, {}, None)])

        result = self.client.flavors.delete("f1")

        self.assertIsInstance(result, DeleteResult)
        self.assertIsNone(result.extract_err())
        self.assertEqual(service.calls[0][0], "delete")

    def test_server_error_stored_not_raised(self):
        self.use([(500, {"x-openstack-request-id": "req-s"}, "Internal Server Error")])

        result = self.client.flavor_profiles.get("a1")

        err = result.extract_err()
        self.assertIsInstance(err, HttpStatusError)
        self.assertEqual(err.subcode, HTTP_500)
        self.assertEqual(result.status_code, 500)
        self.assertEqual(result.metadata.service_request_id, "req-s")
        with self.assertRaises(HttpStatusError):
            result.extract()

    def test_delete_not_found(self):
        self.use([(404, {}, {"faultcode": "Client", "faultstring": "Flavor f1 could not be found."})])

        err = self.client.flavors.delete("f1").extract_err()

        self.assertEqual(err.subcode, HTTP_404)
        self.assertEqual(err.details["fault_string"], "Flavor f1 could not be found.")

    def test_transport_failure_stored(self):
        self.use([requests.exceptions.ConnectionError("refused")])

        result = self.client.flavors.get("f1")

        self.assertIsInstance(result.extract_err(), TransportError)
        self.assertIsNone(result.response)

    def test_credential_failure_stored_as_transport_error(self):
        service = self.use_failing_credential()

        result = self.client.flavors.get("f1")

        self.assertIsInstance(result, GetResult)
        err = result.extract_err()
        self.assertIsInstance(err, TransportError)
        self.assertEqual(err.subcode, TRANSPORT_AUTH)
        self.assertIsInstance(err.__cause__, RuntimeError)
        self.assertEqual(service.calls, [])

    def test_body_encoding_failure_stored_without_request(self):
        service = self.use([])

        @dataclass(frozen=True)
        class _Bad:
            name: object = field(default_factory=object, metadata={"json": "name"})

        result = self.client.flavors.create(_Bad())

        self.assertIsInstance(result.extract_err(), EncodingError)
        self.assertEqual(service.calls, [])

    def test_wrong_envelope_is_decode_error(self):
        self.use([(200, {}, {"flavors": {"id": "f1"}})])

        with self.assertRaises(DecodeError):
            self.client.flavors.get("f1").extract()

    def test_availability_zone_addressed_by_name(self):
        service = self.use([(200, {}, {"availability_zone": {"name": "zone a", "enabled": True}})])

        zone = self.client.availability_zones.update("zone a", AvailabilityZoneUpdateOpts(enabled=True)).extract()

        self.assertEqual(zone.name, "zone a")
        self.assertEqual(service.calls[0][1], ENDPOINT + "/lbaas/availabilityzones/zone%20a")

    def test_calls_share_nothing_but_each_has_global_request_id(self):
        service = self.use([(204, {}, None), (204, {}, None)])

        first = self.client.flavors.delete("f1")
        second = self.client.flavors.delete("f2")

        self.assertTrue(first.metadata.global_request_id.startswith("req-"))
        self.assertNotEqual(first.metadata.global_request_id, second.metadata.global_request_id)
        sent = service.calls[0][2]["headers"]["X-OpenStack-Request-ID"]
        self.assertEqual(sent, first.metadata.global_request_id)


class TestListOperations(_OperationsTestCase):
    def _page(self, ids, next_url=None):
        body = {"flavors": [{"id": i, "name": i.upper()} for i in ids]}
        if next_url:
            body["flavor_links"] = [{"href": next_url, "rel": "next"}]
        return (200, {}, body)

    def test_list_is_lazy_and_follows_links(self):
        root = ENDPOINT + "/lbaas/flavors"
        p2 = root + "?limit=2&marker=b"
        service = self.use([self._page(["a", "b"], p2), self._page(["c"])])

        pager = self.client.flavors.list(FlavorListOpts(limit=2))
        self.assertEqual(service.calls, [])

        names = [f.name for f in pager]

        self.assertEqual(names, ["A", "B", "C"])
        self.assertEqual([c[1] for c in service.calls], [root + "?limit=2", p2])
        self.assertEqual(pager.state, PagerState.EXHAUSTED)

    def test_each_page_fetch_has_own_global_request_id(self):
        root = ENDPOINT + "/lbaas/flavors"
        service = self.use([self._page(["a"], root + "?marker=a"), (204, {}, None)])

        list(self.client.flavors.list())

        ids = [c[2]["headers"]["X-OpenStack-Request-ID"] for c in service.calls]
        self.assertEqual(len(ids), 2)
        self.assertNotEqual(ids[0], ids[1])

    def test_list_status_error_fails_pager(self):
        self.use([(403, {}, {"faultstring": "Policy does not allow this request to be performed."})])

        pager = self.client.flavors.list()

        with self.assertRaises(HttpStatusError):
            list(pager)
        self.assertEqual(pager.state, PagerState.FAILED)

    def test_credential_failure_fails_pager(self):
        self.use_failing_credential()

        pager = self.client.flavors.list()

        for _ in range(2):
            with self.assertRaises(TransportError) as cm:
                list(pager)
            self.assertEqual(cm.exception.subcode, TRANSPORT_AUTH)
        self.assertEqual(pager.state, PagerState.FAILED)

    def test_list_encoding_failure_yields_failed_pager(self):
        service = self.use([])

        pager = self.client.flavors.list(_BadListOpts())

        self.assertEqual(pager.state, PagerState.FAILED)
        with self.assertRaises(EncodingError) as cm:
            list(pager)
        self.assertEqual(cm.exception.subcode, ENCODING_UNSUPPORTED_TYPE)
        self.assertEqual(service.calls, [])

    def test_availability_zone_profiles_collection_key(self):
        self.use(
            [
                (
                    200,
                    {},
                    {
                        "availability_zone_profiles": [
                            {"id": "z1", "name": "east", "availability_zone_data": json.dumps({"compute_zone": "a"})}
                        ],
                        "availabilityzone_profile_links": [],
                    },
                )
            ]
        )

        profiles = self.client.availability_zone_profiles.list(AvailabilityZoneProfileListOpts(name="east")).all_records()

        self.assertEqual([p.id for p in profiles], ["z1"])
        self.assertEqual(profiles[0].load_availability_zone_data(), {"compute_zone": "a"})


if __name__ == "__main__":
    unittest.main()
