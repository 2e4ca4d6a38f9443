# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

import pytest

from loadbalancer_sdk.core.errors import DecodeError
from loadbalancer_sdk.models import availability_zone, availability_zone_profile, flavor, flavor_profile
from loadbalancer_sdk.models.availability_zone import (
    AvailabilityZone,
    AvailabilityZoneCreateOpts,
    AvailabilityZoneListOpts,
    AvailabilityZoneUpdateOpts,
)
from loadbalancer_sdk.models.availability_zone_profile import (
    AvailabilityZoneProfile,
    AvailabilityZoneProfileCreateOpts,
    AvailabilityZoneProfileListOpts,
    AvailabilityZoneProfileUpdateOpts,
)
from loadbalancer_sdk.models.flavor import Flavor, FlavorCreateOpts, FlavorListOpts, FlavorUpdateOpts
from loadbalancer_sdk.models.flavor_profile import (
    FlavorProfile,
    FlavorProfileCreateOpts,
    FlavorProfileListOpts,
    FlavorProfileUpdateOpts,
)


class TestEnvelopeKeys:
    @pytest.mark.parametrize(
        "module, request_key, response_key, collection_key, links_key",
        [
            (flavor_profile, "flavorprofile", "flavor_profile", "flavorprofiles", "flavor_profile_links"),
            (flavor, "flavor", "flavor", "flavors", "flavor_links"),
            (
                availability_zone_profile,
                "availability_zone_profile",
                "availability_zone_profile",
                "availability_zone_profiles",
                "availabilityzone_profile_links",
            ),
            (
                availability_zone,
                "availability_zone",
                "availability_zone",
                "availability_zones",
                "availability_zones_links",
            ),
        ],
    )
    def test_keys(self, module, request_key, response_key, collection_key, links_key):
        assert module.REQUEST_KEY == request_key
        assert module.RESPONSE_KEY == response_key
        assert module.COLLECTION_KEY == collection_key
        assert module.LINKS_KEY == links_key


class TestFromDict:
    def test_flavor_round_trip_fields(self, flavor_document):
        record = Flavor.from_dict(flavor_document)
        assert record.id == flavor_document["id"]
        assert record.enabled is True
        assert record.to_dict() == flavor_document

    def test_unknown_keys_ignored_and_nulls_keep_defaults(self):
        record = Flavor.from_dict({"id": "f1", "description": None, "created_at": "2024-01-01"})
        assert record.id == "f1"
        assert record.description == ""

    def test_non_object_rejected(self):
        with pytest.raises(DecodeError):
            Flavor.from_dict(["f1"])

    @pytest.mark.parametrize(
        "document",
        [
            {"enabled": "true"},
            {"enabled": 1},
            {"name": 7},
        ],
    )
    def test_type_mismatch_rejected(self, document):
        with pytest.raises(DecodeError):
            Flavor.from_dict(document)

    def test_availability_zone_addressed_by_name(self):
        zone = AvailabilityZone.from_dict(
            {"name": "east", "description": "", "availability_zone_profile_id": "p1", "enabled": False}
        )
        assert zone.name == "east"
        assert not hasattr(zone, "id")


class TestEmbeddedData:
    def test_flavor_data_parsed(self):
        profile = FlavorProfile(id="a1", flavor_data='{"loadbalancer_topology": "SINGLE"}')
        assert profile.load_flavor_data() == {"loadbalancer_topology": "SINGLE"}
        assert FlavorProfile().load_flavor_data() == {}

    def test_invalid_flavor_data_rejected(self):
        with pytest.raises(DecodeError):
            FlavorProfile(id="a1", flavor_data="{nope").load_flavor_data()

    def test_availability_zone_data_parsed(self):
        profile = AvailabilityZoneProfile(availability_zone_data='{"compute_zone": "nova"}')
        assert profile.load_availability_zone_data() == {"compute_zone": "nova"}


class TestOptions:
    def test_availability_zone_list_query(self):
        qs = AvailabilityZoneListOpts(name="east", limit=2, availability_zone_profile_id="p1").to_query_string()
        assert qs == "?availability_zone_profile_id=p1&limit=2&name=east"

    def test_availability_zone_profile_body(self):
        body = AvailabilityZoneProfileCreateOpts(name="p", provider_name="amphora").to_request_body()
        assert body == {
            "availability_zone_profile": {
                "name": "p",
                "provider_name": "amphora",
                "availability_zone_data": "",
            }
        }

    @pytest.mark.parametrize(
        "opts_cls",
        [
            FlavorProfileListOpts,
            FlavorProfileCreateOpts,
            FlavorProfileUpdateOpts,
            FlavorListOpts,
            FlavorCreateOpts,
            FlavorUpdateOpts,
            AvailabilityZoneProfileListOpts,
            AvailabilityZoneProfileCreateOpts,
            AvailabilityZoneProfileUpdateOpts,
            AvailabilityZoneListOpts,
            AvailabilityZoneCreateOpts,
            AvailabilityZoneUpdateOpts,
        ],
    )
    def test_options_classes_documented(self, opts_cls):
        # dataclass fills in a signature when no docstring is written
        assert not opts_cls.__doc__.startswith(opts_cls.__name__ + "(")
