"""Unit tests for entity hydration."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from core.domain.hydration import EntityModel
from core.domain.models import Merchant, MerchantMapping, User

merchants = EntityModel(Merchant)


def test_empty_partial_yields_defaults():
    merchant = merchants.hydrate({})

    assert merchant == Merchant()
    assert merchant.id == 0
    assert merchant.title == ""
    assert merchant.created is None
    assert merchant.updated is None
    assert merchant.owner == User()


def test_none_partial_yields_defaults():
    assert merchants.hydrate(None) == merchants.hydrate({})


def test_supplied_fields_override_defaults_and_others_keep_them():
    merchant = merchants.hydrate({"id": 4, "title": "Noodle Bar", "valid_time": "A"})

    assert merchant.id == 4
    assert merchant.title == "Noodle Bar"
    assert merchant.valid_time == "A"
    assert merchant.business_address == ""
    assert merchant.custom_filters == ""


def test_truthy_timestamps_are_coerced_to_datetimes():
    merchant = merchants.hydrate({"created": "2024-05-01T10:00:00Z", "updated": "2024-05-02T08:30:00+00:00"})

    assert merchant.created == datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)
    assert merchant.updated == datetime(2024, 5, 2, 8, 30, tzinfo=timezone.utc)


@pytest.mark.parametrize("empty", [None, "", 0])
def test_falsy_timestamps_stay_absent(empty):
    mapping = EntityModel(MerchantMapping).hydrate({"created": empty, "updated": empty})

    assert mapping.created is None
    assert mapping.updated is None


def test_relation_is_hydrated_from_raw_record():
    merchant = merchants.hydrate({"owner": {"id": 3, "username": "li", "created": ""}})

    assert isinstance(merchant.owner, User)
    assert merchant.owner.id == 3
    assert merchant.owner.username == "li"
    assert merchant.owner.created is None


def test_null_relation_becomes_default_entity():
    assert merchants.hydrate({"owner": None}).owner == User()


def test_hydration_is_idempotent():
    raw = {"id": 9, "title": "Tea", "owner": {"id": 1, "name": "Wang"}, "created": "2024-01-01T00:00:00Z"}
    once = merchants.hydrate(raw)

    assert merchants.hydrate(once) == once
    assert merchants.hydrate({"owner": once.owner}).owner == once.owner


def test_unknown_keys_are_ignored():
    merchant = merchants.hydrate({"title": "X", "max_permission": 2, "owner_id": 5})

    assert merchant.title == "X"
    assert not hasattr(merchant, "max_permission")


def test_entities_are_immutable_and_merge_returns_a_new_value():
    merchant = merchants.hydrate({"id": 1, "title": "Old"})

    with pytest.raises(ValidationError):
        merchant.title = "New"

    renamed = merchants.merge(merchant, {"title": "New"})
    assert renamed.title == "New"
    assert renamed.id == 1
    assert merchant.title == "Old"


def test_set_fields_only_reports_non_default_values():
    merchant = merchants.hydrate({"title": "Tea", "business_district": "commercial"})

    assert merchants.set_fields(merchant) == {"title": "Tea", "business_district": "commercial"}
    assert merchants.set_fields(merchants.hydrate({})) == {}
