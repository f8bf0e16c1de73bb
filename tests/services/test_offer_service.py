# tests/services/test_offer_service.py
from datetime import timedelta
from decimal import Decimal
from uuid import uuid4

import pytest
from pydantic import ValidationError

from catalog_core.core.results import ErrorCode
from catalog_core.db.repositories.store_repository import StoreRepository
from catalog_core.schemas.offer import OfferCreate, OfferState, OfferUpdate


def test_create_offer(offer_service, vendor, offer_payload):
    verdict = offer_service.create_offer(vendor, OfferCreate(**offer_payload, discount_percent=5))
    assert verdict.ok

    offer = offer_service.get_offer(verdict.value.id)
    assert offer.discount_percent == 20
    assert offer.original_price == Decimal("100.00")
    assert offer.discounted_price == Decimal("80.00")
    assert offer.title == "Ramadan deal"
    assert offer.start_date.tzinfo is not None


def test_create_offer_for_foreign_store(offer_service, other_vendor, offer_payload):
    verdict = offer_service.create_offer(other_vendor, OfferCreate(**offer_payload))
    assert verdict.code == ErrorCode.FORBIDDEN


def test_create_offer_for_missing_product(offer_service, vendor, offer_payload):
    offer_payload["product_id"] = uuid4()
    verdict = offer_service.create_offer(vendor, OfferCreate(**offer_payload))
    assert verdict.code == ErrorCode.NOT_FOUND


def test_update_offer_recomputes_percent(offer_service, vendor, offer_payload):
    offer_id = offer_service.create_offer(vendor, OfferCreate(**offer_payload)).value.id

    verdict = offer_service.update_offer(vendor, offer_id, OfferUpdate(discounted_price=Decimal("75")))
    assert verdict.ok
    assert offer_service.get_offer(offer_id).discount_percent == 25

    verdict = offer_service.update_offer(vendor, offer_id, OfferUpdate(title="Eid deal"))
    assert verdict.ok
    stored = offer_service.get_offer(offer_id)
    assert stored.discount_percent == 25
    assert stored.title == "Eid deal"


def test_admin_can_update_any_offer(offer_service, vendor, admin, offer_payload):
    offer_id = offer_service.create_offer(vendor, OfferCreate(**offer_payload)).value.id
    verdict = offer_service.update_offer(admin, offer_id, OfferUpdate(is_active=False))
    assert verdict.ok
    assert offer_service.get_offer(offer_id).is_active is False


def test_offer_status_follows_clock(offer_service, vendor, offer_payload, now):
    offer_id = offer_service.create_offer(vendor, OfferCreate(**offer_payload)).value.id

    status = offer_service.get_offer_status(offer_id)
    assert status.state == OfferState.ACTIVE
    assert status.remaining.days == 13
    assert status.remaining.is_expired is False

    offer_service.update_offer(vendor, offer_id, OfferUpdate(is_active=False))
    assert offer_service.get_offer_status(offer_id).state == OfferState.INACTIVE

    offer_service.clock = lambda: now + timedelta(days=30)
    assert offer_service.get_offer_status(offer_id).state == OfferState.INACTIVE
    assert offer_service.get_offer_status(uuid4()) is None


def test_active_offers_for_product(offer_service, db_session, vendor, offer_payload, now):
    cheaper_store = StoreRepository(db_session).create(name="Extra", owner_user_id=vendor.id)
    running = offer_service.create_offer(vendor, OfferCreate(**offer_payload)).value
    cheaper = offer_service.create_offer(
        vendor,
        OfferCreate(**{**offer_payload, "store_id": cheaper_store.id, "discounted_price": "70.00"}),
    ).value
    offer_service.create_offer(
        vendor,
        OfferCreate(
            **{
                **offer_payload,
                "start_date": now + timedelta(days=2),
                "end_date": now + timedelta(days=10),
            }
        ),
    )

    active = offer_service.list_active_offers_for_product(offer_payload["product_id"])
    assert [o.id for o in active] == [cheaper.id, running.id]


def test_delete_offer(offer_service, vendor, other_vendor, offer_payload):
    offer_id = offer_service.create_offer(vendor, OfferCreate(**offer_payload)).value.id

    assert offer_service.delete_offer(other_vendor, offer_id).code == ErrorCode.FORBIDDEN
    assert offer_service.get_offer(offer_id) is not None

    assert offer_service.delete_offer(vendor, offer_id).ok
    assert offer_service.get_offer(offer_id) is None
    assert offer_service.delete_offer(vendor, offer_id).code == ErrorCode.NOT_FOUND


def test_one_cent_discount_is_stored_strictly_ordered(offer_service, vendor, offer_payload):
    offer_payload["original_price"] = "100.01"
    offer_payload["discounted_price"] = "100.00"
    offer_id = offer_service.create_offer(vendor, OfferCreate(**offer_payload)).value.id

    offer = offer_service.get_offer(offer_id)
    assert offer.original_price == Decimal("100.01")
    assert offer.discounted_price == Decimal("100.00")
    assert offer.discounted_price < offer.original_price
    assert offer.discount_percent == 0


@pytest.mark.parametrize("original, discounted", [("100.004", "100.001"), ("100.00", "0.001")])
def test_sub_cent_prices_never_reach_storage(offer_service, offer_payload, original, discounted):
    offer_payload["original_price"] = original
    offer_payload["discounted_price"] = discounted
    with pytest.raises(ValidationError):
        OfferCreate(**offer_payload)

    assert offer_service.offer_repo.list_by_product(offer_payload["product_id"]) == []


def test_sub_cent_update_leaves_offer_untouched(offer_service, vendor, offer_payload):
    offer_id = offer_service.create_offer(vendor, OfferCreate(**offer_payload)).value.id
    with pytest.raises(ValidationError):
        offer_service.update_offer(vendor, offer_id, OfferUpdate(discounted_price="0.001"))

    assert offer_service.get_offer(offer_id).discounted_price == Decimal("80.00")
