import logging

import pytest

from apps.gopay_service.services.topup import (
    AllowListRegistry,
    TopupRequest,
    TopupStatus,
    build_default_registry,
    decide,
    make_reference_id_factory,
)
from libs.common.constants import (
    MESSAGE_INVALID_PARAMETERS,
    MESSAGE_PHONE_NOT_REGISTERED,
    MESSAGE_TOPUP_SUCCESS,
)


def _request(phone_number="081293846571", amount=50000, transaction_id="T1", partner_id="BNI") -> TopupRequest:
    return TopupRequest(
        partner_id=partner_id,
        phone_number=phone_number,
        amount=amount,
        upstream_transaction_id=transaction_id,
    )


def test_registered_number_succeeds_with_reference_id():
    response = decide(_request(), build_default_registry())

    assert response.status == TopupStatus.SUCCESS
    assert response.is_success
    assert response.reference_id
    assert response.reference_id.startswith("GP-SIM-")
    assert response.upstream_transaction_id == "T1"
    assert response.message == MESSAGE_TOPUP_SUCCESS


def test_unregistered_number_fails():
    response = decide(_request(phone_number="000000000000", transaction_id="T2"), build_default_registry())

    assert response.status == TopupStatus.FAILED
    assert not response.is_success
    assert response.reference_id is None
    assert response.upstream_transaction_id == "T2"
    assert response.message == MESSAGE_PHONE_NOT_REGISTERED


@pytest.mark.parametrize(
    ("phone_number", "amount"),
    [
        ("", 50000),
        (None, 50000),
        ("081293846571", 0),
        ("081293846571", -100),
        ("", 0),
    ],
)
def test_invalid_parameters_fail_before_registry_lookup(phone_number, amount):
    class _ExplodingRegistry(AllowListRegistry):
        def is_registered(self, phone_number):
            raise AssertionError("registry must not be consulted for invalid input")

    response = decide(_request(phone_number=phone_number, amount=amount, transaction_id="T3"), _ExplodingRegistry([]))

    assert response.status == TopupStatus.FAILED
    assert response.reference_id is None
    assert response.upstream_transaction_id == "T3"
    assert response.message == MESSAGE_INVALID_PARAMETERS


def test_invalid_phone_wins_over_unregistered():
    response = decide(_request(phone_number="", transaction_id="T4"), AllowListRegistry(["081293846571"]))
    assert response.message == MESSAGE_INVALID_PARAMETERS


def test_missing_transaction_id_is_echoed_as_none():
    response = decide(_request(transaction_id=None), build_default_registry())
    assert response.status == TopupStatus.SUCCESS
    assert response.upstream_transaction_id is None


def test_repeated_identical_requests_get_distinct_reference_ids():
    registry = build_default_registry()
    request = _request(transaction_id="DUP-1")

    first = decide(request, registry)
    second = decide(request, registry)

    assert first.status == second.status == TopupStatus.SUCCESS
    assert first.reference_id != second.reference_id


def test_partner_id_does_not_affect_outcome():
    registry = build_default_registry()
    assert decide(_request(partner_id=None), registry).status == TopupStatus.SUCCESS
    assert decide(_request(partner_id=""), registry).status == TopupStatus.SUCCESS


def test_reference_id_factory_is_used():
    response = decide(_request(), build_default_registry(), lambda: "REF-42")
    assert response.reference_id == "REF-42"


def test_make_reference_id_factory_applies_prefix():
    generate = make_reference_id_factory("TEST-")
    ref_id = generate()
    assert ref_id.startswith("TEST-")
    assert len(ref_id) == len("TEST-") + 36


def test_decide_logs_request_and_disposition(caplog):
    caplog.set_level(logging.INFO, logger="apps.gopay_service.services.topup.service")

    decide(_request(phone_number="000000000000", transaction_id="T9"), build_default_registry())

    messages = [record.getMessage() for record in caplog.records]
    assert any("Top-up request received" in message and "000000000000" in message for message in messages)
    failures = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert len(failures) == 1
    assert "T9" in failures[0].getMessage()
    assert "not registered" in failures[0].getMessage()
