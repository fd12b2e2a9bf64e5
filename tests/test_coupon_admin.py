import pytest

from checkout_api.model import Coupon


def test_create_coupon(client, app):
    r = client.post("/coupons", json={
        "code": " summer15 ", "ctype": "percent", "value": 15,
        "min_order_amount": 40, "usage_limit": 100,
        "valid_from": "2026-01-01T00:00:00Z", "expires_at": "2026-12-31T23:59:59+07:00",
    })
    assert r.status_code == 201
    body = r.get_json()
    assert body["status"] is True
    assert body["data"]["code"] == "SUMMER15"
    assert body["data"]["expires_at"] == "2026-12-31T16:59:59"
    assert Coupon.query.filter_by(code="SUMMER15").count() == 1


def test_legacy_fixed_type_is_stored_as_amount(client, app):
    r = client.post("/coupons", json={"code": "TENOFF", "ctype": "fixed", "value": 10})
    assert r.status_code == 201
    assert r.get_json()["data"]["ctype"] == "amount"


@pytest.mark.parametrize("payload,message", [
    ({"ctype": "percent", "value": 5}, "code is required"),
    ({"code": "X", "ctype": "bogo", "value": 5}, "ctype must be 'percent' or 'amount'"),
    ({"code": "X", "value": 0}, "value must be > 0"),
    ({"code": "X", "value": 120}, "percent coupon must be <= 100"),
    ({"code": "X", "value": "ten"}, "value and min_order_amount must be numeric"),
    ({"code": "X", "value": "NaN"}, "value and min_order_amount must be numeric"),
    ({"code": "X", "ctype": "amount", "value": "Infinity"}, "value and min_order_amount must be numeric"),
    ({"code": "X", "value": 5, "min_order_amount": "sNaN"}, "value and min_order_amount must be numeric"),
    ({"code": "X", "value": 5, "expires_at": "tomorrow"}, "Invalid datetime format for expires_at"),
])
def test_create_coupon_validation(client, app, payload, message):
    r = client.post("/coupons", json=payload)
    assert r.status_code == 400
    assert r.get_json()["message"] == message


def test_duplicate_code_is_case_insensitive(client, seeded):
    r = client.post("/coupons", json={"code": "save10", "value": 5})
    assert r.status_code == 400
    assert r.get_json()["message"] == "Coupon code already exists"


def test_create_requires_json(client, app):
    r = client.post("/coupons", data="code=X")
    assert r.status_code == 415


def test_list_coupons(client, seeded):
    codes = [c["code"] for c in client.get("/coupons").get_json()["data"]]
    assert set(codes) == {"SAVE10", "OLD", "OFF", "LIMITED"}
    inactive = client.get("/coupons?active=false").get_json()["data"]
    assert [c["code"] for c in inactive] == ["OFF"]
