import base64

import pytest

from pantry.errors import ValidationError
from pantry.services.payment_qr import build_upi_uri, generate_payment_qr

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def test_uri_with_amount():
    uri = build_upi_uri("paatispantry@paytm", 598, "Paati's Pantry", "Order Payment")
    assert uri == ("upi://pay?pa=paatispantry@paytm&pn=Paati's%20Pantry"
                   "&cu=INR&tn=Order%20Payment&am=598.00")


@pytest.mark.parametrize("amount", [None, "", 0, "0"])
def test_uri_omits_missing_or_zero_amount(amount):
    uri = build_upi_uri("shop@upi", amount, "Shop", "Note")
    assert "am=" not in uri
    assert uri.endswith("&tn=Note")


@pytest.mark.parametrize("amount", [-5, "lots"])
def test_uri_rejects_bad_amount(amount):
    with pytest.raises(ValidationError):
        build_upi_uri("shop@upi", amount, "Shop", "Note")


def test_uri_requires_payee():
    with pytest.raises(ValidationError):
        build_upi_uri("", 10)


def test_generate_payment_qr_returns_png():
    png = generate_payment_qr("shop@upi", 10, "Shop", "Order Payment")
    assert png.startswith(PNG_MAGIC)


def test_qrcode_endpoint_uses_configured_payee(client):
    r = client.post("/api/upi/qrcode", json={"amount": 448})
    data = r.get_json()["data"]
    assert data["upiId"] == "paatispantry@paytm"
    assert data["upiUrl"].endswith("&am=448.00")
    prefix = "data:image/png;base64,"
    assert data["qrCode"].startswith(prefix)
    assert base64.b64decode(data["qrCode"][len(prefix):]).startswith(PNG_MAGIC)


def test_qrcode_png_endpoint(client):
    r = client.get("/api/upi/qrcode.png?amount=10")
    assert r.status_code == 200
    assert r.mimetype == "image/png"
    assert r.data.startswith(PNG_MAGIC)


def test_uri_leaves_unreserved_punctuation_unescaped():
    uri = build_upi_uri("shop@upi", None, "Paati's (Pantry)!", "Order *1*")
    assert "&pn=Paati's%20(Pantry)!" in uri
    assert uri.endswith("&tn=Order%20*1*")
