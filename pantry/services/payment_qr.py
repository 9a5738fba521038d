# pantry/services/payment_qr.py
import base64
from io import BytesIO
from urllib.parse import quote

import qrcode

from ..errors import ValidationError
from ..utils.money import parse_money, round_money

QR_BOX_SIZE = 10
QR_BORDER = 2

# characters encodeURIComponent leaves alone
URI_COMPONENT_SAFE = "!'()*"


def build_upi_uri(payee_id, amount=None, payee_name="", note="", currency="INR") -> str:
    """``upi://pay?pa=..&pn=..&cu=..&tn=..[&am=..]``; ``am`` is left out when there is no amount."""
    if not payee_id:
        raise ValidationError("UPI id is required", {"upiId": "required"})
    uri = (f"upi://pay?pa={quote(str(payee_id), safe='@.-_')}"
           f"&pn={quote(payee_name or '', safe=URI_COMPONENT_SAFE)}"
           f"&cu={currency}"
           f"&tn={quote(note or '', safe=URI_COMPONENT_SAFE)}")
    if amount not in (None, ""):
        amt = parse_money(amount)
        if amt is None or amt < 0:
            raise ValidationError("amount must be a non-negative number", {"amount": "invalid"})
        if amt > 0:
            uri += f"&am={round_money(amt)}"
    return uri


def encode_qr_png(data: str) -> bytes:
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=QR_BOX_SIZE,
        border=QR_BORDER,
    )
    qr.add_data(data)
    qr.make(fit=True)
    img = qr.make_image(fill_color="black", back_color="white")
    buf = BytesIO()
    img.save(buf)
    return buf.getvalue()


def generate_payment_qr(payee_id, amount=None, payee_name="", note="", currency="INR") -> bytes:
    return encode_qr_png(build_upi_uri(payee_id, amount, payee_name, note, currency))


def to_data_url(png: bytes) -> str:
    return "data:image/png;base64," + base64.b64encode(png).decode("ascii")
