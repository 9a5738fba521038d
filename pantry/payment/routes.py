# pantry/payment/routes.py
from flask import current_app, request, jsonify, Response

from ..services.payment_qr import build_upi_uri, encode_qr_png, to_data_url
from ..utils.api import api_ok
from . import bp

def ok(msg, data=None, status=200):
    r = jsonify(api_ok(msg, data)); r.status_code = status; return r

def _uri_from(args):
    cfg = current_app.config
    return build_upi_uri(
        args.get("upiId") or cfg["UPI_PAYEE_ID"],
        args.get("amount"),
        args.get("name") or cfg["UPI_PAYEE_NAME"],
        args.get("transactionNote") or args.get("note") or cfg["UPI_DEFAULT_NOTE"],
        cfg["UPI_CURRENCY"],
    )

@bp.post("/qrcode")
def qrcode_data_url():
    """Body: upiId, amount, name, transactionNote (all optional)."""
    data = request.get_json(silent=True) or {}
    upi_url = _uri_from(data)
    return ok("qrcode", {
        "qrCode": to_data_url(encode_qr_png(upi_url)),
        "upiUrl": upi_url,
        "upiId": data.get("upiId") or current_app.config["UPI_PAYEE_ID"],
    })

@bp.get("/qrcode.png")
def qrcode_png():
    png = encode_qr_png(_uri_from(request.args))
    return Response(png, mimetype="image/png")
