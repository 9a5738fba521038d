# pantry/sales/routes.py
from datetime import date

from flask import request, jsonify

from ..errors import ValidationError
from ..services import sales_service
from ..utils.api import api_ok
from . import bp

def ok(msg, data=None, status=200):
    r = jsonify(api_ok(msg, data)); r.status_code = status; return r

@bp.get("/stats")
def stats():
    """?date=YYYY-MM-DD to report as of another day (defaults to today)."""
    as_of = request.args.get("date")
    if as_of:
        try:
            as_of = date.fromisoformat(as_of)
        except ValueError:
            raise ValidationError("date must be YYYY-MM-DD", {"date": "invalid"})
    return ok("sales stats", sales_service.get_stats(as_of or None))

@bp.get("/daily")
def daily():
    return ok("daily sales", {"items": sales_service.get_daily_breakdown()})
