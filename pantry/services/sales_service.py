# pantry/services/sales_service.py
from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import func

from ..errors import ValidationError
from ..extensions import db
from ..model import Order
from ..utils.money import to_float


def _as_date(as_of) -> date:
    if as_of is None:
        return date.today()
    if isinstance(as_of, datetime):
        return as_of.date()
    if isinstance(as_of, date):
        return as_of
    try:
        return date.fromisoformat(str(as_of).strip())
    except ValueError:
        raise ValidationError("date must be YYYY-MM-DD", {"date": "invalid"})


def _month_bounds(d: date) -> tuple[date, date]:
    start = d.replace(day=1)
    if start.month == 12:
        end = start.replace(year=start.year + 1, month=1)
    else:
        end = start.replace(month=start.month + 1)
    return start, end


def _window(*criteria) -> dict:
    count, total = (db.session.query(func.count(Order.id),
                                     func.coalesce(func.sum(Order.total_amount), 0))
                    .filter(*criteria)
                    .one())
    return {"orders": int(count or 0), "total": to_float(total)}


def get_stats(as_of=None) -> dict:
    """Today / this month / all-time figures relative to ``as_of`` (local date)."""
    day = _as_date(as_of)
    month_start, next_month = _month_bounds(day)
    total_orders = db.session.query(func.count(Order.id)).scalar() or 0
    return {
        "today": _window(Order.order_date == day),
        "monthly": _window(Order.order_date >= month_start, Order.order_date < next_month),
        "totalOrders": int(total_orders),
    }


def get_daily_breakdown() -> list[dict]:
    rows = (db.session.query(Order.order_date,
                             func.count(Order.id),
                             func.coalesce(func.sum(Order.total_amount), 0))
            .group_by(Order.order_date)
            .order_by(Order.order_date.desc())
            .all())
    return [
        {"date": d.isoformat(), "orders": int(n), "total": to_float(total)}
        for d, n, total in rows
    ]


def export_daily_breakdown(path: str) -> int:
    """Write the daily breakdown to ``path`` (.xlsx or .csv); returns the row count."""
    import pandas as pd

    df = pd.DataFrame(get_daily_breakdown(), columns=["date", "orders", "total"])
    df.columns = ["Date", "Orders", "Total"]
    if str(path).lower().endswith(".xlsx"):
        df.to_excel(path, index=False)
    else:
        df.to_csv(path, index=False)
    return len(df)
