from datetime import date

import pytest

from pantry.errors import ValidationError
from pantry.services import order_service, sales_service


def _order(total, on, method="cash"):
    line = {"product_id": 1, "name": "Organic Health Mix", "unit_price": total, "quantity": 1}
    return order_service.create_order(None, method, [line], order_date=on)


def test_stats_on_empty_ledger(app):
    assert sales_service.get_stats(date(2024, 1, 15)) == {
        "today": {"orders": 0, "total": 0},
        "monthly": {"orders": 0, "total": 0},
        "totalOrders": 0,
    }


def test_stats_windows(app):
    _order(100, "2024-01-15")
    _order(150, "2024-01-15")
    _order(50, "2024-01-02")
    _order(70, "2024-02-01")
    _order(30, "2023-12-31")

    stats = sales_service.get_stats(date(2024, 1, 15))
    assert stats["today"] == {"orders": 2, "total": 250.0}
    assert stats["monthly"] == {"orders": 3, "total": 300.0}
    assert stats["totalOrders"] == 5


def test_stats_december_rolls_over_year(app):
    _order(30, "2023-12-31")
    _order(70, "2024-01-01")
    stats = sales_service.get_stats(date(2023, 12, 5))
    assert stats["monthly"] == {"orders": 1, "total": 30.0}
    assert stats["today"]["orders"] == 0


def test_stats_default_is_today(app):
    _order(10, None)
    stats = sales_service.get_stats()
    assert stats["today"] == {"orders": 1, "total": 10.0}


def test_daily_breakdown(app):
    _order(100, "2024-01-01")
    _order(150, "2024-01-01")
    _order(50, "2024-01-02")
    assert sales_service.get_daily_breakdown() == [
        {"date": "2024-01-02", "orders": 1, "total": 50.0},
        {"date": "2024-01-01", "orders": 2, "total": 250.0},
    ]


def test_daily_breakdown_empty(app):
    assert sales_service.get_daily_breakdown() == []


def test_sales_api(client, app):
    _order(100, "2024-01-01")
    r = client.get("/api/sales/stats?date=2024-01-01")
    data = r.get_json()["data"]
    assert data["today"] == {"orders": 1, "total": 100.0}
    assert data["totalOrders"] == 1

    r = client.get("/api/sales/daily")
    assert r.get_json()["data"]["items"] == [{"date": "2024-01-01", "orders": 1, "total": 100.0}]

    assert client.get("/api/sales/stats?date=yesterday").status_code == 400


def test_export_sales_cli(app, runner, tmp_path):
    _order(100, "2024-01-01")
    _order(50, "2024-01-02")
    out = tmp_path / "daily.csv"
    result = runner.invoke(args=["export-sales", "--out", str(out)])
    assert result.exit_code == 0, result.output
    lines = out.read_text().splitlines()
    assert lines[0] == "Date,Orders,Total"
    assert lines[1] == "2024-01-02,1,50.0"
    assert len(lines) == 3


def test_stats_accepts_iso_string(app):
    _order(100, "2024-01-15")
    assert sales_service.get_stats("2024-01-15")["today"] == {"orders": 1, "total": 100.0}


def test_stats_rejects_bad_date_string(app):
    with pytest.raises(ValidationError):
        sales_service.get_stats("15/01/2024")
