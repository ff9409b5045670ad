from __future__ import annotations

from datetime import datetime, timedelta

from fuelops.data.filters import SalesFilters, apply_sales_filters, serialize_filters
from fuelops.data.models import FuelType, Transaction
from fuelops.data.views import transactions_frame


def _frame():
    now = datetime(2026, 1, 1, 12, 0)
    return transactions_frame(
        [
            Transaction("TRX-1001", now, FuelType.PETROL_95, 10.0, 15.0, 1),
            Transaction("TRX-1002", now - timedelta(minutes=5), FuelType.DIESEL_50, 20.0, 30.0, 2),
            Transaction("TRX-2010", now - timedelta(minutes=9), FuelType.DIESEL_500, 30.0, 45.0, 2),
        ]
    )


def test_query_matches_fuel_type_case_insensitively() -> None:
    filtered = apply_sales_filters(_frame(), SalesFilters(query="diesel"))

    assert list(filtered["id"]) == ["TRX-1002", "TRX-2010"]


def test_query_matches_transaction_id_substring() -> None:
    filtered = apply_sales_filters(_frame(), SalesFilters(query="TRX-10"))

    assert list(filtered["id"]) == ["TRX-1001", "TRX-1002"]


def test_query_without_match_returns_empty_frame() -> None:
    filtered = apply_sales_filters(_frame(), SalesFilters(query="kerosene"))

    assert filtered.empty


def test_blank_query_keeps_everything_and_records_filters() -> None:
    filtered = apply_sales_filters(_frame(), SalesFilters(query="   "))

    assert len(filtered) == 3
    assert filtered.attrs["applied_filters"] == {"query": "   ", "fuel_types": None, "pump_ids": None}


def test_fuel_and_pump_restrictions_combine_with_query() -> None:
    filters = SalesFilters(query="diesel", fuel_types=["Diesel 500ppm"], pump_ids=[2])

    filtered = apply_sales_filters(_frame(), filters)

    assert list(filtered["id"]) == ["TRX-2010"]
    assert serialize_filters(filters)["pump_ids"] == [2]


def test_single_restriction_without_query() -> None:
    by_pump = apply_sales_filters(_frame(), SalesFilters(pump_ids=[1]))
    by_fuel = apply_sales_filters(_frame(), SalesFilters(fuel_types=["Diesel 50ppm", "Petrol 95"]))

    assert list(by_pump["id"]) == ["TRX-1001"]
    assert list(by_fuel["id"]) == ["TRX-1001", "TRX-1002"]


def test_empty_selections_do_not_restrict() -> None:
    filtered = apply_sales_filters(_frame(), SalesFilters(fuel_types=[], pump_ids=[]))

    assert len(filtered) == 3
