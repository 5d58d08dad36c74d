"""
Tests for report endpoints and the reporting facade.
"""
from decimal import Decimal

from tripledger.models import Expense
from tripledger.services import report_service


def test_trip_summary(client, guest_headers, create_trip, create_expense):
    trip = create_trip(initial_cash="500.00")
    create_expense(trip["id"], "120.00", payment_type="Dinheiro", category="Alimentação")
    create_expense(trip["id"], "80.00", payment_type="PIX", category="Combustível")

    response = client.get(f"/api/reports/trip/{trip['id']}", headers=guest_headers)
    assert response.status_code == 200
    body = response.json()

    assert body["trip"]["id"] == trip["id"]
    assert Decimal(body["totalExpenses"]) == Decimal("200.00")
    assert Decimal(body["cashExpenses"]) == Decimal("120.00")
    assert Decimal(body["remainingCash"]) == Decimal("380.00")
    assert body["expensesCount"] == 2
    assert {k: Decimal(v) for k, v in body["expensesByCategory"].items()} == {
        "Alimentação": Decimal("120.00"),
        "Combustível": Decimal("80.00"),
    }
    assert {k: Decimal(v) for k, v in body["expensesByPaymentType"].items()} == {
        "Dinheiro": Decimal("120.00"),
        "PIX": Decimal("80.00"),
    }


def test_trip_summary_overspent_cash(client, admin_headers, create_trip, create_expense):
    trip = create_trip(initial_cash="100.00")
    create_expense(trip["id"], "150.00", payment_type="Dinheiro")

    body = client.get(f"/api/reports/trip/{trip['id']}", headers=admin_headers).json()
    assert Decimal(body["remainingCash"]) == Decimal("-50.00")


def test_trip_summary_without_expenses(client, admin_headers, create_trip):
    trip = create_trip(initial_cash="75.00")

    body = client.get(f"/api/reports/trip/{trip['id']}", headers=admin_headers).json()
    assert Decimal(body["totalExpenses"]) == 0
    assert Decimal(body["remainingCash"]) == Decimal("75.00")
    assert body["expensesByCategory"] == {}
    assert body["expensesByPaymentType"] == {}
    assert body["expensesCount"] == 0


def test_trip_summary_unknown_trip(client, admin_headers):
    response = client.get("/api/reports/trip/999", headers=admin_headers)
    assert response.status_code == 404


def test_trip_summary_requires_auth(client):
    assert client.get("/api/reports/trip/1").status_code == 401


def test_overall_summary_with_no_trips(client, admin_headers):
    response = client.get("/api/reports/summary", headers=admin_headers)
    assert response.status_code == 200
    body = response.json()

    assert body["totalTrips"] == 0
    assert body["activeTrips"] == 0
    assert body["completedTrips"] == 0
    assert Decimal(body["totalExpenses"]) == 0
    assert Decimal(body["averageExpensePerTrip"]) == 0


def test_overall_summary(client, admin_headers, create_trip, create_expense):
    active = create_trip()
    completed = create_trip(main_destination="Santos")
    create_trip(main_destination="Curitiba")
    client.patch(f"/api/trips/{active['id']}/status", json={"status": "active"}, headers=admin_headers)
    client.patch(f"/api/trips/{completed['id']}/status", json={"status": "completed"}, headers=admin_headers)
    create_expense(active["id"], "100.00")
    create_expense(completed["id"], "200.00", payment_type="PIX")

    body = client.get("/api/reports/summary", headers=admin_headers).json()

    assert body["totalTrips"] == 3
    assert body["activeTrips"] == 1
    assert body["completedTrips"] == 1
    assert Decimal(body["totalExpenses"]) == Decimal("300.00")
    assert Decimal(body["averageExpensePerTrip"]) == Decimal("100.00")


def test_trip_summary_reflects_renamed_category(client, admin_headers, catalog, create_trip, create_expense):
    trip = create_trip()
    create_expense(trip["id"], "10.00", category="Outros")
    client.put(
        f"/api/categories/{catalog['categories']['Outros']}",
        json={"name": "Diversos"},
        headers=admin_headers
    )

    body = client.get(f"/api/reports/trip/{trip['id']}", headers=admin_headers).json()
    assert list(body["expensesByCategory"]) == ["Diversos"]


def test_facade_summary_matches_partitions(db, create_trip, create_expense):
    trip = create_trip()
    create_expense(trip["id"], "10.10", payment_type="Dinheiro", category="Transporte")
    create_expense(trip["id"], "20.20", payment_type="Cartão de Débito", category="Compras")
    create_expense(trip["id"], "30.30", payment_type="PIX", category="Compras")

    summary = report_service.get_trip_summary(trip["id"], db)
    stored = db.query(Expense).filter(Expense.trip_id == trip["id"]).all()

    assert summary.total_expenses == sum(e.amount for e in stored)
    assert sum(summary.expenses_by_category.values()) == summary.total_expenses
    assert sum(summary.expenses_by_payment_type.values()) == summary.total_expenses
    assert summary.cash_expenses == Decimal("10.10")


def test_overall_average_reads_as_money(client, admin_headers, create_trip, create_expense):
    trip = create_trip()
    create_trip(main_destination="Santos")
    create_trip(main_destination="Curitiba")
    create_expense(trip["id"], "100.00")

    body = client.get("/api/reports/summary", headers=admin_headers).json()
    assert body["averageExpensePerTrip"] == "33.33"
