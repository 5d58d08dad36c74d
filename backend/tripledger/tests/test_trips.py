"""
Tests for trip endpoints.
"""
from decimal import Decimal


def test_create_trip_estimates_fuel_cost(create_trip):
    trip = create_trip(distance=300, fuel_consumption=10)

    assert trip["status"] == "planned"
    assert Decimal(trip["estimated_fuel_cost"]) == Decimal("165.00")
    assert Decimal(trip["initial_cash"]) == Decimal("500.00")


def test_create_trip_without_route_has_no_estimate(create_trip):
    trip = create_trip(distance=300)
    assert trip["estimated_fuel_cost"] is None


def test_create_trip_requires_admin(client, guest_headers, trip_payload):
    response = client.post("/api/trips", json=trip_payload, headers=guest_headers)
    assert response.status_code == 403


def test_create_trip_rejects_end_before_start(client, admin_headers, trip_payload):
    payload = dict(trip_payload, start_date="2024-03-05", end_date="2024-03-01")
    response = client.post("/api/trips", json=payload, headers=admin_headers)
    assert response.status_code == 422


def test_create_trip_rejects_non_positive_consumption(client, admin_headers, trip_payload):
    payload = dict(trip_payload, distance=100, fuel_consumption=0)
    response = client.post("/api/trips", json=payload, headers=admin_headers)
    assert response.status_code == 422


def test_list_and_get_trips(client, guest_headers, create_trip):
    first = create_trip(main_destination="Curitiba")
    second = create_trip(main_destination="Santos")

    response = client.get("/api/trips", headers=guest_headers)
    assert response.status_code == 200
    assert [t["id"] for t in response.json()] == [second["id"], first["id"]]

    response = client.get(f"/api/trips/{first['id']}", headers=guest_headers)
    assert response.json()["main_destination"] == "Curitiba"


def test_get_unknown_trip(client, admin_headers):
    assert client.get("/api/trips/999", headers=admin_headers).status_code == 404


def test_update_recomputes_fuel_cost(client, admin_headers, create_trip):
    trip = create_trip(distance=300, fuel_consumption=10)

    response = client.put(
        f"/api/trips/{trip['id']}", json={"distance": 600}, headers=admin_headers
    )
    assert response.status_code == 200
    assert Decimal(response.json()["estimated_fuel_cost"]) == Decimal("330.00")

    response = client.put(
        f"/api/trips/{trip['id']}", json={"distance": None}, headers=admin_headers
    )
    assert response.json()["distance"] is None
    assert response.json()["estimated_fuel_cost"] is None


def test_update_rejects_inverted_dates(client, admin_headers, create_trip):
    trip = create_trip()
    response = client.put(
        f"/api/trips/{trip['id']}", json={"end_date": "2024-02-01"}, headers=admin_headers
    )
    assert response.status_code == 400


def test_status_transitions(client, admin_headers, create_trip):
    trip = create_trip()
    url = f"/api/trips/{trip['id']}/status"

    for status in ("active", "completed", "planned"):
        response = client.patch(url, json={"status": status}, headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["status"] == status

    response = client.patch(url, json={"status": "settled"}, headers=admin_headers)
    assert response.status_code == 422


def test_delete_trip_cascades_to_expenses(client, admin_headers, create_trip, create_expense):
    trip = create_trip()
    other = create_trip(main_destination="Santos")
    assert create_expense(trip["id"], "10.00").status_code == 201
    assert create_expense(trip["id"], "20.00").status_code == 201
    assert create_expense(other["id"], "30.00").status_code == 201

    response = client.delete(f"/api/trips/{trip['id']}", headers=admin_headers)
    assert response.status_code == 200

    remaining = client.get("/api/expenses", headers=admin_headers).json()
    assert [e["trip_id"] for e in remaining] == [other["id"]]
    assert client.get(f"/api/trips/{trip['id']}", headers=admin_headers).status_code == 404
