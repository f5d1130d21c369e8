import pytest
from fastapi.testclient import TestClient

from app.api import app


@pytest.fixture(scope="module")
def client():
    return TestClient(app)


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_categories(client):
    values = [c["value"] for c in client.get("/categories").json()]
    assert values[0] == "all"
    assert "wildlife" in values


def test_list_destinations(client):
    resp = client.get("/destinations")
    assert resp.status_code == 200
    names = [d["name"] for d in resp.json()]
    assert "Somnath Temple" in names
    assert "Gir National Park" in names


def test_filter_destinations(client):
    assert [d["id"] for d in client.get("/destinations", params={"search": "LION"}).json()] == [2]
    assert [d["id"] for d in client.get("/destinations", params={"category": "natural"}).json()] == [3]
    assert client.get("/destinations", params={"search": "somnath", "category": "wildlife"}).json() == []


def test_destination_detail_uses_dataset_field_names(client):
    body = client.get("/destinations/1").json()
    assert body["bestTimeToVisit"] == "October to March"
    assert body["hotels"][0]["pricePerNight"] == 2000
    assert list(body["suggestedItinerary"]) == ["1", "2"]


def test_unknown_destination(client):
    assert client.get("/destinations/404").status_code == 404
    assert client.post("/destinations/404/quote", json={}).status_code == 404


def test_hotels_with_icons(client):
    hotels = client.get("/destinations/1/hotels").json()
    first = hotels[0]
    assert first["amenityIcons"]["WiFi"] == "wifi"
    assert first["amenityIcons"]["Sea View"] == "waves"
    assert first["formattedPrice"] == "₹2,000"


def test_transport_pricing_modes(client):
    options = {o["type"]: o["pricingModes"] for o in client.get("/destinations/1/transport").json()}
    assert options["Sedan"] == ["fullDay", "perKm"]
    assert options["Auto Rickshaw"] == ["perKm"]


def test_experiences(client):
    names = [e["name"] for e in client.get("/experiences").json()]
    assert "Navratri Garba" in names


def test_quote(client):
    payload = {"check_in": "2025-12-01", "check_out": "2025-12-03", "guests": 2, "hotel_id": "somnath-sagar-darshan"}
    resp = client.post("/destinations/1/quote", json=payload)
    assert resp.status_code == 200
    body = resp.json()
    assert body["quote"]["nights"] == 3
    assert body["quote"]["total"] == 12000
    assert body["formatted_total"] == "₹12,000"
    assert set(body["quote"]["timetable"]) == {"1", "2", "3"}


def test_quote_partial_input_prices_to_zero(client):
    body = client.post("/destinations/1/quote", json={"guests": "abc"}).json()
    assert body["quote"]["total"] == 0
    assert body["quote"]["timetable"] == {}


def test_quote_rejects_unknown_pricing_mode(client):
    resp = client.post("/destinations/1/quote", json={"pricing_mode": "hourly"})
    assert resp.status_code == 422


def test_quote_destination_without_templates(client):
    payload = {"check_in": "2025-12-01", "check_out": "2025-12-02", "hotel_id": "sou-tent-city"}
    timetable = client.post("/destinations/4/quote", json=payload).json()["quote"]["timetable"]
    assert timetable["1"][0]["activity"] == "Explore nearby attractions or relax"


def test_confirm(client):
    payload = {
        "check_in": "2025-12-01",
        "check_out": "2025-12-07",
        "guests": 2,
        "hotel_id": "somnath-lords-inn",
        "transport_type": "Sedan",
        "pricing_mode": "fullDay",
    }
    resp = client.post("/destinations/1/confirm", json=payload)
    assert resp.status_code == 200
    body = resp.json()
    assert body["destination_name"] == "Somnath Temple"
    assert body["nights"] == 7
    assert body["transport"] == {"type": "Sedan", "pricing_mode": "fullDay", "rate": 2500.0, "km_per_day": None}
    assert body["quote"]["transport_cost"] == pytest.approx(2500 * 7 * 0.9)


def test_confirm_requires_dates_and_hotel(client):
    resp = client.post("/destinations/1/confirm", json={"check_in": "2025-12-01"})
    assert resp.status_code == 409
    assert "check_out" in resp.json()["detail"]
    assert "hotel_id" in resp.json()["detail"]


def test_confirm_rejects_hotel_not_offered(client):
    payload = {"check_in": "2025-12-01", "check_out": "2025-12-02", "hotel_id": "no-such-hotel"}
    resp = client.post("/destinations/1/confirm", json=payload)
    assert resp.status_code == 409
    assert resp.json()["detail"] == "Cannot confirm booking; missing: hotel_id"


def test_quote_with_oversized_guest_count(client):
    for guests in ("1e308", "9" * 400):
        payload = {"check_in": "2025-12-01", "check_out": "2025-12-02", "guests": guests}
        resp = client.post("/destinations/1/quote", json=payload)
        assert resp.status_code == 200
        assert resp.json()["quote"]["guest_surcharge"] == 2000
