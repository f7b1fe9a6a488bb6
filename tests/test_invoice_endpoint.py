import uuid


def _completed_rental(client, payload):
    rental = client.post("/api/rentals/pickup", json=payload).json()
    response = client.post(
        f"/api/rentals/{rental['booking_number']}/return",
        json={"return_datetime": "2026-02-06T10:00:00", "return_meter_reading": 1500},
    )
    assert response.status_code == 200
    return response.json()


def test_invoice_download(client, sample_pickup_payload):
    rental = _completed_rental(client, sample_pickup_payload)

    response = client.get(f"/api/invoice/{rental['booking_number']}")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert (
        response.headers["content-disposition"]
        == f'attachment; filename="Invoice_{rental["booking_number"]}.pdf"'
    )
    assert response.content.startswith(b"%PDF")


def test_invoice_for_active_rental_is_conflict(client, sample_pickup_payload):
    rental = client.post("/api/rentals/pickup", json=sample_pickup_payload).json()

    response = client.get(f"/api/invoice/{rental['booking_number']}")

    assert response.status_code == 409
    assert response.json()["status_code"] == 409


def test_invoice_for_unknown_rental(client):
    assert client.get(f"/api/invoice/{uuid.uuid4()}").status_code == 404


def test_invoice_for_malformed_booking_number(client):
    assert client.get("/api/invoice/garbage").status_code == 404
