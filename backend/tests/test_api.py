from app.api.mosques import repository_dependency, submission_sink_dependency
from app.main import app

from conftest import JAKARTA, FailingRepository, FailingSink

LAT, LNG = JAKARTA
NEARBY = f"/api/v1/mosques/nearby?lat={LAT}&lng={LNG}"


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


# ── Nearby ──────────────────────────────────────────


def test_nearby_sorted_and_filtered(client):
    r = client.get(NEARBY)
    assert r.status_code == 200
    body = r.json()
    assert body["location"] == {"lat": LAT, "lng": LNG}
    assert body["radius_km"] == 5.0
    assert body["error"] is None
    assert [m["id"] for m in body["mosques"]] == [1, 2, 3]
    assert [m["distance"] for m in body["mosques"]] == [0.8, 2.5, 4.9]
    assert body["count"] == 3


def test_nearby_radius_and_cap_overrides(client):
    body = client.get(NEARBY + "&radius_km=10&max_results=2").json()
    assert [m["id"] for m in body["mosques"]] == [1, 2]
    assert body["radius_km"] == 10


def test_nearby_missing_coordinates_asks_for_location(client):
    r = client.get(f"/api/v1/mosques/nearby?lat={LAT}")
    assert r.status_code == 400
    assert r.json()["code"] == "LOCATION_REQUIRED"
    assert r.json()["action"] == "request_location"


def test_nearby_malformed_coordinates_asks_for_location(client):
    r = client.get("/api/v1/mosques/nearby?lat=abc&lng=1")
    assert r.status_code == 400
    assert r.json()["code"] == "LOCATION_REQUIRED"


def test_nearby_reported_location_error(client):
    r = client.get("/api/v1/mosques/nearby?location_error=PERMISSION_DENIED")
    assert r.status_code == 400
    assert r.json()["code"] == "PERMISSION_DENIED"
    assert "izinkan akses lokasi" in r.json()["message"]


def test_nearby_invalid_coordinate(client, repository):
    r = client.get("/api/v1/mosques/nearby?lat=91&lng=0")
    assert r.status_code == 400
    assert "Latitude" in r.json()["detail"]
    assert repository.calls == []


def test_nearby_bad_radius_rejected(client):
    assert client.get(NEARBY + "&radius_km=0").status_code == 422


def test_nearby_data_source_failure_is_flagged(client):
    app.dependency_overrides[repository_dependency] = lambda: FailingRepository()
    body = client.get(NEARBY).json()
    assert body["mosques"] == []
    assert body["count"] == 0
    assert body["error"]
    assert body["retryable"] is True


def test_nearby_default_mock_data(client):
    del app.dependency_overrides[repository_dependency]
    body = client.get(NEARBY).json()
    assert body["error"] is None
    assert all(0 <= m["distance"] <= 5.0 for m in body["mosques"])
    keys = [(m["distance"], m["id"]) for m in body["mosques"]]
    assert keys == sorted(keys)


# ── Detail ──────────────────────────────────────────


def test_detail(client):
    r = client.get(f"/api/v1/mosques/nearby/2?lat={LAT}&lng={LNG}")
    assert r.status_code == 200
    body = r.json()
    assert body["mosque"]["id"] == 2
    assert body["facilities"]["wudhu"]["text"] == "Perlu dibersihkan"
    assert body["facilities"]["shoe_storage"] == "Loker sepatu tersedia"
    assert body["facilities"]["ac"]["text"] == "Tidak ada AC"
    assert body["directions_url"].startswith("https://www.google.com/maps/search/")


def test_detail_outside_radius_is_404(client):
    assert client.get(f"/api/v1/mosques/nearby/4?lat={LAT}&lng={LNG}").status_code == 404


def test_detail_honours_search_overrides(client):
    r = client.get(f"/api/v1/mosques/nearby/4?lat={LAT}&lng={LNG}&radius_km=10")
    assert r.status_code == 200
    assert r.json()["mosque"]["id"] == 4
    assert r.json()["mosque"]["distance"] == 7.0
    # Capped out of the list, so not reachable either
    r = client.get(f"/api/v1/mosques/nearby/4?lat={LAT}&lng={LNG}&radius_km=10&max_results=3")
    assert r.status_code == 404


def test_detail_bad_overrides_rejected(client):
    assert client.get(f"/api/v1/mosques/nearby/1?lat={LAT}&lng={LNG}&radius_km=0").status_code == 422
    assert client.get(f"/api/v1/mosques/nearby/1?lat={LAT}&lng={LNG}&max_results=0").status_code == 422


def test_detail_data_source_failure(client):
    app.dependency_overrides[repository_dependency] = lambda: FailingRepository()
    assert client.get(f"/api/v1/mosques/nearby/1?lat={LAT}&lng={LNG}").status_code == 503


# ── Map ─────────────────────────────────────────────


def test_map_view(client):
    r = client.get(f"/api/v1/mosques/map?lat={LAT}&lng={LNG}")
    assert r.status_code == 200
    body = r.json()
    assert body["center"] == {"lat": LAT, "lng": LNG}
    assert [m["id"] for m in body["markers"]] == [1, 2, 3]
    assert body["markers"][0]["badges"] == ["AC", "24 Jam", "Parkir Motor"]
    assert body["markers"][0]["distance_label"] == "0.8km"
    assert body["bounds"]["north"] > body["bounds"]["south"]


def test_map_view_requires_location(client):
    r = client.get("/api/v1/mosques/map?location_error=TIMEOUT")
    assert r.status_code == 400
    assert r.json()["code"] == "TIMEOUT"


# ── Submissions ─────────────────────────────────────


SUBMISSION = {
    "name": "Masjid Al-Barokah",
    "address": "Jl. Melati No. 4, Depok",
    "phone": "",
    "website": "",
    "google_maps_link": "https://maps.app.goo.gl/xyz",
    "has_ac": False,
    "ac_status": "working",
    "wudhu_cleanliness": "clean",
    "separate_wudhu_areas": True,
    "parking_available": True,
    "bike_parking_available": True,
    "wheelchair_accessible": False,
    "prayer_mats_provided": True,
    "shoe_storage": "",
    "open_24_hours": False,
    "image_url": "https://example.org/al-barokah.jpg",
}


def test_submission_accepted(client):
    r = client.post("/api/v1/submissions", json=SUBMISSION)
    assert r.status_code == 202
    assert r.json()["success"] is True
    assert "Terima kasih" in r.json()["message"]


def test_submission_payload_reaches_sink(client):
    received = []

    class RecordingSink(FailingSink):
        async def submit(self, payload):
            received.append(payload)

    app.dependency_overrides[submission_sink_dependency] = lambda: RecordingSink()
    client.post("/api/v1/submissions", json=SUBMISSION)
    payload = received[0]
    assert payload["ac_status"] is None
    assert payload["shoe_storage"] is None
    assert payload["wudhu_cleanliness"] == "clean"
    assert payload["image_url"] == "https://example.org/al-barokah.jpg"
    assert "id" not in payload and "distance" not in payload


def test_submission_sink_failure(client):
    app.dependency_overrides[submission_sink_dependency] = lambda: FailingSink()
    r = client.post("/api/v1/submissions", json=SUBMISSION)
    assert r.status_code == 502
    assert r.json() == {"success": False, "message": "Terjadi kesalahan. Silakan coba lagi."}


def test_submission_requires_name(client):
    r = client.post("/api/v1/submissions", json={**SUBMISSION, "name": ""})
    assert r.status_code == 422


def test_submission_unchecked_checkboxes_default_to_false(client):
    received = []

    class RecordingSink(FailingSink):
        async def submit(self, payload):
            received.append(payload)

    app.dependency_overrides[submission_sink_dependency] = lambda: RecordingSink()
    r = client.post("/api/v1/submissions", json={**SUBMISSION, "parking_available": "", "open_24_hours": ""})
    assert r.status_code == 202
    assert received[0]["parking_available"] is False
    assert received[0]["open_24_hours"] is False
