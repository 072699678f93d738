"""
Tests for the band, combo, feature and provider endpoints
"""


def vendors(results):
    return [r["device"]["vendor"] for r in results]


# --- Bands ---
def test_search_bands(client, catalog):
    response = client.get("/api/v1/bands", params={"technology": "LTE"})

    assert response.status_code == 200
    assert [b["id"] for b in response.json()] == [catalog.lte2]


def test_read_band(client, catalog):
    response = client.get(f"/api/v1/bands/{catalog.n77}")

    assert response.status_code == 200
    assert response.json() == {
        "id": catalog.n77,
        "band_number": "n77",
        "technology": "NR",
        "dl_band_class": "A",
        "ul_band_class": "A",
    }


def test_read_missing_band(client, catalog):
    response = client.get("/api/v1/bands/9999")

    assert response.status_code == 404
    assert response.json() == {"error": {"message": "Band not found"}}


def test_devices_supporting_band(client, catalog):
    response = client.get(f"/api/v1/bands/{catalog.n77}/devices")

    assert response.status_code == 200
    data = response.json()
    assert vendors(data) == ["Apple", "Google"]
    assert data[0]["support_status"] == "global"
    assert data[0]["provider"] is None
    assert [s["name"] for s in data[0]["software"]] == ["iOS 17.1"]
    assert data[1]["support_status"] == "provider-specific"


def test_devices_supporting_band_for_provider(client, catalog):
    response = client.get(
        f"/api/v1/bands/{catalog.n77}/devices", params={"provider_id": catalog.rogers}
    )

    assert response.status_code == 200
    data = response.json()
    assert vendors(data) == ["Apple"]
    assert data[0]["support_status"] == "provider-specific"
    assert data[0]["provider"]["name"] == "Rogers"


def test_devices_supporting_band_unknown_provider(client, catalog):
    response = client.get(
        f"/api/v1/bands/{catalog.n77}/devices", params={"provider_id": 9999}
    )

    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Provider not found"


def test_devices_supporting_missing_band(client, catalog):
    response = client.get("/api/v1/bands/9999/devices")

    assert response.status_code == 404


# --- Combos ---
def test_search_combos(client, catalog):
    response = client.get("/api/v1/combos", params={"technology": "LTE CA"})

    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == ["2A-4A"]


def test_combo_bands(client, catalog):
    response = client.get(f"/api/v1/combos/{catalog.endc}/bands")

    assert response.status_code == 200
    assert [b["band_number"] for b in response.json()] == ["2", "n77"]


def test_devices_supporting_combo(client, catalog):
    response = client.get(f"/api/v1/combos/{catalog.endc}/devices")

    assert response.status_code == 200
    data = response.json()
    assert vendors(data) == ["Apple", "Samsung"]
    assert [r["support_status"] for r in data] == ["provider-specific", "global"]


def test_read_missing_combo(client, catalog):
    response = client.get("/api/v1/combos/9999/bands")

    assert response.status_code == 404
    assert response.json() == {"error": {"message": "Combo not found"}}


# --- Features ---
def test_list_and_create_features(client, catalog):
    created = client.post(
        "/api/v1/features", json={"name": "VoWiFi", "description": "WiFi calling"}
    )
    assert created.status_code == 201

    names = [f["name"] for f in client.get("/api/v1/features").json()]
    assert names == ["VoLTE", "VoNR", "VoWiFi"]

    filtered = client.get("/api/v1/features", params={"name": "WiFi"}).json()
    assert [f["id"] for f in filtered] == [created.json()["id"]]


def test_devices_supporting_feature(client, catalog):
    everywhere = client.get(f"/api/v1/features/{catalog.volte}/devices").json()
    on_telus = client.get(
        f"/api/v1/features/{catalog.volte}/devices",
        params={"provider_id": catalog.telus},
    ).json()

    assert vendors(everywhere) == ["Apple", "Samsung"]
    assert all(r["support_status"] == "global" for r in everywhere)
    assert vendors(on_telus) == ["Apple"]
    assert on_telus[0]["provider"]["name"] == "Telus"
    assert len(on_telus[0]["software"]) == 2


def test_read_missing_feature(client, catalog):
    response = client.get("/api/v1/features/9999")

    assert response.status_code == 404
    assert response.json() == {"error": {"message": "Feature not found"}}


# --- Providers ---
def test_list_providers(client, catalog):
    response = client.get("/api/v1/providers")

    assert response.status_code == 200
    assert [p["name"] for p in response.json()] == ["Rogers", "Telus"]


def test_read_provider(client, catalog):
    response = client.get(f"/api/v1/providers/{catalog.telus}")

    assert response.status_code == 200
    assert response.json() == {
        "id": catalog.telus,
        "name": "Telus",
        "country": "Canada",
        "network_type": "5G",
    }


def test_read_missing_provider(client, catalog):
    response = client.get("/api/v1/providers/9999")

    assert response.status_code == 404
