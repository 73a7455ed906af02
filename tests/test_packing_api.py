"""API tests for packing lists and their items."""


def test_templates(client):
    response = client.get("/api/packing-lists/templates")
    assert response.status_code == 200
    templates = response.json()
    assert len(templates) == 30
    assert templates[0]["name"] == "Underwear"
    assert templates[6]["temp_range"] == {"min": 15, "max": 40}


def test_preview_does_not_save(client, store):
    response = client.post("/api/packing-lists/preview", json={
        "duration": 14, "temp_min": -5, "temp_max": 0, "activities": ["camping"],
    })
    assert response.status_code == 200
    items = response.json()
    assert items[0] == {"id": "item-0", "name": "Underwear", "category": "clothes",
                        "quantity": 6, "packed": False, "priority": "high"}
    assert "Tent" in [item["name"] for item in items]
    assert store.list("packing_lists") == []


def test_preview_rejects_inverted_range(client):
    response = client.post("/api/packing-lists/preview", json={
        "duration": 3, "temp_min": 10, "temp_max": 0,
    })
    assert response.status_code == 422


def test_create_packing_list(client, trip_payload):
    trip = client.post("/api/trips", json=trip_payload).json()
    response = client.post("/api/packing-lists", json={
        "trip_id": trip["id"],
        "name": "Custom list",
        "items": [
            {"name": "Camera", "category": "devices", "quantity": 1, "priority": "low"},
            {"name": "Snacks", "notes": "no nuts"},
        ],
    })
    assert response.status_code == 201
    packing_list = response.json()
    assert packing_list["name"] == "Custom list"
    camera, snacks = packing_list["items"]
    assert camera["category"] == "devices"
    assert camera["priority"] == "low"
    assert snacks["category"] == "others"
    assert snacks["quantity"] == 1
    assert snacks["priority"] == "medium"
    assert snacks["notes"] == "no nuts"


def test_create_packing_list_for_missing_trip(client):
    response = client.post("/api/packing-lists", json={"trip_id": "missing", "name": "List"})
    assert response.status_code == 404


def test_generate_for_saved_trip(client, trip_payload):
    trip = client.post("/api/trips", json=trip_payload).json()
    response = client.post("/api/packing-lists/generate", json={"trip_id": trip["id"], "name": "Second list"})
    assert response.status_code == 201
    assert response.json()["name"] == "Second list"
    assert response.json()["items"]

    assert client.post("/api/packing-lists/generate", json={"trip_id": "missing"}).status_code == 404


def test_get_packing_list(client, planned):
    list_id = planned["packing_list"]["id"]
    response = client.get(f"/api/packing-lists/{list_id}")
    assert response.status_code == 200
    assert response.json() == planned["packing_list"]

    assert client.get("/api/packing-lists/missing").status_code == 404


def test_replace_packing_list(client, planned):
    list_id = planned["packing_list"]["id"]
    old_item_id = planned["packing_list"]["items"][0]["id"]

    response = client.put(f"/api/packing-lists/{list_id}", json={
        "name": "Trimmed",
        "items": [{"name": "Tent", "category": "camping", "quantity": 1, "packed": True}],
    })
    assert response.status_code == 200
    packing_list = response.json()
    assert packing_list["name"] == "Trimmed"
    assert [item["name"] for item in packing_list["items"]] == ["Tent"]
    assert packing_list["items"][0]["packed"] is True

    assert client.get(f"/api/packing-lists/{list_id}").json()["items"] == packing_list["items"]
    assert client.delete(f"/api/packing-items/{old_item_id}").status_code == 404


def test_replace_missing_list(client):
    response = client.put("/api/packing-lists/missing", json={"name": "List", "items": []})
    assert response.status_code == 404


def test_delete_packing_list(client, planned, store):
    list_id = planned["packing_list"]["id"]
    assert client.delete(f"/api/packing-lists/{list_id}").json() == {"success": True}
    assert client.get(f"/api/packing-lists/{list_id}").status_code == 404
    assert store.list("packing_items") == []
    assert client.delete(f"/api/packing-lists/{list_id}").status_code == 404


def test_add_item(client, planned):
    list_id = planned["packing_list"]["id"]
    response = client.post(f"/api/packing-lists/{list_id}/items", json={
        "name": "  Sunglasses  ", "packed": True,
    })
    assert response.status_code == 201
    item = response.json()
    assert item["name"] == "Sunglasses"
    assert item["packed"] is False
    assert item["category"] == "others"
    assert item["priority"] == "medium"
    assert item["quantity"] == 1

    items = client.get(f"/api/packing-lists/{list_id}").json()["items"]
    assert items[-1] == item


def test_add_item_validation(client, planned):
    list_id = planned["packing_list"]["id"]
    assert client.post(f"/api/packing-lists/{list_id}/items", json={"name": " "}).status_code == 422
    assert client.post(f"/api/packing-lists/{list_id}/items",
                       json={"name": "Tent", "quantity": 0}).status_code == 422
    assert client.post(f"/api/packing-lists/{list_id}/items",
                       json={"name": "Tent", "category": "food"}).status_code == 422
    assert client.post("/api/packing-lists/missing/items", json={"name": "Tent"}).status_code == 404


def test_update_item_changes_only_given_fields(client, planned):
    item = planned["packing_list"]["items"][0]
    response = client.put(f"/api/packing-items/{item['id']}", json={"quantity": 5})
    assert response.status_code == 200
    updated = response.json()
    assert updated["quantity"] == 5
    assert updated["name"] == item["name"]
    assert updated["packed"] is False
    assert updated["priority"] == item["priority"]


def test_update_item_bumps_list_timestamp(client, planned):
    packing_list = planned["packing_list"]
    client.put(f"/api/packing-items/{packing_list['items'][0]['id']}", json={"notes": "spare pair"})
    refreshed = client.get(f"/api/packing-lists/{packing_list['id']}").json()
    assert refreshed["updated_at"] >= packing_list["updated_at"]
    assert refreshed["items"][0]["notes"] == "spare pair"


def test_update_item_validation(client, planned):
    item_id = planned["packing_list"]["items"][0]["id"]
    assert client.put(f"/api/packing-items/{item_id}", json={"quantity": 0}).status_code == 422
    assert client.put(f"/api/packing-items/{item_id}", json={"name": None}).status_code == 422
    assert client.put(f"/api/packing-items/{item_id}", json={"priority": "urgent"}).status_code == 422
    assert client.put("/api/packing-items/missing", json={"packed": True}).status_code == 404


def test_toggle_item(client, planned):
    item_id = planned["packing_list"]["items"][0]["id"]
    assert client.put(f"/api/packing-items/{item_id}/toggle").json()["packed"] is True
    assert client.put(f"/api/packing-items/{item_id}/toggle").json()["packed"] is False
    assert client.put("/api/packing-items/missing/toggle").status_code == 404


def test_delete_item(client, planned):
    packing_list = planned["packing_list"]
    item_id = packing_list["items"][0]["id"]

    assert client.delete(f"/api/packing-items/{item_id}").json() == {"success": True}
    items = client.get(f"/api/packing-lists/{packing_list['id']}").json()["items"]
    assert len(items) == len(packing_list["items"]) - 1
    assert client.delete(f"/api/packing-items/{item_id}").status_code == 404


def test_progress(client, planned):
    packing_list = planned["packing_list"]
    first, second = packing_list["items"][:2]
    client.put(f"/api/packing-items/{first['id']}", json={"packed": True})
    client.put(f"/api/packing-items/{second['id']}/toggle")

    response = client.get(f"/api/packing-lists/{packing_list['id']}/progress")
    assert response.status_code == 200
    progress = response.json()
    total = len(packing_list["items"])
    assert progress["packed"] == 2
    assert progress["total"] == total
    assert progress["percent"] == (200 * 2 + total) // (2 * total)
    assert progress["by_category"]["clothes"]["packed"] == 2

    assert client.get("/api/packing-lists/missing/progress").status_code == 404


def test_generate_rejects_blank_name(client, trip_payload):
    trip = client.post("/api/trips", json=trip_payload).json()
    response = client.post("/api/packing-lists/generate", json={"trip_id": trip["id"], "name": "   "})
    assert response.status_code == 422


def test_replace_list_deleted_midway(client, planned, store, monkeypatch):
    list_id = planned["packing_list"]["id"]
    original_update = store.update

    def update_after_delete(collection, record_id, fields):
        if collection == "packing_lists":
            store.delete(collection, record_id)
            return None
        return original_update(collection, record_id, fields)

    monkeypatch.setattr(store, "update", update_after_delete)
    response = client.put(f"/api/packing-lists/{list_id}", json={"name": "Trimmed", "items": [{"name": "Tent"}]})
    assert response.status_code == 404
    assert store.list("packing_items") == []
