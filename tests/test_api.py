"""API endpoint tests."""

from shoplist.config import Settings
from shoplist.models.item import Item


def create_item(client, api_headers, name, category_id, **extra):
    return client.post(
        "/api/items",
        headers=api_headers,
        json={"name": name, "categoryId": category_id, **extra},
    )


def test_health_check(client):
    """Test health check endpoint needs no key."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_missing_api_key(client, categories):
    """Test requests without a key are rejected."""
    response = client.get("/api/views")
    assert response.status_code == 401


def test_wrong_api_key(client, categories):
    """Test requests with the wrong key are rejected."""
    response = client.get("/api/views", headers={"X-API-Key": "not-the-key"})
    assert response.status_code == 401


def test_api_key_in_query(client, categories):
    """Test the key can be passed as the k query parameter."""
    response = client.get("/api/views", params={"k": "test-api-key"})
    assert response.status_code == 200


def test_no_configured_key_rejects_everything(client, api_headers, categories):
    """Test an unconfigured key rejects rather than allows."""
    from shoplist.config import get_settings
    from shoplist.main import app

    app.dependency_overrides[get_settings] = lambda: Settings(api_key="  ")

    response = client.get("/api/views", headers=api_headers)
    assert response.status_code == 401

    response = client.get("/api/views", headers={"X-API-Key": ""})
    assert response.status_code == 401


def test_create_item(client, api_headers, categories, db):
    """Test creating an item."""
    response = create_item(client, api_headers, " Milk ", categories["food"].id)

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Milk"
    assert data["category"] == "Food"
    assert data["categoryId"] == categories["food"].id
    assert data["availabilityUpdatedAt"] is not None
    assert response.headers["location"] == f"/api/items/{data['id']}"
    assert db.get(Item, data["id"]) is not None


def test_create_item_snake_case_body(client, api_headers, categories):
    """Test snake_case field names are accepted too."""
    response = client.post(
        "/api/items",
        headers=api_headers,
        json={"name": "Eggs", "category_id": categories["food"].id},
    )
    assert response.status_code == 201


def test_create_duplicate_item(client, api_headers, categories):
    """Test duplicate names in a category are rejected."""
    create_item(client, api_headers, "Milk", categories["food"].id)

    response = create_item(client, api_headers, "milk", categories["food"].id)
    assert response.status_code == 409
    assert "already exists" in response.json()["detail"]

    response = create_item(client, api_headers, "milk", categories["household"].id)
    assert response.status_code == 201


def test_create_item_invalid(client, api_headers, categories):
    """Test every invalid field is reported."""
    response = client.post("/api/items", headers=api_headers, json={"name": ""})

    assert response.status_code == 400
    assert response.json()["errors"] == ["name is required", "categoryId is required"]


def test_create_item_malformed_body(client, api_headers, categories):
    """Test type errors in the body are reported as 400."""
    response = client.post(
        "/api/items", headers=api_headers, json={"name": "Milk", "categoryId": "lots"}
    )

    assert response.status_code == 400
    assert len(response.json()["errors"]) == 1


def test_create_item_unknown_category(client, api_headers, categories):
    """Test an unknown category is a 400."""
    response = create_item(client, api_headers, "Milk", 999999)

    assert response.status_code == 400
    assert response.json()["errors"] == ["selected category does not exist"]


def test_search_items(client, api_headers, categories):
    """Test prefix search."""
    create_item(client, api_headers, "Milk", categories["food"].id)
    create_item(client, api_headers, "Mop", categories["household"].id)

    response = client.get("/api/items", headers=api_headers, params={"prefix": "mi"})

    assert response.status_code == 200
    data = response.json()
    assert data["exists"] is True
    assert data["items"] == [
        {"id": data["items"][0]["id"], "name": "Milk", "category": "Food"},
    ]


def test_search_items_no_match(client, api_headers, categories):
    """Test prefix search with nothing found."""
    response = client.get("/api/items", headers=api_headers, params={"prefix": "zz"})

    assert response.status_code == 200
    assert response.json() == {"exists": False, "items": []}


def test_search_items_requires_prefix(client, api_headers):
    """Test a missing or blank prefix is a 400."""
    assert client.get("/api/items", headers=api_headers).status_code == 400
    response = client.get("/api/items", headers=api_headers, params={"prefix": "  "})
    assert response.status_code == 400


def test_toggle_availability(client, api_headers, categories):
    """Test marking an item as available."""
    item_id = create_item(client, api_headers, "Milk", categories["food"].id).json()["id"]

    response = client.patch(
        f"/api/availability/{item_id}",
        headers=api_headers,
        json={"isAvailable": True, "updatedBy": "alice"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["itemId"] == item_id
    assert data["isAvailable"] is True
    assert data["updatedBy"] == "alice"
    assert data["updatedAt"] is not None


def test_toggle_availability_with_post(client, api_headers, categories):
    """Test POST is accepted for toggling as well as PATCH."""
    item_id = create_item(client, api_headers, "Milk", categories["food"].id).json()["id"]

    response = client.post(
        f"/api/availability/{item_id}", headers=api_headers, json={"isAvailable": False}
    )

    assert response.status_code == 200
    assert response.json()["updatedBy"] == "anon"


def test_toggle_unknown_item(client, api_headers):
    """Test toggling an item that does not exist."""
    response = client.patch(
        "/api/availability/999999", headers=api_headers, json={"isAvailable": True}
    )

    assert response.status_code == 404


def test_toggle_requires_flag(client, api_headers, categories):
    """Test the availability flag is required."""
    item_id = create_item(client, api_headers, "Milk", categories["food"].id).json()["id"]

    response = client.patch(f"/api/availability/{item_id}", headers=api_headers, json={})

    assert response.status_code == 400


def test_views(client, api_headers, categories):
    """Test master list and buy list through the API."""
    milk_id = create_item(client, api_headers, "Milk", categories["food"].id).json()["id"]
    soap_id = create_item(client, api_headers, "Soap", categories["household"].id).json()["id"]

    client.patch(
        f"/api/availability/{milk_id}",
        headers=api_headers,
        json={"isAvailable": True, "updatedBy": "alice"},
    )

    response = client.get("/api/views", headers=api_headers)

    assert response.status_code == 200
    data = response.json()
    assert [c["name"] for c in data["categories"]] == ["Food", "Household"]
    assert [row["id"] for row in data["masterItems"]] == [milk_id, soap_id]
    assert data["masterItems"][0]["isAvailable"] is True
    assert data["masterItems"][0]["categoryName"] == "Food"
    assert [row["id"] for row in data["buyList"]] == [soap_id]


def test_get_categories(client, api_headers, categories):
    """Test listing categories."""
    response = client.get("/api/categories", headers=api_headers)

    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == ["Food", "Household"]


def test_toggle_timestamp_matches_views(client, api_headers, categories):
    """Test the toggle response and the views report the same UTC instant."""
    item_id = create_item(client, api_headers, "Milk", categories["food"].id).json()["id"]

    toggled = client.patch(
        f"/api/availability/{item_id}",
        headers=api_headers,
        json={"isAvailable": True, "updatedBy": "alice"},
    ).json()
    row = client.get("/api/views", headers=api_headers).json()["masterItems"][0]

    assert row["lastUpdated"] == toggled["updatedAt"]
    assert row["updatedBy"] == "alice"
