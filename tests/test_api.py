"""End-to-end tests of the HTTP surface through FastAPI's TestClient."""
import pytest

from conftest import create_plan

PROFILE = {
    "age": 25,
    "gender": "male",
    "height": 175,
    "weight": 70,
    "activity_level": "sedentary",
    "dietary_preference": "non-veg",
    "goal": "maintain",
    "meal_frequency": 3,
}


def register(client, name="Jane Doe", email="jane@example.com"):
    res = client.post("/api/users", json={"name": name, "email": email})
    assert res.status_code == 201, res.text
    return {"X-User-Id": str(res.json()["id"])}


@pytest.fixture
def headers(client):
    return register(client)


@pytest.fixture
def profiled(client, headers):
    res = client.post("/api/profile", json=PROFILE, headers=headers)
    assert res.status_code == 201, res.text
    return headers


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "healthy", "database": "connected"}


def test_register_and_whoami(client, headers):
    res = client.get("/api/users/me", headers=headers)
    assert res.status_code == 200
    assert res.json()["email"] == "jane@example.com"


def test_duplicate_email_conflicts(client, headers):
    res = client.post("/api/users", json={"name": "Jane Again", "email": "JANE@example.com"})
    assert res.status_code == 409
    assert res.json()["error"]["status_code"] == 409


@pytest.mark.parametrize("value", [None, "abc", "424242"])
def test_identity_is_required(client, value):
    extra = {} if value is None else {"X-User-Id": value}
    res = client.get("/api/profile", headers=extra)
    assert res.status_code == 401
    assert "error" in res.json()


def test_profile_create_then_update(client, headers):
    assert client.get("/api/profile", headers=headers).status_code == 404

    created = client.post("/api/profile", json=PROFILE, headers=headers)
    assert created.status_code == 201

    updated = client.post("/api/profile", json={**PROFILE, "weight": 72}, headers=headers)
    assert updated.status_code == 200
    assert updated.json()["id"] == created.json()["id"]
    assert updated.json()["weight"] == 72


def test_profile_validation_error(client, headers):
    res = client.post("/api/profile", json={**PROFILE, "age": 12}, headers=headers)
    assert res.status_code == 422
    assert "validation_errors" in res.json()["error"]["details"]


def test_nutrition_targets(client, profiled):
    res = client.get("/api/profile/nutrition", headers=profiled)
    assert res.status_code == 200
    body = res.json()
    assert body["bmr"] == pytest.approx(1673.75)
    assert body["tdee"] == pytest.approx(2008.5)
    assert body["target_calories"] == pytest.approx(2008.5)
    assert body["macros"]["protein"] == pytest.approx(2008.5 * 0.3 / 4)
    assert body["macros"]["carbs"] == pytest.approx(2008.5 * 0.4 / 4)
    assert body["macros"]["fats"] == pytest.approx(2008.5 * 0.3 / 9)


def test_food_catalog_filters_and_categories(client):
    everything = client.get("/api/food-items").json()
    veg = client.get("/api/food-items", params={"is_vegetarian": "true"}).json()
    dairy = client.get("/api/food-items", params={"category": "Dairy"}).json()

    assert len(everything) == 16
    assert len(veg) == 14 and all(f["is_vegetarian"] for f in veg)
    assert {f["name"] for f in dairy} == {"Greek Yogurt", "Cottage Cheese"}
    categories = client.get("/api/food-items/categories").json()
    assert categories == sorted(categories)
    assert set(categories) == {"Protein", "Carbohydrates", "Fruits", "Vegetables", "Dairy", "Fats"}


def test_food_item_crud_requires_identity(client, headers):
    item = {
        "name": "Lentils", "calories": 116, "protein": 9, "carbs": 20, "fats": 0.4,
        "serving_size": 100, "serving_unit": "g", "category": "Protein", "is_vegetarian": True,
    }
    assert client.post("/api/food-items", json=item).status_code == 401

    created = client.post("/api/food-items", json=item, headers=headers)
    assert created.status_code == 201
    food_id = created.json()["id"]

    updated = client.put(f"/api/food-items/{food_id}", json={**item, "calories": 120}, headers=headers)
    assert updated.json()["calories"] == 120

    assert client.delete(f"/api/food-items/{food_id}", headers=headers).status_code == 204
    missing = client.get(f"/api/food-items/{food_id}")
    assert missing.status_code == 404
    assert missing.json()["error"]["details"]["resource"] == "FoodItem"


def test_current_plan_needs_profile(client, headers):
    res = client.get("/api/meal-plans/current", headers=headers)
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "Profile not found"


def test_current_plan_is_generated_once(client, profiled):
    first = client.get("/api/meal-plans/current", headers=profiled)
    second = client.get("/api/meal-plans/current", headers=profiled)

    assert first.status_code == 200
    assert first.json()["id"] == second.json()["id"]
    assert [m["meal_type"] for m in first.json()["meals"]] == ["breakfast", "lunch", "dinner"]


def test_generate_for_date_and_history(client, profiled):
    res = client.post("/api/meal-plans/generate", params={"date": "2024-05-01"}, headers=profiled)
    assert res.status_code == 200
    plan = res.json()
    assert plan["plan_date"] == "2024-05-01"
    assert plan["completed"] is False
    for meal in plan["meals"]:
        assert len(meal["food_items"]) <= 5
        assert meal["total_calories"] == pytest.approx(
            sum(line["food_item"]["calories"] * line["quantity"] for line in meal["food_items"])
        )

    client.post("/api/meal-plans/generate", params={"date": "2024-05-03"}, headers=profiled)
    client.post("/api/meal-plans/generate", params={"date": "2024-05-03"}, headers=profiled)

    history = client.get(
        "/api/meal-plans/history",
        params={"start_date": "2024-05-01", "end_date": "2024-05-31"},
        headers=profiled,
    ).json()
    assert [p["plan_date"] for p in history] == ["2024-05-03", "2024-05-01"]


def test_generate_rejects_bad_date(client, profiled):
    res = client.post("/api/meal-plans/generate", params={"date": "05/01/2024"}, headers=profiled)
    assert res.status_code == 400
    assert res.json()["error"]["details"] == {"field": "date"}


def test_complete_meals_over_http(client, profiled):
    plan = client.post("/api/meal-plans/generate", params={"date": "2024-05-01"}, headers=profiled).json()
    meal_ids = [m["id"] for m in plan["meals"]]

    for meal_id in meal_ids[:-1]:
        res = client.post(f"/api/meal-plans/{plan['id']}/meals/{meal_id}/complete", headers=profiled)
        assert res.status_code == 200
        assert res.json()["plan_completed"] is False

    last = client.post(f"/api/meal-plans/{plan['id']}/meals/{meal_ids[-1]}/complete", headers=profiled)
    assert last.json()["plan_completed"] is True
    assert last.json()["compliance_recorded"] is True

    entries = client.get("/api/progress/compliance/history", headers=profiled).json()
    assert len(entries) == 1
    assert entries[0]["meal_plan_id"] == plan["id"]
    assert entries[0]["compliance_rate"] == pytest.approx(1.0)


def test_completing_another_users_meal_is_forbidden(client, db, user):
    plan = create_plan(db, user)
    intruder = register(client, name="John Roe", email="john@example.com")

    res = client.post(f"/api/meal-plans/{plan.id}/meals/{plan.meals[0].id}/complete", headers=intruder)
    assert res.status_code == 403

    wrong = client.post(f"/api/meal-plans/{plan.id}/meals/99999/complete", headers=intruder)
    assert wrong.status_code == 404


def test_weight_log_and_summary(client, headers):
    for day, weight in [("2024-05-01", 80.0), ("2024-05-05", 78.5)]:
        res = client.post("/api/progress/weight", json={"entry_date": day, "weight": weight}, headers=headers)
        assert res.status_code == 201

    history = client.get("/api/progress/weight/history", headers=headers).json()
    assert [e["weight"] for e in history] == [80.0, 78.5]

    summary = client.get(
        "/api/progress/summary",
        params={"start_date": "2024-05-01", "end_date": "2024-05-31"},
        headers=headers,
    )
    assert summary.status_code == 200
    body = summary.json()
    assert body["weight_change"] == pytest.approx(-1.5)
    assert body["average_compliance_rate"] == 0.0


def test_summary_errors(client, headers):
    params = {"start_date": "2024-05-01", "end_date": "2024-05-31"}
    assert client.get("/api/progress/summary", params=params, headers=headers).status_code == 404
    assert client.get(
        "/api/progress/summary", params={"start_date": "2024-05-01"}, headers=headers
    ).status_code == 400
    assert client.get(
        "/api/progress/summary", params={"start_date": "2024-06-01", "end_date": "2024-05-01"}, headers=headers
    ).status_code == 400
    assert client.get(
        "/api/progress/summary", params={"start_date": "2024-5-1", "end_date": "2024-05-31"}, headers=headers
    ).status_code == 400


def test_food_used_by_a_plan_cannot_be_deleted(client, profiled):
    plan = client.get("/api/meal-plans/current", headers=profiled).json()
    food_id = next(line["food_item_id"] for meal in plan["meals"] for line in meal["food_items"])

    res = client.delete(f"/api/food-items/{food_id}", headers=profiled)

    assert res.status_code == 409
    assert res.json()["error"]["type"] == "conflict"
    assert client.get(f"/api/food-items/{food_id}").status_code == 200
    again = client.get("/api/meal-plans/current", headers=profiled)
    assert again.status_code == 200
    assert again.json()["id"] == plan["id"]


def test_error_envelope_carries_type(client, headers):
    missing = client.get("/api/profile", headers=headers).json()["error"]
    assert missing["type"] == "not_found"
    assert missing["details"] == {"resource": "UserProfile", "id": int(headers["X-User-Id"])}

    anonymous = client.get("/api/users/me").json()["error"]
    assert anonymous["type"] == "unauthorized"

    invalid = client.post("/api/profile", json={**PROFILE, "age": 12}, headers=headers).json()["error"]
    assert invalid["type"] == "request_validation_error"
    assert invalid["details"]["validation_errors"][0]["field"] == "age"
    assert invalid["message"].startswith("Invalid request: age:")
