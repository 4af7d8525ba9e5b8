def test_create_and_list_categories(client, auth):
    _, headers = auth

    created = client.post("/categories", headers=headers, json={"name": " Salary ", "type": "income"})
    assert created.status_code == 201, created.text
    assert created.json()["data"]["name"] == "Salary"
    client.post("/categories", headers=headers, json={"name": "Food", "type": "expense"})

    listed = client.get("/categories", headers=headers).json()["data"]
    assert [c["name"] for c in listed] == ["Food", "Salary"]

    incomes = client.get("/categories", headers=headers, params={"type": "income"}).json()["data"]
    assert [c["name"] for c in incomes] == ["Salary"]


def test_category_type_must_be_income_or_expense(client, auth):
    _, headers = auth
    response = client.post("/categories", headers=headers, json={"name": "Gift", "type": "transfer"})
    assert response.status_code == 400
    assert response.json()["message"] == "Validation failed"


def test_categories_are_private(client, auth, make_user, make_category):
    _, headers = auth
    foreign = make_category(make_user().id, "Hidden", "expense")

    assert client.get(f"/categories/{foreign.id}", headers=headers).status_code == 404
    assert client.get("/categories", headers=headers).json()["data"] == []


def test_updating_a_category_keeps_existing_transaction_types(client, auth, make_category, make_transaction):
    user, headers = auth
    food = make_category(user["id"], "Food", "expense")
    tx = make_transaction(user["id"], food, 20, "2024-01-01")

    response = client.put(f"/categories/{food.id}", headers=headers, json={"name": "Food", "type": "income"})
    assert response.status_code == 200
    assert response.json()["data"]["type"] == "income"

    detail = client.get(f"/transactions/{tx.id}", headers=headers).json()["data"]
    assert detail["type"] == "expense"


def test_delete_category_in_use_is_refused(client, auth, make_category, make_transaction):
    user, headers = auth
    food = make_category(user["id"], "Food", "expense")
    spare = make_category(user["id"], "Spare", "expense")
    make_transaction(user["id"], food, 20, "2024-01-01")

    refused = client.delete(f"/categories/{food.id}", headers=headers)
    assert refused.status_code == 400
    assert refused.json()["message"] == "Category is in use"

    assert client.delete(f"/categories/{spare.id}", headers=headers).status_code == 200
    assert client.get(f"/categories/{spare.id}", headers=headers).status_code == 404
