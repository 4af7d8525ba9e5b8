import pytest


def test_register_and_login(client):
    response = client.post(
        "/users/register", json={"name": "Alice", "email": "Alice@Example.com", "password": "secret123"}
    )
    assert response.status_code == 201
    assert response.json()["data"]["email"] == "alice@example.com"
    assert "hashedPassword" not in response.json()["data"]

    login = client.post("/users/login", json={"email": "alice@example.com", "password": "secret123"})
    assert login.status_code == 200
    data = login.json()["data"]
    assert data["tokenType"] == "bearer"
    assert data["accessToken"]


def test_register_duplicate_email(client, auth):
    response = client.post(
        "/users/register", json={"name": "Other", "email": "alice@example.com", "password": "secret123"}
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Email already registered"


def test_login_with_wrong_password(client, auth):
    response = client.post("/users/login", json={"email": "alice@example.com", "password": "wrong-one"})
    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Invalid credentials"}


def test_me_and_list(client, auth, make_user):
    user, headers = auth
    make_user()

    me = client.get("/users/me", headers=headers).json()["data"]
    assert me["id"] == user["id"]

    listed = client.get("/users", headers=headers).json()["data"]
    assert [u["email"] for u in listed] == ["alice@example.com", "bob@example.com"]


def test_update_own_account(client, auth):
    user, headers = auth
    response = client.put(
        f"/users/{user['id']}", headers=headers, json={"name": "Alicia", "password": "newsecret"}
    )
    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Alicia"

    login = client.post("/users/login", json={"email": "alice@example.com", "password": "newsecret"})
    assert login.status_code == 200


def test_cannot_update_or_delete_someone_else(client, auth, make_user):
    _, headers = auth
    other = make_user()

    assert client.put(f"/users/{other.id}", headers=headers, json={"name": "x"}).status_code == 403
    assert client.delete(f"/users/{other.id}", headers=headers).status_code == 403


@pytest.mark.filterwarnings("error::sqlalchemy.exc.SAWarning")
def test_delete_account_removes_its_data(client, auth, db, make_category, make_transaction):
    from app.models import Category, Transaction

    user, headers = auth
    food = make_category(user["id"], "Food", "expense")
    make_transaction(user["id"], food, 20, "2024-01-01")

    response = client.delete(f"/users/{user['id']}", headers=headers)
    assert response.status_code == 200

    db.expire_all()
    assert db.query(Transaction).count() == 0
    assert db.query(Category).count() == 0
    assert client.get("/users/me", headers=headers).status_code == 401
