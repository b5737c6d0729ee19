from conftest import auth_headers


def test_register_and_login(client):
    response = client.post("/auth/register", json={"username": "ada", "name": "Ada", "password": "lovelace"})

    assert response.status_code == 201
    assert response.json()["role"] == "student"
    assert "password" not in response.json()

    response = client.post("/auth/login", json={"username": "ada", "password": "lovelace"})

    assert response.status_code == 200
    token = response.json()["token"]
    me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.json()["username"] == "ada"


def test_register_duplicate_username(client, student):
    response = client.post("/auth/register", json={"username": "student", "name": "Again", "password": "secret123"})
    assert response.status_code == 400


def test_register_short_password(client):
    response = client.post("/auth/register", json={"username": "bob", "name": "Bob", "password": "123"})
    assert response.status_code == 422


def test_login_wrong_password(client, student):
    response = client.post("/auth/login", json={"username": "student", "password": "wrong-password"})
    assert response.status_code == 401


def test_invalid_token(client):
    response = client.get("/auth/me", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401


def test_me(client, teacher):
    response = client.get("/auth/me", headers=auth_headers(teacher))

    assert response.status_code == 200
    assert response.json()["role"] == "teacher"


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"
