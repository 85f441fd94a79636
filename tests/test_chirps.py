"""Tests for chirp endpoints"""
import uuid

from flask.testing import FlaskClient


def test_create_chirp(client: FlaskClient, user: dict, auth_headers: dict):
    response = client.post(
        "/api/chirps", json={"body": "I hear Kerfuffle is free this weekend"}, headers=auth_headers
    )
    assert response.status_code == 201

    data = response.get_json()
    assert data["body"] == "I hear **** is free this weekend"
    assert data["user_id"] == user["id"]
    assert uuid.UUID(data["id"])


def test_create_chirp_punctuation_not_masked(client: FlaskClient, auth_headers: dict):
    response = client.post("/api/chirps", json={"body": "Sharbert's are great"}, headers=auth_headers)
    assert response.status_code == 201
    assert response.get_json()["body"] == "Sharbert's are great"


def test_create_chirp_at_limit(client: FlaskClient, auth_headers: dict):
    response = client.post("/api/chirps", json={"body": "a" * 140}, headers=auth_headers)
    assert response.status_code == 201


def test_create_chirp_too_long(client: FlaskClient, auth_headers: dict):
    response = client.post("/api/chirps", json={"body": "a" * 141}, headers=auth_headers)
    assert response.status_code == 400
    assert response.get_json() == {"error": "Chirp is too long"}

    # Nothing stored
    assert client.get("/api/chirps").get_json() == []


def test_create_chirp_requires_token(client: FlaskClient, user: dict):
    response = client.post("/api/chirps", json={"body": "hello"})
    assert response.status_code == 401


def test_create_chirp_malformed_body_is_500(client: FlaskClient, auth_headers: dict):
    response = client.post("/api/chirps", json={"body": 123}, headers=auth_headers)
    assert response.status_code == 500
    assert response.get_json() == {"error": "Couldn't decode parameters"}


def test_list_chirps_oldest_first(client: FlaskClient, auth_headers: dict):
    bodies = ["first", "second fornax", "third"]
    for body in bodies:
        assert client.post("/api/chirps", json={"body": body}, headers=auth_headers).status_code == 201

    response = client.get("/api/chirps")
    assert response.status_code == 200
    assert [c["body"] for c in response.get_json()] == ["first", "second ****", "third"]


def test_list_chirps_empty(client: FlaskClient):
    response = client.get("/api/chirps")
    assert response.status_code == 200
    assert response.get_json() == []


def test_get_chirp_not_found(client: FlaskClient):
    response = client.get(f"/api/chirps/{uuid.uuid4()}")
    assert response.status_code == 404
    assert response.get_json() == {"error": "Could not retrieve chirp with given ID"}


def test_get_chirp_bad_id_is_500(client: FlaskClient):
    response = client.get("/api/chirps/not-a-uuid")
    assert response.status_code == 500
    assert response.get_json() == {"error": "Could not parse path value"}


def test_end_to_end_masked_on_read(client: FlaskClient):
    creds = {"email": "e2e@example.com", "password": "hunter2"}
    assert client.post("/api/users", json=creds).status_code == 201

    login = client.post("/api/login", json=creds)
    assert login.status_code == 200
    headers = {"Authorization": f"Bearer {login.get_json()['token']}"}

    created = client.post("/api/chirps", json={"body": "This is a sharbert sample"}, headers=headers)
    assert created.status_code == 201

    response = client.get(f"/api/chirps/{created.get_json()['id']}")
    assert response.status_code == 200
    assert response.get_json()["body"] == "This is a **** sample"


def test_create_chirp_for_deleted_user_is_500(client: FlaskClient, auth_headers: dict):
    assert client.post("/admin/reset").status_code == 200

    response = client.post("/api/chirps", json={"body": "ghost"}, headers=auth_headers)
    assert response.status_code == 500
    assert response.get_json() == {"error": "Couldn't create chirp record"}


def test_chirp_length_counts_characters_not_bytes(client: FlaskClient, auth_headers: dict):
    response = client.post("/api/chirps", json={"body": "é" * 140}, headers=auth_headers)
    assert response.status_code == 201
    assert response.get_json()["body"] == "é" * 140

    response = client.post("/api/chirps", json={"body": "é" * 141}, headers=auth_headers)
    assert response.status_code == 400


def test_create_chirp_null_body_is_empty(client: FlaskClient, auth_headers: dict):
    response = client.post("/api/chirps", json={"body": None}, headers=auth_headers)
    assert response.status_code == 201
    assert response.get_json()["body"] == ""
