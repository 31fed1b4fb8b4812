"""
Tests for the Roster API endpoints.
"""

import pytest
from fastapi.testclient import TestClient

import config
from roster_api import app

DATABASE = (
    "firstname,lastname,age,field\n"
    "Johann,Smith,23,CS\n"
    "Guillaume,Pierre,24,SWE\n"
    "Marc,John,25,CS\n"
)


@pytest.fixture
def client():
    return TestClient(app)


def test_index(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.text == "Hello from the roster reporter!"


def test_students_lists_configured_database(client, tmp_path, monkeypatch):
    path = tmp_path / "database.csv"
    path.write_text(DATABASE, encoding="utf-8")
    monkeypatch.setattr(config, "DATABASE_PATH", str(path))

    response = client.get("/students")

    assert response.status_code == 200
    assert response.text.split("\n") == [
        "This is the list of our students",
        "Number of students: 3",
        "Number of students in CS: 2. List: Johann, Marc",
        "Number of students in SWE: 1. List: Guillaume",
    ]


def test_students_missing_database(client, tmp_path, monkeypatch):
    monkeypatch.setattr(config, "DATABASE_PATH", str(tmp_path / "missing.csv"))

    response = client.get("/students")

    assert response.status_code == 500
    assert response.json() == {"detail": "Cannot load the database"}


def test_upload_roster(client):
    response = client.post(
        "/students/upload",
        files={"roster_file": ("roster.csv", DATABASE.encode("utf-8"), "text/csv")},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 3
    assert list(data["fields"]) == ["CS", "SWE"]
    assert data["fields"]["CS"] == {"count": 2, "names": ["Johann", "Marc"]}
    assert data["report"][0] == "Number of students: 3"


def test_upload_roster_with_byte_order_mark(client):
    response = client.post(
        "/students/upload",
        files={"roster_file": ("roster.csv", DATABASE.encode("utf-8-sig"), "text/csv")},
    )

    assert response.status_code == 200
    assert response.json()["total"] == 3


def test_upload_requires_file(client):
    response = client.post("/students/upload")

    assert response.status_code == 400
    assert "roster_file" in response.json()["detail"]


def test_upload_rejects_undecodable_file(client):
    response = client.post(
        "/students/upload",
        files={"roster_file": ("roster.csv", b"firstname\n\xff\xfe,x,y,z\n", "text/csv")},
    )

    assert response.status_code == 400
    assert response.json() == {"detail": "Cannot load the database"}
