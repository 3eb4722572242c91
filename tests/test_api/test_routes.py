# tests/test_api/test_routes.py
import pytest
from fastapi.testclient import TestClient
from core.sa import database as database_module
from api.main import app

CATALOG = """lastName,firstName,name,year,box,read,seriesName,seriesOrdinal,notes
Rubble,Barney,Bedrock Tales,1960,A1,x,Bedrock,1,
Flintstone,Fred,Quarry Days,1961,Kobo,,,,
"""

@pytest.fixture
def client(database, monkeypatch):
    """API client whose sessions come from the per-test database"""
    monkeypatch.setattr(database_module, "_db", database)
    with TestClient(app) as client:
        yield client

@pytest.fixture
def library(client):
    response = client.post("/api/libraries", json={"name": "Bedrock Branch"})
    assert response.status_code == 200
    return response.json()

@pytest.fixture
def author(client, library):
    response = client.post("/api/authors", json={
        "first_name": "Barney", "last_name": "Rubble", "library_id": library["id"]
    })
    assert response.status_code == 200
    return response.json()

@pytest.fixture
def story(client, library):
    response = client.post("/api/stories", json={"library_id": library["id"], "name": "Quarry Days"})
    assert response.status_code == 200
    return response.json()

def test_root(client):
    assert client.get("/").status_code == 200

def test_library_crud(client, library):
    assert library["name"] == "Bedrock Branch"
    assert library["version"] == 0
    assert "authors" not in library

    response = client.put(f"/api/libraries/{library['id']}", json={"notes": "Downtown"})
    assert response.status_code == 200
    assert response.json()["notes"] == "Downtown"
    assert response.json()["version"] == 1

    response = client.delete(f"/api/libraries/{library['id']}")
    assert response.status_code == 200
    assert response.json()["name"] == "Bedrock Branch"

    response = client.get(f"/api/libraries/{library['id']}")
    assert response.status_code == 404
    assert response.json() == {"detail": f"id: Missing Library {library['id']}"}

def test_validation_errors_are_bad_requests(client, library):
    response = client.post("/api/libraries", json={"notes": "No name"})
    assert response.status_code == 400
    assert response.json() == {"detail": "name: Is required"}

    response = client.post("/api/libraries", json={"name": "Bedrock Branch"})
    assert response.status_code == 400
    assert response.json() == {"detail": "name: Name 'Bedrock Branch' is already in use"}

def test_bad_pagination(client):
    response = client.get("/api/libraries?limit=abc")
    assert response.status_code == 400
    assert response.json() == {"detail": "abc is not a number"}

def test_pagination_and_name_lookups(client):
    for name in ["Gamma", "Alpha", "Beta"]:
        client.post("/api/libraries", json={"name": name})

    response = client.get("/api/libraries?offset=1&limit=1")
    assert [library["name"] for library in response.json()] == ["Beta"]

    response = client.get("/api/libraries/exact/Gamma")
    assert response.json()["name"] == "Gamma"
    assert client.get("/api/libraries/exact/Delta").status_code == 404

    response = client.get("/api/libraries/name/ET")
    assert [library["name"] for library in response.json()] == ["Beta"]

def test_include_related_records(client, library, author):
    response = client.get(f"/api/libraries/{library['id']}?withAuthors")
    assert [a["last_name"] for a in response.json()["authors"]] == ["Rubble"]

    response = client.get(f"/api/authors/{author['id']}?withLibrary")
    assert response.json()["library"]["name"] == "Bedrock Branch"
    assert "stories" not in response.json()

def test_author_exact_uses_two_names(client, author):
    response = client.get("/api/authors/exact/Barney/Rubble")
    assert response.status_code == 200
    assert response.json()["id"] == author["id"]

    response = client.get("/api/authors/exact/Fred/Flintstone")
    assert response.status_code == 404
    assert response.json() == {"detail": "name: Missing Author 'Fred Flintstone'"}

def test_relationship_routes(client, author, story):
    url = f"/api/authors/{author['id']}/stories"

    response = client.post(f"{url}/{story['id']}")
    assert response.status_code == 200
    assert response.json()["name"] == "Quarry Days"

    response = client.post(f"{url}/{story['id']}")
    assert response.status_code == 400
    assert "is already associated with Author" in response.json()["detail"]

    assert [s["id"] for s in client.get(url).json()] == [story["id"]]
    assert client.get(f"{url}/exact/Quarry Days").json()["id"] == story["id"]
    assert len(client.get(f"{url}/name/quarry").json()) == 1

    response = client.get(f"/api/stories/{story['id']}/authors")
    assert [a["first_name"] for a in response.json()] == ["Barney"]

    response = client.delete(f"{url}/{story['id']}")
    assert response.status_code == 200
    assert client.get(url).json() == []

def test_series_story_ordinal(client, library, story):
    series = client.post("/api/series", json={"library_id": library["id"], "name": "Bedrock"}).json()
    response = client.post(f"/api/series/{series['id']}/stories/{story['id']}?ordinal=2")
    assert response.status_code == 200
    assert [s["name"] for s in client.get(f"/api/series/{series['id']}/stories").json()] == ["Quarry Days"]

def test_library_children(client, library, author, story):
    base = f"/api/libraries/{library['id']}"
    assert [a["id"] for a in client.get(f"{base}/authors").json()] == [author["id"]]
    assert client.get(f"{base}/authors/exact/Barney/Rubble").json()["id"] == author["id"]
    assert [s["name"] for s in client.get(f"{base}/stories/name/days").json()] == ["Quarry Days"]
    assert client.get(f"{base}/volumes").json() == []

    response = client.get("/api/libraries/9999/series")
    assert response.status_code == 404
    assert response.json() == {"detail": "library_id: Missing Library 9999"}

def test_devmode_import_and_resync(client):
    response = client.post(
        "/api/devmode/import?library=Imported",
        content=CATALOG,
        headers={"Content-Type": "text/csv"},
    )
    assert response.status_code == 200
    results = response.json()
    assert results["countRows"] == 2
    assert results["countAuthors"] == 2
    assert results["countSeriesStories"] == 1

    libraries = client.get("/api/libraries").json()
    assert [library["name"] for library in libraries] == ["Imported"]
    volumes = client.get(f"/api/libraries/{libraries[0]['id']}/volumes").json()
    assert [(v["name"], v["media"]) for v in volumes] == [("Bedrock Tales", "Book"), ("Quarry Days", "Kobo")]

    response = client.post("/api/devmode/resync")
    assert response.status_code == 200
    assert client.get("/api/libraries").json() == []

def test_ordinal_is_only_read_for_series_stories(client, author, story):
    response = client.post(f"/api/authors/{author['id']}/stories/{story['id']}?ordinal=2")
    assert response.status_code == 200
    assert [s["id"] for s in client.get(f"/api/authors/{author['id']}/stories").json()] == [story["id"]]

def test_story_series_ordinal(client, library, story):
    series = client.post("/api/series", json={"library_id": library["id"], "name": "Bedrock"}).json()
    response = client.post(f"/api/stories/{story['id']}/series/{series['id']}?ordinal=4")
    assert response.status_code == 200
    assert response.json()["name"] == "Bedrock"

def test_negative_pagination(client):
    response = client.get("/api/libraries?limit=-1")
    assert response.status_code == 400
    assert response.json() == {"detail": "-1 is not a positive number"}

def test_linked_record_cannot_change_library(client, library, author, story):
    other = client.post("/api/libraries", json={"name": "Other Branch"}).json()
    client.post(f"/api/authors/{author['id']}/stories/{story['id']}")

    response = client.put(f"/api/stories/{story['id']}", json={"library_id": other["id"]})
    assert response.status_code == 400
    assert response.json()["detail"].startswith(f"library_id: Cannot move Story {story['id']}")
