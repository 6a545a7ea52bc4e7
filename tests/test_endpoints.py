import pytest

from champions import create_app


@pytest.fixture
def club_id(client):
    r = client.post("/api/clubs", json={"name": "Real Madrid"})
    assert r.status_code == 201
    return r.get_json()["id"]


@pytest.fixture
def player_id(client, club_id, full_stats):
    payload = {
        "name": "Vinicius Jr",
        "nationality": "Brazil",
        "position": "LW",
        "clubId": club_id,
        "statistics": full_stats,
    }
    r = client.post("/api/players", json=payload)
    assert r.status_code == 201
    return r.get_json()["id"]


def test_index_and_health(client):
    r = client.get("/api/")
    assert r.status_code == 200
    assert r.get_json()["endpoints"]["clubs"] == "/api/clubs"

    r = client.get("/api/health")
    assert r.status_code == 200
    data = r.get_json()
    assert data["status"] == "OK"
    assert data["database"] == "connected"
    assert data["version"] == "1.0.0"
    assert r.headers["X-Content-Type-Options"] == "nosniff"


def test_empty_listings_return_204(client):
    assert client.get("/api/clubs").status_code == 204
    assert client.get("/api/players").status_code == 204
    assert client.get("/api/players/position/GK").status_code == 204


def test_create_player_and_update_statistics_flow(client, club_id, full_stats):
    assert club_id == 1

    payload = {
        "name": "Vinicius Jr",
        "nationality": "Brasil",
        "position": "LW",
        "clubId": club_id,
        "statistics": full_stats,
    }
    r = client.post("/api/players", json=payload)
    assert r.status_code == 201
    player = r.get_json()
    assert player["id"] == 1
    assert player["clubId"] == 1
    assert player["club"]["name"] == "Real Madrid"
    assert player["statistics"]["overall"] == 88
    assert player["statistics"]["playerId"] == 1

    r = client.put("/api/players/1/statistics", json={"overall": 90})
    assert r.status_code == 200
    stats = r.get_json()["statistics"]
    assert stats["overall"] == 90
    for field, value in full_stats.items():
        if field != "overall":
            assert stats[field] == value

    r = client.get("/api/clubs/1")
    assert r.status_code == 200
    club = r.get_json()
    assert [p["name"] for p in club["players"]] == ["Vinicius Jr"]
    assert "club" not in club["players"][0]


def test_club_crud(client, club_id):
    r = client.get("/api/clubs/name/Real Madrid")
    assert r.status_code == 200
    assert r.get_json()["id"] == club_id

    r = client.put(f"/api/clubs/{club_id}", json={"name": "Real Madrid CF"})
    assert r.status_code == 200
    assert r.get_json()["name"] == "Real Madrid CF"

    assert client.get("/api/clubs/name/Real Madrid").status_code == 404

    r = client.delete(f"/api/clubs/{club_id}")
    assert r.status_code == 200
    assert r.get_json() == {"message": "Club deleted successfully"}
    assert client.get(f"/api/clubs/{club_id}").status_code == 404


def test_duplicate_club_name_conflicts(client, club_id):
    r = client.post("/api/clubs", json={"name": " Real Madrid "})
    assert r.status_code == 409
    assert r.get_json() == {"error": "Conflict", "message": "A club with this name already exists"}


def test_delete_club_with_players_conflicts(client, club_id, player_id):
    r = client.delete(f"/api/clubs/{club_id}")
    assert r.status_code == 409
    assert r.get_json()["message"] == "Cannot delete a club that has players"

    r = client.get(f"/api/clubs/{club_id}/players")
    assert r.status_code == 200
    assert r.get_json()[0]["id"] == player_id


@pytest.mark.parametrize("path", ["/api/clubs/abc", "/api/clubs/0", "/api/players/-1"])
def test_malformed_ids_are_bad_requests(client, path):
    r = client.get(path)
    assert r.status_code == 400
    assert r.get_json()["error"] == "Bad Request"


def test_missing_records_are_not_found(client):
    r = client.get("/api/clubs/99")
    assert r.status_code == 404
    assert r.get_json() == {"error": "Not Found", "message": "Club not found"}

    assert client.get("/api/players/99").status_code == 404
    assert client.delete("/api/players/99").status_code == 404
    assert client.put("/api/players/99/statistics", json={"overall": 50}).status_code == 404


def test_unknown_route(client):
    r = client.get("/api/stadiums")
    assert r.status_code == 404
    assert r.get_json()["message"] == "Route /api/stadiums does not exist"


def test_request_body_validation(client, club_id, full_stats):
    r = client.post("/api/clubs", data="name=Arsenal")
    assert r.status_code == 400
    assert r.get_json()["message"] == "Content-Type must be application/json"

    r = client.post("/api/clubs", json={"name": "   "})
    assert r.status_code == 400
    assert r.get_json()["message"] == "Club name is required and cannot be empty"

    r = client.post("/api/players", json={"name": "No Club", "nationality": "Brazil", "position": "ST"})
    assert r.status_code == 400
    assert "clubId" in r.get_json()["details"]

    payload = {
        "name": "Vinicius Jr",
        "nationality": "Brazil",
        "position": "LW",
        "clubId": club_id,
        "statistics": dict(full_stats, pace=150),
    }
    r = client.post("/api/players", json=payload)
    assert r.status_code == 400
    assert r.get_json()["message"] == "Statistics must be between 0 and 100"
    assert client.get("/api/players").status_code == 204

    payload["clubId"] = 999
    payload["statistics"] = full_stats
    r = client.post("/api/players", json=payload)
    assert r.status_code == 400
    assert r.get_json()["message"] == "Club with id 999 does not exist"


def test_statistics_update_validation(client, player_id):
    r = client.put(f"/api/players/{player_id}/statistics", json={})
    assert r.status_code == 400

    r = client.put(f"/api/players/{player_id}/statistics", json={"overall": 95, "pace": -1})
    assert r.status_code == 400

    r = client.get(f"/api/players/{player_id}")
    assert r.get_json()["statistics"]["overall"] == 88


def test_update_and_delete_player(client, club_id, player_id):
    r = client.post("/api/clubs", json={"name": "FC Barcelona"})
    barca_id = r.get_json()["id"]

    r = client.put(f"/api/players/{player_id}", json={"clubId": barca_id, "position": "RW"})
    assert r.status_code == 200
    data = r.get_json()
    assert data["club"]["name"] == "FC Barcelona"
    assert data["position"] == "RW"
    assert data["name"] == "Vinicius Jr"

    r = client.delete(f"/api/players/{player_id}")
    assert r.status_code == 200
    assert r.get_json() == {"message": "Player deleted successfully"}
    assert client.get(f"/api/players/{player_id}").status_code == 404


def test_player_filters_and_lookups(client, club_id, player_id):
    assert client.get("/api/players?position=LW&nationality=Brazil").get_json()[0]["id"] == player_id
    assert client.get("/api/players?minOverall=80&maxOverall=90").status_code == 200
    assert client.get("/api/players?minOverall=89").status_code == 204
    assert client.get(f"/api/players?clubId={club_id}").status_code == 200
    assert client.get("/api/players/nationality/Brazil").status_code == 200

    r = client.get("/api/players?minOverall=90&maxOverall=80")
    assert r.status_code == 400
    assert r.get_json()["message"] == "minOverall cannot be greater than maxOverall"

    assert client.get("/api/players?clubId=abc").status_code == 400
    assert client.get("/api/players?maxOverall=150").status_code == 400


def test_aggregate_endpoints(client, club_id, player_id):
    r = client.get("/api/clubs/statistics")
    assert r.status_code == 200
    assert r.get_json() == {"totalClubs": 1, "clubsWithPlayers": 1, "averagePlayersPerClub": 1.0}

    r = client.get("/api/players/statistics")
    assert r.status_code == 200
    data = r.get_json()
    assert data["totalPlayers"] == 1
    assert data["averageOverall"] == 88.0
    assert data["topPositions"] == [{"position": "LW", "count": 1}]
    assert data["topNationalities"] == [{"nationality": "Brazil", "count": 1}]


def test_cors_headers_for_allowed_origin(tmp_path):
    app = create_app({
        "DATABASE_URL": f"sqlite:///{tmp_path / 'cors.db'}",
        "SEED_DATA": False,
        "CORS_ORIGINS": ["http://localhost:3000"],
    })
    app.init_db()
    client = app.test_client()

    r = client.get("/api/health", headers={"Origin": "http://localhost:3000"})
    assert r.headers["Access-Control-Allow-Origin"] == "http://localhost:3000"

    r = client.get("/api/health", headers={"Origin": "http://evil.example"})
    assert "Access-Control-Allow-Origin" not in r.headers
    app.extensions["db_engine"].dispose()


def test_internal_errors_hide_details_in_production(tmp_path):
    app = create_app({
        "DATABASE_URL": f"sqlite:///{tmp_path / 'empty.db'}",
        "SEED_DATA": False,
        "ENVIRONMENT": "production",
    })
    # tables never created, so listing clubs fails inside the service
    client = app.test_client()

    r = client.get("/api/clubs")
    assert r.status_code == 500
    assert r.get_json() == {"error": "Internal Server Error", "message": "Something went wrong"}
    app.extensions["db_engine"].dispose()


def test_ids_beyond_integer_column(client, club_id, player_id, full_stats):
    huge = "99999999999999999999"

    r = client.get(f"/api/clubs/{huge}")
    assert r.status_code == 404
    assert r.get_json() == {"error": "Not Found", "message": "Club not found"}
    assert client.get(f"/api/players/{huge}").status_code == 404
    assert client.delete(f"/api/players/{huge}").status_code == 404
    assert client.put(f"/api/players/{huge}/statistics", json={"overall": 50}).status_code == 404

    payload = {
        "name": "Nobody",
        "nationality": "Nowhere",
        "position": "ST",
        "clubId": 10**20,
        "statistics": full_stats,
    }
    r = client.post("/api/players", json=payload)
    assert r.status_code == 400
    assert r.get_json()["message"] == f"Club with id {10**20} does not exist"

    r = client.put(f"/api/players/{player_id}", json={"clubId": 10**20})
    assert r.status_code == 400

    assert client.get(f"/api/players?clubId={10**20}").status_code == 204
    assert client.get(f"/api/players/{player_id}").get_json()["clubId"] == club_id


def test_incomplete_statistics_are_rejected(client, club_id, full_stats):
    stats = dict(full_stats)
    del stats["physical"]
    payload = {
        "name": "Vinicius Jr",
        "nationality": "Brazil",
        "position": "LW",
        "clubId": club_id,
        "statistics": stats,
    }

    r = client.post("/api/players", json=payload)

    assert r.status_code == 400
    assert r.get_json() == {"error": "Bad Request", "message": "Statistics must be between 0 and 100"}
    assert client.get("/api/players").status_code == 204
