def test_swagger_json_documents_api_routes(client):
    r = client.get("/api/docs/swagger.json")
    assert r.status_code == 200
    document = r.get_json()

    assert document["basePath"] == "/api"
    assert document["info"]["title"] == "Champions API"
    assert "/clubs" in document["paths"]
    assert "/players/{player_id}/statistics" in document["paths"]
    assert "Statistics" in document["definitions"]
    assert "409" in document["paths"]["/clubs/{club_id}"]["delete"]["responses"]


def test_swagger_ui_is_served(client):
    r = client.get("/api/docs/")
    assert r.status_code == 200
    assert b"swagger" in r.data.lower()
