import pytest

from moodmix.gradients import PALETTE_DATA, gradient_for
from moodmix.models.mood import Mood

ALICE = {"X-Owner-Key": "alice"}
BOB = {"X-Owner-Key": "bob"}
CLASSIFIABLE = {"Sad", "Dreamy", "Energetic", "Floating"}


def _create(client, content, title="", headers=ALICE):
    resp = client.post("/api/entries", json={"title": title, "content": content}, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()


# ---------------------------------------------------------------------------
# Entries
# ---------------------------------------------------------------------------

def test_create_entry(client, app_state):
    entry = _create(client, "I feel so sad and tired today")
    assert entry["mood"] == "Sad"
    assert len(entry["playlist"]) == 5
    sad_urls = {t.url for t in app_state.catalog[Mood.SAD]}
    assert all(t["url"] in sad_urls for t in entry["playlist"])
    assert all(t["video_id"] for t in entry["playlist"])
    assert entry["gradient"] == gradient_for(Mood.SAD, entry["id"], app_state.palette)


def test_energetic_entry(client):
    assert _create(client, "had an amazing dance party, so excited!")["mood"] == "Energetic"


def test_unmatched_entry_gets_a_real_mood(client):
    assert _create(client, "zzz qqq")["mood"] in CLASSIFIABLE


def test_empty_entry_rejected(client):
    resp = client.post("/api/entries", json={"title": " ", "content": ""}, headers=ALICE)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Entry is empty"


def test_guest_cookie_issued_and_reused(client):
    resp = client.post("/api/entries", json={"content": "so sad"})
    assert resp.status_code == 201
    guest = resp.cookies.get("sonic_guest_id")
    assert guest
    assert resp.json()["owner"] == guest
    listed = client.get("/api/entries").json()["entries"]
    assert [e["id"] for e in listed] == [resp.json()["id"]]


def test_list_is_owner_scoped_newest_first(client):
    first = _create(client, "so sad")
    second = _create(client, "a party")
    _create(client, "deep focus", headers=BOB)
    listed = client.get("/api/entries", headers=ALICE).json()["entries"]
    assert [e["id"] for e in listed] == [second["id"], first["id"]]
    assert all("gradient" in e for e in listed)


def test_get_entry(client):
    created = _create(client, "so sad")
    resp = client.get(f"/api/entries/{created['id']}", headers=ALICE)
    assert resp.status_code == 200
    assert resp.json() == created


def test_get_entry_of_other_owner(client):
    created = _create(client, "so sad")
    assert client.get(f"/api/entries/{created['id']}", headers=BOB).status_code == 404


def test_delete_entry(client):
    created = _create(client, "so sad")
    assert client.delete(f"/api/entries/{created['id']}", headers=BOB).status_code == 404
    resp = client.delete(f"/api/entries/{created['id']}", headers=ALICE)
    assert resp.json() == {"ok": True, "deleted": 1}
    assert client.get(f"/api/entries/{created['id']}", headers=ALICE).status_code == 404


def test_clear_entries(client):
    _create(client, "so sad")
    _create(client, "a party")
    _create(client, "so sad", headers=BOB)
    resp = client.delete("/api/entries", headers=ALICE)
    assert resp.json() == {"ok": True, "deleted": 2}
    assert client.get("/api/entries", headers=ALICE).json()["entries"] == []
    assert len(client.get("/api/entries", headers=BOB).json()["entries"]) == 1


def test_chart(client):
    _create(client, "so sad")
    _create(client, "a party")
    chart = client.get("/api/entries/chart", headers=ALICE).json()
    assert [p["mood"] for p in chart["points"]] == ["Sad", "Energetic"]
    assert chart["average"] == 60.0
    assert chart["band"] == "Flow"


# ---------------------------------------------------------------------------
# Mood endpoints
# ---------------------------------------------------------------------------

def test_classify(client):
    resp = client.post("/api/mood/classify", json={"text": "I felt restrained"})
    assert resp.json() == {"mood": "Sad", "keyword": "rain"}


def test_classify_fallback(client):
    body = client.post("/api/mood/classify", json={"text": ""}).json()
    assert body["mood"] in CLASSIFIABLE
    assert body["keyword"] is None


def test_list_moods(client):
    moods = {m["mood"]: m for m in client.get("/api/moods").json()["moods"]}
    assert set(moods) == CLASSIFIABLE | {"Default"}
    assert moods["Sad"]["track_count"] == 10
    assert moods["Default"]["gradient_count"] == 16


@pytest.mark.parametrize("mood", ["Sad", "sad"])
def test_mood_playlist(client, mood):
    body = client.get(f"/api/moods/{mood}/playlist", params={"n": 3}).json()
    assert body["mood"] == "Sad"
    assert len(body["tracks"]) == 3


def test_mood_playlist_unknown(client):
    assert client.get("/api/moods/Angry/playlist").status_code == 404


def test_mood_playlist_bad_size(client):
    assert client.get("/api/moods/Sad/playlist", params={"n": 0}).status_code == 422


def test_gradient(client):
    body = client.get("/api/gradient", params={"mood": "Dreamy", "id": "abc123"}).json()
    assert body == {"mood": "Dreamy", "id": "abc123", "gradient": PALETTE_DATA["Dreamy"][5]}


def test_gradient_empty_id(client):
    body = client.get("/api/gradient", params={"mood": "Floating"}).json()
    assert body["gradient"] == PALETTE_DATA["Floating"][0]


def test_gradient_unknown_mood(client):
    body = client.get("/api/gradient", params={"mood": "Angry", "id": "x"}).json()
    assert body["mood"] == "Default"


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

def test_get_config(client):
    cfg = client.get("/api/config").json()
    assert cfg["playlist_size"] == 5
    assert cfg["guest_cookie_name"] == "sonic_guest_id"


def test_update_config_changes_playlist_size(client):
    resp = client.put("/api/config", json={"playlist_size": 3})
    assert resp.json()["playlist_size"] == 3
    assert len(_create(client, "so sad")["playlist"]) == 3


def test_update_config_validates(client):
    assert client.put("/api/config", json={"playlist_size": 0}).status_code == 422


def test_update_config_cannot_move_entries_file(client, app_state, tmp_path):
    elsewhere = tmp_path / "elsewhere" / "entries.json"
    before = client.get("/api/config").json()["entries_file"]
    resp = client.put("/api/config", json={"entries_file": str(elsewhere)})
    assert resp.status_code == 422
    assert client.get("/api/config").json()["entries_file"] == before
    _create(client, "so sad")
    assert not elsewhere.exists()
    assert app_state.service.store.path == before


def test_update_config_keeps_entry_store(client, app_state):
    store = app_state.service.store
    client.put("/api/config", json={"playlist_size": 3})
    assert app_state.service.playlist_size == 3
    assert app_state.service.store is store


def test_error_bodies_are_documented(client):
    paths = client.get("/openapi.json").json()["paths"]
    ref = "#/components/schemas/ErrorResponse"

    def error_ref(path, method, code):
        content = paths[path][method]["responses"][code]["content"]
        return content["application/json"]["schema"]["$ref"]

    assert error_ref("/api/entries", "post", "400") == ref
    assert error_ref("/api/entries/{entry_id}", "get", "404") == ref
    assert error_ref("/api/entries/{entry_id}", "delete", "404") == ref
    assert error_ref("/api/moods/{mood}/playlist", "get", "404") == ref


def test_index(client):
    assert client.get("/").status_code == 200
