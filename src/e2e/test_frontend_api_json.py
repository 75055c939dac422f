from pathlib import Path
import pytest
from dictcomplete import Engine
import frontend.web as webmod
from frontend.web import app as flask_app

def _seed(tmp: Path) -> str:
    root = tmp / "dict"; root.mkdir()
    (root / "all").write_text("car\tnoun\ncat\tnoun\tA small feline.\ndo\ndog\n", encoding="utf-8")
    return str(root)

@pytest.fixture
def client(tmp_path: Path, monkeypatch):
    eng = Engine(_seed(tmp_path))
    monkeypatch.setattr(webmod, "_engine", eng)
    yield flask_app.test_client()
    eng.shutdown()

@pytest.mark.e2e
def test_complete_api_json(client):
    rv = client.get("/api/complete?q=ca&k=10")
    assert rv.status_code == 200
    data = rv.get_json()
    assert [r["label"] for r in data] == ["car", "cat"]
    assert data[1] == {"label": "cat", "annotation": "noun", "meta": "A small feline."}

@pytest.mark.e2e
def test_complete_api_cap_and_fuzzy(client):
    assert client.get("/api/complete?q=c&k=1").get_json() == [{"label": "car", "annotation": "noun", "meta": None}]
    assert client.get("/api/complete?q=c&k=0").get_json() == []
    assert [r["label"] for r in client.get("/api/complete?q=c*t&fuzzy=1").get_json()] == ["cat"]
    assert client.get("/api/complete?q=c*t").get_json() == []

@pytest.mark.e2e
def test_entry_lookup(client):
    rv = client.get("/api/entry?label=cat")
    assert rv.status_code == 200 and rv.get_json()["meta"] == "A small feline."
    assert client.get("/api/entry?label=ca").status_code == 404

@pytest.mark.e2e
def test_refresh_accept_and_health(client):
    assert client.post("/api/refresh").get_json() == {"ok": True, "entries": 4}
    ins = client.post("/api/accept", json={"label": "cat", "position": 2}).get_json()
    assert ins["text"] == "cat" and ins["cursor"] == 5
    assert client.post("/api/accept", json={}).status_code == 400
    assert client.get("/api/health").get_json()["ok"] is True

@pytest.mark.e2e
def test_home_page_renders(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "dictionary completion" in r.data.decode("utf-8", errors="ignore").lower()

def test_api_without_engine(monkeypatch):
    monkeypatch.setattr(webmod, "_engine", None)
    c = flask_app.test_client()
    assert c.get("/api/complete?q=a").status_code == 503
    assert c.get("/api/health").get_json()["ok"] is False

@pytest.mark.e2e
@pytest.mark.parametrize("position", ["abc", None, -1, 1.5, True])
def test_accept_rejects_bad_position(client, position):
    rv = client.post("/api/accept", json={"label": "cat", "position": position})
    assert rv.status_code == 400
    assert "position" in rv.get_json()["error"]
