from pathlib import Path
import pytest
import bloodhound_web
import bloodhound_web.web as webmod
from bloodhound.engine import Engine
from bloodhound_web.web import app as flask_app

def _seed(tmp: Path) -> str:
    root = tmp / "project"; root.mkdir()
    (root / "src").mkdir()
    (root / "src" / "hound.rs").write_text("", encoding="utf-8")
    (root / "lib").mkdir()
    (root / "lib" / "hounds.rs").write_text("", encoding="utf-8")
    (root / "Houndfile").write_text("", encoding="utf-8")
    return str(root)

@pytest.fixture
def client(tmp_path: Path, monkeypatch):
    eng = Engine(); eng.build(_seed(tmp_path))
    monkeypatch.setattr(webmod, "_engine", eng)
    yield flask_app.test_client()
    eng.shutdown()

@pytest.mark.e2e
def test_find_api_json(client):
    rv = client.get("/api/find?q=Hound&k=2")
    assert rv.status_code == 200
    data = rv.get_json()
    assert [row["path"] for row in data] == ["Houndfile", "src/hound.rs"]
    for row in data:
        assert set(row) == {"path", "score"}

@pytest.mark.e2e
def test_find_api_empty_query_returns_empty_list(client):
    rv = client.get("/api/find?q=")
    assert rv.status_code == 200 and rv.get_json() == []

@pytest.mark.e2e
def test_health_reports_candidate_count(client):
    data = client.get("/api/health").get_json()
    assert data == {"ok": True, "candidates": 3}

@pytest.mark.e2e
def test_home_page_renders(client):
    r = client.get("/")
    assert r.status_code == 200
    html = r.data.decode("utf-8", errors="ignore").lower()
    assert "<form" in html and "/api/find" in html

def test_find_api_without_engine_is_unavailable(monkeypatch):
    monkeypatch.setattr(webmod, "_engine", None)
    client = flask_app.test_client()
    rv = client.get("/api/find?q=x")
    assert rv.status_code == 503
    assert "error" in rv.get_json()
    assert client.get("/api/health").get_json() == {"ok": False, "candidates": 0}

@pytest.mark.e2e
def test_module_level_initialize_and_find(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(bloodhound_web, "_engine", None)
    monkeypatch.setattr(webmod, "_engine", None)
    eng = bloodhound_web.initialize(_seed(tmp_path), exclusions=["lib/"])
    try:
        assert bloodhound_web.find("hound", top_k=5) == ["Houndfile", "src/hound.rs"]
        assert webmod._engine is eng
    finally:
        eng.shutdown()

def test_module_level_find_before_initialize_raises(monkeypatch):
    monkeypatch.setattr(bloodhound_web, "_engine", None)
    with pytest.raises(RuntimeError):
        bloodhound_web.find("x")
