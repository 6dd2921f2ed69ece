# tests/test_app.py
from app import main


def test_root_is_plaintext_liveness(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain")
    assert "running" in resp.text


def test_unknown_route_uses_error_shape(client):
    resp = client.get("/nope")
    assert resp.status_code == 404
    assert "error" in resp.json()


def test_cors_echoes_origin(client):
    resp = client.get("/categories", headers={"Origin": "https://shop.example.com"})
    assert resp.headers["access-control-allow-origin"] == "https://shop.example.com"
    assert resp.headers["access-control-allow-credentials"] == "true"


def test_cors_preflight(client):
    resp = client.options(
        "/product/1",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "PATCH",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "http://localhost:5173"
    assert "PATCH" in resp.headers["access-control-allow-methods"]


def test_favicon_missing_is_404(client, monkeypatch, tmp_path):
    monkeypatch.setattr(main.settings, "FAVICON_PATH", str(tmp_path / "missing.ico"))
    assert client.get("/favicon.ico").status_code == 404


def test_favicon_served_as_icon(client, monkeypatch, tmp_path):
    icon = tmp_path / "favicon.ico"
    icon.write_bytes(b"\x00\x00\x01\x00fake")
    monkeypatch.setattr(main.settings, "FAVICON_PATH", str(icon))

    resp = client.get("/favicon.ico")
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "image/x-icon"
    assert resp.content == b"\x00\x00\x01\x00fake"
