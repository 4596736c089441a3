"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from rectgrid.engine.registry import get_registry
from rectgrid.main import app


client = TestClient(app)


def _rects(*bounds):
    return {
        "rectangles": [
            {"top": t, "left": l, "bottom": b, "right": r} for t, l, b, r in bounds
        ]
    }


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["transforms_registered"] == 5


def test_grid_side_by_side():
    response = client.post("/api/grid", json=_rects((0, 0, 10, 10), (0, 10, 10, 20)))
    assert response.status_code == 200
    data = response.json()
    assert data["rows"] == [[0, 10]]
    assert data["columns"] == [[0, 10], [10, 20]]
    assert data["cells"] == [[0, 1]]
    assert data["owners"] == [[0, 1]]
    assert data["min_dimension"] == 10
    assert data["scale"] == 10.0
    assert data["ascii_grid"] == "0 1"


def test_grid_empty_cells_are_null():
    response = client.post("/api/grid", json=_rects((0, 0, 10, 20), (10, 0, 20, 10)))
    data = response.json()
    assert data["cells"] == [[0, 0], [1, None]]


def test_grid_no_rectangles():
    response = client.post("/api/grid", json={"rectangles": []})
    assert response.status_code == 200
    data = response.json()
    assert data["rows"] == []
    assert data["cells"] == []
    assert data["min_dimension"] is None


def test_grid_rejects_inverted_rectangle():
    response = client.post("/api/grid", json=_rects((10, 0, 0, 10)))
    assert response.status_code == 422


def test_grid_rejects_zero_width_rectangle():
    response = client.post("/api/grid", json=_rects((0, 5, 10, 5)))
    assert response.status_code == 422


def test_render_html():
    response = client.post("/api/render", json=_rects((0, 0, 10, 10)))
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert '<td style="width: 100px" class="filled0">&nbsp;</td>' in response.text


def test_grid_rejects_out_of_range_coordinate():
    response = client.post("/api/grid", json=_rects((0, 0, 2**63, 10)))
    assert response.status_code == 422


def test_failed_transform_returns_500(monkeypatch):
    def fail(ctx, config):
        raise ValueError("scale exploded")

    monkeypatch.setattr(get_registry().get("T0.02"), "fn", fail)

    response = client.post("/api/grid", json=_rects((0, 0, 10, 10)))
    assert response.status_code == 500
    detail = response.json()["detail"]
    assert "T0.02" in detail
    assert "scale exploded" in detail["T0.02"]


def test_failed_transform_render_returns_500(monkeypatch):
    def fail(ctx, config):
        raise ValueError("sweep exploded")

    monkeypatch.setattr(get_registry().get("T1.01"), "fn", fail)

    response = client.post("/api/render", json=_rects((0, 0, 10, 10)))
    assert response.status_code == 500
    detail = response.json()["detail"]
    assert "T1.01" in detail
    # Dependents are skipped, not run
    assert "T1.02" in detail
