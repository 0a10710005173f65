"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from takeoff.api.main import create_app


@pytest.fixture
def client():
    return TestClient(create_app())


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_list_calculators(client):
    response = client.get("/api/calculators")
    assert response.status_code == 200
    assert [c["id"] for c in response.json()] == ["drywall", "studs", "insulation"]


class TestTakeoffEndpoint:
    def test_full_takeoff(self, client, project_data):
        response = client.post("/api/takeoff", json={"project": project_data})
        assert response.status_code == 200

        body = response.json()
        report = body["report"]
        assert body["wall_count"] == 2
        assert body["calculator_count"] == 3
        assert report["project_name"] == "Garage"
        assert report["net_area"]["square_inches"] == pytest.approx(447.0 * 144)
        assert report["drywall"]["sheet_count"] == 16
        assert report["studs"]["base_studs"] == 46
        assert report["studs"]["framing"]["king_studs"] == 4
        assert report["insulation"]["quantity"] == 13
        assert [p["base_stud_count"] for p in report["wall_plans"]] == [23, 23]

    def test_config_disables_calculator(self, client, project_data):
        response = client.post("/api/takeoff", json={
            "project": project_data,
            "config": {"disabled_calculators": ["insulation"]},
        })
        assert response.status_code == 200
        assert response.json()["report"]["insulation"] is None

    def test_out_of_bounds_opening(self, client, project_data):
        project_data["penetrations"][0]["xFeet"] = 22.0
        response = client.post("/api/takeoff", json={"project": project_data})

        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "invalid_argument"
        assert body["param"] == "penetrations"
        assert "'D1' exceeds wall 1 length" in body["error"]

    def test_missing_project(self, client):
        assert client.post("/api/takeoff", json={}).status_code == 422


class TestWallPlanEndpoint:
    def test_door(self, client):
        response = client.post("/api/walls/plan", json={
            "wall_length_feet": 24.0,
            "wall_height_feet": 10.0,
            "stud_type": "2x6",
            "openings": [{"x": 2.5, "y": 0.0, "width": 3.0, "height": 7.0}],
        })
        assert response.status_code == 200
        plan = response.json()["plan"]
        assert plan["base_stud_count"] == 23
        assert plan["trimmer_count"] == 2
        assert len(plan["king_centers"]) == 2

    def test_no_openings(self, client):
        response = client.post("/api/walls/plan", json={
            "wall_length_feet": 8.0, "wall_height_feet": 8.0,
        })
        assert response.json()["plan"]["base_stud_count"] == 7

    def test_opening_past_wall_end(self, client):
        response = client.post("/api/walls/plan", json={
            "wall_length_feet": 10.0,
            "wall_height_feet": 8.0,
            "openings": [{"x": 8.0, "y": 0.0, "width": 3.0, "height": 7.0}],
        })
        assert response.status_code == 422
        assert "'#1' exceeds wall 1 length" in response.json()["error"]


def test_validate_reports_overlaps(client, project_data):
    project_data["penetrations"].append(
        {"id": "D2", "type": "door", "wallIndex": 0,
         "xFeet": 4.0, "yFeet": 0.0, "widthFeet": 3.0, "heightFeet": 7.0},
    )
    response = client.post("/api/validate", json={"project": project_data})
    assert response.status_code == 200
    assert len(response.json()["warnings"]) == 1


def test_render_returns_svg(client, project_data):
    response = client.post("/api/render", json={"project": project_data})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert response.text.startswith("<svg")
    assert "Project: Garage" in response.text


def test_openapi_documents_error_body(client):
    schema = client.get("/openapi.json").json()
    assert "ErrorResponse" in schema["components"]["schemas"]
    error = schema["paths"]["/api/takeoff"]["post"]["responses"]["422"]
    assert error["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorResponse")


def test_calculator_count_skips_stud_takeoff_once(client, project_data, caplog):
    project_data["wallLengthsFeet"] = [24.0, 0.0]
    project_data["penetrations"] = project_data["penetrations"][:1]

    with caplog.at_level("INFO"):
        response = client.post("/api/takeoff", json={"project": project_data})

    assert response.status_code == 200
    assert response.json()["calculator_count"] == 2
    assert caplog.text.count("Skipping stud takeoff") == 1


class TestImplausibleSpacing:
    def test_project_spacing_rejected(self, client, project_data):
        project_data["settings"]["studsSpacingInches"] = 1e-300
        response = client.post("/api/takeoff", json={"project": project_data})
        assert response.status_code == 422
        assert response.json()["param"] == "studsSpacingInches"

    def test_wall_plan_spacing_rejected(self, client):
        response = client.post("/api/walls/plan", json={
            "wall_length_feet": 24.0, "wall_height_feet": 8.0, "spacing_inches": 1e-9,
        })
        assert response.status_code == 422
        assert response.json()["param"] == "spacing"
