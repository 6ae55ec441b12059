"""
Integration tests for the irrigation REST endpoints.
"""
import pytest
from django.test import override_settings
from django.urls import reverse
from rest_framework.test import APIRequestFactory

from irrigation_service.irrigation_service.service.plan_service import get_planner
from irrigation_service.irrigation_service.views.health_views import alive_check
from irrigation_service.irrigation_service.views.plan_views import compute_plan, get_plan_params, get_soil_status


@pytest.fixture(autouse=True)
def fresh_planner():
    get_planner.cache_clear()
    yield
    get_planner.cache_clear()


@pytest.fixture
def factory():
    return APIRequestFactory()


@pytest.fixture
def plan_body(week_forecast):
    return {
        "initial_moisture": 1500,
        "forecasts": [
            {"date": d.date, "temp_max": d.temp_max, "temp_min": d.temp_min, "precip_mm": d.precip_mm}
            for d in week_forecast
        ],
    }


def test_compute_plan(factory, plan_body):
    response = compute_plan(factory.post("/irrigation/plan", plan_body, format="json"))

    assert response.status_code == 200
    plan = response.data["plan"]
    assert [p["date"] for p in plan] == [f["date"] for f in plan_body["forecasts"]]
    for entry in plan:
        assert 0.0 <= entry["planned_volume_l"] <= 5.0
        assert 0.0 <= entry["soil_moisture"] <= 4095.0

    summary = response.data["summary"]
    assert summary["total_irrigation_l"] == pytest.approx(sum(p["planned_volume_l"] for p in plan))
    assert summary["optimal_min"] == 1800

    dashboard = response.data["dashboard"]
    assert dashboard["forecasts"][0]["name"] == "soil-moisture"
    assert len(dashboard["forecasts"][0]["values"][0]["value"]) == len(plan)


def test_compute_plan_is_repeatable(factory, plan_body):
    first = compute_plan(factory.post("/irrigation/plan", plan_body, format="json"))
    second = compute_plan(factory.post("/irrigation/plan", plan_body, format="json"))
    assert first.data == second.data


def test_compute_plan_with_empty_horizon(factory):
    response = compute_plan(factory.post("/irrigation/plan", {"initial_moisture": 2000, "forecasts": []}, format="json"))
    assert response.status_code == 200
    assert response.data["plan"] == []
    assert response.data["summary"]["total_irrigation_l"] == 0.0


def test_compute_plan_clamps_out_of_range_reading(factory, plan_body):
    plan_body["initial_moisture"] = 6000
    response = compute_plan(factory.post("/irrigation/plan", plan_body, format="json"))
    assert response.status_code == 200
    assert len(response.data["plan"]) == len(plan_body["forecasts"])


def test_compute_plan_rejects_missing_reading(factory, plan_body):
    del plan_body["initial_moisture"]
    response = compute_plan(factory.post("/irrigation/plan", plan_body, format="json"))
    assert response.status_code == 400
    assert "initial_moisture" in response.data


def test_compute_plan_rejects_negative_precipitation(factory, plan_body):
    plan_body["forecasts"][0]["precip_mm"] = -1.0
    response = compute_plan(factory.post("/irrigation/plan", plan_body, format="json"))
    assert response.status_code == 400


def test_compute_plan_reports_invalid_configuration(factory, plan_body):
    with override_settings(IRRIGATION_PLANNER={"soil_optimal_min": "3000", "soil_optimal_max": "1000"}):
        response = compute_plan(factory.post("/irrigation/plan", plan_body, format="json"))
    assert response.status_code == 500
    assert "configuration" in response.data["error"]


def test_plan_params(factory):
    response = get_plan_params(factory.get("/irrigation/params"))
    assert response.status_code == 200
    assert response.data["actions"] == [{"name": "watering", "type": "float"}]
    assert response.data["planner"]["max_irrigation_per_day"] == 5.0


@pytest.mark.parametrize("moisture, expected", [("1000", "dry"), ("2000", "optimal"), ("3000", "wet")])
def test_soil_status(factory, moisture, expected):
    response = get_soil_status(factory.get("/irrigation/soil-status", {"moisture": moisture}))
    assert response.status_code == 200
    assert response.data["status"] == expected


@pytest.mark.parametrize("params", [{}, {"moisture": "wet"}])
def test_soil_status_rejects_bad_input(factory, params):
    response = get_soil_status(factory.get("/irrigation/soil-status", params))
    assert response.status_code == 400


def test_alive_check(factory):
    response = alive_check(factory.get("/health"))
    assert response.status_code == 200
    assert response.data == {"status": "alive"}


@pytest.mark.parametrize(
    "name, path",
    [
        ("compute_plan", "/irrigation/plan"),
        ("get_plan_params", "/irrigation/params"),
        ("get_soil_status", "/irrigation/soil-status"),
        ("alive_check", "/health"),
    ],
)
def test_routes(name, path):
    assert reverse(name) == path


@override_settings(ALLOWED_HOSTS=["testserver"])
def test_service_runs_without_auth_or_database():
    from django.apps import apps
    from django.conf import settings
    from django.test import Client

    assert not apps.is_installed("django.contrib.auth")
    assert not apps.is_installed("django.contrib.contenttypes")
    # Django fills an empty DATABASES with the dummy backend
    engine = settings.DATABASES.get("default", {}).get("ENGINE", "django.db.backends.dummy")
    assert engine == "django.db.backends.dummy"

    response = Client().get("/irrigation/params")
    assert response.status_code == 200
    assert "planner" in response.json()
