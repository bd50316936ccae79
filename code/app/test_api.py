import math
from datetime import date

import pytest
import structlog
from fastapi.testclient import TestClient

from app.main import app
from app.core.config import ConfigError, load_settings
from app.core.log_config import configure_logging
from app.core.sample_payloads import SAMPLE_REQUEST, SAMPLE_SCENARIO_REQUEST

client = TestClient(app)


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_project_sample():
    resp = client.post("/project", json=SAMPLE_REQUEST)
    assert resp.status_code == 200
    body = resp.json()
    assert body["total_annual_expense"] == 96000
    assert body["withdrawal_based_number"] == pytest.approx(2400000)
    assert body["yearly_savings"] == 104000
    assert body["years_to_reach_fire_goal"] == pytest.approx(16.67, abs=0.01)
    assert body["fire_goal_reachable"] is True
    assert [c["name"] for c in body["breakdown"]][:2] == ["housing", "food"]


def test_project_annual_period():
    payload = {**SAMPLE_REQUEST, "period": "annual", "expenses": {"housing": 40000, "food": 20000,
               "consumables": 0, "medical": 0, "transport": 0, "hobbies": 0}}
    body = client.post("/project", json=payload).json()
    assert body["period"] == "annual"
    assert body["total_annual_expense"] == 60000


def test_unreachable_goal_is_null():
    body = client.post("/project", json={**SAMPLE_REQUEST, "annual_income": 50000}).json()
    assert body["years_to_reach_fire_goal"] is None
    assert body["fire_goal_reachable"] is False
    assert body["custom_goal_reachable"] is False
    assert body["fire_goal_year"] is None
    assert body["custom_goal_year"] is None


def test_goal_years_count_whole_years_from_today():
    body = client.post("/project", json=SAMPLE_REQUEST).json()
    this_year = date.today().year
    assert body["fire_goal_year"] == this_year + math.ceil(body["years_to_reach_fire_goal"])
    assert body["custom_goal_year"] == this_year + math.ceil(body["years_to_reach_custom_goal"])
    assert body["custom_goal_year"] > body["fire_goal_year"]


def test_negative_expense_rejected():
    payload = {**SAMPLE_REQUEST, "expenses": {**SAMPLE_REQUEST["expenses"], "food": -1}}
    assert client.post("/project", json=payload).status_code == 422


def test_zero_rate_rejected_at_boundary():
    assert client.post("/project", json={**SAMPLE_REQUEST, "return_rate": 0}).status_code == 422


def test_scenarios_endpoint():
    body = client.post("/scenarios", json=SAMPLE_SCENARIO_REQUEST).json()
    assert body["scenarios"][-1]["name"] == "side_income"
    assert body["metadata"]["count"] == len(body["scenarios"])


def test_timeline_reaches_goal():
    body = client.post("/timeline", json=SAMPLE_REQUEST).json()
    assert body["years_to_target"] == pytest.approx(16.67, abs=0.01)
    assert len(body["timeline"]) == 18
    assert body["timeline"][-1] >= body["target"]


def test_timeline_custom_target_unreachable_is_capped():
    payload = {**SAMPLE_REQUEST, "annual_income": 10000, "target": "custom"}
    body = client.post("/timeline", json=payload).json()
    assert body["years_to_target"] is None
    assert body["target"] == 5000000
    assert len(body["timeline"]) == 61
    assert set(body["timeline"]) == {0.0}


def test_settings_defaults(monkeypatch):
    for key in ("FIRE_SAVINGS_GROWTH_RATE", "FIRE_EXPENSE_PERIOD", "FIRE_LOG_LEVEL", "FIRE_LOG_JSON",
                "FIRE_TIMELINE_YEARS_MAX"):
        monkeypatch.delenv(key, raising=False)
    s = load_settings()
    assert s.savings_growth_rate == 0.04
    assert s.expense_period == "monthly"
    assert s.log_json is False
    assert s.log_level == "INFO"
    assert s.timeline_years_max == 60


@pytest.mark.parametrize("key,value", [
    ("FIRE_SAVINGS_GROWTH_RATE", "0"),
    ("FIRE_SAVINGS_GROWTH_RATE", "abc"),
    ("FIRE_SAVINGS_GROWTH_RATE", "nan"),
    ("FIRE_SAVINGS_GROWTH_RATE", "inf"),
    ("FIRE_EXPENSE_PERIOD", "weekly"),
    ("FIRE_TIMELINE_YEARS_MAX", "0"),
    ("FIRE_TIMELINE_YEARS_MAX", "abc"),
])
def test_invalid_settings(monkeypatch, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(ConfigError):
        load_settings()


def test_custom_timeline_without_goal_rejected():
    payload = {**SAMPLE_REQUEST, "custom_goal": None, "target": "custom"}
    assert client.post("/timeline", json=payload).status_code == 422


def test_configure_logging_json_renderer():
    try:
        configure_logging("DEBUG", format_json=True)
        assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)
    finally:
        configure_logging()
