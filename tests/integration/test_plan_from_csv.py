import pandas as pd
import pytest

from irrigation_service.plan_from_csv import run
from irrigation_service.irrigation_service.utils.planner_config import ConfigurationError


@pytest.fixture
def forecast_csv(tmp_path, week_forecast):
    path = tmp_path / "forecast.csv"
    pd.DataFrame([vars(day) for day in week_forecast]).to_csv(path, index=False)
    return path


def test_run_writes_plan(forecast_csv, tmp_path, capsys):
    output = tmp_path / "plan.csv"
    df_plan = run([str(forecast_csv), "--moisture", "1500", "--output", str(output)])

    assert len(df_plan) == 7
    assert list(df_plan.columns) == ["date", "planned_volume_l", "soil_moisture"]
    assert pd.read_csv(output)["planned_volume_l"].tolist() == df_plan["planned_volume_l"].tolist()
    assert "IRRIGATION PLAN - 7 days" in capsys.readouterr().out


def test_run_applies_overrides(forecast_csv):
    df_plan = run([str(forecast_csv), "--moisture", "1500", "--set", "max_irrigation_per_day=0.4"])
    assert df_plan["planned_volume_l"].tolist() == [0.0] * 7


def test_run_rejects_invalid_override(forecast_csv):
    with pytest.raises(ConfigurationError):
        run([str(forecast_csv), "--moisture", "1500", "--set", "cost_w2=-1"])
