import pytest
from pydantic import ValidationError

from monthly_balances import Settings, load_settings


def test_defaults():
    assert load_settings() == Settings(carry_forward=False, max_workers=1)


def test_environment_is_read(monkeypatch):
    monkeypatch.setenv("MONTHLY_BALANCES_CARRY_FORWARD", "yes")
    monkeypatch.setenv("MONTHLY_BALANCES_MAX_WORKERS", " 4 ")
    assert load_settings() == Settings(carry_forward=True, max_workers=4)


def test_overrides_win_over_environment(monkeypatch):
    monkeypatch.setenv("MONTHLY_BALANCES_CARRY_FORWARD", "1")
    monkeypatch.setenv("MONTHLY_BALANCES_MAX_WORKERS", "8")
    settings = load_settings(carry_forward=False, max_workers=2)
    assert settings == Settings(carry_forward=False, max_workers=2)


def test_bad_boolean_in_environment(monkeypatch):
    monkeypatch.setenv("MONTHLY_BALANCES_CARRY_FORWARD", "maybe")
    with pytest.raises(ValueError, match="MONTHLY_BALANCES_CARRY_FORWARD"):
        load_settings()


def test_bad_worker_count_in_environment(monkeypatch):
    monkeypatch.setenv("MONTHLY_BALANCES_MAX_WORKERS", "many")
    with pytest.raises(ValueError, match="MONTHLY_BALANCES_MAX_WORKERS"):
        load_settings()


@pytest.mark.parametrize("workers", [0, -3, 65])
def test_worker_bounds(workers):
    with pytest.raises(ValidationError):
        load_settings(max_workers=workers)


def test_settings_are_frozen():
    settings = Settings()
    with pytest.raises(ValidationError):
        settings.carry_forward = True
