from __future__ import annotations

import pytest

from asmintr.config import AsmSettings, load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("ASMINTR_STRICT", "ASMINTR_MAX_STEPS", "ASMINTR_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    assert load_settings() == AsmSettings()


def test_values_from_env(monkeypatch):
    monkeypatch.setenv("ASMINTR_STRICT", "Yes")
    monkeypatch.setenv("ASMINTR_MAX_STEPS", " 500 ")
    monkeypatch.setenv("ASMINTR_LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.strict is True
    assert settings.max_steps == 500
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    ("name", "value"),
    [("ASMINTR_STRICT", "maybe"), ("ASMINTR_MAX_STEPS", "ten"), ("ASMINTR_MAX_STEPS", "0")],
)
def test_invalid_values(monkeypatch, name: str, value: str):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        load_settings()
