from soapcalc import config
from soapcalc.presets import LYE_WATER_PCT_OF_OILS


def test_lye_water_pct_default(monkeypatch):
    monkeypatch.delenv("SOAPCALC_LYE_WATER_PCT", raising=False)
    assert config.lye_water_pct() == LYE_WATER_PCT_OF_OILS


def test_lye_water_pct_from_env(monkeypatch):
    monkeypatch.setenv("SOAPCALC_LYE_WATER_PCT", " 33 ")
    assert config.lye_water_pct() == 33.0


def test_lye_water_pct_bad_value_falls_back(monkeypatch):
    monkeypatch.setenv("SOAPCALC_LYE_WATER_PCT", "lots")
    assert config.lye_water_pct() == LYE_WATER_PCT_OF_OILS


def test_groq_model_override(monkeypatch):
    monkeypatch.setenv("GROQ_MODEL", "qwen/qwen3-32b")
    assert config.groq_model() == "qwen/qwen3-32b"
