import math

from soapcalc.calculations import estimate_naoh, grams_to_percent, percent_to_grams


def test_percent_grams_conversion():
    assert math.isclose(percent_to_grams(12, 800), 96.0)
    assert math.isclose(grams_to_percent(50, 800), 6.25)
    for percent in (0.3, 2.0, 12.5, 85.0, 140.0):
        grams = percent_to_grams(percent, 1234.5)
        assert math.isclose(grams_to_percent(grams, 1234.5), percent, rel_tol=1e-9)


def test_grams_to_percent_zero_batch():
    assert grams_to_percent(50, 0) == 0
    assert grams_to_percent(0, 0) == 0


def test_no_oils():
    out = estimate_naoh([], 800, 5)
    assert out == {"total_oil_g": 0.0, "naoh_unadjusted_g": 0.0, "naoh_g": 0.0, "lye_water_g": 0.0}


def test_coconut_example():
    # 800 g batch, coconut oil at 12% (SAP 0.190), 5% superfat
    out = estimate_naoh([{"percent": 12, "sap_naoh": 0.190}], 800, 5)
    assert math.isclose(out["total_oil_g"], 96.0)
    assert math.isclose(out["naoh_unadjusted_g"], 18.24)
    assert math.isclose(out["naoh_g"], 17.328)
    assert math.isclose(out["lye_water_g"], 36.48)


def test_oil_without_sap_counts_as_oil_only():
    oils = [
        {"percent": 30, "sap_naoh": 0.134},
        {"percent": 10},
        {"percent": 5, "sap_naoh": None},
    ]
    out = estimate_naoh(oils, 1000, 0)
    assert math.isclose(out["total_oil_g"], 450.0)
    assert math.isclose(out["naoh_unadjusted_g"], 300 * 0.134)
    assert math.isclose(out["naoh_g"], out["naoh_unadjusted_g"])


def test_superfat_and_water_ratio():
    oils = [{"percent": 50, "sap_naoh": 0.134}, {"percent": 20, "sap_naoh": 0.190}]
    out = estimate_naoh(oils, 1000, 8, water_pct=33)
    unadjusted = 500 * 0.134 + 200 * 0.190
    assert math.isclose(out["naoh_unadjusted_g"], unadjusted)
    assert math.isclose(out["naoh_g"], unadjusted * 0.92)
    assert math.isclose(out["lye_water_g"], 0.33 * 700)
