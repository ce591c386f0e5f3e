from soapcalc.formulation import Formulation, default_formulation
from soapcalc.groq_helper import build_prompt
from soapcalc.notes import percent_total_warning
from soapcalc.presets import COLD_PROCESS


def test_percent_total_warning():
    assert percent_total_warning(100.0) is None
    assert percent_total_warning(100.004) is None
    assert "under 100%" in percent_total_warning(89.5)
    assert "over 100%" in percent_total_warning(104)


def test_prompt_lists_ingredients_and_lye():
    prompt = build_prompt(default_formulation(), notes="dry skin")
    assert "Base de glicerina (vegetal): 85.000% (680.00 g)" in prompt
    assert "no lye step" in prompt
    assert "dry skin" in prompt

    cp = Formulation(soap_type=COLD_PROCESS).add_ingredient("coconutOil")
    assert "NaOH 17.328 g" in build_prompt(cp)
