import json
import time
from typing import Optional

from soapcalc.formulation import Formulation
from soapcalc.presets import SUGGESTED_PH, get_ingredient


def ingredient_name(ingredient_id: str) -> str:
    item = get_ingredient(ingredient_id)
    return item.name if item else ingredient_id


def build_export(formulation: Formulation, water_pct: Optional[float] = None) -> dict:
    """Plain-dict snapshot of the formulation, ready for ``json.dumps``."""
    naoh = formulation.naoh_estimate(water_pct)
    return {
        "soapType": formulation.soap_type,
        "batchWeight": formulation.batch_weight_g,
        "superfat": formulation.superfat_pct,
        "totalPercent": round(formulation.total_percent, 3),
        "totalGrams": round(formulation.total_grams, 2),
        "suggestedPH": SUGGESTED_PH[formulation.soap_type],
        "ingredients": [
            {
                "id": line.id,
                "name": ingredient_name(line.id),
                "percent": line.percent,
                "grams": line.grams,
            }
            for line in formulation.lines
        ],
        "naoh": None if naoh is None else {
            "naohGrams": round(naoh["naoh_g"], 3),
            "waterGrams": round(naoh["lye_water_g"], 2),
            "totalOilsGrams": round(naoh["total_oil_g"], 2),
            "totalNaohUnadjusted": round(naoh["naoh_unadjusted_g"], 3),
        },
    }


def export_json(formulation: Formulation, water_pct: Optional[float] = None) -> str:
    return json.dumps(build_export(formulation, water_pct), indent=2, ensure_ascii=False)


def export_filename(now: Optional[float] = None) -> str:
    if now is None:
        now = time.time()
    return f"formulacion_aklla_{int(now * 1000)}.json"
