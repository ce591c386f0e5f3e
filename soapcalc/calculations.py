from typing import Dict, Iterable, Mapping, Optional

from soapcalc.presets import LYE_WATER_PCT_OF_OILS


def percent_to_grams(percent: float, total_batch_g: float) -> float:
    return (percent / 100.0) * total_batch_g


def grams_to_percent(grams: float, total_batch_g: float) -> float:
    if total_batch_g == 0:
        return 0.0
    return (grams / total_batch_g) * 100.0


def estimate_naoh(
    oils: Iterable[Mapping],
    total_batch_g: float,
    superfat_pct: float,
    water_pct: Optional[float] = None,
) -> Dict[str, float]:
    """Estimate NaOH and lye water for a cold-process batch.

    ``oils`` are mappings with a ``percent`` of the batch and an optional
    ``sap_naoh`` (g NaOH per g oil). Oils without a SAP value still count
    towards the oil weight but need no lye. Values are returned unrounded.
    """
    if water_pct is None:
        water_pct = LYE_WATER_PCT_OF_OILS

    total_oil_g = 0.0
    naoh_unadjusted_g = 0.0
    for oil in oils:
        g = percent_to_grams(oil["percent"], total_batch_g)
        total_oil_g += g
        sap = oil.get("sap_naoh")
        if not sap:
            continue
        naoh_unadjusted_g += g * sap

    naoh_g = naoh_unadjusted_g * (1.0 - superfat_pct / 100.0)
    lye_water_g = (water_pct / 100.0) * total_oil_g

    return {
        "total_oil_g": total_oil_g,
        "naoh_unadjusted_g": naoh_unadjusted_g,
        "naoh_g": naoh_g,
        "lye_water_g": lye_water_g,
    }
