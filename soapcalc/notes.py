from typing import Optional

import streamlit as st

from soapcalc.presets import COLD_PROCESS, MELT_AND_POUR, SUGGESTED_PH, SoapType

PH_NOTES = {
    MELT_AND_POUR: "Target pH 7.0–8.5. Lower it with lactic acid in micro-doses if needed.",
    COLD_PROCESS: "Typical pH 9.0–10.5; it drops with time and curing. Do not add acids without testing.",
}

QUICK_RECOMMENDATIONS = (
    "Weigh ingredients under 0.5 g on a 0.01 g scale.",
    "Patch test for sensitive skin.",
    "If you use hydrosols or water, add a preservative and run a challenge test.",
    "Record batch, date, operator and raw materials (supplier/lot).",
)

PRESERVATIVE_WARNING = "Validate preservatives and run a challenge test when the formula contains water or hydrosols."

SAFETY_FOOTER = (
    "Planning tool only. It does not replace lab testing, microbiological challenge tests "
    "or supplier verification. Follow NaOH handling protocols and wear PPE."
)

NAOH_CAPTION = "Theoretical values from SAP tables. Adjust SAP, water % and safety margins to your supplier."


def percent_total_warning(total_percent: float, tolerance: float = 0.01) -> Optional[str]:
    """Message for the summary when the lines do not add up to 100 %."""
    if abs(total_percent - 100.0) <= tolerance:
        return None
    if total_percent > 100.0:
        return f"Total is {total_percent:.3f}%, over 100%. Normalize or reduce some lines."
    return f"Total is {total_percent:.3f}%, under 100%. Fill the base or add ingredients."


def notes_ui(soap_type: SoapType):
    st.markdown("##### pH & notes")
    for kind in (MELT_AND_POUR, COLD_PROCESS):
        marker = "**" if kind == soap_type else ""
        st.markdown(f"{marker}{kind.capitalize()}{marker} (pH {SUGGESTED_PH[kind]}): {PH_NOTES[kind]}")
    st.caption(PRESERVATIVE_WARNING)


def recommendations_ui():
    st.markdown("##### Quick recommendations")
    st.markdown("\n".join(f"- {tip}" for tip in QUICK_RECOMMENDATIONS))
