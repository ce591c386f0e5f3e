import logging
from textwrap import dedent
from typing import Optional

import streamlit as st

from soapcalc.config import groq_api_key, groq_model
from soapcalc.export import ingredient_name
from soapcalc.formulation import Formulation
from soapcalc.utils import format_number

logger = logging.getLogger(__name__)


def _get_groq_client():
    api_key = groq_api_key()
    if not api_key:
        return None
    try:
        from groq import Groq  # lazy import
    except ImportError:
        logger.warning("groq is not installed; AI explainer disabled")
        return None
    return Groq(api_key=api_key)


def groq_available() -> bool:
    return bool(groq_api_key())


def build_prompt(formulation: Formulation, notes: str = "", water_pct: Optional[float] = None) -> str:
    lines = "\n".join(
        f"- {ingredient_name(line.id)}: {format_number(line.percent, 3)}% "
        f"({format_number(line.grams, 2)} g)"
        for line in formulation.lines
    ) or "- (no ingredients)"
    naoh = formulation.naoh_estimate(water_pct)
    if naoh is None:
        lye = "Melt-and-pour base, no lye step."
    else:
        lye = (
            f"Oils {format_number(naoh['total_oil_g'], 2)} g, "
            f"NaOH {format_number(naoh['naoh_g'], 3)} g at {formulation.superfat_pct}% superfat, "
            f"lye water {format_number(naoh['lye_water_g'], 2)} g."
        )
    return dedent(f"""
    Review this soap formulation and explain it for a small-batch maker.
    - Soap type: {formulation.soap_type}
    - Batch weight (g): {formulation.batch_weight_g}
    - Total percent: {format_number(formulation.total_percent, 3)}
    Ingredients:
    {{lines}}
    Lye: {lye}
    Notes: {notes or "N/A"}

    Include:
    - What each ingredient contributes and whether its percentage is typical.
    - For cold process, how the NaOH and water were derived from SAP values and superfat.
    - Safety reminders for handling NaOH and for preservatives when water is present.
    """).replace("{lines}", lines)


def render_groq_panel(formulation: Formulation, water_pct: Optional[float] = None):
    with st.expander("AI Assistant (Groq)"):
        if not groq_available():
            st.info("To enable the AI explainer, set your `GROQ_API_KEY` in a `.env` file or Streamlit secrets.")
            return
        st.write("Generate a short review of the current formulation.")
        notes = st.text_area("Notes (skin type, scent goals, mold size):", height=80)
        model = st.text_input("Groq model", value=groq_model())
        if st.button("Explain my formula"):
            client = _get_groq_client()
            if not client:
                st.error("Groq client not available. Set GROQ_API_KEY and install groq.")
                return
            try:
                resp = client.chat.completions.create(
                    model=model,
                    messages=[
                        {"role": "system", "content": "You are an expert cosmetic formulator and soap maker."},
                        {"role": "user", "content": build_prompt(formulation, notes, water_pct)},
                    ],
                    temperature=0.2,
                )
                st.markdown(resp.choices[0].message.content)
            except Exception as e:
                logger.exception("Groq request failed")
                st.error(f"Groq error: {e}")
