import logging

import streamlit as st

from soapcalc.config import configure_logging, lye_water_pct
from soapcalc.errors import BaseFillNotSupported
from soapcalc.export import export_filename, export_json, ingredient_name
from soapcalc.formulation import Formulation, default_formulation
from soapcalc.groq_helper import render_groq_panel
from soapcalc.notes import (
    NAOH_CAPTION,
    SAFETY_FOOTER,
    notes_ui,
    percent_total_warning,
    recommendations_ui,
)
from soapcalc.presets import (
    COLD_PROCESS,
    SOAP_TYPE_LABELS,
    SOAP_TYPES,
    SUGGESTED_PH,
    catalog_by_category,
    get_ingredient,
)
from soapcalc.utils import format_number

configure_logging()
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Aklla Soap Formulator", page_icon="🧼", layout="wide")
st.title("Aklla Soap Formulator 🧼")
st.markdown("Plan formulas, convert % ⇄ g and estimate NaOH for cold process. **Validate in the lab before production.**")

WATER_PCT = lye_water_pct()

# ------------------------------------------------------------------
# SESSION STATE
# ------------------------------------------------------------------

def _sync_widgets(formulation: Formulation):
    """Push formulation values into widget keys so every input shows the recomputed numbers."""
    st.session_state.soap_type = formulation.soap_type
    st.session_state.batch_weight = float(formulation.batch_weight_g)
    st.session_state.superfat = float(formulation.superfat_pct)
    for line in formulation.lines:
        st.session_state[f"pct_{line.id}"] = float(line.percent)
        st.session_state[f"g_{line.id}"] = float(line.grams)


def _current() -> Formulation:
    return st.session_state.formulation


def _commit(formulation: Formulation):
    st.session_state.formulation = formulation
    _sync_widgets(formulation)


if "formulation" not in st.session_state:
    _commit(default_formulation())

# Callbacks run before the rerun, so widget keys may still be written here.

def _on_soap_type():
    _commit(_current().with_soap_type(st.session_state.soap_type))


def _on_batch_weight():
    _commit(_current().with_batch_weight(st.session_state.batch_weight))


def _on_superfat():
    _commit(_current().with_superfat(st.session_state.superfat))


def _on_percent(ingredient_id: str):
    _commit(_current().update_percent(ingredient_id, st.session_state[f"pct_{ingredient_id}"]))


def _on_grams(ingredient_id: str):
    _commit(_current().update_grams(ingredient_id, st.session_state[f"g_{ingredient_id}"]))


def _on_add(ingredient_id: str):
    _commit(_current().add_ingredient(ingredient_id))


def _on_remove(ingredient_id: str):
    _commit(_current().remove_ingredient(ingredient_id))


def _on_rebalance():
    if _current().total_percent <= 0:
        st.session_state.flash = "Nothing to normalize: the percent total is zero."
        return
    _commit(_current().rebalanced())


def _on_fill_base():
    try:
        _commit(_current().with_base_filled())
    except BaseFillNotSupported as e:
        logger.info("Base fill refused for %s formulation", _current().soap_type)
        st.session_state.flash = str(e)


def _on_clear():
    _commit(_current().clear())


formulation = _current()

# Widgets that were hidden on the previous run lose their keys; restore them from the formulation.
for _key, _value in (("superfat", formulation.superfat_pct), ("batch_weight", formulation.batch_weight_g)):
    if _key not in st.session_state:
        st.session_state[_key] = float(_value)

# ------------------------------------------------------------------
# SIDEBAR - Batch parameters and ingredient library
# ------------------------------------------------------------------
with st.sidebar:
    st.header("Batch")
    st.radio(
        "Soap type",
        SOAP_TYPES,
        format_func=SOAP_TYPE_LABELS.get,
        key="soap_type",
        on_change=_on_soap_type,
    )
    st.number_input("Batch weight (g)", min_value=1.0, step=10.0, key="batch_weight", on_change=_on_batch_weight)
    if formulation.is_cold_process:
        st.number_input("Superfat (%)", min_value=0.0, max_value=100.0, step=0.5, key="superfat", on_change=_on_superfat)

    st.header("Library")
    in_formula = set(formulation.ids())
    for category, items in catalog_by_category().items():
        with st.expander(category):
            for item in items:
                c1, c2 = st.columns([3, 1])
                c1.write(item.name)
                c1.caption(f"default {item.default_percent}%")
                c2.button(
                    "Add",
                    key=f"add_{item.id}",
                    disabled=item.id in in_formula,
                    on_click=_on_add,
                    args=(item.id,),
                )

# ------------------------------------------------------------------
# MAIN - Formulation lines
# ------------------------------------------------------------------
if "flash" in st.session_state:
    st.info(st.session_state.pop("flash"))

col_main, col_notes = st.columns([2, 1])

with col_main:
    st.subheader(f"Formulation · {SOAP_TYPE_LABELS[formulation.soap_type]} · {format_number(formulation.batch_weight_g, 0)} g")
    if not formulation.lines:
        st.info("Add ingredients from the library in the sidebar.")
    for line in formulation.lines:
        item = get_ingredient(line.id)
        c_name, c_pct, c_g, c_rm = st.columns([3, 2, 2, 1])
        c_name.markdown(f"**{ingredient_name(line.id)}**")
        c_name.caption(item.category if item else "Custom")
        c_pct.number_input(
            "%", min_value=0.0, step=0.001, format="%.3f",
            key=f"pct_{line.id}", on_change=_on_percent, args=(line.id,),
        )
        c_g.number_input(
            "g", min_value=0.0, step=0.01, format="%.2f",
            key=f"g_{line.id}", on_change=_on_grams, args=(line.id,),
        )
        c_rm.button("Remove", key=f"rm_{line.id}", on_click=_on_remove, args=(line.id,))

    b1, b2, b3 = st.columns(3)
    b1.button("Normalize to 100%", on_click=_on_rebalance, use_container_width=True)
    b2.button("Fill base automatically", on_click=_on_fill_base, use_container_width=True)
    b3.button("Clear", on_click=_on_clear, type="primary", use_container_width=True)

    st.markdown("---")
    st.subheader("Summary")
    m1, m2, m3, m4 = st.columns(4)
    m1.metric("Total %", f"{formulation.total_percent:.3f}%")
    m2.metric("Total ingredients (g)", format_number(formulation.total_grams, 2))
    m3.metric("Target batch (g)", format_number(formulation.batch_weight_g, 0))
    m4.metric("Suggested pH", SUGGESTED_PH[formulation.soap_type].split(" (")[0])
    warning = percent_total_warning(formulation.total_percent)
    if warning and formulation.lines:
        st.warning(warning)

with col_notes:
    notes_ui(formulation.soap_type)

# ------------------------------------------------------------------
# NaOH - cold process only
# ------------------------------------------------------------------
if formulation.soap_type == COLD_PROCESS:
    st.markdown("---")
    st.subheader("NaOH estimate")
    naoh = formulation.naoh_estimate(WATER_PCT)
    n1, n2, n3, n4 = st.columns(4)
    n1.metric("Total oils (g)", format_number(naoh["total_oil_g"], 2))
    n2.metric("NaOH required (g)", format_number(naoh["naoh_g"], 3))
    n3.metric("NaOH at 0% superfat (g)", format_number(naoh["naoh_unadjusted_g"], 3))
    n4.metric(f"Lye water (g, {format_number(WATER_PCT, 0)}% of oils)", format_number(naoh["lye_water_g"], 2))
    if not formulation.oil_lines():
        st.warning("No vegetable oils in the formulation; add oils from the library to saponify.")
    st.caption(NAOH_CAPTION)

# ------------------------------------------------------------------
# RECOMMENDATIONS & EXPORT
# ------------------------------------------------------------------
st.markdown("---")
col_tips, col_export = st.columns(2)
with col_tips:
    recommendations_ui()
with col_export:
    st.markdown("##### Export")
    payload = export_json(formulation, WATER_PCT)
    st.code(payload, language="json")
    st.download_button(
        "Download JSON",
        data=payload,
        file_name=export_filename(),
        mime="application/json",
    )

render_groq_panel(formulation, WATER_PCT)

st.markdown("---")
st.caption(f"**Legal & safety note:** {SAFETY_FOOTER}")
