"""
Formulation values for the soap planner.

A Formulation is an immutable snapshot of what the user is editing: soap
type, batch weight, superfat and the ingredient lines. Every edit returns a
new Formulation; the Streamlit shell keeps the current one in session state.
"""

import logging
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Sequence, Tuple

from soapcalc.calculations import estimate_naoh, grams_to_percent, percent_to_grams
from soapcalc.errors import BaseFillNotSupported
from soapcalc.presets import (
    BASE_INGREDIENT_ID,
    COLD_PROCESS,
    DEFAULT_BATCH_WEIGHT,
    DEFAULT_LINE_PERCENT,
    DEFAULT_LINES,
    DEFAULT_SOAP_TYPE,
    DEFAULT_SUPERFAT,
    OIL_CATEGORY,
    SOAP_TYPES,
    SoapType,
    get_ingredient,
)
from soapcalc.utils import clamp_batch_weight, coerce_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormulationLine:
    id: str
    percent: float
    grams: float

    @classmethod
    def from_percent(cls, ingredient_id: str, percent: float, batch_weight_g: float) -> "FormulationLine":
        return cls(ingredient_id, percent, percent_to_grams(percent, batch_weight_g))

    @classmethod
    def from_grams(cls, ingredient_id: str, grams: float, batch_weight_g: float) -> "FormulationLine":
        return cls(ingredient_id, grams_to_percent(grams, batch_weight_g), grams)


Lines = Tuple[FormulationLine, ...]


def rebalance_to_hundred(lines: Sequence[FormulationLine], batch_weight_g: float) -> Lines:
    """Scale every percent so the total is 100, keeping relative proportions.

    Lines are returned unchanged when their percents sum to zero or less.
    """
    total = sum(line.percent for line in lines)
    if total <= 0:
        logger.debug("Rebalance skipped, percent total is %s", total)
        return tuple(lines)
    factor = 100.0 / total
    return tuple(
        FormulationLine.from_percent(line.id, line.percent * factor, batch_weight_g)
        for line in lines
    )


def fill_base_to_hundred(
    lines: Sequence[FormulationLine],
    batch_weight_g: float,
    base_id: str = BASE_INGREDIENT_ID,
) -> Lines:
    """Give the base ingredient whatever percent the other lines leave free.

    The base is appended when it is not in the formulation yet.
    """
    others = sum(line.percent for line in lines if line.id != base_id)
    base = FormulationLine.from_percent(base_id, max(0.0, 100.0 - others), batch_weight_g)
    if any(line.id == base_id for line in lines):
        return tuple(base if line.id == base_id else line for line in lines)
    return tuple(lines) + (base,)


@dataclass(frozen=True)
class Formulation:
    soap_type: SoapType = DEFAULT_SOAP_TYPE
    batch_weight_g: float = DEFAULT_BATCH_WEIGHT
    superfat_pct: float = DEFAULT_SUPERFAT
    lines: Lines = ()

    # --- lookups -------------------------------------------------------

    def ids(self) -> List[str]:
        return [line.id for line in self.lines]

    def get_line(self, ingredient_id: str) -> Optional[FormulationLine]:
        for line in self.lines:
            if line.id == ingredient_id:
                return line
        return None

    @property
    def is_cold_process(self) -> bool:
        return self.soap_type == COLD_PROCESS

    @property
    def total_percent(self) -> float:
        return sum(line.percent for line in self.lines)

    @property
    def total_grams(self) -> float:
        return sum(line.grams for line in self.lines)

    # --- edits ---------------------------------------------------------

    def _replace_line(self, new_line: FormulationLine) -> "Formulation":
        lines = tuple(new_line if line.id == new_line.id else line for line in self.lines)
        return replace(self, lines=lines)

    def add_ingredient(self, ingredient_id: str) -> "Formulation":
        item = get_ingredient(ingredient_id)
        if item is None:
            logger.debug("Unknown ingredient %r ignored", ingredient_id)
            return self
        if self.get_line(ingredient_id) is not None:
            logger.debug("Ingredient %r already in formulation", ingredient_id)
            return self
        percent = item.default_percent or DEFAULT_LINE_PERCENT
        line = FormulationLine.from_percent(ingredient_id, percent, self.batch_weight_g)
        return replace(self, lines=self.lines + (line,))

    def update_percent(self, ingredient_id: str, value) -> "Formulation":
        if self.get_line(ingredient_id) is None:
            return self
        line = FormulationLine.from_percent(ingredient_id, coerce_number(value), self.batch_weight_g)
        return self._replace_line(line)

    def update_grams(self, ingredient_id: str, value) -> "Formulation":
        if self.get_line(ingredient_id) is None:
            return self
        line = FormulationLine.from_grams(ingredient_id, coerce_number(value), self.batch_weight_g)
        return self._replace_line(line)

    def remove_ingredient(self, ingredient_id: str) -> "Formulation":
        return replace(self, lines=tuple(line for line in self.lines if line.id != ingredient_id))

    def clear(self) -> "Formulation":
        return replace(self, lines=())

    def with_batch_weight(self, value) -> "Formulation":
        batch = clamp_batch_weight(value)
        lines = tuple(FormulationLine.from_percent(line.id, line.percent, batch) for line in self.lines)
        return replace(self, batch_weight_g=batch, lines=lines)

    def with_soap_type(self, soap_type: SoapType) -> "Formulation":
        if soap_type not in SOAP_TYPES:
            raise ValueError(f"Unknown soap type: {soap_type}")
        return replace(self, soap_type=soap_type)

    def with_superfat(self, value) -> "Formulation":
        return replace(self, superfat_pct=coerce_number(value))

    def rebalanced(self) -> "Formulation":
        return replace(self, lines=rebalance_to_hundred(self.lines, self.batch_weight_g))

    def with_base_filled(self, base_id: str = BASE_INGREDIENT_ID) -> "Formulation":
        # Oils take part in the saponification; they are never rescaled silently.
        if self.is_cold_process:
            raise BaseFillNotSupported()
        return replace(self, lines=fill_base_to_hundred(self.lines, self.batch_weight_g, base_id))

    # --- derived -------------------------------------------------------

    def oil_lines(self) -> List[dict]:
        """Vegetable oil lines with their SAP values, for the NaOH estimate."""
        if not self.is_cold_process:
            return []
        oils = []
        for line in self.lines:
            item = get_ingredient(line.id)
            if item is None or item.category != OIL_CATEGORY:
                continue
            oils.append({"id": line.id, "percent": line.percent, "sap_naoh": item.sap_naoh})
        return oils

    def naoh_estimate(self, water_pct: Optional[float] = None) -> Optional[Dict[str, float]]:
        if not self.is_cold_process:
            return None
        return estimate_naoh(self.oil_lines(), self.batch_weight_g, self.superfat_pct, water_pct)


def default_formulation() -> Formulation:
    lines = tuple(
        FormulationLine.from_percent(ingredient_id, percent, DEFAULT_BATCH_WEIGHT)
        for ingredient_id, percent in DEFAULT_LINES
    )
    return Formulation(lines=lines)
