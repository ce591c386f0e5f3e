from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, Optional

SoapType = Literal["glicerina", "saponificado"]

MELT_AND_POUR: SoapType = "glicerina"
COLD_PROCESS: SoapType = "saponificado"
SOAP_TYPES = (MELT_AND_POUR, COLD_PROCESS)

SOAP_TYPE_LABELS = {
    MELT_AND_POUR: "Glicerina (M&P)",
    COLD_PROCESS: "Saponificado (Cold process)",
}

# Defaults aligned with the starting formulation
DEFAULT_BATCH_WEIGHT = 800.0
DEFAULT_SUPERFAT = 5.0
DEFAULT_SOAP_TYPE: SoapType = MELT_AND_POUR
DEFAULT_LINE_PERCENT = 1.0
MIN_BATCH_WEIGHT = 1.0
LYE_WATER_PCT_OF_OILS = 38.0  # water as % of total oil weight

BASE_INGREDIENT_ID = "glycerinBase"
OIL_CATEGORY = "AceitesVegetales"

SUGGESTED_PH = {
    MELT_AND_POUR: "7.0 - 8.5 (ideal 7.0 - 7.5 para bebés)",
    COLD_PROCESS: "9.0 - 10.5 (normal en saponificado)",
}


@dataclass(frozen=True)
class IngredientDefinition:
    id: str
    name: str
    category: str
    default_percent: float
    sap_naoh: Optional[float] = None  # g NaOH per g oil


CATALOG = (
    # Polvos y plantas
    IngredientDefinition("charcoal", "Carbón activado (polvo)", "Polvos", 2),
    IngredientDefinition("ricePowder", "Polvo de arroz", "Polvos", 3),
    IngredientDefinition("maracuyaSeeds", "Pepas maracuyá (molidas)", "Polvos", 5),
    IngredientDefinition("manzanilla", "Manzanilla (polvo/infusión)", "Polvos", 2),
    # Arcillas
    IngredientDefinition("greenClay", "Arcilla verde", "Arcillas", 4),
    IngredientDefinition("whiteClay", "Arcilla blanca", "Arcillas", 4),
    IngredientDefinition("yellowClay", "Arcilla amarilla", "Arcillas", 4),
    IngredientDefinition("pinkClay", "Arcilla rosada", "Arcillas", 4),
    # Bases
    IngredientDefinition(BASE_INGREDIENT_ID, "Base de glicerina (vegetal)", "Bases", 85),
    # Surfactantes
    IngredientDefinition("decyl", "Decyl Glucoside", "Surfactantes", 2),
    # Aceites vegetales
    IngredientDefinition("coconutOil", "Aceite de coco", OIL_CATEGORY, 12, 0.190),
    IngredientDefinition("oliveOil", "Aceite de oliva", OIL_CATEGORY, 30, 0.134),
    IngredientDefinition("castorOil", "Aceite de ricino", OIL_CATEGORY, 5, 0.128),
    IngredientDefinition("sunflowerOil", "Aceite girasol", OIL_CATEGORY, 20, 0.136),
    IngredientDefinition("almondOil", "Aceite almendras", OIL_CATEGORY, 10, 0.136),
    # Hidrolatos
    IngredientDefinition("roseHydrosol", "Hidrolato de rosas", "Hidrolatos", 5),
    # Ceras
    IngredientDefinition("beeswax", "Cera de abejas", "Ceras", 2),
    # Aceites esenciales y aromas
    IngredientDefinition("mentaEO", "Aceite esencial de menta", "AceitesEsenciales", 0.5),
    IngredientDefinition("lavenderEO", "Aceite esencial de lavanda", "AceitesEsenciales", 0.6),
    IngredientDefinition("aromaCoco", "Aroma natural (coco)", "Aromas", 1.5),
    # Conservantes
    IngredientDefinition("sharomix", "Conservante (Sharomix)", "Conservantes", 0.3),
)

CATALOG_BY_ID = MappingProxyType({item.id: item for item in CATALOG})

# (id, percent) pairs for a fresh melt-and-pour batch
DEFAULT_LINES = (
    (BASE_INGREDIENT_ID, 85.0),
    ("decyl", 2.0),
    ("charcoal", 2.0),
    ("mentaEO", 0.5),
)


def get_ingredient(ingredient_id: str) -> Optional[IngredientDefinition]:
    return CATALOG_BY_ID.get(ingredient_id)


def catalog_by_category() -> dict:
    """Catalog entries grouped by category, in catalog order."""
    groups: dict = {}
    for item in CATALOG:
        groups.setdefault(item.category, []).append(item)
    return groups
