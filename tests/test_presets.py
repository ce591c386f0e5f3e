from soapcalc.presets import (
    BASE_INGREDIENT_ID,
    CATALOG,
    CATALOG_BY_ID,
    DEFAULT_LINES,
    OIL_CATEGORY,
    catalog_by_category,
    get_ingredient,
)


def test_catalog_ids_unique():
    assert len(CATALOG_BY_ID) == len(CATALOG)


def test_only_vegetable_oils_carry_sap():
    for item in CATALOG:
        if item.category == OIL_CATEGORY:
            assert item.sap_naoh and 0.1 < item.sap_naoh < 0.3
        else:
            assert item.sap_naoh is None
    assert get_ingredient("coconutOil").sap_naoh == 0.190


def test_defaults_reference_catalog():
    assert get_ingredient(BASE_INGREDIENT_ID).category == "Bases"
    for ingredient_id, _ in DEFAULT_LINES:
        assert ingredient_id in CATALOG_BY_ID
    assert get_ingredient("missing") is None


def test_catalog_by_category_keeps_order():
    groups = catalog_by_category()
    assert list(groups)[:2] == ["Polvos", "Arcillas"]
    assert [item.id for item in groups[OIL_CATEGORY]][0] == "coconutOil"
    assert sum(len(items) for items in groups.values()) == len(CATALOG)
